"""Schedule service - Business rules and error translation for schedules"""

import logging
from typing import Any

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...errors import ScheduleNotFoundError, ScheduleStorageError, ScheduleValidationError
from ...models import UserMasterSchedule
from .repository import ScheduleRepository
from .schemas import NUMBER_OF_DAYS_RULE, ScheduleCreate, ScheduleDaysUpdate

logger = logging.getLogger(__name__)


class ScheduleService:
    """Service layer for schedule operations"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ScheduleRepository()

    def _storage_error(self, action: str, message: str, exc: SQLAlchemyError) -> ScheduleStorageError:
        # Driver detail stays in the server log
        self.db.rollback()
        logger.error(f"❌ Error {action}: {exc}", exc_info=True)
        return ScheduleStorageError(message)

    def get_schedules(self) -> list[UserMasterSchedule]:
        try:
            return self.repo.get_schedules(self.db)
        except SQLAlchemyError as e:
            raise self._storage_error("fetching schedules", "Failed to fetch schedules", e) from e

    def create_schedule(self, data: ScheduleCreate) -> int:
        """Insert a schedule and return the new ID"""
        logger.info(f"📥 Received schedule for insert: {data.model_dump()}")

        schedule_data = {
            "scheduler_type": data.SCHEDULER_TYPE,
            "scheduler_details": data.SCHEDULER_DETAILS,
            "number_of_days": data.NUMBER_OF_DAYS,
            "status": data.STATUS,
            "vendor_id": data.VENDOR_ID,
        }

        try:
            schedule_id = self.repo.create_schedule(self.db, **schedule_data)
        except SQLAlchemyError as e:
            raise self._storage_error("adding schedule", "Error adding schedule", e) from e

        logger.info(f"✅ Schedule {schedule_id} added for vendor {data.VENDOR_ID}")
        return schedule_id

    def update_number_of_days(self, schedule_id: int, payload: Any) -> None:
        """
        Validate the raw update body and set NUMBER_OF_DAYS.

        The body is validated before any statement runs; fields other than
        NUMBER_OF_DAYS are ignored.
        """
        try:
            data = ScheduleDaysUpdate.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"⚠️ Rejected update for schedule {schedule_id}: {payload!r}")
            raise ScheduleValidationError(NUMBER_OF_DAYS_RULE) from e

        logger.info(f"📥 Received update for schedule {schedule_id}: NUMBER_OF_DAYS={data.NUMBER_OF_DAYS}")

        try:
            matched = self.repo.update_number_of_days(self.db, schedule_id, data.NUMBER_OF_DAYS)
        except SQLAlchemyError as e:
            raise self._storage_error("updating schedule", "Error updating schedule", e) from e

        if matched == 0:
            logger.info(f"Schedule {schedule_id} not found for update")
            raise ScheduleNotFoundError()

    def delete_schedule(self, schedule_id: int) -> None:
        try:
            deleted = self.repo.delete_schedule(self.db, schedule_id)
        except SQLAlchemyError as e:
            raise self._storage_error("deleting schedule", "Error deleting schedule", e) from e

        if deleted == 0:
            logger.info(f"Schedule {schedule_id} not found for delete")
            raise ScheduleNotFoundError()

        logger.info(f"🗑️ Schedule {schedule_id} deleted")
