from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.domain.schedules.schemas import NUMBER_OF_DAYS_RULE, ScheduleCreate, ScheduleResponse
from app.domain.schedules.service import ScheduleService
from app.errors import ScheduleNotFoundError, ScheduleStorageError, ScheduleValidationError
from app.models import INSERTION_MARKER, UserMasterSchedule


def _driver_error():
    return OperationalError("UPDATE SMP_USER_MASTER_SCHEDULES", {}, Exception("Lost connection to MySQL server"))


@pytest.fixture
def db():
    return MagicMock()


def test_invalid_update_never_queries(db):
    service = ScheduleService(db)

    with pytest.raises(ScheduleValidationError) as exc_info:
        service.update_number_of_days(1, {"NUMBER_OF_DAYS": 8})

    assert exc_info.value.message == NUMBER_OF_DAYS_RULE
    db.query.assert_not_called()
    db.commit.assert_not_called()


def test_update_with_no_matching_row_is_not_found(db):
    db.query.return_value.filter.return_value.update.return_value = 0
    service = ScheduleService(db)

    with pytest.raises(ScheduleNotFoundError):
        service.update_number_of_days(5, {"NUMBER_OF_DAYS": 1})


def test_update_storage_error_rolls_back_and_hides_detail(db):
    db.commit.side_effect = _driver_error()
    service = ScheduleService(db)

    with pytest.raises(ScheduleStorageError) as exc_info:
        service.update_number_of_days(5, {"NUMBER_OF_DAYS": 1})

    db.rollback.assert_called_once()
    assert exc_info.value.to_dict() == {"error": "Error updating schedule", "code": "storage_error"}
    assert "Lost connection" not in exc_info.value.message


def test_delete_storage_error(db):
    db.query.return_value.filter.return_value.delete.side_effect = _driver_error()
    service = ScheduleService(db)

    with pytest.raises(ScheduleStorageError) as exc_info:
        service.delete_schedule(5)

    db.rollback.assert_called_once()
    assert exc_info.value.message == "Error deleting schedule"


def test_create_storage_error_is_logged(db, caplog):
    db.flush.side_effect = _driver_error()
    service = ScheduleService(db)
    data = ScheduleCreate(SCHEDULER_TYPE="daily", SCHEDULER_DETAILS="d", VENDOR_ID="V1")

    with pytest.raises(ScheduleStorageError):
        service.create_schedule(data)

    assert "Lost connection to MySQL server" in caplog.text
    db.rollback.assert_called_once()


def test_schedule_response_reads_orm_row():
    schedule = UserMasterSchedule(
        id=7,
        scheduler_type="daily",
        scheduler_details="d",
        number_of_days=None,
        status="active",
        vendor_id="V1",
        insert_id=INSERTION_MARKER,
    )

    assert ScheduleResponse.model_validate(schedule).model_dump() == {
        "USER_SCHD_ID": 7,
        "SCHEDULER_TYPE": "daily",
        "SCHEDULER_DETAILS": "d",
        "NUMBER_OF_DAYS": None,
        "STATUS": "active",
        "VENDOR_ID": "V1",
        "INSERT_ID": INSERTION_MARKER,
    }
