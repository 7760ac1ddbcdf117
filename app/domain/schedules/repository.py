"""Schedule repository - Database operations for schedules"""

from sqlalchemy.orm import Session

from ...models import INSERTION_MARKER, UserMasterSchedule


class ScheduleRepository:
    """Repository for schedule database operations, one statement per call"""

    @staticmethod
    def get_schedules(db: Session) -> list[UserMasterSchedule]:
        """Get all schedules in storage order"""
        return db.query(UserMasterSchedule).all()

    @staticmethod
    def create_schedule(db: Session, **schedule_data) -> int:
        """Insert a schedule and return its store-assigned ID"""
        schedule = UserMasterSchedule(insert_id=INSERTION_MARKER, **schedule_data)
        db.add(schedule)
        db.flush()
        schedule_id = schedule.id
        db.commit()
        return schedule_id

    @staticmethod
    def update_number_of_days(db: Session, schedule_id: int, number_of_days: int) -> int:
        """Set NUMBER_OF_DAYS on one schedule. Returns the matched row count"""
        matched = (
            db.query(UserMasterSchedule)
            .filter(UserMasterSchedule.id == schedule_id)
            .update({UserMasterSchedule.number_of_days: number_of_days}, synchronize_session=False)
        )
        db.commit()
        return matched

    @staticmethod
    def delete_schedule(db: Session, schedule_id: int) -> int:
        """Delete one schedule. Returns the deleted row count"""
        deleted = (
            db.query(UserMasterSchedule)
            .filter(UserMasterSchedule.id == schedule_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        return deleted
