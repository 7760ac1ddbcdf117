from sqlalchemy import Column, Integer, String

from .database import Base

# Fixed marker recorded on every inserted schedule
INSERTION_MARKER = 1


class UserMasterSchedule(Base):
    __tablename__ = "SMP_USER_MASTER_SCHEDULES"

    id = Column("USER_SCHD_ID", Integer, primary_key=True, autoincrement=True)
    scheduler_type = Column("SCHEDULER_TYPE", String(100), nullable=True)
    scheduler_details = Column("SCHEDULER_DETAILS", String(255), nullable=True)
    number_of_days = Column("NUMBER_OF_DAYS", Integer, nullable=True)  # < 7 enforced on update only
    status = Column("STATUS", String(50), nullable=True)
    vendor_id = Column("VENDOR_ID", String(50), nullable=False)  # External vendor reference
    insert_id = Column("INSERT_ID", Integer, nullable=False, default=INSERTION_MARKER)
