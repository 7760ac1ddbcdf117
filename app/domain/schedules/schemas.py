"""Schedule domain schemas - Pydantic models for validation"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

NUMBER_OF_DAYS_LIMIT = 7
NUMBER_OF_DAYS_RULE = "Number of Days must be a valid number and less than 7."


class ScheduleCreate(BaseModel):
    """
    Schema for creating a schedule.

    NUMBER_OF_DAYS and STATUS are optional: omitted or null values are stored
    as NULL, and so is an empty STATUS string. NUMBER_OF_DAYS has no range
    check here; the limit applies to updates only.
    """

    SCHEDULER_TYPE: str
    SCHEDULER_DETAILS: str
    NUMBER_OF_DAYS: Optional[int] = None
    STATUS: Optional[str] = None
    VENDOR_ID: Union[str, int]

    @field_validator("STATUS")
    @classmethod
    def empty_status_is_null(cls, v):
        return v or None

    @field_validator("VENDOR_ID")
    @classmethod
    def vendor_id_as_string(cls, v):
        return str(v)


class ScheduleDaysUpdate(BaseModel):
    """Schema for updating a schedule - only NUMBER_OF_DAYS is read"""

    NUMBER_OF_DAYS: int

    @field_validator("NUMBER_OF_DAYS", mode="before")
    @classmethod
    def reject_booleans(cls, v):
        if isinstance(v, bool):
            raise ValueError(NUMBER_OF_DAYS_RULE)
        return v

    @field_validator("NUMBER_OF_DAYS")
    @classmethod
    def below_limit(cls, v):
        if v >= NUMBER_OF_DAYS_LIMIT:
            raise ValueError(NUMBER_OF_DAYS_RULE)
        return v


class ScheduleResponse(BaseModel):
    """Schema for a stored schedule, keyed by column name and read from the ORM row"""

    model_config = ConfigDict(from_attributes=True)

    USER_SCHD_ID: int = Field(validation_alias="id")
    SCHEDULER_TYPE: Optional[str] = Field(validation_alias="scheduler_type")
    SCHEDULER_DETAILS: Optional[str] = Field(validation_alias="scheduler_details")
    NUMBER_OF_DAYS: Optional[int] = Field(validation_alias="number_of_days")
    STATUS: Optional[str] = Field(validation_alias="status")
    VENDOR_ID: str = Field(validation_alias="vendor_id")
    INSERT_ID: int = Field(validation_alias="insert_id")


class ScheduleCreatedResponse(BaseModel):
    message: str
    id: int


class MessageResponse(BaseModel):
    message: str
