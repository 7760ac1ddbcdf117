"""Error taxonomy for the schedules API.

Every error that reaches a client carries an HTTP status, a stable machine
readable ``code`` and a human readable message. Driver and database detail
never goes into the message; it is logged where the error is raised.
"""


class ScheduleAPIError(Exception):
    """Base class for errors rendered as ``{"error": ..., "code": ...}``"""

    status_code = 500
    code = "internal_error"
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message, "code": self.code}


class ScheduleValidationError(ScheduleAPIError):
    status_code = 400
    code = "validation_error"
    message = "Invalid request"


class ScheduleNotFoundError(ScheduleAPIError):
    status_code = 404
    code = "not_found"
    message = "Schedule not found"


class ScheduleStorageError(ScheduleAPIError):
    status_code = 500
    code = "storage_error"
    message = "Database error"


class DatabaseUnavailableError(RuntimeError):
    """Raised at startup when the database cannot be reached"""
