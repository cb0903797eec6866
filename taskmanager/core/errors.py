"""
Error taxonomy for task operations.

Every failure the service reports carries an ErrorKind tag, a message and
the HTTP status the web layer answers with.
"""
from enum import Enum
from typing import Any, Dict


class ErrorKind(str, Enum):
    """Error kinds, valued by the code sent to API clients."""
    INVALID_TITLE = "INVALID_TITLE"
    INVALID_DATE = "INVALID_DATE"
    INVALID_STATUS = "INVALID_STATUS"
    INVALID_PAGE_OR_SIZE = "INVALID_PAGE_OR_SIZE"
    TASK_NOT_FOUND = "TASK_NOT_FOUND"
    UNCLASSIFIED = "INTERNAL_ERROR"


class TaskError(Exception):
    """Base class for all task service errors."""
    kind: ErrorKind = ErrorKind.UNCLASSIFIED
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON error body."""
        return {
            "error": self.kind.value,
            "message": self.message,
        }


class InvalidTitleError(TaskError):
    kind = ErrorKind.INVALID_TITLE
    status_code = 400


class InvalidDateError(TaskError):
    kind = ErrorKind.INVALID_DATE
    status_code = 400


class InvalidStatusError(TaskError):
    kind = ErrorKind.INVALID_STATUS
    status_code = 400


class InvalidPageOrSizeError(TaskError):
    kind = ErrorKind.INVALID_PAGE_OR_SIZE
    status_code = 400


class TaskNotFoundError(TaskError):
    kind = ErrorKind.TASK_NOT_FOUND
    status_code = 404

    def __init__(self, task_id: str):
        super().__init__(f"Task not found with id: {task_id}")
        self.task_id = task_id


class StoreError(TaskError):
    """
    The database could not serve the request.

    Raised instead of returning an empty result so that an unreachable
    store is never reported as a missing task.
    """
    kind = ErrorKind.UNCLASSIFIED
    status_code = 500
