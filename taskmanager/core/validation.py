"""
Field validation for task writes and listing parameters.

Pure functions: each returns the normalized value or raises the matching
TaskError subclass.
"""
import json
import re
from datetime import date
from typing import Any, Optional

from taskmanager.core.errors import (
    InvalidTitleError, InvalidDateError, InvalidStatusError, InvalidPageOrSizeError
)
from taskmanager.core.models import TaskStatus

VALID_STATUSES = ", ".join(status.value for status in TaskStatus)

ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def validate_title(title: Any, strip: bool = False) -> str:
    """
    Check that a title is present.

    Parameters
    ----
    title : Any
        Raw title from the request
    strip : bool
        Reject titles that are only whitespace (used on update)

    Returns
    ----
    str
        The title, unchanged
    """
    if not isinstance(title, str) or not title:
        raise InvalidTitleError("Title is required")
    if strip and not title.strip():
        raise InvalidTitleError("Title is required")
    return title


def require_due_date(raw: Any) -> str:
    """Fail if the due date is missing or empty."""
    if raw is None or raw == "":
        raise InvalidDateError("Due date is required")
    if not isinstance(raw, str):
        raise InvalidDateError("Due date must be a date in YYYY-MM-DD format")
    return raw


def parse_due_date(raw: str) -> date:
    """Parse an ISO calendar date (YYYY-MM-DD)."""
    if not ISO_DATE_PATTERN.fullmatch(raw):
        raise InvalidDateError("Due date must be a date in YYYY-MM-DD format")
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise InvalidDateError("Due date must be a date in YYYY-MM-DD format") from None


def check_future(due_date: date, today: date) -> date:
    """Fail unless due_date is strictly after today."""
    if due_date <= today:
        raise InvalidDateError("Due date must be in the future")
    return due_date


def validate_due_date(raw: Any, today: date) -> date:
    """
    Run every due date check in order.

    Parameters
    ----
    raw : Any
        Raw date string from the request
    today : date
        Current date the due date must be later than

    Returns
    ----
    date
        Parsed due date
    """
    return check_future(parse_due_date(require_due_date(raw)), today)


def validate_status(raw: Any, required: bool) -> Optional[TaskStatus]:
    """
    Check a status against the closed set of task states.

    Matching is case-insensitive; the canonical enum member is returned.
    A missing status is accepted (as None) unless required.
    """
    if raw is None or raw == "":
        if required:
            raise InvalidStatusError("Status is required")
        return None
    if isinstance(raw, str):
        try:
            return TaskStatus(raw.upper())
        except ValueError:
            pass
    raise InvalidStatusError(f"Status must be one of {VALID_STATUSES}")


def validate_page_params(page: int, size: int) -> None:
    """Fail if page is negative or size is not positive."""
    if page < 0 or size <= 0:
        raise InvalidPageOrSizeError("Page must be >= 0 and size must be > 0")


def normalize_description(raw: Any) -> Optional[str]:
    """
    Description is free text; scalars are stored as their text form.

    Objects and arrays are stored as JSON text.
    """
    if raw is None or isinstance(raw, str):
        return raw
    if isinstance(raw, (dict, list)):
        return json.dumps(raw, ensure_ascii=False)
    return str(raw)
