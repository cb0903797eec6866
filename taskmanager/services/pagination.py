"""
Offset pagination over active tasks.
"""
import logging

from taskmanager.core.db import TaskDatabase
from taskmanager.core.models import TaskPage
from taskmanager.core.validation import validate_page_params

logger = logging.getLogger(__name__)


def page_offset(page: int, size: int) -> int:
    """Index of the first item on a zero-based page."""
    return page * size


def has_more(offset: int, size: int, total: int) -> bool:
    """Whether any active task lies past the end of this page."""
    return (offset + size) < total


def paginate(db: TaskDatabase, page: int, size: int) -> TaskPage:
    """
    Build one page of active tasks ordered by due date.

    Parameters
    ----
    db : TaskDatabase
        Task store
    page : int
        Zero-based page number
    size : int
        Page size

    Returns
    ----
    TaskPage
        The page; items may be empty when page is past the end
    """
    validate_page_params(page, size)

    offset = page_offset(page, size)
    total = db.count_active()
    if offset >= total:
        items = []
    else:
        # limit never exceeds the rows left, so it fits an SQLite integer
        items = db.list_active_page(min(size, total - offset), offset)

    logger.debug("Listed page %d (size %d): %d of %d tasks", page, size, len(items), total)
    return TaskPage(
        items=items,
        page=page,
        size=size,
        total=total,
        has_more=has_more(offset, size, total),
    )
