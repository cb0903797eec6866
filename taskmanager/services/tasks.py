"""
Task lifecycle service.

Validates writes, assigns ids, and turns empty store results into
TaskNotFoundError. All validation runs before the database is touched.
"""
import logging
import uuid
from datetime import date
from typing import Any, Callable, Optional

from taskmanager.core.db import TaskDatabase
from taskmanager.core.errors import TaskNotFoundError
from taskmanager.core.models import Task, TaskPage
from taskmanager.core.validation import (
    validate_title, require_due_date, parse_due_date, check_future, validate_status,
    normalize_description
)
from taskmanager.services.pagination import paginate

logger = logging.getLogger(__name__)


def generate_task_id() -> str:
    """Return a random 128-bit id as text."""
    return str(uuid.uuid4())


class TaskService:
    """
    Create, read, update, delete and list tasks.

    Holds no state of its own; everything lives in the database.
    """

    def __init__(self, db: TaskDatabase,
                 id_factory: Optional[Callable[[], str]] = None,
                 today: Optional[Callable[[], date]] = None):
        """
        Initialize task service.

        Parameters
        ----
        db : TaskDatabase
            Task store
        id_factory : callable, optional
            Returns a fresh task id (default: random UUID)
        today : callable, optional
            Returns the current date due dates must exceed (default: date.today)
        """
        self.db = db
        self.id_factory = id_factory or generate_task_id
        self.today = today or date.today

    def create_task(self, title: Any, description: Optional[str] = None,
                    status: Any = None, due_date: Any = None) -> Task:
        """
        Create a task and return it as stored.

        Status is optional; when given it must be a known status.

        Raises
        ----
        InvalidTitleError, InvalidDateError, InvalidStatusError
            If a field is rejected (nothing is written)
        """
        validate_title(title)
        raw_due = require_due_date(due_date)
        task_status = validate_status(status, required=False)
        due = check_future(parse_due_date(raw_due), self.today())
        description = normalize_description(description)

        task_id = self.id_factory()
        self.db.insert_task(
            task_id,
            title,
            description,
            task_status.value if task_status else None,
            due,
        )
        logger.info("Created task %s", task_id)

        return self.get_task(task_id)

    def get_task(self, task_id: str) -> Task:
        """
        Get an active task.

        Raises
        ----
        TaskNotFoundError
            If the task does not exist or was deleted
        """
        task = self.db.find_active_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def update_task(self, task_id: str, title: Any, description: Optional[str],
                    status: Any, due_date: Any) -> Task:
        """
        Replace the title, description, status and due date of a task.

        Checks run in this order: title, due date present, status, due date
        parses and is in the future.

        Raises
        ----
        InvalidTitleError, InvalidDateError, InvalidStatusError
            If a field is rejected (nothing is written)
        TaskNotFoundError
            If the task does not exist or was deleted
        """
        validate_title(title, strip=True)
        raw_due = require_due_date(due_date)
        task_status = validate_status(status, required=True)
        due = check_future(parse_due_date(raw_due), self.today())
        description = normalize_description(description)

        updated = self.db.update_active_by_id(task_id, title, description, task_status.value, due)
        if not updated:
            raise TaskNotFoundError(task_id)
        logger.info("Updated task %s", task_id)

        return self.get_task(task_id)

    def delete_task(self, task_id: str) -> None:
        """
        Soft-delete a task.

        Deleting twice fails the second time.

        Raises
        ----
        TaskNotFoundError
            If the task does not exist or was already deleted
        """
        deleted = self.db.soft_delete_active_by_id(task_id)
        if not deleted:
            raise TaskNotFoundError(task_id)
        logger.info("Deleted task %s", task_id)

    def list_tasks(self, page: int, size: int) -> TaskPage:
        """List one page of active tasks, soonest due first."""
        return paginate(self.db, page, size)
