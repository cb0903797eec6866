"""
Tests for the task lifecycle service.
"""
import itertools
import pytest
from datetime import date, timedelta
from unittest.mock import MagicMock

from taskmanager.core.db import TaskDatabase
from taskmanager.core.errors import (
    InvalidTitleError, InvalidDateError, InvalidStatusError, InvalidPageOrSizeError,
    TaskNotFoundError, StoreError
)
from taskmanager.core.models import TaskStatus
from taskmanager.services.tasks import TaskService, generate_task_id

TODAY = date(2026, 3, 10)
TOMORROW = (TODAY + timedelta(days=1)).isoformat()
NEXT_MONTH = (TODAY + timedelta(days=30)).isoformat()


@pytest.fixture
def db(tmp_path):
    """Create a temporary database for testing."""
    database = TaskDatabase(tmp_path / "tasks.db")
    yield database
    database.close()


@pytest.fixture
def service(db):
    """Service with a fixed clock and predictable ids."""
    counter = itertools.count(1)
    return TaskService(db, id_factory=lambda: f"task-{next(counter)}", today=lambda: TODAY)


class TestCreateTask:
    """Tests for create_task."""

    def test_create_returns_stored_task(self, service):
        task = service.create_task("Write report", "Quarterly", "pending", TOMORROW)

        assert task.id == "task-1"
        assert task.title == "Write report"
        assert task.description == "Quarterly"
        assert task.status is TaskStatus.PENDING
        assert task.due_date == TODAY + timedelta(days=1)

    def test_create_without_status(self, service):
        task = service.create_task("T", due_date=TOMORROW)
        assert task.status is None
        assert task.to_dict()["status"] is None

    def test_ids_are_unique(self, db):
        service = TaskService(db, today=lambda: TODAY)
        ids = {service.create_task(f"Task {i}", due_date=TOMORROW).id for i in range(20)}
        assert len(ids) == 20
        assert all(ids)

    def test_default_id_is_uuid_text(self):
        task_id = generate_task_id()
        assert len(task_id) == 36
        assert task_id != generate_task_id()

    @pytest.mark.parametrize("title", [None, ""])
    def test_missing_title(self, service, title):
        with pytest.raises(InvalidTitleError):
            service.create_task(title, due_date=TOMORROW)

    def test_past_date(self, service):
        with pytest.raises(InvalidDateError):
            service.create_task("T", due_date="2020-01-01")

    @pytest.mark.parametrize("due", ["20300101", "2030-W01-1"])
    def test_only_calendar_dates_accepted(self, due):
        store = MagicMock()
        service = TaskService(store, today=lambda: TODAY)

        with pytest.raises(InvalidDateError):
            service.create_task("T", due_date=due)
        store.insert_task.assert_not_called()

    def test_today_rejected(self, service):
        with pytest.raises(InvalidDateError):
            service.create_task("T", due_date=TODAY.isoformat())

    def test_invalid_status(self, service):
        with pytest.raises(InvalidStatusError):
            service.create_task("T", status="someday", due_date=TOMORROW)

    def test_title_checked_before_date(self, service):
        with pytest.raises(InvalidTitleError):
            service.create_task("", due_date="2020-01-01")

    def test_status_checked_before_date_format(self, service):
        with pytest.raises(InvalidStatusError):
            service.create_task("T", status="bogus", due_date="not-a-date")

    @pytest.mark.parametrize("kwargs", [
        {"title": "", "due_date": TOMORROW},
        {"title": "T", "due_date": None},
        {"title": "T", "due_date": "2020-01-01"},
        {"title": "T", "status": "bogus", "due_date": TOMORROW},
    ])
    def test_failed_validation_does_not_touch_store(self, kwargs):
        store = MagicMock()
        service = TaskService(store, today=lambda: TODAY)

        with pytest.raises((InvalidTitleError, InvalidDateError, InvalidStatusError)):
            service.create_task(**kwargs)
        assert store.method_calls == []


class TestGetTask:
    """Tests for get_task."""

    def test_get_existing(self, service):
        created = service.create_task("T", due_date=TOMORROW)
        assert service.get_task(created.id) == created

    def test_get_unknown(self, service):
        with pytest.raises(TaskNotFoundError) as exc_info:
            service.get_task("non-existent-id")
        assert exc_info.value.message == "Task not found with id: non-existent-id"
        assert exc_info.value.status_code == 404

    def test_store_failure_is_not_not_found(self):
        store = MagicMock()
        store.find_active_by_id.side_effect = StoreError("Database error during select")

        with pytest.raises(StoreError):
            TaskService(store).get_task("task-1")


class TestUpdateTask:
    """Tests for update_task."""

    def test_update_round_trip(self, service):
        created = service.create_task("Old", "old desc", "PENDING", TOMORROW)

        updated = service.update_task(created.id, "New", "new desc", "in_progress", NEXT_MONTH)
        fetched = service.get_task(created.id)

        assert updated == fetched
        assert fetched.id == created.id
        assert fetched.title == "New"
        assert fetched.description == "new desc"
        assert fetched.status is TaskStatus.IN_PROGRESS
        assert fetched.due_date.isoformat() == NEXT_MONTH

    def test_lowercase_status_normalized(self, service):
        created = service.create_task("T", due_date=TOMORROW)
        updated = service.update_task(created.id, "T", None, "pending", TOMORROW)
        assert updated.to_dict()["status"] == "PENDING"

    @pytest.mark.parametrize("status", ["invalid_status", "INVALID_STATUS", "Invalid_Status"])
    def test_invalid_status(self, service, status):
        created = service.create_task("T", due_date=TOMORROW)
        with pytest.raises(InvalidStatusError):
            service.update_task(created.id, "T", None, status, TOMORROW)

    @pytest.mark.parametrize("status", [None, ""])
    def test_status_required(self, service, status):
        created = service.create_task("T", due_date=TOMORROW)
        with pytest.raises(InvalidStatusError) as exc_info:
            service.update_task(created.id, "T", None, status, TOMORROW)
        assert exc_info.value.message == "Status is required"

    def test_blank_title(self, service):
        created = service.create_task("T", due_date=TOMORROW)
        with pytest.raises(InvalidTitleError):
            service.update_task(created.id, "   ", None, "DONE", TOMORROW)

    def test_past_date(self, service):
        created = service.create_task("T", due_date=TOMORROW)
        with pytest.raises(InvalidDateError):
            service.update_task(created.id, "T", None, "DONE", "2020-01-01")

    def test_validation_order(self, service):
        """Title, then date presence, then status, then date value."""
        with pytest.raises(InvalidTitleError):
            service.update_task("x", "", None, None, None)
        with pytest.raises(InvalidDateError) as exc_info:
            service.update_task("x", "T", None, None, None)
        assert exc_info.value.message == "Due date is required"
        with pytest.raises(InvalidStatusError):
            service.update_task("x", "T", None, None, "2020-01-01")
        with pytest.raises(InvalidDateError) as exc_info:
            service.update_task("x", "T", None, "DONE", "2020-01-01")
        assert exc_info.value.message == "Due date must be in the future"

    def test_update_unknown(self, service):
        with pytest.raises(TaskNotFoundError):
            service.update_task("non-existent-id", "T", None, "DONE", TOMORROW)

    def test_update_deleted(self, service):
        created = service.create_task("T", due_date=TOMORROW)
        service.delete_task(created.id)
        with pytest.raises(TaskNotFoundError):
            service.update_task(created.id, "T", None, "DONE", TOMORROW)

    def test_invalid_update_does_not_touch_store(self):
        store = MagicMock()
        service = TaskService(store, today=lambda: TODAY)

        with pytest.raises(InvalidStatusError):
            service.update_task("task-1", "T", None, "bogus", TOMORROW)
        assert store.method_calls == []


class TestDeleteTask:
    """Tests for delete_task."""

    def test_delete_hides_task(self, service):
        created = service.create_task("T", due_date=TOMORROW)
        service.delete_task(created.id)

        with pytest.raises(TaskNotFoundError):
            service.get_task(created.id)
        page = service.list_tasks(0, 10)
        assert created.id not in [t.id for t in page.items]

    def test_delete_is_not_idempotent(self, service):
        created = service.create_task("T", due_date=TOMORROW)
        service.delete_task(created.id)

        with pytest.raises(TaskNotFoundError):
            service.delete_task(created.id)

    def test_delete_unknown(self, service):
        with pytest.raises(TaskNotFoundError):
            service.delete_task("non-existent-id")

    def test_id_not_reused_after_delete(self, db):
        service = TaskService(db, today=lambda: TODAY)
        first = service.create_task("T", due_date=TOMORROW)
        service.delete_task(first.id)
        second = service.create_task("T", due_date=TOMORROW)
        assert second.id != first.id


class TestListTasks:
    """Tests for list_tasks."""

    def test_invalid_page(self, service):
        with pytest.raises(InvalidPageOrSizeError):
            service.list_tasks(-1, 5)

    def test_previously_valid_task_still_listed(self, db):
        """Due dates are only checked on write."""
        service = TaskService(db, today=lambda: TODAY)
        created = service.create_task("T", due_date=TOMORROW)

        later = TaskService(db, today=lambda: TODAY + timedelta(days=10))
        assert later.get_task(created.id) == created
        assert later.list_tasks(0, 10).total == 1
