"""
Database layer for task storage.

Provides an SQLite store with soft-delete and offset pagination. Deleted
rows are kept but never returned by any query.
"""
import sqlite3
import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import Iterator, List, Optional, Union
from pathlib import Path

from taskmanager.core.errors import StoreError
from taskmanager.core.models import Task, TaskStatus
from taskmanager.core.config import get_db_path

logger = logging.getLogger(__name__)

TASK_COLUMNS = "id, title, description, status, due_date"


class TaskDatabase:
    """
    SQLite database for storing tasks.

    Every query is restricted to active (not soft-deleted) rows. Any
    sqlite3 error is re-raised as StoreError.
    """

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        """
        Initialize database connection.

        Parameters
        ----
        db_path : str or Path, optional
            Path to database file. If None, uses TASK_MANAGER_DB_PATH or the
            default OS-specific location.
        """
        if db_path is None:
            db_path = get_db_path()

        self.db_path = str(db_path)
        self.conn = None
        with self._store_errors("open database"):
            self._ensure_schema()

    def _ensure_schema(self):
        """Create database schema if it doesn't exist."""
        self.conn = sqlite3.connect(self.db_path)
        self.conn.row_factory = sqlite3.Row

        # WAL lets the CLI write while the web server reads
        cursor = self.conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.fetchone()

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS task (
                id TEXT PRIMARY KEY,
                title TEXT NOT NULL,
                description TEXT,
                status TEXT,
                due_date TEXT NOT NULL,
                is_deleted INTEGER NOT NULL DEFAULT 0,
                created_at TEXT
            )
        """)
        cursor.execute(
            "CREATE INDEX IF NOT EXISTS idx_task_active_due ON task(is_deleted, due_date)"
        )
        self.conn.commit()

    @contextmanager
    def _store_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except sqlite3.Error as e:
            logger.error("Database error during %s (%s): %s", action, self.db_path, e)
            raise StoreError(f"Database error during {action}") from e

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            status=TaskStatus.from_db(row["status"]),
            due_date=date.fromisoformat(row["due_date"]),
        )

    def insert_task(self, task_id: str, title: str, description: Optional[str],
                    status: Optional[str], due_date: date) -> None:
        """
        Insert a new active task.

        Parameters
        ----
        task_id : str
            Freshly generated task id
        title : str
            Task title
        description : str, optional
            Free-form description
        status : str, optional
            Canonical status name, or None
        due_date : date
            Due date
        """
        with self._store_errors("insert"):
            self.conn.execute(
                """
                INSERT INTO task (id, title, description, status, due_date, is_deleted, created_at)
                VALUES (?, ?, ?, ?, ?, 0, ?)
                """,
                (task_id, title, description, status, due_date.isoformat(),
                 datetime.now().isoformat()),
            )
            self.conn.commit()

    def find_active_by_id(self, task_id: str) -> Optional[Task]:
        """
        Get an active task by id.

        Returns
        ----
        Task
            The task, or None if it does not exist or was deleted
        """
        with self._store_errors("select"):
            cursor = self.conn.execute(
                f"SELECT {TASK_COLUMNS} FROM task WHERE id = ? AND is_deleted = 0",
                (task_id,),
            )
            row = cursor.fetchone()
        if not row:
            return None
        return self._row_to_task(row)

    def update_active_by_id(self, task_id: str, title: str, description: Optional[str],
                            status: Optional[str], due_date: date) -> int:
        """
        Overwrite the mutable fields of an active task.

        Returns
        ----
        int
            Number of rows updated (0 if absent or deleted)
        """
        with self._store_errors("update"):
            cursor = self.conn.execute(
                """
                UPDATE task SET title = ?, description = ?, status = ?, due_date = ?
                WHERE id = ? AND is_deleted = 0
                """,
                (title, description, status, due_date.isoformat(), task_id),
            )
            self.conn.commit()
            return cursor.rowcount

    def soft_delete_active_by_id(self, task_id: str) -> int:
        """
        Mark an active task as deleted.

        Returns
        ----
        int
            Number of rows deleted (0 if absent or already deleted)
        """
        with self._store_errors("delete"):
            cursor = self.conn.execute(
                "UPDATE task SET is_deleted = 1 WHERE id = ? AND is_deleted = 0",
                (task_id,),
            )
            self.conn.commit()
            return cursor.rowcount

    def count_active(self) -> int:
        """Count tasks that are not deleted."""
        with self._store_errors("count"):
            cursor = self.conn.execute("SELECT COUNT(*) FROM task WHERE is_deleted = 0")
            return cursor.fetchone()[0]

    def list_active_page(self, limit: int, offset: int) -> List[Task]:
        """
        List active tasks ordered by due date.

        Ties on due date come back in insertion order (created_at, then rowid).

        Parameters
        ----
        limit : int
            Maximum number of results
        offset : int
            Offset for pagination

        Returns
        ----
        List[Task]
            Tasks, soonest due first
        """
        with self._store_errors("list"):
            cursor = self.conn.execute(
                f"""
                SELECT {TASK_COLUMNS} FROM task
                WHERE is_deleted = 0
                ORDER BY due_date ASC, created_at ASC, rowid ASC
                LIMIT ? OFFSET ?
                """,
                (limit, offset),
            )
            return [self._row_to_task(row) for row in cursor.fetchall()]

    def close(self):
        """Close database connection."""
        if self.conn:
            self.conn.close()
            self.conn = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
