"""
CLI context and configuration management.

Provides shared context for Click commands with database lifecycle management.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

from taskmanager.core.db import TaskDatabase
from taskmanager.core.config import get_db_path

logger = logging.getLogger(__name__)


@dataclass
class CLIContext:
    """
    Shared context for CLI commands.

    Attributes:
        verbose: Enable verbose logging output
        db_path: Optional path to database file (uses TASK_MANAGER_DB_PATH
            or the OS-specific default if None)
        _db: Internal database connection (lazy-initialized)
    """
    verbose: bool = False
    db_path: Optional[Path] = None
    _db: Optional[TaskDatabase] = field(default=None, repr=False, init=False)

    def get_db(self) -> TaskDatabase:
        """
        Get or create database connection (lazy initialization).

        Returns:
            TaskDatabase instance
        """
        if self._db is None:
            path = self.db_path or get_db_path()
            if self.verbose:
                logger.info("Opening database: %s", path)
            self._db = TaskDatabase(path)
        return self._db

    def close(self):
        """
        Clean up resources (close database connection).

        Called automatically via Click's result_callback after command execution.
        """
        if self._db is not None:
            if self.verbose:
                logger.debug("Closing database connection")
            self._db.close()
            self._db = None
