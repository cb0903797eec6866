"""
Core domain models, validation and database layer for Task Manager.
"""

from taskmanager.core.config import (
    get_db_path,
    get_default_db_path,
)

__all__ = [
    "get_db_path",
    "get_default_db_path",
]
