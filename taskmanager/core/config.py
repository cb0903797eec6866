"""
Configuration and path resolution for Task Manager.

Centralizes OS-specific path logic for the default database location and
the server defaults used by the CLI.
"""
import os
import platform
from pathlib import Path

DB_PATH_ENV_VAR = 'TASK_MANAGER_DB_PATH'

DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 5000


def get_default_db_path() -> Path:
    """
    Get the default database path based on OS.
    
    Returns
    ----
    Path
        Default path to tasks.db
    """
    system = platform.system()
    home = Path.home()
    
    if system == 'Darwin':  # macOS
        base_dir = home / "Library" / "Application Support" / "task-manager"
    elif system == 'Windows':
        base_dir = home / "AppData" / "Roaming" / "task-manager"
    elif system == 'Linux':
        base_dir = home / ".local" / "share" / "task-manager"
    else:
        base_dir = home / ".task-manager"
    
    base_dir.mkdir(parents=True, exist_ok=True)
    return base_dir / "tasks.db"


def get_db_path() -> Path:
    """
    Get the database path, honouring the TASK_MANAGER_DB_PATH override.
    
    Returns
    ----
    Path
        Path from the environment if set, otherwise the OS-specific default
    """
    override = os.getenv(DB_PATH_ENV_VAR)
    if override:
        return Path(override)
    return get_default_db_path()
