"""
Common Click decorators and utilities for CLI commands.

Provides reusable option decorators to reduce boilerplate across command definitions.
"""
import functools
from pathlib import Path
from typing import Callable

import click

from taskmanager.core.errors import TaskError
from taskmanager.core.models import Task


def db_option(f: Callable) -> Callable:
    """
    Add --db-path option to command.

    Allows users to specify a custom database path instead of using
    the OS-specific default location.

    Args:
        f: Command function to decorate

    Returns:
        Decorated function with --db-path option
    """
    return click.option(
        '--db-path',
        type=click.Path(path_type=Path),
        help='Path to database file (default: OS-specific location)'
    )(f)


def task_errors(f: Callable) -> Callable:
    """
    Report TaskError as a red one-line message and abort.

    Args:
        f: Command function to decorate

    Returns:
        Decorated function
    """
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except TaskError as e:
            click.secho(f"Error: {e.message}", fg='red', err=True)
            raise click.Abort()
    return wrapper


def format_task(task: Task) -> str:
    """One-line summary of a task for terminal output."""
    status = task.status.value if task.status else '-'
    line = f"{task.id}  {task.due_date.isoformat()}  {status:<11}  {task.title}"
    if task.description:
        line += f" - {task.description}"
    return line
