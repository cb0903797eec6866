"""
Miscellaneous CLI commands.
"""
import sys
from pathlib import Path

import click

from taskmanager import __version__
from taskmanager.cli.common import db_option, task_errors


@click.command()
@db_option
@click.pass_context
@task_errors
def info(ctx, db_path):
    """Show database location and task count."""
    if db_path:
        ctx.obj.db_path = Path(db_path)

    db = ctx.obj.get_db()
    click.echo(f"Task Manager {__version__}")
    click.echo(f"Database: {db.db_path}")
    click.echo(f"Active tasks: {db.count_active()}")
    click.echo(f"Python: {sys.version}")
    click.echo(f"Platform: {sys.platform}")
