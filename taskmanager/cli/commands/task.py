"""
Task management CLI commands.

Commands for adding, showing, listing, updating and deleting tasks in the
local database. They go through the same TaskService as the HTTP API, so
the same validation rules apply.
"""
import click
from pathlib import Path

from taskmanager.cli.common import db_option, task_errors, format_task
from taskmanager.core.models import TaskStatus
from taskmanager.services.tasks import TaskService

STATUS_NAMES = [status.value for status in TaskStatus]


def _service(ctx, db_path) -> TaskService:
    if db_path:
        ctx.obj.db_path = Path(db_path)
    return TaskService(ctx.obj.get_db())


@click.group()
def task():
    """Manage tasks in the local database."""
    pass


@task.command()
@click.argument('title')
@click.option('--due', 'due_date', required=True, help='Due date (YYYY-MM-DD), must be in the future')
@click.option('--description', '-d', help='Task description')
@click.option('--status', '-s', help=f"Initial status ({', '.join(STATUS_NAMES)})")
@db_option
@click.pass_context
@task_errors
def add(ctx, title, due_date, description, status, db_path):
    """Create a task."""
    created = _service(ctx, db_path).create_task(
        title=title,
        description=description,
        status=status,
        due_date=due_date,
    )
    click.secho(f"Created task {created.id}", fg='green')
    click.echo(format_task(created))


@task.command()
@click.argument('task_id')
@db_option
@click.pass_context
@task_errors
def show(ctx, task_id, db_path):
    """Show a single task."""
    found = _service(ctx, db_path).get_task(task_id)
    click.echo(f"ID:          {found.id}")
    click.echo(f"Title:       {found.title}")
    click.echo(f"Description: {found.description or ''}")
    click.echo(f"Status:      {found.status.value if found.status else '-'}")
    click.echo(f"Due:         {found.due_date.isoformat()}")


@task.command('list')
@click.option('--page', type=int, default=0, help='Page number, starting at 0 (default: 0)')
@click.option('--size', type=int, default=20, help='Tasks per page (default: 20)')
@db_option
@click.pass_context
@task_errors
def list_tasks(ctx, page, size, db_path):
    """List tasks, soonest due first."""
    result = _service(ctx, db_path).list_tasks(page, size)

    if not result.items:
        click.echo("No tasks found.")
    for item in result.items:
        click.echo(format_task(item))

    click.echo(f"\nPage {result.page} (size {result.size}), {result.total} tasks total")
    if result.has_more:
        click.echo(f"More tasks available: --page {result.page + 1}")


@task.command()
@click.argument('task_id')
@click.option('--title', '-t', required=True, help='New title')
@click.option('--due', 'due_date', required=True, help='New due date (YYYY-MM-DD), must be in the future')
@click.option('--status', '-s', required=True, help=f"New status ({', '.join(STATUS_NAMES)})")
@click.option('--description', '-d', help='New description (omitting it clears the description)')
@db_option
@click.pass_context
@task_errors
def update(ctx, task_id, title, due_date, status, description, db_path):
    """Replace a task's title, description, status and due date."""
    updated = _service(ctx, db_path).update_task(
        task_id,
        title=title,
        description=description,
        status=status,
        due_date=due_date,
    )
    click.secho(f"Updated task {updated.id}", fg='green')
    click.echo(format_task(updated))


@task.command()
@click.argument('task_id')
@db_option
@click.pass_context
@task_errors
def delete(ctx, task_id, db_path):
    """Delete a task."""
    _service(ctx, db_path).delete_task(task_id)
    click.secho(f"Deleted task {task_id}", fg='green')
