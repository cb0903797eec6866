"""
Click-based CLI for Task Manager.

This module provides the main Click group and entry point.
Commands are organized in the commands/ subpackage.
"""
import click
import logging
import sys

from .context import CLIContext

# Configure logging format
logging.basicConfig(
    level=logging.INFO,
    format='%(message)s'
)


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.pass_context
def cli(ctx, verbose):
    """
    Task Manager - track tasks with due dates and statuses.

    Serve the HTTP API with `web`, or manage tasks in the local
    database directly with the `task` commands.
    """
    ctx.obj = CLIContext(verbose=verbose)

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.result_callback()
@click.pass_context
def cleanup(ctx, result, **kwargs):
    """
    Clean up resources after command execution.

    Ensures database connections are closed so the WAL is checkpointed.
    """
    if ctx.obj:
        ctx.obj.close()


from .commands.misc import info

cli.add_command(info)

from .commands.task import task

cli.add_command(task)

from .commands.web import web

cli.add_command(web)


def main():
    """
    Main entry point for the CLI.

    Used by the task-manager console script and __main__.py.
    """
    try:
        cli()
    except Exception as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
