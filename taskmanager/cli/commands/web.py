"""
Web API server command.

Starts the Flask app under gevent's WSGI server.
"""
import os

import click

from taskmanager.core.config import DB_PATH_ENV_VAR, DEFAULT_HOST, DEFAULT_PORT


@click.command()
@click.option(
    '--host',
    default=DEFAULT_HOST,
    help=f'Host to bind to (default: {DEFAULT_HOST})'
)
@click.option(
    '--port',
    type=int,
    default=DEFAULT_PORT,
    help=f'Port to bind to (default: {DEFAULT_PORT})'
)
@click.option(
    '--db-path',
    type=click.Path(),
    help='Path to database file (default: OS-specific location)'
)
def web(host, port, db_path):
    """
    Start the task HTTP API server.
    
    The app opens its own database per request, so the path is handed
    over through the TASK_MANAGER_DB_PATH environment variable.
    """
    if db_path:
        os.environ[DB_PATH_ENV_VAR] = str(db_path)
    
    try:
        from gevent import monkey
        monkey.patch_all()
        from gevent.pywsgi import WSGIServer
    except ImportError:
        click.secho(
            "gevent is not installed. Install with: pip install gevent",
            fg='yellow',
            err=True
        )
        click.echo("Falling back to the Flask development server", err=True)
        from taskmanager.ui.web.app import app
        app.run(host=host, port=port)
        return
    
    from taskmanager.ui.web.app import app
    
    click.echo(f"Starting task API server on http://{host}:{port}")
    click.echo("Press Ctrl+C to stop")
    
    server = WSGIServer((host, port), app)
    server.serve_forever()
