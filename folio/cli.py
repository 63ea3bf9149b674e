"""
Flask CLI commands, available as `flask folio <command>`.
"""

import click
from flask.cli import AppGroup

from .core.database import Database
from .core.logging_service import LoggingService
from .seed import DEMO_EMAIL, seed_demo_content

folio_cli = AppGroup('folio', help='Folio maintenance commands.')


@folio_cli.command('init-db')
def init_db_command():
    """Create any missing tables."""
    Database.create_all()
    click.echo('Database tables created.')


@folio_cli.command('seed')
@click.option('--email', default=DEMO_EMAIL, show_default=True, help='Email of the demo admin user.')
def seed_command(email):
    """Insert demo portfolio content."""
    user = seed_demo_content(email)
    if user is None:
        click.echo(f'User {email} already exists, nothing seeded.')
        return
    click.echo(f'Seeded demo content for {email} (user id {user.id}).')


@folio_cli.command('cleanup-logs')
@click.option('--days', default=30, show_default=True, type=click.IntRange(min=1), help='Days of logs to keep.')
def cleanup_logs_command(days):
    """Delete app_logs entries older than --days."""
    deleted = LoggingService.cleanup_old_logs(days_to_keep=days)
    click.echo(f'Deleted {deleted} log entries.')


def register_commands(app):
    app.cli.add_command(folio_cli)
