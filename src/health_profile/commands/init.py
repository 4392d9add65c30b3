"""Initialize project command."""

import click

from ..db import init_db
from .base import async_command, echo_info, echo_success, get_db_path_from_context


@click.command()
@click.pass_context
@async_command
async def init(ctx):
    """Initialize the health-profile database.

    Creates the data directory and the SQLite database with the
    profiles table. Safe to run more than once.
    """
    db_path = get_db_path_from_context(ctx)

    echo_info(f"Initializing health-profile in {db_path.parent}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  health-profile profile add     # Create a profile")
    click.echo("  health-profile app             # Interactive session")
