"""CLI entry point for health-profile."""

import logging
from pathlib import Path

import click

from . import __version__
from .commands import app, init, profile
from .db import InMemoryProfileRepository, SQLiteProfileRepository, get_db_path


@click.group()
@click.version_option(version=__version__, prog_name="health-profile")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="HEALTH_PROFILE_DATA_DIR",
    help="Directory holding the database (default: ./data)",
)
@click.option(
    "--in-memory",
    is_flag=True,
    help="Keep profiles in memory for this run only (nothing is saved)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, data_dir: Path | None, in_memory: bool, verbose: bool):
    """health-profile: personal health profile manager.

    Keep track of name, date of birth, sex, height and weight for one or
    more people, in metric or imperial units.

    Example usage:

        # Initialize the database
        health-profile init

        # Create and list profiles
        health-profile profile add
        health-profile profile list

        # Log in and edit interactively
        health-profile app

        # Try it out without touching the database
        health-profile --in-memory app
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = get_db_path(data_dir)
    ctx.obj["in_memory"] = in_memory
    if in_memory:
        ctx.obj["repository"] = InMemoryProfileRepository()
    else:
        ctx.obj["repository"] = SQLiteProfileRepository(ctx.obj["db_path"])


# Register commands
main.add_command(init)
main.add_command(profile)
main.add_command(app)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
