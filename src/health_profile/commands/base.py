"""Shared CLI utilities."""

import asyncio
from functools import wraps
from pathlib import Path

import click

from ..services import ProfileService


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_db_path_from_context(ctx: click.Context) -> Path:
    """Database path resolved by the root command group."""
    return ctx.find_root().obj["db_path"]


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized (not needed for --in-memory runs)."""
    if ctx.find_root().obj["in_memory"]:
        return
    db_path = get_db_path_from_context(ctx)
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Database not initialized. Run 'health-profile init' first."
        )
        ctx.exit(1)


def get_service(ctx: click.Context) -> ProfileService:
    """Build a profile service over the configured repository."""
    return ProfileService(ctx.find_root().obj["repository"])


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)
