"""Profile management commands."""

import click

from ..exceptions import ProfileError
from ..models.sign_up import ProfileInput
from ..questionnaire import ProfileQuestionnaire
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    get_service,
)


def profile_options(f):
    """Options for supplying profile fields without prompting."""
    options = [
        click.option("--name", help="Full name"),
        click.option("--dob", "date_of_birth", help="Date of birth (YYYY-MM-DD)"),
        click.option("--height", help="Height in cm (metric) or inches (imperial)"),
        click.option("--weight", help="Weight in kg (metric) or pounds (imperial)"),
        click.option("--sex", help="MALE, FEMALE or OTHER"),
        click.option("--units", "unit_system", help="METRIC or IMPERIAL"),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def _answered(**fields: str | None) -> dict[str, str]:
    return {key: value for key, value in fields.items() if value is not None}


@click.group()
@click.pass_context
def profile(ctx):
    """Manage health profiles.

    Commands for creating, listing, viewing, editing and deleting profiles.
    """
    ensure_initialized(ctx)


@profile.command()
@profile_options
@click.pass_context
@async_command
async def add(ctx, **fields):
    """Create a new profile.

    Fields not given as options are asked for interactively.

    Example:
        health-profile profile add --name "Jane Doe" --dob 1993-05-15 \\
            --height 165 --weight 60 --sex FEMALE --units METRIC
    """
    raw_input = await ProfileQuestionnaire().collect(answered=_answered(**fields))
    if raw_input is None:
        echo_info("Cancelled")
        return

    service = get_service(ctx)
    try:
        created = await service.sign_up(raw_input)
    except ProfileError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Profile saved with ID: {created.id}")
    click.echo()
    click.echo(created.get_summary())


@profile.command(name="list")
@click.pass_context
@async_command
async def list_profiles(ctx):
    """List all profiles."""
    profiles = await get_service(ctx).list_all()

    if not profiles:
        echo_info("No profiles found. Create one with 'health-profile profile add'")
        return

    headers = ["ID", "Name", "Age", "Sex", "Height", "Weight", "BMI"]
    rows = []
    for p in profiles:
        units = p.unit_system
        rows.append([
            str(p.id),
            p.name[:30] + "..." if len(p.name) > 30 else p.name,
            str(p.age),
            p.sex.value,
            f"{p.height:g} {units.height_unit}",
            f"{p.weight:g} {units.weight_unit}",
            str(p.bmi),
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(profiles)} profile(s)")


@profile.command()
@click.argument("profile_id", type=int)
@click.pass_context
@async_command
async def show(ctx, profile_id: int):
    """Show details of a specific profile."""
    found = await get_service(ctx).get_by_id(profile_id)
    if found is None:
        echo_error(f"Profile ID {profile_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo(found.get_summary())


@profile.command()
@click.argument("profile_id", type=int)
@profile_options
@click.pass_context
@async_command
async def edit(ctx, profile_id: int, **fields):
    """Edit an existing profile.

    Prompts are pre-filled with the current values; fields given as
    options are applied without prompting.
    """
    service = get_service(ctx)
    existing = await service.get_by_id(profile_id)
    if existing is None:
        echo_error(f"Profile ID {profile_id} not found")
        ctx.exit(1)

    raw_input = await ProfileQuestionnaire().collect(
        defaults=ProfileInput.from_profile(existing),
        answered=_answered(**fields),
    )
    if raw_input is None:
        echo_info("Cancelled")
        return

    try:
        updated = await service.update_user(profile_id, raw_input)
    except ProfileError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Profile {updated.id} updated")
    click.echo()
    click.echo(updated.get_summary())


@profile.command()
@click.argument("profile_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, profile_id: int, yes: bool):
    """Delete a profile."""
    if not yes and not click.confirm(f"Delete profile {profile_id}?"):
        echo_info("Cancelled")
        return

    try:
        await get_service(ctx).delete(profile_id)
    except ProfileError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Profile {profile_id} deleted")
