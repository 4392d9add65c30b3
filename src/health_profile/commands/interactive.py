"""Interactive session command."""

import click
import questionary

from ..exceptions import ProfileError
from ..models.sign_up import ProfileInput
from ..questionnaire import ProfileQuestionnaire, custom_style
from ..services import ProfileService
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, get_service

LOG_IN = "Log in"
SIGN_UP = "Sign up"
VIEW = "View my profile"
EDIT = "Edit my profile"
LOG_OUT = "Log out"
QUIT = "Quit"


@click.command()
@click.pass_context
@async_command
async def app(ctx):
    """Start an interactive session.

    Log in as one of the stored profiles, view and edit it, sign up new
    profiles and log out again, all within one running session.
    """
    ensure_initialized(ctx)

    service = get_service(ctx)
    questionnaire = ProfileQuestionnaire()

    while True:
        current = service.get_current_session()
        if current is None:
            choices = [LOG_IN, SIGN_UP, QUIT]
            message = "Not logged in. What would you like to do?"
        else:
            choices = [VIEW, EDIT, LOG_OUT, QUIT]
            message = f"Logged in as {current.name}. What would you like to do?"

        action = await questionary.select(
            message, choices=choices, style=custom_style
        ).ask_async()

        if action is None or action == QUIT:
            break

        try:
            await _handle(action, service, questionnaire)
        except ProfileError as e:
            echo_error(str(e))

    service.close_session()
    echo_info("Goodbye")


async def _handle(action: str, service: ProfileService, questionnaire: ProfileQuestionnaire) -> None:
    if action == LOG_IN:
        profiles = await service.list_all()
        if not profiles:
            echo_info("No profiles yet. Sign up first.")
            return
        profile_id = await questionnaire.choose_profile(profiles, "Log in as:")
        if profile_id is not None and await service.open_session(profile_id):
            echo_success(f"Welcome, {service.get_current_session().name}")

    elif action == SIGN_UP:
        raw_input = await questionnaire.collect()
        if raw_input is None:
            return
        created = await service.sign_up(raw_input)
        await service.open_session(created.id)
        echo_success(f"Profile {created.id} created")

    elif action == VIEW:
        click.echo()
        click.echo(service.get_current_session().get_summary())

    elif action == EDIT:
        current = service.get_current_session()
        raw_input = await questionnaire.collect(defaults=ProfileInput.from_profile(current))
        if raw_input is None:
            return
        await service.update_user(current.id, raw_input)
        echo_success("Profile updated")

    elif action == LOG_OUT:
        service.close_session()
        echo_info("Logged out")
