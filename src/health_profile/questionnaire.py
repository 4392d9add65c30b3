"""Interactive questionnaire for collecting profile input."""

import questionary
from questionary import Style

from .models.profile import Profile, Sex, UnitSystem
from .models.sign_up import ProfileInput

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#2e7d32 bold"),
        ("question", "bold"),
        ("answer", "fg:#1565c0 bold"),
        ("pointer", "fg:#2e7d32 bold"),
        ("highlighted", "fg:#2e7d32 bold"),
        ("selected", "fg:#1565c0"),
        ("separator", "fg:#1565c0"),
        ("instruction", ""),
        ("text", ""),
    ]
)


class ProfileQuestionnaire:
    """Prompts for the six profile fields.

    Answers are returned untouched as a ProfileInput; validation is left to
    the profile service so the rules live in one place.
    """

    async def collect(
        self,
        defaults: ProfileInput | None = None,
        answered: dict[str, str] | None = None,
    ) -> ProfileInput | None:
        """Ask for every field not already in ``answered``.

        ``defaults`` pre-fills the prompts (used when editing). Returns None
        if the user cancels.
        """
        answers = dict(answered or {})

        # questionary returns None when a prompt is interrupted
        if "name" not in answers:
            answers["name"] = await questionary.text(
                "Name:",
                default=defaults.name if defaults else "",
                style=custom_style,
            ).ask_async()
            if answers["name"] is None:
                return None

        if "date_of_birth" not in answers:
            answers["date_of_birth"] = await questionary.text(
                "Date of birth (YYYY-MM-DD):",
                default=defaults.date_of_birth if defaults else "",
                style=custom_style,
            ).ask_async()
            if answers["date_of_birth"] is None:
                return None

        if "sex" not in answers:
            answers["sex"] = await questionary.select(
                "Sex:",
                choices=[
                    questionary.Choice("Male", Sex.MALE.name),
                    questionary.Choice("Female", Sex.FEMALE.name),
                    questionary.Choice("Other", Sex.OTHER.name),
                ],
                default=defaults.sex.upper() if defaults else None,
                style=custom_style,
            ).ask_async()
            if answers["sex"] is None:
                return None

        if "unit_system" not in answers:
            answers["unit_system"] = await questionary.select(
                "Units:",
                choices=[
                    questionary.Choice("Metric (cm, kg)", UnitSystem.METRIC.name),
                    questionary.Choice("Imperial (in, lb)", UnitSystem.IMPERIAL.name),
                ],
                default=defaults.unit_system.upper() if defaults else UnitSystem.METRIC.name,
                style=custom_style,
            ).ask_async()
            if answers["unit_system"] is None:
                return None

        units = _units_for(answers["unit_system"])

        if "height" not in answers:
            answers["height"] = await questionary.text(
                f"Height ({units.height_unit}):",
                default=defaults.height if defaults else "",
                style=custom_style,
            ).ask_async()
            if answers["height"] is None:
                return None

        if "weight" not in answers:
            answers["weight"] = await questionary.text(
                f"Weight ({units.weight_unit}):",
                default=defaults.weight if defaults else "",
                style=custom_style,
            ).ask_async()
            if answers["weight"] is None:
                return None

        return ProfileInput(
            name=answers["name"],
            date_of_birth=answers["date_of_birth"],
            height=answers["height"],
            weight=answers["weight"],
            sex=answers["sex"],
            unit_system=answers["unit_system"],
        )

    async def choose_profile(self, profiles: list[Profile], message: str) -> int | None:
        """Pick one profile from a list. Returns its ID, or None."""
        if not profiles:
            return None
        return await questionary.select(
            message,
            choices=[
                questionary.Choice(f"#{p.id} {p.name} ({p.date_of_birth.isoformat()})", p.id)
                for p in profiles
            ],
            style=custom_style,
        ).ask_async()


def _units_for(value: str) -> UnitSystem:
    """Unit system used to label the height and weight prompts."""
    for member in UnitSystem:
        if value.strip().lower() in (member.name.lower(), member.value):
            return member
    return UnitSystem.METRIC
