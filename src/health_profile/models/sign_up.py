"""Raw sign-up / edit form input."""

from dataclasses import dataclass

from .profile import Profile


def format_number(value: float) -> str:
    """Render a measurement compactly without losing precision."""
    text = f"{value:g}"
    return text if float(text) == value else repr(value)


@dataclass(frozen=True)
class ProfileInput:
    """Unvalidated profile fields as typed by the user.

    Every field is a string exactly as entered; parsing and validation
    happen in ``services.validation``.
    """

    name: str
    date_of_birth: str  # YYYY-MM-DD
    height: str
    weight: str
    sex: str
    unit_system: str

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileInput":
        """Render an existing profile back into form input."""
        return cls(
            name=profile.name,
            date_of_birth=profile.date_of_birth.isoformat(),
            height=format_number(profile.height),
            weight=format_number(profile.weight),
            sex=profile.sex.name,
            unit_system=profile.unit_system.name,
        )
