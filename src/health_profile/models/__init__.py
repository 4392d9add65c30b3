"""Data models for health-profile."""

from .profile import Profile, Sex, UnitSystem, calculate_age
from .sign_up import ProfileInput

__all__ = [
    "Profile",
    "ProfileInput",
    "Sex",
    "UnitSystem",
    "calculate_age",
]
