"""Application services for health-profile."""

from .profile_service import ProfileService
from .validation import ParsedProfileInput, parse_profile_input

__all__ = [
    "ParsedProfileInput",
    "ProfileService",
    "parse_profile_input",
]
