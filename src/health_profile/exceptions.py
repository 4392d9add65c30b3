"""Exceptions raised by the profile service layer."""


class ProfileError(Exception):
    """Base exception for all profile errors."""


class MissingArgumentError(ProfileError, TypeError):
    """Raised when a required argument is None."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} must not be None")


class ProfileNotFoundError(ProfileError, LookupError):
    """Raised when no profile is stored under the requested ID."""

    def __init__(self, profile_id: int):
        self.profile_id = profile_id
        super().__init__(f"Profile {profile_id} not found")


class ValidationError(ProfileError, ValueError):
    """Raised when a profile field is missing, malformed or out of range."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
