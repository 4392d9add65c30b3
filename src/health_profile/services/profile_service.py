"""Profile CRUD, session handling and validated updates."""

from datetime import date
from typing import Callable

from ..db.repositories import ProfileRepository
from ..exceptions import MissingArgumentError, ProfileNotFoundError
from ..models.profile import Profile, calculate_age
from ..models.sign_up import ProfileInput
from .validation import ParsedProfileInput, parse_profile_input


class ProfileService:
    """Validated CRUD plus the single active session over a repository.

    The session is the profile currently "logged in". It is owned by the
    service instance and never stacks: opening a new session replaces the
    previous one.
    """

    def __init__(
        self,
        repository: ProfileRepository,
        today: Callable[[], date] = date.today,
    ):
        self._repository = repository
        self._today = today
        self._current_session: Profile | None = None

    async def add(self, profile: Profile) -> None:
        """Store a profile, overwriting any profile with the same ID."""
        if profile is None:
            raise MissingArgumentError("profile")
        await self._repository.save(profile)
        self._refresh_session(profile)

    async def get_by_id(self, profile_id: int) -> Profile | None:
        return await self._repository.find_by_id(profile_id)

    async def update(self, profile: Profile) -> None:
        """Replace the stored profile under profile.id."""
        await self.add(profile)

    async def list_all(self) -> list[Profile]:
        return await self._repository.find_all()

    async def delete(self, profile_id: int) -> None:
        """Delete a profile. Deleting the active profile closes the session."""
        if not await self._repository.delete(profile_id):
            raise ProfileNotFoundError(profile_id)
        if self._current_session is not None and self._current_session.id == profile_id:
            self.close_session()

    # Session

    async def open_session(self, profile_id: int) -> Profile | None:
        """Make a stored profile the active one.

        Returns None and keeps the current session if the ID is unknown.
        """
        profile = await self._repository.find_by_id(profile_id)
        if profile is not None:
            self._current_session = profile
        return profile

    def get_current_session(self) -> Profile | None:
        return self._current_session

    def close_session(self) -> None:
        self._current_session = None

    def _refresh_session(self, profile: Profile) -> None:
        if self._current_session is not None and self._current_session.id == profile.id:
            self._current_session = profile

    # Raw input

    async def update_user(self, profile_id: int, raw_input: ProfileInput) -> Profile:
        """Parse raw form input and replace the stored profile with it.

        Raises ProfileNotFoundError for an unknown ID and ValidationError
        for any malformed field; in both cases nothing is stored.
        """
        existing = await self._repository.find_by_id(profile_id)
        if existing is None:
            raise ProfileNotFoundError(profile_id)

        parsed = parse_profile_input(raw_input, self._today())
        updated = self._build(existing.id, parsed)
        await self._repository.save(updated)
        self._refresh_session(updated)
        return updated

    async def sign_up(self, raw_input: ProfileInput) -> Profile:
        """Create a profile from raw form input under the next free ID."""
        parsed = parse_profile_input(raw_input, self._today())
        profiles = await self._repository.find_all()
        next_id = max((p.id for p in profiles), default=0) + 1
        profile = self._build(next_id, parsed)
        await self._repository.save(profile)
        return profile

    def _build(self, profile_id: int, parsed: ParsedProfileInput) -> Profile:
        return Profile(
            id=profile_id,
            name=parsed.name,
            age=calculate_age(parsed.date_of_birth, self._today()),
            sex=parsed.sex,
            date_of_birth=parsed.date_of_birth,
            height=parsed.height,
            weight=parsed.weight,
            unit_system=parsed.unit_system,
        )
