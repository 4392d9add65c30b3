"""Data access layer for health-profile."""

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

import aiosqlite

from ..models.profile import Profile
from .engine import get_db_path

logger = logging.getLogger(__name__)


@runtime_checkable
class ProfileRepository(Protocol):
    """Storage for profiles keyed by profile ID."""

    async def find_by_id(self, profile_id: int) -> Profile | None: ...
    async def save(self, profile: Profile) -> None: ...
    async def find_all(self) -> list[Profile]: ...
    async def delete(self, profile_id: int) -> bool: ...


class InMemoryProfileRepository:
    """Dict-backed repository, used for tests and throwaway sessions."""

    def __init__(self):
        self._profiles: dict[int, Profile] = {}

    async def find_by_id(self, profile_id: int) -> Profile | None:
        return self._profiles.get(profile_id)

    async def save(self, profile: Profile) -> None:
        self._profiles[profile.id] = profile

    async def find_all(self) -> list[Profile]:
        return [self._profiles[key] for key in sorted(self._profiles)]

    async def delete(self, profile_id: int) -> bool:
        return self._profiles.pop(profile_id, None) is not None


class SQLiteProfileRepository:
    """Repository for profiles stored in SQLite."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def find_by_id(self, profile_id: int) -> Profile | None:
        """Get a profile by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM profiles WHERE id = ?", (profile_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_profile(row)

    async def save(self, profile: Profile) -> None:
        """Insert a profile, or overwrite the one stored under its ID."""
        data = profile.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO profiles
                (id, name, age, sex, date_of_birth, height, weight, unit_system)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name = excluded.name,
                    age = excluded.age,
                    sex = excluded.sex,
                    date_of_birth = excluded.date_of_birth,
                    height = excluded.height,
                    weight = excluded.weight,
                    unit_system = excluded.unit_system,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (
                    data["id"],
                    data["name"],
                    data["age"],
                    data["sex"],
                    data["date_of_birth"],
                    data["height"],
                    data["weight"],
                    data["unit_system"],
                ),
            )
            await db.commit()
        logger.debug("Saved profile %d", profile.id)

    async def find_all(self) -> list[Profile]:
        """List all profiles."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM profiles ORDER BY id")
            rows = await cursor.fetchall()
            return [self._row_to_profile(row) for row in rows]

    async def delete(self, profile_id: int) -> bool:
        """Delete a profile. Returns False if nothing was stored."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM profiles WHERE id = ?", (profile_id,))
            await db.commit()
            deleted = cursor.rowcount > 0
        logger.debug("Delete profile %d: %s", profile_id, "ok" if deleted else "not found")
        return deleted

    def _row_to_profile(self, row: aiosqlite.Row) -> Profile:
        """Convert a database row to a Profile."""
        return Profile.from_dict(
            {
                "id": row["id"],
                "name": row["name"],
                "age": row["age"],
                "sex": row["sex"],
                "date_of_birth": row["date_of_birth"],
                "height": row["height"],
                "weight": row["weight"],
                "unit_system": row["unit_system"],
            }
        )
