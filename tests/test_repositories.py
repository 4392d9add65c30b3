"""Tests for profile repositories."""

import aiosqlite

from health_profile.db import (
    InMemoryProfileRepository,
    ProfileRepository,
    SQLiteProfileRepository,
    get_db_path,
    init_db,
)


class TestProfileRepository:
    """Behaviour shared by every repository."""

    async def test_implements_protocol(self, repo):
        assert isinstance(repo, ProfileRepository)

    async def test_save_and_find(self, repo, sample_profile):
        await repo.save(sample_profile)
        assert await repo.find_by_id(sample_profile.id) == sample_profile

    async def test_find_missing(self, repo):
        assert await repo.find_by_id(42) is None

    async def test_save_overwrites(self, repo, sample_profile):
        await repo.save(sample_profile)
        await repo.save(sample_profile.replace(name="Renamed"))

        profiles = await repo.find_all()
        assert len(profiles) == 1
        assert profiles[0].name == "Renamed"

    async def test_find_all_ordered_by_id(self, repo, make_profile):
        for profile_id in (3, 1, 2):
            await repo.save(make_profile(profile_id))

        assert [p.id for p in await repo.find_all()] == [1, 2, 3]

    async def test_delete(self, repo, sample_profile):
        await repo.save(sample_profile)

        assert await repo.delete(sample_profile.id) is True
        assert await repo.delete(sample_profile.id) is False
        assert await repo.find_all() == []


class TestSQLiteProfileRepository:
    """SQLite specifics."""

    async def test_upsert_keeps_created_at(self, sqlite_repo, sample_profile):
        await sqlite_repo.save(sample_profile)
        async with aiosqlite.connect(sqlite_repo.db_path) as db:
            cursor = await db.execute("SELECT created_at FROM profiles WHERE id = ?", (1,))
            (created_at,) = await cursor.fetchone()

        await sqlite_repo.save(sample_profile.replace(weight=71.0))

        async with aiosqlite.connect(sqlite_repo.db_path) as db:
            cursor = await db.execute("SELECT created_at, weight FROM profiles WHERE id = ?", (1,))
            row = await cursor.fetchone()
        assert row == (created_at, 71.0)

    async def test_init_db_is_idempotent(self, temp_db_path, sample_profile):
        await init_db(temp_db_path)
        repo = SQLiteProfileRepository(temp_db_path)
        await repo.save(sample_profile)

        await init_db(temp_db_path)

        assert await repo.find_by_id(1) == sample_profile

    async def test_persists_across_instances(self, sqlite_repo, sample_profile):
        await sqlite_repo.save(sample_profile)

        other = SQLiteProfileRepository(sqlite_repo.db_path)
        assert await other.find_by_id(1) == sample_profile


class TestInMemoryProfileRepository:
    """In-memory specifics."""

    async def test_instances_are_independent(self, sample_profile):
        first = InMemoryProfileRepository()
        second = InMemoryProfileRepository()
        await first.save(sample_profile)

        assert await second.find_all() == []


def test_get_db_path_creates_directory(tmp_path):
    data_dir = tmp_path / "nested" / "data"
    path = get_db_path(data_dir)

    assert data_dir.is_dir()
    assert path == data_dir / "health_profile.db"
