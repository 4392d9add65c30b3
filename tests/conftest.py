"""Pytest configuration and fixtures."""

import pytest
import tempfile
from datetime import date
from pathlib import Path

from health_profile.db import InMemoryProfileRepository, SQLiteProfileRepository, init_db
from health_profile.models.profile import Profile, Sex, UnitSystem
from health_profile.models.sign_up import ProfileInput
from health_profile.services import ProfileService

# Fixed "today" for deterministic age calculations
TODAY = date(2025, 10, 1)


def _make_profile(profile_id: int = 1, **overrides) -> Profile:
    fields = {
        "id": profile_id,
        "name": "John Doe",
        "age": 25,
        "sex": Sex.MALE,
        "date_of_birth": date(1999, 7, 22),
        "height": 175.0,
        "weight": 70.0,
        "unit_system": UnitSystem.METRIC,
    }
    fields.update(overrides)
    return Profile(**fields)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def make_profile():
    """Factory building profiles with sensible defaults."""
    return _make_profile


@pytest.fixture
def sample_profile():
    """Create a sample profile for testing."""
    return _make_profile()


@pytest.fixture
def valid_input():
    """Raw form input that passes validation."""
    return ProfileInput(
        name="John Smith",
        date_of_birth="1999-07-22",
        height="180.0",
        weight="75.0",
        sex="MALE",
        unit_system="METRIC",
    )


@pytest.fixture
async def sqlite_repo(temp_db_path):
    await init_db(temp_db_path)
    return SQLiteProfileRepository(temp_db_path)


@pytest.fixture(params=["memory", "sqlite"])
async def repo(request, temp_db_path):
    """Each repository implementation in turn."""
    if request.param == "memory":
        return InMemoryProfileRepository()
    await init_db(temp_db_path)
    return SQLiteProfileRepository(temp_db_path)


@pytest.fixture
def service(repo):
    """Profile service with a fixed clock."""
    return ProfileService(repo, today=lambda: TODAY)
