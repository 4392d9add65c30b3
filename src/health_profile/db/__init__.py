"""Database layer for health-profile."""

from .engine import get_db_path, init_db
from .repositories import (
    InMemoryProfileRepository,
    ProfileRepository,
    SQLiteProfileRepository,
)

__all__ = [
    "get_db_path",
    "init_db",
    "InMemoryProfileRepository",
    "ProfileRepository",
    "SQLiteProfileRepository",
]
