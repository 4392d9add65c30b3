"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

logger = logging.getLogger(__name__)

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"

DB_FILENAME = "health_profile.db"


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS profiles (
                id INTEGER PRIMARY KEY,
                name TEXT NOT NULL,
                age INTEGER NOT NULL,
                sex TEXT NOT NULL,
                date_of_birth TEXT NOT NULL,
                height REAL NOT NULL,
                weight REAL NOT NULL,
                unit_system TEXT NOT NULL DEFAULT 'metric',
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_profiles_name
            ON profiles(name)
        """)

        await db.commit()

    logger.debug("Database schema ready at %s", db_path)
