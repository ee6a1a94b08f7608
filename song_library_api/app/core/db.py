"""
SQLite database integration.

``Database`` wraps the connection settings of one SQLite file.  It
hands out a fresh connection per operation (``connect`` or the
``cursor`` context manager) and creates the ``songs`` table on
application start (``init_db``).  Rows are returned as
``sqlite3.Row`` objects so columns can be accessed by name.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import Settings

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = {"sqlite"}

SONGS_TABLE = """
CREATE TABLE IF NOT EXISTS songs (
    song_id TEXT PRIMARY KEY,
    song_name TEXT,
    song_text TEXT,
    group_name TEXT,
    link TEXT,
    release_date TEXT
);
"""


class Database:
    """Connection factory for the configured SQLite database."""

    def __init__(self, settings: Settings) -> None:
        if settings.db_provider not in SUPPORTED_PROVIDERS:
            raise ValueError(f"Unsupported database provider: {settings.db_provider!r}")
        self.path = self.resolve_path(settings.db_name)

    @staticmethod
    def resolve_path(db_name: str) -> str:
        """Return ``db_name`` as an absolute path.

        Relative names are resolved against the project root (the
        directory containing the ``song_library_api`` package).
        """
        if os.path.isabs(db_name):
            return db_name
        base_dir = Path(__file__).resolve().parent.parent.parent.parent
        return str((base_dir / db_name).resolve())

    def connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and always close the connection."""
        conn = self.connect()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    def init_db(self) -> None:
        """Create the ``songs`` table if it does not exist yet."""
        with self.cursor() as cursor:
            cursor.executescript(SONGS_TABLE)
        logger.info("Database ready at %s", self.path)
