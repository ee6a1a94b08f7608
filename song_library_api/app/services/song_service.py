"""
Record store for songs.

``SongStore`` issues the statements produced by ``song_query`` against
the SQLite database and maps rows back into ``SongRead`` instances.
Each operation opens its own connection and runs a single statement,
committed on success.

Two failures are signalled to callers:

* ``SongNotFoundError`` when the identifier matches no row (for
  ``update`` and ``remove`` this is detected from the affected-row
  count of the mutation itself);
* ``PersistenceError`` for any backend failure (constraint violation,
  unreadable database file, ...).  The underlying ``sqlite3.Error`` is
  logged and chained.
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import date
from typing import Iterator, List
from uuid import UUID

from song_library_api.app.core.db import Database
from song_library_api.app.schemas.song import SongCreate, SongRead, SongsFilter, SongUpdate
from song_library_api.app.services.song_query import (
    SONG_COLUMNS,
    build_filter_query,
    build_update_query,
    extract_verses,
    to_db_value,
)

logger = logging.getLogger(__name__)


class SongNotFoundError(LookupError):
    """No song with the requested identifier."""

    def __init__(self, song_id: UUID) -> None:
        super().__init__(f"Song {song_id} not found")
        self.song_id = song_id


class PersistenceError(RuntimeError):
    """The database rejected or failed to run a statement."""


class SongStore:
    """CRUD operations on the ``songs`` table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    @contextmanager
    def _cursor(self, operation: str) -> Iterator[sqlite3.Cursor]:
        try:
            with self.database.cursor() as cursor:
                yield cursor
        except sqlite3.Error as exc:
            logger.error("Database error during %s: %s", operation, exc)
            raise PersistenceError(f"{operation} failed") from exc

    async def create(self, data: SongCreate) -> SongRead:
        """Insert a new song and return it with its generated identifier."""
        song_id = uuid.uuid4()
        with self._cursor("create") as cursor:
            cursor.execute(
                """
                INSERT INTO songs (song_id, song_name, song_text, group_name, link, release_date)
                VALUES (?1, ?2, ?3, ?4, ?5, ?6)
                """,
                (
                    str(song_id),
                    data.song_name,
                    data.song_text,
                    data.group_name,
                    data.link,
                    to_db_value(data.release_date),
                ),
            )
        logger.info("Created song %s", song_id)
        return SongRead(
            song_id=song_id,
            song_name=data.song_name,
            song_text=data.song_text,
            group_name=data.group_name,
            link=data.link,
            release_date=data.release_date,
        )

    async def remove(self, song_id: UUID) -> None:
        with self._cursor("remove") as cursor:
            cursor.execute("DELETE FROM songs WHERE song_id = ?1", (str(song_id),))
            affected = cursor.rowcount
        if not affected:
            raise SongNotFoundError(song_id)
        logger.info("Deleted song %s", song_id)

    async def get(self, song_id: UUID) -> SongRead:
        with self._cursor("get") as cursor:
            row = cursor.execute(
                f"SELECT {SONG_COLUMNS} FROM songs WHERE song_id = ?1",
                (str(song_id),),
            ).fetchone()
        if row is None:
            raise SongNotFoundError(song_id)
        return self._row_to_song(row)

    async def list(self, page_current: int, page_size: int, songs_filter: SongsFilter) -> List[SongRead]:
        """Return one page of songs matching ``songs_filter``.

        ``page_current`` is a row offset, not a page number.
        """
        query, args = build_filter_query(page_current, page_size, songs_filter)
        with self._cursor("list") as cursor:
            rows = cursor.execute(query, args).fetchall()
        return [self._row_to_song(row) for row in rows]

    async def update(self, song_id: UUID, data: SongUpdate) -> None:
        """Overwrite the non-null fields of ``data``.

        An update without any field set changes nothing and only checks
        that the song exists.
        """
        if not data.has_changes():
            await self.get(song_id)
            return
        query, args = build_update_query(song_id, data)
        with self._cursor("update") as cursor:
            cursor.execute(query, args)
            affected = cursor.rowcount
        if not affected:
            raise SongNotFoundError(song_id)
        logger.info("Updated song %s", song_id)

    async def lyrics(self, song_id: UUID, verse_current: int, verse_count: int) -> List[str]:
        """Return a window of the song's verses; empty when it has no text."""
        song = await self.get(song_id)
        if song.song_text is None:
            return []
        return extract_verses(song.song_text, verse_current, verse_count)

    @staticmethod
    def _row_to_song(row: sqlite3.Row) -> SongRead:
        release_date = row["release_date"]
        return SongRead(
            song_id=UUID(row["song_id"]),
            song_name=row["song_name"],
            song_text=row["song_text"],
            group_name=row["group_name"],
            link=row["link"],
            release_date=date.fromisoformat(release_date) if release_date else None,
        )
