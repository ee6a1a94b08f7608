"""
SQL builders for the ``songs`` table and the verse paginator.

The builders turn optional fields into a parameterized statement and an
ordered argument list.  Placeholders use SQLite's numbered form
(``?1``, ``?2``, ...) and are numbered in the order arguments are
appended, so ``args[n - 1]`` is always bound to ``?n``.

Only fields that are not ``None`` contribute a clause.  Fields are
examined in a fixed order:

* updates: song_name, song_text, group_name, link, release_date
* filters: song_name, release_date, group_name
"""

from typing import Any, List, Tuple
from uuid import UUID

from ..schemas.song import SongsFilter, SongUpdate

SONG_COLUMNS = "song_id, song_name, song_text, group_name, link, release_date"

UPDATE_FIELDS = ("song_name", "song_text", "group_name", "link", "release_date")

VERSE_DELIMITER = "\n\n"


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def to_db_value(value: Any) -> Any:
    """Convert a field value into what is stored in the table."""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value


def build_update_query(song_id: UUID, update: SongUpdate) -> Tuple[str, List[Any]]:
    """Return ``UPDATE`` statement and arguments for the non-null fields.

    The song identifier is always the last argument.  Raises
    ``ValueError`` when no field is set, since ``SET`` would be empty.
    """
    set_clauses: List[str] = []
    args: List[Any] = []

    for field in UPDATE_FIELDS:
        value = getattr(update, field)
        if value is None:
            continue
        args.append(to_db_value(value))
        set_clauses.append(f"{field} = ?{len(args)}")

    if not set_clauses:
        raise ValueError("Nothing to update: every field is empty")

    args.append(str(song_id))
    query = f"UPDATE songs SET {', '.join(set_clauses)} WHERE song_id = ?{len(args)}"
    return query, args


def build_filter_query(
    page_current: int, page_size: int, songs_filter: SongsFilter
) -> Tuple[str, List[Any]]:
    """Return a filtered, paginated ``SELECT`` and its arguments.

    ``page_current`` is used directly as the row offset and
    ``page_size`` as the row limit; both are bound as the two final
    arguments.  With no filter set there is no ``WHERE`` clause.
    """
    where_clauses: List[str] = []
    args: List[Any] = []

    if songs_filter.song_name is not None:
        args.append(f"%{_escape_like(songs_filter.song_name)}%")
        where_clauses.append(f"song_name LIKE ?{len(args)} ESCAPE '\\'")

    if songs_filter.release_date is not None:
        args.append(to_db_value(songs_filter.release_date))
        where_clauses.append(f"release_date = ?{len(args)}")

    if songs_filter.group_name is not None:
        args.append(f"%{_escape_like(songs_filter.group_name)}%")
        where_clauses.append(f"group_name LIKE ?{len(args)} ESCAPE '\\'")

    where = ""
    if where_clauses:
        where = " WHERE " + " AND ".join(where_clauses)

    args.append(page_size)
    limit = len(args)
    args.append(page_current)
    offset = len(args)

    query = f"SELECT {SONG_COLUMNS} FROM songs{where} LIMIT ?{limit} OFFSET ?{offset}"
    return query, args


def extract_verses(song_text: str, verse_current: int, verse_count: int) -> List[str]:
    """Return up to ``verse_count`` verses starting at ``verse_current``.

    Verses are separated by a blank line.  A start index past the last
    verse yields an empty list.
    """
    verses = song_text.split(VERSE_DELIMITER)
    if verse_current >= len(verses):
        return []
    return verses[verse_current:verse_current + verse_count]
