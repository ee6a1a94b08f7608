"""
Song endpoints for API v1.

These routes expose CRUD operations on songs plus a paginated view of
a song's lyrics split into verses.  Successful responses are wrapped
in ``{"message": ...}``; failures are raised as ``ServiceError``
subclasses and rendered into the error envelope by the handlers in
``main``.

Page and verse windows have defaults and upper bounds; requests above
the bound are rejected rather than clamped.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from song_library_api.app.core.errors import (
    BadPageSize,
    BadVerseCount,
    SongNotFound,
    WrongParameters,
)
from song_library_api.app.schemas.song import (
    SongCreate,
    SongListResponse,
    SongResponse,
    SongsFilter,
    SongUpdate,
    StatusResponse,
    VersesResponse,
    parse_release_date,
)
from song_library_api.app.services.song_service import SongNotFoundError, SongStore

PAGE_SIZE_DEFAULT = 10
PAGE_SIZE_MAX = 50
VERSE_COUNT_DEFAULT = 20
VERSE_COUNT_MAX = 50

# Largest value SQLite can bind as an INTEGER.
SQLITE_INTEGER_MAX = 2**63 - 1

router = APIRouter()


def get_store(request: Request) -> SongStore:
    """Return the store built at application startup."""
    return request.app.state.store


def get_songs_filter(
    song_name: Optional[str] = Query(None, examples=["Absolute Territory"]),
    group_name: Optional[str] = Query(None, examples=["Ken Ashcorp"]),
    release_date: Optional[str] = Query(None, description="DD.MM.YYYY", examples=["09.03.2013"]),
) -> SongsFilter:
    parsed_date = None
    if release_date is not None:
        try:
            parsed_date = parse_release_date(release_date)
        except ValueError:
            raise WrongParameters() from None
    return SongsFilter(song_name=song_name, group_name=group_name, release_date=parsed_date)


@router.post("", response_model=SongResponse, status_code=status.HTTP_201_CREATED)
async def create_song(song_in: SongCreate, store: SongStore = Depends(get_store)) -> SongResponse:
    """Create a song and return it with its generated ``song_id``."""
    song = await store.create(song_in)
    return SongResponse(message=song)


@router.delete("/{song_id}", response_model=StatusResponse)
async def remove_song(song_id: UUID, store: SongStore = Depends(get_store)) -> StatusResponse:
    try:
        await store.remove(song_id)
    except SongNotFoundError:
        raise SongNotFound(song_id) from None
    return StatusResponse()


@router.put("/{song_id}", response_model=StatusResponse)
async def update_song(
    song_id: UUID,
    song_in: SongUpdate,
    store: SongStore = Depends(get_store),
) -> StatusResponse:
    """Partially update a song.

    Only fields present (and not null) in the body are overwritten.
    """
    try:
        await store.update(song_id, song_in)
    except SongNotFoundError:
        raise SongNotFound(song_id) from None
    return StatusResponse()


@router.get("/{song_id}", response_model=SongResponse)
async def get_song(song_id: UUID, store: SongStore = Depends(get_store)) -> SongResponse:
    try:
        song = await store.get(song_id)
    except SongNotFoundError:
        raise SongNotFound(song_id) from None
    return SongResponse(message=song)


@router.get("", response_model=SongListResponse)
async def list_songs(
    page_current: int = Query(0, ge=0, le=SQLITE_INTEGER_MAX, description="Row offset of the first song"),
    page_size: Optional[int] = Query(None, ge=0, description=f"Songs per request, at most {PAGE_SIZE_MAX}"),
    songs_filter: SongsFilter = Depends(get_songs_filter),
    store: SongStore = Depends(get_store),
) -> SongListResponse:
    """Return a filtered page of songs.

    ``page_current`` is used as a row offset: ``page_current=10`` with
    ``page_size=10`` skips the first ten matching songs.
    """
    if page_size is None:
        page_size = PAGE_SIZE_DEFAULT
    if page_size > PAGE_SIZE_MAX:
        raise BadPageSize(page_size, PAGE_SIZE_MAX)
    songs = await store.list(page_current, page_size, songs_filter)
    return SongListResponse(message=songs)


@router.get("/{song_id}/lyrcs", response_model=VersesResponse)
async def get_lyrics(
    song_id: UUID,
    verse_current: int = Query(0, ge=0, description="Index of the first verse"),
    verse_count: Optional[int] = Query(None, ge=0, description=f"Verses per request, at most {VERSE_COUNT_MAX}"),
    store: SongStore = Depends(get_store),
) -> VersesResponse:
    """Return a window of the song's verses (blank-line separated)."""
    if verse_count is None:
        verse_count = VERSE_COUNT_DEFAULT
    if verse_count > VERSE_COUNT_MAX:
        raise BadVerseCount(verse_count, VERSE_COUNT_MAX)
    try:
        verses = await store.lyrics(song_id, verse_current, verse_count)
    except SongNotFoundError:
        raise SongNotFound(song_id) from None
    return VersesResponse(message=verses)
