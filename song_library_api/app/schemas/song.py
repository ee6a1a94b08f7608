"""
Pydantic models for song data.

``SongCreate`` and ``SongUpdate`` are request bodies, ``SongRead`` is
the stored entity returned to clients and ``SongsFilter`` describes the
optional filters of the list endpoint.  Release dates travel over the
wire as ``DD.MM.YYYY`` strings.  The envelope models wrap payloads in
the ``{"message": ...}`` shape shared by all successful responses.
"""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer, field_validator

RELEASE_DATE_FORMAT = "%d.%m.%Y"

EXAMPLE_TEXT = (
    "Oh yeah, aw\nWhat we're livin' in?\nLet me tell ya\n\n"
    "Yeah, it's a wonder man can eat at all\nWhen things are big that should be small"
)


def parse_release_date(value: str) -> date:
    """Parse a ``DD.MM.YYYY`` string; raises ``ValueError`` on bad input."""
    return datetime.strptime(value, RELEASE_DATE_FORMAT).date()


def format_release_date(value: Optional[date]) -> Optional[str]:
    return value.strftime(RELEASE_DATE_FORMAT) if value is not None else None


class _ReleaseDateMixin(BaseModel):
    """Parses and renders ``release_date`` in the wire format.

    Subclasses declare the field themselves so that it comes last in
    the serialized output.
    """

    @field_validator("release_date", mode="before", check_fields=False)
    @classmethod
    def validate_release_date(cls, v):
        if v is None:
            return None
        if isinstance(v, str):
            return parse_release_date(v)
        # Stored rows are mapped from ``date`` objects; numbers and
        # datetimes are not a valid wire format.
        if isinstance(v, date) and not isinstance(v, datetime):
            return v
        raise ValueError("release_date must be a DD.MM.YYYY string")

    @field_serializer("release_date", check_fields=False)
    def serialize_release_date(self, v: Optional[date]) -> Optional[str]:
        return format_release_date(v)


class SongCreate(_ReleaseDateMixin):
    """Schema for creating a song."""

    song_name: str = Field(..., examples=["Virtual Insanity"])
    group_name: str = Field(..., examples=["Jamiroquai"])
    song_text: Optional[str] = Field(None, examples=[EXAMPLE_TEXT])
    link: Optional[str] = Field(None, examples=["https://www.youtube.com/watch?v=4JkIs37a2JE"])
    release_date: Optional[date] = Field(None, examples=["12.08.1996"])


class SongUpdate(_ReleaseDateMixin):
    """Schema for a partial update.

    All fields are optional; ``None`` means "leave the stored value
    untouched", so a field cannot be cleared through this schema.
    """

    song_name: Optional[str] = Field(None, examples=["Virtual Insanity"])
    song_text: Optional[str] = Field(None, examples=[EXAMPLE_TEXT])
    group_name: Optional[str] = Field(None, examples=["Jamiroquai"])
    link: Optional[str] = Field(None, examples=["https://www.youtube.com/watch?v=4JkIs37a2JE"])
    release_date: Optional[date] = Field(None, examples=["12.08.1996"])

    def has_changes(self) -> bool:
        return any(value is not None for value in self.model_dump().values())


class SongRead(_ReleaseDateMixin):
    """A stored song."""

    song_id: UUID
    song_name: Optional[str] = None
    song_text: Optional[str] = None
    group_name: Optional[str] = None
    link: Optional[str] = None
    release_date: Optional[date] = None

    model_config = {
        "from_attributes": True,
    }


class SongsFilter(BaseModel):
    """Optional filters of the list endpoint.

    ``song_name`` and ``group_name`` match as substrings,
    ``release_date`` matches exactly.
    """

    song_name: Optional[str] = None
    group_name: Optional[str] = None
    release_date: Optional[date] = None


class StatusResponse(BaseModel):
    message: str = "ok"


class SongResponse(BaseModel):
    message: SongRead


class SongListResponse(BaseModel):
    message: List[SongRead]


class VersesResponse(BaseModel):
    message: List[str]
