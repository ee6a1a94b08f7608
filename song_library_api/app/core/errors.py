"""
Error kinds returned by the API.

Every failure is answered with the same envelope::

    {"error": {"type": "<kind>", "detail": "<human readable text>"}}

``ServiceError`` subclasses are raised from the endpoints and rendered
by the exception handlers registered in ``main``.  The ``type`` strings
are stable and part of the public contract.
"""

from typing import Any, Dict
from uuid import UUID

from fastapi import status


class ServiceError(Exception):
    """Base class for errors rendered into the error envelope."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    type: str = "ServiceError"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def to_response(self) -> Dict[str, Any]:
        return {"error": {"type": self.type, "detail": self.detail}}


class SongNotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    type = "SongNotFound"

    def __init__(self, song_id: UUID) -> None:
        super().__init__(f"Song with id {song_id} is not found.")


class WrongParameters(ServiceError):
    type = "WrongParameters"

    def __init__(self) -> None:
        super().__init__("Wrong parameters for endpoint. Consider reading documentation.")


class BadPageSize(ServiceError):
    type = "BadPageSize"

    def __init__(self, supplied: int, maximum: int) -> None:
        super().__init__(f"Page size more than {maximum} is not allowed. Yours is {supplied}.")


class BadVerseCount(ServiceError):
    type = "BadVerseCount"

    def __init__(self, supplied: int, maximum: int) -> None:
        super().__init__(f"Verse count more than {maximum} is not allowed. Yours is {supplied}.")
