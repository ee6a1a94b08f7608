"""
Top‑level router for version 1 of the API.

Song endpoints are exposed under ``/info``; the application mounts
this router under ``/api/v1``.
"""

from fastapi import APIRouter

from .endpoints import songs

router = APIRouter()

router.include_router(songs.router, prefix="/info", tags=["songs"])
