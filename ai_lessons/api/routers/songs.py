"""
Structured output API endpoints.

Routes:
- GET /songs/list/{artist} - Songs as a JSON array
- GET /songs/map/{artist} - Songs as a JSON object
- GET /songs/record/{artist} - Songs as an ArtistSongs record

Dependencies: ai_lessons.application.services.songs_service
System role: Structured output HTTP API
"""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from ai_lessons.api.deps import get_songs_service
from ai_lessons.api.error_handling import handle_lesson_errors
from ai_lessons.application.services.songs_service import SongsService
from ai_lessons.models.songs import ArtistSongs

router = APIRouter(prefix="/songs", tags=["songs"])


@router.get("/list/{artist}", response_model=list[str])
@handle_lesson_errors
async def songs_list(
    artist: str,
    songs_service: SongsService = Depends(get_songs_service),
) -> list[str]:
    """Songs by an artist as an ordered list."""
    return await run_in_threadpool(songs_service.songs_list, artist)


@router.get("/map/{artist}", response_model=dict[str, Any])
@handle_lesson_errors
async def songs_map(
    artist: str,
    songs_service: SongsService = Depends(get_songs_service),
) -> dict[str, Any]:
    """Songs by an artist as a mapping."""
    return await run_in_threadpool(songs_service.songs_map, artist)


@router.get("/record/{artist}", response_model=ArtistSongs)
@handle_lesson_errors
async def songs_record(
    artist: str,
    songs_service: SongsService = Depends(get_songs_service),
) -> ArtistSongs:
    """Songs by an artist as a fixed-schema record."""
    return await run_in_threadpool(songs_service.songs_record, artist)
