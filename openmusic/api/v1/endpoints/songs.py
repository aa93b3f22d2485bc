# ============================================================================
# FILE: openmusic/api/v1/endpoints/songs.py
# ============================================================================
from fastapi import APIRouter, Depends, Query, status
from typing import Optional
from openmusic.api.dependencies import get_song_service
from openmusic.schemas.common import MessageResponse
from openmusic.schemas.song import (
    SongCreatedResponse,
    SongDetailResponse,
    SongListResponse,
    SongPayload
)
from openmusic.services.song_service import SongService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", response_model=SongCreatedResponse, status_code=status.HTTP_201_CREATED)
async def post_song(
    payload: SongPayload,
    song_service: SongService = Depends(get_song_service)
):
    """Create a new song, optionally attached to an album"""
    song_id = await song_service.add_song(
        title=payload.title,
        year=payload.year,
        genre=payload.genre,
        performer=payload.performer,
        duration=payload.duration,
        album_id=payload.albumId,
    )
    return {
        "status": "success",
        "message": "Song added",
        "data": {"songId": song_id},
    }

@router.get("", response_model=SongListResponse)
async def get_songs(
    title: Optional[str] = Query(None, description="Case-insensitive title filter"),
    performer: Optional[str] = Query(None, description="Case-insensitive performer filter"),
    song_service: SongService = Depends(get_song_service)
):
    """Search songs by title and/or performer"""
    songs = await song_service.get_songs(title, performer)
    return {"status": "success", "data": {"songs": songs}}

@router.get("/{song_id}", response_model=SongDetailResponse)
async def get_song(
    song_id: str,
    song_service: SongService = Depends(get_song_service)
):
    song = await song_service.get_song_by_id(song_id)
    return {"status": "success", "data": {"song": song}}

@router.put("/{song_id}", response_model=MessageResponse)
async def put_song(
    song_id: str,
    payload: SongPayload,
    song_service: SongService = Depends(get_song_service)
):
    await song_service.edit_song_by_id(
        song_id,
        title=payload.title,
        year=payload.year,
        genre=payload.genre,
        performer=payload.performer,
        duration=payload.duration,
        album_id=payload.albumId,
    )
    return {"status": "success", "message": "Song updated"}

@router.delete("/{song_id}", response_model=MessageResponse)
async def delete_song(
    song_id: str,
    song_service: SongService = Depends(get_song_service)
):
    await song_service.delete_song_by_id(song_id)
    return {"status": "success", "message": "Song deleted"}
