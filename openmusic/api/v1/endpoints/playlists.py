# ============================================================================
# FILE: openmusic/api/v1/endpoints/playlists.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from openmusic.api.dependencies import (
    get_playlist_service,
    get_song_service,
    require_current_user
)
from openmusic.schemas.common import MessageResponse
from openmusic.schemas.playlist import (
    PlaylistCreate,
    PlaylistCreatedResponse,
    PlaylistDetailResponse,
    PlaylistListResponse,
    PlaylistSongPayload
)
from openmusic.services.playlist_service import PlaylistService
from openmusic.services.song_service import SongService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", response_model=PlaylistCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_playlist(
    payload: PlaylistCreate,
    playlist_service: PlaylistService = Depends(get_playlist_service),
    user_id: str = Depends(require_current_user)
):
    """
    Create a new playlist
    Requires authentication
    """
    playlist_id = await playlist_service.add_playlist(payload.name, user_id)
    return {
        "status": "success",
        "message": "Playlist added",
        "data": {"playlistId": playlist_id},
    }

@router.get("", response_model=PlaylistListResponse)
async def get_my_playlists(
    playlist_service: PlaylistService = Depends(get_playlist_service),
    user_id: str = Depends(require_current_user)
):
    """
    Get all playlists for the current user
    Requires authentication
    """
    playlists = await playlist_service.get_playlists(user_id)
    return {"status": "success", "data": {"playlists": playlists}}

@router.delete("/{playlist_id}", response_model=MessageResponse)
async def delete_playlist(
    playlist_id: str,
    playlist_service: PlaylistService = Depends(get_playlist_service),
    user_id: str = Depends(require_current_user)
):
    """
    Delete a playlist
    Requires authentication and ownership
    """
    await playlist_service.verify_playlist_owner(playlist_id, user_id)
    await playlist_service.delete_playlist_by_id(playlist_id)
    return {"status": "success", "message": "Playlist deleted"}

@router.post("/{playlist_id}/songs", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def add_song_to_playlist(
    playlist_id: str,
    payload: PlaylistSongPayload,
    playlist_service: PlaylistService = Depends(get_playlist_service),
    song_service: SongService = Depends(get_song_service),
    user_id: str = Depends(require_current_user)
):
    """
    Add a song to a playlist
    Requires authentication and ownership or collaboration
    """
    await playlist_service.verify_playlist_access(playlist_id, user_id)
    await song_service.verify_song_exists(payload.songId)
    await playlist_service.add_song_to_playlist(playlist_id, payload.songId)
    return {"status": "success", "message": "Song added to playlist"}

@router.get("/{playlist_id}/songs", response_model=PlaylistDetailResponse)
async def get_playlist_songs(
    playlist_id: str,
    playlist_service: PlaylistService = Depends(get_playlist_service),
    user_id: str = Depends(require_current_user)
):
    """
    Get a playlist with its songs
    Requires authentication and ownership or collaboration
    """
    await playlist_service.verify_playlist_access(playlist_id, user_id)
    playlist = await playlist_service.get_playlist_by_id(playlist_id)
    songs = await playlist_service.get_songs_from_playlist(playlist_id)
    return {
        "status": "success",
        "data": {"playlist": {**playlist, "songs": songs}},
    }

@router.delete("/{playlist_id}/songs", response_model=MessageResponse)
async def remove_song_from_playlist(
    playlist_id: str,
    payload: PlaylistSongPayload,
    playlist_service: PlaylistService = Depends(get_playlist_service),
    user_id: str = Depends(require_current_user)
):
    """
    Remove a song from a playlist
    Requires authentication and ownership or collaboration
    """
    await playlist_service.verify_playlist_access(playlist_id, user_id)
    await playlist_service.delete_song_from_playlist(playlist_id, payload.songId)
    return {"status": "success", "message": "Song removed from playlist"}
