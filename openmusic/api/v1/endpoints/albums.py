# ============================================================================
# FILE: openmusic/api/v1/endpoints/albums.py
# ============================================================================
from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import FileResponse, JSONResponse
from openmusic.api.dependencies import (
    get_album_service,
    get_storage_service,
    require_current_user
)
from openmusic.core.exceptions import NotFoundError
from openmusic.schemas.album import (
    AlbumCreatedResponse,
    AlbumDetailResponse,
    AlbumPayload,
    LikeToggleResponse,
    LikesResponse
)
from openmusic.schemas.common import MessageResponse
from openmusic.services.album_service import AlbumService
from openmusic.services.storage_service import StorageService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", response_model=AlbumCreatedResponse, status_code=status.HTTP_201_CREATED)
async def post_album(
    payload: AlbumPayload,
    album_service: AlbumService = Depends(get_album_service)
):
    """Create a new album"""
    album_id = await album_service.add_album(payload.name, payload.year)
    return {
        "status": "success",
        "message": "Album added",
        "data": {"albumId": album_id},
    }

@router.get("/images/{filename}")
async def get_album_cover(
    filename: str,
    storage_service: StorageService = Depends(get_storage_service)
):
    """Serve an uploaded album cover"""
    path = storage_service.file_path(filename)
    if not path.is_file():
        raise NotFoundError("Cover not found")
    return FileResponse(path)

@router.get("/{album_id}", response_model=AlbumDetailResponse)
async def get_album(
    album_id: str,
    album_service: AlbumService = Depends(get_album_service)
):
    """Get an album together with its songs"""
    album = await album_service.get_album_by_id(album_id)
    songs = await album_service.get_album_songs(album_id)
    return {
        "status": "success",
        "data": {"album": {**album, "songs": songs}},
    }

@router.put("/{album_id}", response_model=MessageResponse)
async def put_album(
    album_id: str,
    payload: AlbumPayload,
    album_service: AlbumService = Depends(get_album_service)
):
    """Update album name and year"""
    await album_service.edit_album_by_id(album_id, payload.name, payload.year)
    return {"status": "success", "message": "Album updated"}

@router.delete("/{album_id}", response_model=MessageResponse)
async def delete_album(
    album_id: str,
    album_service: AlbumService = Depends(get_album_service)
):
    """Delete an album"""
    await album_service.delete_album_by_id(album_id)
    return {"status": "success", "message": "Album deleted"}

@router.post("/{album_id}/covers", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def post_album_cover(
    album_id: str,
    cover: UploadFile = File(...),
    album_service: AlbumService = Depends(get_album_service),
    storage_service: StorageService = Depends(get_storage_service)
):
    """Upload an album cover image"""
    storage_service.validate_image_headers(cover.content_type)
    # Fail before writing the file when the album does not exist
    await album_service.get_album_by_id(album_id)
    filename = await storage_service.write_file(cover)
    try:
        await album_service.add_album_cover_by_id(album_id, storage_service.cover_url(filename))
    except NotFoundError:
        # The album was deleted after the check, nothing references the file
        await storage_service.remove_file(filename)
        raise
    return {"status": "success", "message": "Cover uploaded"}

@router.post("/{album_id}/likes", response_model=LikeToggleResponse, status_code=status.HTTP_201_CREATED)
async def post_album_like(
    album_id: str,
    album_service: AlbumService = Depends(get_album_service),
    user_id: str = Depends(require_current_user)
):
    """
    Like or unlike an album
    Requires authentication
    """
    liked = await album_service.toggle_like(album_id, user_id)
    return {
        "status": "success",
        "message": "Album liked" if liked else "Album unliked",
        "data": {"liked": liked},
    }

@router.get("/{album_id}/likes", response_model=LikesResponse)
async def get_album_likes(
    album_id: str,
    album_service: AlbumService = Depends(get_album_service)
):
    """Get the number of likes of an album"""
    likes, from_cache = await album_service.get_likes(album_id)
    response = JSONResponse(content={"status": "success", "data": {"likes": likes}})
    if from_cache:
        response.headers["X-Data-Source"] = "cache"
    return response
