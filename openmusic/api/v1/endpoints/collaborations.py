# ============================================================================
# FILE: openmusic/api/v1/endpoints/collaborations.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from openmusic.api.dependencies import (
    get_collaboration_service,
    get_playlist_service,
    get_user_service,
    require_current_user
)
from openmusic.schemas.common import MessageResponse
from openmusic.schemas.playlist import CollaborationCreatedResponse, CollaborationPayload
from openmusic.services.collaboration_service import CollaborationService
from openmusic.services.playlist_service import PlaylistService
from openmusic.services.user_service import UserService

router = APIRouter()

@router.post("", response_model=CollaborationCreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_collaboration(
    payload: CollaborationPayload,
    collaboration_service: CollaborationService = Depends(get_collaboration_service),
    playlist_service: PlaylistService = Depends(get_playlist_service),
    user_service: UserService = Depends(get_user_service),
    user_id: str = Depends(require_current_user)
):
    """
    Let another user edit a playlist
    Requires authentication and ownership
    """
    await playlist_service.verify_playlist_owner(payload.playlistId, user_id)
    await user_service.get_user_by_id(payload.userId)
    collaboration_id = await collaboration_service.add_collaboration(payload.playlistId, payload.userId)
    return {
        "status": "success",
        "message": "Collaboration added",
        "data": {"collaborationId": collaboration_id},
    }

@router.delete("", response_model=MessageResponse)
async def delete_collaboration(
    payload: CollaborationPayload,
    collaboration_service: CollaborationService = Depends(get_collaboration_service),
    playlist_service: PlaylistService = Depends(get_playlist_service),
    user_id: str = Depends(require_current_user)
):
    """
    Revoke a collaborator
    Requires authentication and ownership
    """
    await playlist_service.verify_playlist_owner(payload.playlistId, user_id)
    await collaboration_service.delete_collaboration(payload.playlistId, payload.userId)
    return {"status": "success", "message": "Collaboration deleted"}
