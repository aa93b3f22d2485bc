# ============================================================================
# FILE: openmusic/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import List, Optional
from openmusic.schemas.song import SongSummary

class PlaylistCreate(BaseModel):
    """Schema for creating a playlist"""
    name: str = Field(..., min_length=1)

class PlaylistSongPayload(BaseModel):
    """Schema for adding or removing a song in a playlist"""
    songId: str = Field(..., min_length=1)

class CollaborationPayload(BaseModel):
    """Schema for adding or removing a playlist collaborator"""
    playlistId: str = Field(..., min_length=1)
    userId: str = Field(..., min_length=1)

class PlaylistSummary(BaseModel):
    """Schema for playlist response"""
    id: str
    name: str
    username: Optional[str] = None

class PlaylistDetail(PlaylistSummary):
    songs: List[SongSummary] = []

class PlaylistIdData(BaseModel):
    playlistId: str

class PlaylistCreatedResponse(BaseModel):
    status: str
    message: str
    data: PlaylistIdData

class PlaylistListData(BaseModel):
    playlists: List[PlaylistSummary]

class PlaylistListResponse(BaseModel):
    status: str
    data: PlaylistListData

class PlaylistDetailData(BaseModel):
    playlist: PlaylistDetail

class PlaylistDetailResponse(BaseModel):
    status: str
    data: PlaylistDetailData

class CollaborationIdData(BaseModel):
    collaborationId: str

class CollaborationCreatedResponse(BaseModel):
    status: str
    message: str
    data: CollaborationIdData
