# ============================================================================
# FILE: openmusic/schemas/album.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import List, Optional
from openmusic.schemas.song import SongSummary

class AlbumPayload(BaseModel):
    """Schema for creating or updating an album"""
    name: str = Field(..., min_length=1)
    year: int

class AlbumIdData(BaseModel):
    albumId: str

class AlbumCreatedResponse(BaseModel):
    status: str
    message: str
    data: AlbumIdData

class AlbumDetail(BaseModel):
    """Album together with the songs attached to it"""
    id: str
    name: str
    year: int
    coverUrl: Optional[str] = None
    songs: List[SongSummary] = []

class AlbumDetailData(BaseModel):
    album: AlbumDetail

class AlbumDetailResponse(BaseModel):
    status: str
    data: AlbumDetailData

class LikeToggleData(BaseModel):
    liked: bool

class LikeToggleResponse(BaseModel):
    status: str
    message: str
    data: LikeToggleData

class LikesData(BaseModel):
    likes: int

class LikesResponse(BaseModel):
    status: str
    data: LikesData
