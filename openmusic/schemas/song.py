# ============================================================================
# FILE: openmusic/schemas/song.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import List, Optional

class SongPayload(BaseModel):
    """Schema for creating or updating a song"""
    title: str = Field(..., min_length=1)
    year: int
    genre: str = Field(..., min_length=1)
    performer: str = Field(..., min_length=1)
    duration: Optional[int] = None  # Duration in seconds
    albumId: Optional[str] = None

class SongSummary(BaseModel):
    """Song as listed in searches, albums and playlists"""
    id: str
    title: str
    performer: str

class SongDetail(SongSummary):
    year: int
    genre: str
    duration: Optional[int] = None
    albumId: Optional[str] = None

class SongIdData(BaseModel):
    songId: str

class SongCreatedResponse(BaseModel):
    status: str
    message: str
    data: SongIdData

class SongListData(BaseModel):
    songs: List[SongSummary]

class SongListResponse(BaseModel):
    status: str
    data: SongListData

class SongDetailData(BaseModel):
    song: SongDetail

class SongDetailResponse(BaseModel):
    status: str
    data: SongDetailData
