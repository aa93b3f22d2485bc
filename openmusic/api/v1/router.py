# ============================================================================
# FILE: openmusic/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from openmusic.api.v1.endpoints import albums, collaborations, playlists, songs, users

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(albums.router, prefix="/albums", tags=["albums"])
api_router.include_router(songs.router, prefix="/songs", tags=["songs"])
api_router.include_router(playlists.router, prefix="/playlists", tags=["playlists"])
api_router.include_router(collaborations.router, prefix="/collaborations", tags=["collaborations"])
api_router.include_router(users.router, tags=["users"])
