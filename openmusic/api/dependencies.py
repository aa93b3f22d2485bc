# ============================================================================
# FILE: openmusic/api/dependencies.py
# ============================================================================
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from typing import Optional
from openmusic.core.cache import RedisCache, cache
from openmusic.core.exceptions import AuthenticationError
from openmusic.core.security import decode_access_token
from openmusic.db.session import get_store
from openmusic.db.store import Store
from openmusic.services.album_service import AlbumService
from openmusic.services.collaboration_service import CollaborationService
from openmusic.services.playlist_service import PlaylistService
from openmusic.services.song_service import SongService
from openmusic.services.storage_service import StorageService
from openmusic.services.user_service import UserService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/authentications", auto_error=False)

storage_service = StorageService()

def get_cache() -> RedisCache:
    return cache

def get_storage_service() -> StorageService:
    return storage_service

def get_album_service(
    store: Store = Depends(get_store),
    cache: RedisCache = Depends(get_cache)
) -> AlbumService:
    return AlbumService(store, cache)

def get_song_service(
    store: Store = Depends(get_store),
    cache: RedisCache = Depends(get_cache)
) -> SongService:
    return SongService(store, cache)

def get_collaboration_service(store: Store = Depends(get_store)) -> CollaborationService:
    return CollaborationService(store)

def get_playlist_service(
    store: Store = Depends(get_store),
    cache: RedisCache = Depends(get_cache),
    collaboration_service: CollaborationService = Depends(get_collaboration_service)
) -> PlaylistService:
    return PlaylistService(store, cache, collaboration_service)

def get_user_service(store: Store = Depends(get_store)) -> UserService:
    return UserService(store)

def require_current_user(token: Optional[str] = Depends(oauth2_scheme)) -> str:
    """
    Require an authenticated user and return their id (raises 401 otherwise)
    Use this dependency for protected endpoints
    """
    user_id = None
    if token:
        try:
            user_id = decode_access_token(token).get("sub")
        except AuthenticationError:
            user_id = None
    
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
