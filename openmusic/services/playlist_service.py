# ============================================================================
# FILE: openmusic/services/playlist_service.py
# ============================================================================
from typing import Dict, List
from sqlalchemy.exc import IntegrityError
from openmusic.core.cache import RedisCache
from openmusic.core.exceptions import AuthorizationError, ClientError, InvariantError, NotFoundError
from openmusic.core.ids import new_id
from openmusic.db.store import Store
from openmusic.services.collaboration_service import CollaborationService
from openmusic.services.mappers import map_playlist_row, map_song_summary
import logging

logger = logging.getLogger(__name__)

class PlaylistService:
    """Service layer for playlist operations"""

    def __init__(self, store: Store, cache: RedisCache, collaboration_service: CollaborationService):
        self.store = store
        self.cache = cache
        self.collaboration_service = collaboration_service

    async def add_playlist(self, name: str, owner: str) -> str:
        """Create a new playlist for a user"""
        playlist_id = new_id("playlist")
        try:
            result = await self.store.query(
                "INSERT INTO playlists (id, name, owner) VALUES (:id, :name, :owner) RETURNING id",
                {"id": playlist_id, "name": name, "owner": owner},
            )
        except IntegrityError as e:
            logger.warning(f"Playlist insert rejected: {e}")
            raise InvariantError("Failed to add playlist")

        if not result.row_count:
            raise InvariantError("Failed to add playlist")

        await self.cache.delete(f"playlists:{owner}")
        logger.info(f"Playlist created: {playlist_id} for user {owner}")
        return result.rows[0]["id"]

    async def get_playlists(self, owner: str) -> List[Dict]:
        """Get all playlists owned by a user"""
        async def load() -> List[Dict]:
            result = await self.store.query(
                """
                SELECT playlists.id, playlists.name, users.username FROM playlists
                LEFT JOIN users ON users.id = playlists.owner
                WHERE playlists.owner = :owner
                """,
                {"owner": owner},
            )
            return [map_playlist_row(row) for row in result.rows]

        playlists, _ = await self.cache.read_through(f"playlists:{owner}", load)
        return playlists

    async def delete_playlist_by_id(self, playlist_id: str) -> None:
        """Delete a playlist"""
        result = await self.store.query(
            "DELETE FROM playlists WHERE id = :id RETURNING id, owner",
            {"id": playlist_id},
        )
        if not result.row_count:
            raise NotFoundError("Failed to delete playlist. Id not found")

        owner = result.rows[0]["owner"]
        await self.cache.delete(
            f"playlists:{owner}",
            f"Playlist:{playlist_id}",
            f"songsFromPlaylist:{playlist_id}",
        )
        logger.info(f"Playlist deleted: {playlist_id}")

    async def get_playlist_by_id(self, playlist_id: str) -> Dict:
        """Get playlist details with the owner's username"""
        async def load() -> Dict:
            result = await self.store.query(
                """
                SELECT playlists.id, playlists.name, users.username FROM playlists
                LEFT JOIN users ON users.id = playlists.owner
                WHERE playlists.id = :id
                """,
                {"id": playlist_id},
            )
            if not result.row_count:
                raise NotFoundError("Playlist not found")
            return map_playlist_row(result.rows[0])

        # Key casing differs from playlists:<owner>, existing cache entries depend on it
        playlist, _ = await self.cache.read_through(f"Playlist:{playlist_id}", load)
        return playlist

    async def add_song_to_playlist(self, playlist_id: str, song_id: str) -> str:
        """Add a song to a playlist"""
        try:
            result = await self.store.query(
                """
                INSERT INTO playlist_songs (id, playlist_id, song_id)
                VALUES (:id, :playlist_id, :song_id)
                RETURNING id
                """,
                {"id": new_id("playlist-song"), "playlist_id": playlist_id, "song_id": song_id},
            )
        except IntegrityError as e:
            logger.warning(f"Playlist song insert rejected: {e}")
            raise InvariantError("Failed to add song to playlist")

        if not result.row_count:
            raise InvariantError("Failed to add song to playlist")

        await self.cache.delete(f"songsFromPlaylist:{playlist_id}")
        logger.info(f"Song added to playlist {playlist_id}: {song_id}")
        return result.rows[0]["id"]

    async def get_songs_from_playlist(self, playlist_id: str) -> List[Dict]:
        """Get the songs of a playlist (empty list for an empty playlist)"""
        async def load() -> List[Dict]:
            result = await self.store.query(
                """
                SELECT songs.id, songs.title, songs.performer FROM playlist_songs
                INNER JOIN songs ON songs.id = playlist_songs.song_id
                WHERE playlist_songs.playlist_id = :playlist_id
                """,
                {"playlist_id": playlist_id},
            )
            return [map_song_summary(row) for row in result.rows]

        songs, _ = await self.cache.read_through(f"songsFromPlaylist:{playlist_id}", load)
        return songs

    async def delete_song_from_playlist(self, playlist_id: str, song_id: str) -> None:
        """Remove a song from a playlist"""
        result = await self.store.query(
            """
            DELETE FROM playlist_songs
            WHERE playlist_id = :playlist_id AND song_id = :song_id
            RETURNING id
            """,
            {"playlist_id": playlist_id, "song_id": song_id},
        )
        if not result.row_count:
            raise NotFoundError("Failed to remove song from playlist. Id not found")

        await self.cache.delete(f"songsFromPlaylist:{playlist_id}")
        logger.info(f"Song removed from playlist {playlist_id}: {song_id}")

    async def verify_playlist_owner(self, playlist_id: str, user_id: str) -> None:
        """Raise unless the playlist exists and belongs to the user (uncached)"""
        result = await self.store.query(
            "SELECT id, owner FROM playlists WHERE id = :id",
            {"id": playlist_id},
        )
        if not result.row_count:
            raise NotFoundError("Playlist not found")

        if result.rows[0]["owner"] != user_id:
            raise AuthorizationError("You are not allowed to access this resource")

    async def verify_playlist_access(self, playlist_id: str, user_id: str) -> None:
        """
        Allow the playlist owner or a collaborator.

        NotFoundError is raised as soon as the playlist is known to be
        missing. Anyone else gets the AuthorizationError of the ownership
        check, whatever the collaborator check reported.
        """
        try:
            await self.verify_playlist_owner(playlist_id, user_id)
        except AuthorizationError as error:
            try:
                await self.collaboration_service.verify_collaborator(playlist_id, user_id)
            except ClientError:
                raise error
