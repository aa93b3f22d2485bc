# ============================================================================
# FILE: openmusic/services/album_service.py
# ============================================================================
from typing import Dict, List, Tuple
from sqlalchemy.exc import IntegrityError
from openmusic.core.cache import RedisCache
from openmusic.core.exceptions import InvariantError, NotFoundError
from openmusic.core.ids import new_id
from openmusic.db.store import Store
from openmusic.services.mappers import map_album_row, map_song_summary
import logging

logger = logging.getLogger(__name__)

def is_count(value) -> bool:
    # bool is an int subclass, a cached true/false is not a count
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0

class AlbumService:
    """Service layer for albums, album covers and album likes"""

    def __init__(self, store: Store, cache: RedisCache):
        self.store = store
        self.cache = cache

    async def add_album(self, name: str, year: int) -> str:
        """Create a new album and return its id"""
        album_id = new_id("album")
        result = await self.store.query(
            "INSERT INTO albums (id, name, year) VALUES (:id, :name, :year) RETURNING id",
            {"id": album_id, "name": name, "year": year},
        )
        if not result.row_count:
            raise InvariantError("Failed to add album")

        logger.info(f"Album created: {album_id}")
        return result.rows[0]["id"]

    async def get_album_by_id(self, album_id: str) -> Dict:
        """Get a single album, served from cache when possible"""
        async def load() -> Dict:
            result = await self.store.query(
                'SELECT id, name, year, "coverUrl" FROM albums WHERE id = :id',
                {"id": album_id},
            )
            if not result.row_count:
                raise NotFoundError("Album not found")
            return map_album_row(result.rows[0])

        album, _ = await self.cache.read_through(f"album:{album_id}", load)
        return album

    async def get_album_songs(self, album_id: str) -> List[Dict]:
        """Get the songs attached to an album (empty list when there are none)"""
        async def load() -> List[Dict]:
            result = await self.store.query(
                "SELECT id, title, performer FROM songs WHERE album_id = :album_id",
                {"album_id": album_id},
            )
            return [map_song_summary(row) for row in result.rows]

        songs, _ = await self.cache.read_through(f"albumSongs:{album_id}", load)
        return songs

    async def edit_album_by_id(self, album_id: str, name: str, year: int) -> None:
        """Update album name and year"""
        result = await self.store.query(
            "UPDATE albums SET name = :name, year = :year WHERE id = :id RETURNING id",
            {"id": album_id, "name": name, "year": year},
        )
        if not result.row_count:
            raise NotFoundError("Failed to update album. Id not found")

        await self.cache.delete(f"album:{album_id}")
        logger.info(f"Album updated: {album_id}")

    async def delete_album_by_id(self, album_id: str) -> None:
        """Delete an album together with its songs and likes"""
        # Songs and their playlist entries go away through ON DELETE CASCADE, collect them first
        songs = await self.store.query(
            "SELECT id FROM songs WHERE album_id = :album_id",
            {"album_id": album_id},
        )
        playlists = await self.store.query(
            """
            SELECT DISTINCT playlist_songs.playlist_id FROM playlist_songs
            INNER JOIN songs ON songs.id = playlist_songs.song_id
            WHERE songs.album_id = :album_id
            """,
            {"album_id": album_id},
        )
        result = await self.store.query(
            "DELETE FROM albums WHERE id = :id RETURNING id",
            {"id": album_id},
        )
        if not result.row_count:
            raise NotFoundError("Failed to delete album. Id not found")

        await self.cache.delete(
            f"album:{album_id}",
            f"albumSongs:{album_id}",
            f"likes:{album_id}",
            *[f"song:{row['id']}" for row in songs.rows],
            *[f"songsFromPlaylist:{row['playlist_id']}" for row in playlists.rows],
        )
        logger.info(f"Album deleted: {album_id} ({songs.row_count} songs cascaded)")

    async def add_album_cover_by_id(self, album_id: str, cover_url: str) -> None:
        """Store the location of an uploaded album cover"""
        result = await self.store.query(
            'UPDATE albums SET "coverUrl" = :cover WHERE id = :id RETURNING id',
            {"id": album_id, "cover": cover_url},
        )
        if not result.row_count:
            raise NotFoundError("Failed to add album cover. Id not found")

        await self.cache.delete(f"album:{album_id}")
        logger.info(f"Album cover updated: {album_id}")

    async def toggle_like(self, album_id: str, user_id: str) -> bool:
        """
        Like the album if the user has not liked it yet, otherwise unlike it.

        Raises NotFoundError when the album does not exist.

        Returns:
            True if the album is liked by the user after the call
        """
        await self.get_album_by_id(album_id)

        existing = await self.store.query(
            "SELECT id FROM album_likes WHERE album_id = :album_id AND user_id = :user_id",
            {"album_id": album_id, "user_id": user_id},
        )

        if not existing.row_count:
            try:
                result = await self.store.query(
                    "INSERT INTO album_likes (id, album_id, user_id) VALUES (:id, :album_id, :user_id)",
                    {"id": new_id("likes"), "album_id": album_id, "user_id": user_id},
                )
            except IntegrityError as e:
                # A concurrent request inserted the same pair first
                logger.warning(f"Like insert rejected for album {album_id}: {e}")
                raise InvariantError("Failed to like album")
            if not result.row_count:
                raise InvariantError("Failed to like album")
            liked = True
        else:
            result = await self.store.query(
                "DELETE FROM album_likes WHERE album_id = :album_id AND user_id = :user_id",
                {"album_id": album_id, "user_id": user_id},
            )
            if not result.row_count:
                raise InvariantError("Failed to unlike album")
            liked = False

        await self.cache.delete(f"likes:{album_id}")
        logger.info(f"User {user_id} {'liked' if liked else 'unliked'} album {album_id}")
        return liked

    async def get_likes(self, album_id: str) -> Tuple[int, bool]:
        """
        Count likes of an album.

        Returns:
            Tuple of (count, from_cache)
        """
        async def load() -> int:
            result = await self.store.query(
                "SELECT COUNT(*) AS likes FROM album_likes WHERE album_id = :album_id",
                {"album_id": album_id},
            )
            return int(result.rows[0]["likes"])

        likes, from_cache = await self.cache.read_through(
            f"likes:{album_id}", load, validate=is_count
        )
        return likes, from_cache
