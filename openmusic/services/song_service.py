# ============================================================================
# FILE: openmusic/services/song_service.py
# ============================================================================
from typing import Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from openmusic.core.cache import RedisCache
from openmusic.core.exceptions import InvariantError, NotFoundError
from openmusic.core.ids import new_id
from openmusic.db.store import Store
from openmusic.services.mappers import map_song_row, map_song_summary
import logging

logger = logging.getLogger(__name__)

class SongService:
    """Service layer for song operations"""

    def __init__(self, store: Store, cache: RedisCache):
        self.store = store
        self.cache = cache

    async def add_song(
        self,
        title: str,
        year: int,
        genre: str,
        performer: str,
        duration: Optional[int] = None,
        album_id: Optional[str] = None,
    ) -> str:
        """Create a new song and return its id"""
        song_id = new_id("song")
        try:
            result = await self.store.query(
                """
                INSERT INTO songs (id, title, year, performer, genre, duration, album_id)
                VALUES (:id, :title, :year, :performer, :genre, :duration, :album_id)
                RETURNING id
                """,
                {
                    "id": song_id,
                    "title": title,
                    "year": year,
                    "performer": performer,
                    "genre": genre,
                    "duration": duration,
                    "album_id": album_id,
                },
            )
        except IntegrityError as e:
            logger.warning(f"Song insert rejected: {e}")
            raise InvariantError("Failed to add song. Album does not exist")

        if not result.row_count:
            raise InvariantError("Failed to add song")

        # song:<id> is not evicted, a fresh id cannot have a cache entry yet
        if album_id:
            await self.cache.delete(f"albumSongs:{album_id}")

        logger.info(f"Song created: {song_id}")
        return result.rows[0]["id"]

    async def get_songs(self, title: Optional[str] = None, performer: Optional[str] = None) -> List[Dict]:
        """
        List songs, optionally filtered by case-insensitive substring
        matches on title and/or performer. Not cached.
        """
        conditions = []
        params = {}
        if title:
            conditions.append("LOWER(title) LIKE LOWER(:title)")
            params["title"] = f"%{title}%"
        if performer:
            conditions.append("LOWER(performer) LIKE LOWER(:performer)")
            params["performer"] = f"%{performer}%"

        sql = "SELECT id, title, performer FROM songs"
        if conditions:
            sql += " WHERE " + " AND ".join(conditions)

        result = await self.store.query(sql, params)
        return [map_song_summary(row) for row in result.rows]

    async def get_song_by_id(self, song_id: str) -> Dict:
        """Get a single song, served from cache when possible"""
        async def load() -> Dict:
            result = await self.store.query(
                """
                SELECT id, title, year, performer, genre, duration, album_id
                FROM songs WHERE id = :id
                """,
                {"id": song_id},
            )
            if not result.row_count:
                raise NotFoundError("Song not found")
            return map_song_row(result.rows[0])

        song, _ = await self.cache.read_through(f"song:{song_id}", load)
        return song

    async def edit_song_by_id(
        self,
        song_id: str,
        title: str,
        year: int,
        genre: str,
        performer: str,
        duration: Optional[int] = None,
        album_id: Optional[str] = None,
    ) -> None:
        """Replace all fields of a song"""
        # The album the song leaves and the playlists showing it both go stale
        stale_keys = await self._dependent_cache_keys(song_id)
        try:
            result = await self.store.query(
                """
                UPDATE songs
                SET title = :title, year = :year, performer = :performer,
                    genre = :genre, duration = :duration, album_id = :album_id
                WHERE id = :id
                RETURNING id, album_id
                """,
                {
                    "id": song_id,
                    "title": title,
                    "year": year,
                    "performer": performer,
                    "genre": genre,
                    "duration": duration,
                    "album_id": album_id,
                },
            )
        except IntegrityError as e:
            logger.warning(f"Song update rejected: {e}")
            raise InvariantError("Failed to update song. Album does not exist")

        if not result.row_count:
            raise NotFoundError("Failed to update song. Id not found")

        keys = [f"song:{song_id}", *stale_keys]
        if album_id:
            keys.append(f"albumSongs:{album_id}")
        await self.cache.delete(*keys)
        logger.info(f"Song updated: {song_id}")

    async def delete_song_by_id(self, song_id: str) -> None:
        """Delete a song"""
        # playlist_songs rows go away through ON DELETE CASCADE, collect them first
        stale_keys = await self._dependent_cache_keys(song_id)
        result = await self.store.query(
            "DELETE FROM songs WHERE id = :id RETURNING id",
            {"id": song_id},
        )
        if not result.row_count:
            raise NotFoundError("Failed to delete song. Id not found")

        await self.cache.delete(f"song:{song_id}", *stale_keys)
        logger.info(f"Song deleted: {song_id}")

    async def _dependent_cache_keys(self, song_id: str) -> List[str]:
        """Keys of the album and playlist listings that currently include the song"""
        keys = []
        album = await self.store.query(
            "SELECT album_id FROM songs WHERE id = :id",
            {"id": song_id},
        )
        if album.row_count and album.rows[0]["album_id"]:
            keys.append(f"albumSongs:{album.rows[0]['album_id']}")

        playlists = await self.store.query(
            "SELECT playlist_id FROM playlist_songs WHERE song_id = :song_id",
            {"song_id": song_id},
        )
        keys.extend(f"songsFromPlaylist:{row['playlist_id']}" for row in playlists.rows)
        return keys

    async def verify_song_exists(self, song_id: str) -> None:
        """Raise NotFoundError unless the song exists (uncached)"""
        result = await self.store.query(
            "SELECT id FROM songs WHERE id = :id",
            {"id": song_id},
        )
        if not result.row_count:
            raise NotFoundError("Song not found")
