"""Shared fixtures: a throwaway SQLite store, an in-memory Redis double and an HTTP client."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError

from openmusic.core.cache import RedisCache
from openmusic.db.session import create_engine, init_db
from openmusic.db.store import Store
from openmusic.services.album_service import AlbumService
from openmusic.services.collaboration_service import CollaborationService
from openmusic.services.playlist_service import PlaylistService
from openmusic.services.song_service import SongService
from openmusic.services.storage_service import StorageService
from openmusic.services.user_service import UserService


class InMemoryRedis:
    """Async stand-in for the redis client covering the calls RedisCache makes.

    Set ``failing = True`` to make every call raise like an unreachable server.
    """

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.expirations: dict[str, int | None] = {}
        self.failing = False

    def _check(self) -> None:
        if self.failing:
            raise RedisConnectionError("Connection refused")

    async def ping(self) -> bool:
        self._check()
        return True

    async def get(self, key: str) -> str | None:
        self._check()
        return self.data.get(key)

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        self._check()
        self.data[key] = value
        self.expirations[key] = ex
        return True

    async def delete(self, *keys: str) -> int:
        self._check()
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
        return removed

    async def aclose(self) -> None:
        pass


@pytest_asyncio.fixture
async def store(tmp_path) -> AsyncIterator[Store]:
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'openmusic-test.db'}")
    await init_db(engine)
    store = Store(engine)
    yield store
    await store.close()


@pytest.fixture
def redis_client() -> InMemoryRedis:
    return InMemoryRedis()


@pytest.fixture
def cache(redis_client: InMemoryRedis) -> RedisCache:
    return RedisCache(redis_client, expire=60)


@pytest.fixture
def album_service(store: Store, cache: RedisCache) -> AlbumService:
    return AlbumService(store, cache)


@pytest.fixture
def song_service(store: Store, cache: RedisCache) -> SongService:
    return SongService(store, cache)


@pytest.fixture
def collaboration_service(store: Store) -> CollaborationService:
    return CollaborationService(store)


@pytest.fixture
def playlist_service(
    store: Store, cache: RedisCache, collaboration_service: CollaborationService
) -> PlaylistService:
    return PlaylistService(store, cache, collaboration_service)


@pytest.fixture
def user_service(store: Store) -> UserService:
    return UserService(store)


@pytest_asyncio.fixture
async def alice(user_service: UserService) -> str:
    return await user_service.add_user("alice", "secret", "Alice Liddell")


@pytest_asyncio.fixture
async def bob(user_service: UserService) -> str:
    return await user_service.add_user("bob", "hunter2", "Bob Marley")


@pytest.fixture
def storage_service(tmp_path) -> StorageService:
    return StorageService(folder=str(tmp_path / "covers"), max_bytes=1024)


@pytest_asyncio.fixture
async def client(
    store: Store, cache: RedisCache, storage_service: StorageService
) -> AsyncIterator[AsyncClient]:
    from openmusic.api.dependencies import get_cache, get_storage_service
    from openmusic.db.session import get_store
    from openmusic.main import app

    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_cache] = lambda: cache
    app.dependency_overrides[get_storage_service] = lambda: storage_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
