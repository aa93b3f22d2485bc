"""Unit tests for the Redis read-through cache."""

import json

import pytest

from openmusic.core.cache import MISS, RedisCache
from openmusic.core.exceptions import NotFoundError


class LoaderSpy:
    """Async loader that records how often the store was consulted."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if isinstance(self.value, Exception):
            raise self.value
        return self.value


class TestCacheLookup:
    """Tests for get() hit/miss reporting."""

    @pytest.mark.asyncio
    async def test_missing_key_is_a_miss(self, cache: RedisCache) -> None:
        assert await cache.get("album:nope") == MISS

    @pytest.mark.asyncio
    async def test_stored_value_is_decoded(self, cache: RedisCache, redis_client) -> None:
        redis_client.data["album:1"] = json.dumps({"id": "album-1", "name": "A"})

        lookup = await cache.get("album:1")

        assert lookup.hit
        assert lookup.value == {"id": "album-1", "name": "A"}

    @pytest.mark.asyncio
    async def test_malformed_entry_is_a_miss(self, cache: RedisCache, redis_client) -> None:
        redis_client.data["album:1"] = "{not json"
        assert not (await cache.get("album:1")).hit

    @pytest.mark.asyncio
    async def test_unreachable_redis_is_a_miss(self, cache: RedisCache, redis_client) -> None:
        redis_client.data["album:1"] = json.dumps({"id": "album-1"})
        redis_client.failing = True
        assert not (await cache.get("album:1")).hit

    @pytest.mark.asyncio
    async def test_cached_zero_is_still_a_hit(self, cache: RedisCache, redis_client) -> None:
        """A falsy payload like a like count of 0 must not be mistaken for a miss."""
        redis_client.data["likes:album-1"] = "0"

        lookup = await cache.get("likes:album-1")

        assert lookup.hit
        assert lookup.value == 0


class TestReadThrough:
    """Tests for the cache-aside read path."""

    @pytest.mark.asyncio
    async def test_miss_loads_and_populates(self, cache: RedisCache, redis_client) -> None:
        loader = LoaderSpy({"id": "song-1"})

        value, from_cache = await cache.read_through("song:song-1", loader)

        assert value == {"id": "song-1"}
        assert from_cache is False
        assert loader.calls == 1
        assert json.loads(redis_client.data["song:song-1"]) == {"id": "song-1"}
        assert redis_client.expirations["song:song-1"] == 60

    @pytest.mark.asyncio
    async def test_hit_skips_loader(self, cache: RedisCache) -> None:
        loader = LoaderSpy(["a", "b"])
        await cache.read_through("albumSongs:album-1", loader)

        value, from_cache = await cache.read_through("albumSongs:album-1", loader)

        assert value == ["a", "b"]
        assert from_cache is True
        assert loader.calls == 1

    @pytest.mark.asyncio
    async def test_not_found_is_not_cached(self, cache: RedisCache, redis_client) -> None:
        loader = LoaderSpy(NotFoundError("Album not found"))

        with pytest.raises(NotFoundError):
            await cache.read_through("album:missing", loader)

        assert "album:missing" not in redis_client.data

    @pytest.mark.asyncio
    async def test_cache_outage_falls_back_to_loader(self, cache: RedisCache, redis_client) -> None:
        redis_client.failing = True
        loader = LoaderSpy({"id": "album-1"})

        first, _ = await cache.read_through("album:album-1", loader)
        second, from_cache = await cache.read_through("album:album-1", loader)

        assert first == second == {"id": "album-1"}
        assert from_cache is False
        assert loader.calls == 2

    @pytest.mark.asyncio
    async def test_rejected_entry_is_reloaded_and_replaced(self, cache: RedisCache, redis_client) -> None:
        redis_client.data["likes:album-1"] = json.dumps([{"id": "likes-1"}])
        loader = LoaderSpy(3)

        value, from_cache = await cache.read_through(
            "likes:album-1", loader, validate=lambda v: isinstance(v, int)
        )

        assert (value, from_cache) == (3, False)
        assert loader.calls == 1
        assert json.loads(redis_client.data["likes:album-1"]) == 3


class TestInvalidation:
    @pytest.mark.asyncio
    async def test_delete_removes_every_key(self, cache: RedisCache, redis_client) -> None:
        await cache.set("album:1", {"id": 1})
        await cache.set("likes:1", 3)

        assert await cache.delete("album:1", "likes:1") is True
        assert redis_client.data == {}

    @pytest.mark.asyncio
    async def test_delete_during_outage_reports_failure(self, cache: RedisCache, redis_client) -> None:
        redis_client.failing = True
        assert await cache.delete("album:1") is False

    @pytest.mark.asyncio
    async def test_ping_reports_outage(self, cache: RedisCache, redis_client) -> None:
        assert await cache.ping() is True
        redis_client.failing = True
        assert await cache.ping() is False
