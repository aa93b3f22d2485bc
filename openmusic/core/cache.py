# ============================================================================
# FILE: openmusic/core/cache.py
# ============================================================================
import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Tuple
import redis.asyncio as redis
from openmusic.config import settings
import logging

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class CacheLookup:
    """Result of a cache read: either a hit carrying the decoded value or a miss"""
    hit: bool
    value: Any = None

MISS = CacheLookup(hit=False)

class RedisCache:
    """Async Redis cache helper used by the resource services.

    The cache is an optimization only: every failure on the Redis side
    (connection refused, timeout, garbage in a key) is logged and turned
    into a miss or a no-op, never into an exception for the caller.
    """
    
    def __init__(self, redis_client=None, expire: Optional[int] = None):
        if redis_client is None:
            redis_client = redis.from_url(settings.REDIS_URL, decode_responses=True)
        self.redis_client = redis_client
        self.expire = expire or settings.CACHE_EXPIRE_SECONDS
    
    async def ping(self) -> bool:
        """Check that Redis answers, used at startup for logging only"""
        try:
            await self.redis_client.ping()
            logger.info("Redis connection established")
            return True
        except Exception as e:
            logger.warning(f"Redis connection failed: {e}. Reads will fall back to the database.")
            return False
    
    async def get(self, key: str) -> CacheLookup:
        """Get a cache value, any failure is reported as a miss"""
        try:
            value = await self.redis_client.get(key)
        except Exception as e:
            logger.error(f"Cache get error for {key}: {e}")
            return MISS
        
        if value is None:
            return MISS
        
        try:
            return CacheLookup(hit=True, value=json.loads(value))
        except ValueError as e:
            logger.warning(f"Discarding malformed cache entry {key}: {e}")
            return MISS
    
    async def set(self, key: str, value: Any, expire: Optional[int] = None) -> bool:
        """Set a cache value, the default TTL applies unless overridden"""
        try:
            serialized = json.dumps(value)
            await self.redis_client.set(key, serialized, ex=expire or self.expire)
            return True
        except Exception as e:
            logger.error(f"Cache set error for {key}: {e}")
            return False
    
    async def delete(self, *keys: str) -> bool:
        """Delete one or more cache keys"""
        if not keys:
            return True
        
        try:
            await self.redis_client.delete(*keys)
            return True
        except Exception as e:
            logger.error(f"Cache delete error for {keys}: {e}")
            return False
    
    async def read_through(
        self,
        key: str,
        loader: Callable[[], Awaitable[Any]],
        validate: Optional[Callable[[Any], bool]] = None,
    ) -> Tuple[Any, bool]:
        """
        Cache-aside read.

        Returns the cached value when present, otherwise awaits ``loader``,
        stores its result under ``key`` and returns it. Errors raised by the
        loader (NotFoundError for absent rows, store failures) propagate and
        leave the cache untouched.

        A cached value rejected by ``validate`` counts as a miss and is
        overwritten with the loaded value.

        Returns:
            Tuple of (value, from_cache)
        """
        cached = await self.get(key)
        if cached.hit:
            if validate is None or validate(cached.value):
                logger.debug(f"Cache hit: {key}")
                return cached.value, True
            logger.warning(f"Discarding cache entry {key} with unexpected shape")

        value = await loader()
        await self.set(key, value)
        return value, False
    
    async def close(self) -> None:
        try:
            await self.redis_client.aclose()
        except Exception as e:
            logger.warning(f"Error closing Redis connection: {e}")

# Singleton instance
cache = RedisCache()
