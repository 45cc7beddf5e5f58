"""Redis cache adapter."""

from __future__ import annotations

import math
import pickle
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

# Raised by pickle for truncated data or classes that no longer import
_UNREADABLE = (pickle.UnpicklingError, EOFError, AttributeError, ImportError, ValueError)


class AsyncRedisCache:
    """Async Redis cache adapter.

    Values are pickled, so only point this at a Redis instance you trust.
    Expiration is left to Redis.
    """

    def __init__(
        self,
        client: Any,  # redis.asyncio.Redis
        *,
        prefix: str = "enka",
    ) -> None:
        self._client = client
        self._prefix = prefix

    def _cache_key(self, key: str) -> str:
        """Generate full Redis key for cache entries."""
        return f"{self._prefix}:cache:{key}"

    async def get(self, key: str) -> object | None:
        """Get a cached value by key."""
        redis_key = self._cache_key(key)
        data = await self._client.get(redis_key)
        if data is None:
            return None
        try:
            return pickle.loads(data)
        except _UNREADABLE as exc:
            logger.debug(
                "cache_entry_unreadable", cache_key=key, error=type(exc).__name__
            )
            await self._client.delete(redis_key)
            return None

    async def set(self, key: str, value: object, ttl: float) -> None:
        """Store a value with automatic expiration."""
        # Redis rejects non-positive expirations
        ttl_ms = math.ceil(ttl * 1000)
        if ttl_ms <= 0:
            return
        await self._client.set(
            self._cache_key(key),
            pickle.dumps(value),
            px=ttl_ms,
        )

    async def delete(self, key: str) -> None:
        """Delete a cached value."""
        await self._client.delete(self._cache_key(key))

    async def clear(self) -> None:
        """Clear all cached values under this prefix."""
        cursor: int = 0
        pattern = f"{self._prefix}:cache:*"
        while True:
            result = await self._client.scan(cursor, match=pattern, count=100)
            cursor = result[0]
            keys = result[1]
            if keys:
                await self._client.delete(*keys)
            if cursor == 0:
                break

    async def disconnect(self) -> None:
        """Close the Redis connection."""
        await self._client.aclose()
