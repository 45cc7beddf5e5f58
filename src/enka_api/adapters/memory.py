"""In-memory cache adapter."""

import asyncio
import time
from collections import OrderedDict
from collections.abc import Callable

from enka_api.types import CacheEntry

# Sweep expired entries once every this many writes
PURGE_EVERY = 100


class AsyncMemoryCache:
    """Async in-memory cache with per-entry expiration and optional LRU eviction."""

    def __init__(
        self,
        max_items: int | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._cache: OrderedDict[str, CacheEntry[object]] = OrderedDict()
        self._max_items = max_items
        self._clock = clock
        self._lock = asyncio.Lock()
        self._sets = 0

    async def get(self, key: str) -> object | None:
        """Get a cached value by key."""
        async with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                del self._cache[key]
                return None
            self._cache.move_to_end(key)  # LRU touch
            return entry.value

    async def set(self, key: str, value: object, ttl: float) -> None:
        """Store a value for ``ttl`` seconds."""
        entry: CacheEntry[object] = CacheEntry(
            key=key, value=value, expires_at=self._clock() + ttl
        )
        async with self._lock:
            self._sets += 1
            if self._sets % PURGE_EVERY == 0:
                self._purge_expired()
            self._cache[key] = entry
            self._cache.move_to_end(key)
            if self._max_items and len(self._cache) > self._max_items:
                self._cache.popitem(last=False)

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [key for key, entry in self._cache.items() if entry.is_expired(now)]
        for key in expired:
            del self._cache[key]

    async def delete(self, key: str) -> None:
        """Delete a cached value."""
        async with self._lock:
            self._cache.pop(key, None)

    async def clear(self) -> None:
        """Clear all cached values."""
        async with self._lock:
            self._cache.clear()

    async def disconnect(self) -> None:
        """Disconnect from the storage backend (no-op for memory)."""
        pass

    def __len__(self) -> int:
        return len(self._cache)
