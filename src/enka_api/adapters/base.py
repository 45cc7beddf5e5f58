"""Cache protocol used by the clients."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AsyncCache(Protocol):
    """Async cache interface.

    Implementations must be safe for concurrent use and must treat entries
    past their expiration as absent.
    """

    async def get(self, key: str) -> object | None:
        """Get a cached value by key, or None if missing or expired."""
        ...

    async def set(self, key: str, value: object, ttl: float) -> None:
        """Store a value that expires after ``ttl`` seconds."""
        ...
