"""Core types for the EnkaNetwork client."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CacheEntry(Generic[T]):
    """A cached value with its expiration time."""

    key: str
    value: T
    expires_at: float  # Unix timestamp, seconds

    def is_expired(self, now: float) -> bool:
        """Check if the entry has passed its expiration time."""
        return now >= self.expires_at


# Duration type alias
Duration = str | int | float  # "250ms", "30s", "5m", "2h", "1d" or seconds
