"""Cache adapters for the EnkaNetwork client."""

from enka_api.adapters.base import AsyncCache
from enka_api.adapters.memory import AsyncMemoryCache
from enka_api.adapters.redis import AsyncRedisCache

__all__ = [
    "AsyncCache",
    "AsyncMemoryCache",
    "AsyncRedisCache",
]
