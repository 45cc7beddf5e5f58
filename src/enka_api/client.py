"""Shared client plumbing: cache lookup, fetch and cache refill."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from types import TracebackType
from typing import Any, Self, TypeVar
from urllib.parse import quote

import httpx
import structlog

from enka_api.adapters.base import AsyncCache
from enka_api.config import ClientConfig
from enka_api.errors import NotFoundError
from enka_api.fetcher import Fetcher

T = TypeVar("T")

CACHE_KEY_PREFIX = "enka"

logger = structlog.get_logger(__name__)


def make_cache_key(*parts: str) -> str:
    """Build a cache key from a resource tag and its parameters.

    Parts are percent-encoded before joining so that a separator inside a
    parameter can never make two different requests share a key.
    """
    return ":".join(quote(str(part), safe="") for part in (CACHE_KEY_PREFIX, *parts))


def is_valid_uid(uid: str, lengths: Iterable[int] = (9,)) -> bool:
    """Check that ``uid`` is made of ASCII digits and has an allowed length."""
    return (
        isinstance(uid, str)
        and len(uid) in tuple(lengths)
        and uid.isascii()
        and uid.isdigit()
    )


def quote_segment(value: str) -> str:
    """Escape a value for use as a single URL path segment."""
    return quote(value, safe="")


class BaseClient:
    """Base class for the game clients.

    Holds the HTTP client, the optional cache and the retry settings. A
    client created without an ``httpx.AsyncClient`` owns the one it builds
    and closes it in ``aclose()``.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        cache: AsyncCache | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._cache = cache
        self._owns_http_client = self._config.http_client is None
        self._http_client: httpx.AsyncClient | None = self._config.http_client
        self._fetchers: dict[type[Any], Fetcher[Any]] = {}

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def cache(self) -> AsyncCache | None:
        return self._cache

    @property
    def http_client(self) -> httpx.AsyncClient:
        """The HTTP client, created on first use when none was supplied."""
        if self._http_client is None:
            self._http_client = self._config.create_http_client()
        return self._http_client

    def _url(self, *segments: str, query: str | None = None) -> str:
        url = "/".join((self._config.base_url, *segments))
        if query:
            url = f"{url}?{query}"
        return url

    def _fetcher(self, result_type: type[T]) -> Fetcher[T]:
        fetcher = self._fetchers.get(result_type)
        if fetcher is None:
            fetcher = Fetcher(
                self.http_client,
                self._config.user_agent,
                result_type,
                max_attempts=self._config.max_attempts,
                retry_delay=self._config.retry_delay_seconds,
            )
            self._fetchers[result_type] = fetcher
        return fetcher

    async def _fetch_cached(
        self,
        key: str,
        url: str,
        result_type: type[T],
        *,
        ttl: Callable[[T], float] | None = None,
        not_found: type[NotFoundError] | None = None,
    ) -> T:
        """Return the cached value for ``key`` or fetch ``url`` and cache it.

        A cached value of the wrong type counts as a miss. ``ttl`` reads the
        cache lifetime from the payload; without it the configured default
        TTL applies. A 404 is re-raised as ``not_found`` when given.
        """
        log = logger.bind(cache_key=key)

        if self._cache is not None:
            cached = await self._cache.get(key)
            if isinstance(cached, result_type):
                log.debug("cache_hit")
                return cached
            if cached is not None:
                log.debug("cache_type_mismatch", cached_type=type(cached).__name__)
            else:
                log.debug("cache_miss")

        try:
            result = await self._fetcher(result_type).fetch(url)
        except NotFoundError as exc:
            if not_found is None or isinstance(exc, not_found):
                raise
            raise not_found(status_code=exc.status_code, url=exc.url) from exc

        if self._cache is not None:
            expires_in = ttl(result) if ttl is not None else self._config.default_ttl_seconds
            await self._cache.set(key, result, expires_in)
            log.debug("cache_store", ttl=expires_in)

        return result

    async def aclose(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
