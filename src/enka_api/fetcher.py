"""Generic HTTP fetcher with retries for transient failures."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from enka_api.errors import (
    DecodeError,
    EnkaError,
    InvalidIdentifierError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ServerMaintenanceError,
    ServiceUnavailableError,
    UnexpectedStatusError,
)
from enka_api.retry_after import DEFAULT_RETRY_DELAY, parse_retry_after

T = TypeVar("T")

MAX_ATTEMPTS = 3

# Responses worth retrying; 429 and 503 may carry Retry-After
TRANSIENT_STATUSES = frozenset({429, 500, 503})
RETRY_AFTER_STATUSES = frozenset({429, 503})

_FATAL_STATUSES: dict[int, type[EnkaError]] = {
    400: InvalidIdentifierError,
    404: NotFoundError,
    424: ServerMaintenanceError,
}

logger = structlog.get_logger(__name__)


class Fetcher(Generic[T]):
    """Fetch a URL and decode the JSON body into ``result_type``.

    Transient responses (429, 500, 503) are retried up to ``max_attempts``
    total attempts. For 429 and 503 the wait honours the Retry-After header;
    500 always waits ``retry_delay``. Once the budget is spent the fetcher
    raises ``RateLimitedError``, whichever transient status came last.

    Transport errors from httpx are raised unchanged and never retried.
    Cancelling the calling task interrupts both the request and the
    backoff sleep.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        user_agent: str,
        result_type: type[T],
        *,
        max_attempts: int = MAX_ATTEMPTS,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._client = http_client
        self._user_agent = user_agent
        self._adapter: TypeAdapter[T] = TypeAdapter(result_type)
        self._max_attempts = max_attempts
        self._retry_delay = retry_delay
        self._sleep = sleep

    async def fetch(self, url: str) -> T:
        """GET ``url`` with retries and return the decoded body."""
        log = logger.bind(url=url)
        last_error: EnkaError | None = None
        status_code = 0

        for attempt in range(1, self._max_attempts + 1):
            response = await self._client.get(
                url, headers={"User-Agent": self._user_agent}
            )
            status_code = response.status_code

            if status_code == httpx.codes.OK:
                return self._decode(response, url)

            if status_code not in TRANSIENT_STATUSES:
                raise self._classify(status_code, url)

            last_error = self._transient_error(status_code, url)
            if attempt == self._max_attempts:
                break

            delay = self._delay_for(response)
            log.debug(
                "fetch_retry_scheduled",
                status_code=status_code,
                attempt=attempt,
                max_attempts=self._max_attempts,
                delay=delay,
            )
            await self._sleep(delay)

        log.debug(
            "fetch_retries_exhausted",
            status_code=status_code,
            attempts=self._max_attempts,
        )
        raise RateLimitedError(status_code=status_code, url=url) from last_error

    def _decode(self, response: httpx.Response, url: str) -> T:
        try:
            return self._adapter.validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(
                f"failed to decode response: {exc.error_count()} validation error(s)",
                status_code=response.status_code,
                url=url,
            ) from exc

    def _delay_for(self, response: httpx.Response) -> float:
        if response.status_code in RETRY_AFTER_STATUSES:
            return parse_retry_after(
                response.headers.get("Retry-After"), self._retry_delay
            )
        return self._retry_delay

    @staticmethod
    def _classify(status_code: int, url: str) -> EnkaError:
        error_class = _FATAL_STATUSES.get(status_code)
        if error_class is None:
            return UnexpectedStatusError(status_code, url=url)
        return error_class(status_code=status_code, url=url)

    @staticmethod
    def _transient_error(status_code: int, url: str) -> EnkaError | None:
        if status_code == 500:
            return ServerError(status_code=status_code, url=url)
        if status_code == 503:
            return ServiceUnavailableError(status_code=status_code, url=url)
        return None
