"""Transport configuration shared by all game clients."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from enka_api.duration import parse_duration
from enka_api.types import Duration

BASE_URL = "https://enka.network/api"
DEFAULT_USER_AGENT = "enka-api-python/0.1"
DEFAULT_TIMEOUT: Duration = "10s"
DEFAULT_RETRY_DELAY: Duration = "5s"
DEFAULT_TTL: Duration = "5m"
MAX_ATTEMPTS = 3


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Settings for the HTTP transport and the retry policy.

    Leaving ``http_client`` unset makes the client create (and later close)
    its own ``httpx.AsyncClient`` with ``timeout``. An empty ``user_agent``
    falls back to ``DEFAULT_USER_AGENT``.
    """

    http_client: httpx.AsyncClient | None = None
    user_agent: str = DEFAULT_USER_AGENT
    base_url: str = BASE_URL
    timeout: Duration = DEFAULT_TIMEOUT
    max_attempts: int = MAX_ATTEMPTS
    retry_delay: Duration = DEFAULT_RETRY_DELAY
    default_ttl: Duration = DEFAULT_TTL

    def __post_init__(self) -> None:
        if not self.user_agent:
            object.__setattr__(self, "user_agent", DEFAULT_USER_AGENT)
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        # Fail fast on malformed durations
        parse_duration(self.timeout)
        parse_duration(self.retry_delay)
        parse_duration(self.default_ttl)

    @property
    def timeout_seconds(self) -> float:
        return parse_duration(self.timeout)

    @property
    def retry_delay_seconds(self) -> float:
        return parse_duration(self.retry_delay)

    @property
    def default_ttl_seconds(self) -> float:
        return parse_duration(self.default_ttl)

    def create_http_client(self) -> httpx.AsyncClient:
        """Create the default HTTP client used when none was supplied."""
        return httpx.AsyncClient(
            timeout=self.timeout_seconds,
            follow_redirects=True,
        )
