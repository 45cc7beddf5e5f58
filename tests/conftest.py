"""Shared pytest fixtures."""

from collections.abc import AsyncIterator, Iterator

import httpx
import pytest
import respx

from enka_api import AsyncMemoryCache, ClientConfig
from helpers import BASE, RecordingSleep


@pytest.fixture(autouse=True)
def _isolate_global_respx_routes() -> Iterator[None]:
    """Roll back routes added to the global respx router during each test."""
    respx.mock.snapshot()
    yield
    respx.mock.rollback()


@pytest.fixture
def cache() -> AsyncMemoryCache:
    """Create a fresh AsyncMemoryCache for each test."""
    return AsyncMemoryCache()


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Create an httpx client owned by the test."""
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def config(http_client: httpx.AsyncClient) -> ClientConfig:
    """Client settings pointing at the mocked API with no retry delay."""
    return ClientConfig(
        http_client=http_client,
        user_agent="test-agent",
        base_url=BASE,
        retry_delay=0,
    )


@pytest.fixture
def sleep() -> RecordingSleep:
    """Create a sleep stand-in that records backoff delays."""
    return RecordingSleep()
