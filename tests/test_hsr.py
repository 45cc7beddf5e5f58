"""Tests for HSRClient."""

import httpx
import pytest
import respx

from enka_api import (
    AsyncRedisCache,
    ClientConfig,
    HSRClient,
    HSRProfile,
    InvalidUIDFormatError,
    PlayerNotFoundError,
    RateLimitedError,
)
from helpers import BASE, UID, FakeRedis

PROFILE_JSON = {
    "detailInfo": {"nickname": "Trailblazer", "level": 70},
    "ttl": 90,
    "uid": UID,
}


class RecordingCache:
    def __init__(self) -> None:
        self.sets: list[tuple[str, object, float]] = []

    async def get(self, key: str) -> object | None:
        return None

    async def set(self, key: str, value: object, ttl: float) -> None:
        self.sets.append((key, value, ttl))


@pytest.fixture
def recording_cache() -> RecordingCache:
    return RecordingCache()


@pytest.fixture
def client(config: ClientConfig, recording_cache: RecordingCache) -> HSRClient:
    return HSRClient(config, recording_cache)


class TestGetProfile:
    """Tests for HSRClient.get_profile."""

    @respx.mock
    async def test_caches_with_payload_ttl(
        self, client: HSRClient, recording_cache: RecordingCache
    ) -> None:
        """Test the URL, the cache key and the TTL taken from the payload."""
        respx.get(f"{BASE}/hsr/uid/{UID}").mock(
            return_value=httpx.Response(200, json=PROFILE_JSON)
        )

        profile = await client.get_profile(UID)

        assert profile == HSRProfile(
            ttl=90,
            uid=UID,
            detail_info={"nickname": "Trailblazer", "level": 70},
        )
        assert recording_cache.sets == [(f"enka:hsr:{UID}", profile, 90.0)]

    @respx.mock
    async def test_zero_ttl_is_passed_through(
        self, client: HSRClient, recording_cache: RecordingCache
    ) -> None:
        respx.get(f"{BASE}/hsr/uid/{UID}").mock(
            return_value=httpx.Response(200, json={**PROFILE_JSON, "ttl": 0})
        )

        await client.get_profile(UID)

        assert recording_cache.sets[0][2] == 0.0

    async def test_invalid_uid(self, client: HSRClient) -> None:
        with pytest.raises(InvalidUIDFormatError):
            await client.get_profile("12345")

    @respx.mock
    async def test_not_found(self, client: HSRClient) -> None:
        respx.get(f"{BASE}/hsr/uid/{UID}").mock(return_value=httpx.Response(404))

        with pytest.raises(PlayerNotFoundError):
            await client.get_profile(UID)

    @respx.mock
    async def test_rate_limited_after_three_attempts(
        self, client: HSRClient, recording_cache: RecordingCache
    ) -> None:
        route = respx.get(f"{BASE}/hsr/uid/{UID}").mock(
            return_value=httpx.Response(429, headers={"Retry-After": "0"})
        )

        with pytest.raises(RateLimitedError):
            await client.get_profile(UID)

        assert route.call_count == 3
        assert recording_cache.sets == []


class TestRedisCache:
    """Tests for HSRClient backed by the Redis adapter."""

    @respx.mock
    async def test_corrupt_cache_entry_falls_back_to_network(
        self, config: ClientConfig
    ) -> None:
        """Test that an unreadable cached profile is refetched and replaced."""
        fake_redis = FakeRedis()
        redis_key = f"enka:cache:enka:hsr:{UID}"
        fake_redis.store[redis_key] = b"\x80\x04\x95garbage"
        route = respx.get(f"{BASE}/hsr/uid/{UID}").mock(
            return_value=httpx.Response(200, json=PROFILE_JSON)
        )
        client = HSRClient(config, AsyncRedisCache(fake_redis))

        profile = await client.get_profile(UID)

        assert route.call_count == 1
        assert profile.ttl == 90
        assert fake_redis.expirations[redis_key] == 90_000
        assert await client.cache.get(f"enka:hsr:{UID}") == profile
