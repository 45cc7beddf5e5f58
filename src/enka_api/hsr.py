"""Honkai: Star Rail profiles."""

from __future__ import annotations

from enka_api.client import BaseClient, is_valid_uid, make_cache_key
from enka_api.errors import InvalidUIDFormatError, PlayerNotFoundError
from enka_api.models import HSRProfile

UID_LENGTHS = (9,)


class HSRClient(BaseClient):
    """Client for ``/hsr/uid/{uid}``."""

    async def get_profile(self, uid: str) -> HSRProfile:
        """Fetch the showcase of a Star Rail player.

        The response is cached for the ``ttl`` it carries.
        """
        if not is_valid_uid(uid, UID_LENGTHS):
            raise InvalidUIDFormatError()

        return await self._fetch_cached(
            make_cache_key("hsr", uid),
            self._url("hsr", "uid", uid),
            HSRProfile,
            ttl=lambda profile: float(profile.ttl),
            not_found=PlayerNotFoundError,
        )
