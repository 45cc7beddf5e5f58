"""Zenless Zone Zero profiles."""

from __future__ import annotations

from enka_api.client import BaseClient, is_valid_uid, make_cache_key
from enka_api.errors import InvalidUIDFormatError, PlayerNotFoundError
from enka_api.models import ZZZProfile

# ZZZ hands out both 9 and 10 digit UIDs
UID_LENGTHS = (9, 10)


class ZZZClient(BaseClient):
    """Client for ``/zzz/uid/{uid}``."""

    async def get_profile(self, uid: str) -> ZZZProfile:
        """Fetch the full showcase of an agent roster."""
        return await self._get(uid, info=False)

    async def get_player_info(self, uid: str) -> ZZZProfile:
        """Fetch only the player block, without agents."""
        return await self._get(uid, info=True)

    async def _get(self, uid: str, *, info: bool) -> ZZZProfile:
        if not is_valid_uid(uid, UID_LENGTHS):
            raise InvalidUIDFormatError()

        parts = ("zzz", uid, "info") if info else ("zzz", uid)
        return await self._fetch_cached(
            make_cache_key(*parts),
            self._url("zzz", "uid", uid, query="info" if info else None),
            ZZZProfile,
            ttl=lambda profile: float(profile.ttl),
            not_found=PlayerNotFoundError,
        )
