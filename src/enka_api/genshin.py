"""Genshin Impact profiles.

Avoid iterating over UIDs: every request, cached upstream or not, counts
toward the API rate limit. Cache locally and respect the returned TTL.
"""

from __future__ import annotations

from enka_api.client import BaseClient, is_valid_uid, make_cache_key
from enka_api.errors import InvalidUIDFormatError, PlayerNotFoundError
from enka_api.models import GenshinProfile

UID_LENGTHS = (9,)


def _profile_ttl(profile: GenshinProfile) -> float:
    return float(profile.ttl)


class GenshinClient(BaseClient):
    """Client for ``/uid/{uid}``."""

    async def get_profile(self, uid: str) -> GenshinProfile:
        """Fetch the full showcase of a player, characters included.

        Raises:
            InvalidUIDFormatError: ``uid`` is not a 9-digit string.
            PlayerNotFoundError: No player has this UID.
            RateLimitedError: Retries were exhausted on transient responses.
            ServerMaintenanceError: The game servers are under maintenance.
        """
        return await self._get(uid, info=False)

    async def get_player_info(self, uid: str) -> GenshinProfile:
        """Fetch only ``playerInfo``; faster and cheaper than ``get_profile``."""
        return await self._get(uid, info=True)

    async def _get(self, uid: str, *, info: bool) -> GenshinProfile:
        if not is_valid_uid(uid, UID_LENGTHS):
            raise InvalidUIDFormatError()

        parts = ("genshin", uid, "info") if info else ("genshin", uid)
        return await self._fetch_cached(
            make_cache_key(*parts),
            self._url("uid", uid, query="info" if info else None),
            GenshinProfile,
            ttl=_profile_ttl,
            not_found=PlayerNotFoundError,
        )
