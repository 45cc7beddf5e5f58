"""Enka user profiles and the game accounts ("hoyos") linked to them.

None of these payloads carry a TTL, so successful responses are cached for
the configured default TTL (5 minutes unless overridden).
"""

from __future__ import annotations

from enka_api.client import BaseClient, make_cache_key, quote_segment
from enka_api.errors import (
    BuildsNotFoundError,
    HoyoAccountNotFoundError,
    InvalidHoyoHashError,
    InvalidUsernameError,
    UserNotFoundError,
)
from enka_api.models import AvatarBuilds, Hoyo, Hoyos, Owner


def _check_username(username: str) -> None:
    if not username:
        raise InvalidUsernameError()


def _check_hoyo_hash(hoyo_hash: str) -> None:
    if not hoyo_hash:
        raise InvalidHoyoHashError()


class EnkaClient(BaseClient):
    """Client for ``/profile/{username}`` and its sub-resources."""

    async def get_user_profile(self, username: str) -> Owner:
        """Fetch the Enka account of ``username``.

        Raises:
            InvalidUsernameError: ``username`` is empty.
            UserNotFoundError: The user does not exist.
        """
        _check_username(username)

        return await self._fetch_cached(
            make_cache_key("user", username),
            self._url("profile", quote_segment(username), ""),
            Owner,
            not_found=UserNotFoundError,
        )

    async def get_user_hoyos(self, username: str) -> Hoyos:
        """Fetch the verified, public game accounts of ``username``.

        Keys of the result are hoyo hashes, usable with ``get_user_hoyo``
        and ``get_user_hoyo_builds``.
        """
        _check_username(username)

        return await self._fetch_cached(
            make_cache_key("user", username, "hoyos"),
            self._url("profile", quote_segment(username), "hoyos", ""),
            Hoyos,
            not_found=UserNotFoundError,
        )

    async def get_user_hoyo(self, username: str, hoyo_hash: str) -> Hoyo:
        """Fetch a single game account of ``username``."""
        _check_username(username)
        _check_hoyo_hash(hoyo_hash)

        return await self._fetch_cached(
            make_cache_key("user", username, "hoyos", hoyo_hash),
            self._url(
                "profile",
                quote_segment(username),
                "hoyos",
                quote_segment(hoyo_hash),
                "",
                query="format=json",
            ),
            Hoyo,
            not_found=HoyoAccountNotFoundError,
        )

    async def get_user_hoyo_builds(
        self, username: str, hoyo_hash: str
    ) -> AvatarBuilds:
        """Fetch saved and live builds of a game account, keyed by avatar id.

        Builds with ``live=True`` come from the last showcase refresh rather
        than from a save, so they may be out of date. Use ``order`` to sort.
        """
        _check_username(username)
        _check_hoyo_hash(hoyo_hash)

        return await self._fetch_cached(
            make_cache_key("user", username, "hoyos", hoyo_hash, "builds"),
            self._url(
                "profile",
                quote_segment(username),
                "hoyos",
                quote_segment(hoyo_hash),
                "builds",
                "",
            ),
            AvatarBuilds,
            not_found=BuildsNotFoundError,
        )
