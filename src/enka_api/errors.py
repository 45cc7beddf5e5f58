"""Exceptions raised by the EnkaNetwork client.

Errors produced from an HTTP response carry the ``status_code`` and ``url``
of that response. Transport failures are not wrapped: they surface as the
``httpx.HTTPError`` raised by the HTTP client.
"""

from __future__ import annotations


class EnkaError(Exception):
    """Base class for all client errors."""

    default_message = "EnkaNetwork request failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message or self.default_message)
        self.status_code = status_code
        self.url = url


class InvalidIdentifierError(EnkaError, ValueError):
    """An identifier was rejected, locally or by the API (HTTP 400)."""

    default_message = "invalid identifier format"


class InvalidUIDFormatError(InvalidIdentifierError):
    default_message = "invalid UID format"


class InvalidUsernameError(InvalidIdentifierError):
    default_message = "username cannot be empty"


class InvalidHoyoHashError(InvalidIdentifierError):
    default_message = "hoyo_hash cannot be empty"


class NotFoundError(EnkaError):
    """The requested resource does not exist (HTTP 404)."""

    default_message = "resource not found"


class PlayerNotFoundError(NotFoundError):
    default_message = "player not found"


class UserNotFoundError(NotFoundError):
    default_message = "user not found"


class HoyoAccountNotFoundError(NotFoundError):
    default_message = "hoyo account not found"


class BuildsNotFoundError(NotFoundError):
    default_message = "no builds found for hoyo account"


class ServerMaintenanceError(EnkaError):
    """Game servers are under maintenance (HTTP 424)."""

    default_message = "server maintenance"


class ServerError(EnkaError):
    """Internal server error (HTTP 500)."""

    default_message = "server error"


class ServiceUnavailableError(EnkaError):
    """The API is temporarily unavailable (HTTP 503)."""

    default_message = "service unavailable"


class RateLimitedError(EnkaError):
    """The retry budget was spent on transient responses.

    Raised after exhausting retries on 429, 500 or 503 alike;
    ``status_code`` holds the status of the last attempt. When that attempt
    was a 500 or 503, the matching ``ServerError`` or
    ``ServiceUnavailableError`` is chained as ``__cause__``.
    """

    default_message = "rate limited"


class DecodeError(EnkaError):
    """A successful response body could not be decoded."""

    default_message = "failed to decode response"


class UnexpectedStatusError(EnkaError):
    """The API answered with a status code outside the documented set."""

    def __init__(self, status_code: int, *, url: str | None = None) -> None:
        super().__init__(
            f"unexpected status: {status_code}", status_code=status_code, url=url
        )


__all__ = [
    "BuildsNotFoundError",
    "DecodeError",
    "EnkaError",
    "HoyoAccountNotFoundError",
    "InvalidHoyoHashError",
    "InvalidIdentifierError",
    "InvalidUIDFormatError",
    "InvalidUsernameError",
    "NotFoundError",
    "PlayerNotFoundError",
    "RateLimitedError",
    "ServerError",
    "ServerMaintenanceError",
    "ServiceUnavailableError",
    "UnexpectedStatusError",
    "UserNotFoundError",
]
