"""enka-api - async client for the EnkaNetwork API."""

from enka_api.adapters import AsyncCache, AsyncMemoryCache, AsyncRedisCache
from enka_api.client import BaseClient, is_valid_uid, make_cache_key
from enka_api.config import BASE_URL, DEFAULT_USER_AGENT, ClientConfig
from enka_api.duration import parse_duration
from enka_api.enka import EnkaClient
from enka_api.errors import (
    BuildsNotFoundError,
    DecodeError,
    EnkaError,
    HoyoAccountNotFoundError,
    InvalidHoyoHashError,
    InvalidIdentifierError,
    InvalidUIDFormatError,
    InvalidUsernameError,
    NotFoundError,
    PlayerNotFoundError,
    RateLimitedError,
    ServerError,
    ServerMaintenanceError,
    ServiceUnavailableError,
    UnexpectedStatusError,
    UserNotFoundError,
)
from enka_api.fetcher import Fetcher
from enka_api.genshin import GenshinClient
from enka_api.hsr import HSRClient
from enka_api.models import (
    AvatarBuilds,
    Build,
    GenshinProfile,
    Hoyo,
    Hoyos,
    HSRProfile,
    Owner,
    PatreonProfile,
    PlayerInfo,
    Profile,
    ZZZProfile,
)
from enka_api.observability import configure_logging
from enka_api.retry_after import parse_retry_after
from enka_api.types import CacheEntry, Duration
from enka_api.zzz import ZZZClient

__version__ = "0.1.0"

__all__ = [
    "BASE_URL",
    "DEFAULT_USER_AGENT",
    "AsyncCache",
    "AsyncMemoryCache",
    "AsyncRedisCache",
    "AvatarBuilds",
    "BaseClient",
    "Build",
    "BuildsNotFoundError",
    "CacheEntry",
    "ClientConfig",
    "DecodeError",
    "Duration",
    "EnkaClient",
    "EnkaError",
    "Fetcher",
    "GenshinClient",
    "GenshinProfile",
    "HSRClient",
    "HSRProfile",
    "Hoyo",
    "HoyoAccountNotFoundError",
    "Hoyos",
    "InvalidHoyoHashError",
    "InvalidIdentifierError",
    "InvalidUIDFormatError",
    "InvalidUsernameError",
    "NotFoundError",
    "Owner",
    "PatreonProfile",
    "PlayerInfo",
    "PlayerNotFoundError",
    "Profile",
    "RateLimitedError",
    "ServerError",
    "ServerMaintenanceError",
    "ServiceUnavailableError",
    "UnexpectedStatusError",
    "UserNotFoundError",
    "ZZZClient",
    "ZZZProfile",
    "configure_logging",
    "is_valid_uid",
    "make_cache_key",
    "parse_duration",
    "parse_retry_after",
]
