"""Response models for the EnkaNetwork API.

Only the fields the client itself relies on are declared. Every model keeps
unknown fields, so the full payload stays reachable through
``model_extra`` and ``model_dump()``.

Field reference: https://github.com/EnkaNetwork/API-docs
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, RootModel


class EnkaModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class PatreonProfile(EnkaModel):
    """Patreon-related information for an Enka user."""

    bio: str = ""
    level: int = 0
    avatar: str | None = None
    image_url: str | None = None


class Owner(EnkaModel):
    """An Enka account, returned on its own or attached to a game profile."""

    id: int | None = None
    hash: str = ""
    username: str = ""
    profile: PatreonProfile | None = None


class PlayerInfo(EnkaModel):
    """Basic showcase information shared by the game profiles."""

    nickname: str = ""
    level: int = 0
    signature: str = ""


class Profile(EnkaModel):
    """Common shape of a game profile.

    ``ttl`` is the number of seconds until the API queries the game again;
    it is used as the cache lifetime.
    """

    ttl: int = Field(default=0, ge=0)
    uid: str | None = None
    owner: Owner | None = None


class GenshinProfile(Profile):
    player_info: PlayerInfo | None = Field(default=None, alias="playerInfo")
    avatar_info_list: list[dict[str, object]] = Field(
        default_factory=list, alias="avatarInfoList"
    )


class HSRProfile(Profile):
    detail_info: dict[str, object] | None = Field(default=None, alias="detailInfo")


class ZZZProfile(Profile):
    player_info: dict[str, object] | None = Field(default=None, alias="PlayerInfo")


class Hoyo(EnkaModel):
    """A game account linked to an Enka profile."""

    uid: int | None = None
    uid_public: bool = False
    public: bool = False
    verified: bool = False
    player_info: dict[str, object] | None = None
    hash: str = ""
    region: str = ""
    avatar_order: dict[str, int] | None = None
    order: int = 0
    live_public: bool = False
    hoyo_type: int = 0  # 0 Genshin, 1 HSR, 2 ZZZ


class Hoyos(RootModel[dict[str, Hoyo]]):
    """Verified public game accounts keyed by hoyo hash."""

    def __getitem__(self, key: str) -> Hoyo:
        return self.root[key]

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


class Build(EnkaModel):
    """A saved or live character build."""

    id: int | None = None
    name: str = ""
    avatar_id: str = ""
    avatar_data: dict[str, object] | None = None
    live: bool = False
    settings: dict[str, object] | None = None
    public: bool = False
    image: str | None = None
    hoyo: str = ""
    order: int = 0
    hoyo_type: int = 0


class AvatarBuilds(RootModel[dict[str, list[Build]]]):
    """Builds keyed by avatar id, each list in no particular order."""

    def __getitem__(self, key: str) -> list[Build]:
        return self.root[key]

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)
