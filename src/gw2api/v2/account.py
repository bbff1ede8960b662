"""Details about player accounts.

All endpoints in this module require an access token. Some fields also
require an additional permission on the token and are None when it is
missing.
"""

from datetime import datetime
from enum import Enum, Flag, auto
from typing import Annotated, Any

from pydantic import Field, PlainSerializer, PlainValidator, field_serializer, model_validator

from gw2api.entities import Authentication

from .base import Endpoint, Gw2Model, RootEndpoint


class AccountAccess(Flag):
    """Content the account has access to."""

    NONE = auto()
    PLAY_FOR_FREE = auto()
    GUILD_WARS_2 = auto()
    HEART_OF_THORNS = auto()
    PATH_OF_FIRE = auto()
    END_OF_DRAGONS = auto()

    @classmethod
    def from_names(cls, names: list[str]) -> "AccountAccess":
        """Parse the API's list of access strings.

        Raises:
            ValueError: If a string is not a known access value
        """
        access = cls(0)
        for name in names:
            if not isinstance(name, str) or name not in _ACCESS_BY_NAME:
                raise ValueError(f"invalid account access: {name!r}")
            access |= _ACCESS_BY_NAME[name]
        return access

    def to_names(self) -> list[str]:
        return [name for name, member in _ACCESS_BY_NAME.items() if member in self]


_ACCESS_BY_NAME = {
    "None": AccountAccess.NONE,
    "PlayForFree": AccountAccess.PLAY_FOR_FREE,
    "GuildWars2": AccountAccess.GUILD_WARS_2,
    "HeartOfThorns": AccountAccess.HEART_OF_THORNS,
    "PathOfFire": AccountAccess.PATH_OF_FIRE,
    "EndOfDragons": AccountAccess.END_OF_DRAGONS,
}


def _parse_access(value: Any) -> AccountAccess:
    if isinstance(value, AccountAccess):
        return value
    if not isinstance(value, list):
        raise ValueError("expected a sequence of access strings")
    return AccountAccess.from_names(value)


AccessField = Annotated[
    AccountAccess,
    PlainValidator(_parse_access),
    PlainSerializer(lambda access: access.to_names(), return_type=list[str]),
]


class Account(Endpoint):
    """Basic information about an account."""

    path = "/v2/account"
    authentication = Authentication.REQUIRED

    id: str = Field(..., description="Globally unique GUID of the account")
    age: int = Field(..., description="Age of the account in seconds")
    name: str = Field(..., description="Display name, may change")
    world: int = Field(..., description="Home world id")
    guilds: list[str]
    guild_leader: list[str] | None = Field(None, description="Requires the guilds permission")
    created: datetime
    access: AccessField
    commander: bool
    fractal_level: int | None = Field(None, description="Requires the progression permission")
    daily_ap: int | None = Field(None, description="Requires the progression permission")
    monthly_ap: int | None = Field(None, description="Requires the progression permission")
    wvw_rank: int | None = Field(None, description="Requires the progression permission")
    last_modified: datetime | None = None
    build_storage_slots: int | None = Field(None, description="Requires the builds permission")


class AccountAchievement(Gw2Model):
    """Progress of an account on one achievement."""

    id: int
    bits: list[int] | None = None
    current: int | None = None
    max: int | None = None
    done: bool
    repeated: int | None = Field(None, description="Times the achievement was completed")
    unlocked: bool | None = None

    @property
    def is_unlocked(self) -> bool:
        # Absent means unlocked
        return self.unlocked if self.unlocked is not None else True


class AccountAchievements(RootEndpoint[list[AccountAchievement]]):
    path = "/v2/account/achievements"
    authentication = Authentication.REQUIRED


class ItemBinding(Enum):
    ACCOUNT = "Account"
    CHARACTER = "Character"


class ItemStats(Gw2Model):
    id: int
    attributes: dict[str, float]


class BankItem(Gw2Model):
    id: int
    count: int
    charges: int | None = None
    skin: int | None = None
    dyes: list[int] | None = None
    upgrades: list[int] | None = None
    upgrade_slot_indices: list[int] | None = None
    infusions: list[int] | None = None
    binding: ItemBinding | None = None
    bound_to: str | None = Field(None, description="Character name for soulbound items")
    stats: ItemStats | None = None


class AccountBank(RootEndpoint[list[BankItem | None]]):
    """Bank slots of the account; empty slots are None."""

    path = "/v2/account/bank"
    authentication = Authentication.REQUIRED


class AccountDailyCrafting(RootEndpoint[list[str]]):
    """Time-gated crafts completed since the daily reset."""

    path = "/v2/account/dailycrafting"
    authentication = Authentication.REQUIRED


class AccountDungeons(RootEndpoint[list[str]]):
    """Dungeon paths completed since the daily reset."""

    path = "/v2/account/dungeons"
    authentication = Authentication.REQUIRED


class AccountDyes(RootEndpoint[list[int]]):
    path = "/v2/account/dyes"
    authentication = Authentication.REQUIRED


class AccountFinisher(Gw2Model):
    id: int
    permanent: bool = True
    quantity: int = Field(0, description="Remaining uses of a non-permanent finisher")


class AccountFinishers(RootEndpoint[list[AccountFinisher]]):
    path = "/v2/account/finishers"
    authentication = Authentication.REQUIRED


class AccountGliders(RootEndpoint[list[int]]):
    path = "/v2/account/gliders"
    authentication = Authentication.REQUIRED


class AccountHomeCats(RootEndpoint[list[int]]):
    path = "/v2/account/home/cats"
    authentication = Authentication.REQUIRED


class AccountHomeNodes(RootEndpoint[list[str]]):
    path = "/v2/account/home/nodes"
    authentication = Authentication.REQUIRED


class InventoryItem(Gw2Model):
    id: int
    count: int
    charges: int | None = None
    skin: int | None = None
    upgrades: list[int] | None = None
    infusions: list[int] | None = None
    binding: ItemBinding | None = None


class AccountInventory(RootEndpoint[list[InventoryItem | None]]):
    """Shared inventory slots; empty slots are None."""

    path = "/v2/account/inventory"
    authentication = Authentication.REQUIRED


class LegendaryArmoryItem(Gw2Model):
    id: int
    count: int


class AccountLegendaryArmory(RootEndpoint[list[LegendaryArmoryItem]]):
    path = "/v2/account/legendaryarmory"
    authentication = Authentication.REQUIRED


class AccountLuck(RootEndpoint[int]):
    """Total luck of the account.

    The API sends ``[]`` for an account without luck and
    ``[{"id": "luck", "value": n}]`` otherwise.
    """

    path = "/v2/account/luck"
    authentication = Authentication.REQUIRED

    @model_validator(mode="before")
    @classmethod
    def _parse_luck(cls, data: Any) -> Any:
        if not isinstance(data, list):
            return data
        if not data:
            return 0

        entry = data[0]
        if not isinstance(entry, dict) or entry.get("id") != "luck":
            raise ValueError("expected a luck id value")
        if "value" not in entry:
            raise ValueError("missing field value")
        return entry["value"]

    @field_serializer("root")
    def _serialize_luck(self, value: int) -> list[dict[str, Any]]:
        return [{"id": "luck", "value": value}] if value else []

    def __int__(self) -> int:
        return self.root


class AccountMailCarriers(RootEndpoint[list[int]]):
    path = "/v2/account/mailcarriers"
    authentication = Authentication.REQUIRED


class AccountMapChests(RootEndpoint[list[str]]):
    """Hero's choice chests opened since the daily reset."""

    path = "/v2/account/mapchests"
    authentication = Authentication.REQUIRED


class AccountMastery(Gw2Model):
    id: int
    level: int = Field(0, description="Index of the highest trained level")


class AccountMasteries(RootEndpoint[list[AccountMastery]]):
    path = "/v2/account/masteries"
    authentication = Authentication.REQUIRED


class MasteryPointsTotal(Gw2Model):
    region: str
    spent: int
    earned: int


class AccountMasteryPoints(Endpoint):
    path = "/v2/account/mastery/points"
    authentication = Authentication.REQUIRED

    totals: list[MasteryPointsTotal]
    unlocked: list[int]


class AccountMaterial(Gw2Model):
    id: int
    category: int
    binding: ItemBinding | None = None
    count: int


class AccountMaterials(RootEndpoint[list[AccountMaterial]]):
    """Contents of the material storage."""

    path = "/v2/account/materials"
    authentication = Authentication.REQUIRED


class AccountMinis(RootEndpoint[list[int]]):
    path = "/v2/account/minis"
    authentication = Authentication.REQUIRED


class AccountMountSkins(RootEndpoint[list[int]]):
    path = "/v2/account/mounts/skins"
    authentication = Authentication.REQUIRED


class AccountMountTypes(RootEndpoint[list[str]]):
    path = "/v2/account/mounts/types"
    authentication = Authentication.REQUIRED


class AccountNovelties(RootEndpoint[list[int]]):
    path = "/v2/account/novelties"
    authentication = Authentication.REQUIRED


class AccountOutfits(RootEndpoint[list[int]]):
    path = "/v2/account/outfits"
    authentication = Authentication.REQUIRED


class ProgressionEntry(Gw2Model):
    id: str
    value: int


class AccountProgression(RootEndpoint[list[ProgressionEntry]]):
    path = "/v2/account/progression"
    authentication = Authentication.REQUIRED


class AccountPvpHeroes(RootEndpoint[list[int]]):
    path = "/v2/account/pvp/heroes"
    authentication = Authentication.REQUIRED


class AccountRaids(RootEndpoint[list[str]]):
    """Raid encounters completed since the weekly reset."""

    path = "/v2/account/raids"
    authentication = Authentication.REQUIRED


class AccountRecipes(RootEndpoint[list[int]]):
    path = "/v2/account/recipes"
    authentication = Authentication.REQUIRED


class AccountSkins(RootEndpoint[list[int]]):
    path = "/v2/account/skins"
    authentication = Authentication.REQUIRED


class AccountTitles(RootEndpoint[list[int]]):
    path = "/v2/account/titles"
    authentication = Authentication.REQUIRED


class WalletEntry(Gw2Model):
    id: int = Field(..., description="Currency id")
    value: int


class AccountWallet(RootEndpoint[list[WalletEntry]]):
    path = "/v2/account/wallet"
    authentication = Authentication.REQUIRED

    def balance(self, currency_id: int) -> int:
        """Amount of a currency in the wallet, 0 if absent."""
        for entry in self.root:
            if entry.id == currency_id:
                return entry.value
        return 0


class AccountWorldBosses(RootEndpoint[list[str]]):
    """World bosses defeated since the daily reset."""

    path = "/v2/account/worldbosses"
    authentication = Authentication.REQUIRED
