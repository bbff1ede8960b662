"""World vs. World endpoints."""

from datetime import datetime

from pydantic import Field

from .base import BulkEndpoint, Gw2Model


class AbilityRank(Gw2Model):
    cost: int
    effect: str


class Ability(BulkEndpoint):
    """A WvW ability and its ranks."""

    path = "/v2/wvw/abilities"
    localized = True

    id: int
    name: str
    description: str
    icon: str
    ranks: list[AbilityRank]


class MapScore(Gw2Model):
    type: str
    scores: dict[str, int]


class Skirmish(Gw2Model):
    id: int
    scores: dict[str, int]
    map_scores: list[MapScore]


class Bonus(Gw2Model):
    type: str
    owner: str


class Objective(Gw2Model):
    id: str
    type: str
    owner: str
    last_flipped: datetime
    claimed_by: str | None = Field(None, description="Guild id of the claiming guild")
    claimed_at: datetime | None = None
    points_tick: int
    points_capture: int
    yaks_delivered: int | None = None
    guild_upgrades: list[int] | None = None


class Map(Gw2Model):
    id: int
    type: str
    scores: dict[str, int]
    bonuses: list[Bonus]
    objectives: list[Objective]
    deaths: dict[str, int]
    kills: dict[str, int]


class Match(BulkEndpoint):
    """A running WvW match. Scores and worlds are keyed by team color."""

    path = "/v2/wvw/matches"
    id_type = str

    id: str = Field(..., description="Match id, e.g. '1-2'")
    start_time: datetime
    end_time: datetime
    scores: dict[str, int]
    worlds: dict[str, int]
    all_worlds: dict[str, list[int]]
    deaths: dict[str, int]
    kills: dict[str, int]
    victory_points: dict[str, int]
    skirmishes: list[Skirmish]
    maps: list[Map]


class Rank(BulkEndpoint):
    path = "/v2/wvw/ranks"
    localized = True

    id: int
    title: str
    min_rank: int


class Upgrade(Gw2Model):
    name: str
    description: str
    icon: str


class UpgradeTier(Gw2Model):
    name: str
    yaks_required: int
    upgrades: list[Upgrade]


class Upgrades(BulkEndpoint):
    """Objective upgrade tiers."""

    path = "/v2/wvw/upgrades"
    localized = True

    id: int
    tiers: list[UpgradeTier]
