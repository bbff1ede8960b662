"""Achievements.

Rewards and bits are tagged by their ``type`` field; each tag maps to its
own model.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from .base import Gw2Model, ListEndpoint


class AchievementKind(Enum):
    DEFAULT = "Default"
    ITEM_SET = "ItemSet"


class AchievementTier(Gw2Model):
    count: int
    points: int


class CoinsReward(Gw2Model):
    type: Literal["Coins"] = "Coins"
    count: int


class ItemReward(Gw2Model):
    type: Literal["Item"] = "Item"
    id: int
    count: int


class MasteryReward(Gw2Model):
    type: Literal["Mastery"] = "Mastery"
    id: int
    region: str


class TitleReward(Gw2Model):
    type: Literal["Title"] = "Title"
    id: int


AchievementReward = Annotated[
    Union[CoinsReward, ItemReward, MasteryReward, TitleReward],
    Field(discriminator="type"),
]


class TextBit(Gw2Model):
    type: Literal["Text"] = "Text"
    text: str


class ItemBit(Gw2Model):
    type: Literal["Item"] = "Item"
    id: int


class MinipetBit(Gw2Model):
    type: Literal["Minipet"] = "Minipet"
    id: int


class SkinBit(Gw2Model):
    type: Literal["Skin"] = "Skin"
    id: int


AchievementBit = Annotated[
    Union[TextBit, ItemBit, MinipetBit, SkinBit],
    Field(discriminator="type"),
]


class Achievement(ListEndpoint):
    """An achievement.

    There are too many achievements for ``ids=all``; use get_many instead.
    """

    path = "/v2/achievements"
    localized = True

    id: int
    icon: str | None = None
    name: str
    description: str
    requirement: str
    locked_text: str
    kind: AchievementKind = Field(..., alias="type")
    flags: list[str]
    tiers: list[AchievementTier]
    prerequisites: list[int] = Field(default_factory=list)
    rewards: list[AchievementReward] = Field(default_factory=list)
    bits: list[AchievementBit] = Field(default_factory=list)
    point_cap: int | None = None
