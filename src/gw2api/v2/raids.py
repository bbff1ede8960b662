from enum import Enum

from pydantic import Field

from .base import BulkEndpoint, Gw2Model


class RaidEventKind(Enum):
    CHECKPOINT = "Checkpoint"
    BOSS = "Boss"


class RaidEvent(Gw2Model):
    id: str
    kind: RaidEventKind = Field(..., alias="type")


class RaidWing(Gw2Model):
    id: str
    events: list[RaidEvent]


class Raid(BulkEndpoint):
    path = "/v2/raids"
    id_type = str

    id: str
    wings: list[RaidWing] = Field(default_factory=list)
