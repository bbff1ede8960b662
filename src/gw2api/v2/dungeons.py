from enum import Enum

from pydantic import Field

from .base import BulkEndpoint, Gw2Model


class DungeonKind(Enum):
    STORY = "Story"
    EXPLORABLE = "Explorable"


class DungeonPath(Gw2Model):
    id: str
    kind: DungeonKind = Field(..., alias="type")


class Dungeon(BulkEndpoint):
    path = "/v2/dungeons"
    id_type = str

    id: str
    paths: list[DungeonPath]
