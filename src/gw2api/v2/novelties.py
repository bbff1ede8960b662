from enum import Enum

from .base import BulkEndpoint


class NoveltySlot(Enum):
    CHAIR = "Chair"
    MUSIC = "Music"
    HELD_ITEM = "HeldItem"
    MISCELLANEOUS = "Miscellaneous"
    TONIC = "Tonic"


class Novelty(BulkEndpoint):
    """A novelty unlock (chairs, instruments, held items, tonics)."""

    path = "/v2/novelties"
    localized = True

    id: int
    name: str
    description: str
    icon: str
    slot: NoveltySlot
    unlock_item: list[int]
