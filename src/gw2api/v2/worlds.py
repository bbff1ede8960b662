"""Game worlds and their population."""

from enum import Enum
from functools import total_ordering

from .base import BulkEndpoint


@total_ordering
class Population(Enum):
    """The population of a World, ordered from Low to Full."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "VeryHigh"
    FULL = "Full"

    @property
    def rank(self) -> int:
        return _POPULATION_RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Population):
            return NotImplemented
        return self.rank < other.rank


_POPULATION_RANKS = {population: rank for rank, population in enumerate(Population)}


class World(BulkEndpoint):
    """A game world."""

    path = "/v2/worlds"
    localized = True

    id: int
    name: str
    population: Population
