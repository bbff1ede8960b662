"""Current game build."""

from pydantic import Field

from .base import Endpoint


class Build(Endpoint):
    """The current build id of the game."""

    path = "/v2/build"

    id: int = Field(..., description="Build id")
