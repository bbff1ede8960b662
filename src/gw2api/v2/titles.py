from pydantic import Field

from .base import BulkEndpoint


class Title(BulkEndpoint):
    """An account title."""

    path = "/v2/titles"
    localized = True

    id: int
    name: str
    achievements: list[int] | None = Field(
        None,
        description="Achievements that grant the title",
    )
    ap_required: int | None = Field(
        None,
        description="Achievement points required for the title",
    )
