from pydantic import Field

from .base import BulkEndpoint


class Mini(BulkEndpoint):
    """A miniature pet."""

    path = "/v2/minis"
    localized = True

    id: int
    name: str
    unlock: str | None = Field(None, description="Unlock text, if any")
    icon: str
    order: int
    item_id: int = Field(..., description="Item which unlocks the mini")
