from pydantic import Field

from .base import BulkEndpoint


class Currency(BulkEndpoint):
    """A wallet currency."""

    path = "/v2/currencies"
    localized = True

    id: int
    name: str
    description: str
    icon: str = Field(..., description="Render service URL of the icon")
    order: int = Field(..., description="Sorting order in the wallet")
