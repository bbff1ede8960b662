"""Models for the /v2 endpoints.

Each module covers one area of the API. Models are pydantic classes whose
classmethods fetch them through any RequestExecutor:

    ```python
    from gw2api.v2.worlds import World

    ids = await World.ids(client)
    worlds = await World.get_all(client)
    ```
"""

from . import (
    account,
    achievements,
    build,
    colors,
    commerce,
    currencies,
    dungeons,
    files,
    guild,
    minis,
    novelties,
    quaggans,
    raids,
    titles,
    tokeninfo,
    worlds,
    wvw,
)
from .base import BulkEndpoint, Endpoint, Gw2Model, ListEndpoint, Resource, RootEndpoint

__all__ = [
    # Base classes
    "Gw2Model",
    "Resource",
    "Endpoint",
    "ListEndpoint",
    "BulkEndpoint",
    "RootEndpoint",
    # Endpoint modules
    "account",
    "achievements",
    "build",
    "colors",
    "commerce",
    "currencies",
    "dungeons",
    "files",
    "guild",
    "minis",
    "novelties",
    "quaggans",
    "raids",
    "titles",
    "tokeninfo",
    "worlds",
    "wvw",
]
