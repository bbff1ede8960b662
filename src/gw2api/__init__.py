"""gw2api - Typed client for the official Guild Wars 2 API.

Layers:
    - config: Settings loaded from the environment
    - entities: Request value objects (EndpointRequest, Language)
    - protocols: Interface shared by the clients (RequestExecutor)
    - client / blocking: Asynchronous client and its blocking facade
    - v2: Endpoint models with fetch classmethods
    - errors: Transport, status and decode errors

Usage:
    ```python
    from gw2api import Client
    from gw2api.v2.build import Build

    async with Client() as client:
        build = await Build.get(client)
    ```

Blocking usage:
    ```python
    from gw2api.blocking import Client
    from gw2api.v2.account import Account

    with Client.create() as client:   # token from GW2API_ACCESS_TOKEN
        account = Account.get(client)
    ```
"""

from gw2api import blocking, v2
from gw2api.client import Client
from gw2api.config import get_settings, settings
from gw2api.entities import Authentication, EndpointRequest, Language
from gw2api.errors import (
    ApiError,
    DecodeError,
    Gw2ApiError,
    NoAccessTokenError,
    TransportError,
)
from gw2api.protocols import RequestExecutor

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Clients
    "Client",
    "blocking",
    # Protocols (interfaces)
    "RequestExecutor",
    # Entities
    "Authentication",
    "EndpointRequest",
    "Language",
    # Endpoint models
    "v2",
    # Errors
    "Gw2ApiError",
    "ApiError",
    "DecodeError",
    "NoAccessTokenError",
    "TransportError",
]
