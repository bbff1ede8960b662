from datetime import datetime
from enum import Enum

from pydantic import Field

from gw2api.entities import Authentication

from .base import Endpoint


class TokenPermission(Enum):
    """A permission (scope) granted to an API key."""

    ACCOUNT = "account"
    BUILDS = "builds"
    CHARACTERS = "characters"
    GUILDS = "guilds"
    INVENTORIES = "inventories"
    PROGRESSION = "progression"
    PVP = "pvp"
    TRADINGPOST = "tradingpost"
    UNLOCKS = "unlocks"
    WALLET = "wallet"


class TokenKind(Enum):
    API_KEY = "APIKey"
    SUBTOKEN = "Subtoken"


class TokenInfo(Endpoint):
    """Details about the access token in use."""

    path = "/v2/tokeninfo"
    authentication = Authentication.REQUIRED

    id: str = Field(..., description="The unique id of the token")
    name: str = Field(..., description="The name the user gave the token")
    permissions: list[TokenPermission]
    kind: TokenKind = Field(..., alias="type")
    # Subtokens only
    expires_at: datetime | None = None
    issued_at: datetime | None = None
    urls: list[str] | None = Field(None, description="Paths a subtoken is restricted to")

    def has_permission(self, permission: TokenPermission) -> bool:
        return permission in self.permissions
