"""Guild details, search, members and ranks."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import Field

from gw2api.entities import Authentication, EndpointRequest
from gw2api.protocols import RequestExecutor

from .base import Gw2Model, Resource, RootEndpoint


class GuildEmblemFlag(Enum):
    FLIP_BACKGROUND_HORIZONTAL = "FlipBackgroundHorizontal"
    FLIP_BACKGROUND_VERTICAL = "FlipBackgroundVertical"
    FLIP_FOREGROUND_HORIZONTAL = "FlipForegroundHorizontal"
    FLIP_FOREGROUND_VERTICAL = "FlipForegroundVertical"


class GuildEmblemSection(Gw2Model):
    id: int
    colors: list[int]


class GuildEmblem(Gw2Model):
    background: GuildEmblemSection
    foreground: GuildEmblemSection
    flags: list[GuildEmblemFlag]


class Guild(Resource):
    """A guild.

    The fields from ``level`` on are only present when the access token
    belongs to a leader of the guild.
    """

    path = "/v2/guild"
    authentication = Authentication.OPTIONAL

    id: str
    name: str
    tag: str
    emblem: GuildEmblem | None = None
    level: int | None = None
    motd: str | None = Field(None, description="Message of the day")
    influence: int | None = None
    aetherium: int | None = None
    favor: int | None = None
    member_count: int | None = None
    member_capacity: int | None = None

    @classmethod
    def get(cls, client: RequestExecutor, id: str) -> Any:
        """Fetch the guild with the given ``id``."""
        return client.send(cls.endpoint_request(f"{cls.path}/{id}"), cls)

    @classmethod
    def search(cls, client: RequestExecutor, name: str) -> Any:
        """Fetch the ids of guilds named ``name``.

        Returns an empty list if nothing matches.
        """
        # Public even though guild details take a token
        request = EndpointRequest(f"{cls.path}/search").with_params(name=name)
        return client.send(request, list[str])


class GuildMember(Gw2Model):
    name: str = Field(..., description="Account name of the member")
    rank: str
    joined: datetime | None = Field(None, description="Join date, missing for very old members")


class GuildMembers(RootEndpoint[list[GuildMember]]):
    """Members of a guild.

    The access token must belong to a leader of the guild.
    """

    path = "/v2/guild/{guild_id}/members"
    authentication = Authentication.REQUIRED

    @classmethod
    def get(cls, client: RequestExecutor, guild_id: str) -> Any:  # type: ignore[override]
        """Fetch the members of the guild with the given ``guild_id``."""
        return client.send(cls.endpoint_request(cls.path.format(guild_id=guild_id)), cls)


class GuildRank(Gw2Model):
    id: str = Field(..., description="The unique name of the rank")
    order: int = Field(..., description="Sorting order, lower is higher")
    permissions: list[str]
    icon: str


class GuildRanks(RootEndpoint[list[GuildRank]]):
    """Ranks of a guild.

    The access token must belong to a leader of the guild.
    """

    path = "/v2/guild/{guild_id}/ranks"
    authentication = Authentication.REQUIRED

    @classmethod
    def get(cls, client: RequestExecutor, guild_id: str) -> Any:  # type: ignore[override]
        """Fetch the ranks of the guild with the given ``guild_id``."""
        return client.send(cls.endpoint_request(cls.path.format(guild_id=guild_id)), cls)
