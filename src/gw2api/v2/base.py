"""Base classes for endpoint models.

Every model knows its own path and builds an EndpointRequest; the client it
is given decides how the request is executed. With gw2api.Client the
classmethods return awaitables, with gw2api.blocking.Client they return the
value itself.

Kinds of endpoint:
    - Endpoint: a single resource at a fixed path (/v2/build)
    - ListEndpoint: a collection addressed by id (/v2/achievements?id=1)
    - BulkEndpoint: a ListEndpoint that also accepts ``ids=all``
    - RootEndpoint: a bare JSON array or scalar (/v2/account/dyes)
"""

from collections.abc import Iterable, Iterator
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

from gw2api.entities import Authentication, EndpointRequest
from gw2api.protocols import RequestExecutor

RootT = TypeVar("RootT")


class Gw2Model(BaseModel):
    """Base model for API objects.

    Fields the API adds later are kept rather than rejected.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Resource(Gw2Model):
    """A model served from a fixed path."""

    path: ClassVar[str]
    authentication: ClassVar[Authentication] = Authentication.NONE
    localized: ClassVar[bool] = False

    @classmethod
    def endpoint_request(cls, path: str | None = None, **params: Any) -> EndpointRequest:
        """Build a request for this model's path (or a sub-path of it)."""
        return EndpointRequest(
            path=path or cls.path,
            params=params,
            authentication=cls.authentication,
            localized=cls.localized,
        )


class Endpoint(Resource):
    """A single resource."""

    @classmethod
    def get(cls, client: RequestExecutor) -> Any:
        """Fetch the resource."""
        return client.send(cls.endpoint_request(), cls)


class ListEndpoint(Resource):
    """A collection of resources addressed by id."""

    id_type: ClassVar[type] = int

    @classmethod
    def ids(cls, client: RequestExecutor) -> Any:
        """Fetch the ids of all items in the collection."""
        return client.send(cls.endpoint_request(), list[cls.id_type])

    @classmethod
    def get(cls, client: RequestExecutor, id: Any) -> Any:
        """Fetch the item with the given ``id``."""
        return client.send(cls.endpoint_request(id=id), cls)

    @classmethod
    def get_many(cls, client: RequestExecutor, ids: Iterable[Any]) -> Any:
        """Fetch the items with the given ``ids`` in one request.

        Raises:
            ValueError: If ``ids`` is empty
        """
        if isinstance(ids, (str, bytes)):
            raise TypeError("ids must be an iterable of ids, not a string")
        ids = [str(id) for id in ids]
        if not ids:
            raise ValueError("ids must not be empty")
        return client.send(cls.endpoint_request(ids=",".join(ids)), list[cls])


class BulkEndpoint(ListEndpoint):
    """A collection that can be fetched in full with ``ids=all``."""

    @classmethod
    def get_all(cls, client: RequestExecutor) -> Any:
        """Fetch every item in the collection."""
        return client.send(cls.endpoint_request(ids="all"), list[cls])


class RootEndpoint(RootModel[RootT], Generic[RootT]):
    """A resource whose JSON body is a bare array or scalar.

    Iterating, indexing and ``len()`` go to the wrapped value.
    """

    path: ClassVar[str]
    authentication: ClassVar[Authentication] = Authentication.NONE
    localized: ClassVar[bool] = False

    @classmethod
    def endpoint_request(cls, path: str | None = None, **params: Any) -> EndpointRequest:
        return EndpointRequest(
            path=path or cls.path,
            params=params,
            authentication=cls.authentication,
            localized=cls.localized,
        )

    @classmethod
    def get(cls, client: RequestExecutor) -> Any:
        """Fetch the resource."""
        return client.send(cls.endpoint_request(), cls)

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, item: Any) -> Any:
        return self.root[item]
