"""Trading post and currency exchange."""

from datetime import datetime
from typing import Any

from pydantic import Field

from gw2api.entities import Authentication
from gw2api.protocols import RequestExecutor

from .base import Endpoint, Gw2Model, ListEndpoint, Resource, RootEndpoint


class DeliveryItem(Gw2Model):
    id: int
    count: int


class Delivery(Endpoint):
    """Coins and items waiting for pickup at the trading post."""

    path = "/v2/commerce/delivery"
    authentication = Authentication.REQUIRED

    coins: int
    items: list[DeliveryItem]


class Exchange(Resource):
    """A quote from the gem exchange."""

    path = "/v2/commerce/exchange"

    coins_per_gem: int
    quantity: int = Field(..., description="Amount received for the exchanged currency")

    @classmethod
    def coins(cls, client: RequestExecutor, quantity: int) -> Any:
        """Quote how many gems ``quantity`` coins buy."""
        return client.send(cls.endpoint_request(f"{cls.path}/coins", quantity=quantity), cls)

    @classmethod
    def gems(cls, client: RequestExecutor, quantity: int) -> Any:
        """Quote how many coins ``quantity`` gems buy."""
        return client.send(cls.endpoint_request(f"{cls.path}/gems", quantity=quantity), cls)


class Listing(Gw2Model):
    listings: int = Field(..., description="Number of individual listings at this price")
    unit_price: int
    quantity: int


class Listings(ListEndpoint):
    """All buy and sell orders for an item."""

    path = "/v2/commerce/listings"

    id: int
    buys: list[Listing]
    sells: list[Listing]


class Price(Gw2Model):
    unit_price: int
    quantity: int


class Prices(ListEndpoint):
    """Best buy and sell price for an item."""

    path = "/v2/commerce/prices"

    id: int
    whitelisted: bool
    buys: Price
    sells: Price


class CurrentTransaction(Gw2Model):
    id: int
    item_id: int
    price: int
    quantity: int
    created: datetime


class CurrentTransactions(RootEndpoint[list[CurrentTransaction]]):
    """Unfulfilled buy or sell orders of the account."""

    path = "/v2/commerce/transactions/current"
    authentication = Authentication.REQUIRED

    @classmethod
    def buys(cls, client: RequestExecutor) -> Any:
        return client.send(cls.endpoint_request(f"{cls.path}/buys"), cls)

    @classmethod
    def sells(cls, client: RequestExecutor) -> Any:
        return client.send(cls.endpoint_request(f"{cls.path}/sells"), cls)


class HistoryTransaction(Gw2Model):
    id: int
    item_id: int
    price: int
    quantity: int
    created: datetime
    purchased: datetime


class HistoryTransactions(RootEndpoint[list[HistoryTransaction]]):
    """Fulfilled buy or sell orders of the account from the past 90 days."""

    path = "/v2/commerce/transactions/history"
    authentication = Authentication.REQUIRED

    @classmethod
    def buys(cls, client: RequestExecutor) -> Any:
        return client.send(cls.endpoint_request(f"{cls.path}/buys"), cls)

    @classmethod
    def sells(cls, client: RequestExecutor) -> Any:
        return client.send(cls.endpoint_request(f"{cls.path}/sells"), cls)
