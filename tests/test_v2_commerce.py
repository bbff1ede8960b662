"""
Tests for the trading post and gem exchange endpoints.
"""

import pytest

from gw2api import NoAccessTokenError
from gw2api.v2.commerce import (
    CurrentTransactions,
    Delivery,
    Exchange,
    HistoryTransactions,
    Listings,
    Prices,
)


def test_exchange_coins(anonymous_client, fake_api):
    fake_api.add("/v2/commerce/exchange/coins", {"coins_per_gem": 2921, "quantity": 34})

    quote = Exchange.coins(anonymous_client, 100000)

    assert quote.coins_per_gem == 2921
    assert quote.quantity == 34
    assert fake_api.last.url.params["quantity"] == "100000"


def test_exchange_gems(anonymous_client, fake_api):
    fake_api.add("/v2/commerce/exchange/gems", {"coins_per_gem": 1842, "quantity": 184230})

    quote = Exchange.gems(anonymous_client, 100)

    assert quote.quantity == 184230
    assert fake_api.last.url.path == "/v2/commerce/exchange/gems"


def test_listings(anonymous_client, fake_api):
    fake_api.add(
        "/v2/commerce/listings",
        {
            "id": 19684,
            "buys": [{"listings": 1, "unit_price": 150, "quantity": 250}],
            "sells": [
                {"listings": 2, "unit_price": 180, "quantity": 500},
                {"listings": 1, "unit_price": 181, "quantity": 33},
            ],
        },
    )

    listings = Listings.get(anonymous_client, 19684)

    assert listings.buys[0].unit_price == 150
    assert sum(s.quantity for s in listings.sells) == 533


def test_prices(anonymous_client, fake_api):
    fake_api.add(
        "/v2/commerce/prices",
        [
            {
                "id": 19684,
                "whitelisted": False,
                "buys": {"quantity": 145975, "unit_price": 7018},
                "sells": {"quantity": 126, "unit_price": 7019},
            }
        ],
    )

    prices = Prices.get_many(anonymous_client, [19684])

    assert prices[0].whitelisted is False
    assert prices[0].sells.unit_price == 7019
    assert fake_api.last.url.params["ids"] == "19684"


def test_delivery(client, fake_api):
    fake_api.add("/v2/commerce/delivery", {"coins": 103, "items": [{"id": 24, "count": 2}]})

    delivery = Delivery.get(client)

    assert delivery.coins == 103
    assert delivery.items[0].count == 2
    assert "Authorization" in fake_api.last.headers


@pytest.mark.parametrize(
    ("endpoint", "method", "path"),
    [
        (CurrentTransactions, "buys", "/v2/commerce/transactions/current/buys"),
        (CurrentTransactions, "sells", "/v2/commerce/transactions/current/sells"),
    ],
)
def test_current_transactions(client, fake_api, endpoint, method, path):
    fake_api.add(
        path,
        [{"id": 1, "item_id": 24, "price": 100, "quantity": 3, "created": "2022-03-01T10:00:00+00:00"}],
    )

    transactions = getattr(endpoint, method)(client)

    assert transactions[0].item_id == 24
    assert fake_api.last.url.path == path


def test_history_transactions(client, fake_api):
    fake_api.add(
        "/v2/commerce/transactions/history/sells",
        [
            {
                "id": 2,
                "item_id": 24,
                "price": 100,
                "quantity": 1,
                "created": "2022-03-01T10:00:00+00:00",
                "purchased": "2022-03-02T12:30:00+00:00",
            }
        ],
    )

    transactions = HistoryTransactions.sells(client)

    assert len(transactions) == 1
    assert transactions[0].purchased > transactions[0].created


def test_transactions_require_token(anonymous_client):
    with pytest.raises(NoAccessTokenError):
        HistoryTransactions.buys(anonymous_client)
