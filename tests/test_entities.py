"""
Tests for the request value objects.
"""

import dataclasses

import pytest

from gw2api import Authentication, EndpointRequest


def test_with_params_merges_into_copy():
    request = EndpointRequest("/v2/guild/search", params={"page": 0}, localized=True)

    updated = request.with_params(name="Mists Walkers")

    assert updated.params == {"page": 0, "name": "Mists Walkers"}
    assert updated.localized is True
    assert updated.authentication is Authentication.NONE
    assert request.params == {"page": 0}


def test_with_params_overrides_existing_key():
    request = EndpointRequest("/v2/commerce/exchange/coins", params={"quantity": 1})

    assert request.with_params(quantity=500).params == {"quantity": 500}


def test_request_is_frozen():
    request = EndpointRequest("/v2/build")

    with pytest.raises(dataclasses.FrozenInstanceError):
        request.path = "/v2/worlds"
