"""
Tests for the blocking facade.
"""

import httpx
import pytest

from gw2api import ApiError, Client, NoAccessTokenError, TransportError, blocking
from gw2api.protocols import RequestExecutor
from gw2api.v2.build import Build
from gw2api.v2.tokeninfo import TokenInfo


def test_blocking_client_satisfies_protocol(client):
    assert isinstance(client, RequestExecutor)


def test_returns_value_directly(client, fake_api):
    """Test that endpoint classmethods return the model, not an awaitable."""
    fake_api.add("/v2/build", {"id": 115267})

    build = Build.get(client)

    assert isinstance(build, Build)
    assert build.id == 115267


def test_sends_access_token(client, fake_api):
    fake_api.add(
        "/v2/tokeninfo",
        {"id": "ABCDE", "name": "my key", "permissions": ["account"], "type": "APIKey"},
    )

    TokenInfo.get(client)

    assert fake_api.last.headers["Authorization"] == f"Bearer {client.access_token}"


def test_errors_propagate(client, anonymous_client, fake_api):
    fake_api.add("/v2/build", {"text": "too many requests"}, status=429)
    with pytest.raises(ApiError):
        Build.get(client)

    with pytest.raises(NoAccessTokenError):
        TokenInfo.get(anonymous_client)

    fake_api.add("/v2/build", httpx.ConnectTimeout("timed out"))
    with pytest.raises(TransportError):
        Build.get(client)


def test_request_helper(client, fake_api):
    fake_api.add("/v2/skins", [10, 20])

    assert client.request("/v2/skins", list[int]) == [10, 20]


def test_sequential_requests_reuse_loop(client, fake_api):
    fake_api.add("/v2/build", {"id": 7})

    assert [Build.get(client).id for _ in range(3)] == [7, 7, 7]
    assert len(fake_api.requests) == 3


def test_close(fake_api):
    c = blocking.Client(transport=fake_api.transport)
    assert not c.closed

    c.close()
    c.close()

    assert c.closed


def test_from_client_wraps_existing_async_client(fake_api):
    fake_api.add("/v2/build", {"id": 3})
    inner = Client(access_token="secret", transport=fake_api.transport)

    with blocking.Client.from_client(inner) as c:
        assert c.inner is inner
        assert c.access_token == "secret"
        assert Build.get(c).id == 3


def test_create_uses_explicit_token():
    c = blocking.Client.create(access_token="explicit")
    try:
        assert c.access_token == "explicit"
    finally:
        c.close()
