"""
Shared fixtures: a fake Guild Wars 2 API served through httpx.MockTransport.
"""

import httpx
import pytest

from gw2api import blocking

BASE_URL = "https://api.guildwars2.com"
TOKEN = "564F181A-F0FC-114A-A55D-3C1DCD45F3767AF3848F-AB29-4EBF-9594-F91E6A75E015"


class FakeApi:
    """Routes requests by path to canned JSON responses and records them."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, payload: object, status: int = 200) -> None:
        self.routes[path] = (status, payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, payload = self.routes.get(request.url.path, (404, {"text": "no such endpoint"}))
        if isinstance(payload, bytes):
            return httpx.Response(status, content=payload)
        if isinstance(payload, Exception):
            raise payload
        return httpx.Response(status, json=payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_api():
    """Create an empty fake API."""
    return FakeApi()


@pytest.fixture
def client(fake_api):
    """Create a blocking client with an access token, backed by the fake API."""
    with blocking.Client(
        access_token=TOKEN, language="en", base_url=BASE_URL, transport=fake_api.transport
    ) as c:
        yield c


@pytest.fixture
def anonymous_client(fake_api):
    """Create a blocking client without an access token."""
    with blocking.Client(language="en", base_url=BASE_URL, transport=fake_api.transport) as c:
        yield c
