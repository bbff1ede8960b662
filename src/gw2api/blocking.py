"""Drop-in synchronous API client.

Wraps the asynchronous Client and drives each request to completion on an
event loop owned by the blocking client, so every endpoint classmethod
returns its value directly.

Example:
    ```python
    from gw2api.blocking import Client
    from gw2api.v2.build import Build

    with Client() as client:
        build = Build.get(client)
        print(build.id)
    ```

A blocking client must not be used from inside a running event loop; use
the asynchronous client there instead.
"""

import asyncio
import logging
from typing import Any, TypeVar

import httpx

from gw2api import client as async_client
from gw2api.entities import Authentication, EndpointRequest, Language

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Client:
    """The synchronous API client.

    Each instance owns one event loop. It is not safe to share an instance
    between threads.
    """

    def __init__(
        self,
        access_token: str | None = None,
        language: Language | str | None = None,
        base_url: str | None = None,
        schema_version: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the blocking client.

        Takes the same arguments as gw2api.Client.
        """
        self._init_with_inner(
            async_client.Client(
                access_token=access_token,
                language=language,
                base_url=base_url,
                schema_version=schema_version,
                timeout=timeout,
                transport=transport,
            )
        )

    def _init_with_inner(self, inner: async_client.Client) -> None:
        self._inner = inner
        self._loop = asyncio.new_event_loop()

    @classmethod
    def create(
        cls,
        access_token: str | None = None,
        language: Language | str | None = None,
    ) -> "Client":
        """Factory method to create a blocking Client from settings.

        Args:
            access_token: API key. If None, uses settings.
            language: Response language. If None, uses settings.

        Returns:
            Configured blocking Client
        """
        return cls.from_client(async_client.Client.create(access_token=access_token, language=language))

    @classmethod
    def from_client(cls, inner: async_client.Client) -> "Client":
        """Wrap an existing asynchronous client.

        The wrapped client must not have been used on another event loop.
        """
        client = cls.__new__(cls)
        client._init_with_inner(inner)
        return client

    @property
    def inner(self) -> async_client.Client:
        """The wrapped asynchronous client."""
        return self._inner

    @property
    def access_token(self) -> str | None:
        return self._inner.access_token

    @property
    def language(self) -> Language:
        return self._inner.language

    @property
    def closed(self) -> bool:
        return self._loop.is_closed()

    def send(self, request: EndpointRequest, response_type: type[T]) -> T:
        """Send a request and block until the response is deserialized.

        Raises the same errors as gw2api.Client.send.
        """
        return self._loop.run_until_complete(self._inner.send(request, response_type))

    def request(
        self,
        path: str,
        response_type: type[T],
        params: dict[str, Any] | None = None,
        authentication: Authentication = Authentication.NONE,
        localized: bool = False,
    ) -> T:
        """Blocking counterpart of gw2api.Client.request."""
        return self._loop.run_until_complete(
            self._inner.request(
                path,
                response_type,
                params=params,
                authentication=authentication,
                localized=localized,
            )
        )

    def close(self) -> None:
        """Close the wrapped client and the event loop."""
        if self._loop.is_closed():
            return
        try:
            self._loop.run_until_complete(self._inner.close())
        finally:
            self._loop.close()
            logger.debug("Blocking client closed")

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
