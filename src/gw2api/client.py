"""Asynchronous Guild Wars 2 API client.

Sends GET requests to the official API and validates JSON bodies into the
pydantic models from the v2 package.

Key features:
- Lazily created httpx.AsyncClient
- Optional bearer token, sent only to endpoints that use it
- Localized endpoints get the client's language as ``lang``
- Every request pins the response schema with ``X-Schema-Version``

Example:
    ```python
    from gw2api import Client
    from gw2api.v2.build import Build

    async with Client() as client:
        build = await Build.get(client)
        print(build.id)
    ```
"""

import json
import logging
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from gw2api.config import settings
from gw2api.entities import Authentication, EndpointRequest, Language
from gw2api.errors import ApiError, DecodeError, NoAccessTokenError, TransportError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


class Client:
    """Asynchronous API client.

    Satisfies the RequestExecutor protocol: ``send`` is a coroutine, so every
    endpoint classmethod returns an awaitable when given this client.

    Example:
        ```python
        client = Client(access_token="...", language=Language.DE)
        account = await Account.get(client)
        await client.close()
        ```
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
        """Initialize the client.

        Args:
            access_token: API key or subtoken. Endpoints that require
                authentication fail with NoAccessTokenError without one.
            language: Response language. Defaults to settings.language.
            base_url: API host. Defaults to settings.base_url.
            schema_version: Value of the X-Schema-Version header.
                Defaults to settings.schema_version.
            timeout: Request timeout in seconds. Defaults to settings.timeout.
            transport: Optional httpx transport (e.g. httpx.MockTransport).
        """
        self._access_token = access_token
        self._language = Language(language or settings.language)
        self._base_url = (base_url or settings.base_url).rstrip("/")
        self._schema_version = schema_version or settings.schema_version
        self._timeout = timeout or settings.timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    @classmethod
    def create(
        cls,
        access_token: str | None = None,
        language: Language | str | None = None,
    ) -> "Client":
        """Factory method to create a Client from settings.

        Unlike the constructor, the access token falls back to
        settings.access_token (GW2API_ACCESS_TOKEN or APIKEY).

        Args:
            access_token: API key. If None, uses settings.
            language: Response language. If None, uses settings.

        Returns:
            Configured Client
        """
        return cls(access_token=access_token or settings.access_token, language=language)

    @property
    def access_token(self) -> str | None:
        return self._access_token

    @property
    def language(self) -> Language:
        return self._language

    @property
    def base_url(self) -> str:
        return self._base_url

    def prepare(self, request: EndpointRequest) -> tuple[dict[str, Any], dict[str, str]]:
        """Build query parameters and headers for a request.

        Args:
            request: The endpoint request

        Returns:
            Tuple of (params, headers)

        Raises:
            NoAccessTokenError: If the endpoint requires a token and none is set
        """
        params = dict(request.params)
        if request.localized:
            params["lang"] = self._language.value

        headers = {"X-Schema-Version": self._schema_version}

        if request.authentication is Authentication.REQUIRED and not self._access_token:
            raise NoAccessTokenError(
                f"{request.path} requires an access token", path=request.path
            )
        if request.authentication is not Authentication.NONE and self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"

        return params, headers

    async def send(self, request: EndpointRequest, response_type: type[T]) -> T:
        """Send a request and deserialize the response body.

        Args:
            request: The endpoint request to send
            response_type: Type the JSON body is validated into

        Returns:
            The deserialized response

        Raises:
            NoAccessTokenError: If the endpoint requires a token and none is set
            TransportError: If the request fails before a response arrives
            ApiError: If the response status is not 2xx
            DecodeError: If the body does not match response_type
        """
        params, headers = self.prepare(request)
        logger.debug("GET %s params=%s", request.path, params)

        try:
            response = await self.client.get(request.path, params=params, headers=headers)
        except httpx.TransportError as e:
            logger.warning("Request to %s failed: %s", request.path, e)
            raise TransportError(
                f"Request failed: {e}", path=request.path, original_error=e
            ) from e

        if not response.is_success:
            raise self._api_error(request, response)

        try:
            return _adapter(response_type).validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"Invalid response body: {e.error_count()} validation error(s)",
                status=response.status_code,
                path=request.path,
                errors=e.errors(include_url=False),
                original_error=e,
            ) from e

    async def request(
        self,
        path: str,
        response_type: type[T],
        params: dict[str, Any] | None = None,
        authentication: Authentication = Authentication.NONE,
        localized: bool = False,
    ) -> T:
        """Send a GET request to an arbitrary path.

        Useful for endpoints without a model in the v2 package.

        Example:
            ```python
            ids = await client.request("/v2/skins", list[int])
            ```
        """
        endpoint = EndpointRequest(
            path=path,
            params=params or {},
            authentication=authentication,
            localized=localized,
        )
        return await self.send(endpoint, response_type)

    @staticmethod
    def _api_error(request: EndpointRequest, response: httpx.Response) -> ApiError:
        text = None
        try:
            body = json.loads(response.content)
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("text"), str):
            text = body["text"]

        logger.warning("GET %s returned %s: %s", request.path, response.status_code, text)
        return ApiError(
            f"api error: {text}" if text else f"api error: HTTP {response.status_code}",
            text=text,
            status=response.status_code,
            path=request.path,
        )

    async def close(self) -> None:
        """Close the async HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
