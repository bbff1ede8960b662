"""Request executor protocol.

Defines the interface shared by every client that can send an
EndpointRequest and turn the response into a typed value.

Implementations:
- gw2api.Client: returns an awaitable
- gw2api.blocking.Client: returns the value directly
"""

from typing import Any, Protocol, runtime_checkable

from gw2api.entities import EndpointRequest


@runtime_checkable
class RequestExecutor(Protocol):
    """Protocol for API clients.

    Any type that implements ``send`` satisfies the protocol, no explicit
    inheritance needed.

    Example:
        ```python
        from gw2api.v2.build import Build

        build = await Build.get(gw2api.Client())       # async client
        build = Build.get(gw2api.blocking.Client())    # blocking client
        ```
    """

    def send(self, request: EndpointRequest, response_type: Any) -> Any:
        """Send a request and deserialize the response.

        Args:
            request: The endpoint request to send
            response_type: Type the JSON body is validated into

        Returns:
            The deserialized value, or an awaitable resolving to it
        """
        ...
