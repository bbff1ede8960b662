"""Endpoint request value object."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class Authentication(Enum):
    """How an endpoint uses the configured access token."""

    NONE = "none"
    # Sent when configured; unlocks extra fields (e.g. guild details for leaders)
    OPTIONAL = "optional"
    REQUIRED = "required"


@dataclass(frozen=True)
class EndpointRequest:
    """A GET request against a single API path.

    Attributes:
        path: Path below the base URL, e.g. "/v2/build"
        params: Query parameters
        authentication: Whether the access token is sent
        localized: Whether the client's language is appended as ``lang``
    """

    path: str
    params: dict[str, Any] = field(default_factory=dict)
    authentication: Authentication = Authentication.NONE
    localized: bool = False

    def with_params(self, **params: Any) -> "EndpointRequest":
        """Return a copy with ``params`` merged into the query."""
        return replace(self, params={**self.params, **params})
