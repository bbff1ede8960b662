"""Internal value objects used by the clients.

These are plain enums and frozen dataclasses with no pydantic validation.
Response shapes live in the v2 package.
"""

from .language import Language
from .request import Authentication, EndpointRequest

__all__ = ["Authentication", "EndpointRequest", "Language"]
