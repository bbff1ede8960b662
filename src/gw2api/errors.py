"""
Error types raised by the Guild Wars 2 API clients.

Every failure is surfaced as one of three kinds, plus a local check for
endpoints that need an API key:

- TransportError: the request never produced a response (connection, TLS, timeout)
- ApiError: the API answered with a non-success status
- DecodeError: the body was not valid JSON or did not match the expected type
- NoAccessTokenError: an authenticated endpoint was called without a token

None of them are retried.
"""

from typing import Any, Dict, Optional


class Gw2ApiError(Exception):
    """Base exception for all Guild Wars 2 API errors."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.path = path
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "message": self.message,
            "status": self.status,
            "path": self.path,
            "details": self.details,
            "type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        parts = [self.message]
        if self.status:
            parts.append(f"(Status: {self.status})")
        if self.path:
            parts.append(f"(Path: {self.path})")
        return " ".join(parts)


class TransportError(Gw2ApiError):
    """Error for connection, TLS and timeout failures."""

    def __init__(self, message: str = "Transport error", **kwargs):
        super().__init__(message, **kwargs)


class ApiError(Gw2ApiError):
    """Error for responses with a non-success status code.

    The API reports failures as ``{"text": "..."}``; that message is kept in
    ``text`` and is None when the body carried none.
    """

    def __init__(
        self,
        message: str = "API error",
        text: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.text = text
        if text:
            self.details["text"] = text


class DecodeError(Gw2ApiError):
    """Error when a response body cannot be deserialized."""

    def __init__(
        self,
        message: str = "Invalid response body",
        errors: Optional[list] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if errors:
            self.details["errors"] = errors


class NoAccessTokenError(Gw2ApiError):
    """Error when an authenticated endpoint is called without an access token."""

    def __init__(self, message: str = "No access token", **kwargs):
        super().__init__(message, status=None, **kwargs)
