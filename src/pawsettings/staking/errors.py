"""Exception classes for staking lookups.

This module defines a hierarchy of exception classes for handling
error conditions when querying the staking service.
"""

from __future__ import annotations

from typing import Any


class StakingAPIError(Exception):
    """Error during a staking service request or response parsing.

    Includes the HTTP status (0 when no response was received) and the
    raw response body when available.
    """

    def __init__(self, code: int, message: str, response: dict[str, Any] | None = None) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code or 0
            message: Human-readable error message
            response: Optional raw response for debugging
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message
        self.response: dict[str, Any] | None = response

    @property
    def is_client_error(self) -> bool:
        """True for 400-499 status codes."""
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        """True for 500-599 status codes."""
        return self.code >= 500

    @classmethod
    def from_response(cls, response: dict[str, Any], status_code: int = 0) -> StakingAPIError:
        """Create an error from a failed response.

        Args:
            response: Decoded response body (may be empty)
            status_code: HTTP status code

        Returns:
            Appropriate StakingAPIError subclass
        """
        if status_code == 404:
            return NotFoundError(status_code, response.get("message", "Resource not found"))
        if status_code == 429:
            return RateLimitError(status_code, response.get("message", "Rate limit exceeded"))
        if 400 <= status_code < 500:
            return ClientError(status_code, response.get("message", "Client error"), response)
        if status_code >= 500:
            return ServerError(status_code, response.get("message", "Server error"), response)
        return cls(status_code, response.get("message", "Unknown error"), response)


class NetworkError(StakingAPIError):
    """Raised when a network issue prevents the request."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(0, message)
        self.original_error = original_error


class NotFoundError(StakingAPIError):
    """Raised when the lookup endpoint does not exist."""


class RateLimitError(StakingAPIError):
    """Raised when rate limits are exceeded."""


class ClientError(StakingAPIError):
    """Raised for general 4xx client errors."""


class ServerError(StakingAPIError):
    """Raised for 5xx server errors."""


class ParseError(StakingAPIError):
    """Raised when the response body cannot be interpreted."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(0, message)
        self.original_error = original_error
