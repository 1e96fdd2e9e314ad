"""Exception classes for Airly API interactions.

Every failure surfaced by the clients derives from AirlyAPIError, so
callers can catch the whole family or pick the specific condition.
"""

from __future__ import annotations

from typing import Any


class AirlyAPIError(Exception):
    """Error during an Airly API request or response parsing.

    Raised when a request fails due to network issues, an invalid API key,
    rate limiting, or a malformed response. Carries the HTTP status code
    and, when available, the decoded error payload.
    """

    def __init__(
        self, code: int, message: str, response: dict[str, Any] | None = None
    ) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code, or 0 when no response was received
            message: Human-readable error message
            response: Optional decoded error body for debugging
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
    def from_response(
        cls, response: dict[str, Any], status_code: int = 0
    ) -> AirlyAPIError:
        """Create an error from a decoded Airly error body.

        Airly error bodies look like ``{"errorCode": "...", "message": "..."}``.

        Args:
            response: Decoded error body (may be empty)
            status_code: HTTP status code

        Returns:
            The AirlyAPIError subclass matching the status code
        """
        if 400 <= status_code < 500:
            if status_code in (401, 403):
                return AuthenticationError(
                    status_code, response.get("message", "Authentication failed"), response
                )
            if status_code == 404:
                return NotFoundError(
                    status_code, response.get("message", "Resource not found"), response
                )
            if status_code == 429:
                return RateLimitError(
                    status_code, response.get("message", "Rate limit exceeded"), response
                )
            return ClientError(
                status_code, response.get("message", "Client error"), response
            )
        if status_code >= 500:
            return ServerError(
                status_code, response.get("message", "Server error"), response
            )

        return cls(status_code, response.get("message", "Unknown error"), response)


class NetworkError(AirlyAPIError):
    """Raised when a network issue prevents API communication."""

    def __init__(
        self, message: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(0, message)
        self.original_error = original_error


class AuthenticationError(AirlyAPIError):
    """Raised when the API key is rejected."""


class NotFoundError(AirlyAPIError):
    """Raised when a requested installation or resource doesn't exist."""


class RateLimitError(AirlyAPIError):
    """Raised when the daily or per-minute request quota is exhausted."""


class ClientError(AirlyAPIError):
    """Raised for general 4xx client errors."""


class ServerError(AirlyAPIError):
    """Raised for 5xx server errors."""


class ParseError(AirlyAPIError):
    """Raised when a response body cannot be decoded into the expected model."""

    def __init__(
        self, message: str, original_error: Exception | None = None
    ) -> None:
        """Initialize with parsing error details.

        Args:
            message: Description of the parsing error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error
