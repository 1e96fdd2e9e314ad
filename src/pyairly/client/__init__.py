"""Client package - holds the sync and async API clients and custom errors."""

from .aio import AsyncAirlyClient
from .api import AirlyClient
from .errors import (
    AirlyAPIError,
    AuthenticationError,
    ClientError,
    NetworkError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServerError,
)

__all__ = [
    "AirlyAPIError",
    "AirlyClient",
    "AsyncAirlyClient",
    "AuthenticationError",
    "ClientError",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "RateLimitError",
    "ServerError",
]
