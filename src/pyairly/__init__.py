"""Typed Python client for the Airly air-quality API."""

__version__ = "0.1.0"

from .client import (
    AirlyAPIError,
    AirlyClient,
    AsyncAirlyClient,
    AuthenticationError,
    ClientError,
    NetworkError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServerError,
)
from .models import (
    Address,
    AveragedValues,
    Index,
    IndexLevel,
    IndexType,
    Installation,
    Location,
    Measurements,
    MeasurementType,
    RateLimit,
    Sponsor,
    Standard,
    Value,
)
from .settings import ClientSettings
from .types import GeoCircle, GeoPoint

# Define what gets imported with: from pyairly import *
__all__ = [
    "Address",
    "AirlyAPIError",
    "AirlyClient",
    "AsyncAirlyClient",
    "AuthenticationError",
    "AveragedValues",
    "ClientError",
    "ClientSettings",
    "GeoCircle",
    "GeoPoint",
    "Index",
    "IndexLevel",
    "IndexType",
    "Installation",
    "Location",
    "MeasurementType",
    "Measurements",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "RateLimit",
    "RateLimitError",
    "ServerError",
    "Sponsor",
    "Standard",
    "Value",
]
