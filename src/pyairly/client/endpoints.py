"""Airly API v2 endpoint paths and request constants."""

from __future__ import annotations

from typing import Final

BASE_URL: Final = "https://airapi.airly.eu/v2/"

INSTALLATIONS: Final = "installations"
MEASUREMENTS: Final = "measurements"
META: Final = "meta"

# Sub-resources
NEAREST: Final = "nearest"
POINT: Final = "point"
INSTALLATION: Final = "installation"
INDEXES: Final = f"{META}/indexes"
MEASUREMENT_TYPES: Final = f"{META}/measurements"

DEFAULT_INDEX_TYPE: Final = "AIRLY_CAQI"
API_KEY_LENGTH: Final = 32
SUPPORTED_LANGUAGES: Final = ("en", "pl")

# Human-readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check coordinates or query parameters",
    401: "Invalid or missing API key",
    403: "API key not allowed to access this resource",
    404: "Installation or resource not found",
    406: "Unsupported Accept or Accept-Language header",
    429: "Rate limit exceeded",
    500: "Airly internal error",
    502: "Bad gateway at Airly",
    503: "Service unavailable (maintenance)",
    504: "Gateway timeout",
}


def installation(installation_id: int) -> str:
    """Path of a single installation resource."""
    return f"{INSTALLATIONS}/{installation_id}"


def nearest_installations() -> str:
    return f"{INSTALLATIONS}/{NEAREST}"


def installation_measurements() -> str:
    return f"{MEASUREMENTS}/{INSTALLATION}"


def nearest_measurements() -> str:
    return f"{MEASUREMENTS}/{NEAREST}"


def point_measurements() -> str:
    return f"{MEASUREMENTS}/{POINT}"
