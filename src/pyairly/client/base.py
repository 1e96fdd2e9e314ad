"""Transport-independent core shared by the sync and async Airly clients.

Builds request descriptions (path, query, expected model) for every API
operation and turns raw responses into models or AirlyAPIError subclasses.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from pyairly.client import endpoints
from pyairly.client.errors import AirlyAPIError, ParseError
from pyairly.models import (
    IndexType,
    Installation,
    Measurements,
    MeasurementType,
    RateLimit,
)
from pyairly.types import GeoCircle, GeoPoint

if TYPE_CHECKING:
    from pyairly.settings import ClientSettings

logger: Final = logging.getLogger(__name__)

T = TypeVar("T")

_INSTALLATION: Final = TypeAdapter(Installation)
_INSTALLATIONS: Final = TypeAdapter(list[Installation])
_INDEX_TYPES: Final = TypeAdapter(list[IndexType])
_MEASUREMENT_TYPES: Final = TypeAdapter(list[MeasurementType])
_MEASUREMENTS: Final = TypeAdapter(Measurements)


@dataclass(frozen=True)
class ApiRequest(Generic[T]):
    """A GET request against the Airly API and the model its body decodes to."""

    path: str
    adapter: TypeAdapter[T]
    params: dict[str, Any] = field(default_factory=dict)


class BaseAirlyClient:
    """Shared state and request/response handling of the Airly clients.

    Subclasses provide the transport; everything else (key validation,
    headers, query building, error mapping, parsing) lives here.
    """

    def __init__(
        self,
        api_key: str,
        language: str = "en",
        timeout: float = 10,
        base_url: str = endpoints.BASE_URL,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Personal API key from https://developer.airly.eu
            language: Response language, "en" or "pl"
            timeout: Timeout for API requests in seconds
            base_url: API root URL

        Raises:
            ValueError: If the API key length or the language is wrong
        """
        if len(api_key) != endpoints.API_KEY_LENGTH:
            raise ValueError(
                f"Wrong API key length, expected {endpoints.API_KEY_LENGTH} "
                f"characters, got {len(api_key)}"
            )
        if language not in endpoints.SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported language {language!r}, expected one of "
                f"{', '.join(endpoints.SUPPORTED_LANGUAGES)}"
            )
        self.api_key = api_key
        self.language = language
        self.timeout = timeout
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.rate_limit: RateLimit | None = None

    @classmethod
    def settings_kwargs(cls, settings: ClientSettings) -> dict[str, Any]:
        return {
            "api_key": settings.api_key,
            "language": settings.language,
            "timeout": settings.timeout,
            "base_url": settings.base_url,
        }

    # ── request building ────────────────────────────────────────────────────
    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Accept-Language": self.language,
            "apikey": self.api_key,
        }

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    @staticmethod
    def index_type_name(index_type: str | IndexType) -> str:
        """Resolve the ``indexType`` query value.

        Raises:
            ValueError: If an IndexType without a name was given
        """
        if isinstance(index_type, IndexType):
            if index_type.name is None:
                raise ValueError("IndexType.name is None")
            return index_type.name
        return index_type

    def installation_request(self, installation_id: int) -> ApiRequest[Installation]:
        return ApiRequest(endpoints.installation(installation_id), _INSTALLATION)

    def nearest_request(
        self, circle: GeoCircle, max_results: int
    ) -> ApiRequest[list[Installation]]:
        if max_results != -1 and max_results < 1:
            raise ValueError(
                f"max_results must be a positive integer or -1 for no limit, got {max_results}"
            )
        params = {**circle.as_params(), "maxResults": max_results}
        return ApiRequest(endpoints.nearest_installations(), _INSTALLATIONS, params)

    def indexes_request(self) -> ApiRequest[list[IndexType]]:
        return ApiRequest(endpoints.INDEXES, _INDEX_TYPES)

    def measurement_types_request(self) -> ApiRequest[list[MeasurementType]]:
        return ApiRequest(endpoints.MEASUREMENT_TYPES, _MEASUREMENT_TYPES)

    def installation_measurements_request(
        self, installation_id: int, index_type: str | IndexType, include_wind: bool
    ) -> ApiRequest[Measurements]:
        params: dict[str, Any] = {}
        if include_wind:
            params["includeWind"] = "true"
        params["indexType"] = self.index_type_name(index_type)
        params["installationId"] = installation_id
        return ApiRequest(endpoints.installation_measurements(), _MEASUREMENTS, params)

    def nearest_measurements_request(
        self, circle: GeoCircle, index_type: str | IndexType
    ) -> ApiRequest[Measurements]:
        params = {"indexType": self.index_type_name(index_type), **circle.as_params()}
        return ApiRequest(endpoints.nearest_measurements(), _MEASUREMENTS, params)

    def point_measurements_request(
        self, point: GeoPoint, index_type: str | IndexType
    ) -> ApiRequest[Measurements]:
        params = {"indexType": self.index_type_name(index_type), **point.as_params()}
        return ApiRequest(endpoints.point_measurements(), _MEASUREMENTS, params)

    # ── response handling ───────────────────────────────────────────────────
    def handle_response(
        self,
        request: ApiRequest[T],
        status: int,
        text: str,
        headers: Mapping[str, str],
    ) -> T:
        """Turn a raw HTTP response into the request's model.

        Args:
            request: The request the response belongs to
            status: HTTP status code
            text: Response body
            headers: Response headers

        Returns:
            The decoded model

        Raises:
            AirlyAPIError: For non-2xx statuses (subclass chosen by status)
            ParseError: When the body does not match the expected model
        """
        self.rate_limit = RateLimit.from_headers(headers)

        if not 200 <= status < 300:
            raise self.error_from_response(status, text)

        try:
            return request.adapter.validate_json(text)
        except ValidationError as exc:
            logger.error("Could not parse Airly response for %s: %s", request.path, exc)
            raise ParseError(f"Invalid response for {request.path}: {exc}", exc) from exc

    def error_from_response(self, status: int, text: str) -> AirlyAPIError:
        try:
            body = json.loads(text) if text else {}
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        msg = body.get("message") or endpoints.HTTP_ERROR_MAP.get(status) or text
        logger.error("Airly API error: %s - %s", status, msg or "<empty body>")
        if not msg:
            # from_response falls back to the per-class default message
            return AirlyAPIError.from_response(body, status)
        return AirlyAPIError.from_response({**body, "message": msg}, status)
