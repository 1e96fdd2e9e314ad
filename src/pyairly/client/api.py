"""Synchronous Airly API client."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Final, TypeVar

import requests

from pyairly.client import endpoints
from pyairly.client.base import ApiRequest, BaseAirlyClient
from pyairly.client.errors import NetworkError
from pyairly.models import IndexType, Installation, Measurements, MeasurementType
from pyairly.types import GeoCircle, GeoPoint

if TYPE_CHECKING:
    from pyairly.settings import ClientSettings

logger: Final = logging.getLogger(__name__)

T = TypeVar("T")


class AirlyClient(BaseAirlyClient):
    """Airly API v2 client.

    Handles API requests, network error handling and rate-limit tracking for
    the Airly REST API, and transforms raw JSON responses into strongly-typed
    models.

    Examples:
        with AirlyClient(api_key) as client:
            circle = GeoCircle.around(50.0617, 19.9373, radius_km=3)
            for inst in client.get_nearest(circle, max_results=3):
                print(inst.id, inst.address.display)
    """

    def __init__(
        self,
        api_key: str,
        language: str = "en",
        timeout: float = 10,
        base_url: str = endpoints.BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the Airly API client.

        Args:
            api_key: Personal API key from https://developer.airly.eu
            language: Response language, "en" or "pl"
            timeout: Timeout for API requests in seconds
            base_url: API root URL
            session: Optional pre-configured requests session, owned by the caller
                and left open by close()

        Raises:
            ValueError: If the API key length or the language is wrong
        """
        super().__init__(api_key, language=language, timeout=timeout, base_url=base_url)
        self.session = session or requests.Session()
        self._owns_session = session is None

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> AirlyClient:
        return cls(**cls.settings_kwargs(settings))

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> AirlyClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ── operations ──────────────────────────────────────────────────────────
    def get_installation(self, installation_id: int) -> Installation:
        """Get installation properties for the given id.

        Args:
            installation_id: ID of the installation to fetch

        Returns:
            The installation

        Raises:
            NotFoundError: If no installation has this id
            AirlyAPIError: For other API-related errors
        """
        return self._execute(self.installation_request(installation_id))

    def get_nearest(self, circle: GeoCircle, max_results: int = 1) -> list[Installation]:
        """Get installations nearest to the circle's centre.

        Args:
            circle: Area to search, centre and radius in km
            max_results: Maximum number of installations, -1 for no limit

        Returns:
            Installations ordered by distance, possibly empty
        """
        return self._execute(self.nearest_request(circle, max_results))

    def get_indexes(self) -> list[IndexType]:
        """Get the index types supported by the API with their levels."""
        return self._execute(self.indexes_request())

    def get_measurement_types(self) -> list[MeasurementType]:
        """Get the measurement types supported by the API."""
        return self._execute(self.measurement_types_request())

    def get_installation_measurements(
        self,
        installation_id: int,
        index_type: str | IndexType = endpoints.DEFAULT_INDEX_TYPE,
        include_wind: bool = False,
    ) -> Measurements:
        """Get measurements of a specific installation.

        Args:
            installation_id: ID of the installation
            index_type: Index to compute, name or IndexType
            include_wind: Also return wind speed and bearing

        Returns:
            Current, history and forecast measurements

        Raises:
            ValueError: If index_type is an IndexType without a name
        """
        return self._execute(
            self.installation_measurements_request(installation_id, index_type, include_wind)
        )

    def get_nearest_measurements(
        self,
        circle: GeoCircle,
        index_type: str | IndexType = endpoints.DEFAULT_INDEX_TYPE,
    ) -> Measurements:
        """Get measurements of the installation nearest to the circle's centre.

        Args:
            circle: Centre point and maximum distance in km
            index_type: Index to compute, name or IndexType

        Returns:
            Measurements of the nearest installation
        """
        return self._execute(self.nearest_measurements_request(circle, index_type))

    def get_point_measurements(
        self,
        point: GeoPoint,
        index_type: str | IndexType = endpoints.DEFAULT_INDEX_TYPE,
    ) -> Measurements:
        """Get measurements interpolated for a point on the map.

        Args:
            point: Location to interpolate for
            index_type: Index to compute, name or IndexType

        Returns:
            Interpolated measurements
        """
        return self._execute(self.point_measurements_request(point, index_type))

    # ── transport ───────────────────────────────────────────────────────────
    def _execute(self, request: ApiRequest[T]) -> T:
        url = self.url_for(request.path)
        logger.debug("GET %s params=%s", url, request.params)

        try:
            resp = self.session.get(
                url,
                params=request.params or None,
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Airly API network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        return self.handle_response(request, resp.status_code, resp.text, resp.headers)
