"""Asynchronous Airly API client.

Wraps aiohttp behind the same operations as AirlyClient.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Final, TypeVar

import aiohttp

from pyairly.client import endpoints
from pyairly.client.base import ApiRequest, BaseAirlyClient
from pyairly.client.errors import NetworkError
from pyairly.models import IndexType, Installation, Measurements, MeasurementType
from pyairly.types import GeoCircle, GeoPoint

if TYPE_CHECKING:
    from pyairly.settings import ClientSettings

logger: Final = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncAirlyClient(BaseAirlyClient):
    """Airly API v2 client for asyncio code.

    The aiohttp session is created on first use, inside the running event
    loop, and must be released with ``await close()`` or ``async with``.
    """

    def __init__(
        self,
        api_key: str,
        language: str = "en",
        timeout: float = 10,
        base_url: str = endpoints.BASE_URL,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Personal API key from https://developer.airly.eu
            language: Response language, "en" or "pl"
            timeout: Total timeout for API requests in seconds
            base_url: API root URL
            session: Optional aiohttp session, owned by the caller and left open by close()

        Raises:
            ValueError: If the API key length or the language is wrong
        """
        super().__init__(api_key, language=language, timeout=timeout, base_url=base_url)
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> AsyncAirlyClient:
        return cls(**cls.settings_kwargs(settings))

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session.

        An injected session is reused as is; a created one is owned and
        closed by this client.
        """
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncAirlyClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    # ── operations ──────────────────────────────────────────────────────────
    async def get_installation(self, installation_id: int) -> Installation:
        """Get installation properties for the given id."""
        return await self._execute(self.installation_request(installation_id))

    async def get_nearest(self, circle: GeoCircle, max_results: int = 1) -> list[Installation]:
        """Get installations nearest to the circle's centre."""
        return await self._execute(self.nearest_request(circle, max_results))

    async def get_indexes(self) -> list[IndexType]:
        return await self._execute(self.indexes_request())

    async def get_measurement_types(self) -> list[MeasurementType]:
        return await self._execute(self.measurement_types_request())

    async def get_installation_measurements(
        self,
        installation_id: int,
        index_type: str | IndexType = endpoints.DEFAULT_INDEX_TYPE,
        include_wind: bool = False,
    ) -> Measurements:
        """Get measurements of a specific installation.

        Raises:
            ValueError: If index_type is an IndexType without a name
        """
        return await self._execute(
            self.installation_measurements_request(installation_id, index_type, include_wind)
        )

    async def get_nearest_measurements(
        self,
        circle: GeoCircle,
        index_type: str | IndexType = endpoints.DEFAULT_INDEX_TYPE,
    ) -> Measurements:
        return await self._execute(self.nearest_measurements_request(circle, index_type))

    async def get_point_measurements(
        self,
        point: GeoPoint,
        index_type: str | IndexType = endpoints.DEFAULT_INDEX_TYPE,
    ) -> Measurements:
        return await self._execute(self.point_measurements_request(point, index_type))

    # ── transport ───────────────────────────────────────────────────────────
    async def _execute(self, request: ApiRequest[T]) -> T:
        url = self.url_for(request.path)
        logger.debug("GET %s params=%s", url, request.params)
        session = await self._get_session()

        try:
            async with session.get(
                url,
                params={k: str(v) for k, v in request.params.items()} or None,
                headers=self.headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as resp:
                # Airly answers UTF-8 JSON; undecodable bytes are replaced, as requests does
                text = (await resp.read()).decode("utf-8", errors="replace")
                status = resp.status
                headers = dict(resp.headers)
        except (aiohttp.ClientError, TimeoutError) as exc:
            logger.warning("Airly API network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        return self.handle_response(request, status, text, headers)
