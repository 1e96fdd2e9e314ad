"""Validated geographic request types."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

ERR_OUT_OF_BOUNDS = "Value of passed argument out of bounds"


class GeoPoint(BaseModel):
    """A location on Earth given as latitude and longitude in degrees.

    Serialises as ``latitude``/``longitude`` (the Airly wire names) and is
    sent as ``lat``/``lng`` query parameters.
    """

    MAX_LAT: ClassVar[float] = 90.0
    MAX_LNG: ClassVar[float] = 180.0

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    lat: float = Field(..., alias="latitude", description="Latitude in degrees")
    lng: float = Field(..., alias="longitude", description="Longitude in degrees")

    @model_validator(mode="after")
    def check_bounds(self) -> GeoPoint:
        if abs(self.lat) <= self.MAX_LAT and abs(self.lng) <= self.MAX_LNG:
            return self
        raise ValueError(
            f"{ERR_OUT_OF_BOUNDS}, expected values for lat max: +/- {self.MAX_LAT} "
            f"and lng max: +/- {self.MAX_LNG}, got values for lat: {self.lat} "
            f"and lng: {self.lng}"
        )

    @classmethod
    def of(cls, lat: float, lng: float) -> GeoPoint:
        """Shorthand constructor taking positional coordinates."""
        return cls(lat=lat, lng=lng)

    def as_params(self) -> dict[str, Any]:
        return {"lat": self.lat, "lng": self.lng}


class GeoCircle(BaseModel):
    """Search area: a centre point and a radius in kilometres."""

    MAX_EARTH_RADIUS_KM: ClassVar[int] = 6371

    model_config = ConfigDict(frozen=True)

    point: GeoPoint
    radius_km: int = Field(..., ge=0, description="Search radius in km")

    @model_validator(mode="after")
    def check_radius(self) -> GeoCircle:
        if self.radius_km < self.MAX_EARTH_RADIUS_KM:
            return self
        raise ValueError(
            f"{ERR_OUT_OF_BOUNDS}, expected radius max value: {self.MAX_EARTH_RADIUS_KM}, "
            f"got radius value: {self.radius_km}"
        )

    @classmethod
    def around(cls, lat: float, lng: float, radius_km: int) -> GeoCircle:
        """Build a circle from raw coordinates.

        Raises:
            ValueError: If the coordinates or the radius are out of bounds
        """
        return cls(point=GeoPoint.of(lat, lng), radius_km=radius_km)

    def as_params(self) -> dict[str, Any]:
        """Query parameters understood by the ``nearest`` endpoints."""
        return {**self.point.as_params(), "maxDistanceKM": self.radius_km}
