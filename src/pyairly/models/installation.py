"""Typed models for Airly installation documents."""

from __future__ import annotations

from pydantic import Field

from pyairly.models.base import AirlyModel
from pyairly.types.geo import GeoPoint


class Location(AirlyModel):
    """Installation coordinates as returned by the API."""

    latitude: float
    longitude: float

    def to_point(self) -> GeoPoint:
        """Convert to a request-side GeoPoint.

        Raises:
            ValueError: If the API returned out-of-bounds coordinates
        """
        return GeoPoint.of(self.latitude, self.longitude)


class Address(AirlyModel):
    """Postal address an installation is registered at.

    Any part may be null for installations in unmapped areas.
    """

    country: str | None = None
    city: str | None = None
    street: str | None = None
    number: str | None = None
    display_address1: str | None = None
    display_address2: str | None = None

    @property
    def display(self) -> str:
        """Single-line address, preferring Airly's display lines."""
        if self.display_address1 or self.display_address2:
            parts = [self.display_address1, self.display_address2]
        else:
            street = " ".join(p for p in (self.street, self.number) if p)
            parts = [street, self.city, self.country]
        return ", ".join(p for p in parts if p)


class Sponsor(AirlyModel):
    """Organisation funding an installation."""

    id: int
    name: str
    description: str | None = None
    logo: str | None = None
    link: str | None = None
    display_name: str | None = None


class Installation(AirlyModel):
    """A single Airly (or partner) sensor installation."""

    id: int = Field(..., description="ID of the installation")
    location_id: int | None = Field(None, description="ID of the location the installation belongs to")
    location: Location = Field(..., description="Location latitude and longitude")
    address: Address = Field(default_factory=Address, description="Registered address")
    elevation: float | None = Field(None, description="Elevation over the sea level")
    airly: bool = Field(False, description="Indicates if this is an Airly sensor")
    sponsor: Sponsor | None = None

    @property
    def point(self) -> GeoPoint:
        return self.location.to_point()
