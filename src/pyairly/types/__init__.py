"""Request-side types passed to the Airly clients."""

from .geo import GeoCircle, GeoPoint

__all__ = ["GeoCircle", "GeoPoint"]
