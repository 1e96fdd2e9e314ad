"""Typed models for Airly API responses."""

from .base import AirlyModel
from .installation import Address, Installation, Location, Sponsor
from .measurements import AveragedValues, Index, Measurements, Standard, Value
from .meta import IndexLevel, IndexType, MeasurementType
from .rate_limit import RateLimit

__all__ = [
    "Address",
    "AirlyModel",
    "AveragedValues",
    "Index",
    "IndexLevel",
    "IndexType",
    "Installation",
    "Location",
    "MeasurementType",
    "Measurements",
    "RateLimit",
    "Sponsor",
    "Standard",
    "Value",
]
