"""Typed models for the Airly ``meta`` endpoints."""

from __future__ import annotations

from pydantic import Field

from pyairly.models.base import AirlyModel


class IndexLevel(AirlyModel):
    """One level of an index scale, e.g. CAQI "LOW"."""

    min_value: float | None = Field(None, description="Minimum index value for this level")
    max_value: float | None = Field(None, description="Maximum index value for this level")
    values: str | None = Field(None, description="Values range for this index level")
    level: str | None = Field(None, description="Name of this index level")
    description: str | None = Field(None, description="Text describing this index level")
    color: str | None = Field(
        None, description="Color of this level as a css-style hex triplet"
    )

    def contains(self, value: float) -> bool:
        """Check if an index value falls into this level.

        Open bounds are treated as unbounded.
        """
        if self.min_value is not None and value < self.min_value:
            return False
        if self.max_value is not None and value > self.max_value:
            return False
        return True


class IndexType(AirlyModel):
    """An index supported by the API together with its level scale."""

    name: str | None = Field(None, description="Name of this index")
    levels: list[IndexLevel] = Field(default_factory=list, description="Possible index levels")

    def level_for(self, value: float) -> IndexLevel | None:
        """Find the level an index value belongs to.

        Args:
            value: Index numerical value

        Returns:
            First matching IndexLevel or None
        """
        return next((lvl for lvl in self.levels if lvl.contains(value)), None)


class MeasurementType(AirlyModel):
    """A measurement type an installation may report."""

    name: str | None = Field(None, description="Short name of this measurement type")
    label: str | None = Field(
        None, description="Label of this measurement type, translated per Accept-Language"
    )
    unit: str | None = Field(None, description="Unit of this measurement type")
