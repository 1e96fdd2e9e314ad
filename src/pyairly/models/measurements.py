"""Typed models for Airly measurement documents.

A Measurements document holds the current averaged values of an
installation (or an interpolated point) plus hourly history and forecast.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import Field

from pyairly.models.base import AirlyModel

# ─────────────────────────── primitives ──────────────────────────────────────


class Value(AirlyModel):
    """A single raw measurement, e.g. PM25 or TEMPERATURE."""

    name: str | None = Field(None, description="Name of this measurement")
    value: float | None = Field(None, description="Value of this measurement")


class Index(AirlyModel):
    """An air-quality index computed from the raw values."""

    name: str | None = Field(None, description="Name of this index")
    value: float | None = Field(None, description="Index numerical value")
    level: str | None = Field(None, description="Index level name")
    description: str | None = Field(
        None,
        description="Text describing this air quality level, translated per Accept-Language",
    )
    advice: str | None = Field(
        None,
        description="Advice from Airly regarding air quality, translated per Accept-Language",
    )
    color: str | None = Field(
        None, description="Color of this index level as a css-style hex triplet"
    )


class Standard(AirlyModel):
    """A pollutant limit defined by an institution such as WHO."""

    name: str | None = Field(None, description="Name of this standard")
    pollutant: str | None = Field(None, description="Pollutant described by this standard")
    limit: float | None = Field(None, description="Limit value of the pollutant")
    percent: float | None = Field(
        None, description="Pollutant measurement as percent of allowable limit"
    )
    averaging: str | None = Field(None, description="Averaging period of the limit")

    @property
    def exceeded(self) -> bool:
        """Check if the measured value is above the limit.

        Returns:
            True when percent is known and over 100
        """
        return self.percent is not None and self.percent > 100


# ─────────────────────────── composite blocks ────────────────────────────────


class AveragedValues(AirlyModel):
    """Measurements averaged over the period [from_date_time, till_date_time).

    Both bounds are always UTC.
    """

    from_date_time: datetime | None = None
    till_date_time: datetime | None = None
    values: list[Value] = Field(default_factory=list)
    indexes: list[Index] = Field(default_factory=list)
    standards: list[Standard] = Field(default_factory=list)

    _validate_bounds = AirlyModel.utc_validator("from_date_time", "till_date_time")

    @property
    def period(self) -> timedelta | None:
        """Length of the averaging period, or None if a bound is missing."""
        if self.from_date_time is None or self.till_date_time is None:
            return None
        return self.till_date_time - self.from_date_time

    def get_value(self, name: str) -> float | None:
        """Look up a raw measurement by name (case-insensitive).

        Args:
            name: Measurement name, e.g. "PM25"

        Returns:
            The value, or None if not measured
        """
        wanted = name.upper()
        for v in self.values:
            if v.name is not None and v.name.upper() == wanted:
                return v.value
        return None

    def get_index(self, name: str | None = None) -> Index | None:
        """Look up an index by name, or return the first one.

        Args:
            name: Index name, e.g. "AIRLY_CAQI" (default: first index)

        Returns:
            Matching Index or None
        """
        if name is None:
            return self.indexes[0] if self.indexes else None
        return next((i for i in self.indexes if i.name == name), None)

    def as_dict(self) -> dict[str, float | None]:
        """Map of measurement name to value for all named values."""
        return {v.name: v.value for v in self.values if v.name is not None}


# ─────────────────────────── top-level response ──────────────────────────────


class Measurements(AirlyModel):
    """Current, historical and forecast measurements for one location."""

    current: AveragedValues | None = None
    history: list[AveragedValues] = Field(default_factory=list)
    forecast: list[AveragedValues] = Field(default_factory=list)

    @property
    def has_current(self) -> bool:
        return self.current is not None and bool(self.current.values)

    def filter_history(self, hours: int = 24) -> list[AveragedValues]:
        """Get the most recent history entries.

        Args:
            hours: Number of hourly entries to include

        Returns:
            Up to ``hours`` entries, oldest first
        """
        if hours <= 0:
            return []
        return self.history[-hours:]

    def filter_forecast(self, hours: int = 24) -> list[AveragedValues]:
        """Get the nearest forecast entries.

        Args:
            hours: Number of hourly entries to include

        Returns:
            Up to ``hours`` entries, soonest first
        """
        return self.forecast[:hours]
