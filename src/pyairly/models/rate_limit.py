"""Request quota reported in Airly response headers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar

from pydantic import BaseModel


class RateLimit(BaseModel):
    """Daily and per-minute request quota as of the last response.

    Fields are None when the API omitted the corresponding header.
    """

    HEADERS: ClassVar[dict[str, str]] = {
        "limit_day": "x-ratelimit-limit-day",
        "remaining_day": "x-ratelimit-remaining-day",
        "limit_minute": "x-ratelimit-limit-minute",
        "remaining_minute": "x-ratelimit-remaining-minute",
    }

    limit_day: int | None = None
    remaining_day: int | None = None
    limit_minute: int | None = None
    remaining_minute: int | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> RateLimit:
        """Parse the X-RateLimit-* headers of a response.

        Args:
            headers: Response headers (any casing)

        Returns:
            RateLimit with unparseable or missing values left as None
        """
        lowered = {k.lower(): v for k, v in headers.items()}
        data: dict[str, int] = {}
        for field, header in cls.HEADERS.items():
            raw = lowered.get(header)
            if raw is None:
                continue
            try:
                data[field] = int(raw)
            except ValueError:
                continue
        return cls(**data)

    @property
    def exhausted(self) -> bool:
        """True when either quota is known to be used up."""
        return self.remaining_day == 0 or self.remaining_minute == 0
