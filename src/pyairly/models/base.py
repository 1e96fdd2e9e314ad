"""Data model base classes and validators for pyairly.

This module provides the shared AirlyModel base used for validating raw
Airly JSON documents into structured models.
"""
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

ValidatorCallable = Callable[[type[Any], Any], Any]


class AirlyModel(BaseModel):
    """Base model for Airly response documents.

    Airly uses camelCase keys; models expose snake_case attributes and accept
    either spelling on input. Unknown keys are kept in ``model_extra`` so new
    API fields never break parsing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Return ``v`` as a timezone-aware UTC datetime.

        Args:
            v: Parsed datetime, naive values are assumed to be UTC

        Returns:
            datetime: Timezone-aware datetime object in UTC
        """
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)

    @staticmethod
    def utc_validator(*field_names: str) -> ValidatorCallable:
        """Factory method to create UTC datetime field validators.

        Args:
            field_names: The field names to validate

        Returns:
            A validator method for the specified fields
        """

        @field_validator(*field_names, mode="after")
        def validate_utc(cls: type[Any], v: Any) -> Any:
            if isinstance(v, datetime):
                return AirlyModel.ensure_utc(v)
            return v

        return validate_utc

    def to_wire(self) -> dict[str, Any]:
        """Dump using Airly's camelCase key names."""
        return self.model_dump(mode="json", by_alias=True)
