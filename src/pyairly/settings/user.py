"""User-configurable client settings loaded from YAML or the environment."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from pyairly.client.endpoints import API_KEY_LENGTH, BASE_URL

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class ClientSettings(BaseModel):
    """Settings for talking to the Airly API.

    Values can come from a YAML file (``${VAR}`` placeholders are expanded
    from the environment) or directly from ``AIRLY_*`` environment variables.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("pyairly.yaml"),
        Path("~/.config/pyairly/config.yaml").expanduser(),
        Path("/etc/pyairly/config.yaml"),
    ]

    api_key: str = Field(
        ...,
        min_length=API_KEY_LENGTH,
        max_length=API_KEY_LENGTH,
        description="Personal key from https://developer.airly.eu",
    )
    language: Literal["en", "pl"] = Field("en", description="Accept-Language of responses")
    timeout: float = Field(10.0, gt=0, description="Request timeout in seconds")
    base_url: str = Field(BASE_URL, description="API root, ending with a slash")

    # ---- validators ----
    @field_validator("base_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        return v if v.endswith("/") else v + "/"

    @classmethod
    def from_env(cls) -> ClientSettings:
        """Build settings from AIRLY_API_KEY, AIRLY_LANGUAGE and AIRLY_TIMEOUT.

        Returns:
            Validated ClientSettings object

        Raises:
            RuntimeError: If AIRLY_API_KEY is unset or a value is invalid
        """
        data: dict[str, str] = {}
        for field, var in (
            ("api_key", "AIRLY_API_KEY"),
            ("language", "AIRLY_LANGUAGE"),
            ("timeout", "AIRLY_TIMEOUT"),
        ):
            value = os.environ.get(var)
            if value:
                data[field] = value

        if "api_key" not in data:
            raise RuntimeError("AIRLY_API_KEY is not set")

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid environment configuration:\n{err}") from err

    @classmethod
    def load(cls, path: Path | None = None) -> ClientSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated ClientSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            env_path = os.environ.get("PYAIRLY_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from PYAIRLY_CONFIG not found: {path}")
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create pyairly.yaml or set PYAIRLY_CONFIG."
                    )

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err

    @classmethod
    def resolve(cls, path: Path | None = None) -> ClientSettings:
        """Load from an explicit file, else from the environment, else from default paths."""
        if path is not None:
            return cls.load(path)
        if os.environ.get("AIRLY_API_KEY"):
            return cls.from_env()
        return cls.load()
