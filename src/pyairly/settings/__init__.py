"""Client settings management.

This package provides:
- ClientSettings: API key, language, timeout and base URL loaded from
  config YAML or AIRLY_* environment variables
"""

from .user import ClientSettings

__all__ = ["ClientSettings"]
