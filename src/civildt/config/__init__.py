"""Configuration helpers."""

from __future__ import annotations

from .env import require_env_var
from .errors import ConfigurationError, MissingConfigurationError
from .location import TIMEZONE_ENV_VAR, LocationConfig, get_location_config, load_location

__all__ = [
    "TIMEZONE_ENV_VAR",
    "ConfigurationError",
    "LocationConfig",
    "MissingConfigurationError",
    "get_location_config",
    "load_location",
    "require_env_var",
]
