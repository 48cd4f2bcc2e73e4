"""Configuration error definitions."""

from __future__ import annotations

from civildt.errors import CivilError


class ConfigurationError(CivilError, RuntimeError):
    """Raised when a configured value cannot be used, such as an unknown time zone."""


class MissingConfigurationError(ConfigurationError):
    """Raised when a required environment variable is absent or blank."""
