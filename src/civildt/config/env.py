"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import MissingConfigurationError


def require_env_var(name: str) -> str:
    """Return the stripped value of ``name`` or raise if it is missing or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        raise MissingConfigurationError(f"Missing configuration for: {name}")
    return value.strip()
