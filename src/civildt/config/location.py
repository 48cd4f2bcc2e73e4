"""Location used when deriving civil values from the current instant."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, tzinfo
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .env import require_env_var
from .errors import ConfigurationError

TIMEZONE_ENV_VAR: Final[str] = "CIVILDT_TIMEZONE"


@dataclass(frozen=True, slots=True)
class LocationConfig:
    location: tzinfo

    @property
    def name(self) -> str:
        return str(self.location)


def load_location(name: str) -> tzinfo:
    """Resolve an IANA zone name; ``UTC`` in any case maps to :data:`datetime.UTC`."""

    if name.upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"Unknown time zone: {name}") from exc


def get_location_config() -> LocationConfig:
    return LocationConfig(location=load_location(require_env_var(TIMEZONE_ENV_VAR)))
