"""Wall-clock time of day without location information."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC
from typing import TYPE_CHECKING, Any, Final

from civildt.domain import _calendar
from civildt.errors import ParseError

if TYPE_CHECKING:
    from datetime import datetime, tzinfo

    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

TIME_LAYOUT: Final[str] = "HH:MM[:SS]"

_TIME_RE = re.compile(
    f"{_calendar.CLOCK_PATTERN}(?:{_calendar.SECONDS_PATTERN})?",
    re.ASCII,
)


@dataclass(slots=True)
class Time:
    """A time of day with minute precision; seconds are dropped on the way in.

    Meant for TIME columns in storage APIs. Comparisons ignore dates entirely, so
    prefer :class:`~civildt.domain.civil_datetime.DateTime` when ordering matters
    across midnight.
    """

    hour: int = 0
    minute: int = 0
    valid: bool = False

    @classmethod
    def of(cls, instant: datetime | None, location: tzinfo | None = None) -> Time:
        """Return the time of day of ``instant``, seen from ``location`` if given."""

        if instant is None or _calendar.is_zero_instant(instant):
            return cls()
        wall = _calendar.wall_clock(instant, location)
        return cls(wall.hour, wall.minute, True)

    @classmethod
    def now(
        cls,
        location: tzinfo | None,
        *,
        clock: _calendar.Clock = _calendar.utcnow,
    ) -> Time:
        return cls.of(clock(), _calendar.require_location(location))

    @classmethod
    def parse(cls, text: str) -> Time:
        """Parse ``HH:MM`` or ``HH:MM:SS`` with an optional fraction after the seconds.

        Seconds and fractions are validated and then discarded.
        """

        matched = _calendar.match_layout(_TIME_RE, text, "Time", TIME_LAYOUT)
        hour, minute = _calendar.clock_fields(matched, text, "Time")
        return cls(hour, minute, True)

    def format(self) -> str:
        if not self.valid:
            return ""
        return f"{self.hour:02d}:{self.minute:02d}"

    def __str__(self) -> str:
        return self.format()

    def to_datetime(self) -> datetime:
        """Return this time on 1970-01-01 in UTC; only the clock part is meaningful."""

        return _calendar.to_instant(UTC, 1970, 1, 1, self.hour, self.minute)

    def after(self, other: Time) -> bool:
        if self.hour == other.hour:
            return self.minute > other.minute
        return self.hour > other.hour

    def before(self, other: Time) -> bool:
        if self.hour == other.hour:
            return self.minute < other.minute
        return self.hour < other.hour

    def subtract(self, other: Time) -> int:
        """Return the signed difference in minutes, ``self - other``."""

        return (self.hour - other.hour) * 60 + (self.minute - other.minute)

    def marshal_text(self) -> bytes:
        return self.format().encode()

    def unmarshal_text(self, data: bytes | str) -> None:
        try:
            parsed = Time.parse(_calendar.decode_text(data, "Time"))
        except ParseError:
            _calendar.overwrite(self, Time())
            raise
        _calendar.overwrite(self, parsed)

    def value(self) -> str | None:
        return self.format() if self.valid else None

    def scan(self, value: object) -> None:
        if value is None:
            _calendar.overwrite(self, Time())
            return
        _calendar.overwrite(self, Time.parse(_calendar.decode_text(value, "Time")))

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source: type[Any],
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        from civildt.adapters.pydantic import civil_text_schema  # noqa: PLC0415

        _ = source, handler
        return civil_text_schema(cls, cls.parse)
