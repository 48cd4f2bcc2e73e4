"""Calendar date without location information."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, timedelta
from typing import TYPE_CHECKING, Any, Final

from civildt.domain import _calendar
from civildt.errors import ParseError

if TYPE_CHECKING:
    from datetime import datetime, tzinfo

    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

DATE_LAYOUT: Final[str] = "YYYY-MM-DD"

_DATE_RE = re.compile(_calendar.DATE_PATTERN, re.ASCII)


@dataclass(slots=True)
class Date:
    """A date (year, month, day) that does not describe a unique 24-hour timespan.

    ``valid`` tells "no date" apart from a real one: the zero value ``Date()`` formats
    as an empty string and is stored as NULL. Field ranges are not checked on
    construction; :meth:`at` rolls out-of-range fields over the way calendar
    arithmetic does (day 32 becomes the first of the next month).
    """

    year: int = 0
    month: int = 0
    day: int = 0
    valid: bool = False

    @classmethod
    def of(cls, instant: datetime | None, location: tzinfo | None = None) -> Date:
        """Return the date on which ``instant`` falls, seen from ``location`` if given."""

        if instant is None or _calendar.is_zero_instant(instant):
            return cls()
        wall = _calendar.wall_clock(instant, location)
        return cls(wall.year, wall.month, wall.day, True)

    @classmethod
    def today(
        cls,
        location: tzinfo | None,
        *,
        clock: _calendar.Clock = _calendar.utcnow,
    ) -> Date:
        return cls.of(clock(), _calendar.require_location(location))

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse a ``YYYY-MM-DD`` (RFC 3339 full-date) string.

        Raises :class:`~civildt.errors.ParseError` for anything else, including
        dates that do not exist on the calendar such as ``2019-02-30``.
        """

        matched = _calendar.match_layout(_DATE_RE, text, "Date", DATE_LAYOUT)
        year, month, day = _calendar.date_fields(matched, text, "Date")
        return cls(year, month, day, True)

    def format(self) -> str:
        if not self.valid:
            return ""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.format()

    def at(self, location: tzinfo | None) -> datetime:
        """Return 00:00 of this date in ``location``.

        Consistent with building the same wall clock through :mod:`datetime`, even
        when that lands on another day: if midnight is skipped in ``location``
        the result is 23:00 on the previous day.
        """

        return _calendar.to_instant(location, self.year, self.month, self.day)

    def to_datetime(self) -> datetime:
        return self.at(UTC)

    def add_days(self, days: int) -> Date:
        """Return the date ``days`` later; negative values go into the past."""

        return Date.of(self.at(UTC) + timedelta(days=days))

    def days_since(self, other: Date) -> int:
        """Return the signed number of days from ``other`` to this date, end day excluded.

        Inverse of :meth:`add_days`. Unix time advances by exactly 86400 seconds a
        day, so leap seconds never skew the result.
        """

        delta = _calendar.unix_seconds(self.at(UTC)) - _calendar.unix_seconds(other.at(UTC))
        return delta // _calendar.SECONDS_PER_DAY

    def before(self, other: Date) -> bool:
        return (self.year, self.month, self.day) < (other.year, other.month, other.day)

    def marshal_text(self) -> bytes:
        return self.format().encode()

    def unmarshal_text(self, data: bytes | str) -> None:
        """Overwrite this date from text; a failed parse leaves the zero value."""

        try:
            parsed = Date.parse(_calendar.decode_text(data, "Date"))
        except ParseError:
            _calendar.overwrite(self, Date())
            raise
        _calendar.overwrite(self, parsed)

    def value(self) -> str | None:
        """Return the storage representation: the canonical string, or None for NULL."""

        return self.format() if self.valid else None

    def scan(self, value: object) -> None:
        """Load a storage value; NULL resets to the zero value."""

        if value is None:
            _calendar.overwrite(self, Date())
            return
        _calendar.overwrite(self, Date.parse(_calendar.decode_text(value, "Date")))

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source: type[Any],
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        from civildt.adapters.pydantic import civil_text_schema  # noqa: PLC0415

        _ = source, handler
        return civil_text_schema(cls, cls.parse)
