"""Date and time of day combined, without location information."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import UTC
from typing import TYPE_CHECKING, Any, Final

from civildt.domain import _calendar
from civildt.domain.civil_date import Date
from civildt.domain.civil_time import Time
from civildt.errors import ParseError

if TYPE_CHECKING:
    from datetime import datetime, tzinfo

    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

log = logging.getLogger(__name__)

_DATE = _calendar.DATE_PATTERN
_CLOCK = _calendar.CLOCK_PATTERN
_SECONDS = _calendar.SECONDS_PATTERN

# Tried in order; the first layout that parses wins.
DATETIME_LAYOUTS: Final[tuple[tuple[str, re.Pattern[str]], ...]] = (
    ("YYYY-MM-DDTHH:MM", re.compile(f"{_DATE}[Tt]{_CLOCK}", re.ASCII)),
    ("YYYY-MM-DDTHH:MM:SS", re.compile(f"{_DATE}[Tt]{_CLOCK}{_SECONDS}", re.ASCII)),
    ("YYYY-MM-DD HH:MM:SS", re.compile(f"{_DATE} {_CLOCK}{_SECONDS}", re.ASCII)),
    ("YYYY-MM-DD HH:MM", re.compile(f"{_DATE} {_CLOCK}", re.ASCII)),
)


@dataclass(slots=True)
class DateTime:
    """A :class:`Date` and a :class:`Time` held side by side.

    The parts are composed rather than inherited so that date-only operations such
    as ``add_days`` and time-only ones such as ``subtract`` are not offered here.
    """

    date: Date = field(default_factory=Date)
    time: Time = field(default_factory=Time)

    @classmethod
    def of(cls, instant: datetime | None, location: tzinfo | None = None) -> DateTime:
        return cls(Date.of(instant, location), Time.of(instant, location))

    @classmethod
    def now(
        cls,
        location: tzinfo | None,
        *,
        clock: _calendar.Clock = _calendar.utcnow,
    ) -> DateTime:
        return cls.of(clock(), _calendar.require_location(location))

    @classmethod
    def parse(cls, text: str) -> DateTime:
        """Parse a date-time in one of :data:`DATETIME_LAYOUTS`.

        This is RFC 3339 date-time without the offset, also accepting a space
        separator, a lower-case ``t`` and omitted seconds. When no layout matches,
        the raised :class:`~civildt.errors.ParseError` is chained to the error of the
        last layout tried.
        """

        last_error: ParseError | None = None
        for layout, pattern in DATETIME_LAYOUTS:
            try:
                matched = _calendar.match_layout(pattern, text, "DateTime", layout)
                year, month, day = _calendar.date_fields(matched, text, "DateTime")
                hour, minute = _calendar.clock_fields(matched, text, "DateTime")
            except ParseError as exc:
                log.debug("Layout %s rejected %r: %s", layout, text, exc)
                last_error = exc
                continue
            return cls(Date(year, month, day, True), Time(hour, minute, True))
        raise ParseError(text, "DateTime") from last_error

    def format(self) -> str:
        if self.date.valid and self.time.valid:
            return f"{self.date.format()}T{self.time.format()}"
        return ""

    def __str__(self) -> str:
        return self.format()

    def at(self, location: tzinfo | None) -> datetime:
        """Return the instant of this date and time in ``location``.

        Missing or repeated wall clocks resolve as in :meth:`Date.at`: with midnight
        skipped in America/Sao_Paulo, 00:30 comes back as 23:30 on the previous day,
        and 02:30 skipped in Europe/Berlin comes back as 03:30.
        """

        return _calendar.to_instant(
            location,
            self.date.year,
            self.date.month,
            self.date.day,
            self.time.hour,
            self.time.minute,
        )

    def before(self, other: DateTime) -> bool:
        """Report whether this value falls before ``other`` once both are placed in UTC.

        Both sides go through :meth:`at`, so values outside the years 1-9999 after
        normalization, including the zero value, raise ``ValueError``.
        """

        return self.at(UTC) < other.at(UTC)

    def marshal_text(self) -> bytes:
        return self.format().encode()

    def unmarshal_text(self, data: bytes | str) -> None:
        try:
            parsed = DateTime.parse(_calendar.decode_text(data, "DateTime"))
        except ParseError:
            _calendar.overwrite(self, DateTime())
            raise
        _calendar.overwrite(self, parsed)

    def value(self) -> str | None:
        if self.date.valid and self.time.valid:
            return self.format()
        return None

    def scan(self, value: object) -> None:
        """Load a storage value; unlike Date and Time, NULL leaves this value untouched."""

        if value is None:
            return
        _calendar.overwrite(self, DateTime.parse(_calendar.decode_text(value, "DateTime")))

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source: type[Any],
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        from civildt.adapters.pydantic import civil_text_schema  # noqa: PLC0415

        _ = source, handler
        return civil_text_schema(cls, cls.parse)
