"""Wall-clock helpers shared by the civil value types.

Only code under :mod:`civildt.domain` should import this module.
"""

from __future__ import annotations

import logging
from calendar import isleap
from dataclasses import fields
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any, Final, Protocol

from civildt.errors import ConversionTypeError, ParseError

if TYPE_CHECKING:
    import re
    from datetime import tzinfo

log = logging.getLogger(__name__)

SECONDS_PER_DAY: Final[int] = 86_400
UNIX_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=UTC)
ZERO_INSTANT: Final[datetime] = datetime(1, 1, 1, tzinfo=UTC)

_MONTH_LENGTHS: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Regex fragments; compile with re.ASCII so only 0-9 count as digits.
DATE_PATTERN: Final[str] = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
CLOCK_PATTERN: Final[str] = r"(?P<hour>\d{2}):(?P<minute>\d{2})"
SECONDS_PATTERN: Final[str] = r":(?P<second>\d{2})(?:\.\d{1,9})?"


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def utcnow() -> datetime:
    return datetime.now(UTC)


def is_zero_instant(instant: datetime | None) -> bool:
    """Return True for the unset instant (``None`` or 0001-01-01 00:00 UTC)."""

    if instant is None:
        return True
    if instant.tzinfo is None:
        return instant == datetime.min
    return instant == ZERO_INSTANT


def require_location(location: tzinfo | None) -> tzinfo:
    if location is None:
        raise TypeError("a location is required to place a civil value on the time line")
    return location


def wall_clock(instant: datetime, location: tzinfo | None) -> datetime:
    """Return ``instant`` as seen on a wall clock in ``location`` (its own zone if None)."""

    if location is None:
        return instant
    return instant.astimezone(location)


def normalize_wall(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    """Build a naive wall clock, rolling out-of-range fields into the next unit.

    Months roll into years first, then day, hour and minute overflow is added as a
    duration, so ``(2019, 2, 30)`` lands on 2019-03-02 and ``(2019, 13, 1)`` on 2020-01-01.
    """

    carry, month_index = divmod(month - 1, 12)
    first_of_month = datetime(year + carry, month_index + 1, 1)  # noqa: DTZ001
    return first_of_month + timedelta(days=day - 1, hours=hour, minutes=minute)


def to_instant(
    location: tzinfo | None,
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
) -> datetime:
    """Place civil fields on the time line at ``location``.

    The offset is looked up at the wall clock read as UTC, then checked against the
    instant it produces; when the zone uses another offset at that instant, that one
    wins. So a local midnight skipped in America/Sao_Paulo becomes 23:00 on the
    previous day, 02:30 skipped in Europe/Berlin becomes 03:30, and a repeated 02:30
    in Berlin takes its second occurrence while a repeated 01:30 in New York takes
    its first.
    """

    zone = require_location(location)
    wall = normalize_wall(year, month, day, hour, minute)
    offset = _offset_at(wall, zone)
    utc = wall - offset
    checked = _offset_at(utc, zone)
    if checked != offset:
        log.debug("Wall clock %s shifts from offset %s to %s in %s", wall, offset, checked, zone)
        utc = wall - checked
    return utc.replace(tzinfo=UTC).astimezone(zone)


def _offset_at(utc: datetime, zone: tzinfo) -> timedelta:
    """Return the UTC offset ``zone`` uses at the naive UTC instant ``utc``."""

    offset = utc.replace(tzinfo=UTC).astimezone(zone).utcoffset()
    return offset if offset is not None else timedelta(0)


def unix_seconds(instant: datetime) -> int:
    return (instant - UNIX_EPOCH) // timedelta(seconds=1)


def match_layout(pattern: re.Pattern[str], text: str, kind: str, layout: str) -> re.Match[str]:
    matched = pattern.fullmatch(text)
    if matched is None:
        raise ParseError(text, kind, f"expected {layout}")
    return matched


def date_fields(matched: re.Match[str], text: str, kind: str) -> tuple[int, int, int]:
    year, month, day = int(matched["year"]), int(matched["month"]), int(matched["day"])
    if not 1 <= month <= 12:
        raise ParseError(text, kind, "month out of range")
    if not 1 <= day <= days_in_month(year, month):
        raise ParseError(text, kind, "day out of range")
    return year, month, day


def days_in_month(year: int, month: int) -> int:
    if month == 2 and isleap(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def clock_fields(matched: re.Match[str], text: str, kind: str) -> tuple[int, int]:
    hour, minute = int(matched["hour"]), int(matched["minute"])
    second = matched.groupdict().get("second")
    if hour > 23:
        raise ParseError(text, kind, "hour out of range")
    if minute > 59:
        raise ParseError(text, kind, "minute out of range")
    if second is not None and int(second) > 59:
        raise ParseError(text, kind, "second out of range")
    return hour, minute


def decode_text(data: object, kind: str) -> str:
    """Return ``data`` as text; accepts ``str`` and UTF-8 bytes-like objects."""

    if isinstance(data, str):
        return data
    if isinstance(data, bytes | bytearray | memoryview):
        raw = bytes(data)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(repr(raw), kind, "not valid UTF-8") from exc
    raise ConversionTypeError(data, kind)


def overwrite(target: Any, source: Any) -> None:
    """Copy every dataclass field of ``source`` onto ``target`` in place."""

    for item in fields(target):
        setattr(target, item.name, getattr(source, item.name))
