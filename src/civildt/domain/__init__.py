"""Public civil value types."""

from __future__ import annotations

from civildt.domain.civil_date import Date
from civildt.domain.civil_datetime import DateTime
from civildt.domain.civil_time import Time

__all__ = ["Date", "DateTime", "Time"]
