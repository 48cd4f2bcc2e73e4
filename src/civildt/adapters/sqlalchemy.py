"""SQLAlchemy column types storing civil values as canonical strings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from sqlalchemy import String, TypeDecorator

from civildt.domain import Date, DateTime, Time
from civildt.errors import ConversionTypeError

if TYPE_CHECKING:
    from sqlalchemy import Dialect

log = logging.getLogger(__name__)


class StorageValue(Protocol):
    def value(self) -> str | None: ...

    def scan(self, value: object) -> None: ...


V = TypeVar("V", bound=StorageValue)


class _CivilColumnType(TypeDecorator[V], Generic[V]):
    """Bind through ``value()`` and load through ``scan()`` on a plain string column."""

    impl = String
    cache_ok = True
    value_type: type[V]

    def process_bind_param(self, value: V | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        if not isinstance(value, self.value_type):
            raise ConversionTypeError(value, self.value_type.__name__)
        return value.value()

    def process_result_value(self, value: object, dialect: Dialect) -> V:
        _ = dialect
        scanned = self.value_type()
        scanned.scan(value)
        log.debug("Scanned %r into %r", value, scanned)
        return scanned


class CivilDate(_CivilColumnType[Date]):
    cache_ok = True
    value_type = Date


class CivilTime(_CivilColumnType[Time]):
    cache_ok = True
    value_type = Time


class CivilDateTime(_CivilColumnType[DateTime]):
    cache_ok = True
    value_type = DateTime


__all__ = ["CivilDate", "CivilDateTime", "CivilTime", "StorageValue"]
