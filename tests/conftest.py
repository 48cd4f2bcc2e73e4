from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="session")
def new_york() -> ZoneInfo:
    return ZoneInfo("America/New_York")


@pytest.fixture(scope="session")
def sao_paulo() -> ZoneInfo:
    # Daylight saving time started at local midnight on 2018-11-04.
    return ZoneInfo("America/Sao_Paulo")


@pytest.fixture
def fixed_clock() -> Callable[[datetime], Callable[[], datetime]]:
    def _make_clock(reference: datetime) -> Callable[[], datetime]:
        def _clock() -> datetime:
            return reference

        return _clock

    return _make_clock
