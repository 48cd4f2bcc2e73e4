from __future__ import annotations

import pytest
from sqlalchemy import Column, Integer, MetaData, Table, insert, select
from sqlalchemy.dialects import sqlite
from sqlalchemy.engine import Engine  # noqa: TC002

from civildt import ConversionTypeError, Date, DateTime, ParseError, Time
from civildt.adapters.sqlalchemy import CivilDate, CivilDateTime, CivilTime

metadata = MetaData()

appointment_table = Table(
    "appointment",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("day", CivilDate, nullable=True),
    Column("slot", CivilTime, nullable=True),
    Column("starts_at", CivilDateTime, nullable=True),
)


def _insert_rows(engine: Engine) -> None:
    metadata.create_all(engine)
    with engine.begin() as connection:
        connection.execute(
            insert(appointment_table),
            [
                {
                    "id": 1,
                    "day": Date(2019, 12, 31, True),
                    "slot": Time(15, 35, True),
                    "starts_at": DateTime(Date(2019, 12, 31, True), Time(15, 35, True)),
                },
                {"id": 2, "day": Date(), "slot": Time(), "starts_at": DateTime()},
                {"id": 3, "day": None, "slot": None, "starts_at": None},
            ],
        )


def test_civil_columns_store_canonical_strings(sqlite_engine: Engine) -> None:
    _insert_rows(sqlite_engine)

    with sqlite_engine.connect() as connection:
        rows = connection.exec_driver_sql(
            "SELECT day, slot, starts_at FROM appointment ORDER BY id"
        ).all()

    assert [tuple(row) for row in rows] == [
        ("2019-12-31", "15:35", "2019-12-31T15:35"),
        (None, None, None),
        (None, None, None),
    ]


def test_civil_columns_load_values(sqlite_engine: Engine) -> None:
    _insert_rows(sqlite_engine)

    with sqlite_engine.connect() as connection:
        rows = connection.execute(
            select(
                appointment_table.c.day,
                appointment_table.c.slot,
                appointment_table.c.starts_at,
            ).order_by(appointment_table.c.id)
        ).all()

    assert tuple(rows[0]) == (
        Date(2019, 12, 31, True),
        Time(15, 35, True),
        DateTime(Date(2019, 12, 31, True), Time(15, 35, True)),
    )
    assert tuple(rows[1]) == (Date(), Time(), DateTime())
    assert tuple(rows[2]) == (Date(), Time(), DateTime())


def test_civil_columns_filter_on_bound_values(sqlite_engine: Engine) -> None:
    _insert_rows(sqlite_engine)

    with sqlite_engine.connect() as connection:
        found = connection.execute(
            select(appointment_table.c.id).where(
                appointment_table.c.day == Date(2019, 12, 31, True)
            )
        ).scalar_one()

    assert found == 1


@pytest.mark.parametrize(
    ("column_type", "value"),
    [
        (CivilDate(), Time(1, 2, True)),
        (CivilTime(), "15:35"),
        (CivilDateTime(), 8),
    ],
)
def test_bind_rejects_foreign_values(
    column_type: CivilDate | CivilTime | CivilDateTime,
    value: object,
) -> None:
    with pytest.raises(ConversionTypeError):
        column_type.process_bind_param(value, sqlite.dialect())  # pyright: ignore[reportArgumentType]


def test_result_accepts_bytes() -> None:
    loaded = CivilDate().process_result_value(b"2019-07-15", sqlite.dialect())

    assert loaded == Date(2019, 7, 15, True)


def test_result_rejects_malformed_text() -> None:
    with pytest.raises(ParseError):
        CivilTime().process_result_value("25:00", sqlite.dialect())


def test_result_rejects_foreign_storage_types() -> None:
    with pytest.raises(ConversionTypeError, match="can't convert int to DateTime"):
        CivilDateTime().process_result_value(20191231, sqlite.dialect())
