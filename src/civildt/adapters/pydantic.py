"""Pydantic integration: civil values travel through JSON as canonical strings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

from pydantic_core import core_schema

if TYPE_CHECKING:
    from collections.abc import Callable


class CivilText(Protocol):
    def format(self) -> str: ...


T = TypeVar("T", bound=CivilText)


def _format(value: CivilText) -> str:
    return value.format()


def civil_text_schema(
    cls: type[T],
    parse: Callable[[str], T],
) -> core_schema.CoreSchema:
    """Build a core schema that validates from text and serializes back to text.

    ``parse`` raises :class:`~civildt.errors.ParseError`, a ``ValueError``, which
    pydantic reports as a ``ValidationError``. In Python mode an existing instance
    is accepted unchanged; JSON output always uses the canonical string.
    """

    from_text = core_schema.chain_schema(
        [
            core_schema.str_schema(),
            core_schema.no_info_plain_validator_function(parse),
        ]
    )
    return core_schema.json_or_python_schema(
        json_schema=from_text,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_text],
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            _format,
            return_schema=core_schema.str_schema(),
            when_used="json",
        ),
    )
