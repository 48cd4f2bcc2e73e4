"""Error types raised by civil value parsing and storage adapters."""

from __future__ import annotations


class CivilError(Exception):
    """Base class for civildt errors."""


class ParseError(CivilError, ValueError):
    """Raised when text does not match the canonical format of a civil type."""

    def __init__(self, text: str, kind: str, reason: str | None = None) -> None:
        message = f'cannot parse "{text}" as {kind}'
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.text = text
        self.kind = kind


class ConversionTypeError(CivilError, TypeError):
    """Raised when a storage value has a representation that cannot be scanned."""

    def __init__(self, value: object, kind: str) -> None:
        self.value_type = type(value)
        super().__init__(f"can't convert {self.value_type.__name__} to {kind}")
        self.kind = kind
