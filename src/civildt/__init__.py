from __future__ import annotations

from importlib import metadata

from civildt.domain import Date, DateTime, Time
from civildt.errors import CivilError, ConversionTypeError, ParseError

try:
    __version__ = metadata.version("civildt")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "CivilError",
    "ConversionTypeError",
    "Date",
    "DateTime",
    "ParseError",
    "Time",
    "__version__",
]
