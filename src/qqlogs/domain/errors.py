from __future__ import annotations

"""
Error Taxonomy.

Classifies the failures a logger can encounter. Construction-time problems
are raised; runtime write failures are converted into ErrorReport values and
handed to the configured error sink instead of propagating.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ErrorKind(IntEnum):
    """Failure classes. The values double as the status codes returned by writes."""
    ACCESS_DENIED = 1
    IO_FAILURE = 2
    UNEXPECTED_FAILURE = 3
    INVALID_CONFIGURATION = 4


class InvalidConfiguration(ValueError):
    """Raised when a logger is constructed or reconfigured with unusable values."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class InvalidLevel(ValueError):
    """Raised when a numeric level falls outside the display table."""


@dataclass(frozen=True)
class ErrorReport:
    """
    A single captured write-path failure.

    Attributes:
        kind: Classified failure.
        detail: Human readable description (exception text).
        path: Active log file involved, if known.
    """
    kind: ErrorKind
    detail: str
    path: Optional[str] = None


def classify_exception(exc: BaseException) -> ErrorKind:
    """Map an exception raised inside the write path onto an ErrorKind."""
    if isinstance(exc, PermissionError):
        return ErrorKind.ACCESS_DENIED
    if isinstance(exc, OSError):
        return ErrorKind.IO_FAILURE
    if isinstance(exc, (InvalidLevel, InvalidConfiguration)):
        return ErrorKind.INVALID_CONFIGURATION
    return ErrorKind.UNEXPECTED_FAILURE
