from __future__ import annotations

"""
Diagnostic Logging Configuration.

Settings for the library's own diagnostics (rotation events, captured write
failures), which go through the standard 'logging' module under the
'qqlogs' logger namespace.
"""

import logging
from dataclasses import dataclass
from typing import Dict

LIBRARY_LOGGER_NAME = "qqlogs"

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class DiagnosticsConfig:
    """
    Immutable settings for the diagnostic stream.

    Attributes:
        level: Minimum severity of diagnostics to emit.
        console: Attach a stderr stream handler.
        fmt: Format of diagnostic records.
        datefmt: Timestamp format of diagnostic records.
        propagate: Let records continue to the root logger.
    """
    level: str = "WARNING"
    console: bool = True
    fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    propagate: bool = True
