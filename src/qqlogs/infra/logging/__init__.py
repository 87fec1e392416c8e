from __future__ import annotations

from .config import LIBRARY_LOGGER_NAME, DiagnosticsConfig
from .core import (
    configure_logging,
    get_logger,
    reset_logging,
)

__all__ = [
    "DiagnosticsConfig",
    "LIBRARY_LOGGER_NAME",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
