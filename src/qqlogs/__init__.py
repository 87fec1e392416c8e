from __future__ import annotations

from qqlogs.core.formatter import LineFormatter
from qqlogs.core.reporting import ErrorCollector, logging_error_sink, null_error_sink
from qqlogs.core.writer import RotationAwareWriter
from qqlogs.domain.config import LoggerConfig, config_from_options, load_options
from qqlogs.domain.errors import ErrorKind, ErrorReport, InvalidConfiguration, InvalidLevel
from qqlogs.domain.levels import LEVEL_DISPLAY_NAMES, LogLevel, parse_level
from qqlogs.logger import Logger, get_shared_logger, reset_shared_loggers

__version__ = "1.0.0"

__all__ = [
    "ErrorCollector",
    "ErrorKind",
    "ErrorReport",
    "InvalidConfiguration",
    "InvalidLevel",
    "LEVEL_DISPLAY_NAMES",
    "LineFormatter",
    "LogLevel",
    "Logger",
    "LoggerConfig",
    "RotationAwareWriter",
    "config_from_options",
    "get_shared_logger",
    "load_options",
    "logging_error_sink",
    "null_error_sink",
    "parse_level",
    "reset_shared_loggers",
]
