from __future__ import annotations

"""
Logger Facade.

Public entry point of the library: construct a Logger once in the host
application, hand it to call sites, and call 'log'. Also provides a
registry of shared loggers keyed by their active file, for code that needs
the old "one file, one lock" behavior without passing a handle around.
"""

import logging
import os
import threading
from typing import Any, Dict, List, Mapping, Optional

from qqlogs.core.formatter import Clock
from qqlogs.core.reporting import ErrorSink
from qqlogs.core.writer import RotationAwareWriter
from qqlogs.domain.config import (
    DEFAULT_BACKUP_EXTENSION,
    DEFAULT_FILENAME,
    DEFAULT_LINE_FORMAT,
    DEFAULT_RETAINED_BACKUP_COUNT,
    DEFAULT_ROOT_DIRECTORY,
    DEFAULT_SIZE_LIMIT_BYTES,
    LoggerConfig,
    config_from_options,
)
from qqlogs.domain.levels import LevelLike, LogLevel

logger = logging.getLogger(__name__)


class Logger:
    """
    Level-filtered, size-rotated text logger bound to one file.

    Args:
        filename: Base name of the active log.
        level: Minimum severity written (default DEBUG).
        size_limit_bytes: Rotate once the active log exceeds this size.
        retained_backup_count: Rotated copies to keep.
        root_directory: Directory for the log and its backups.
        line_format: Line template; '%Message%' is appended if missing.
        backup_extension: Suffix of rotated copies.
        prune_to_limit: Prune down to the limit instead of one file per rotation.
        error_sink: Callable receiving (ErrorKind, detail) for write failures.
        clock: Source of timestamps for '%DateTime%'.

    Raises:
        InvalidConfiguration: On a negative limit, an undefined level or an
            empty filename.
    """

    def __init__(
            self,
            filename: str = DEFAULT_FILENAME,
            level: LevelLike = LogLevel.DEBUG,
            size_limit_bytes: int = DEFAULT_SIZE_LIMIT_BYTES,
            retained_backup_count: int = DEFAULT_RETAINED_BACKUP_COUNT,
            *,
            root_directory: str = DEFAULT_ROOT_DIRECTORY,
            line_format: str = DEFAULT_LINE_FORMAT,
            backup_extension: str = DEFAULT_BACKUP_EXTENSION,
            prune_to_limit: bool = False,
            error_sink: Optional[ErrorSink] = None,
            clock: Optional[Clock] = None,
    ) -> None:
        config = LoggerConfig(
            filename,
            level,
            size_limit_bytes,
            retained_backup_count,
            root_directory=root_directory,
            line_format=line_format,
            backup_extension=backup_extension,
            prune_to_limit=prune_to_limit,
        )
        self._writer = RotationAwareWriter(config, error_sink, clock=clock)

    @classmethod
    def from_config(
            cls,
            config: LoggerConfig,
            error_sink: Optional[ErrorSink] = None,
            clock: Optional[Clock] = None,
    ) -> "Logger":
        """Wrap an already validated configuration."""
        self = cls.__new__(cls)
        self._writer = RotationAwareWriter(config, error_sink, clock=clock)
        return self

    @classmethod
    def from_options(
            cls,
            options: Optional[Mapping[str, Any]] = None,
            error_sink: Optional[ErrorSink] = None,
            clock: Optional[Clock] = None,
    ) -> "Logger":
        """Build a logger from a construction-option mapping (see config_from_options)."""
        return cls.from_config(config_from_options(options), error_sink, clock)

    def __repr__(self) -> str:
        return f"Logger({self.config!r})"

    # -------------------------------------------------------------------------
    # WRITE API
    # -------------------------------------------------------------------------

    def log(
            self,
            level: LevelLike,
            message: str,
            prefix: Optional[str] = None,
            overwrite: bool = False,
    ) -> int:
        """
        Write one line. Never raises for I/O problems.

        Returns:
            int: 0 on success, otherwise a non-zero ErrorKind value.
        """
        return self._writer.write(level, message, prefix, overwrite)

    def tail(self, n_lines: int = 100) -> List[str]:
        """Last lines of the active log; unreadable files yield [] and a sink report."""
        return self._writer.tail(n_lines)

    def backups(self) -> List[str]:
        """Rotated backup paths, oldest first."""
        return self._writer.backups()

    # -------------------------------------------------------------------------
    # PROPERTIES
    # -------------------------------------------------------------------------

    @property
    def config(self) -> LoggerConfig:
        return self._writer.config

    @property
    def writer(self) -> RotationAwareWriter:
        return self._writer

    @property
    def log_file_path(self) -> str:
        return self.config.log_file_path

    @property
    def line_format(self) -> str:
        return self.config.line_format

    @line_format.setter
    def line_format(self, value: str) -> None:
        self.config.line_format = value

    @property
    def root_directory(self) -> str:
        return self.config.root_directory

    @root_directory.setter
    def root_directory(self, value: str) -> None:
        self.config.root_directory = value

    @property
    def backup_extension(self) -> str:
        return self.config.backup_extension

    @backup_extension.setter
    def backup_extension(self, value: str) -> None:
        self.config.backup_extension = value

    @property
    def level(self) -> LogLevel:
        return self.config.minimum_level

    @level.setter
    def level(self, value: LevelLike) -> None:
        # Undefined values round down one step, otherwise the assignment is ignored
        self.config.minimum_level = value

    @property
    def size_limit_bytes(self) -> int:
        return self.config.size_limit_bytes

    @size_limit_bytes.setter
    def size_limit_bytes(self, value: int) -> None:
        self.config.size_limit_bytes = value

    @property
    def retained_backup_count(self) -> int:
        return self.config.retained_backup_count

    @retained_backup_count.setter
    def retained_backup_count(self, value: int) -> None:
        self.config.retained_backup_count = value

    @property
    def error_sink(self) -> ErrorSink:
        return self._writer.error_sink

    @error_sink.setter
    def error_sink(self, sink: ErrorSink) -> None:
        self._writer.error_sink = sink


# -----------------------------------------------------------------------------
# SHARED LOGGER REGISTRY
# -----------------------------------------------------------------------------
_registry: Dict[str, Logger] = {}
_registry_lock = threading.Lock()


def get_shared_logger(
        filename: str = DEFAULT_FILENAME,
        root_directory: str = DEFAULT_ROOT_DIRECTORY,
        **options: Any,
) -> Logger:
    """
    Return the process-wide logger for a given active file, creating it once.

    Later calls for the same resolved path return the first instance and
    ignore their options. Changing root_directory on a shared logger does not
    re-key it.

    Args:
        filename: Base name of the active log.
        root_directory: Directory for the log.
        **options: Extra Logger keyword arguments used on first creation.

    Returns:
        Logger: The shared instance.
    """
    probe = LoggerConfig(filename, root_directory=root_directory)
    key = os.path.abspath(probe.log_file_path)

    with _registry_lock:
        existing = _registry.get(key)
        if existing is not None:
            if options:
                logger.debug(f"Shared logger for {key} already exists; ignoring options {sorted(options)}")
            return existing

        created = Logger(filename, root_directory=root_directory, **options)
        _registry[key] = created
        return created


def reset_shared_loggers() -> None:
    """Forget every shared logger (files are left untouched)."""
    with _registry_lock:
        _registry.clear()
