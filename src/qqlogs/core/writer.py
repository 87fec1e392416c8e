from __future__ import annotations

"""
Rotation-Aware Writer.

Owns the physical log file. Every write runs the same linear sequence under
one exclusive lock: ensure the directory, rotate (or truncate on overwrite),
seed a freshly created file, filter by level, append, close. Failures inside
that sequence are captured as ErrorReport values and delivered to the error
sink once the lock has been released, so a sink can never deadlock the
writer and callers never see an exception from a write.
"""

import logging
import os
import threading
import time
from typing import List, Optional

from qqlogs.core import retention
from qqlogs.core.formatter import Clock, LineFormatter
from qqlogs.core.reporting import ErrorSink, logging_error_sink, safe_report
from qqlogs.domain.config import LoggerConfig
from qqlogs.domain.errors import ErrorKind, ErrorReport, classify_exception
from qqlogs.domain.levels import LevelLike, LogLevel, validate_level
from qqlogs.infra import fs

logger = logging.getLogger(__name__)

SEED_MESSAGE = "File Created"
STATUS_OK = 0


class RotationAwareWriter:
    """
    Serializes writes to one active log file and manages its backups.

    The lock is a non-reentrant threading.Lock owned by this instance; two
    writers pointed at the same file do not coordinate with each other (use
    qqlogs.logger.get_shared_logger for that).
    """

    def __init__(
            self,
            config: LoggerConfig,
            error_sink: Optional[ErrorSink] = None,
            *,
            clock: Optional[Clock] = None,
            token_source: retention.TokenSource = time.time_ns,
    ) -> None:
        self.config = config
        self.error_sink: ErrorSink = error_sink or logging_error_sink
        self.formatter = LineFormatter(lambda: self.config.line_format, clock)
        self._token_source = token_source
        self._lock = threading.Lock()
        self._reporting = threading.local()

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def write(
            self,
            level: LevelLike,
            message: str,
            prefix: Optional[str] = None,
            overwrite: bool = False,
    ) -> int:
        """
        Append one event to the active log, rotating first if required.

        Args:
            level: Enumerated or raw integer level in [0, 10].
            message: Message body.
            prefix: Optional text placed before the rendered line.
            overwrite: Discard the current active file before writing.

        Returns:
            int: 0 on success, otherwise the ErrorKind value of the first failure.
        """
        if getattr(self._reporting, "active", False):
            logger.warning("Dropped a log write issued from inside the error sink.")
            return int(ErrorKind.UNEXPECTED_FAILURE)

        reports: List[ErrorReport] = []
        with self._lock:
            self._write_locked(level, message, prefix, overwrite, reports)

        self._deliver(reports)
        return int(reports[0].kind) if reports else STATUS_OK

    def tail(self, n_lines: int = 100) -> List[str]:
        """
        Last lines of the active log.

        Returns an empty list if the file does not exist yet or cannot be
        read; read failures go to the error sink like write failures.
        """
        reports: List[ErrorReport] = []
        lines: List[str] = []
        with self._lock:
            path = self.config.log_file_path
            try:
                if os.path.exists(path):
                    lines = fs.read_tail(path, n_lines)
            except OSError as e:
                reports.append(ErrorReport(kind=classify_exception(e), detail=f"Reading log tail failed: {e}", path=path))

        self._deliver(reports)
        return lines

    def backups(self) -> List[str]:
        """Rotated backups, oldest first."""
        with self._lock:
            return retention.list_backups(self.config)

    # -------------------------------------------------------------------------
    # CRITICAL SECTION
    # -------------------------------------------------------------------------

    def _write_locked(
            self,
            level: LevelLike,
            message: str,
            prefix: Optional[str],
            overwrite: bool,
            reports: List[ErrorReport],
    ) -> None:
        # One consistent view of paths and limits for the whole call
        cfg = self.config.snapshot()
        path = cfg.log_file_path
        try:
            validate_level(level)
            if message is None:
                raise TypeError("message must be a string, not None")

            if fs.ensure_dir(cfg.root_directory):
                logger.debug(f"Created log directory {cfg.root_directory}")

            if overwrite:
                fs.remove_if_exists(path)
                mode = "w"
            else:
                size = fs.file_size(path)
                if size is not None and size > cfg.size_limit_bytes:
                    self._rotate(cfg, path, reports)
                mode = "a"

            is_new = not os.path.exists(path)
            with open(path, mode, encoding="utf-8") as f:
                if is_new:
                    f.write(self.formatter.render(LogLevel.DEBUG, SEED_MESSAGE) + "\n")
                if int(level) >= int(cfg.minimum_level):
                    f.write(self.formatter.render(level, message, prefix) + "\n")

        except Exception as e:
            reports.append(ErrorReport(kind=classify_exception(e), detail=str(e), path=path))

    def _rotate(self, cfg: LoggerConfig, path: str, reports: List[ErrorReport]) -> None:
        """Move the active log to a fresh backup path, then prune old backups."""
        backup = retention.build_backup_path(cfg, self._token_source)
        fs.copy_file(path, backup)
        os.remove(path)
        logger.debug(f"Rotated {path} -> {backup}")

        # A pruning failure is reported on its own and does not abort the write
        try:
            retention.prune_backups(cfg)
        except Exception as e:
            reports.append(ErrorReport(
                kind=classify_exception(e),
                detail=f"Pruning backups failed: {e}",
                path=path,
            ))

    def _deliver(self, reports: List[ErrorReport]) -> None:
        if not reports:
            return
        self._reporting.active = True
        try:
            for report in reports:
                safe_report(self.error_sink, report)
        finally:
            self._reporting.active = False
