from __future__ import annotations

"""
Error Reporting Sinks.

Write-path failures never propagate to the caller; they are delivered to an
error sink, a plain callable 'on_error(kind, detail)'. The default sink
forwards to the standard 'logging' module so failures land wherever the host
application routes its own diagnostics.
"""

import logging
import threading
from typing import Callable, List

from qqlogs.domain.errors import ErrorKind, ErrorReport

logger = logging.getLogger(__name__)

ErrorSink = Callable[[ErrorKind, str], None]

_TITLES = {
    ErrorKind.ACCESS_DENIED: "Unauthorized access",
    ErrorKind.IO_FAILURE: "I/O failure",
    ErrorKind.UNEXPECTED_FAILURE: "Unexpected failure",
    ErrorKind.INVALID_CONFIGURATION: "Invalid configuration",
}


def logging_error_sink(kind: ErrorKind, detail: str) -> None:
    """Default sink: record the failure through the 'qqlogs' diagnostic logger."""
    logger.error(f"{_TITLES.get(kind, kind.name)} while writing log: {detail}")


def null_error_sink(kind: ErrorKind, detail: str) -> None:
    """Sink that discards every report."""


class ErrorCollector:
    """
    Sink that keeps every report in memory.

    Useful for hosts that poll for logging problems and for tests.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._reports: List[ErrorReport] = []

    def __call__(self, kind: ErrorKind, detail: str) -> None:
        with self._lock:
            self._reports.append(ErrorReport(kind=kind, detail=detail))

    @property
    def reports(self) -> List[ErrorReport]:
        with self._lock:
            return list(self._reports)

    def kinds(self) -> List[ErrorKind]:
        return [r.kind for r in self.reports]

    def clear(self) -> None:
        with self._lock:
            self._reports.clear()


def safe_report(sink: ErrorSink, report: ErrorReport) -> None:
    """
    Deliver a report to a sink, containing any exception the sink raises.

    Args:
        sink: Target callable.
        report: Captured failure.
    """
    detail = report.detail if not report.path else f"{report.detail} [{report.path}]"
    try:
        sink(report.kind, detail)
    except Exception:
        logger.exception(f"Error sink failed while reporting {report.kind.name}")
