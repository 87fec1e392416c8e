from __future__ import annotations

"""
Diagnostic Logging Orchestrator.

Idempotent setup of the 'qqlogs' diagnostic logger. Importing the library
never touches logging configuration; hosts (or the CLI) opt in by calling
configure_logging.
"""

import logging

from qqlogs.infra.logging.config import _LEVEL_MAP, LIBRARY_LOGGER_NAME, DiagnosticsConfig
from qqlogs.infra.logging.handlers import _create_stream_handler, _is_our_handler

# Internal state flag for idempotency
_CONFIGURED_FLAG_ATTR: str = "_qqlogs_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: DiagnosticsConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach the diagnostic handler to the library logger once.

    Args:
        cfg: Diagnostic settings.
        force: If True, drop previously installed handlers and re-apply.

    Returns:
        logging.Logger: The 'qqlogs' logger.
    """
    lib_logger = logging.getLogger(LIBRARY_LOGGER_NAME)

    already_configured = bool(getattr(lib_logger, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return lib_logger

    level_int = _parse_level(cfg.level)
    lib_logger.setLevel(level_int)
    lib_logger.propagate = cfg.propagate
    _remove_our_handlers(lib_logger)

    if cfg.console:
        formatter = logging.Formatter(cfg.fmt, datefmt=cfg.datefmt)
        lib_logger.addHandler(_create_stream_handler(level_int, formatter))

    setattr(lib_logger, _CONFIGURED_FLAG_ATTR, True)
    return lib_logger


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


def reset_logging() -> None:
    """Remove installed handlers and return the library logger to its defaults."""
    lib_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    _remove_our_handlers(lib_logger)
    lib_logger.setLevel(logging.NOTSET)
    lib_logger.propagate = True
    if hasattr(lib_logger, _CONFIGURED_FLAG_ATTR):
        delattr(lib_logger, _CONFIGURED_FLAG_ATTR)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(target: logging.Logger) -> None:
    """Detach and close every handler this package installed."""
    for h in list(target.handlers):
        if _is_our_handler(h):
            target.removeHandler(h)
            h.close()
