from __future__ import annotations

"""
Diagnostic Handler Utilities.

Tags the handlers this package installs so reconfiguration only ever
removes its own handlers and never those attached by the host application.
"""

import logging
import sys

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_qqlogs_handler"


def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as installed by this package."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_stream_handler(level_int: int, formatter: logging.Formatter) -> logging.StreamHandler:
    """
    Build a tagged stderr handler.

    Args:
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.

    Returns:
        logging.StreamHandler: Configured handler.
    """
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    _tag_handler(sh)
    return sh
