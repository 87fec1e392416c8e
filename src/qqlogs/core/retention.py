from __future__ import annotations

"""
Backup Naming and Retention Pruning.

Rotated copies of the active log are named
'{root}{filename}_{token}{extension}', where the token is a nanosecond
timestamp so names sort chronologically and never collide. Pruning removes
the oldest copies (by creation time) once the configured count is exceeded.
"""

import glob
import logging
import os
import time
from typing import Callable, List

from qqlogs.domain.config import LoggerConfig
from qqlogs.infra import fs

logger = logging.getLogger(__name__)

TokenSource = Callable[[], int]


def backup_pattern(config: LoggerConfig) -> str:
    """Glob (relative to the root directory) matching this logger's backups."""
    return f"{glob.escape(config.filename)}*{glob.escape(config.backup_extension)}"


def list_backups(config: LoggerConfig) -> List[str]:
    """Rotated backups of the logger, oldest first."""
    root = config.root_directory
    if not os.path.isdir(root):
        return []
    active = os.path.abspath(config.log_file_path)
    return [
        p for p in fs.list_files_by_creation(root, backup_pattern(config))
        if os.path.abspath(p) != active
    ]


def build_backup_path(config: LoggerConfig, token_source: TokenSource = time.time_ns) -> str:
    """
    Choose an unused backup path for the current active log.

    Args:
        config: Logger configuration providing root, name and extension.
        token_source: Monotonic-enough integer source for the rotation token.

    Returns:
        str: A path that does not exist yet.
    """
    token = token_source()
    while True:
        candidate = f"{config.root_directory}{config.filename}_{token}{config.backup_extension}"
        if not os.path.exists(candidate):
            return candidate
        token += 1


def prune_backups(config: LoggerConfig) -> List[str]:
    """
    Delete the oldest backups that exceed the retention count.

    Removes a single file per call unless the configuration asks to prune
    down to the limit.

    Returns:
        List[str]: Paths that were deleted.

    Raises:
        OSError: If listing or deleting fails.
    """
    backups = list_backups(config)
    excess = len(backups) - config.retained_backup_count
    if excess <= 0:
        return []

    doomed = backups[:excess] if config.prune_to_limit else backups[:1]
    removed: List[str] = []
    for path in doomed:
        if fs.remove_if_exists(path):
            removed.append(path)
            logger.debug(f"Pruned backup {path}")
    return removed
