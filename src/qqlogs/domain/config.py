from __future__ import annotations

"""
Logger Configuration Model.

Holds the per-logger settings (target path, line template, rotation and
retention limits, severity floor) and normalizes every value on assignment
so the writer never has to re-check them. Also translates loose option
mappings and JSON option files into a validated configuration.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

from qqlogs.domain.errors import InvalidConfiguration, InvalidLevel
from qqlogs.domain.levels import LevelLike, LogLevel, lenient_level, parse_level

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
MESSAGE_PLACEHOLDER = "%Message%"

DEFAULT_FILENAME = "Log"
DEFAULT_ROOT_DIRECTORY = "logs/"
DEFAULT_LINE_FORMAT = "%DateTime% - [%szLogLevel%] - %Message%"
DEFAULT_BACKUP_EXTENSION = ".bak"
DEFAULT_SIZE_LIMIT_BYTES = 102400
DEFAULT_RETAINED_BACKUP_COUNT = 1

# Accepted option spellings mapped onto LoggerConfig keyword arguments
_OPTION_ALIASES: Dict[str, str] = {
    "filename": "filename",
    "level": "minimum_level",
    "minimum_level": "minimum_level",
    "minimumLevel": "minimum_level",
    "sizeLimitBytes": "size_limit_bytes",
    "size_limit_bytes": "size_limit_bytes",
    "retainedBackupCount": "retained_backup_count",
    "retained_backup_count": "retained_backup_count",
    "rootDirectory": "root_directory",
    "root_directory": "root_directory",
    "lineFormat": "line_format",
    "line_format": "line_format",
    "backupExtension": "backup_extension",
    "backup_extension": "backup_extension",
    "pruneToLimit": "prune_to_limit",
    "prune_to_limit": "prune_to_limit",
}


# -----------------------------------------------------------------------------
# Normalizers
# -----------------------------------------------------------------------------
def normalize_line_format(value: str) -> str:
    """
    Guarantee the template carries the message placeholder exactly once.

    A missing placeholder is appended after a space; repeated placeholders
    after the first are removed.
    """
    template = str(value)
    count = template.count(MESSAGE_PLACEHOLDER)
    if count == 0:
        return f"{template} {MESSAGE_PLACEHOLDER}" if template else MESSAGE_PLACEHOLDER
    if count > 1:
        head, _, tail = template.partition(MESSAGE_PLACEHOLDER)
        logger.warning(f"Line format repeats {MESSAGE_PLACEHOLDER}; keeping the first occurrence.")
        return head + MESSAGE_PLACEHOLDER + tail.replace(MESSAGE_PLACEHOLDER, "")
    return template


def normalize_root_directory(value: str) -> str:
    """Append a trailing separator when missing."""
    root = str(value)
    if root.endswith(("/", os.sep)):
        return root
    return root + os.sep


def normalize_backup_extension(value: str) -> str:
    """Prepend a leading dot when missing."""
    ext = str(value)
    if ext.startswith("."):
        return ext
    return "." + ext


def _check_non_negative(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(field, f"expected an integer, got {type(value).__name__}.")
    if value < 0:
        raise InvalidConfiguration(field, "must be a non-negative value.")
    return int(value)


def _check_bool(field: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise InvalidConfiguration(field, f"expected true or false, got {type(value).__name__}.")
    return value


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------
class LoggerConfig:
    """
    Mutable-through-setters configuration of one logger.

    Attributes:
        filename: Base name of the active log inside root_directory.
        root_directory: Directory holding the active log and its backups.
        line_format: Template rendered for each line.
        backup_extension: Suffix given to rotated copies.
        minimum_level: Severity floor for requested lines.
        size_limit_bytes: Size above which the active log is rotated.
        retained_backup_count: Number of rotated copies to keep.
        prune_to_limit: Delete down to the retention limit in one pass.
    """

    def __init__(
            self,
            filename: str = DEFAULT_FILENAME,
            minimum_level: LevelLike = LogLevel.DEBUG,
            size_limit_bytes: int = DEFAULT_SIZE_LIMIT_BYTES,
            retained_backup_count: int = DEFAULT_RETAINED_BACKUP_COUNT,
            *,
            root_directory: str = DEFAULT_ROOT_DIRECTORY,
            line_format: str = DEFAULT_LINE_FORMAT,
            backup_extension: str = DEFAULT_BACKUP_EXTENSION,
            prune_to_limit: bool = False,
    ) -> None:
        if not filename or not str(filename).strip():
            raise InvalidConfiguration("filename", "must be a non-empty name.")
        try:
            level = parse_level(minimum_level)
        except InvalidLevel as e:
            raise InvalidConfiguration("minimum_level", str(e)) from e

        self._filename = str(filename)
        self._minimum_level = level
        self._size_limit_bytes = _check_non_negative("size_limit_bytes", size_limit_bytes)
        self._retained_backup_count = _check_non_negative("retained_backup_count", retained_backup_count)
        self._root_directory = normalize_root_directory(root_directory)
        self._line_format = normalize_line_format(line_format)
        self._backup_extension = normalize_backup_extension(backup_extension)
        self._prune_to_limit = _check_bool("prune_to_limit", prune_to_limit)

    def __repr__(self) -> str:
        return (
            f"LoggerConfig(path={self.log_file_path!r}, level={self._minimum_level.name}, "
            f"size_limit_bytes={self._size_limit_bytes}, "
            f"retained_backup_count={self._retained_backup_count})"
        )

    def snapshot(self) -> "LoggerConfig":
        """Independent copy; later setter calls on this instance do not affect it."""
        return copy.copy(self)

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def log_file_path(self) -> str:
        """Directory plus base filename of the active log."""
        return f"{self._root_directory}{self._filename}"

    @property
    def root_directory(self) -> str:
        return self._root_directory

    @root_directory.setter
    def root_directory(self, value: str) -> None:
        self._root_directory = normalize_root_directory(value)

    @property
    def line_format(self) -> str:
        return self._line_format

    @line_format.setter
    def line_format(self, value: str) -> None:
        self._line_format = normalize_line_format(value)

    @property
    def backup_extension(self) -> str:
        return self._backup_extension

    @backup_extension.setter
    def backup_extension(self, value: str) -> None:
        self._backup_extension = normalize_backup_extension(value)

    @property
    def minimum_level(self) -> LogLevel:
        return self._minimum_level

    @minimum_level.setter
    def minimum_level(self, value: LevelLike) -> None:
        resolved = lenient_level(value)
        if resolved is None:
            logger.debug(f"Ignoring undefined level {value!r}; keeping {self._minimum_level.name}.")
            return
        self._minimum_level = resolved

    @property
    def size_limit_bytes(self) -> int:
        return self._size_limit_bytes

    @size_limit_bytes.setter
    def size_limit_bytes(self, value: int) -> None:
        self._size_limit_bytes = _check_non_negative("size_limit_bytes", value)

    @property
    def retained_backup_count(self) -> int:
        return self._retained_backup_count

    @retained_backup_count.setter
    def retained_backup_count(self, value: int) -> None:
        self._retained_backup_count = _check_non_negative("retained_backup_count", value)

    @property
    def prune_to_limit(self) -> bool:
        return self._prune_to_limit

    @prune_to_limit.setter
    def prune_to_limit(self, value: bool) -> None:
        self._prune_to_limit = _check_bool("prune_to_limit", value)


# -----------------------------------------------------------------------------
# Option Loading
# -----------------------------------------------------------------------------
def config_from_options(options: Optional[Mapping[str, Any]] = None) -> LoggerConfig:
    """
    Build a LoggerConfig from a loose mapping of construction options.

    Both the camelCase option names and the attribute names are accepted.
    Unknown keys are ignored with a warning.

    Args:
        options: Option mapping; None or empty yields all defaults.

    Returns:
        LoggerConfig: Validated configuration.

    Raises:
        InvalidConfiguration: If any value is unusable.
    """
    kwargs: Dict[str, Any] = {}
    for key, value in (options or {}).items():
        target = _OPTION_ALIASES.get(key)
        if target is None:
            logger.warning(f"Ignoring unknown logger option: {key}")
            continue
        if value is None:
            continue
        kwargs[target] = value

    if "minimum_level" in kwargs:
        try:
            kwargs["minimum_level"] = parse_level(kwargs["minimum_level"])
        except InvalidLevel as e:
            raise InvalidConfiguration("level", str(e)) from e

    return LoggerConfig(**kwargs)


def load_options(path: str) -> Dict[str, Any]:
    """
    Read a JSON object of logger options from disk.

    Args:
        path: Location of the JSON options file.

    Returns:
        Dict[str, Any]: The decoded option mapping.

    Raises:
        InvalidConfiguration: If the file is missing, unreadable or not an object.
    """
    if not os.path.exists(path):
        raise InvalidConfiguration("config", f"options file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidConfiguration("config", f"cannot read options file {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfiguration("config", "options file must contain a JSON object.")

    logger.debug(f"Loaded {len(data)} logger options from {path}")
    return data
