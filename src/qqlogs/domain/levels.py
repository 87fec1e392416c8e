from __future__ import annotations

"""
Severity Level Definitions.

Defines the ordered severity scale used by every logger, the fixed display
table rendered through the '%szLogLevel%' placeholder, and the helpers that
validate and parse user-supplied level values.
"""

from enum import IntEnum
from typing import List, Optional, Union

from qqlogs.domain.errors import InvalidLevel

MIN_LEVEL = 0
MAX_LEVEL = 10


class LogLevel(IntEnum):
    """Ordered severity scale. Odd values are reserved for intermediate severities."""
    DEBUG = 0
    INFO = 2
    WARNING = 4
    ERROR = 6
    EXCEPTION = 8
    FATAL_EXCEPTION = 10


# Display strings indexed by numeric level (reserved slots render as digits)
LEVEL_DISPLAY_NAMES: List[str] = [
    "Debug", "1", "Info", "3", "Warning", "5",
    "Error", "7", "Exception", "9", "FatalException",
]

LevelLike = Union[LogLevel, int]


# -----------------------------------------------------------------------------
# VALIDATION API
# -----------------------------------------------------------------------------

def validate_level(level: LevelLike) -> int:
    """
    Check that a level lies within the display table and return it as an int.

    Args:
        level: Enumerated or raw integer level.

    Returns:
        int: The numeric level.

    Raises:
        InvalidLevel: If the value is not an integer in [0, 10].
    """
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidLevel(f"Log level must be an integer, got {type(level).__name__}.")
    value = int(level)
    if value < MIN_LEVEL or value > MAX_LEVEL:
        raise InvalidLevel(f"Log level {value} is outside [{MIN_LEVEL}, {MAX_LEVEL}].")
    return value


def display_name(level: LevelLike) -> str:
    """Return the '%szLogLevel%' string for a level."""
    return LEVEL_DISPLAY_NAMES[validate_level(level)]


def symbolic_name(level: LevelLike) -> str:
    """
    Return the '%LogLevel%' rendering of a level.

    Enumerated levels render as their member name, raw integers as decimals.
    """
    if isinstance(level, LogLevel):
        return level.name
    return str(validate_level(level))


def is_defined(value: int) -> bool:
    """True if the integer maps onto a member of LogLevel."""
    return value in LogLevel._value2member_map_


def lenient_level(value: LevelLike) -> Optional[LogLevel]:
    """
    Resolve a level for the enum-typed level property.

    A value that is not itself a defined level falls back to the value
    below it (so odd reserved slots round down to the next severity).

    Returns:
        Optional[LogLevel]: The resolved level, or None if neither matches.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    value = int(value)
    if is_defined(value):
        return LogLevel(value)
    if is_defined(value - 1):
        return LogLevel(value - 1)
    return None


def parse_level(raw: Union[LevelLike, str, None], default: LogLevel = LogLevel.DEBUG) -> LogLevel:
    """
    Convert a level given as a member, integer or name into a LogLevel.

    Names are case-insensitive and accept the display strings as well as the
    member names ('fatal_exception', 'FatalException').

    Args:
        raw: Level to parse. None yields the default.
        default: Level returned for None or empty input.

    Returns:
        LogLevel: The parsed level.

    Raises:
        InvalidLevel: If the value names no defined level.
    """
    if raw is None:
        return default
    if isinstance(raw, LogLevel):
        return raw
    if isinstance(raw, str):
        token = raw.strip()
        if not token:
            return default
        if token.lstrip("-").isdigit():
            return parse_level(int(token), default)
        key = token.upper().replace("-", "_")
        if key in LogLevel.__members__:
            return LogLevel[key]
        for member in LogLevel:
            if LEVEL_DISPLAY_NAMES[member.value].upper() == token.upper():
                return member
        raise InvalidLevel(f"Unknown log level name: {raw!r}.")
    if isinstance(raw, int) and not isinstance(raw, bool) and is_defined(int(raw)):
        return LogLevel(int(raw))
    raise InvalidLevel(f"Value {raw!r} is not a defined log level.")
