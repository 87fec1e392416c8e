from __future__ import annotations

"""
Unit tests for severity levels.

Verifies:
1. Numeric values and the 11-slot display table.
2. Validation of the [0, 10] range.
3. Lenient resolution used by the level property.
4. Name/number parsing.
"""

import pytest

from qqlogs.domain.errors import InvalidLevel
from qqlogs.domain.levels import (
    LEVEL_DISPLAY_NAMES,
    LogLevel,
    display_name,
    lenient_level,
    parse_level,
    symbolic_name,
    validate_level,
)


def test_level_values_are_even_and_ordered():
    assert [int(lv) for lv in LogLevel] == [0, 2, 4, 6, 8, 10]
    assert LogLevel.DEBUG < LogLevel.INFO < LogLevel.FATAL_EXCEPTION


def test_display_table_covers_reserved_slots():
    assert len(LEVEL_DISPLAY_NAMES) == 11
    assert display_name(LogLevel.WARNING) == "Warning"
    assert display_name(10) == "FatalException"
    for odd in (1, 3, 5, 7, 9):
        assert display_name(odd) == str(odd)


def test_symbolic_name_distinguishes_enum_and_int():
    assert symbolic_name(LogLevel.ERROR) == "ERROR"
    assert symbolic_name(6) == "6"
    assert symbolic_name(7) == "7"


@pytest.mark.parametrize("bad", [-1, 11, 100])
def test_validate_level_rejects_out_of_range(bad):
    with pytest.raises(InvalidLevel):
        validate_level(bad)


def test_validate_level_rejects_non_integers():
    with pytest.raises(InvalidLevel):
        validate_level("4")  # type: ignore[arg-type]
    with pytest.raises(InvalidLevel):
        validate_level(True)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (4, LogLevel.WARNING),
        (3, LogLevel.INFO),
        (11, LogLevel.FATAL_EXCEPTION),
        (LogLevel.ERROR, LogLevel.ERROR),
    ],
)
def test_lenient_level_rounds_down_one_step(raw, expected):
    assert lenient_level(raw) is expected


@pytest.mark.parametrize("raw", [-1, 12, 42, "INFO", None])
def test_lenient_level_gives_up_on_unknown_values(raw):
    assert lenient_level(raw) is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("warning", LogLevel.WARNING),
        (" Info ", LogLevel.INFO),
        ("FatalException", LogLevel.FATAL_EXCEPTION),
        ("fatal-exception", LogLevel.FATAL_EXCEPTION),
        ("8", LogLevel.EXCEPTION),
        (2, LogLevel.INFO),
        (None, LogLevel.DEBUG),
        ("", LogLevel.DEBUG),
    ],
)
def test_parse_level_accepts_names_and_numbers(raw, expected):
    assert parse_level(raw) is expected


@pytest.mark.parametrize("raw", ["verbose", 3, 11, "-2"])
def test_parse_level_rejects_undefined(raw):
    with pytest.raises(InvalidLevel):
        parse_level(raw)
