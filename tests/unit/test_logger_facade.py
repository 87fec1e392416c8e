from __future__ import annotations

"""
Unit tests for the Logger facade and the shared logger registry.
"""

import os

import pytest

from qqlogs import Logger, LogLevel, get_shared_logger
from qqlogs.core.writer import SEED_MESSAGE
from qqlogs.domain.errors import InvalidConfiguration


def test_construction_defaults(log_root):
    log = Logger("app.log", root_directory=log_root)
    assert log.level is LogLevel.DEBUG
    assert log.size_limit_bytes == 102400
    assert log.retained_backup_count == 1
    assert log.log_file_path == f"{log_root}app.log"


def test_construction_rejects_negative_size(log_root):
    with pytest.raises(InvalidConfiguration):
        Logger("app.log", LogLevel.INFO, -1, 1, root_directory=log_root)


def test_from_options(log_root):
    log = Logger.from_options({"filename": "opt.log", "level": "error", "rootDirectory": log_root})
    assert log.level is LogLevel.ERROR
    assert log.log_file_path == f"{log_root}opt.log"


def test_log_writes_line(log_root, collector, fixed_clock):
    log = Logger("app.log", root_directory=log_root, error_sink=collector, clock=fixed_clock)
    assert log.log(LogLevel.INFO, "hello") == 0
    lines = [l.rstrip("\n") for l in log.tail()]
    assert lines == [
        "2024-03-05 14:07:09.123 - [Debug] - File Created",
        "2024-03-05 14:07:09.123 - [Info] - hello",
    ]


def test_property_setters_normalize(log_root):
    log = Logger("app.log", root_directory=log_root)

    log.line_format = "[%LogLevel%]"
    assert log.line_format == "[%LogLevel%] %Message%"

    log.backup_extension = "old"
    assert log.backup_extension == ".old"

    log.root_directory = os.path.join(log_root, "nested")
    assert log.root_directory.endswith(os.sep)


def test_level_setter_fallback_and_noop(log_root):
    log = Logger("app.log", LogLevel.INFO, root_directory=log_root)

    log.level = 7
    assert log.level is LogLevel.ERROR

    log.level = 99
    assert log.level is LogLevel.ERROR

    log.level = LogLevel.DEBUG
    assert log.level is LogLevel.DEBUG


def test_level_setter_changes_filtering(log_root, collector, fixed_clock):
    log = Logger("app.log", root_directory=log_root, line_format="%Message%",
                 error_sink=collector, clock=fixed_clock)
    log.level = LogLevel.WARNING
    log.log(LogLevel.INFO, "dropped")
    log.log(LogLevel.WARNING, "kept")
    assert [l.rstrip("\n") for l in log.tail()] == [SEED_MESSAGE, "kept"]


def test_error_sink_can_be_swapped(log_root, collector):
    log = Logger("app.log", root_directory=log_root)
    log.error_sink = collector
    assert log.error_sink is collector


def test_shared_logger_returns_same_instance(log_root):
    a = get_shared_logger("app.log", log_root, size_limit_bytes=10)
    b = get_shared_logger("app.log", log_root.rstrip(os.sep))
    c = get_shared_logger("other.log", log_root)

    assert a is b
    assert a is not c
    assert a.size_limit_bytes == 10
    assert a.writer is b.writer


def test_shared_logger_validates_options(log_root):
    with pytest.raises(InvalidConfiguration):
        get_shared_logger("bad.log", log_root, size_limit_bytes=-1)
