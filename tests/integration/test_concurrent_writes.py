from __future__ import annotations

"""
Integration tests for thread safety.

Many threads writing through one logger must never interleave partial lines,
lose lines, or raise, including while rotation is happening.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from qqlogs import LogLevel, Logger, get_shared_logger
from qqlogs.core.writer import SEED_MESSAGE

THREADS = 8
PER_THREAD = 50


def _all_lines(log: Logger):
    lines = []
    for path in log.backups() + [log.log_file_path]:
        with open(path, "r", encoding="utf-8") as f:
            lines.extend(f.read().splitlines())
    return lines


def _hammer(log: Logger, worker: int) -> int:
    failures = 0
    for i in range(PER_THREAD):
        failures += log.log(LogLevel.INFO, f"worker={worker} seq={i}") != 0
    return failures


def test_concurrent_writes_keep_every_line(log_root, collector, fixed_clock):
    log = Logger("threads.log", root_directory=log_root, line_format="%Message%",
                 error_sink=collector, clock=fixed_clock)

    with ThreadPoolExecutor(max_workers=THREADS) as pool:
        failures = sum(pool.map(lambda w: _hammer(log, w), range(THREADS)))

    assert failures == 0
    lines = [l for l in _all_lines(log) if l != SEED_MESSAGE]
    assert len(lines) == THREADS * PER_THREAD
    assert len(set(lines)) == THREADS * PER_THREAD


def test_concurrent_writes_with_rotation(log_root, collector, fixed_clock):
    log = Logger("spin.log", size_limit_bytes=200, retained_backup_count=1000, root_directory=log_root,
                 line_format="%Message%", error_sink=collector, clock=fixed_clock)

    threads = [threading.Thread(target=_hammer, args=(log, w)) for w in range(THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert collector.reports == []
    lines = [l for l in _all_lines(log) if l != SEED_MESSAGE]
    assert sorted(lines) == sorted(f"worker={w} seq={i}" for w in range(THREADS) for i in range(PER_THREAD))


def test_shared_logger_serializes_independent_call_sites(log_root, collector, fixed_clock):
    def call_site(worker: int) -> None:
        log = get_shared_logger("shared.log", log_root, line_format="%Message%",
                                error_sink=collector, clock=fixed_clock)
        _hammer(log, worker)

    threads = [threading.Thread(target=call_site, args=(w,)) for w in range(THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    log = get_shared_logger("shared.log", log_root)
    lines = [l for l in _all_lines(log) if l != SEED_MESSAGE]
    assert len(lines) == THREADS * PER_THREAD
    assert collector.reports == []
