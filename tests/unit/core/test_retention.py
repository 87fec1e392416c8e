from __future__ import annotations

"""
Unit tests for backup naming and retention pruning.
"""

import os
import time

from qqlogs.core import retention
from qqlogs.domain.config import LoggerConfig


def _make_backups(cfg: LoggerConfig, tokens) -> list:
    os.makedirs(cfg.root_directory, exist_ok=True)
    paths = []
    for token in tokens:
        path = f"{cfg.root_directory}{cfg.filename}_{token}{cfg.backup_extension}"
        with open(path, "w", encoding="utf-8") as f:
            f.write(str(token))
        paths.append(path)
        # Distinct creation times on filesystems with coarse timestamps
        time.sleep(0.01)
    return paths


def test_build_backup_path_layout(log_root):
    cfg = LoggerConfig("app.log", root_directory=log_root)
    path = retention.build_backup_path(cfg, token_source=lambda: 1234)
    assert path == f"{log_root}app.log_1234.bak"


def test_build_backup_path_avoids_collisions(log_root):
    cfg = LoggerConfig("app.log", root_directory=log_root)
    _make_backups(cfg, [1234, 1235])
    path = retention.build_backup_path(cfg, token_source=lambda: 1234)
    assert path == f"{log_root}app.log_1236.bak"


def test_list_backups_matches_name_and_extension_only(log_root):
    cfg = LoggerConfig("app.log", root_directory=log_root)
    backups = _make_backups(cfg, [1, 2])
    with open(cfg.log_file_path, "w", encoding="utf-8") as f:
        f.write("active")
    with open(f"{log_root}other_9.bak", "w", encoding="utf-8") as f:
        f.write("x")
    with open(f"{log_root}app.log_3.txt", "w", encoding="utf-8") as f:
        f.write("x")

    assert retention.list_backups(cfg) == backups


def test_list_backups_missing_directory(log_root):
    cfg = LoggerConfig("app.log", root_directory=log_root)
    assert retention.list_backups(cfg) == []


def test_prune_removes_single_oldest(log_root):
    cfg = LoggerConfig("app.log", retained_backup_count=1, root_directory=log_root)
    oldest, middle, newest = _make_backups(cfg, [10, 20, 30])

    removed = retention.prune_backups(cfg)

    assert removed == [oldest]
    assert retention.list_backups(cfg) == [middle, newest]


def test_prune_to_limit_removes_all_excess(log_root):
    cfg = LoggerConfig("app.log", retained_backup_count=1, root_directory=log_root, prune_to_limit=True)
    oldest, middle, newest = _make_backups(cfg, [10, 20, 30])

    removed = retention.prune_backups(cfg)

    assert removed == [oldest, middle]
    assert retention.list_backups(cfg) == [newest]


def test_prune_within_limit_is_noop(log_root):
    cfg = LoggerConfig("app.log", retained_backup_count=3, root_directory=log_root)
    backups = _make_backups(cfg, [1, 2])
    assert retention.prune_backups(cfg) == []
    assert retention.list_backups(cfg) == backups
