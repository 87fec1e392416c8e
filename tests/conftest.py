from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: a temporary log root, a frozen clock and an error collector.
"""

import os
import sys
from datetime import datetime
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from qqlogs.core.reporting import ErrorCollector  # noqa: E402
from qqlogs.logger import reset_shared_loggers  # noqa: E402

FIXED_MOMENT = datetime(2024, 3, 5, 14, 7, 9, 123456)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def log_root(tmp_path) -> str:
    """
    Return a not-yet-existing log directory inside tmp_path.

    The trailing separator matches the normalized form of root_directory.
    """
    return str(tmp_path / "logs") + os.sep


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns FIXED_MOMENT."""
    return lambda: FIXED_MOMENT


@pytest.fixture
def collector() -> ErrorCollector:
    """Error sink that records reports for assertions."""
    return ErrorCollector()


@pytest.fixture(autouse=True)
def _isolate_shared_loggers():
    """Keep the shared logger registry empty between tests."""
    reset_shared_loggers()
    yield
    reset_shared_loggers()
