"""
Pytest configuration and shared autouse fixtures.
This file ensures the project root is in sys.path for imports.
"""

import itertools
import sys
import time as _time
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add project root to sys.path so we can import domain, repositories, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def distinct_id_clock(monkeypatch):
    """
    Give the id generator a clock that advances 10ms per call.

    Generated ids only differ by timestamp and a 0..999 random draw, so ids
    created in a tight loop can collide; tests need them distinct.
    """
    ticks = itertools.count(int(_time.time() * 1000), 10)
    fake_time = SimpleNamespace(time=lambda: next(ticks) / 1000)
    monkeypatch.setattr("core.utils.ids.time", fake_time)
    yield
