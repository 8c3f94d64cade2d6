"""Pytest configuration and fixtures for Chronon tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest

# Add the parent directory to sys.path so chronon can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def utc_tz(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run the test with the process local time zone set to UTC."""
    import time

    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
