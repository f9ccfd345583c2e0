"""Pytest configuration and fixtures for Caltime tests."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

# Add the parent directory to sys.path so caltime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def utc(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> datetime:
    """Build an aware UTC datetime with millisecond precision."""
    return datetime(
        year, month, day, hour, minute, second, millisecond * 1000,
        tzinfo=timezone.utc,
    )


@pytest.fixture
def at() -> Callable[..., datetime]:
    """Factory fixture for aware UTC datetimes."""
    return utc
