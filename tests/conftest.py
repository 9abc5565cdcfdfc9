"""
Pytest fixtures and configuration for the test suite.

All analytics tests pin "now" and the local timezone so calendar bucketing
(hour, weekday, date, 12-month window, streaks) is deterministic.
"""

import sys
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add project root to path so tests can import the dreamstats package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from dreamstats.helpers.dto.analytics_dto import AnalyticsConfig  # noqa: E402
from dreamstats.helpers.dto.dream_dto import DreamRecord, EmotionalTone, InterpretationRecord  # noqa: E402

# Sunday 2026-10-18, 12:00 UTC
NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Reference "current" time shared by analytics tests."""
    return NOW


@pytest.fixture
def utc_config() -> AnalyticsConfig:
    """Engine config bucketing in UTC."""
    return AnalyticsConfig(tz=timezone.utc)


@pytest.fixture
def make_dream() -> Callable[..., DreamRecord]:
    """Factory for DreamRecord with sequential ids.

    ``days_ago``/``hour`` place the record relative to NOW (UTC); pass
    ``created_at`` to set the timestamp explicitly.
    """
    counter = {"n": 0}

    def _make(days_ago: int = 0, hour: int = 8, created_at: datetime | None = None, **fields) -> DreamRecord:
        counter["n"] += 1
        if created_at is None:
            day = (NOW - timedelta(days=days_ago)).date()
            created_at = datetime(day.year, day.month, day.day, hour, 0, tzinfo=timezone.utc)
        return DreamRecord(id=fields.pop("id", f"d{counter['n']}"), created_at=created_at, **fields)

    return _make


@pytest.fixture
def make_interpretation() -> Callable[..., InterpretationRecord]:
    """Factory for InterpretationRecord; ``tone`` is (primary, secondary, intensity)."""

    def _make(
        dream_id: str = "d1",
        symbols: list | None = None,
        tone: tuple[str | None, str | None, float | None] | None = None,
        topic: str | None = None,
    ) -> InterpretationRecord:
        return InterpretationRecord(
            dream_id=dream_id,
            symbols=tuple(symbols) if symbols is not None else None,
            emotional_tone=EmotionalTone(*tone) if tone else None,
            dream_topic=topic,
        )

    return _make


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast, isolated test of a single module")
