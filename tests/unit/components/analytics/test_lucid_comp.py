"""
Unit tests for lucid dream progress.
"""

from datetime import datetime, timezone

import pytest

from dreamstats.components.analytics.lucid_comp import compute_lucid_progress
from dreamstats.helpers.dto.dream_dto import DreamRecord


def _dream(n: int, year: int, month: int, lucid: bool = False) -> DreamRecord:
    return DreamRecord(id=f"d{n}", created_at=datetime(year, month, 10, tzinfo=timezone.utc), is_lucid=lucid)


class TestLucidTotals:
    """Tests for overall lucid counts."""

    @pytest.mark.unit
    def test_no_dreams_gives_zero_percentage(self) -> None:
        progress = compute_lucid_progress([], timezone.utc)
        assert progress.total_dreams == 0
        assert progress.total_lucid == 0
        assert progress.percentage == 0
        assert progress.monthly_trend == []

    @pytest.mark.unit
    def test_percentage_is_lucid_share(self) -> None:
        dreams = [_dream(1, 2026, 10, lucid=True), _dream(2, 2026, 10), _dream(3, 2026, 9)]
        progress = compute_lucid_progress(dreams, timezone.utc)
        assert progress.total_lucid == 1
        assert progress.total_dreams == 3
        assert progress.percentage == pytest.approx(100 * 1 / 3)


class TestMonthlyTrend:
    """Tests for monthly trend grouping and ordering."""

    @pytest.mark.unit
    def test_groups_by_month_label(self) -> None:
        dreams = [_dream(1, 2026, 10, lucid=True), _dream(2, 2026, 10), _dream(3, 2025, 10, lucid=True)]
        trend = compute_lucid_progress(dreams, timezone.utc).monthly_trend
        assert [(m.month, m.lucid_count, m.total_count) for m in trend] == [
            ("Oct 2026", 1, 2),
            ("Oct 2025", 1, 1),
        ]
        assert trend[0].percentage == 50

    @pytest.mark.unit
    def test_input_order_keeps_last_six_groups_as_traversed(self) -> None:
        # Newest-first input, the way journal stores return entries
        dreams = [_dream(i, 2026, month) for i, month in enumerate(range(10, 2, -1))]
        trend = compute_lucid_progress(dreams, timezone.utc, order="input").monthly_trend
        assert [m.month for m in trend] == ["Aug 2026", "Jul 2026", "Jun 2026", "May 2026", "Apr 2026", "Mar 2026"]

    @pytest.mark.unit
    def test_calendar_order_keeps_most_recent_six_months(self) -> None:
        dreams = [_dream(i, 2026, month) for i, month in enumerate(range(10, 2, -1))]
        trend = compute_lucid_progress(dreams, timezone.utc, order="calendar").monthly_trend
        assert [m.month for m in trend] == ["May 2026", "Jun 2026", "Jul 2026", "Aug 2026", "Sep 2026", "Oct 2026"]

    @pytest.mark.unit
    def test_calendar_order_is_permutation_independent(self) -> None:
        dreams = [_dream(1, 2026, 3), _dream(2, 2025, 12), _dream(3, 2026, 1, lucid=True)]
        forward = compute_lucid_progress(dreams, timezone.utc, order="calendar")
        backward = compute_lucid_progress(list(reversed(dreams)), timezone.utc, order="calendar")
        assert forward == backward
        assert [m.month for m in forward.monthly_trend] == ["Dec 2025", "Jan 2026", "Mar 2026"]

    @pytest.mark.unit
    def test_custom_month_window(self) -> None:
        dreams = [_dream(i, 2026, month) for i, month in enumerate(range(1, 5))]
        trend = compute_lucid_progress(dreams, timezone.utc, max_months=2).monthly_trend
        assert [m.month for m in trend] == ["Mar 2026", "Apr 2026"]
