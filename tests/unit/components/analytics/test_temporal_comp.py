"""
Unit tests for temporal binning (hour, weekday, month buckets).
"""

from datetime import datetime, timedelta, timezone

import pytest

from dreamstats.components.analytics.temporal_comp import (
    compute_dreams_by_day_of_week,
    compute_dreams_by_hour,
    compute_dreams_by_month,
)
from dreamstats.helpers.dto.dream_dto import DreamRecord


class TestDreamsByHour:
    """Tests for compute_dreams_by_hour."""

    @pytest.mark.unit
    def test_empty_input_yields_24_zero_buckets(self) -> None:
        buckets = compute_dreams_by_hour([], timezone.utc)
        assert len(buckets) == 24
        assert [b.hour for b in buckets] == list(range(24))
        assert all(b.count == 0 and b.avg_mood is None for b in buckets)

    @pytest.mark.unit
    def test_avg_mood_ignores_records_without_mood(self, make_dream) -> None:
        dreams = [make_dream(hour=7, mood=4), make_dream(hour=7, mood=2), make_dream(hour=7)]
        bucket = compute_dreams_by_hour(dreams, timezone.utc)[7]
        assert bucket.count == 3
        assert bucket.avg_mood == 3

    @pytest.mark.unit
    def test_avg_mood_absent_when_no_moods(self, make_dream) -> None:
        bucket = compute_dreams_by_hour([make_dream(hour=3)], timezone.utc)[3]
        assert bucket.count == 1
        assert bucket.avg_mood is None

    @pytest.mark.unit
    def test_hour_uses_local_timezone(self) -> None:
        dream = DreamRecord(id="x", created_at=datetime(2026, 10, 18, 23, 30, tzinfo=timezone.utc))
        plus_two = timezone(timedelta(hours=2))
        buckets = compute_dreams_by_hour([dream], plus_two)
        assert buckets[1].count == 1
        assert buckets[23].count == 0


class TestDreamsByDayOfWeek:
    """Tests for compute_dreams_by_day_of_week."""

    @pytest.mark.unit
    def test_sunday_first_names(self) -> None:
        buckets = compute_dreams_by_day_of_week([], timezone.utc)
        assert [b.day for b in buckets] == [
            "Sunday",
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
        ]

    @pytest.mark.unit
    def test_bins_by_weekday(self, make_dream) -> None:
        # NOW is a Sunday; one day earlier is Saturday
        dreams = [make_dream(days_ago=0, mood=5), make_dream(days_ago=1), make_dream(days_ago=7, mood=3)]
        buckets = compute_dreams_by_day_of_week(dreams, timezone.utc)
        assert buckets[0].count == 2
        assert buckets[0].avg_mood == 4
        assert buckets[6].count == 1
        assert buckets[6].avg_mood is None
        assert sum(b.count for b in buckets) == 3


class TestDreamsByMonth:
    """Tests for compute_dreams_by_month."""

    @pytest.mark.unit
    def test_window_is_twelve_months_ending_now(self, now) -> None:
        buckets = compute_dreams_by_month([], now, timezone.utc)
        assert len(buckets) == 12
        assert (buckets[0].month, buckets[0].year) == ("Nov", 2025)
        assert (buckets[-1].month, buckets[-1].year) == ("Oct", 2026)
        assert all(b.count == 0 for b in buckets)

    @pytest.mark.unit
    def test_counts_and_zero_fill(self, now) -> None:
        dreams = [
            DreamRecord(id="a", created_at=datetime(2026, 10, 1, tzinfo=timezone.utc)),
            DreamRecord(id="b", created_at=datetime(2026, 10, 17, tzinfo=timezone.utc)),
            DreamRecord(id="c", created_at=datetime(2026, 1, 5, tzinfo=timezone.utc)),
            DreamRecord(id="d", created_at=datetime(2025, 10, 31, tzinfo=timezone.utc)),  # outside window
        ]
        buckets = compute_dreams_by_month(dreams, now, timezone.utc)
        by_label = {(b.month, b.year): b.count for b in buckets}
        assert by_label[("Oct", 2026)] == 2
        assert by_label[("Jan", 2026)] == 1
        assert by_label[("Dec", 2025)] == 0
        assert sum(by_label.values()) == 3

    @pytest.mark.unit
    def test_window_crosses_year_boundary_in_january(self) -> None:
        buckets = compute_dreams_by_month([], datetime(2027, 1, 10, tzinfo=timezone.utc), timezone.utc)
        assert (buckets[0].month, buckets[0].year) == ("Feb", 2026)
        assert (buckets[-2].month, buckets[-2].year) == ("Dec", 2026)
        assert (buckets[-1].month, buckets[-1].year) == ("Jan", 2027)
