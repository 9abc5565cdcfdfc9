"""
Scalar summaries - dream time, peak hour/day, and the journaling streak.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from dreamstats.helpers.dto.analytics_dto import DayOfWeekBucket, HourBucket
from dreamstats.helpers.dto.dream_dto import DreamRecord


def _total_duration(dreams: Sequence[DreamRecord]) -> float:
    return sum(dream.duration or 0 for dream in dreams)


def compute_total_dream_time(dreams: Sequence[DreamRecord]) -> float:
    """Total recorded dream time in minutes; missing durations count as 0."""
    return _total_duration(dreams) / 60


def compute_average_dream_length(dreams: Sequence[DreamRecord]) -> float:
    """Mean recording length in seconds over all dreams (0 with no dreams)."""
    return _total_duration(dreams) / len(dreams) if dreams else 0


def most_productive_hour(buckets: Sequence[HourBucket]) -> int:
    """Hour with the most dreams; the earliest hour wins ties."""
    if not buckets:
        return 0
    best = buckets[0]
    for bucket in buckets[1:]:
        if bucket.count > best.count:
            best = bucket
    return best.hour


def most_productive_day(buckets: Sequence[DayOfWeekBucket], default: str = "Monday") -> str:
    """Weekday with the most dreams; the earliest weekday (Sunday-first) wins ties."""
    if not buckets:
        return default
    best = buckets[0]
    for bucket in buckets[1:]:
        if bucket.count > best.count:
            best = bucket
    return best.day


def compute_streak_days(dream_dates: Iterable[date], today: date) -> int:
    """
    Number of consecutive days with at least one dream.

    The streak ends at the most recent dream date, which must be today or
    yesterday; an older last entry means the streak is broken (0).

    Args:
        dream_dates: Local calendar dates of all dreams (duplicates allowed)
        today: Local calendar date of "now"

    Returns:
        Streak length in days

    Examples:
        >>> d = date(2026, 10, 18)
        >>> compute_streak_days([d, d - timedelta(days=1)], today=d)
        2
        >>> compute_streak_days([d - timedelta(days=2)], today=d)
        0
    """
    dates = set(dream_dates)
    if not dates:
        return 0

    last_date = max(dates)
    if (today - last_date).days > 1:
        return 0

    streak = 0
    current = last_date
    while current in dates:
        streak += 1
        current -= timedelta(days=1)
    return streak
