"""
Temporal binning - dreams by local hour, weekday and calendar month.

Every function accumulates into a keyed map first, then materializes a
fixed-size list, so empty buckets are always present and zero-filled.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, tzinfo

from dreamstats.helpers.dto.analytics_dto import DayOfWeekBucket, HourBucket, MonthBucket
from dreamstats.helpers.dto.dream_dto import DreamRecord
from dreamstats.helpers.time_helper import DAYS_OF_WEEK, MONTH_LABELS, shift_month, sunday_first_weekday, to_local

HOURS_PER_DAY = 24
MONTH_WINDOW = 12


@dataclass
class MoodAccumulator:
    """Running count plus the sum/count of defined moods."""

    count: int = 0
    total_mood: int = 0
    mood_count: int = 0

    def add(self, mood: int | None) -> None:
        self.count += 1
        if mood is not None:
            self.total_mood += mood
            self.mood_count += 1

    @property
    def avg_mood(self) -> float | None:
        return self.total_mood / self.mood_count if self.mood_count > 0 else None


def compute_dreams_by_hour(dreams: Sequence[DreamRecord], tz: tzinfo | None) -> list[HourBucket]:
    """
    Bin dreams by local hour of day.

    Returns:
        24 HourBucket entries, hour 0..23
    """
    hour_map: dict[int, MoodAccumulator] = {}
    for dream in dreams:
        hour = to_local(dream.created_at, tz).hour
        hour_map.setdefault(hour, MoodAccumulator()).add(dream.mood)

    buckets = []
    for hour in range(HOURS_PER_DAY):
        data = hour_map.get(hour, MoodAccumulator())
        buckets.append(HourBucket(hour=hour, count=data.count, avg_mood=data.avg_mood))
    return buckets


def compute_dreams_by_day_of_week(dreams: Sequence[DreamRecord], tz: tzinfo | None) -> list[DayOfWeekBucket]:
    """
    Bin dreams by local weekday.

    Returns:
        7 DayOfWeekBucket entries, Sunday first
    """
    day_map: dict[int, MoodAccumulator] = {}
    for dream in dreams:
        day = sunday_first_weekday(to_local(dream.created_at, tz))
        day_map.setdefault(day, MoodAccumulator()).add(dream.mood)

    buckets = []
    for index, day_name in enumerate(DAYS_OF_WEEK):
        data = day_map.get(index, MoodAccumulator())
        buckets.append(DayOfWeekBucket(day=day_name, count=data.count, avg_mood=data.avg_mood))
    return buckets


def compute_dreams_by_month(dreams: Sequence[DreamRecord], now: datetime, tz: tzinfo | None) -> list[MonthBucket]:
    """
    Count dreams in each of the 12 calendar months ending at the current month.

    Records outside the window are ignored.

    Args:
        dreams: Normalized dream records
        now: Reference "current" time; its local month is the newest bucket
        tz: Local timezone

    Returns:
        12 MonthBucket entries, oldest -> newest
    """
    month_map: dict[tuple[int, int], int] = {}
    for dream in dreams:
        local = to_local(dream.created_at, tz)
        key = (local.year, local.month)
        month_map[key] = month_map.get(key, 0) + 1

    local_now = to_local(now, tz)
    buckets = []
    for offset in range(MONTH_WINDOW - 1, -1, -1):
        year, month = shift_month(local_now.year, local_now.month, -offset)
        buckets.append(
            MonthBucket(
                month=MONTH_LABELS[month - 1],
                year=year,
                count=month_map.get((year, month), 0),
            )
        )

    first, last = buckets[0], buckets[-1]
    logging.debug(f"[analytics] Month window {first.month} {first.year} .. {last.month} {last.year}")
    return buckets
