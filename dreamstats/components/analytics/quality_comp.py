"""
Quality metrics - mood trend, clarity distribution, combined quality score.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import date, tzinfo

from dreamstats.helpers.dto.analytics_dto import ClarityBucket, MoodTrendPoint
from dreamstats.helpers.dto.dream_dto import DreamRecord
from dreamstats.helpers.time_helper import local_date

# (label, min, max) inclusive on both ends
CLARITY_RANGES: tuple[tuple[str, int, int], ...] = (
    ("0-20", 0, 20),
    ("21-40", 21, 40),
    ("41-60", 41, 60),
    ("61-80", 61, 80),
    ("81-100", 81, 100),
)

DEFAULT_MOOD = 3
DEFAULT_CLARITY = 50
MAX_MOOD = 5


def compute_mood_trend(dreams: Sequence[DreamRecord], tz: tzinfo | None, max_days: int = 30) -> list[MoodTrendPoint]:
    """
    Average mood per local calendar date.

    Only records with a mood contribute. Dates are sorted ascending and the
    most recent ``max_days`` distinct dates are kept.

    Args:
        dreams: Normalized dream records
        tz: Local timezone used to derive the calendar date
        max_days: Number of trailing dates to keep

    Returns:
        MoodTrendPoint list, oldest -> newest
    """
    date_map: dict[date, list[int]] = {}
    for dream in dreams:
        if dream.mood is None:
            continue
        date_map.setdefault(local_date(dream.created_at, tz), []).append(dream.mood)

    trend = [
        MoodTrendPoint(date=day.isoformat(), avg_mood=sum(moods) / len(moods), count=len(moods))
        for day, moods in sorted(date_map.items())
    ]
    return trend[-max_days:] if max_days > 0 else []


def compute_clarity_distribution(dreams: Sequence[DreamRecord]) -> list[ClarityBucket]:
    """
    Count dreams per clarity range.

    A record without clarity is binned as 50 (range "41-60").

    Returns:
        5 ClarityBucket entries; percentages are 0 when there are no records
    """
    counts = dict.fromkeys((label for label, _, _ in CLARITY_RANGES), 0)
    for dream in dreams:
        clarity = dream.clarity if dream.clarity is not None else DEFAULT_CLARITY
        for label, low, high in CLARITY_RANGES:
            if low <= clarity <= high:
                counts[label] += 1
                break

    total = sum(counts.values())
    return [
        ClarityBucket(range=label, count=count, percentage=(count / total) * 100 if total > 0 else 0)
        for label, count in counts.items()
    ]


def compute_record_quality_score(dream: DreamRecord) -> float | None:
    """
    Quality score (0-100) for a single dream.

    Mood is normalized to 0-100 (``mood / 5 * 100``), clarity is already on
    that scale; the score is their mean. Missing halves default to mood 3 and
    clarity 50. Returns None when the record has neither value.
    """
    if dream.mood is None and dream.clarity is None:
        return None
    mood = dream.mood if dream.mood is not None else DEFAULT_MOOD
    clarity = dream.clarity if dream.clarity is not None else DEFAULT_CLARITY
    return (mood / MAX_MOOD * 100 + clarity) / 2


def compute_average_quality_score(dreams: Sequence[DreamRecord]) -> int:
    """
    Mean per-record quality score, rounded to the nearest integer (halves round up).

    Returns:
        0-100, or 0 when no record has mood or clarity
    """
    scores = [score for score in map(compute_record_quality_score, dreams) if score is not None]
    if not scores:
        return 0
    average = sum(scores) / len(scores)
    logging.debug(f"[analytics] Quality score over {len(scores)} of {len(dreams)} dreams: {average:.2f}")
    return math.floor(average + 0.5)
