"""
Analytics package.
"""

from .analytics_comp import (
    EMPTY_PRODUCTIVE_DAY,
    analytics_to_dict,
    compute_dream_analytics,
    empty_dream_analytics,
)
from .content_comp import extract_dream_topics, extract_emotional_tones, extract_top_symbols
from .location_comp import compute_location_stats, location_key
from .lucid_comp import compute_lucid_progress
from .quality_comp import (
    CLARITY_RANGES,
    compute_average_quality_score,
    compute_clarity_distribution,
    compute_mood_trend,
    compute_record_quality_score,
)
from .summary_comp import (
    compute_average_dream_length,
    compute_streak_days,
    compute_total_dream_time,
    most_productive_day,
    most_productive_hour,
)
from .temporal_comp import compute_dreams_by_day_of_week, compute_dreams_by_hour, compute_dreams_by_month

__all__ = [
    "CLARITY_RANGES",
    "EMPTY_PRODUCTIVE_DAY",
    "analytics_to_dict",
    "compute_average_dream_length",
    "compute_average_quality_score",
    "compute_clarity_distribution",
    "compute_dream_analytics",
    "compute_dreams_by_day_of_week",
    "compute_dreams_by_hour",
    "compute_dreams_by_month",
    "compute_location_stats",
    "compute_lucid_progress",
    "compute_mood_trend",
    "compute_record_quality_score",
    "compute_streak_days",
    "compute_total_dream_time",
    "empty_dream_analytics",
    "extract_dream_topics",
    "extract_emotional_tones",
    "extract_top_symbols",
    "location_key",
    "most_productive_day",
    "most_productive_hour",
]
