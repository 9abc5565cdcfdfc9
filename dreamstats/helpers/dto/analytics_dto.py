"""
Analytics domain DTOs.

Data transfer objects for analytics results and the parameters that drive them.
These form cross-layer contracts between components, services, and interfaces.

Rules:
- Import only stdlib, typing and other DTO modules
- Pure data structures only (no I/O, no DB access, no business logic)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import Literal

from dreamstats.helpers.dto.dream_dto import DreamRecord, InterpretationRecord

LucidTrendOrder = Literal["input", "calendar"]

# ──────────────────────────────────────────────────────────────────────
# Bucket DTOs
# ──────────────────────────────────────────────────────────────────────


@dataclass
class HourBucket:
    """Dreams recorded during one local hour of the day."""

    hour: int
    count: int
    avg_mood: float | None = None  # None when no record in the bucket has a mood


@dataclass
class DayOfWeekBucket:
    """Dreams recorded on one weekday (Sunday-first)."""

    day: str
    count: int
    avg_mood: float | None = None


@dataclass
class MonthBucket:
    """Dreams recorded in one calendar month."""

    month: str  # "Jan" .. "Dec"
    year: int
    count: int


@dataclass
class MoodTrendPoint:
    """Average mood on one local calendar date."""

    date: str  # YYYY-MM-DD
    avg_mood: float
    count: int


@dataclass
class ClarityBucket:
    """Share of dreams falling into one clarity range."""

    range: str  # e.g. "41-60"
    count: int
    percentage: float


@dataclass
class LucidMonth:
    """Lucid share for one "Mon YYYY" group."""

    month: str
    lucid_count: int
    total_count: int
    percentage: float


@dataclass
class LucidDreamProgress:
    """Overall and per-month lucid dream share."""

    total_lucid: int
    total_dreams: int
    percentage: float
    monthly_trend: list[LucidMonth] = field(default_factory=list)


@dataclass
class SymbolCount:
    symbol: str
    count: int


@dataclass
class EmotionalToneStat:
    tone: str
    count: int
    avg_intensity: float


@dataclass
class TopicCount:
    topic: str
    count: int


@dataclass
class LocationStat:
    location: str  # "City, Country" or "Country"
    count: int
    avg_mood: float | None = None


# ──────────────────────────────────────────────────────────────────────
# Result DTO
# ──────────────────────────────────────────────────────────────────────


@dataclass
class DreamAnalytics:
    """
    Complete analytics aggregate for one user.

    Always field-complete: fixed-size arrays are zero-filled and dynamic lists
    are empty rather than missing, so presentation layers can render it as-is.
    """

    # Time-based patterns
    dreams_by_hour: list[HourBucket]  # 24 entries
    dreams_by_day_of_week: list[DayOfWeekBucket]  # 7 entries, Sunday-first
    dreams_by_month: list[MonthBucket]  # 12 entries, oldest -> newest

    # Quality metrics
    mood_trend: list[MoodTrendPoint]
    clarity_distribution: list[ClarityBucket]  # 5 entries
    lucid_dream_progress: LucidDreamProgress

    # Content analysis
    top_symbols: list[SymbolCount]
    emotional_tones: list[EmotionalToneStat]
    dream_topics: list[TopicCount]

    # Location insights
    location_stats: list[LocationStat]

    # Overall stats
    average_quality_score: int  # combined mood & clarity, 0-100
    total_dream_time: float  # minutes
    average_dream_length: float  # seconds
    streak_days: int
    most_productive_hour: int
    most_productive_day: str


# ──────────────────────────────────────────────────────────────────────
# Parameter DTOs (for simplifying function signatures)
# ──────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class AnalyticsConfig:
    """
    Tunables for the aggregation engine.

    Attributes:
        tz: Local timezone for hour/day/date bucketing (None = host local)
        top_n: Length cap for symbol, tone, topic and location rankings
        mood_trend_days: Number of most recent distinct dates kept in the mood trend
        lucid_trend_months: Number of month groups kept in the lucid trend
        lucid_trend_order: "input" keeps groups in first-seen record order,
            "calendar" sorts them chronologically before slicing
    """

    tz: tzinfo | None = None
    top_n: int = 10
    mood_trend_days: int = 30
    lucid_trend_months: int = 6
    lucid_trend_order: LucidTrendOrder = "input"


@dataclass
class ComputeDreamAnalyticsParams:
    """Parameters for compute_dream_analytics."""

    dreams: Sequence[DreamRecord]
    interpretations: Sequence[InterpretationRecord]
    now: datetime  # "today" for streaks and the 12-month window
    config: AnalyticsConfig = field(default_factory=AnalyticsConfig)
