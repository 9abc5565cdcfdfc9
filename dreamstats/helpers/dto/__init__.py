"""
DTO package.

Cross-layer data contracts. Modules here import nothing outside stdlib and
each other.
"""

from .analytics_dto import (
    AnalyticsConfig,
    ClarityBucket,
    ComputeDreamAnalyticsParams,
    DayOfWeekBucket,
    DreamAnalytics,
    EmotionalToneStat,
    HourBucket,
    LocationStat,
    LucidDreamProgress,
    LucidMonth,
    LucidTrendOrder,
    MonthBucket,
    MoodTrendPoint,
    SymbolCount,
    TopicCount,
)
from .dream_dto import DreamRecord, EmotionalTone, InterpretationRecord

__all__ = [
    "AnalyticsConfig",
    "ClarityBucket",
    "ComputeDreamAnalyticsParams",
    "DayOfWeekBucket",
    "DreamAnalytics",
    "DreamRecord",
    "EmotionalTone",
    "EmotionalToneStat",
    "HourBucket",
    "InterpretationRecord",
    "LocationStat",
    "LucidDreamProgress",
    "LucidMonth",
    "LucidTrendOrder",
    "MonthBucket",
    "MoodTrendPoint",
    "SymbolCount",
    "TopicCount",
]
