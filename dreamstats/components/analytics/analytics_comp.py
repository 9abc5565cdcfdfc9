"""
Dream analytics aggregation - pure data processing over journal records.

PURE LEAF-DOMAIN - These functions operate on in-memory data only:
- Take normalized DreamRecord / InterpretationRecord sequences as input
- Perform ONLY aggregation and transformation logic
- Return a DreamAnalytics DTO for presentation layers
- Do NOT import dreamstats.services or dreamstats.interfaces
- Do NOT perform I/O; "now" is passed in, never read from the clock here

ARCHITECTURE:
- Records are fetched by a data source and normalized by components.ingest
- AnalyticsService orchestrates: fetch -> normalize -> compute_dream_analytics
- Every stage reads the same inputs and fills an independent field
"""

from __future__ import annotations

import logging
import re
from dataclasses import asdict
from datetime import datetime
from typing import Any

from dreamstats.components.analytics.content_comp import (
    extract_dream_topics,
    extract_emotional_tones,
    extract_top_symbols,
)
from dreamstats.components.analytics.location_comp import compute_location_stats
from dreamstats.components.analytics.lucid_comp import compute_lucid_progress
from dreamstats.components.analytics.quality_comp import (
    compute_average_quality_score,
    compute_clarity_distribution,
    compute_mood_trend,
)
from dreamstats.components.analytics.summary_comp import (
    compute_average_dream_length,
    compute_streak_days,
    compute_total_dream_time,
    most_productive_day,
    most_productive_hour,
)
from dreamstats.components.analytics.temporal_comp import (
    compute_dreams_by_day_of_week,
    compute_dreams_by_hour,
    compute_dreams_by_month,
)
from dreamstats.helpers.dto.analytics_dto import (
    AnalyticsConfig,
    ComputeDreamAnalyticsParams,
    DreamAnalytics,
    LucidDreamProgress,
)
from dreamstats.helpers.time_helper import local_date, to_local

# Reported when there are no dreams at all
EMPTY_PRODUCTIVE_DAY = "Monday"

# ──────────────────────────────────────────────────────────────────────
# Analytics Computation Functions
# ──────────────────────────────────────────────────────────────────────


def empty_dream_analytics(now: datetime, config: AnalyticsConfig | None = None) -> DreamAnalytics:
    """
    Zero-value aggregate for a user without dreams.

    Fixed-size arrays are still fully populated (24 hours, 7 days, 12 months,
    5 clarity ranges) so callers never see a partial result.
    """
    cfg = config or AnalyticsConfig()
    return DreamAnalytics(
        dreams_by_hour=compute_dreams_by_hour([], cfg.tz),
        dreams_by_day_of_week=compute_dreams_by_day_of_week([], cfg.tz),
        dreams_by_month=compute_dreams_by_month([], now, cfg.tz),
        mood_trend=[],
        clarity_distribution=compute_clarity_distribution([]),
        lucid_dream_progress=LucidDreamProgress(total_lucid=0, total_dreams=0, percentage=0, monthly_trend=[]),
        top_symbols=[],
        emotional_tones=[],
        dream_topics=[],
        location_stats=[],
        average_quality_score=0,
        total_dream_time=0,
        average_dream_length=0,
        streak_days=0,
        most_productive_hour=0,
        most_productive_day=EMPTY_PRODUCTIVE_DAY,
    )


def compute_dream_analytics(params: ComputeDreamAnalyticsParams) -> DreamAnalytics:
    """
    Compute the full analytics aggregate for one user's records.

    Interpretations whose dream_id does not match any of the given dreams are
    ignored. With no dreams the zero-value aggregate is returned.

    Args:
        params: Dreams, interpretations, reference time and engine config

    Returns:
        DreamAnalytics with every field populated
    """
    cfg = params.config
    dreams = list(params.dreams)

    if not dreams:
        logging.info("[analytics] No dreams, returning empty analytics")
        return empty_dream_analytics(params.now, cfg)

    dream_ids = {dream.id for dream in dreams}
    interpretations = [interp for interp in params.interpretations if interp.dream_id in dream_ids]
    orphaned = len(params.interpretations) - len(interpretations)
    if orphaned:
        logging.debug(f"[analytics] Ignoring {orphaned} interpretation(s) without a matching dream")

    logging.info(f"[analytics] Computing analytics for {len(dreams)} dreams, {len(interpretations)} interpretations")

    dreams_by_hour = compute_dreams_by_hour(dreams, cfg.tz)
    dreams_by_day_of_week = compute_dreams_by_day_of_week(dreams, cfg.tz)
    today = to_local(params.now, cfg.tz).date()

    return DreamAnalytics(
        dreams_by_hour=dreams_by_hour,
        dreams_by_day_of_week=dreams_by_day_of_week,
        dreams_by_month=compute_dreams_by_month(dreams, params.now, cfg.tz),
        mood_trend=compute_mood_trend(dreams, cfg.tz, max_days=cfg.mood_trend_days),
        clarity_distribution=compute_clarity_distribution(dreams),
        lucid_dream_progress=compute_lucid_progress(
            dreams,
            cfg.tz,
            max_months=cfg.lucid_trend_months,
            order=cfg.lucid_trend_order,
        ),
        top_symbols=extract_top_symbols(interpretations, limit=cfg.top_n),
        emotional_tones=extract_emotional_tones(interpretations, limit=cfg.top_n),
        dream_topics=extract_dream_topics(interpretations, limit=cfg.top_n),
        location_stats=compute_location_stats(dreams, limit=cfg.top_n),
        average_quality_score=compute_average_quality_score(dreams),
        total_dream_time=compute_total_dream_time(dreams),
        average_dream_length=compute_average_dream_length(dreams),
        streak_days=compute_streak_days((local_date(d.created_at, cfg.tz) for d in dreams), today),
        most_productive_hour=most_productive_hour(dreams_by_hour),
        most_productive_day=most_productive_day(dreams_by_day_of_week, default=EMPTY_PRODUCTIVE_DAY),
    )


# ──────────────────────────────────────────────────────────────────────
# Presentation helpers
# ──────────────────────────────────────────────────────────────────────

_SNAKE_SEGMENT = re.compile(r"_([a-z])")


def _camel(key: str) -> str:
    return _SNAKE_SEGMENT.sub(lambda m: m.group(1).upper(), key)


def _camelize(value: Any) -> Any:
    if isinstance(value, dict):
        # Undefined averages are omitted rather than rendered as null
        return {_camel(k): _camelize(v) for k, v in value.items() if not (k == "avg_mood" and v is None)}
    if isinstance(value, list):
        return [_camelize(item) for item in value]
    return value


def analytics_to_dict(analytics: DreamAnalytics) -> dict[str, Any]:
    """
    Render a DreamAnalytics aggregate as a JSON-ready dict with camelCase keys.

    Examples:
        >>> from datetime import datetime, timezone
        >>> data = analytics_to_dict(empty_dream_analytics(datetime(2026, 10, 18, tzinfo=timezone.utc)))
        >>> data["mostProductiveDay"], len(data["dreamsByHour"])
        ('Monday', 24)
    """
    result: dict[str, Any] = _camelize(asdict(analytics))
    return result
