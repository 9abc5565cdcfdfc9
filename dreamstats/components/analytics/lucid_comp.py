"""
Lucid dream progress - overall lucid share and a short per-month trend.

The per-month trend has two orderings (see AnalyticsConfig.lucid_trend_order):

- "input": month groups appear in the order their first record is seen in the
  caller's sequence, and the last N groups are kept. With newest-first input
  (how journal stores usually return entries) that is the N *oldest* months.
- "calendar": groups are sorted chronologically before slicing, so the trend
  is the N most recent months that contain records, oldest -> newest.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import tzinfo

from dreamstats.helpers.dto.analytics_dto import LucidDreamProgress, LucidMonth, LucidTrendOrder
from dreamstats.helpers.dto.dream_dto import DreamRecord
from dreamstats.helpers.time_helper import month_label, to_local


@dataclass
class _MonthTally:
    sort_key: tuple[int, int]
    lucid: int = 0
    total: int = 0


def _percentage(part: int, whole: int) -> float:
    return (part / whole) * 100 if whole > 0 else 0


def compute_lucid_progress(
    dreams: Sequence[DreamRecord],
    tz: tzinfo | None,
    max_months: int = 6,
    order: LucidTrendOrder = "input",
) -> LucidDreamProgress:
    """
    Compute lucid totals and the monthly trend.

    Args:
        dreams: Normalized dream records, in caller order
        tz: Local timezone used to derive the month
        max_months: Number of month groups kept in the trend
        order: "input" or "calendar" group ordering before slicing

    Returns:
        LucidDreamProgress
    """
    total_lucid = sum(1 for dream in dreams if dream.is_lucid)

    monthly: dict[str, _MonthTally] = {}
    for dream in dreams:
        local = to_local(dream.created_at, tz)
        tally = monthly.setdefault(month_label(local), _MonthTally(sort_key=(local.year, local.month)))
        tally.total += 1
        if dream.is_lucid:
            tally.lucid += 1

    groups = list(monthly.items())
    if order == "calendar":
        groups.sort(key=lambda item: item[1].sort_key)

    monthly_trend = [
        LucidMonth(
            month=label,
            lucid_count=tally.lucid,
            total_count=tally.total,
            percentage=_percentage(tally.lucid, tally.total),
        )
        for label, tally in groups
    ]

    return LucidDreamProgress(
        total_lucid=total_lucid,
        total_dreams=len(dreams),
        percentage=_percentage(total_lucid, len(dreams)),
        monthly_trend=monthly_trend[-max_months:] if max_months > 0 else [],
    )
