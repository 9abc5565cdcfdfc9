"""
Location stats - dreams per recorded location.
"""

from __future__ import annotations

from collections.abc import Sequence

from dreamstats.components.analytics.temporal_comp import MoodAccumulator
from dreamstats.helpers.dto.analytics_dto import LocationStat
from dreamstats.helpers.dto.dream_dto import DreamRecord


def location_key(dream: DreamRecord) -> str | None:
    """
    Grouping key for a dream's location.

    "City, Country" when a city is known, the country alone otherwise, and
    None (excluded, no "Unknown" bucket) when neither is set.
    """
    city, country = dream.location_city, dream.location_country
    if city:
        return f"{city}, {country}" if country else city
    return country or None


def compute_location_stats(dreams: Sequence[DreamRecord], limit: int = 10) -> list[LocationStat]:
    """
    Count and average mood per location.

    Sorted by count descending; equal counts are ordered by location name so
    the ranking does not depend on record order.
    """
    location_map: dict[str, MoodAccumulator] = {}
    for dream in dreams:
        key = location_key(dream)
        if key is None:
            continue
        location_map.setdefault(key, MoodAccumulator()).add(dream.mood)

    ranked = sorted(location_map.items(), key=lambda item: (-item[1].count, item[0]))[:limit]
    return [LocationStat(location=location, count=data.count, avg_mood=data.avg_mood) for location, data in ranked]
