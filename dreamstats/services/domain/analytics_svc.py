"""
Analytics service - orchestrates between the record source and the analytics layer.

ARCHITECTURE:
- Fetches raw rows from a DreamDataSource supplied by the host application
- Normalizes them via dreamstats.components.ingest
- Passes them to dreamstats.components.analytics for computation
- Returns the DreamAnalytics DTO to the interface layer

The engine itself is pure; the only state kept here is a bounded memo of
results keyed by (user_id, input hash, local date).
"""

from __future__ import annotations

import copy
import hashlib
import logging
import threading
from collections import OrderedDict
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import Any, Protocol

from dreamstats.components.analytics.analytics_comp import compute_dream_analytics, empty_dream_analytics
from dreamstats.components.ingest.record_parsing_comp import parse_dream_records, parse_interpretation_records
from dreamstats.helpers.dto.analytics_dto import AnalyticsConfig, ComputeDreamAnalyticsParams, DreamAnalytics
from dreamstats.helpers.dto.dream_dto import DreamRecord, InterpretationRecord
from dreamstats.helpers.time_helper import local_now, to_local

logger = logging.getLogger(__name__)

CacheKey = tuple[str | None, str, str]


class DreamDataSource(Protocol):
    """Record source implemented by the host application (database, API, file export)."""

    def fetch_dream_records(self, user_id: str | None) -> Sequence[Mapping[str, Any]]:
        """All dream rows for a user (None: every row the source holds); ordering is not guaranteed."""
        ...

    def fetch_interpretation_records(self, dream_ids: Sequence[str]) -> Sequence[Mapping[str, Any]]:
        """Interpretation rows attached to the given dreams."""
        ...


def hash_records(dreams: Sequence[DreamRecord], interpretations: Sequence[InterpretationRecord]) -> str:
    """
    Stable digest of normalized inputs.

    Order-sensitive on purpose: the "input" lucid trend ordering depends on
    record order, so two permutations are different inputs.
    """
    digest = hashlib.sha256()
    for dream in dreams:
        digest.update(repr(dream).encode("utf-8"))
    digest.update(b"\x00")
    for interp in interpretations:
        digest.update(repr(interp).encode("utf-8"))
    return digest.hexdigest()


class AnalyticsService:
    """
    Service for dream journal analytics.

    Orchestrates data flow: data source → ingest (normalize) → analytics (compute).
    Safe to share between threads; the result cache is lock-protected.
    """

    def __init__(
        self,
        source: DreamDataSource,
        cfg: AnalyticsConfig,
        cache_size: int = 64,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Initialize analytics service.

        Args:
            source: Provider of raw dream and interpretation rows
            cfg: Engine configuration
            cache_size: Max memoized results (0 disables caching)
            clock: Returns "now"; defaults to the wall clock in cfg.tz
        """
        self._source = source
        self.cfg = cfg
        self._cache_size = max(cache_size, 0)
        self._clock = clock or (lambda: local_now(cfg.tz))
        self._cache: OrderedDict[CacheKey, DreamAnalytics] = OrderedDict()
        self._lock = threading.Lock()

    def get_dream_analytics(self, user_id: str | None) -> DreamAnalytics:
        """
        Fetch a user's records and compute their analytics.

        A failure fetching interpretations is logged and the analytics are
        computed without content rankings; a failure fetching dreams propagates.

        Args:
            user_id: Journal owner, or None for every record in the source

        Returns:
            DreamAnalytics DTO
        """
        try:
            dream_rows = self._source.fetch_dream_records(user_id)
        except Exception:
            logger.error(f"Error fetching dream records for user {user_id}")
            raise

        dreams = parse_dream_records(dream_rows)
        if not dreams:
            logger.info(f"No dreams for user {user_id}, returning empty analytics")
            return empty_dream_analytics(self._clock(), self.cfg)

        try:
            interpretation_rows = self._source.fetch_interpretation_records([dream.id for dream in dreams])
        except Exception as e:
            logger.warning(f"Failed to fetch interpretations for user {user_id}: {e}")
            interpretation_rows = []

        return self.analyze(user_id, dreams, parse_interpretation_records(interpretation_rows))

    def analyze(
        self,
        user_id: str | None,
        dreams: Sequence[DreamRecord],
        interpretations: Sequence[InterpretationRecord],
    ) -> DreamAnalytics:
        """
        Compute analytics for already-normalized records, memoized.

        Args:
            user_id: Cache namespace for the result
            dreams: Normalized dream records
            interpretations: Normalized interpretation records

        Returns:
            DreamAnalytics DTO; each call gets its own copy, so callers may mutate it
        """
        now = self._clock()
        key: CacheKey = (user_id, hash_records(dreams, interpretations), to_local(now, self.cfg.tz).date().isoformat())

        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._cache.move_to_end(key)
                logger.debug(f"Analytics cache hit for user {user_id}")
                return copy.deepcopy(cached)

        result = compute_dream_analytics(
            ComputeDreamAnalyticsParams(
                dreams=dreams,
                interpretations=interpretations,
                now=now,
                config=self.cfg,
            )
        )

        if self._cache_size:
            with self._lock:
                self._cache[key] = copy.deepcopy(result)
                self._cache.move_to_end(key)
                while len(self._cache) > self._cache_size:
                    self._cache.popitem(last=False)

        return result

    def clear_cache(self) -> None:
        """Drop all memoized results."""
        with self._lock:
            self._cache.clear()
