"""
Content extraction - rankings over already-tagged interpretation fields.

No text parsing happens here: symbols, tones and topics arrive pre-extracted
from the upstream interpreter. Rankings are count-descending; ties keep
first-seen order (Counter preserves insertion order and most_common is stable).
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from dreamstats.helpers.dto.analytics_dto import EmotionalToneStat, SymbolCount, TopicCount
from dreamstats.helpers.dto.dream_dto import InterpretationRecord

DEFAULT_INTENSITY = 5.0
SECONDARY_TONE_WEIGHT = 0.5


@dataclass
class _ToneTally:
    count: int = 0
    total_intensity: float = 0.0


def extract_top_symbols(interpretations: Sequence[InterpretationRecord], limit: int = 10) -> list[SymbolCount]:
    """
    Most frequent symbols across all interpretations.

    Non-string and blank entries are skipped; matching is exact (no case
    folding or trimming).
    """
    symbol_counter: Counter[str] = Counter()
    for interp in interpretations:
        for symbol in interp.symbols or ():
            if isinstance(symbol, str) and symbol.strip():
                symbol_counter[symbol] += 1

    return [SymbolCount(symbol=symbol, count=count) for symbol, count in symbol_counter.most_common(limit)]


def extract_emotional_tones(
    interpretations: Sequence[InterpretationRecord], limit: int = 10
) -> list[EmotionalToneStat]:
    """
    Rank emotional tones by how often they were tagged.

    The primary tone adds one to its count and the full intensity (default 5)
    to its total. A secondary tone also adds one to its count but only half
    the intensity, so secondary tones rank equally yet read as milder.
    An explicit intensity of 0 is kept as 0; only a missing one defaults to 5.
    """
    tone_map: dict[str, _ToneTally] = {}
    for interp in interpretations:
        tone = interp.emotional_tone
        if tone is None:
            continue
        intensity = tone.intensity if tone.intensity is not None else DEFAULT_INTENSITY

        if tone.primary:
            tally = tone_map.setdefault(tone.primary, _ToneTally())
            tally.count += 1
            tally.total_intensity += intensity

        if tone.secondary:
            tally = tone_map.setdefault(tone.secondary, _ToneTally())
            tally.count += 1
            tally.total_intensity += intensity * SECONDARY_TONE_WEIGHT

    ranked = sorted(tone_map.items(), key=lambda item: item[1].count, reverse=True)[:limit]
    return [
        EmotionalToneStat(tone=tone, count=tally.count, avg_intensity=tally.total_intensity / tally.count)
        for tone, tally in ranked
    ]


def extract_dream_topics(interpretations: Sequence[InterpretationRecord], limit: int = 10) -> list[TopicCount]:
    """Most frequent non-empty dream topics."""
    topic_counter: Counter[str] = Counter(
        interp.dream_topic for interp in interpretations if isinstance(interp.dream_topic, str) and interp.dream_topic
    )
    logging.debug(f"[analytics] {len(topic_counter)} distinct dream topics")
    return [TopicCount(topic=topic, count=count) for topic, count in topic_counter.most_common(limit)]
