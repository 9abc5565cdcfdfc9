"""
Record ingestion - normalize raw journal rows into DreamRecord / InterpretationRecord.

Raw rows come from whatever store the host application uses (database rows,
API payloads, JSON exports). Both snake_case column names and camelCase
payload keys are accepted.

Normalization is defensive so a single malformed row never aborts a run:
- unparseable or missing timestamp -> row dropped (warning logged)
- mood outside 1-5 or not numeric -> absent
- clarity outside 0-100 -> clamped; not numeric -> absent
- negative or non-numeric duration -> absent
- intensity outside 0-10 -> clamped; not numeric -> absent
- is_lucid given as a string -> "true"/"1"/"yes" read as True
- emotional tone kept when either the primary or the secondary tone is named
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from dreamstats.helpers.dto.dream_dto import DreamRecord, EmotionalTone, InterpretationRecord
from dreamstats.helpers.time_helper import parse_timestamp

MOOD_RANGE = (1, 5)
CLARITY_RANGE = (0, 100)
INTENSITY_RANGE = (0.0, 10.0)


def _pick(row: Mapping[str, Any], *keys: str) -> Any:
    """First non-None value among ``keys``."""
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value
    return None


def _to_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _clean_text(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None


def _to_bool(value: Any) -> bool:
    """Truthiness, except that strings like "false", "0" or "" read as False."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def normalize_mood(value: Any) -> int | None:
    """Mood as an int 1-5, or None when missing/out of range."""
    number = _to_number(value)
    if number is None:
        return None
    mood = round(number)
    low, high = MOOD_RANGE
    return mood if low <= mood <= high else None


def normalize_clarity(value: Any) -> int | None:
    """Clarity as an int clamped to 0-100, or None when missing/not numeric."""
    number = _to_number(value)
    if number is None:
        return None
    low, high = CLARITY_RANGE
    return min(max(round(number), low), high)


def normalize_duration(value: Any) -> float | None:
    """Duration in seconds, or None when missing/negative/not numeric."""
    number = _to_number(value)
    if number is None or number < 0:
        return None
    return number


def normalize_intensity(value: Any) -> float | None:
    """Intensity clamped to 0-10, or None when missing/not numeric."""
    number = _to_number(value)
    if number is None:
        return None
    low, high = INTENSITY_RANGE
    return min(max(number, low), high)


def parse_dream_record(row: Mapping[str, Any]) -> DreamRecord | None:
    """
    Build a DreamRecord from a raw row.

    Args:
        row: Mapping with id, created_at/createdAt, mood, clarity, duration,
            is_lucid/isLucid and either flat location fields or a nested
            location_metadata mapping with city/country

    Returns:
        DreamRecord, or None if the row has no usable id or timestamp
    """
    record_id = _pick(row, "id", "dream_id")
    created_at = parse_timestamp(_pick(row, "created_at", "createdAt"))
    if record_id is None or created_at is None:
        logging.warning(f"[ingest] Skipping dream row without usable id/timestamp: id={record_id!r}")
        return None

    location = _pick(row, "location_metadata", "locationMetadata")
    if not isinstance(location, Mapping):
        location = {}

    return DreamRecord(
        id=str(record_id),
        created_at=created_at,
        mood=normalize_mood(row.get("mood")),
        clarity=normalize_clarity(row.get("clarity")),
        duration=normalize_duration(row.get("duration")),
        is_lucid=_to_bool(_pick(row, "is_lucid", "isLucid")),
        location_city=_clean_text(_pick(row, "location_city", "locationCity") or location.get("city")),
        location_country=_clean_text(_pick(row, "location_country", "locationCountry") or location.get("country")),
    )


def parse_emotional_tone(value: Any) -> EmotionalTone | None:
    """Build an EmotionalTone from a raw mapping; None when neither tone is named."""
    if not isinstance(value, Mapping):
        return None
    primary = _clean_text(value.get("primary"))
    secondary = _clean_text(value.get("secondary"))
    if primary is None and secondary is None:
        return None
    return EmotionalTone(
        primary=primary,
        secondary=secondary,
        intensity=normalize_intensity(value.get("intensity")),
    )


def parse_interpretation_record(row: Mapping[str, Any]) -> InterpretationRecord | None:
    """
    Build an InterpretationRecord from a raw row.

    Symbols are read from ``symbols`` and, for older rows, ``key_symbols``.
    Entries are kept as-is; non-string entries are filtered when counting.

    Returns:
        InterpretationRecord, or None if the row does not reference a dream
    """
    dream_id = _pick(row, "dream_id", "dreamId")
    if dream_id is None:
        logging.warning("[ingest] Skipping interpretation row without dream_id")
        return None

    symbols = _pick(row, "symbols", "key_symbols", "keySymbols")
    dream_topic = _pick(row, "dream_topic", "dreamTopic")

    return InterpretationRecord(
        dream_id=str(dream_id),
        symbols=tuple(symbols) if isinstance(symbols, (list, tuple)) else None,
        emotional_tone=parse_emotional_tone(_pick(row, "emotional_tone", "emotionalTone")),
        dream_topic=dream_topic if isinstance(dream_topic, str) and dream_topic else None,
    )


def parse_dream_records(rows: Iterable[Mapping[str, Any]]) -> list[DreamRecord]:
    """Normalize raw dream rows, dropping rows that cannot be used."""
    records = []
    for row in rows:
        if not isinstance(row, Mapping):
            logging.warning(f"[ingest] Skipping non-mapping dream row of type {type(row).__name__}")
            continue
        record = parse_dream_record(row)
        if record is not None:
            records.append(record)
    return records


def parse_interpretation_records(rows: Iterable[Mapping[str, Any]]) -> list[InterpretationRecord]:
    """Normalize raw interpretation rows, dropping rows that cannot be used."""
    records = []
    for row in rows:
        if not isinstance(row, Mapping):
            logging.warning(f"[ingest] Skipping non-mapping interpretation row of type {type(row).__name__}")
            continue
        record = parse_interpretation_record(row)
        if record is not None:
            records.append(record)
    return records
