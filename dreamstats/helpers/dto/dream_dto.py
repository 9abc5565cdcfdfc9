"""
Dream journal input DTOs.

Normalized snapshots of the two record sequences the analytics engine reads.
Built by dreamstats.components.ingest from raw rows; never mutated afterwards.

Rules:
- Import only stdlib and typing (no dreamstats.* imports)
- Pure data structures only (no I/O, no parsing, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DreamRecord:
    """
    One journal entry.

    Attributes:
        id: Record identifier (opaque; only used to join interpretations)
        created_at: When the dream was recorded (aware or naive-local)
        mood: 1-5, None if not rated
        clarity: 0-100, None if not rated
        duration: Recording length in seconds, None if unknown
        is_lucid: Whether the user marked the dream as lucid
        location_city: City the dream was recorded in
        location_country: Country the dream was recorded in
    """

    id: str
    created_at: datetime
    mood: int | None = None
    clarity: int | None = None
    duration: float | None = None
    is_lucid: bool = False
    location_city: str | None = None
    location_country: str | None = None


@dataclass(frozen=True)
class EmotionalTone:
    """Emotional tone tagged on an interpretation."""

    primary: str | None
    secondary: str | None = None
    intensity: float | None = None  # 0-10


@dataclass(frozen=True)
class InterpretationRecord:
    """Structured annotation attached to a DreamRecord by an upstream interpreter."""

    dream_id: str
    symbols: tuple[object, ...] | None = None  # raw entries; non-strings are skipped at counting time
    emotional_tone: EmotionalTone | None = None
    dream_topic: str | None = None
