"""
Ingest package.
"""

from .record_parsing_comp import (
    parse_dream_record,
    parse_dream_records,
    parse_emotional_tone,
    parse_interpretation_record,
    parse_interpretation_records,
)

__all__ = [
    "parse_dream_record",
    "parse_dream_records",
    "parse_emotional_tone",
    "parse_interpretation_record",
    "parse_interpretation_records",
]
