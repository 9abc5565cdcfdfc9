"""
Unit tests for record ingestion and defensive normalization.
"""

from datetime import datetime, timezone

import pytest

from dreamstats.components.ingest.record_parsing_comp import (
    normalize_clarity,
    normalize_duration,
    normalize_intensity,
    normalize_mood,
    parse_dream_record,
    parse_dream_records,
    parse_interpretation_record,
    parse_interpretation_records,
)
from dreamstats.helpers.dto.dream_dto import EmotionalTone


class TestNormalizers:
    """Tests for per-field normalization."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(3, 3), ("4", 4), (5.0, 5), (0, None), (6, None), (-1, None), ("bad", None), (None, None), (True, None)],
    )
    def test_mood(self, raw, expected) -> None:
        assert normalize_mood(raw) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(0, 0), (55, 55), (150, 100), (-5, 0), ("80", 80), ("x", None), (float("nan"), None)],
    )
    def test_clarity(self, raw, expected) -> None:
        assert normalize_clarity(raw) == expected

    @pytest.mark.unit
    def test_duration(self) -> None:
        assert normalize_duration(90) == 90
        assert normalize_duration(-1) is None
        assert normalize_duration("long") is None

    @pytest.mark.unit
    def test_intensity_is_clamped(self) -> None:
        assert normalize_intensity(12) == 10
        assert normalize_intensity(-2) == 0
        assert normalize_intensity(7.5) == 7.5
        assert normalize_intensity(None) is None


class TestParseDreamRecord:
    """Tests for parse_dream_record."""

    @pytest.mark.unit
    def test_database_row(self) -> None:
        row = {
            "id": 17,
            "user_id": "u1",
            "created_at": "2026-10-18T06:30:00Z",
            "mood": 4,
            "clarity": 70,
            "duration": 95,
            "is_lucid": True,
            "location_metadata": {"city": "Lyon", "country": "France"},
        }
        record = parse_dream_record(row)
        assert record is not None
        assert record.id == "17"
        assert record.created_at == datetime(2026, 10, 18, 6, 30, tzinfo=timezone.utc)
        assert (record.mood, record.clarity, record.duration, record.is_lucid) == (4, 70, 95, True)
        assert (record.location_city, record.location_country) == ("Lyon", "France")

    @pytest.mark.unit
    def test_camel_case_payload(self) -> None:
        row = {"id": "a", "createdAt": "2026-10-18T06:30:00+02:00", "isLucid": True, "locationCountry": "Japan"}
        record = parse_dream_record(row)
        assert record is not None
        assert record.is_lucid is True
        assert record.location_country == "Japan"
        assert record.location_city is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("false", False), ("False", False), ("0", False), ("", False), ("true", True), ("1", True), (1, True)],
    )
    def test_lucid_flag_from_text(self, raw, expected) -> None:
        record = parse_dream_record({"id": "a", "created_at": "2026-10-18T06:30:00Z", "is_lucid": raw})
        assert record is not None
        assert record.is_lucid is expected

    @pytest.mark.unit
    def test_bad_timestamp_drops_row(self, caplog) -> None:
        assert parse_dream_record({"id": "a", "created_at": "yesterday-ish"}) is None
        assert "Skipping dream row" in caplog.text

    @pytest.mark.unit
    def test_blank_location_is_absent(self) -> None:
        record = parse_dream_record(
            {"id": "a", "created_at": "2026-10-18T06:30:00", "location_metadata": {"city": "  ", "country": ""}}
        )
        assert record is not None
        assert record.location_city is None
        assert record.location_country is None

    @pytest.mark.unit
    def test_bad_rows_do_not_abort_batch(self) -> None:
        rows = [
            {"id": "ok", "created_at": "2026-10-18T06:30:00Z", "mood": 9},
            {"id": "broken", "created_at": None},
            "not a row",
            {"id": "ok2", "created_at": 1792300000},
        ]
        records = parse_dream_records(rows)
        assert [r.id for r in records] == ["ok", "ok2"]
        assert records[0].mood is None


class TestParseInterpretationRecord:
    """Tests for parse_interpretation_record."""

    @pytest.mark.unit
    def test_full_row(self) -> None:
        row = {
            "dream_id": 17,
            "symbols": ["flying", "water"],
            "emotional_tone": {"primary": "joy", "secondary": "awe", "intensity": 14},
            "dream_topic": "travel",
        }
        record = parse_interpretation_record(row)
        assert record is not None
        assert record.dream_id == "17"
        assert record.symbols == ("flying", "water")
        assert record.emotional_tone is not None
        assert record.emotional_tone.intensity == 10
        assert record.dream_topic == "travel"

    @pytest.mark.unit
    def test_legacy_key_symbols(self) -> None:
        record = parse_interpretation_record({"dream_id": "a", "key_symbols": ["door"]})
        assert record is not None
        assert record.symbols == ("door",)

    @pytest.mark.unit
    def test_malformed_fields_become_absent(self) -> None:
        record = parse_interpretation_record(
            {"dreamId": "a", "symbols": "flying", "emotionalTone": {"intensity": 3}, "dreamTopic": 5}
        )
        assert record is not None
        assert record.symbols is None
        assert record.emotional_tone is None
        assert record.dream_topic is None

    @pytest.mark.unit
    def test_secondary_tone_kept_without_primary(self) -> None:
        record = parse_interpretation_record(
            {"dream_id": "a", "emotional_tone": {"primary": "", "secondary": "fear", "intensity": 4}}
        )
        assert record is not None
        assert record.emotional_tone == EmotionalTone(primary=None, secondary="fear", intensity=4)

    @pytest.mark.unit
    def test_rows_without_dream_id_are_dropped(self) -> None:
        records = parse_interpretation_records([{"symbols": ["x"]}, {"dream_id": "a"}, None])
        assert [r.dream_id for r in records] == ["a"]
