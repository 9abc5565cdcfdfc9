"""
Unit tests for dreamstats.helpers.time_helper module.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from dreamstats.helpers.exceptions import ConfigError
from dreamstats.helpers.time_helper import (
    local_date,
    month_label,
    parse_timestamp,
    resolve_timezone,
    shift_month,
    sunday_first_weekday,
    to_local,
)


class TestResolveTimezone:
    """Tests for resolve_timezone."""

    @pytest.mark.unit
    def test_none_means_host_local(self) -> None:
        assert resolve_timezone(None) is None
        assert resolve_timezone("") is None

    @pytest.mark.unit
    def test_utc(self) -> None:
        assert resolve_timezone("utc") is timezone.utc

    @pytest.mark.unit
    def test_iana_name(self) -> None:
        tz = resolve_timezone("Europe/Berlin")
        assert datetime(2026, 7, 1, tzinfo=tz).utcoffset() == timedelta(hours=2)

    @pytest.mark.unit
    def test_unknown_name_raises_config_error(self) -> None:
        with pytest.raises(ConfigError, match="Unknown timezone"):
            resolve_timezone("Mars/Olympus_Mons")


class TestLocalConversion:
    """Tests for to_local / local_date / sunday_first_weekday."""

    @pytest.mark.unit
    def test_aware_timestamp_converted(self) -> None:
        ts = datetime(2026, 10, 18, 23, 0, tzinfo=timezone.utc)
        assert local_date(ts, timezone(timedelta(hours=3))) == date(2026, 10, 19)

    @pytest.mark.unit
    def test_naive_timestamp_is_already_local(self) -> None:
        ts = datetime(2026, 10, 18, 23, 0)
        assert to_local(ts, timezone(timedelta(hours=3))) is ts

    @pytest.mark.unit
    def test_sunday_is_zero(self) -> None:
        assert sunday_first_weekday(datetime(2026, 10, 18)) == 0
        assert sunday_first_weekday(datetime(2026, 10, 17)) == 6


class TestMonthHelpers:
    """Tests for shift_month / month_label."""

    @pytest.mark.unit
    def test_shift_month(self) -> None:
        assert shift_month(2026, 10, 0) == (2026, 10)
        assert shift_month(2026, 1, -1) == (2025, 12)
        assert shift_month(2026, 12, 1) == (2027, 1)
        assert shift_month(2026, 10, -23) == (2024, 11)

    @pytest.mark.unit
    def test_month_label(self) -> None:
        assert month_label(datetime(2026, 3, 1)) == "Mar 2026"


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    @pytest.mark.unit
    def test_iso_with_z(self) -> None:
        assert parse_timestamp("2026-10-18T06:30:00Z") == datetime(2026, 10, 18, 6, 30, tzinfo=timezone.utc)

    @pytest.mark.unit
    def test_iso_with_fractional_seconds_and_offset(self) -> None:
        ts = parse_timestamp("2026-10-18T06:30:00.123+02:00")
        assert ts is not None
        assert ts.utcoffset() == timedelta(hours=2)

    @pytest.mark.unit
    def test_epoch_seconds(self) -> None:
        assert parse_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.unit
    def test_datetime_passthrough(self) -> None:
        ts = datetime(2026, 1, 1)
        assert parse_timestamp(ts) is ts

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", [None, "", "not a date", True, [], {}])
    def test_unparseable_values(self, raw) -> None:
        assert parse_timestamp(raw) is None
