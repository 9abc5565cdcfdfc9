"""
Time utility helpers.

All calendar bucketing happens in a single "local" timezone chosen by config.
``tz=None`` means the host's local timezone, matching how a journal app on the
user's device would bin entries.
"""

from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dreamstats.helpers.exceptions import ConfigError

MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
DAYS_OF_WEEK = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def resolve_timezone(name: str | None) -> tzinfo | None:
    """
    Resolve an IANA timezone name.

    Args:
        name: e.g. "Europe/Berlin", "UTC", or None for the host local timezone

    Returns:
        tzinfo instance, or None for host local time

    Raises:
        ConfigError: If the name is not a known timezone
    """
    if not name:
        return None
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"Unknown timezone: {name!r}") from e


def to_local(ts: datetime, tz: tzinfo | None) -> datetime:
    """
    Convert a timestamp into the configured local timezone.

    Naive timestamps are taken to be local already and returned unchanged.
    """
    if ts.tzinfo is None:
        return ts
    return ts.astimezone(tz)


def local_date(ts: datetime, tz: tzinfo | None) -> date:
    """Calendar date of ``ts`` in the local timezone (midnight-normalized)."""
    return to_local(ts, tz).date()


def local_now(tz: tzinfo | None) -> datetime:
    """Current wall-clock time in the local timezone."""
    return datetime.now(tz) if tz is not None else datetime.now().astimezone()


def sunday_first_weekday(ts: datetime) -> int:
    """Day of week index with Sunday=0 ... Saturday=6."""
    return (ts.weekday() + 1) % 7


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """
    Move a (year, month) pair by ``delta`` months.

    Examples:
        >>> shift_month(2026, 1, -1)
        (2025, 12)
        >>> shift_month(2026, 10, -11)
        (2025, 11)
    """
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_label(ts: datetime) -> str:
    """Short "Mon YYYY" label, e.g. "Oct 2026"."""
    return f"{MONTH_LABELS[ts.month - 1]} {ts.year}"


def parse_timestamp(value: object) -> datetime | None:
    """
    Parse a record timestamp.

    Accepts datetime objects, ISO-8601 strings (a trailing "Z" is read as UTC)
    and epoch seconds. Returns None for anything else.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None
