from __future__ import annotations

from datetime import UTC, date, datetime, time, tzinfo
from typing import Any


def parse_iso_datetime(value: Any) -> datetime:
    """
    Parse a provider kickoff string into a tz-aware datetime.

    Supports:
      - "2024-08-16T19:00:00+00:00" (api-football fixture.date)
      - "2024-08-16T19:00Z" (espn event date)
      - naive strings, treated as UTC
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Missing/invalid kickoff datetime: {value!r}")

    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    dt = datetime.fromisoformat(v)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def to_local(dt: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert to the display zone; tz=None means the system local zone."""
    return dt.astimezone(tz) if tz is not None else dt.astimezone()


def split_local(dt: datetime, tz: tzinfo | None = None) -> tuple[str, str]:
    """Return (YYYY-MM-DD, HH:MM) in the display zone."""
    local = to_local(dt, tz)
    return local.date().isoformat(), local.strftime("%H:%M")


def epoch_ms(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)


def kickoff_at(day: date, hhmm: str, tz: tzinfo | None = None) -> datetime:
    """Combine a calendar day and "HH:MM" into an aware datetime in the display zone."""
    naive = datetime.combine(day, time.fromisoformat(hhmm))
    if tz is None:
        return naive.astimezone()
    return naive.replace(tzinfo=tz)
