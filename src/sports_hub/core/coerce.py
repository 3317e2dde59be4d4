from __future__ import annotations

from typing import Any

Number = int | float

UNKNOWN_TEAM = "Unknown"


def as_number(value: Any, default: Number = 0) -> Number:
    """Coerce provider numerics ("12", 12.0, None) to int where integral, else float."""

    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else value
    if isinstance(value, str):
        v = value.strip()
        if not v:
            return default
        try:
            f = float(v)
        except ValueError:
            return default
        return int(f) if f.is_integer() else f
    return default


def as_optional_score(value: Any) -> int | None:
    """Scores are non-negative ints; anything unusable means "not played"."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        score = int(value)
    except (TypeError, ValueError):
        return None
    return score if score >= 0 else None


def as_text(value: Any, default: str = UNKNOWN_TEAM) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def dig(obj: Any, *path: str | int) -> Any:
    """Walk nested dicts/lists, returning None on the first missing hop."""

    cur = obj
    for p in path:
        if isinstance(p, int):
            if not isinstance(cur, list) or not -len(cur) <= p < len(cur):
                return None
            cur = cur[p]
        else:
            if not isinstance(cur, dict):
                return None
            cur = cur.get(p)
    return cur
