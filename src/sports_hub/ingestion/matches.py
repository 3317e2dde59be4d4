from __future__ import annotations

from collections.abc import Iterable

from sports_hub.core.enums import MATCH_DISPLAY_LIMIT, DataKind
from sports_hub.core.records import MatchRecord, MatchSplit


def paired_scores(home: int | None, away: int | None) -> tuple[int | None, int | None]:
    """A half-known score means the match has no usable result."""
    if home is None or away is None:
        return None, None
    return home, away


def order_matches(
    matches: Iterable[MatchRecord],
    kind: DataKind,
    *,
    limit: int = MATCH_DISPLAY_LIMIT,
) -> tuple[MatchRecord, ...]:
    """Upcoming: soonest first. Recent: latest first. Truncated for display."""

    if kind not in (DataKind.UPCOMING, DataKind.RECENT):
        raise ValueError(f"order_matches expects upcoming/recent, got {kind.value}")
    ordered = sorted(matches, key=lambda m: m.timestamp, reverse=kind == DataKind.RECENT)
    return tuple(ordered[:limit])


def select_matches(matches: Iterable[MatchRecord], kind: DataKind) -> tuple[MatchRecord, ...]:
    """Keep the subset of a combined fixture list that `kind` asks for."""

    want_played = kind == DataKind.RECENT
    return order_matches((m for m in matches if m.is_played == want_played), kind)


def split_matches(matches: Iterable[MatchRecord]) -> MatchSplit:
    items = list(matches)
    return MatchSplit(
        upcoming=select_matches(items, DataKind.UPCOMING),
        recent=select_matches(items, DataKind.RECENT),
    )
