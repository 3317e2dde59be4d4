"""Hand-authored Six Nations 2026 data, current after round 2 (15 Feb 2026).

Kick-off times are GMT, which is UTC in February.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sports_hub.core.enums import DataKind
from sports_hub.core.records import MatchRecord, MatchSplit, StandingsRow
from sports_hub.ingestion.dates import epoch_ms
from sports_hub.ingestion.matches import order_matches

# (team, played, wins, draws, losses, for, against, points); bonus points included.
_TABLE = (
    ("France", 2, 2, 0, 0, 90, 26, 10),
    ("Scotland", 2, 1, 1, 0, 46, 38, 6),
    ("England", 2, 1, 0, 1, 68, 38, 5),
    ("Italy", 2, 1, 1, 0, 31, 35, 5),
    ("Ireland", 2, 1, 0, 1, 34, 49, 4),
    ("Wales", 2, 0, 0, 2, 19, 102, 0),
)

# (date, time, home, away, home score, away score)
_RESULTS = (
    ("2026-02-07", "20:15", "France", "Wales", 43, 0),
    ("2026-02-08", "14:15", "Scotland", "Italy", 13, 13),
    ("2026-02-08", "16:45", "Ireland", "England", 13, 8),
    ("2026-02-14", "20:15", "France", "England", 47, 26),
    ("2026-02-15", "14:15", "Italy", "Wales", 18, 19),
    ("2026-02-15", "16:45", "England", "Ireland", 34, 21),
)

# Round 3
_FIXTURES = (
    ("2026-02-21", "14:10", "England", "Ireland"),
    ("2026-02-21", "16:40", "Wales", "Scotland"),
    ("2026-02-22", "15:10", "France", "Italy"),
)


def _timestamp(day: str, hhmm: str) -> int:
    return epoch_ms(datetime.fromisoformat(f"{day}T{hhmm}").replace(tzinfo=UTC))


def standings() -> tuple[StandingsRow, ...]:
    return tuple(
        StandingsRow(
            position=i,
            team=team,
            played=played,
            wins=wins,
            draws=draws,
            losses=losses,
            goals_for=pf,
            goals_against=pa,
            goal_diff=pf - pa,
            points=points,
        )
        for i, (team, played, wins, draws, losses, pf, pa, points) in enumerate(_TABLE, start=1)
    )


def results() -> tuple[MatchRecord, ...]:
    matches = (
        MatchRecord(
            date=day,
            time=hhmm,
            home_team=home,
            away_team=away,
            home_score=hs,
            away_score=as_,
            status="Full Time",
            timestamp=_timestamp(day, hhmm),
        )
        for day, hhmm, home, away, hs, as_ in _RESULTS
    )
    return order_matches(matches, DataKind.RECENT)


def fixtures() -> tuple[MatchRecord, ...]:
    matches = (
        MatchRecord(
            date=day,
            time=hhmm,
            home_team=home,
            away_team=away,
            home_score=None,
            away_score=None,
            status="Scheduled",
            timestamp=_timestamp(day, hhmm),
        )
        for day, hhmm, home, away in _FIXTURES
    )
    return order_matches(matches, DataKind.UPCOMING)


def matches() -> MatchSplit:
    return MatchSplit(upcoming=fixtures(), recent=results())
