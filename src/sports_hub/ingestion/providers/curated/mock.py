"""Synthetic league data so a dashboard never renders empty.

All generators are pure: same rng state, same `today` -> same output. Tests
assert shapes (counts, ranges, ordering), never the random values.
"""

from __future__ import annotations

import random
from datetime import date, timedelta, tzinfo

from sports_hub.core.catalog import DEFAULT_LEAGUE_ID
from sports_hub.core.enums import DataKind
from sports_hub.core.records import MatchRecord, PlayerStatRow, StandingsRow
from sports_hub.ingestion.dates import epoch_ms, kickoff_at
from sports_hub.ingestion.providers.curated.tables import ASSISTS, SCORERS, teams_for

MOCK_FIXTURE_COUNT = 10
MOCK_KICKOFF = "15:00"
MAX_MOCK_GOALS = 3


def generate_standings(league_id: str, rng: random.Random) -> tuple[StandingsRow, ...]:
    """Plausible table: earlier-listed teams tend to win more; ranked by points."""

    drafts: list[dict[str, int | str]] = []
    for index, team in enumerate(teams_for(league_id)):
        played = 25 + rng.randrange(3)
        wins = max(0, 20 - index - rng.randrange(3))
        draws = min(rng.randrange(8), played - wins)
        goals_for = max(0, 50 - index * 2 + rng.randrange(10))
        goals_against = 15 + index * 2 + rng.randrange(10)
        drafts.append(
            {
                "team": team,
                "played": played,
                "wins": wins,
                "draws": draws,
                "losses": played - wins - draws,
                "goals_for": goals_for,
                "goals_against": goals_against,
                "goal_diff": goals_for - goals_against,
                "points": wins * 3 + draws,
            }
        )

    drafts.sort(key=lambda d: (-int(d["points"]), -int(d["goal_diff"]), str(d["team"])))
    return tuple(
        StandingsRow(
            position=position,
            team=str(d["team"]),
            played=int(d["played"]),
            wins=int(d["wins"]),
            draws=int(d["draws"]),
            losses=int(d["losses"]),
            goals_for=int(d["goals_for"]),
            goals_against=int(d["goals_against"]),
            goal_diff=int(d["goal_diff"]),
            points=int(d["points"]),
        )
        for position, d in enumerate(drafts, start=1)
    )


def _pairing(teams: tuple[str, ...], rng: random.Random) -> tuple[str, str]:
    home, away = rng.sample(teams, 2)
    return home, away


def _mock_match(
    day: date,
    teams: tuple[str, ...],
    rng: random.Random,
    *,
    played: bool,
    tz: tzinfo | None,
) -> MatchRecord:
    home, away = _pairing(teams, rng)
    kickoff = kickoff_at(day, MOCK_KICKOFF, tz)
    return MatchRecord(
        date=day.isoformat(),
        time=MOCK_KICKOFF,
        home_team=home,
        away_team=away,
        home_score=rng.randint(0, MAX_MOCK_GOALS) if played else None,
        away_score=rng.randint(0, MAX_MOCK_GOALS) if played else None,
        status="Finished" if played else "Scheduled",
        timestamp=epoch_ms(kickoff),
    )


def generate_upcoming(
    league_id: str,
    rng: random.Random,
    *,
    today: date,
    tz: tzinfo | None = None,
) -> tuple[MatchRecord, ...]:
    """One fixture a day from today, soonest first."""

    teams = teams_for(league_id)
    return tuple(
        _mock_match(today + timedelta(days=i), teams, rng, played=False, tz=tz)
        for i in range(MOCK_FIXTURE_COUNT)
    )


def generate_recent(
    league_id: str,
    rng: random.Random,
    *,
    today: date,
    tz: tzinfo | None = None,
) -> tuple[MatchRecord, ...]:
    """One result a day going back from yesterday, latest first."""

    teams = teams_for(league_id)
    return tuple(
        _mock_match(today - timedelta(days=i), teams, rng, played=True, tz=tz)
        for i in range(1, MOCK_FIXTURE_COUNT + 1)
    )


def curated_leaders(league_id: str, kind: DataKind) -> tuple[PlayerStatRow, ...]:
    if kind == DataKind.SCORERS:
        table = SCORERS
    elif kind == DataKind.ASSISTS:
        table = ASSISTS
    else:
        raise ValueError(f"curated_leaders expects scorers/assists, got {kind.value}")

    players = table.get(league_id, table[DEFAULT_LEAGUE_ID])
    return tuple(
        PlayerStatRow(rank=i, name=name, team=team, stat=stat)
        for i, (name, team, stat) in enumerate(players, start=1)
    )
