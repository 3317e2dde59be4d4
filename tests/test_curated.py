from __future__ import annotations

import asyncio
import random
from datetime import UTC, date

from sports_hub.core.catalog import get_league
from sports_hub.core.enums import DataKind
from sports_hub.core.records import KindData, MatchSplit
from sports_hub.ingestion.providers.curated import six_nations
from sports_hub.ingestion.providers.curated.mock import (
    curated_leaders,
    generate_recent,
    generate_standings,
    generate_upcoming,
)
from sports_hub.ingestion.providers.curated.source import CuratedSource
from sports_hub.ingestion.providers.curated.tables import TEAMS

TODAY = date(2026, 3, 1)


def test_mock_standings_are_a_consistent_table() -> None:
    rows = generate_standings("39", random.Random(7))

    assert len(rows) == 20
    assert [r.position for r in rows] == list(range(1, 21))
    assert {r.team for r in rows} == set(TEAMS["39"])
    for r in rows:
        assert r.wins >= 0 and r.draws >= 0 and r.losses >= 0
        assert r.wins + r.draws + r.losses == r.played
        assert r.points == r.wins * 3 + r.draws
        assert r.goal_diff == r.goals_for - r.goals_against
    points = [r.points for r in rows]
    assert points == sorted(points, reverse=True)


def test_mock_unknown_league_uses_premier_league_teams() -> None:
    rows = generate_standings("999", random.Random(1))
    assert {r.team for r in rows} == set(TEAMS["39"])


def test_mock_generation_is_deterministic_for_a_seed() -> None:
    a = generate_upcoming("135", random.Random(42), today=TODAY, tz=UTC)
    b = generate_upcoming("135", random.Random(42), today=TODAY, tz=UTC)
    assert a == b


def test_mock_fixtures_and_results() -> None:
    upcoming = generate_upcoming("61", random.Random(3), today=TODAY, tz=UTC)
    recent = generate_recent("61", random.Random(3), today=TODAY, tz=UTC)

    assert len(upcoming) == 10
    assert upcoming[0].date == "2026-03-01"
    assert upcoming[-1].date == "2026-03-10"
    assert all(m.time == "15:00" and m.status == "Scheduled" for m in upcoming)
    assert all(m.home_score is None and m.away_score is None for m in upcoming)
    assert all(m.home_team != m.away_team for m in upcoming)

    assert len(recent) == 10
    assert recent[0].date == "2026-02-28"
    assert recent[-1].date == "2026-02-19"
    assert all(m.status == "Finished" for m in recent)
    for m in recent:
        assert m.home_score is not None and 0 <= m.home_score <= 3
        assert m.away_score is not None and 0 <= m.away_score <= 3
    timestamps = [m.timestamp for m in recent]
    assert timestamps == sorted(timestamps, reverse=True)


def test_curated_leaders() -> None:
    scorers = curated_leaders("78", DataKind.SCORERS)
    assists = curated_leaders("78", DataKind.ASSISTS)

    assert len(scorers) == 5
    assert len(assists) == 3
    assert [p.rank for p in scorers] == [1, 2, 3, 4, 5]
    assert assists[0].name == "Harry Kane"
    fallback = curated_leaders("six-nations", DataKind.SCORERS)
    assert fallback == curated_leaders("39", DataKind.SCORERS)


def test_six_nations_tables() -> None:
    table = six_nations.standings()
    results = six_nations.results()
    fixtures = six_nations.fixtures()

    assert [r.team for r in table][:2] == ["France", "Scotland"]
    assert [r.position for r in table] == [1, 2, 3, 4, 5, 6]
    assert len(results) == 6
    assert results[0].date == "2026-02-15"
    assert all(m.home_score is not None for m in results)
    assert [m.date for m in fixtures] == ["2026-02-21", "2026-02-21", "2026-02-22"]
    assert all(m.home_score is None for m in fixtures)


def test_curated_source_dispatch() -> None:
    source = CuratedSource(seed=5, tz=UTC, _today=lambda: TODAY)

    async def run(kind: DataKind, league_id: str) -> KindData:
        league = get_league(league_id)
        source.ensure_supported(kind, league)
        return source.normalize(kind, league, await source.fetch_raw(kind, league))

    rugby = asyncio.run(run(DataKind.MATCHES, "six-nations"))
    assert isinstance(rugby, MatchSplit)
    assert rugby == six_nations.matches()

    football = asyncio.run(run(DataKind.MATCHES, "39"))
    assert isinstance(football, MatchSplit)
    assert football.upcoming and football.recent

    first = asyncio.run(run(DataKind.STANDINGS, "39"))
    again = asyncio.run(run(DataKind.STANDINGS, "39"))
    assert first == again
    assert not source.cacheable
    assert not source.metered
