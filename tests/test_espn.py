from __future__ import annotations

import asyncio
from datetime import UTC
from typing import Any

import httpx
import pytest

from sports_hub.core.catalog import get_league
from sports_hub.core.enums import DataKind
from sports_hub.core.records import MatchSplit
from sports_hub.ingestion.providers.base.client import BaseHttpClient
from sports_hub.ingestion.providers.base.errors import ConfigError, EmptyResultError, ParseError
from sports_hub.ingestion.providers.espn.client import ESPN_BASE_URL, EspnClient
from sports_hub.ingestion.providers.espn.parser import (
    parse_events,
    parse_leaders,
    parse_standings,
)
from sports_hub.ingestion.providers.espn.source import EspnSource


STATE_LABELS = {"pre": "Scheduled", "in": "In Progress", "post": "Full Time"}


def _entry(team: str, **stats: Any) -> dict[str, Any]:
    return {
        "team": {"displayName": team},
        "stats": [{"name": k, "value": v} for k, v in stats.items()],
    }


def _event(
    when: str, home: str, away: str, hs: str | None, as_: str | None, state: str
) -> dict[str, Any]:
    return {
        "date": when,
        "status": {"type": {"state": state, "description": STATE_LABELS[state]}},
        "competitions": [
            {
                "competitors": [
                    {"homeAway": "away", "team": {"displayName": away}, "score": as_},
                    {"homeAway": "home", "team": {"displayName": home}, "score": hs},
                ]
            }
        ],
    }


SCOREBOARD = {
    "events": [
        _event("2026-02-22T15:10Z", "France", "Italy", "0", "0", "pre"),
        _event("2026-02-15T16:45Z", "England", "Ireland", "34", "21", "post"),
        _event("2026-02-21T14:10Z", "England", "Ireland", None, None, "pre"),
        _event("2026-02-14T20:15Z", "France", "England", "47", "26", "post"),
    ]
}


def test_parse_standings_uses_table_order_and_stat_names() -> None:
    payload = {
        "children": [
            {
                "standings": {
                    "entries": [
                        _entry(
                            "Arsenal",
                            gamesPlayed=10,
                            wins="7",
                            ties=2.0,
                            losses=1,
                            pointsFor=20,
                            pointsAgainst=8,
                            pointDifferential=12,
                            points=23,
                        ),
                        _entry("Chelsea", gamesPlayed=10, wins=6, points=20),
                    ]
                }
            }
        ]
    }

    rows = parse_standings(payload)

    assert [(r.position, r.team) for r in rows] == [(1, "Arsenal"), (2, "Chelsea")]
    arsenal = rows[0]
    assert (arsenal.played, arsenal.wins, arsenal.draws, arsenal.losses) == (10, 7, 2, 1)
    assert arsenal.goal_diff == 12
    assert arsenal.points == 23
    chelsea = rows[1]
    assert chelsea.draws == 0
    assert chelsea.goals_for == 0
    assert chelsea.points == 20


def test_parse_standings_missing_entries_is_parse_error() -> None:
    with pytest.raises(ParseError):
        parse_standings({"children": []})


def test_parse_events_scores_only_after_kickoff() -> None:
    matches = parse_events(SCOREBOARD, tz=UTC)

    assert [m.date for m in matches] == ["2026-02-14", "2026-02-15", "2026-02-21", "2026-02-22"]
    played = {m.date: (m.home_score, m.away_score) for m in matches}
    assert played["2026-02-14"] == (47, 26)
    assert played["2026-02-15"] == (34, 21)
    # "0"-"0" on a scheduled event is not a result.
    assert played["2026-02-22"] == (None, None)
    assert matches[0].home_team == "France"
    assert matches[0].away_team == "England"
    assert matches[0].time == "20:15"


def test_parse_leaders_category_and_team_fallbacks() -> None:
    payload = {
        "categories": [
            {
                "name": "somethingElse",
                "displayName": "Goals Leaders",
                "leaders": [
                    {
                        "value": 15.0,
                        "athlete": {"displayName": "Haaland", "team": {"abbreviation": "MCI"}},
                    },
                    {
                        "value": "12",
                        "athlete": {"displayName": "Salah", "team": {"name": "Liverpool"}},
                    },
                    {"value": None, "athlete": {"displayName": "Isak"}},
                ],
            },
            {
                "name": "assistLeaders",
                "leaders": [
                    {"value": i, "athlete": {"displayName": f"P{i}", "team": {"abbreviation": "X"}}}
                    for i in range(10, 4, -1)
                ],
            },
        ]
    }

    scorers = parse_leaders(payload, DataKind.SCORERS)
    assists = parse_leaders(payload, DataKind.ASSISTS)

    assert [(p.rank, p.name, p.team, p.stat) for p in scorers] == [
        (1, "Haaland", "MCI", 15),
        (2, "Salah", "Liverpool", 12),
        (3, "Isak", "Unknown", 0),
    ]
    assert [p.stat for p in assists] == [10, 9, 8]


def test_parse_leaders_without_category_is_empty() -> None:
    assert parse_leaders({"categories": [{"name": "cleanSheets"}]}, DataKind.SCORERS) == ()


def _source(handler: Any) -> EspnSource:
    http = BaseHttpClient(base_url=ESPN_BASE_URL, transport=httpx.MockTransport(handler))
    return EspnSource(client=EspnClient(http=http), tz=UTC)


def test_source_cuts_upcoming_and_recent_from_scoreboard() -> None:
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json=SCOREBOARD)

    source = _source(handler)
    league = get_league("six-nations")

    async def run() -> tuple[Any, Any, Any]:
        raw = await source.fetch_raw(DataKind.MATCHES, league)
        await source.client.http.aclose()
        return (
            source.normalize(DataKind.UPCOMING, league, raw),
            source.normalize(DataKind.RECENT, league, raw),
            source.normalize(DataKind.MATCHES, league, raw),
        )

    upcoming, recent, split = asyncio.run(run())

    assert paths == ["/apis/site/v2/sports/rugby/6nations/scoreboard"]
    assert [m.date for m in upcoming] == ["2026-02-21", "2026-02-22"]
    assert [m.date for m in recent] == ["2026-02-15", "2026-02-14"]
    assert isinstance(split, MatchSplit)
    assert split.upcoming == upcoming
    assert split.recent == recent


def test_source_filtered_subset_can_be_empty() -> None:
    only_played = {"events": [SCOREBOARD["events"][1]]}
    source = _source(lambda r: httpx.Response(200, json=only_played))
    league = get_league("39")

    async def run() -> Any:
        raw = await source.fetch_raw(DataKind.UPCOMING, league)
        await source.client.http.aclose()
        return source.normalize(DataKind.UPCOMING, league, raw)

    assert asyncio.run(run()) == ()


def test_source_standings_path_and_empty_payloads() -> None:
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        if request.url.path.endswith("/standings"):
            return httpx.Response(200, json={"children": [{"standings": {"entries": []}}]})
        return httpx.Response(200, json={"events": []})

    source = _source(handler)
    league = get_league("39")

    async def run(kind: DataKind) -> None:
        await source.fetch_raw(kind, league)

    with pytest.raises(EmptyResultError):
        asyncio.run(run(DataKind.STANDINGS))
    with pytest.raises(EmptyResultError):
        asyncio.run(run(DataKind.RECENT))
    assert paths == [
        "/apis/v2/sports/soccer/eng.1/standings",
        "/apis/site/v2/sports/soccer/eng.1/scoreboard",
    ]


def test_source_has_no_rugby_leaders() -> None:
    source = _source(lambda r: httpx.Response(500))
    with pytest.raises(ConfigError):
        source.ensure_supported(DataKind.SCORERS, get_league("six-nations"))
    source.ensure_supported(DataKind.STANDINGS, get_league("six-nations"))
    source.ensure_supported(DataKind.ASSISTS, get_league("61"))
