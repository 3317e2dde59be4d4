"""ESPN site API payloads -> normalized records.

ESPN numbers arrive as floats or numeric strings; every lookup degrades to 0
or "Unknown" instead of failing the batch.
"""

from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Any

from sports_hub.core.coerce import UNKNOWN_TEAM, as_number, as_optional_score, as_text, dig
from sports_hub.core.enums import DataKind
from sports_hub.core.records import MatchRecord, PlayerStatRow, StandingsRow
from sports_hub.ingestion.dates import epoch_ms, parse_iso_datetime, split_local
from sports_hub.ingestion.matches import paired_scores
from sports_hub.ingestion.providers.base.errors import ParseError

logger = logging.getLogger(__name__)

Json = dict[str, Any]

# ESPN stat name -> StandingsRow field
_STANDINGS_STATS = {
    "played": "gamesPlayed",
    "wins": "wins",
    "draws": "ties",
    "losses": "losses",
    "goals_for": "pointsFor",
    "goals_against": "pointsAgainst",
    "goal_diff": "pointDifferential",
    "points": "points",
}

_LEADER_CATEGORIES = {
    DataKind.SCORERS: ("goalLeaders", "Goals"),
    DataKind.ASSISTS: ("assistLeaders", "Assists"),
}


def standings_entries(payload: Json) -> list[Any]:
    entries = dig(payload, "children", 0, "standings", "entries")
    if entries is None:
        entries = dig(payload, "standings", "entries")
    if not isinstance(entries, list):
        raise ParseError("espn standings missing children[0].standings.entries")
    return entries


def _stat_lookup(entry: Json) -> dict[str, Any]:
    stats = entry.get("stats")
    if not isinstance(stats, list):
        return {}
    return {s.get("name"): s.get("value") for s in stats if isinstance(s, dict)}


def parse_standings(payload: Json) -> tuple[StandingsRow, ...]:
    """Table order is the ranking; position = index + 1."""

    rows: list[StandingsRow] = []
    seen: set[str] = set()
    for entry in standings_entries(payload):
        if not isinstance(entry, dict):
            continue
        team = as_text(dig(entry, "team", "displayName"))
        if team in seen:
            continue
        seen.add(team)

        stats = _stat_lookup(entry)
        values = {field: as_number(stats.get(name)) for field, name in _STANDINGS_STATS.items()}
        rows.append(
            StandingsRow(
                position=len(rows) + 1,
                team=team,
                played=int(values["played"]),
                wins=int(values["wins"]),
                draws=int(values["draws"]),
                losses=int(values["losses"]),
                goals_for=values["goals_for"],
                goals_against=values["goals_against"],
                goal_diff=values["goal_diff"],
                points=values["points"],
            )
        )
    rows.sort(key=lambda r: r.position)
    return tuple(rows)


def _competitor(competitors: list[Any], side: str) -> Json:
    for c in competitors:
        if isinstance(c, dict) and c.get("homeAway") == side:
            return c
    return {}


def parse_event(event: Json, *, tz: tzinfo | None = None) -> MatchRecord | None:
    try:
        kickoff = parse_iso_datetime(event.get("date"))
    except ValueError as e:
        logger.debug("[ESPN] Skipping event without usable date: %s", e)
        return None

    competitors = dig(event, "competitions", 0, "competitors")
    if not isinstance(competitors, list):
        competitors = []
    home = _competitor(competitors, "home")
    away = _competitor(competitors, "away")

    # Scheduled events carry "0" scores; only trust scores once play has started.
    if dig(event, "status", "type", "state") == "pre":
        home_score, away_score = None, None
    else:
        home_score, away_score = paired_scores(
            as_optional_score(home.get("score")),
            as_optional_score(away.get("score")),
        )

    date_str, time_str = split_local(kickoff, tz)
    return MatchRecord(
        date=date_str,
        time=time_str,
        home_team=as_text(dig(home, "team", "displayName")),
        away_team=as_text(dig(away, "team", "displayName")),
        home_score=home_score,
        away_score=away_score,
        status=as_text(dig(event, "status", "type", "description"), default=""),
        timestamp=epoch_ms(kickoff),
    )


def parse_events(payload: Json, *, tz: tzinfo | None = None) -> list[MatchRecord]:
    """All scoreboard events, soonest first. Callers filter by played/unplayed."""

    events = payload.get("events")
    if not isinstance(events, list):
        raise ParseError("espn scoreboard missing events list")
    matches = [
        m for m in (parse_event(e, tz=tz) for e in events if isinstance(e, dict)) if m is not None
    ]
    matches.sort(key=lambda m: m.timestamp)
    return matches


def find_leader_category(payload: Json, kind: DataKind) -> Json | None:
    name, label = _LEADER_CATEGORIES[kind]
    categories = payload.get("categories")
    if not isinstance(categories, list):
        raise ParseError("espn leaders missing categories list")
    for c in categories:
        if not isinstance(c, dict):
            continue
        if c.get("name") == name or label in str(c.get("displayName") or ""):
            return c
    return None


def parse_leaders(payload: Json, kind: DataKind) -> tuple[PlayerStatRow, ...]:
    if kind not in _LEADER_CATEGORIES:
        raise ValueError(f"parse_leaders expects scorers/assists, got {kind.value}")

    category = find_leader_category(payload, kind)
    if category is None:
        return ()
    leaders = category.get("leaders")
    if not isinstance(leaders, list):
        return ()

    limit = kind.display_limit
    rows: list[PlayerStatRow] = []
    for leader in leaders:
        if not isinstance(leader, dict):
            continue
        athlete = leader.get("athlete") if isinstance(leader.get("athlete"), dict) else {}
        team = as_text(
            dig(athlete, "team", "abbreviation"),
            default=as_text(dig(athlete, "team", "name"), default=UNKNOWN_TEAM),
        )
        rows.append(
            PlayerStatRow(
                rank=len(rows) + 1,
                name=as_text(athlete.get("displayName")),
                team=team,
                stat=as_number(leader.get("value")),
            )
        )
        if limit is not None and len(rows) >= limit:
            break
    return tuple(rows)
