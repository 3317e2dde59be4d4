from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Any

from sports_hub.core.coerce import as_number, as_optional_score, as_text, dig
from sports_hub.core.enums import DataKind
from sports_hub.core.records import MatchRecord, PlayerStatRow, StandingsRow
from sports_hub.ingestion.dates import epoch_ms, parse_iso_datetime, split_local
from sports_hub.ingestion.matches import order_matches, paired_scores
from sports_hub.ingestion.providers.base.errors import ParseError

logger = logging.getLogger(__name__)

ApiItem = dict[str, Any]


def parse_standings(items: list[ApiItem]) -> tuple[StandingsRow, ...]:
    """Map `/standings` response items to rows sorted by position.

    The league table lives at response[0].league.standings[0]; further groups
    (e.g. split tables) are ignored.
    """

    table = dig(items, 0, "league", "standings", 0)
    if not isinstance(table, list):
        raise ParseError(
            "api-football standings missing league.standings[0]",
            {"items": len(items)},
        )

    rows: list[StandingsRow] = []
    seen: set[str] = set()
    for idx, item in enumerate(table):
        if not isinstance(item, dict):
            continue

        team = as_text(dig(item, "team", "name"))
        if team in seen:
            continue
        seen.add(team)

        rows.append(
            StandingsRow(
                position=int(as_number(item.get("rank"), idx + 1)),
                team=team,
                played=int(as_number(dig(item, "all", "played"))),
                wins=int(as_number(dig(item, "all", "win"))),
                draws=int(as_number(dig(item, "all", "draw"))),
                losses=int(as_number(dig(item, "all", "lose"))),
                goals_for=as_number(dig(item, "all", "goals", "for")),
                goals_against=as_number(dig(item, "all", "goals", "against")),
                goal_diff=as_number(item.get("goalsDiff")),
                points=as_number(item.get("points")),
            )
        )

    rows.sort(key=lambda r: r.position)
    return tuple(rows)


def parse_fixture(item: ApiItem, *, tz: tzinfo | None = None) -> MatchRecord | None:
    try:
        kickoff = parse_iso_datetime(dig(item, "fixture", "date"))
    except ValueError as e:
        logger.debug("[API-FOOTBALL] Skipping fixture without usable date: %s", e)
        return None

    date_str, time_str = split_local(kickoff, tz)
    home, away = paired_scores(
        as_optional_score(dig(item, "goals", "home")),
        as_optional_score(dig(item, "goals", "away")),
    )

    return MatchRecord(
        date=date_str,
        time=time_str,
        home_team=as_text(dig(item, "teams", "home", "name")),
        away_team=as_text(dig(item, "teams", "away", "name")),
        home_score=home,
        away_score=away,
        status=as_text(dig(item, "fixture", "status", "long"), default=""),
        timestamp=epoch_ms(kickoff),
    )


def parse_fixtures(
    items: list[ApiItem],
    kind: DataKind,
    *,
    tz: tzinfo | None = None,
) -> tuple[MatchRecord, ...]:
    matches = [m for m in (parse_fixture(i, tz=tz) for i in items) if m is not None]
    return order_matches(matches, kind)


def parse_players(items: list[ApiItem], kind: DataKind) -> tuple[PlayerStatRow, ...]:
    """Map `/players/topscorers|topassists` items to ranked leader rows."""

    if kind not in (DataKind.SCORERS, DataKind.ASSISTS):
        raise ValueError(f"parse_players expects scorers/assists, got {kind.value}")

    stat_field = "total" if kind == DataKind.SCORERS else "assists"
    limit = kind.display_limit

    rows: list[PlayerStatRow] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        stats = dig(item, "statistics", 0)
        rows.append(
            PlayerStatRow(
                rank=len(rows) + 1,
                name=as_text(dig(item, "player", "name")),
                team=as_text(dig(stats, "team", "name")),
                stat=as_number(dig(stats, "goals", stat_field)),
            )
        )
        if limit is not None and len(rows) >= limit:
            break
    return tuple(rows)
