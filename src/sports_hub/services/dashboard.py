from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sports_hub.core.catalog import League, get_league
from sports_hub.core.enums import DataKind
from sports_hub.core.records import MatchRecord, MatchSplit, PlayerStatRow, StandingsRow
from sports_hub.ingestion.pipeline import Resolution
from sports_hub.session import HubSession

logger = logging.getLogger(__name__)

FOOTBALL_KINDS = (
    DataKind.STANDINGS,
    DataKind.UPCOMING,
    DataKind.RECENT,
    DataKind.SCORERS,
    DataKind.ASSISTS,
)
RUGBY_KINDS = (DataKind.STANDINGS, DataKind.MATCHES)


class DashboardLoadError(RuntimeError):
    """A kind request failed; nothing from the load is rendered."""


@dataclass(frozen=True)
class Dashboard:
    """Everything the renderer gets, already ordered and truncated."""

    league: League
    standings: tuple[StandingsRow, ...]
    upcoming: tuple[MatchRecord, ...]
    recent: tuple[MatchRecord, ...]
    scorers: tuple[PlayerStatRow, ...] = ()
    assists: tuple[PlayerStatRow, ...] = ()
    sources: dict[DataKind, str] = field(default_factory=dict)
    loaded_at: datetime = field(default_factory=datetime.now)
    quota_count: int = 0

    @property
    def show_player_stats(self) -> bool:
        return self.league.has_player_stats


def kinds_for(league: League) -> tuple[DataKind, ...]:
    return FOOTBALL_KINDS if league.has_player_stats else RUGBY_KINDS


async def load_dashboard(
    session: HubSession,
    league_id: str | None = None,
    *,
    use_cache: bool = True,
) -> Dashboard:
    """
    Resolve every kind for one league concurrently and join them.

    Any failure fails the whole load; there is no partial dashboard.
    """

    league = get_league(league_id or session.preferences.league_id)
    kinds = kinds_for(league)

    # A failing kind cancels the ones still running.
    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [
                tg.create_task(session.pipeline.resolve(kind, league, use_cache=use_cache))
                for kind in kinds
            ]
    except Exception as e:
        cause = e.exceptions[0] if isinstance(e, ExceptionGroup) else e
        logger.error("[DASHBOARD] Load failed for %s: %s", league.league_id, cause)
        raise DashboardLoadError(f"Could not load {league.name}: {cause}") from cause

    results: list[Resolution] = [t.result() for t in tasks]

    by_kind: dict[DataKind, Any] = {r.kind: r.data for r in results}
    sources = {r.kind: r.source for r in results}

    split = by_kind.get(DataKind.MATCHES)
    if isinstance(split, MatchSplit):
        upcoming, recent = split.upcoming, split.recent
    else:
        upcoming, recent = by_kind[DataKind.UPCOMING], by_kind[DataKind.RECENT]

    dashboard = Dashboard(
        league=league,
        standings=by_kind[DataKind.STANDINGS],
        upcoming=upcoming,
        recent=recent,
        scorers=by_kind.get(DataKind.SCORERS, ()),
        assists=by_kind.get(DataKind.ASSISTS, ()),
        sources=sources,
        quota_count=session.quota.current_count(),
    )
    logger.info(
        "[DASHBOARD] Loaded %s (%s)",
        league.league_id,
        ", ".join(f"{k.value}={v}" for k, v in sources.items()),
    )
    return dashboard


async def refresh_dashboard(session: HubSession, league_id: str | None = None) -> Dashboard:
    """Drop every cached entry, then load ignoring the cache."""
    session.cache.clear()
    return await load_dashboard(session, league_id, use_cache=False)


async def change_credential(
    session: HubSession, api_key: str | None, league_id: str | None = None
) -> Dashboard:
    session.set_credential(api_key)
    return await load_dashboard(session, league_id, use_cache=False)
