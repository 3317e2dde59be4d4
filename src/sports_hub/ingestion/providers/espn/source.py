from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Any

from sports_hub.core.catalog import League
from sports_hub.core.enums import DataKind, SourceEnum, SportEnum
from sports_hub.core.records import KindData
from sports_hub.ingestion.matches import select_matches, split_matches
from sports_hub.ingestion.providers.base.errors import ConfigError, EmptyResultError
from sports_hub.ingestion.providers.base.source import DataSource
from sports_hub.ingestion.providers.espn.client import EspnClient
from sports_hub.ingestion.providers.espn.parser import (
    parse_events,
    parse_leaders,
    parse_standings,
    standings_entries,
)

Json = dict[str, Any]


@dataclass
class EspnSource(DataSource):
    """
    Free secondary source. Upcoming and recent are both cut from the one
    scoreboard payload; an empty cut counts as a failure.
    """

    client: EspnClient
    tz: tzinfo | None = None

    source_key: str = SourceEnum.ESPN.value
    cacheable: bool = True
    metered: bool = False

    def ensure_supported(self, kind: DataKind, league: League) -> None:
        if not league.espn_sport or not league.espn_code:
            raise ConfigError(f"{league.league_id} has no espn mapping")
        if kind.is_leaders and league.sport != SportEnum.FOOTBALL:
            raise ConfigError(f"espn leaders are not available for {league.league_id}")

    async def fetch_raw(self, kind: DataKind, league: League) -> Json:
        sport, code = league.espn_sport, league.espn_code
        if not sport or not code:
            raise ConfigError(f"{league.league_id} has no espn mapping")

        if kind == DataKind.STANDINGS:
            payload = await self.client.standings(sport, code)
            if not standings_entries(payload):
                raise EmptyResultError(f"espn standings empty for {league.league_id}")
            return payload

        if kind.is_match_list or kind == DataKind.MATCHES:
            payload = await self.client.scoreboard(sport, code)
            if not payload.get("events"):
                raise EmptyResultError(f"espn scoreboard empty for {league.league_id}")
            return payload

        if kind.is_leaders:
            payload = await self.client.leaders(sport, code)
            if not payload.get("categories"):
                raise EmptyResultError(f"espn leaders empty for {league.league_id}")
            return payload

        raise ConfigError(f"espn does not serve {kind.value}")

    def normalize(self, kind: DataKind, league: League, raw: Json) -> KindData:
        if kind == DataKind.STANDINGS:
            return parse_standings(raw)
        if kind.is_match_list:
            return select_matches(parse_events(raw, tz=self.tz), kind)
        if kind == DataKind.MATCHES:
            return split_matches(parse_events(raw, tz=self.tz))
        if kind.is_leaders:
            return parse_leaders(raw, kind)
        raise ConfigError(f"espn does not serve {kind.value}")
