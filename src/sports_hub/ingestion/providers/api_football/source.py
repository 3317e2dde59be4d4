from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta, tzinfo
from typing import Any, Callable

from sports_hub.core.catalog import League
from sports_hub.core.enums import DataKind, SourceEnum
from sports_hub.core.records import KindData
from sports_hub.ingestion.providers.api_football.client import (
    API_FOOTBALL_HOST,
    ApiFootballClient,
)
from sports_hub.ingestion.providers.api_football.parser import (
    parse_fixtures,
    parse_players,
    parse_standings,
)
from sports_hub.ingestion.providers.base.client import BaseHttpClient
from sports_hub.ingestion.providers.base.errors import ConfigError
from sports_hub.ingestion.providers.base.source import DataSource

ApiItem = dict[str, Any]

SUPPORTED_KINDS = frozenset(
    {
        DataKind.STANDINGS,
        DataKind.UPCOMING,
        DataKind.RECENT,
        DataKind.SCORERS,
        DataKind.ASSISTS,
    }
)

DEFAULT_SEASON = "2024"


@dataclass
class ApiFootballSource(DataSource):
    """
    Primary paid source. Skipped unless a credential is set and the league
    has an api-football id.
    """

    http: BaseHttpClient
    credential: Callable[[], str | None]
    host: str = API_FOOTBALL_HOST
    window_days: int = 14
    tz: tzinfo | None = None

    source_key: str = SourceEnum.API_FOOTBALL.value
    cacheable: bool = True
    metered: bool = True

    _today: Callable[[], date] = field(default=date.today, repr=False)

    def ensure_supported(self, kind: DataKind, league: League) -> None:
        if not self.credential():
            raise ConfigError("api-football key is not set")
        if league.api_football_id is None:
            raise ConfigError(f"{league.league_id} is not covered by api-football")
        if kind not in SUPPORTED_KINDS:
            raise ConfigError(f"api-football does not serve {kind.value}")

    def _client(self) -> ApiFootballClient:
        api_key = self.credential()
        if not api_key:
            raise ConfigError("api-football key is not set")
        return ApiFootballClient(http=self.http, api_key=api_key, host=self.host)

    def request_for(self, kind: DataKind, league: League) -> tuple[str, dict[str, str]]:
        """Endpoint path and query for one kind."""

        params = {
            "league": str(league.api_football_id),
            "season": league.season or DEFAULT_SEASON,
        }
        today = self._today()
        window = timedelta(days=self.window_days)

        if kind == DataKind.STANDINGS:
            return "/standings", params
        if kind == DataKind.UPCOMING:
            params["from"] = today.isoformat()
            params["to"] = (today + window).isoformat()
            return "/fixtures", params
        if kind == DataKind.RECENT:
            params["from"] = (today - window).isoformat()
            params["to"] = today.isoformat()
            params["status"] = "FT"
            return "/fixtures", params
        if kind == DataKind.SCORERS:
            return "/players/topscorers", params
        if kind == DataKind.ASSISTS:
            return "/players/topassists", params
        raise ConfigError(f"api-football does not serve {kind.value}")

    async def fetch_raw(self, kind: DataKind, league: League) -> list[ApiItem]:
        path, params = self.request_for(kind, league)
        return await self._client().get_response_items(path, params=params)

    def normalize(self, kind: DataKind, league: League, raw: list[ApiItem]) -> KindData:
        if kind == DataKind.STANDINGS:
            return parse_standings(raw)
        if kind.is_match_list:
            return parse_fixtures(raw, kind, tz=self.tz)
        if kind.is_leaders:
            return parse_players(raw, kind)
        raise ConfigError(f"api-football does not serve {kind.value}")
