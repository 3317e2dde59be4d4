from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date, tzinfo
from typing import Callable

from sports_hub.core.catalog import SIX_NATIONS_ID, League
from sports_hub.core.enums import DataKind, SourceEnum
from sports_hub.core.records import KindData
from sports_hub.ingestion.matches import split_matches
from sports_hub.ingestion.providers.base.source import DataSource
from sports_hub.ingestion.providers.curated import six_nations
from sports_hub.ingestion.providers.curated.mock import (
    curated_leaders,
    generate_recent,
    generate_standings,
    generate_upcoming,
)


@dataclass
class CuratedSource(DataSource):
    """
    Last-resort source: hand-authored data for the rugby tournament, seeded
    mock data for everything else. Never fails, never cached, regenerated
    on every call.
    """

    seed: int | None = None
    tz: tzinfo | None = None

    source_key: str = SourceEnum.CURATED.value
    cacheable: bool = False
    metered: bool = False

    _today: Callable[[], date] = field(default=date.today, repr=False)

    def ensure_supported(self, kind: DataKind, league: League) -> None:
        return None

    def _rng(self) -> random.Random:
        return random.Random(self.seed)

    async def fetch_raw(self, kind: DataKind, league: League) -> KindData:
        if league.league_id == SIX_NATIONS_ID:
            return self._six_nations(kind, league)
        return self._mock(kind, league)

    def normalize(self, kind: DataKind, league: League, raw: KindData) -> KindData:
        # Already in record form.
        return raw

    def _six_nations(self, kind: DataKind, league: League) -> KindData:
        if kind == DataKind.STANDINGS:
            return six_nations.standings()
        if kind == DataKind.MATCHES:
            return six_nations.matches()
        if kind == DataKind.UPCOMING:
            return six_nations.fixtures()
        if kind == DataKind.RECENT:
            return six_nations.results()
        return curated_leaders(league.league_id, kind)

    def _mock(self, kind: DataKind, league: League) -> KindData:
        league_id = league.league_id
        if kind == DataKind.STANDINGS:
            return generate_standings(league_id, self._rng())
        if kind == DataKind.UPCOMING:
            return generate_upcoming(league_id, self._rng(), today=self._today(), tz=self.tz)
        if kind == DataKind.RECENT:
            return generate_recent(league_id, self._rng(), today=self._today(), tz=self.tz)
        if kind == DataKind.MATCHES:
            rng = self._rng()
            today = self._today()
            return split_matches(
                generate_upcoming(league_id, rng, today=today, tz=self.tz)
                + generate_recent(league_id, rng, today=today, tz=self.tz)
            )
        return curated_leaders(league_id, kind)
