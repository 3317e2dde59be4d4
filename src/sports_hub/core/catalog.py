from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from sports_hub.core.enums import SportEnum

DEFAULT_LEAGUE_ID = "39"
SIX_NATIONS_ID = "six-nations"


@dataclass(frozen=True)
class League:
    """One competition and the identifiers each source knows it by."""

    league_id: str
    name: str
    sport: SportEnum
    season: str | None = None

    # api-football league id; None when the primary API does not cover it.
    api_football_id: str | None = None

    # espn site API path segments, e.g. ("soccer", "eng.1").
    espn_sport: str | None = None
    espn_code: str | None = None

    @property
    def has_player_stats(self) -> bool:
        return self.sport == SportEnum.FOOTBALL


def _football(league_id: str, name: str, espn_code: str) -> League:
    return League(
        league_id=league_id,
        name=name,
        sport=SportEnum.FOOTBALL,
        season="2024",
        api_football_id=league_id,
        espn_sport="soccer",
        espn_code=espn_code,
    )


LEAGUES: Mapping[SportEnum, Mapping[str, League]] = MappingProxyType(
    {
        SportEnum.FOOTBALL: MappingProxyType(
            {
                "39": _football("39", "English Premier League", "eng.1"),
                "135": _football("135", "Italian Serie A", "ita.1"),
                "61": _football("61", "French Ligue 1", "fra.1"),
                "78": _football("78", "German Bundesliga", "ger.1"),
            }
        ),
        SportEnum.RUGBY: MappingProxyType(
            {
                SIX_NATIONS_ID: League(
                    league_id=SIX_NATIONS_ID,
                    name="Six Nations",
                    sport=SportEnum.RUGBY,
                    season="2026",
                    espn_sport="rugby",
                    espn_code="6nations",
                ),
            }
        ),
    }
)


def iter_leagues() -> Iterator[League]:
    for by_id in LEAGUES.values():
        yield from by_id.values()


def get_league(league_id: str) -> League:
    for league in iter_leagues():
        if league.league_id == league_id:
            return league
    raise KeyError(f"Unknown league id: {league_id!r}")


def default_league_for(sport: SportEnum) -> League:
    if sport == SportEnum.RUGBY:
        return LEAGUES[SportEnum.RUGBY][SIX_NATIONS_ID]
    return LEAGUES[SportEnum.FOOTBALL][DEFAULT_LEAGUE_ID]
