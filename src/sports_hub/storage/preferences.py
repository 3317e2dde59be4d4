from __future__ import annotations

from dataclasses import dataclass

from sports_hub.core.catalog import default_league_for, get_league
from sports_hub.core.enums import SportEnum
from sports_hub.db.repos.kv_repo import KeyValueRepository

API_KEY_KEY = "settings_api_key"
SPORT_KEY = "selection_sport"
LEAGUE_KEY = "selection_league"


@dataclass
class Preferences:
    """Persisted credential and last league selection."""

    repo: KeyValueRepository

    @property
    def api_key(self) -> str | None:
        value = self.repo.get_value(API_KEY_KEY)
        return value or None

    def set_api_key(self, api_key: str | None) -> None:
        api_key = (api_key or "").strip()
        if api_key:
            self.repo.set_value(API_KEY_KEY, api_key)
        else:
            self.repo.delete_key(API_KEY_KEY)

    @property
    def sport(self) -> SportEnum:
        raw = self.repo.get_value(SPORT_KEY)
        try:
            return SportEnum(raw) if raw else SportEnum.FOOTBALL
        except ValueError:
            return SportEnum.FOOTBALL

    @property
    def league_id(self) -> str:
        raw = self.repo.get_value(LEAGUE_KEY)
        if raw:
            try:
                league = get_league(raw)
            except KeyError:
                pass
            else:
                if league.sport == self.sport:
                    return league.league_id
        return default_league_for(self.sport).league_id

    def select(self, sport: SportEnum, league_id: str | None = None) -> str:
        league = get_league(league_id) if league_id else default_league_for(sport)
        if league.sport != sport:
            raise ValueError(f"League {league.league_id} is not a {sport.value} league")
        self.repo.set_value(SPORT_KEY, sport.value)
        self.repo.set_value(LEAGUE_KEY, league.league_id)
        return league.league_id
