from __future__ import annotations

from enum import Enum, StrEnum


class SportEnum(StrEnum):
    FOOTBALL = "football"
    RUGBY = "rugby"


class SourceEnum(StrEnum):
    CACHE = "cache"
    API_FOOTBALL = "api_football"
    ESPN = "espn"
    CURATED = "curated"


class DataKind(str, Enum):
    STANDINGS = "standings"
    UPCOMING = "upcoming"
    RECENT = "recent"
    SCORERS = "scorers"
    ASSISTS = "assists"
    # Combined upcoming + recent (rugby).
    MATCHES = "matches"

    @property
    def cache_slug(self) -> str:
        return _CACHE_SLUGS[self]

    @property
    def display_limit(self) -> int | None:
        return _DISPLAY_LIMITS.get(self)

    @property
    def is_match_list(self) -> bool:
        return self in (DataKind.UPCOMING, DataKind.RECENT)

    @property
    def is_leaders(self) -> bool:
        return self in (DataKind.SCORERS, DataKind.ASSISTS)


_CACHE_SLUGS: dict[DataKind, str] = {
    DataKind.STANDINGS: "standings",
    DataKind.UPCOMING: "upcoming",
    DataKind.RECENT: "results",
    DataKind.SCORERS: "scorers",
    DataKind.ASSISTS: "assists",
    DataKind.MATCHES: "matches",
}

MATCH_DISPLAY_LIMIT = 15

_DISPLAY_LIMITS: dict[DataKind, int] = {
    DataKind.UPCOMING: MATCH_DISPLAY_LIMIT,
    DataKind.RECENT: MATCH_DISPLAY_LIMIT,
    DataKind.MATCHES: MATCH_DISPLAY_LIMIT,
    DataKind.SCORERS: 5,
    DataKind.ASSISTS: 3,
}


class QuotaLevel(str, Enum):
    INFO = "INFO"
    HIGH = "HIGH"
