from __future__ import annotations

from typing import Any, Protocol

from sports_hub.core.catalog import League
from sports_hub.core.enums import DataKind
from sports_hub.core.records import KindData

RawPayload = Any


class DataSource(Protocol):
    """
    The resolution pipeline depends on this, not on any HTTP client.

    Each source may only support some leagues/kinds; it says so by raising
    ConfigError from ensure_supported, which makes the pipeline skip it.
    """

    source_key: str
    # Results may be written to the cache.
    cacheable: bool
    # Each attempt counts against the daily quota.
    metered: bool

    def ensure_supported(self, kind: DataKind, league: League) -> None: ...

    async def fetch_raw(self, kind: DataKind, league: League) -> RawPayload:
        """Fetch the source-specific payload; raise SourceError subclasses on failure."""
        ...

    def normalize(self, kind: DataKind, league: League, raw: RawPayload) -> KindData:
        """Map the raw payload into normalized records for `kind`."""
        ...
