from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Callable

from sports_hub.core.catalog import League
from sports_hub.core.enums import DataKind, SourceEnum
from sports_hub.core.records import KindData, is_empty
from sports_hub.ingestion.providers.base.errors import (
    ConfigError,
    EmptyResultError,
    ParseError,
    ResolutionError,
    SourceError,
)
from sports_hub.ingestion.providers.base.source import DataSource
from sports_hub.storage.cache_store import CacheStore, cache_key
from sports_hub.storage.quota import QuotaTracker, QuotaWarning

logger = logging.getLogger(__name__)

WarningSink = Callable[[QuotaWarning], None]


@dataclass(frozen=True)
class Resolution:
    kind: DataKind
    league_id: str
    data: KindData
    source: str
    from_cache: bool = False


class _KeyedLocks:
    """One asyncio.Lock per cache key, dropped when nobody holds or waits on it."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]


class ResolutionPipeline:
    """
    Cache, then each source in priority order until one yields non-empty
    normalized data. Sources are tried strictly one after another.

    Transport, parse and empty failures fall through to the next source;
    ConfigError skips a source without attempting it. Only cacheable sources
    populate the cache.
    """

    def __init__(
        self,
        *,
        sources: Sequence[DataSource],
        cache: CacheStore,
        quota: QuotaTracker,
        on_quota_warning: WarningSink | None = None,
    ) -> None:
        if not sources:
            raise ValueError("ResolutionPipeline needs at least one source")
        self.sources = list(sources)
        self.cache = cache
        self.quota = quota
        self.on_quota_warning = on_quota_warning
        self._locks = _KeyedLocks()

    async def resolve(
        self, kind: DataKind, league: League, *, use_cache: bool = True
    ) -> Resolution:
        key = cache_key(kind, league.league_id)
        async with self._locks.hold(key):
            if use_cache:
                cached = self.cache.load(kind, league.league_id)
                if cached is not None:
                    logger.debug("[PIPELINE] Cache hit %s", key)
                    return Resolution(
                        kind=kind,
                        league_id=league.league_id,
                        data=cached,
                        source=SourceEnum.CACHE.value,
                        from_cache=True,
                    )

            for source in self.sources:
                data = await self._attempt(source, kind, league)
                if data is None:
                    continue

                if source.cacheable:
                    self.cache.store(kind, league.league_id, data)
                logger.info(
                    "[PIPELINE] %s for %s served by %s",
                    kind.value,
                    league.league_id,
                    source.source_key,
                )
                return Resolution(
                    kind=kind,
                    league_id=league.league_id,
                    data=data,
                    source=source.source_key,
                )

        raise ResolutionError(f"No source produced {kind.value} for {league.league_id}")

    async def _attempt(
        self, source: DataSource, kind: DataKind, league: League
    ) -> KindData | None:
        try:
            source.ensure_supported(kind, league)
        except ConfigError as e:
            logger.debug("[PIPELINE] Skipping %s for %s: %s", source.source_key, kind.value, e)
            return None

        if source.metered:
            self._record_metered_call()

        try:
            raw = await source.fetch_raw(kind, league)
            try:
                data = source.normalize(kind, league, raw)
            except (KeyError, TypeError, ValueError) as e:
                raise ParseError(
                    f"{source.source_key} {kind.value} normalization failed: {e}"
                ) from e
            if is_empty(data):
                raise EmptyResultError(f"{source.source_key} returned no {kind.value} rows")
        except SourceError as e:
            logger.warning(
                "[PIPELINE] %s failed for %s/%s, falling through: %s",
                source.source_key,
                kind.value,
                league.league_id,
                e,
            )
            return None
        return data

    def _record_metered_call(self) -> None:
        count = self.quota.record_call()
        warning = self.quota.warning_for(count)
        if warning is None:
            return
        logger.warning("[QUOTA] %s", warning.message)
        if self.on_quota_warning is not None:
            self.on_quota_warning(warning)
