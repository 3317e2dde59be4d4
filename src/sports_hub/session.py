from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable

import httpx
from sqlalchemy.orm import Session

from sports_hub.core.config import Settings, settings as default_settings
from sports_hub.db.repos.kv_repo import KeyValueRepository
from sports_hub.ingestion.pipeline import ResolutionPipeline, WarningSink
from sports_hub.ingestion.providers.api_football.source import ApiFootballSource
from sports_hub.ingestion.providers.base.client import BaseHttpClient
from sports_hub.ingestion.providers.base.registry import SourceRegistry
from sports_hub.ingestion.providers.curated.source import CuratedSource
from sports_hub.ingestion.providers.espn.client import EspnClient
from sports_hub.ingestion.providers.espn.source import EspnSource
from sports_hub.storage.cache_store import CacheStore, epoch_ms
from sports_hub.storage.preferences import Preferences
from sports_hub.storage.quota import QuotaTracker, QuotaWarning

logger = logging.getLogger(__name__)


def resolve_credential(stored: str | None, configured: str | None) -> str | None:
    """Stored key wins; blank values count as unset."""
    for value in (stored, configured):
        value = (value or "").strip()
        if value:
            return value
    return None


@dataclass
class HubSession:
    """
    Everything a resolution needs, passed explicitly instead of living in
    module globals: storage-backed cache/quota/preferences plus the
    ordered sources wired into one pipeline.
    """

    settings: Settings
    repo: KeyValueRepository
    cache: CacheStore
    quota: QuotaTracker
    preferences: Preferences
    pipeline: ResolutionPipeline
    warnings: list[QuotaWarning] = field(default_factory=list)
    http_clients: list[BaseHttpClient] = field(default_factory=list, repr=False)

    @property
    def credential(self) -> str | None:
        return resolve_credential(self.preferences.api_key, self.settings.api_football_key)

    def set_credential(self, api_key: str | None) -> None:
        """Store (or remove, when blank) the api key; cached data is dropped."""
        self.preferences.set_api_key(api_key)
        logger.info("[SESSION] API key %s", "saved" if self.preferences.api_key else "removed")
        self.cache.clear()

    def startup_notice(self) -> QuotaWarning | None:
        if self.credential and self.quota.current_count() > 0:
            return self.quota.reminder()
        return None

    async def aclose(self) -> None:
        for http in self.http_clients:
            await http.aclose()


def build_registry(
    cfg: Settings,
    *,
    credential: Callable[[], str | None],
    http_clients: list[BaseHttpClient],
    api_football_transport: httpx.AsyncBaseTransport | None = None,
    espn_transport: httpx.AsyncBaseTransport | None = None,
    today: Callable[[], date] = date.today,
) -> SourceRegistry:
    tz = cfg.local_tz()
    registry = SourceRegistry()

    def make_http(base_url: str, transport: httpx.AsyncBaseTransport | None) -> BaseHttpClient:
        http = BaseHttpClient(base_url=base_url, timeout_s=cfg.http_timeout_s, transport=transport)
        http_clients.append(http)
        return http

    registry.register(
        "api_football",
        lambda: ApiFootballSource(
            http=make_http(cfg.api_football_base_url, api_football_transport),
            credential=credential,
            host=cfg.api_football_host,
            window_days=cfg.fixture_window_days,
            tz=tz,
            _today=today,
        ),
    )
    registry.register(
        "espn",
        lambda: EspnSource(
            client=EspnClient(http=make_http(cfg.espn_base_url, espn_transport)),
            tz=tz,
        ),
    )
    registry.register(
        "curated",
        lambda: CuratedSource(seed=cfg.mock_seed, tz=tz, _today=today),
    )
    return registry


def build_session(
    db: Session,
    cfg: Settings | None = None,
    *,
    api_football_transport: httpx.AsyncBaseTransport | None = None,
    espn_transport: httpx.AsyncBaseTransport | None = None,
    now_ms: Callable[[], int] = epoch_ms,
    today: Callable[[], date] = date.today,
    on_quota_warning: WarningSink | None = None,
) -> HubSession:
    """Wire a session over an open DB session. Transports are for tests."""

    cfg = cfg or default_settings
    repo = KeyValueRepository(db)
    cache = CacheStore(repo=repo, ttl_s=cfg.cache_ttl_seconds, _now_ms=now_ms)
    quota = QuotaTracker(
        repo=repo,
        daily_limit=cfg.quota_daily_limit,
        high_threshold=cfg.quota_high_threshold,
        info_threshold=cfg.quota_info_threshold,
        cache_minutes=cfg.cache_ttl_seconds // 60,
        _today=today,
    )
    preferences = Preferences(repo=repo)
    warnings: list[QuotaWarning] = []
    http_clients: list[BaseHttpClient] = []

    def credential() -> str | None:
        return resolve_credential(preferences.api_key, cfg.api_football_key)

    def sink(warning: QuotaWarning) -> None:
        warnings.append(warning)
        if on_quota_warning is not None:
            on_quota_warning(warning)

    registry = build_registry(
        cfg,
        credential=credential,
        http_clients=http_clients,
        api_football_transport=api_football_transport,
        espn_transport=espn_transport,
        today=today,
    )
    pipeline = ResolutionPipeline(
        sources=registry.build(cfg.source_order),
        cache=cache,
        quota=quota,
        on_quota_warning=sink,
    )

    return HubSession(
        settings=cfg,
        repo=repo,
        cache=cache,
        quota=quota,
        preferences=preferences,
        pipeline=pipeline,
        warnings=warnings,
        http_clients=http_clients,
    )
