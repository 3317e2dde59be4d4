from __future__ import annotations

from datetime import tzinfo
from zoneinfo import ZoneInfo

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # DB
    database_url: str = Field(
        default="sqlite+pysqlite:///./sports_hub.db",
        validation_alias="DATABASE_URL",
    )
    db_echo: bool = False

    # api-football (primary)
    api_football_key: str | None = Field(default=None, repr=False)
    api_football_base_url: str = "https://v3.football.api-sports.io"
    api_football_host: str = "v3.football.api-sports.io"

    # espn (secondary)
    espn_base_url: str = "https://site.api.espn.com/apis"

    http_timeout_s: float = 15.0

    # Resolution
    source_order: list[str] = ["api_football", "espn", "curated"]
    cache_ttl_seconds: int = 10 * 60
    fixture_window_days: int = 14
    mock_seed: int | None = None

    # Quota (advisory only)
    quota_daily_limit: int = 100
    quota_high_threshold: int = 80
    quota_info_threshold: int = 50

    timezone: str | None = None
    log_level: str = "INFO"

    # -----------------------------
    # Helpers
    # -----------------------------

    def local_tz(self) -> tzinfo | None:
        """Display timezone; None means the system local zone."""
        if not self.timezone:
            return None
        return ZoneInfo(self.timezone)


settings = Settings()
