from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from sports_hub.core.enums import QuotaLevel
from sports_hub.db.repos.kv_repo import KeyValueRepository

logger = logging.getLogger(__name__)

CALLS_KEY = "quota_calls_today"
DATE_KEY = "quota_date"


@dataclass(frozen=True)
class QuotaWarning:
    level: QuotaLevel
    count: int
    limit: int
    message: str


@dataclass
class QuotaTracker:
    """Per-day counter of primary API calls.

    The ceiling is informational: warnings never block a call, the upstream
    service enforces any real limit.
    """

    repo: KeyValueRepository
    daily_limit: int = 100
    high_threshold: int = 80
    info_threshold: int = 50
    cache_minutes: int = 10

    _today: Callable[[], date] = field(default=date.today, repr=False)

    def _stamp(self) -> str:
        return self._today().isoformat()

    def _stored_count(self) -> int:
        raw = self.repo.get_value(CALLS_KEY)
        try:
            return max(0, int(raw)) if raw is not None else 0
        except ValueError:
            logger.warning("[QUOTA] Unreadable call counter %r reset to 0", raw)
            return 0

    def current_count(self) -> int:
        if self.repo.get_value(DATE_KEY) != self._stamp():
            return 0
        return self._stored_count()

    def record_call(self) -> int:
        today = self._stamp()
        if self.repo.get_value(DATE_KEY) != today:
            count = 0
            self.repo.set_value(DATE_KEY, today)
        else:
            count = self._stored_count()

        count += 1
        self.repo.set_value(CALLS_KEY, str(count))
        logger.info("[QUOTA] API calls today: %d/%d", count, self.daily_limit)
        return count

    def warning_for(self, count: int) -> QuotaWarning | None:
        if count >= self.high_threshold:
            return QuotaWarning(
                level=QuotaLevel.HIGH,
                count=count,
                limit=self.daily_limit,
                message=(
                    f"High API usage: {count}/{self.daily_limit} calls today. "
                    "Nearing daily limit!"
                ),
            )
        if count >= self.info_threshold:
            return self.reminder(count)
        return None

    def reminder(self, count: int | None = None) -> QuotaWarning:
        if count is None:
            count = self.current_count()
        return QuotaWarning(
            level=QuotaLevel.INFO,
            count=count,
            limit=self.daily_limit,
            message=(
                f"API calls today: {count}/{self.daily_limit}. "
                f"Data is cached for {self.cache_minutes} minutes."
            ),
        )
