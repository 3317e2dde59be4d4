from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable

from sports_hub.core.enums import DataKind
from sports_hub.core.records import KindData, decode_kind_data, encode_kind_data
from sports_hub.db.repos.kv_repo import KeyValueRepository

logger = logging.getLogger(__name__)

CACHE_PREFIX = "cache_"
DEFAULT_TTL_S = 10 * 60


def epoch_ms() -> int:
    return int(time.time() * 1000)


def cache_key(kind: DataKind, league_id: str) -> str:
    return f"{CACHE_PREFIX}{kind.cache_slug}_{league_id}"


@dataclass(frozen=True)
class CacheEntry:
    data: Any
    timestamp: int  # epoch ms at write

    def age_ms(self, now_ms: int) -> int:
        return now_ms - self.timestamp


@dataclass
class CacheStore:
    """TTL cache over the key-value table.

    Expired entries read as absent but stay stored until the next clear().
    Unreadable entries read as absent and are logged, never raised.
    """

    repo: KeyValueRepository
    ttl_s: int = DEFAULT_TTL_S

    _now_ms: Callable[[], int] = field(default=epoch_ms, repr=False)

    @property
    def ttl_ms(self) -> int:
        return self.ttl_s * 1000

    def get(self, key: str) -> CacheEntry | None:
        raw = self.repo.get_value(key)
        if raw is None:
            return None

        try:
            parsed = json.loads(raw)
            entry = CacheEntry(data=parsed["data"], timestamp=int(parsed["timestamp"]))
        except (ValueError, TypeError, KeyError, OverflowError) as e:
            logger.warning("[CACHE] Unreadable entry %s treated as miss: %s", key, e)
            return None

        if entry.age_ms(self._now_ms()) < self.ttl_ms:
            return entry
        return None

    def put(self, key: str, data: Any) -> CacheEntry:
        entry = CacheEntry(data=data, timestamp=self._now_ms())
        self.repo.set_value(key, json.dumps({"data": entry.data, "timestamp": entry.timestamp}))
        return entry

    def clear(self) -> int:
        removed = self.repo.delete_prefix(CACHE_PREFIX)
        logger.info("[CACHE] Cleared %d entries", removed)
        return removed

    # -----------------------------
    # Typed access
    # -----------------------------

    def load(self, kind: DataKind, league_id: str) -> KindData | None:
        key = cache_key(kind, league_id)
        entry = self.get(key)
        if entry is None:
            return None
        try:
            return decode_kind_data(kind, entry.data)
        except (ValueError, TypeError, KeyError) as e:
            logger.warning(
                "[CACHE] Malformed %s payload under %s treated as miss: %s", kind.value, key, e
            )
            return None

    def store(self, kind: DataKind, league_id: str, data: KindData) -> None:
        self.put(cache_key(kind, league_id), encode_kind_data(data))
