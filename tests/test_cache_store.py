from __future__ import annotations

import json

from sports_hub.core.enums import DataKind
from sports_hub.core.records import MatchRecord, MatchSplit, StandingsRow
from sports_hub.db import DatabaseConfig, open_storage
from sports_hub.db.repos.kv_repo import KeyValueRepository
from sports_hub.storage.cache_store import CacheStore, cache_key

T0 = 1_760_000_000_000


def _make_repo() -> KeyValueRepository:
    return KeyValueRepository(open_storage(DatabaseConfig("sqlite+pysqlite:///:memory:")))


def _row(position: int, team: str, points: int) -> StandingsRow:
    return StandingsRow(
        position=position,
        team=team,
        played=10,
        wins=points // 3,
        draws=points % 3,
        losses=10 - points // 3 - points % 3,
        goals_for=20,
        goals_against=10,
        goal_diff=10,
        points=points,
    )


def test_cache_keys_follow_stored_names() -> None:
    assert cache_key(DataKind.STANDINGS, "39") == "cache_standings_39"
    assert cache_key(DataKind.UPCOMING, "135") == "cache_upcoming_135"
    assert cache_key(DataKind.RECENT, "61") == "cache_results_61"
    assert cache_key(DataKind.SCORERS, "78") == "cache_scorers_78"
    assert cache_key(DataKind.ASSISTS, "39") == "cache_assists_39"
    assert cache_key(DataKind.MATCHES, "six-nations") == "cache_matches_six-nations"


def test_entry_is_fresh_strictly_inside_ttl() -> None:
    now = [T0]
    store = CacheStore(repo=_make_repo(), ttl_s=600, _now_ms=lambda: now[0])

    store.put("cache_standings_39", [{"x": 1}])

    now[0] = T0 + 599_999
    entry = store.get("cache_standings_39")
    assert entry is not None
    assert entry.data == [{"x": 1}]
    assert entry.timestamp == T0

    now[0] = T0 + 600_000
    assert store.get("cache_standings_39") is None


def test_expired_entry_is_not_deleted() -> None:
    now = [T0]
    repo = _make_repo()
    store = CacheStore(repo=repo, ttl_s=600, _now_ms=lambda: now[0])
    store.put("cache_standings_39", [])

    now[0] = T0 + 3_600_000
    assert store.get("cache_standings_39") is None
    assert repo.get_value("cache_standings_39") is not None


def test_stored_value_shape() -> None:
    repo = _make_repo()
    store = CacheStore(repo=repo, _now_ms=lambda: T0)

    store.store(DataKind.STANDINGS, "39", (_row(1, "Arsenal", 30),))

    raw = json.loads(repo.get_value("cache_standings_39") or "")
    assert raw["timestamp"] == T0
    assert raw["data"][0]["team"] == "Arsenal"
    assert raw["data"][0]["goalsFor"] == 20
    assert raw["data"][0]["goalDiff"] == 10


def test_typed_load_returns_records() -> None:
    store = CacheStore(repo=_make_repo(), _now_ms=lambda: T0)
    rows = (_row(1, "Arsenal", 30), _row(2, "Chelsea", 27))
    store.store(DataKind.STANDINGS, "39", rows)

    assert store.load(DataKind.STANDINGS, "39") == rows
    assert store.load(DataKind.STANDINGS, "135") is None


def test_match_split_survives_the_cache() -> None:
    store = CacheStore(repo=_make_repo(), _now_ms=lambda: T0)
    split = MatchSplit(
        upcoming=(
            MatchRecord("2026-02-21", "14:10", "England", "Ireland", None, None, "Scheduled", 1),
        ),
        recent=(MatchRecord("2026-02-15", "16:45", "England", "Ireland", 34, 21, "Full Time", 0),),
    )
    store.store(DataKind.MATCHES, "six-nations", split)

    loaded = store.load(DataKind.MATCHES, "six-nations")
    assert loaded == split


def test_corrupt_entries_are_misses() -> None:
    repo = _make_repo()
    store = CacheStore(repo=repo, _now_ms=lambda: T0)

    repo.set_value("cache_standings_39", "{not json")
    assert store.get("cache_standings_39") is None
    assert store.load(DataKind.STANDINGS, "39") is None

    repo.set_value("cache_upcoming_39", json.dumps({"data": []}))
    assert store.get("cache_upcoming_39") is None

    # Well-formed envelope, rows missing required fields.
    repo.set_value("cache_results_39", json.dumps({"data": [{"team": "x"}], "timestamp": T0}))
    assert store.get("cache_results_39") is not None
    assert store.load(DataKind.RECENT, "39") is None

    # Rows that are not objects.
    repo.set_value("cache_upcoming_39", json.dumps({"data": [1, 2], "timestamp": T0}))
    assert store.load(DataKind.UPCOMING, "39") is None
    repo.set_value(
        "cache_matches_six-nations",
        json.dumps({"data": {"upcoming": ["x"], "recent": []}, "timestamp": T0}),
    )
    assert store.load(DataKind.MATCHES, "six-nations") is None

    # json reads 1e400 as inf.
    repo.set_value("cache_scorers_39", '{"data": [], "timestamp": 1e400}')
    assert store.get("cache_scorers_39") is None


def test_clear_only_touches_cache_namespace() -> None:
    repo = _make_repo()
    store = CacheStore(repo=repo, _now_ms=lambda: T0)
    store.put("cache_standings_39", [])
    store.put("cache_matches_six-nations", {"upcoming": [], "recent": []})
    repo.set_value("quota_calls_today", "7")
    repo.set_value("settings_api_key", "k")

    assert store.clear() == 2
    assert repo.keys_with_prefix("cache_") == []
    assert repo.get_value("quota_calls_today") == "7"
    assert repo.get_value("settings_api_key") == "k"
    assert store.clear() == 0
