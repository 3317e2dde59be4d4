from __future__ import annotations

import pytest

from sports_hub.core.enums import SportEnum
from sports_hub.db import DatabaseConfig, open_storage
from sports_hub.db.repos.kv_repo import KeyValueRepository
from sports_hub.storage.preferences import API_KEY_KEY, LEAGUE_KEY, Preferences


def _make_prefs() -> Preferences:
    return Preferences(
        repo=KeyValueRepository(open_storage(DatabaseConfig("sqlite+pysqlite:///:memory:")))
    )


def test_api_key_set_and_cleared() -> None:
    prefs = _make_prefs()
    assert prefs.api_key is None

    prefs.set_api_key("  abc123 ")
    assert prefs.api_key == "abc123"
    assert prefs.repo.get_value(API_KEY_KEY) == "abc123"

    prefs.set_api_key("")
    assert prefs.api_key is None
    assert prefs.repo.get_value(API_KEY_KEY) is None


def test_selection_defaults_and_persists() -> None:
    prefs = _make_prefs()
    assert prefs.sport == SportEnum.FOOTBALL
    assert prefs.league_id == "39"

    assert prefs.select(SportEnum.RUGBY) == "six-nations"
    assert prefs.sport == SportEnum.RUGBY
    assert prefs.league_id == "six-nations"

    prefs.select(SportEnum.FOOTBALL, "61")
    assert prefs.league_id == "61"


def test_selection_rejects_league_of_other_sport() -> None:
    prefs = _make_prefs()
    with pytest.raises(ValueError):
        prefs.select(SportEnum.RUGBY, "39")
    with pytest.raises(KeyError):
        prefs.select(SportEnum.FOOTBALL, "nope")


def test_stale_stored_league_falls_back_to_default() -> None:
    prefs = _make_prefs()
    prefs.repo.set_value(LEAGUE_KEY, "retired-league")
    assert prefs.league_id == "39"
