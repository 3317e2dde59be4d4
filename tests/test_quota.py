from __future__ import annotations

from datetime import date

from sports_hub.core.enums import QuotaLevel
from sports_hub.db import DatabaseConfig, open_storage
from sports_hub.db.repos.kv_repo import KeyValueRepository
from sports_hub.storage.quota import CALLS_KEY, DATE_KEY, QuotaTracker


def _make_tracker(today: list[date]) -> QuotaTracker:
    repo = KeyValueRepository(open_storage(DatabaseConfig("sqlite+pysqlite:///:memory:")))
    return QuotaTracker(repo=repo, _today=lambda: today[0])


def test_record_call_increments_and_persists() -> None:
    today = [date(2026, 2, 14)]
    tracker = _make_tracker(today)

    assert tracker.current_count() == 0
    assert tracker.record_call() == 1
    assert tracker.record_call() == 2
    assert tracker.current_count() == 2
    assert tracker.repo.get_value(CALLS_KEY) == "2"
    assert tracker.repo.get_value(DATE_KEY) == "2026-02-14"


def test_counter_resets_on_new_day() -> None:
    today = [date(2026, 2, 14)]
    tracker = _make_tracker(today)
    for _ in range(5):
        tracker.record_call()

    today[0] = date(2026, 2, 15)
    assert tracker.current_count() == 0
    assert tracker.record_call() == 1
    assert tracker.repo.get_value(DATE_KEY) == "2026-02-15"


def test_warning_thresholds() -> None:
    tracker = _make_tracker([date(2026, 2, 14)])

    assert tracker.warning_for(0) is None
    assert tracker.warning_for(49) is None

    info = tracker.warning_for(50)
    assert info is not None
    assert info.level == QuotaLevel.INFO
    assert info.message == "API calls today: 50/100. Data is cached for 10 minutes."

    still_info = tracker.warning_for(79)
    assert still_info is not None
    assert still_info.level == QuotaLevel.INFO

    high = tracker.warning_for(80)
    assert high is not None
    assert high.level == QuotaLevel.HIGH
    assert high.message == "High API usage: 80/100 calls today. Nearing daily limit!"

    over = tracker.warning_for(130)
    assert over is not None
    assert over.level == QuotaLevel.HIGH


def test_crossing_into_high_on_the_eightieth_call() -> None:
    tracker = _make_tracker([date(2026, 2, 14)])
    tracker.repo.set_value(DATE_KEY, "2026-02-14")
    tracker.repo.set_value(CALLS_KEY, "79")

    count = tracker.record_call()
    warning = tracker.warning_for(count)

    assert count == 80
    assert warning is not None
    assert warning.level == QuotaLevel.HIGH


def test_unreadable_counter_reads_as_zero() -> None:
    tracker = _make_tracker([date(2026, 2, 14)])
    tracker.repo.set_value(DATE_KEY, "2026-02-14")
    tracker.repo.set_value(CALLS_KEY, "lots")

    assert tracker.current_count() == 0
    assert tracker.record_call() == 1
