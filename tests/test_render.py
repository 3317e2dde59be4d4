from __future__ import annotations

from datetime import datetime

from sports_hub.cli.render import dashboard_lines, match_lines, standings_lines
from sports_hub.core.catalog import get_league
from sports_hub.core.records import MatchRecord, StandingsRow
from sports_hub.services.dashboard import Dashboard


def test_matches_show_score_or_vs() -> None:
    lines = match_lines(
        [
            MatchRecord("2026-02-15", "16:45", "England", "Ireland", 34, 21, "Full Time", 0),
            MatchRecord("2026-02-21", "14:10", "Wales", "Scotland", None, None, "Scheduled", 1),
        ]
    )
    assert lines == [
        "Feb 15, 2026 16:45  England 34 - 21 Ireland  (Full Time)",
        "Feb 21, 2026 14:10  Wales vs Scotland  (Scheduled)",
    ]
    assert match_lines([]) == ["No matches available"]


def test_standings_keep_given_order() -> None:
    rows = [
        StandingsRow(2, "Chelsea", 10, 6, 2, 2, 18, 10, 8, 20),
        StandingsRow(1, "Arsenal", 10, 7, 2, 1, 20, 8, 12, 23),
    ]
    lines = standings_lines(rows)
    assert "Chelsea" in lines[1]
    assert "+8" in lines[1]
    assert standings_lines([]) == ["No standings data available"]


def test_status_line_shows_quota_only_with_key() -> None:
    dash = Dashboard(
        league=get_league("39"),
        standings=(),
        upcoming=(),
        recent=(),
        loaded_at=datetime(2024, 9, 15, 14, 5),
        quota_count=7,
    )

    with_key = dashboard_lines(dash, has_key=True, daily_limit=100)
    without_key = dashboard_lines(dash, has_key=False, daily_limit=100)

    assert with_key[-1] == "Updated: 14:05 | API: 7/100"
    assert without_key[-1] == "Updated: 14:05"
    assert "Top scorers" in with_key
