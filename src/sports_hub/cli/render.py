"""Plain-text rendering of a loaded dashboard. Never re-sorts or filters."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from sports_hub.core.records import MatchRecord, PlayerStatRow, StandingsRow
from sports_hub.services.dashboard import Dashboard


def _signed(value: float | int) -> str:
    return f"+{value}" if value > 0 else str(value)


def format_date(value: str) -> str:
    try:
        d = date.fromisoformat(value)
    except ValueError:
        return value
    return f"{d:%b} {d.day}, {d.year}"


def standings_lines(rows: Sequence[StandingsRow], *, show_goal_diff: bool = True) -> list[str]:
    if not rows:
        return ["No standings data available"]

    width = max(len(r.team) for r in rows)
    header = f"{'Pos':>3}  {'Team':<{width}}  {'P':>3} {'W':>3} {'D':>3} {'L':>3}"
    if show_goal_diff:
        header += f" {'GD':>4}"
    header += f" {'Pts':>4}"

    lines = [header]
    for r in rows:
        line = (
            f"{r.position:>3}  {r.team:<{width}}  "
            f"{r.played:>3} {r.wins:>3} {r.draws:>3} {r.losses:>3}"
        )
        if show_goal_diff:
            line += f" {_signed(r.goal_diff):>4}"
        line += f" {r.points:>4}"
        lines.append(line)
    return lines


def match_lines(matches: Sequence[MatchRecord]) -> list[str]:
    if not matches:
        return ["No matches available"]

    lines = []
    for m in matches:
        score = f"{m.home_score} - {m.away_score}" if m.is_played else "vs"
        lines.append(
            f"{format_date(m.date)} {m.time}  {m.home_team} {score} {m.away_team}  ({m.status})"
        )
    return lines


def player_lines(rows: Sequence[PlayerStatRow]) -> list[str]:
    if not rows:
        return ["No data available"]
    return [f"{p.rank:>2}. {p.name} ({p.team})  {p.stat}" for p in rows]


def status_line(dashboard: Dashboard, *, has_key: bool, daily_limit: int) -> str:
    line = f"Updated: {dashboard.loaded_at:%H:%M}"
    if has_key:
        line += f" | API: {dashboard.quota_count}/{daily_limit}"
    return line


def dashboard_lines(dashboard: Dashboard, *, has_key: bool, daily_limit: int) -> list[str]:
    show_gd = dashboard.league.has_player_stats
    lines = [dashboard.league.name, "", "Standings"]
    lines += standings_lines(dashboard.standings, show_goal_diff=show_gd)
    lines += ["", "Upcoming"] + match_lines(dashboard.upcoming)
    lines += ["", "Recent results"] + match_lines(dashboard.recent)
    if dashboard.show_player_stats:
        lines += ["", "Top scorers"] + player_lines(dashboard.scorers)
        lines += ["", "Top assists"] + player_lines(dashboard.assists)
    lines += ["", status_line(dashboard, has_key=has_key, daily_limit=daily_limit)]
    return lines
