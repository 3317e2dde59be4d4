"""Normalized record shapes shared by every source and the renderer.

Serialized form uses the camelCase field names of the cache value shape
(``{"data": ..., "timestamp": ...}``), so cached payloads stay readable.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from sports_hub.core.coerce import Number
from sports_hub.core.enums import DataKind


def _as_row(data: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"Expected object for {name}, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class StandingsRow:
    position: int
    team: str
    played: int
    wins: int
    draws: int
    losses: int
    goals_for: Number
    goals_against: Number
    goal_diff: Number
    points: Number

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": self.position,
            "team": self.team,
            "played": self.played,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "goalsFor": self.goals_for,
            "goalsAgainst": self.goals_against,
            "goalDiff": self.goal_diff,
            "points": self.points,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StandingsRow:
        data = _as_row(data, "StandingsRow")
        return cls(
            position=int(data["position"]),
            team=str(data["team"]),
            played=int(data["played"]),
            wins=int(data["wins"]),
            draws=int(data["draws"]),
            losses=int(data["losses"]),
            goals_for=data["goalsFor"],
            goals_against=data["goalsAgainst"],
            goal_diff=data["goalDiff"],
            points=data["points"],
        )


@dataclass(frozen=True)
class MatchRecord:
    date: str  # YYYY-MM-DD
    time: str  # HH:MM, local
    home_team: str
    away_team: str
    home_score: int | None
    away_score: int | None
    status: str
    timestamp: int  # epoch ms

    def __post_init__(self) -> None:
        if (self.home_score is None) != (self.away_score is None):
            raise ValueError(
                f"Scores must be both set or both absent: {self.home_score!r}/{self.away_score!r}"
            )

    @property
    def is_played(self) -> bool:
        return self.home_score is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "time": self.time,
            "homeTeam": self.home_team,
            "awayTeam": self.away_team,
            "homeScore": self.home_score,
            "awayScore": self.away_score,
            "status": self.status,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MatchRecord:
        data = _as_row(data, "MatchRecord")
        home = data.get("homeScore")
        away = data.get("awayScore")
        return cls(
            date=str(data["date"]),
            time=str(data["time"]),
            home_team=str(data["homeTeam"]),
            away_team=str(data["awayTeam"]),
            home_score=None if home is None else int(home),
            away_score=None if away is None else int(away),
            status=str(data["status"]),
            timestamp=int(data["timestamp"]),
        )


@dataclass(frozen=True)
class PlayerStatRow:
    rank: int
    name: str
    team: str
    stat: Number

    def to_dict(self) -> dict[str, Any]:
        return {"rank": self.rank, "name": self.name, "team": self.team, "stat": self.stat}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlayerStatRow:
        data = _as_row(data, "PlayerStatRow")
        return cls(
            rank=int(data["rank"]),
            name=str(data["name"]),
            team=str(data["team"]),
            stat=data["stat"],
        )


@dataclass(frozen=True)
class MatchSplit:
    upcoming: tuple[MatchRecord, ...]
    recent: tuple[MatchRecord, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "upcoming": [m.to_dict() for m in self.upcoming],
            "recent": [m.to_dict() for m in self.recent],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MatchSplit:
        data = _as_row(data, "MatchSplit")
        return cls(
            upcoming=tuple(MatchRecord.from_dict(m) for m in data["upcoming"]),
            recent=tuple(MatchRecord.from_dict(m) for m in data["recent"]),
        )


Rows = tuple[StandingsRow, ...] | tuple[MatchRecord, ...] | tuple[PlayerStatRow, ...]
KindData = Rows | MatchSplit


def is_empty(data: KindData) -> bool:
    if isinstance(data, MatchSplit):
        return not data.upcoming and not data.recent
    return len(data) == 0


def encode_kind_data(data: KindData) -> Any:
    if isinstance(data, MatchSplit):
        return data.to_dict()
    return [row.to_dict() for row in data]


def decode_kind_data(kind: DataKind, raw: Any) -> KindData:
    """Inverse of encode_kind_data. Raises ValueError/KeyError/TypeError on bad shape."""

    if kind == DataKind.MATCHES:
        if not isinstance(raw, Mapping):
            raise TypeError(f"Expected object for {kind.value}, got {type(raw).__name__}")
        return MatchSplit.from_dict(raw)

    if not isinstance(raw, Sequence) or isinstance(raw, str):
        raise TypeError(f"Expected list for {kind.value}, got {type(raw).__name__}")

    if kind == DataKind.STANDINGS:
        return tuple(StandingsRow.from_dict(r) for r in raw)
    if kind.is_match_list:
        return tuple(MatchRecord.from_dict(r) for r in raw)
    return tuple(PlayerStatRow.from_dict(r) for r in raw)
