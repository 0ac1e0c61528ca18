"""
Data model for a single match.

These dataclasses describe everything the scoreboard knows about the game in
progress. They are frozen (immutable) so a snapshot can be handed to any page
or background thread without the risk of someone changing it underneath the
store; every change produces a new object through `dataclasses.replace`.

Types:
    - `Phase`: lifecycle stage of the match (not started, live, paused,
        half time, ended).
    - `GoalEvent` / `CardEvent`: ledger entries, timestamped once with the
        elapsed match seconds at the moment they were recorded.
    - `TeamStats`: goals, cards and simple counters for one team.
    - `MatchState`: the full snapshot persisted and shared by all pages.

`to_dict` / `from_dict` convert to and from plain JSON-friendly dicts for the
storage layer. `from_dict` raises `ValueError`/`KeyError`/`TypeError` on
malformed input (non-dict sections, missing ids, non-finite numbers); the
storage layer treats that as "no snapshot".
"""

from __future__ import annotations
import math
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Phase(str, Enum):
    NOT_STARTED = "not_started"
    LIVE = "live"
    PAUSED = "paused"
    HALF_TIME = "half_time"
    ENDED = "ended"


# Phase state machine: trigger -> {from_phase: to_phase}
ALLOWED_TRANSITIONS: Dict[str, Dict[Phase, Phase]] = {
    "start":         {Phase.NOT_STARTED: Phase.LIVE},
    "pause":         {Phase.LIVE: Phase.PAUSED},
    "resume":        {Phase.PAUSED: Phase.LIVE, Phase.HALF_TIME: Phase.LIVE},
    "set_half_time": {Phase.LIVE: Phase.HALF_TIME, Phase.PAUSED: Phase.HALF_TIME},
    "end_game":      {Phase.LIVE: Phase.ENDED, Phase.PAUSED: Phase.ENDED, Phase.HALF_TIME: Phase.ENDED},
}

# Phases in which extra time may be added (the clock is "in play")
EXTRA_TIME_PHASES = frozenset({Phase.LIVE, Phase.PAUSED})

COUNTERS = ("shots", "saves", "fouls")
CARD_KINDS = {"red": "red_cards", "yellow": "yellow_cards"}


def new_event_id() -> str:
    return uuid.uuid4().hex


def _require_dict(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{what} must be a dict, got {type(data).__name__}")
    return data


def _whole_number(value: Any, what: str) -> int:
    """Integer from a stored number; infinities and NaN are rejected."""
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{what} is not a finite number: {value!r}")
    return int(number)


@dataclass(frozen=True)
class GoalEvent:
    player: str
    time: int
    assist: str = ""
    is_penalty: bool = False
    id: str = field(default_factory=new_event_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "player": self.player,
            "assist": self.assist,
            "time": self.time,
            "isPenalty": self.is_penalty,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GoalEvent":
        data = _require_dict(data, "goal")
        return cls(
            id=str(data["id"]),
            player=str(data.get("player", "")),
            assist=str(data.get("assist", "") or ""),
            time=_whole_number(data["time"], "goal time"),
            is_penalty=bool(data.get("isPenalty", False)),
        )


@dataclass(frozen=True)
class CardEvent:
    player: str
    time: int
    id: str = field(default_factory=new_event_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "player": self.player, "time": self.time}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CardEvent":
        data = _require_dict(data, "card")
        return cls(
            id=str(data["id"]),
            player=str(data.get("player", "")),
            time=_whole_number(data["time"], "card time"),
        )


@dataclass(frozen=True)
class TeamStats:
    goals: Tuple[GoalEvent, ...] = ()
    red_cards: Tuple[CardEvent, ...] = ()
    yellow_cards: Tuple[CardEvent, ...] = ()
    shots: int = 0
    saves: int = 0
    fouls: int = 0

    @property
    def score(self) -> int:
        return len(self.goals)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "goals": [g.to_dict() for g in self.goals],
            "redCards": [c.to_dict() for c in self.red_cards],
            "yellowCards": [c.to_dict() for c in self.yellow_cards],
            "shots": self.shots,
            "saves": self.saves,
            "fouls": self.fouls,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamStats":
        data = _require_dict(data, "team stats")
        return cls(
            goals=tuple(GoalEvent.from_dict(g) for g in data.get("goals", [])),
            red_cards=tuple(CardEvent.from_dict(c) for c in data.get("redCards", [])),
            yellow_cards=tuple(CardEvent.from_dict(c) for c in data.get("yellowCards", [])),
            shots=max(0, _whole_number(data.get("shots", 0), "shots")),
            saves=max(0, _whole_number(data.get("saves", 0), "saves")),
            fouls=max(0, _whole_number(data.get("fouls", 0), "fouls")),
        )


@dataclass(frozen=True)
class MatchState:
    phase: Phase = Phase.NOT_STARTED
    elapsed_seconds: int = 0
    team_a: str = ""
    team_b: str = ""
    statistics: Dict[str, TeamStats] = field(default_factory=dict)
    is_authenticated: bool = False

    @property
    def teams(self) -> Tuple[str, str]:
        return self.team_a, self.team_b

    @property
    def is_configured(self) -> bool:
        return bool(self.team_a and self.team_b)

    @property
    def can_edit_stats(self) -> bool:
        """Ledger edits are only accepted while the clock is running."""
        return self.phase == Phase.LIVE

    def stats_for(self, team: str) -> Optional[TeamStats]:
        return self.statistics.get(team)

    def with_team_stats(self, team: str, stats: TeamStats) -> "MatchState":
        return replace(self, statistics={**self.statistics, team: stats})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "currentTime": self.elapsed_seconds,
            "team1": self.team_a,
            "team2": self.team_b,
            "stats": {team: s.to_dict() for team, s in self.statistics.items()},
            "isAdmin": self.is_authenticated,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchState":
        data = _require_dict(data, "snapshot")
        elapsed = _whole_number(data.get("currentTime", 0), "currentTime")
        if elapsed < 0:
            raise ValueError(f"negative elapsed time in snapshot: {elapsed}")
        team_a, team_b = str(data.get("team1", "") or ""), str(data.get("team2", "") or "")
        if team_a and team_a == team_b:
            raise ValueError(f"snapshot has identical teams: {team_a!r}")
        return cls(
            phase=Phase(data.get("phase", Phase.NOT_STARTED.value)),
            elapsed_seconds=elapsed,
            team_a=team_a,
            team_b=team_b,
            statistics={
                str(t): TeamStats.from_dict(s)
                for t, s in _require_dict(data.get("stats") or {}, "stats").items()
            },
            is_authenticated=bool(data.get("isAdmin", False)),
        )
