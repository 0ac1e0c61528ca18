"""
The match store: single owner of the current `MatchState`.

Pages never assign to the state directly. They call one of the operations
below; the store builds the next snapshot from the current one, swaps it in
under a lock and then calls every subscriber with the new snapshot. The
clock driver and the snapshot storage are both just subscribers.

Two groups of operations:
    - clock/phase operations (`start`, `pause`, `resume`, `set_half_time`,
        `end_game`, `add_extra_time`, `tick`), validated against
        `ALLOWED_TRANSITIONS`;
    - ledger operations (`record_goal`, `delete_goal`, `record_card`,
        `delete_card`, `adjust_counter`), accepted only while the match is
        LIVE.

Anything that is not allowed in the current phase is a silent no-op: the
operation returns `False`/`None` and nothing is published. Pages disable the
matching controls, so hitting this path is rare and not an error.
"""

from __future__ import annotations
import threading
from dataclasses import replace
from typing import Callable, List, Optional

from common.constants import TEAMS
from common.logger import get_logger
from models.match_model import (
    ALLOWED_TRANSITIONS, CARD_KINDS, COUNTERS, EXTRA_TIME_PHASES,
    CardEvent, GoalEvent, MatchState, Phase, TeamStats,
)

Subscriber = Callable[[MatchState], None]

log = get_logger("store")


class MatchStore:
    def __init__(self, initial: Optional[MatchState] = None):
        self._state = initial or MatchState()
        # Re-entrant: subscribers may read `state` while being notified.
        self.lock = threading.RLock()
        self._subscribers: List[Subscriber] = []

    # ---------- Subscription ----------
    @property
    def state(self) -> MatchState:
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register `callback` for every committed change; returns an unsubscribe function."""
        with self.lock:
            self._subscribers.append(callback)

        def _unsubscribe() -> None:
            with self.lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return _unsubscribe

    def _commit(self, new_state: MatchState) -> MatchState:
        # Caller holds the lock.
        self._state = new_state
        for callback in list(self._subscribers):
            callback(new_state)
        return new_state

    # ---------- Match setup ----------
    def configure_match(self, team_a: str, team_b: str) -> MatchState:
        if not team_a or not team_b:
            raise ValueError("both teams must be selected")
        if team_a == team_b:
            raise ValueError(f"a team cannot play itself: {team_a!r}")
        unknown = [t for t in (team_a, team_b) if t not in TEAMS]
        if unknown:
            raise ValueError(f"unknown team(s): {', '.join(unknown)}")

        with self.lock:
            log.info("New match configured: %s vs %s", team_a, team_b)
            return self._commit(replace(
                self._state,
                phase=Phase.NOT_STARTED,
                elapsed_seconds=0,
                team_a=team_a,
                team_b=team_b,
                statistics={team_a: TeamStats(), team_b: TeamStats()},
            ))

    def reset_all(self) -> MatchState:
        with self.lock:
            log.info("Match reset")
            return self._commit(MatchState(is_authenticated=self._state.is_authenticated))

    def _set_authenticated(self, value: bool) -> MatchState:
        with self.lock:
            if self._state.is_authenticated == value:
                return self._state
            return self._commit(replace(self._state, is_authenticated=value))

    def login(self) -> MatchState:
        return self._set_authenticated(True)

    def logout(self) -> MatchState:
        return self._set_authenticated(False)

    # ---------- Clock & phase ----------
    def _transition(self, trigger: str) -> bool:
        with self.lock:
            target = ALLOWED_TRANSITIONS[trigger].get(self._state.phase)
            if target is None:
                log.debug("Ignoring %s in phase %s", trigger, self._state.phase.value)
                return False
            log.info("Clock %s: %s -> %s at %ss", trigger, self._state.phase.value,
                     target.value, self._state.elapsed_seconds)
            self._commit(replace(self._state, phase=target))
            return True

    def start(self) -> bool:
        return self._transition("start")

    def pause(self) -> bool:
        return self._transition("pause")

    def resume(self) -> bool:
        return self._transition("resume")

    def set_half_time(self) -> bool:
        return self._transition("set_half_time")

    def end_game(self) -> bool:
        return self._transition("end_game")

    def add_extra_time(self, minutes: int) -> bool:
        minutes = int(minutes)
        with self.lock:
            if minutes <= 0 or self._state.phase not in EXTRA_TIME_PHASES:
                return False
            log.info("Adding %d minute(s) of extra time", minutes)
            self._commit(replace(self._state, elapsed_seconds=self._state.elapsed_seconds + minutes * 60))
            return True

    def tick(self, cancelled: Optional[threading.Event] = None) -> bool:
        """Advance the clock by one second if LIVE and the issuing ticker is still current."""
        with self.lock:
            if cancelled is not None and cancelled.is_set():
                return False
            if self._state.phase != Phase.LIVE:
                return False
            self._commit(replace(self._state, elapsed_seconds=self._state.elapsed_seconds + 1))
            return True

    # ---------- Ledger ----------
    def _editable_stats(self, team: str) -> Optional[TeamStats]:
        # Caller holds the lock.
        if not self._state.can_edit_stats:
            log.debug("Ledger locked in phase %s", self._state.phase.value)
            return None
        stats = self._state.stats_for(team)
        if stats is None:
            log.debug("Team %r is not part of the current match", team)
        return stats

    def record_goal(self, team: str, player: str, assist: str = "", is_penalty: bool = False) -> Optional[GoalEvent]:
        with self.lock:
            stats = self._editable_stats(team)
            if stats is None:
                return None
            goal = GoalEvent(
                player=player.strip(),
                assist=assist.strip(),
                is_penalty=is_penalty,
                time=self._state.elapsed_seconds,
            )
            self._commit(self._state.with_team_stats(team, replace(stats, goals=stats.goals + (goal,))))
            log.info("Goal for %s by %s at %ss", team, goal.player or "?", goal.time)
            return goal

    def delete_goal(self, team: str, goal_id: str) -> bool:
        with self.lock:
            stats = self._editable_stats(team)
            if stats is None:
                return False
            goals = tuple(g for g in stats.goals if g.id != goal_id)
            if len(goals) == len(stats.goals):
                return False
            self._commit(self._state.with_team_stats(team, replace(stats, goals=goals)))
            return True

    def record_card(self, team: str, kind: str, player: str) -> Optional[CardEvent]:
        attr = CARD_KINDS.get(kind)
        if attr is None:
            raise ValueError(f"unknown card kind {kind!r}; expected one of {sorted(CARD_KINDS)}")
        with self.lock:
            stats = self._editable_stats(team)
            if stats is None:
                return None
            card = CardEvent(player=player.strip(), time=self._state.elapsed_seconds)
            self._commit(self._state.with_team_stats(team, replace(stats, **{attr: getattr(stats, attr) + (card,)})))
            log.info("%s card for %s (%s) at %ss", kind.capitalize(), team, card.player or "?", card.time)
            return card

    def delete_card(self, team: str, kind: str, card_id: str) -> bool:
        attr = CARD_KINDS.get(kind)
        if attr is None:
            raise ValueError(f"unknown card kind {kind!r}; expected one of {sorted(CARD_KINDS)}")
        with self.lock:
            stats = self._editable_stats(team)
            if stats is None:
                return False
            cards = getattr(stats, attr)
            kept = tuple(c for c in cards if c.id != card_id)
            if len(kept) == len(cards):
                return False
            self._commit(self._state.with_team_stats(team, replace(stats, **{attr: kept})))
            return True

    def adjust_counter(self, team: str, counter: str, delta: int) -> Optional[int]:
        if counter not in COUNTERS:
            raise ValueError(f"unknown counter {counter!r}; expected one of {COUNTERS}")
        with self.lock:
            stats = self._editable_stats(team)
            if stats is None:
                return None
            value = max(0, getattr(stats, counter) + int(delta))
            self._commit(self._state.with_team_stats(team, replace(stats, **{counter: value})))
            return value
