"""
Unit tests for the match data model and its snapshot format.
"""
import dataclasses

import pytest

from models.match_model import (
    ALLOWED_TRANSITIONS, CardEvent, GoalEvent, MatchState, Phase, TeamStats,
)


def test_defaults():
    state = MatchState()
    assert state.phase == Phase.NOT_STARTED
    assert state.elapsed_seconds == 0
    assert state.teams == ("", "")
    assert state.statistics == {}
    assert not state.is_authenticated
    assert not state.is_configured
    assert not state.can_edit_stats


def test_events_are_immutable():
    goal = GoalEvent(player="Erik", time=10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        goal.time = 20


def test_event_ids_are_unique():
    ids = {CardEvent(player="x", time=0).id for _ in range(50)}
    assert len(ids) == 50


def test_snapshot_uses_flat_keys():
    goal = GoalEvent(player="Erik", time=75, assist="Olaf", id="g1")
    state = MatchState(
        phase=Phase.HALF_TIME, elapsed_seconds=2700, team_a="Vikings", team_b="Dragons",
        statistics={"Vikings": TeamStats(goals=(goal,), fouls=2), "Dragons": TeamStats()},
    )
    data = state.to_dict()
    assert data["phase"] == "half_time"
    assert data["currentTime"] == 2700
    assert data["team1"] == "Vikings"
    assert data["stats"]["Vikings"]["goals"] == [
        {"id": "g1", "player": "Erik", "assist": "Olaf", "time": 75, "isPenalty": False}
    ]
    assert data["stats"]["Vikings"]["fouls"] == 2
    assert MatchState.from_dict(data) == state


def test_from_dict_fills_missing_fields():
    state = MatchState.from_dict({"team1": "Lions", "team2": "Falcons", "stats": {"Lions": {}}})
    assert state.phase == Phase.NOT_STARTED
    assert state.stats_for("Lions") == TeamStats()
    assert state.stats_for("Falcons") is None


def test_from_dict_clamps_negative_counters():
    stats = TeamStats.from_dict({"shots": -3})
    assert stats.shots == 0


def test_with_team_stats_does_not_touch_original():
    state = MatchState(team_a="Vikings", team_b="Dragons",
                       statistics={"Vikings": TeamStats(), "Dragons": TeamStats()})
    updated = state.with_team_stats("Vikings", TeamStats(shots=1))
    assert state.stats_for("Vikings").shots == 0
    assert updated.stats_for("Vikings").shots == 1


def test_ended_has_no_outbound_transitions():
    assert all(Phase.ENDED not in table for table in ALLOWED_TRANSITIONS.values())


@pytest.mark.parametrize("data, error", [
    ({"stats": {"Vikings": "oops"}}, TypeError),
    ({"stats": ["Vikings"]}, TypeError),
    ({"stats": {"Vikings": {"yellowCards": [3]}}}, TypeError),
    ({"currentTime": float("inf")}, ValueError),
    ({"stats": {"Vikings": {"goals": [{"id": "g1", "time": float("nan")}]}}}, ValueError),
])
def test_from_dict_rejects_wrong_shapes(data, error):
    with pytest.raises(error):
        MatchState.from_dict(data)
