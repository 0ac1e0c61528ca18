"""
Shared fixtures for the scoreboard tests.

Stores are built directly around a `MatchState`, without Streamlit or the
background ticker, so every test drives the clock by calling `tick()`.
"""

import pytest

from controllers.match_store import MatchStore
from models.match_model import MatchState, Phase, TeamStats


@pytest.fixture
def store():
    """Configured match, not started yet."""
    s = MatchStore()
    s.configure_match("Vikings", "Dragons")
    return s


@pytest.fixture
def live_store(store):
    store.start()
    return store


@pytest.fixture
def make_state():
    def _make(phase=Phase.LIVE, elapsed=0, team_a="Vikings", team_b="Dragons", **stats):
        statistics = {team_a: TeamStats(**stats), team_b: TeamStats()}
        return MatchState(phase=phase, elapsed_seconds=elapsed, team_a=team_a,
                          team_b=team_b, statistics=statistics)
    return _make


@pytest.fixture
def events():
    """Collects every snapshot published by a store."""
    seen = []

    def _attach(s):
        s.subscribe(seen.append)
        return seen
    return _attach
