"""
Tests for the tables shown on the dashboard and the live page.
"""
from controllers.stats_controller import (
    EVENT_COLUMNS, compute_stat_comparison, event_timeline, goal_scorers, scoreline,
)
from models.match_model import MatchState


def _play(store):
    """Small scripted first half: two Vikings goals, a card each side, some counters."""
    store.start()
    for _ in range(90):
        store.tick()
    store.record_goal("Vikings", "Erik", "Olaf")
    store.adjust_counter("Vikings", "shots", 3)
    store.adjust_counter("Dragons", "shots", 1)
    for _ in range(30):
        store.tick()
    store.record_card("Dragons", "yellow", "Ying")
    store.record_card("Vikings", "red", "Olaf")
    store.record_goal("Vikings", "Erik", is_penalty=True)
    return store


def test_comparison_rows(store):
    df = compute_stat_comparison(_play(store).state).set_index("Stat")
    assert list(df.index) == ["Shots", "Saves", "Fouls", "Yellow Cards", "Red Cards"]
    assert (df.loc["Shots", "TeamA"], df.loc["Shots", "TeamB"]) == (3, 1)
    assert df.loc["Shots", "ShareA"] == 75.0
    assert df.loc["Saves", "ShareA"] == 50.0
    assert (df.loc["Yellow Cards", "TeamA"], df.loc["Yellow Cards", "TeamB"]) == (0, 1)
    assert df.loc["Red Cards", "ShareA"] == 100.0


def test_comparison_without_match():
    df = compute_stat_comparison(MatchState())
    assert (df["TeamA"] == 0).all() and (df["ShareA"] == 50.0).all()


def test_scoreline(store):
    assert scoreline(_play(store).state) == (2, 0)
    assert scoreline(MatchState()) == (0, 0)


def test_goal_scorers(store):
    df = goal_scorers(_play(store).state, "Vikings")
    assert df["Player"].tolist() == ["Erik", "Erik"]
    assert df["Assist"].tolist() == ["Olaf", ""]
    assert df["Penalty"].tolist() == [False, True]
    assert df["Minute"].tolist() == ["1'", "2'"]
    assert goal_scorers(store.state, "Dragons").empty


def test_event_timeline_is_chronological(store):
    df = event_timeline(_play(store).state)
    assert list(df.columns) == EVENT_COLUMNS
    assert df["Seconds"].tolist() == [90, 120, 120, 120]
    assert df.iloc[0]["Detail"] == "Assist: Olaf"
    assert df.iloc[0]["Clock"] == "01:30"
    assert set(df["Event"]) == {"Goal", "Yellow Card", "Red Card"}


def test_event_timeline_empty(store):
    df = event_timeline(store.state)
    assert df.empty
    assert list(df.columns) == EVENT_COLUMNS
