from __future__ import annotations
import pandas as pd

from common.constants import STAT_ROWS
from common.metrics import format_time, goal_minute, split_percent
from models.match_model import MatchState, TeamStats

EVENT_COLUMNS = ["Minute", "Clock", "Team", "Event", "Player", "Detail", "Seconds"]


def _stat_value(stats: TeamStats | None, attr: str, is_list: bool) -> int:
    if stats is None:
        return 0
    value = getattr(stats, attr)
    return len(value) if is_list else int(value)


def compute_stat_comparison(state: MatchState) -> pd.DataFrame:
    """One row per compared statistic: values for both teams and each side's bar share."""
    stats_a, stats_b = state.stats_for(state.team_a), state.stats_for(state.team_b)

    rows = []
    for label, attr, is_list in STAT_ROWS:
        a = _stat_value(stats_a, attr, is_list)
        b = _stat_value(stats_b, attr, is_list)
        share_a, share_b = split_percent(a, b)
        rows.append({"Stat": label, "TeamA": a, "TeamB": b, "ShareA": share_a, "ShareB": share_b})
    return pd.DataFrame(rows, columns=["Stat", "TeamA", "TeamB", "ShareA", "ShareB"])


def scoreline(state: MatchState) -> tuple[int, int]:
    stats_a, stats_b = state.stats_for(state.team_a), state.stats_for(state.team_b)
    return (stats_a.score if stats_a else 0), (stats_b.score if stats_b else 0)


def goal_scorers(state: MatchState, team: str) -> pd.DataFrame:
    """Goals of one team in recording order, formatted for the public page."""
    stats = state.stats_for(team)
    goals = stats.goals if stats else ()
    return pd.DataFrame(
        {
            "Player": [g.player for g in goals],
            "Assist": [g.assist for g in goals],
            "Penalty": [g.is_penalty for g in goals],
            "Minute": [goal_minute(g.time) for g in goals],
        },
        columns=["Player", "Assist", "Penalty", "Minute"],
    )


def event_timeline(state: MatchState) -> pd.DataFrame:
    """All goals and cards of both teams, ordered by match time."""
    rows = []
    for team in (state.team_a, state.team_b):
        stats = state.stats_for(team)
        if stats is None:
            continue
        for g in stats.goals:
            detail = "Penalty" if g.is_penalty else (f"Assist: {g.assist}" if g.assist else "")
            rows.append((team, "Goal", g.player, detail, g.time))
        for c in stats.yellow_cards:
            rows.append((team, "Yellow Card", c.player, "", c.time))
        for c in stats.red_cards:
            rows.append((team, "Red Card", c.player, "", c.time))

    df = pd.DataFrame(rows, columns=["Team", "Event", "Player", "Detail", "Seconds"])
    if df.empty:
        return pd.DataFrame(columns=EVENT_COLUMNS)

    # Stable sort keeps recording order for events logged in the same second.
    df = df.sort_values(by=["Seconds"], kind="mergesort").reset_index(drop=True)
    df["Minute"] = df["Seconds"].map(goal_minute)
    df["Clock"] = df["Seconds"].map(format_time)
    return df[EVENT_COLUMNS]
