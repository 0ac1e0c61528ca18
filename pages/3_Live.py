"""
Public, read-only live page for spectators.

No login is required and nothing on this page can change the match: it only
reads `store.state` and re-renders once per second through a fragment.
"""

import html

import streamlit as st
from dotenv import load_dotenv

from common.colors import pick_match_colors
from common.metrics import clock_label, phase_text
from common.ui import scorer_html, sidebar_header, stat_bar, team_badge
from controllers.game_controller import get_store
from controllers.match_store import MatchStore
from controllers.stats_controller import compute_stat_comparison, goal_scorers, scoreline

st.set_page_config(page_title="Live Match", page_icon="📺", layout="centered")
load_dotenv(override=False)


def _scorers(state, team: str):
    df = goal_scorers(state, team)
    for _, g in df.iterrows():
        st.markdown(
            scorer_html(g["Player"], g["Assist"], g["Minute"], bool(g["Penalty"])),
            unsafe_allow_html=True,
        )


@st.fragment(run_every=1)
def _live(store: MatchStore):
    state = store.state
    if not state.is_configured:
        st.info("No game in progress")
        return

    palette = pick_match_colors(state.team_a, state.team_b)
    goals_a, goals_b = scoreline(state)

    with st.container(border=True):
        st.markdown(
            f"<h3 style='text-align:center'>{phase_text(state)}</h3>"
            f"<div style='text-align:center;font-size:2.5rem;font-weight:700'>{clock_label(state)}</div>",
            unsafe_allow_html=True,
        )
        c1, c2, c3 = st.columns([2, 1, 2])
        for col, team, goals, color, text in (
            (c1, state.team_a, goals_a, palette.color_a, palette.text_a),
            (c3, state.team_b, goals_b, palette.color_b, palette.text_b),
        ):
            with col:
                team_badge(team, color, text, size=64)
                st.markdown(
                    f"<div style='text-align:center;font-weight:600'>{html.escape(team)}</div>"
                    f"<div style='text-align:center;font-size:2.2rem;font-weight:700'>{goals}</div>",
                    unsafe_allow_html=True,
                )
        c2.markdown("<div style='text-align:center;font-size:2rem;font-weight:700;padding-top:3rem'>-</div>",
                    unsafe_allow_html=True)

        s1, s2 = st.columns(2)
        with s1:
            _scorers(state, state.team_a)
        with s2:
            _scorers(state, state.team_b)

    with st.container(border=True):
        st.markdown("<h4 style='text-align:center'>Match Statistics</h4>", unsafe_allow_html=True)
        for _, row in compute_stat_comparison(state).iterrows():
            stat_bar(row["Stat"], int(row["TeamA"]), int(row["TeamB"]), float(row["ShareA"]), palette)


def main():
    store = get_store()
    sidebar_header(admin=bool(st.session_state.get("authenticated")))

    st.title("Soccer League Live Match")
    _live(store)


if __name__ == "__main__":
    main()
