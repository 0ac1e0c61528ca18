import streamlit as st
import matplotlib.pyplot as plt
from dotenv import load_dotenv

from common.colors import pick_match_colors
from common.metrics import clock_label, format_time, phase_text
from common.plots import plot_stat_comparison
from common.ui import sidebar_header, stat_bar, team_badge
from common.utils import get_admin_password, safe_rerun
from controllers.auth_controller import check_password, logout_button, require_admin
from controllers.game_controller import get_store
from controllers.match_store import MatchStore
from controllers.stats_controller import compute_stat_comparison, event_timeline, scoreline
from models.match_model import TeamStats

# ------------------------------------------------------------
# Page setup & consistent sidebar
# ------------------------------------------------------------
SMALL_FIGSIZE = (5.2, 2.0)

st.set_page_config(page_title="Match Dashboard", page_icon="📋", layout="wide")
load_dotenv(override=False)


@st.fragment(run_every=1)
def _scoreboard(store: MatchStore):
    """Clock, score and comparison bars; refreshed every second."""
    state = store.state
    palette = pick_match_colors(state.team_a, state.team_b)
    goals_a, goals_b = scoreline(state)

    st.markdown(
        f"<div style='text-align:center;font-size:1.4rem;font-weight:600'>{clock_label(state)}</div>"
        f"<div style='text-align:center;color:gray'>{phase_text(state)}</div>",
        unsafe_allow_html=True,
    )
    c1, c2, c3, c4, c5 = st.columns([1, 1, 0.4, 1, 1])
    with c1:
        team_badge(state.team_a, palette.color_a, palette.text_a)
    with c2:
        st.markdown(f"<div style='font-size:4rem;font-weight:700;text-align:center'>{goals_a}</div>",
                    unsafe_allow_html=True)
    with c3:
        st.markdown("<div style='font-size:2.5rem;font-weight:700;text-align:center'>-</div>",
                    unsafe_allow_html=True)
    with c4:
        st.markdown(f"<div style='font-size:4rem;font-weight:700;text-align:center'>{goals_b}</div>",
                    unsafe_allow_html=True)
    with c5:
        team_badge(state.team_b, palette.color_b, palette.text_b)

    comparison = compute_stat_comparison(state)
    for _, row in comparison.iterrows():
        stat_bar(row["Stat"], int(row["TeamA"]), int(row["TeamB"]), float(row["ShareA"]), palette)


@st.dialog("Confirm New Game")
def _new_game_dialog(store: MatchStore):
    st.write("Are you sure you want to start a new game? This will reset all current game data.")
    pwd = st.text_input("Admin password", type="password", key="new_game_pwd")
    c1, c2 = st.columns(2)
    if c1.button("Cancel", use_container_width=True):
        safe_rerun()
    if c2.button("Confirm", type="primary", use_container_width=True):
        if check_password(pwd, get_admin_password()):
            store.reset_all()
            st.switch_page("main.py")
        else:
            st.error("Incorrect password")


def _goal_section(store: MatchStore, team: str, can_edit: bool):
    stats = store.state.stats_for(team) or TeamStats()
    st.markdown("#### Goals")
    for goal in stats.goals:
        tag = "(P)" if goal.is_penalty else (f"({goal.assist})" if goal.assist else "")
        c1, c2 = st.columns([5, 1])
        c1.write(f"{goal.player} {tag} {format_time(goal.time)}")
        if c2.button("🗑️", key=f"del_goal_{goal.id}", disabled=not can_edit, help="Delete goal"):
            store.delete_goal(team, goal.id)
            safe_rerun()

    with st.form(f"goal_form_{team}", clear_on_submit=True):
        player = st.text_input("Player", key=f"goal_player_{team}")
        assist = st.text_input("Assist", key=f"goal_assist_{team}")
        is_penalty = st.checkbox("Penalty", key=f"goal_penalty_{team}")
        if st.form_submit_button("Add Goal", disabled=not can_edit, use_container_width=True):
            # A penalty has no assist.
            store.record_goal(team, player, "" if is_penalty else assist, is_penalty)
            safe_rerun()


def _card_section(store: MatchStore, team: str, kind: str, can_edit: bool):
    stats = store.state.stats_for(team) or TeamStats()
    cards = stats.red_cards if kind == "red" else stats.yellow_cards
    st.markdown(f"#### {kind.capitalize()} Cards ({len(cards)})")
    for card in cards:
        c1, c2 = st.columns([5, 1])
        c1.write(f"{card.player} {format_time(card.time)}")
        if c2.button("🗑️", key=f"del_{kind}_{card.id}", disabled=not can_edit, help="Delete card"):
            store.delete_card(team, kind, card.id)
            safe_rerun()

    with st.form(f"{kind}_card_form_{team}", clear_on_submit=True):
        player = st.text_input("Player", key=f"{kind}_card_player_{team}")
        if st.form_submit_button(f"Add {kind.capitalize()} Card", disabled=not can_edit, use_container_width=True):
            store.record_card(team, kind, player)
            safe_rerun()


def _counter(store: MatchStore, team: str, counter: str, can_edit: bool):
    value = getattr(store.state.stats_for(team) or TeamStats(), counter)
    st.markdown(f"**{counter.capitalize()}**")
    c1, c2, c3 = st.columns([1, 1, 1])
    if c1.button("➖", key=f"dec_{counter}_{team}", disabled=not can_edit or value == 0):
        store.adjust_counter(team, counter, -1)
        safe_rerun()
    c2.markdown(f"<div style='text-align:center;font-size:1.3rem;font-weight:600'>{value}</div>",
                unsafe_allow_html=True)
    if c3.button("➕", key=f"inc_{counter}_{team}", disabled=not can_edit):
        store.adjust_counter(team, counter, 1)
        safe_rerun()


def main():
    require_admin()
    store = get_store()
    state = store.state

    if not state.is_configured:
        st.switch_page("main.py")

    sidebar_header(admin=True, match_label=f"{state.team_a} vs {state.team_b}")
    logout_button(store)

    head, clock_btn, new_btn = st.columns([4, 1, 1])
    head.header("Match Dashboard")
    with clock_btn:
        st.page_link("pages/2_Game_Clock.py", label="Game Clock", icon="⏱️")
    if new_btn.button("🔄 New Game", use_container_width=True):
        _new_game_dialog(store)

    _scoreboard(store)

    with st.expander("Comparison chart"):
        palette = pick_match_colors(state.team_a, state.team_b)
        fig, ax = plt.subplots(figsize=SMALL_FIGSIZE)
        plot_stat_comparison(
            compute_stat_comparison(state), state.team_a, state.team_b,
            colors_map=palette.as_map(state.team_a, state.team_b), ax=ax,
        )
        st.pyplot(fig, use_container_width=False)
        plt.close(fig)

    # ------------------------------------------------------------
    # Game management (editing only while the clock is running)
    # ------------------------------------------------------------
    st.subheader("Game Management")
    can_edit = state.can_edit_stats
    if not can_edit:
        st.info(f"{phase_text(state)}: statistics can only be edited while the game clock is running.")

    for team, tab in zip(state.teams, st.tabs(list(state.teams))):
        with tab:
            _goal_section(store, team, can_edit)
            red, yellow = st.columns(2)
            with red:
                _card_section(store, team, "red", can_edit)
            with yellow:
                _card_section(store, team, "yellow", can_edit)
            for col, counter in zip(st.columns(3), ("shots", "saves", "fouls")):
                with col:
                    _counter(store, team, counter, can_edit)

    timeline = event_timeline(state)
    if not timeline.empty:
        st.subheader("Match Events")
        st.dataframe(
            timeline[["Clock", "Team", "Event", "Player", "Detail"]],
            use_container_width=True,
            hide_index=True,
        )


if __name__ == "__main__":
    main()
