"""
Main application entry for the League Scoreboard Streamlit app.

This module defines the top-level page that the administrator sees first.
It handles:
    - application configuration (`st.set_page_config`),
    - environment variable loading via `python-dotenv`,
    - the password gate and sidebar rendering (delegated to
        `controllers.auth_controller` and `common.ui`),
    - choosing the two teams of a new match and handing them to the shared
        match store.

Once a match is configured the page simply points to the Dashboard; a new
pair of teams can only be chosen after "New Game" on the Dashboard resets the
match.

Notes:
    - The store is shared by every browser (see `controllers.game_controller`),
        so spectators on the Live page see the teams as soon as they are set.
    - Selections are validated here, before `configure_match` is called: both
        teams must be chosen and must differ.
"""

# Import libraries
import streamlit as st
from dotenv import load_dotenv

from common.constants import TEAMS
from common.ui import sidebar_header
from common.utils import selectbox_with_placeholder
from controllers.auth_controller import login_page, logout_button
from controllers.game_controller import get_store

# Configure Streamlit page and load environment variables from `.env`.
st.set_page_config(page_title="League Scoreboard — Teams", page_icon="⚽", layout="centered")
load_dotenv(override=False)


def main():
    store = get_store()
    login_page(store)
    state = store.state

    sidebar_header(
        admin=True,
        match_label=f"{state.team_a} vs {state.team_b}" if state.is_configured else "",
    )
    logout_button(store)

    st.title("⚽ Soccer League Management")

    if state.is_configured:
        st.success(f"Match in progress: **{state.team_a}** vs **{state.team_b}**")
        st.caption("Use **New Game** on the Dashboard to pick different teams.")
        st.page_link("pages/1_Dashboard.py", label="Go to the Dashboard", icon="📋")
        return

    st.subheader("Select Teams")

    col1, col2 = st.columns(2)
    with col1:
        team_a = selectbox_with_placeholder("Team 1", TEAMS, key="team_a_select")
    with col2:
        team_b = selectbox_with_placeholder("Team 2", TEAMS, key="team_b_select")

    valid = bool(team_a and team_b and team_a != team_b)
    if team_a and team_b and team_a == team_b:
        st.error("A team cannot play against itself.")

    if st.button("Start Game", type="primary", disabled=not valid, use_container_width=True):
        store.configure_match(team_a, team_b)
        for k in ("team_a_select", "team_b_select"):
            st.session_state.pop(k, None)
        st.switch_page("pages/1_Dashboard.py")


if __name__ == "__main__":
    main()
