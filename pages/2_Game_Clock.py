import streamlit as st
from dotenv import load_dotenv

from common.metrics import clock_label, phase_text
from common.ui import sidebar_header
from common.utils import safe_rerun
from controllers.auth_controller import logout_button, require_admin
from controllers.game_controller import get_store
from controllers.match_store import MatchStore
from models.match_model import Phase

st.set_page_config(page_title="Game Clock", page_icon="⏱️", layout="centered")
load_dotenv(override=False)


@st.fragment(run_every=1)
def _clock(store: MatchStore):
    state = store.state
    st.markdown(
        f"<div style='text-align:center;font-size:3.5rem;font-weight:700'>{clock_label(state)}</div>"
        f"<div style='text-align:center;font-size:1.5rem;font-weight:600'>{phase_text(state)}</div>",
        unsafe_allow_html=True,
    )


def _action(label: str, op, key: str):
    if st.button(label, key=key, use_container_width=True):
        op()
        safe_rerun()


def main():
    require_admin()
    store = get_store()
    state = store.state

    if not state.is_configured:
        st.switch_page("main.py")

    sidebar_header(admin=True, match_label=f"{state.team_a} vs {state.team_b}")
    logout_button(store)

    st.page_link("pages/1_Dashboard.py", label="Back to Dashboard", icon="⬅️")
    st.header("Game Clock")
    _clock(store)
    st.divider()

    phase = state.phase
    if phase == Phase.NOT_STARTED:
        _action("▶ Start Game", store.start, "clock_start")
    elif phase == Phase.LIVE:
        _action("⏸ Pause", store.pause, "clock_pause")
    elif phase == Phase.PAUSED:
        _action("▶ Resume", store.resume, "clock_resume")

    if phase in (Phase.LIVE, Phase.PAUSED):
        _action("Half Time", store.set_half_time, "clock_half_time")
    elif phase == Phase.HALF_TIME:
        _action("Start Second Half", store.resume, "clock_second_half")

    if phase in (Phase.LIVE, Phase.PAUSED):
        c1, c2 = st.columns([3, 1])
        minutes = c1.number_input(
            "Extra time (min)", min_value=0, max_value=30, value=0, step=1,
            key="extra_minutes", label_visibility="collapsed",
        )
        if c2.button("Add", key="clock_extra", use_container_width=True, disabled=minutes == 0):
            store.add_extra_time(int(minutes))
            st.session_state.pop("extra_minutes", None)
            safe_rerun()

    if phase in (Phase.LIVE, Phase.PAUSED, Phase.HALF_TIME):
        _action("⏹ End Game", store.end_game, "clock_end")

    if phase == Phase.ENDED:
        st.warning(
            "**Game End:** the game has reached full time. "
            "Start a **New Game** from the Dashboard to play another match."
        )


if __name__ == "__main__":
    main()
