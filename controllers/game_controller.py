"""
Glue between the match store and the Streamlit pages.

Streamlit reruns a page script from the top on every interaction and gives
each browser its own session, but the scoreboard needs ONE match that the
admin pages write and the public page reads. `get_store()` therefore builds
the store once per server process with `st.cache_resource`:

    1) load the last snapshot from local storage (defaults when missing or
       unreadable),
    2) create the `MatchStore` around it,
    3) subscribe the storage so every change is written back, and
    4) attach the `ClockDriver`, which resumes ticking straight away if the
       snapshot was saved while the match was LIVE.

Pages receive the store through `get_store()` and pass it (or its `state`)
down to helpers explicitly; nothing else holds a module-level reference.
"""

from __future__ import annotations
import streamlit as st

from common.logger import configure_logging, get_logger
from common.storage import SnapshotStorage
from controllers.clock_controller import ClockDriver
from controllers.match_store import MatchStore
from models.match_model import MatchState

log = get_logger("game")


def build_store(storage: SnapshotStorage) -> MatchStore:
    snapshot = storage.load()
    if snapshot is None:
        log.info("No usable snapshot found; starting from defaults")
        snapshot = MatchState()
    else:
        log.info(
            "Restored %s vs %s (%s, %ss)",
            snapshot.team_a or "-", snapshot.team_b or "-",
            snapshot.phase.value, snapshot.elapsed_seconds,
        )

    store = MatchStore(snapshot)
    store.subscribe(storage.save)
    return store


@st.cache_resource(show_spinner=False)
def get_store() -> MatchStore:
    # Pages call load_dotenv() before this, so env settings are read here.
    configure_logging()
    store = build_store(SnapshotStorage())
    ClockDriver(store).attach()
    return store
