"""
Authentication helpers for the admin pages.

The scoreboard has a single shared admin password (`APP_PASSWORD`, or
`[auth] password` in `.streamlit/secrets.toml`). This is a UI gate that keeps
spectators away from the controls, not a security boundary.

Key functions:
    - `login_page(store)`: render the password form or auto-login from cookie.
    - `logout_button(store)`: place a logout button in the sidebar that clears
        session state and expires the cookie.
    - `require_admin()`: send unauthenticated visitors of admin pages back to
        the login page.
    - `check_password()`: the plain comparison, kept free of Streamlit calls.

Implementation notes:
    - `extra_streamlit_components.CookieManager` keeps a small cookie so the
        admin stays signed in across reloads when "remember" is ticked. The
        cookie holds a digest of the password, so changing the password
        signs everyone out.
    - `st.session_state["authenticated"]` gates the pages of THIS browser;
        the store's `is_authenticated` flag only records that an operator is
        signed in to the match.
"""

# Import libraries
from __future__ import annotations
import hashlib
import hmac
import os
from datetime import timedelta
import streamlit as st
import extra_streamlit_components as stx

from common.logger import get_logger
from common.utils import get_admin_password, safe_rerun
from controllers.match_store import MatchStore

# ----- Config (env or defaults, read per call so `.env` values apply) -----
def cookie_name() -> str:
    return os.getenv("SCOREBOARD_COOKIE_NAME") or "scoreboard_admin"


def cookie_days() -> int:
    return int(os.getenv("SCOREBOARD_COOKIE_DAYS") or "1")


# Unique keys for cookie components (must not collide in one run)
CM_KEY_MAIN    = "scoreboard_cookie_component_main"
CM_KEY_SIDEBAR = "scoreboard_cookie_component_sidebar"

log = get_logger("auth")


def check_password(entered: str | None, expected: str) -> bool:
    return hmac.compare_digest((entered or "").encode("utf-8"), expected.encode("utf-8"))


def cookie_token(password: str) -> str:
    return hashlib.sha256(f"scoreboard:{password}".encode("utf-8")).hexdigest()


def _mark_signed_in(store: MatchStore) -> None:
    st.session_state["authenticated"] = True
    store.login()


def login_page(store: MatchStore) -> bool:
    """
    Returns True when this browser session is authenticated.
    Otherwise renders the login form and stops the script.
    """
    password = get_admin_password()

    if st.session_state.get("authenticated"):
        return True

    cm = stx.CookieManager(key=CM_KEY_MAIN)

    # Skip cookie auto-login on the run right after a logout.
    force_logout = bool(st.session_state.pop("force_logout", False))
    if not force_logout:
        try:
            cookies = cm.get_all() or {}
        except Exception as exc:
            log.debug("Cookie read failed: %s", exc)
            cookies = {}
        if cookies.get(cookie_name()) == cookie_token(password):
            _mark_signed_in(store)
            return True

    st.markdown("""
        <style>
          [data-testid="stSidebar"] { display: none; }
          .block-container { padding-top: 10vh; max-width: 420px; }
        </style>
    """, unsafe_allow_html=True)

    st.markdown("## ⚽ Soccer League Management")
    with st.form("login_form", clear_on_submit=True):
        pwd = st.text_input("Password", type="password", placeholder="Enter password")
        remember = st.checkbox("Keep me signed in on this browser", value=True)
        ok = st.form_submit_button("Login", use_container_width=True)

    st.page_link("pages/3_Live.py", label="Watch the live match instead", icon="📺")

    if ok:
        if check_password(pwd, password):
            _mark_signed_in(store)
            log.info("Admin signed in")
            try:
                if remember:
                    cm.set(
                        cookie_name(),
                        cookie_token(password),
                        max_age=int(timedelta(days=cookie_days()).total_seconds()),
                    )
                else:
                    cm.set(cookie_name(), cookie_token(password))
            except Exception as exc:
                # The session flag alone is enough for this browser tab.
                log.debug("Cookie write failed: %s", exc)
            safe_rerun()
        else:
            log.info("Rejected admin login attempt")
            st.error("Incorrect password")
    st.stop()  # block the rest of the app if not authenticated


def require_admin() -> None:
    if not st.session_state.get("authenticated"):
        try:
            st.switch_page("main.py")
        except Exception:
            st.info("Please sign in on **Home** first.")
            st.stop()


def logout_button(store: MatchStore) -> None:
    """
    Sidebar logout button using the SIDEBAR cookie component.
    Sets a force-logout flag so the next run won't auto-login from cookie.
    """
    cm_side = stx.CookieManager(key=CM_KEY_SIDEBAR)

    with st.sidebar:
        if st.button("Logout", key="logout_btn", use_container_width=True):
            st.session_state["force_logout"] = True
            try:
                cm_side.delete(cookie_name())
            except Exception as exc:
                log.debug("Cookie delete failed: %s", exc)

            for k in ("authenticated", "new_game_confirm"):
                st.session_state.pop(k, None)
            store.logout()
            log.info("Admin signed out")
            safe_rerun()
