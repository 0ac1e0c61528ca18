# common/ui.py
from __future__ import annotations
import html
import streamlit as st

from common.colors import MatchPalette
from common.logos import logo_path


def sidebar_header(admin: bool, match_label: str = ""):
    # Hide the built-in pages nav so only our custom links appear
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none !important;}</style>",
        unsafe_allow_html=True,
    )
    with st.sidebar:
        st.markdown("**Signed in as:** " + ("Admin" if admin else "Spectator"))
        if match_label:
            st.caption(match_label)

        st.divider()
        st.markdown("#### Pages")
        if admin:
            st.page_link("main.py", label="Teams", icon="🏠")
            st.page_link("pages/1_Dashboard.py", label="Dashboard", icon="📋")
            st.page_link("pages/2_Game_Clock.py", label="Game Clock", icon="⏱️")
        st.page_link("pages/3_Live.py", label="Live Match", icon="📺")


def team_badge(team: str, color: str, text_color: str, size: int = 72):
    """Team logo when available, otherwise a coloured circle with the initial."""
    path = logo_path(team)
    if path:
        st.image(path, width=size)
        return
    st.markdown(
        f'<div style="width:{size}px;height:{size}px;border-radius:50%;background:{color};'
        f'color:{text_color};display:flex;align-items:center;justify-content:center;'
        f'font-weight:700;font-size:{size // 2}px;margin:auto">{html.escape(team[:1])}</div>',
        unsafe_allow_html=True,
    )


def stat_bar(label: str, value_a: int, value_b: int, share_a: float, palette: MatchPalette):
    """Two-colour comparison bar with both values and the label above it."""
    st.markdown(
        f'<div style="display:flex;justify-content:space-between;font-size:0.85rem">'
        f'<span>{value_a}</span><span style="font-weight:600">{html.escape(label)}</span><span>{value_b}</span></div>'
        f'<div style="display:flex;height:8px;width:100%;border-radius:4px;overflow:hidden;margin-bottom:10px">'
        f'<div style="width:{share_a:.1f}%;background:{palette.color_a}"></div>'
        f'<div style="width:{100 - share_a:.1f}%;background:{palette.color_b}"></div></div>',
        unsafe_allow_html=True,
    )


def scorer_html(player: str, assist: str, minute: str, penalty: bool) -> str:
    """HTML for one goal line on the public page, with player and assist escaped."""
    assist_html = f" <span style='color:gray'>({html.escape(assist)})</span>" if assist else ""
    pen = " (P)" if penalty else ""
    return (
        f"<div style='font-size:0.85rem'><b>{html.escape(player)}</b>{assist_html}"
        f"<span style='float:right'>{html.escape(minute)}{pen}</span></div>"
    )
