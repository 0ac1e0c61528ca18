"""
Small Streamlit helpers shared by the pages.

This module contains the rerun shim used after state changes, the admin
password lookup (secrets first, then environment), and UI convenience
utilities such as `selectbox_with_placeholder` used by the team picker.
"""

# Import libraries
from __future__ import annotations
import os
from typing import List, Optional
import streamlit as st


def get_admin_password() -> str:
    try:
        if "auth" in st.secrets and "password" in st.secrets["auth"]:
            return str(st.secrets["auth"]["password"])
    except Exception:
        # No secrets.toml, or it cannot be parsed
        pass
    return os.getenv("APP_PASSWORD", "admin")


def safe_rerun() -> None:
    if hasattr(st, "rerun"): st.rerun()
    elif hasattr(st, "experimental_rerun"): st.experimental_rerun()
    else: st.stop()


def selectbox_with_placeholder(
    label: str,
    options: List[str],
    key: Optional[str] = None,
    default_index: Optional[int] = None,
):
    """
    A selectbox that can start empty (placeholder) or preselect an item (default_index).
    Returns None while the placeholder is showing.
    """
    return st.selectbox(
        label,
        options=options,
        index=default_index,            # None -> placeholder shown; int -> preselect
        placeholder=f"Select {label}",
        key=key,
    )
