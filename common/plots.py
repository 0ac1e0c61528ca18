# common/plots.py
from __future__ import annotations
from typing import Dict, Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from common.colors import is_light

DEFAULT_FIGSIZE = (6.6, 2.6)


def _new_ax(ax=None):
    """Return a compact figure/axes when ax is None; otherwise reuse the axes."""
    if ax is None:
        fig, ax = plt.subplots(figsize=DEFAULT_FIGSIZE, constrained_layout=True)
    else:
        fig = ax.figure
    return fig, ax


def _edge_kw_for(hexs: str) -> dict:
    """Return edgecolor/linewidth kwargs for bars when color is very light."""
    return {"edgecolor": "black", "linewidth": 1.0} if is_light(hexs) else {}


# --- Head-to-head comparison (one split bar per stat) ---
def plot_stat_comparison(comparison: pd.DataFrame,
                         team_a: str,
                         team_b: str,
                         colors_map: Optional[Dict[str, str]] = None,
                         ax: Optional[plt.Axes] = None,
                         title: str = "") -> plt.Axes:
    """
    Horizontal 100% bars: Team A's share grows from the left, Team B's from the right.
    Expects the frame from `compute_stat_comparison` (Stat, TeamA, TeamB, ShareA, ShareB).
    """
    colors = colors_map or {}
    fig, ax = _new_ax(ax)

    col_a = colors.get(team_a, "#777777")
    col_b = colors.get(team_b, "#999999")

    # First stat on top
    y = np.arange(len(comparison), dtype=float)[::-1]
    share_a = comparison["ShareA"].to_numpy(dtype=float)
    share_b = comparison["ShareB"].to_numpy(dtype=float)

    ax.barh(y, share_a, height=0.5, color=col_a, label=team_a, **_edge_kw_for(col_a))
    ax.barh(y, share_b, height=0.5, left=share_a, color=col_b, label=team_b, **_edge_kw_for(col_b))

    # Raw counts printed inside each end of the bar
    txt_a = "black" if is_light(col_a, thr=0.6) else "white"
    txt_b = "black" if is_light(col_b, thr=0.6) else "white"
    for yi, (_, row) in zip(y, comparison.iterrows()):
        ax.text(2, yi, str(int(row["TeamA"])), ha="left", va="center", fontsize=6, color=txt_a)
        ax.text(98, yi, str(int(row["TeamB"])), ha="right", va="center", fontsize=6, color=txt_b)

    ax.set_yticks(y, comparison["Stat"].tolist())
    ax.set_xlim(0, 100)
    ax.set_xticks([])
    ax.axvline(50, color="white", linewidth=0.8, linestyle=":")
    for side in ("top", "right", "bottom"):
        ax.spines[side].set_visible(False)
    ax.tick_params(axis="both", labelsize=6)
    ax.set_title(title)

    return ax
