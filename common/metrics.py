"""
Display helpers derived from the match state.

Nothing here is stored: the clock label, the phase caption and the comparison
bar percentages are recomputed from the current `MatchState` on every page
rerun.

Function notes:
    - `format_time` renders elapsed seconds as `mm:ss`; minutes keep growing
        past 99 instead of wrapping.
    - `clock_label` replaces the time with `HT`/`FT` at half time and full
        time, which is what the big clock on every page shows.
    - `phase_text` picks First/Second Half from the 45-minute mark, so extra
        time added before the break can push the caption into "Second Half".
"""

#Import libraries
from __future__ import annotations
from typing import Tuple

from common.constants import HALF_LENGTH_SECONDS
from models.match_model import MatchState, Phase

PHASE_CAPTIONS = {
    Phase.NOT_STARTED: "Game Not Started",
    Phase.PAUSED:      "Paused",
    Phase.HALF_TIME:   "Half Time",
    Phase.ENDED:       "Game Ended",
}


def format_time(seconds: int) -> str:
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"


def clock_label(state: MatchState) -> str:
    if state.phase == Phase.HALF_TIME:
        return "HT"
    if state.phase == Phase.ENDED:
        return "FT"
    return format_time(state.elapsed_seconds)


def phase_text(state: MatchState) -> str:
    if state.phase in PHASE_CAPTIONS:
        return PHASE_CAPTIONS[state.phase]
    return "First Half" if state.elapsed_seconds < HALF_LENGTH_SECONDS else "Second Half"


def goal_minute(seconds: int) -> str:
    """Minute mark shown next to scorers on the public page, e.g. 12'."""
    return f"{max(0, int(seconds)) // 60}'"


def split_percent(value_a: float, value_b: float) -> Tuple[float, float]:
    """Share of a comparison bar for each team; an even split when both are zero."""
    total = value_a + value_b
    if total <= 0:
        return 50.0, 50.0
    pct_a = value_a / total * 100.0
    return pct_a, 100.0 - pct_a
