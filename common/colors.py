# common/colors.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple
import colorsys
import zlib

# Primary colour is used whenever possible; alternate only when the two
# teams of a match would clash.
TEAM_PALETTES: Dict[str, Dict[str, str]] = {
    "Dragons":  {"primary": "#3B82F6", "alternate": "#1E3A8A", "text": "#FFFFFF"},
    "Vikings":  {"primary": "#EF4444", "alternate": "#7F1D1D", "text": "#FFFFFF"},
    "Elites":   {"primary": "#111827", "alternate": "#F9FAFB", "text": "#FFFFFF"},
    "Lions":    {"primary": "#22C55E", "alternate": "#14532D", "text": "#FFFFFF"},
    "Warriors": {"primary": "#EAB308", "alternate": "#713F12", "text": "#000000"},
    "Falcons":  {"primary": "#6B7280", "alternate": "#D1D5DB", "text": "#FFFFFF"},
}


# -------------------- Simple color math (for fallback & similarity) --------------------
def _hex_to_rgb(hexs: str) -> Tuple[float, float, float]:
    h = hexs.strip().lstrip("#")
    return int(h[0:2], 16) / 255.0, int(h[2:4], 16) / 255.0, int(h[4:6], 16) / 255.0


def _rgb_to_lab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    # sRGB -> XYZ -> Lab (D65)
    def f(u): return (u / 12.92) if u <= 0.04045 else (((u + 0.055) / 1.055) ** 2.4)
    r, g, b = f(r), f(g), f(b)
    X = r * 0.4124 + g * 0.3576 + b * 0.1805
    Y = r * 0.2126 + g * 0.7152 + b * 0.0722
    Z = r * 0.0193 + g * 0.1192 + b * 0.9505
    Xn, Yn, Zn = 0.95047, 1.00000, 1.08883

    def gfun(t): return t ** (1 / 3) if t > 0.008856 else (7.787 * t + 16 / 116)
    fx, fy, fz = gfun(X / Xn), gfun(Y / Yn), gfun(Z / Zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def _delta_e76(c1: str, c2: str) -> float:
    L1, a1, b1 = _rgb_to_lab(*_hex_to_rgb(c1))
    L2, a2, b2 = _rgb_to_lab(*_hex_to_rgb(c2))
    return ((L1 - L2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2) ** 0.5


def _darken(hexs: str, factor: float = 0.25) -> str:
    r, g, b = (c * (1 - factor) for c in _hex_to_rgb(hexs))
    return "#{:02X}{:02X}{:02X}".format(int(r * 255), int(g * 255), int(b * 255))


def similar(c1: str, c2: str, delta: float = 20.0) -> bool:
    """Rough similarity check using ΔE76; ~10–20 is 'perceptible'."""
    return _delta_e76(c1, c2) < delta


def is_light(hex_color: str, thr: float = 0.90) -> bool:
    """Perceived luminance to decide if we draw a dark border for very light (e.g., white)."""
    r, g, b = _hex_to_rgb(hex_color)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b >= thr


def team_palette(team: str) -> Dict[str, str]:
    """Palette for a catalog team; unknown names get a stable generated colour."""
    if team in TEAM_PALETTES:
        return TEAM_PALETTES[team]
    h = (zlib.crc32((team or "").encode("utf-8")) % 360) / 360.0
    r, g, b = colorsys.hsv_to_rgb(h, 0.65, 0.95)
    base = "#{:02X}{:02X}{:02X}".format(int(r * 255), int(g * 255), int(b * 255))
    return {"primary": base, "alternate": _darken(base), "text": "#FFFFFF"}


# -------------------- Public API --------------------
@dataclass(frozen=True)
class MatchPalette:
    color_a: str
    color_b: str
    text_a: str
    text_b: str

    def as_map(self, team_a: str, team_b: str) -> Dict[str, str]:
        return {team_a: self.color_a, team_b: self.color_b}


def pick_match_colors(team_a: str, team_b: str) -> MatchPalette:
    """
    Choose the bar/badge colours for both teams.
    Rule:
      - Team A keeps its primary colour, Team B starts with its primary.
      - If similar, Team B switches to its alternate.
      - If still similar, darken Team B slightly.
    """
    pal_a, pal_b = team_palette(team_a), team_palette(team_b)
    c_a, c_b = pal_a["primary"], pal_b["primary"]
    text_b = pal_b["text"]

    if similar(c_a, c_b):
        c_b = pal_b["alternate"]
        text_b = "#000000" if is_light(c_b, thr=0.6) else "#FFFFFF"
    if similar(c_a, c_b):
        c_b = _darken(c_b)
        text_b = "#FFFFFF"

    return MatchPalette(color_a=c_a, color_b=c_b, text_a=pal_a["text"], text_b=text_b)
