from __future__ import annotations
from pathlib import Path
from typing import Optional

# Logo files: <project_root>/assets/team-logos/<team>.png (lowercase name)
LOGO_DIR = Path(__file__).resolve().parents[1] / "assets" / "team-logos"


def logo_path(team: Optional[str], logo_dir: Optional[Path] = None) -> str:
    """Return the logo file for a team, or '' when there is none on disk."""
    if not team:
        return ""
    p = (logo_dir or LOGO_DIR) / f"{team.lower()}.png"
    return str(p) if p.exists() else ""

