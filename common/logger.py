"""
Named loggers for the scoreboard.

Streamlit re-executes page scripts on every interaction, so the console
handler is attached once to the `scoreboard` parent logger and the child
loggers are cached here; otherwise each rerun would add another handler and
duplicate every line.

Modules create their loggers at import time, before the pages have loaded
`.env`, so the level lives on the parent and `configure_logging()` re-reads
`SCOREBOARD_LOG_LEVEL` once the environment is in place.
"""

from __future__ import annotations
import logging
import os
from typing import Dict

ROOT_NAME = "scoreboard"

_LOGGERS: Dict[str, logging.Logger] = {}


def log_level() -> int:
    return getattr(logging, (os.getenv("SCOREBOARD_LOG_LEVEL") or "INFO").upper(), logging.INFO)


def _root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root.addHandler(console)
        root.setLevel(log_level())
    return root


def configure_logging() -> None:
    """Apply `SCOREBOARD_LOG_LEVEL` from the current environment."""
    _root_logger().setLevel(log_level())


def get_logger(name: str) -> logging.Logger:
    """Create or retrieve a logger under the `scoreboard.` namespace."""
    if name in _LOGGERS:
        return _LOGGERS[name]

    _root_logger()
    logger = logging.getLogger(f"{ROOT_NAME}.{name}")
    _LOGGERS[name] = logger
    return logger
