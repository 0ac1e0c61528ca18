"""
Local snapshot storage for the match state.

The whole `MatchState` is serialized to JSON and kept under one fixed key in
a tiny SQLite key-value table. The database lives next to the other app
assets by default (`assets/scoreboard.db`) and can be relocated with the
`SCOREBOARD_DB_PATH` environment variable.

Storage is best effort:
    - `load()` returns `None` when the file, the table or the key is missing,
        or when the stored JSON cannot be turned back into a `MatchState`.
        The caller then starts from defaults.
    - `save()` hands the write to a single background worker and returns the
        `Future` immediately, so a mutation never waits on disk I/O. Writes
        are applied in submission order; failures are logged and dropped.
"""

from __future__ import annotations
import json
import os
import sqlite3
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from common.constants import STORAGE_KEY
from common.logger import get_logger
from models.match_model import MatchState

# Default DB location: <project_root>/assets/scoreboard.db
DEFAULT_DB_PATH = Path(__file__).resolve().parents[1] / "assets" / "scoreboard.db"

log = get_logger("storage")


def db_path_from_env() -> Path:
    """Read `SCOREBOARD_DB_PATH` when a storage is built, after `.env` is loaded."""
    return Path(os.getenv("SCOREBOARD_DB_PATH") or DEFAULT_DB_PATH)


class SnapshotStorage:
    def __init__(self, db_path: Optional[str] = None, key: str = STORAGE_KEY):
        self.db_path = Path(db_path) if db_path else db_path_from_env()
        self.key = key
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="snapshot-writer")

    def _connect(self) -> sqlite3.Connection:
        con = sqlite3.connect(self.db_path)
        con.execute("CREATE TABLE IF NOT EXISTS kv (key TEXT PRIMARY KEY, value TEXT NOT NULL)")
        return con

    def load(self) -> Optional[MatchState]:
        if not self.db_path.exists():
            return None
        try:
            con = self._connect()
            try:
                row = con.execute("SELECT value FROM kv WHERE key = ?", (self.key,)).fetchone()
            finally:
                con.close()
        except sqlite3.Error as exc:
            log.warning("Could not read snapshot from %s: %s", self.db_path, exc)
            return None

        if row is None:
            return None
        try:
            return MatchState.from_dict(json.loads(row[0]))
        except (ValueError, KeyError, TypeError, AttributeError, OverflowError) as exc:
            # json.JSONDecodeError is a ValueError
            log.warning("Ignoring malformed snapshot under %r: %s", self.key, exc)
            return None

    def _write(self, payload: str) -> None:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            con = self._connect()
            try:
                with con:
                    con.execute(
                        "INSERT INTO kv (key, value) VALUES (?, ?) "
                        "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                        (self.key, payload),
                    )
            finally:
                con.close()
        except (sqlite3.Error, OSError) as exc:
            log.warning("Snapshot write to %s failed: %s", self.db_path, exc)

    def save(self, state: MatchState) -> Future:
        # Serialize now so the worker writes exactly the state it was given.
        payload = json.dumps(state.to_dict())
        return self._executor.submit(self._write, payload)

    def close(self) -> None:
        self._executor.shutdown(wait=True)
