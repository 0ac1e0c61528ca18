"""
Environment settings are read when objects are built, not when modules are
imported, so values that `load_dotenv()` brings in after the imports apply.
"""
import logging

import pytest
from dotenv import load_dotenv

from common.logger import configure_logging, get_logger
from common.storage import DEFAULT_DB_PATH, SnapshotStorage
from controllers.auth_controller import cookie_days, cookie_name
from controllers.clock_controller import ClockDriver
from controllers.match_store import MatchStore
from models.match_model import MatchState

SETTINGS = (
    "SCOREBOARD_DB_PATH",
    "SCOREBOARD_TICK_SECONDS",
    "SCOREBOARD_LOG_LEVEL",
    "SCOREBOARD_COOKIE_NAME",
    "SCOREBOARD_COOKIE_DAYS",
)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores the original (possibly absent) value
    for name in SETTINGS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield monkeypatch
    for name in SETTINGS:
        monkeypatch.delenv(name, raising=False)
    configure_logging()


def test_defaults_without_env(clean_env):
    s = SnapshotStorage()
    try:
        assert s.db_path == DEFAULT_DB_PATH
    finally:
        s.close()
    assert ClockDriver(MatchStore(MatchState())).interval == 1.0
    assert cookie_name() == "scoreboard_admin"
    assert cookie_days() == 1


def test_dotenv_file_loaded_after_import_applies(clean_env, tmp_path):
    db = tmp_path / "from_dotenv.db"
    env_file = tmp_path / ".env"
    env_file.write_text(
        f"SCOREBOARD_DB_PATH={db}\n"
        "SCOREBOARD_TICK_SECONDS=5\n"
        "SCOREBOARD_COOKIE_NAME=league_admin\n"
        "SCOREBOARD_COOKIE_DAYS=7\n"
        "SCOREBOARD_LOG_LEVEL=debug\n"
    )
    assert load_dotenv(env_file, override=False)

    s = SnapshotStorage()
    try:
        assert s.db_path == db
    finally:
        s.close()
    assert ClockDriver(MatchStore(MatchState())).interval == 5.0
    assert cookie_name() == "league_admin"
    assert cookie_days() == 7

    configure_logging()
    assert get_logger("storage").getEffectiveLevel() == logging.DEBUG


def test_explicit_arguments_win_over_env(clean_env, tmp_path):
    clean_env.setenv("SCOREBOARD_DB_PATH", str(tmp_path / "env.db"))
    clean_env.setenv("SCOREBOARD_TICK_SECONDS", "5")

    s = SnapshotStorage(db_path=str(tmp_path / "explicit.db"))
    try:
        assert s.db_path == tmp_path / "explicit.db"
    finally:
        s.close()
    assert ClockDriver(MatchStore(MatchState()), interval=0.5).interval == 0.5


def test_log_level_is_reapplied(clean_env):
    clean_env.setenv("SCOREBOARD_LOG_LEVEL", "WARNING")
    configure_logging()
    assert get_logger("store").getEffectiveLevel() == logging.WARNING

    clean_env.setenv("SCOREBOARD_LOG_LEVEL", "not-a-level")
    configure_logging()
    assert get_logger("store").getEffectiveLevel() == logging.INFO
