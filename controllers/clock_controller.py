"""
Background ticker for the match clock.

`ClockDriver` subscribes to a `MatchStore` and keeps at most one ticker
thread alive. The thread exists exactly while the match is LIVE: it is
started when the phase enters LIVE and cancelled when it leaves. Every
`interval` seconds the thread calls `store.tick(cancelled)`; the store drops
ticks from a cancelled ticker, so a quick pause/resume never counts a second
twice even if the old thread was already waiting on the store lock.

`on_change` runs inside the store's lock, so it must not wait for the old
thread to finish. `shutdown()` is the only place that joins.
"""

from __future__ import annotations
import os
import threading
from typing import Callable, Optional

from common.constants import TICK_SECONDS
from common.logger import get_logger
from controllers.match_store import MatchStore
from models.match_model import MatchState, Phase

log = get_logger("clock")


def interval_from_env() -> float:
    return float(os.getenv("SCOREBOARD_TICK_SECONDS") or TICK_SECONDS)


class ClockDriver:
    def __init__(self, store: MatchStore, interval: Optional[float] = None):
        self.store = store
        self.interval = interval if interval is not None else interval_from_env()
        self._thread: Optional[threading.Thread] = None
        self._cancelled: Optional[threading.Event] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def running(self) -> bool:
        return self._cancelled is not None and not self._cancelled.is_set()

    def attach(self) -> "ClockDriver":
        """Subscribe to the store and arm immediately if the match is already LIVE."""
        with self.store.lock:
            self._unsubscribe = self.store.subscribe(self.on_change)
            self.on_change(self.store.state)
        return self

    def on_change(self, state: MatchState) -> None:
        if state.phase == Phase.LIVE:
            self._arm()
        else:
            self._disarm()

    def _arm(self) -> None:
        if self.running:
            return
        cancelled = threading.Event()
        thread = threading.Thread(
            target=self._run, args=(cancelled,), name="match-clock", daemon=True,
        )
        self._cancelled, self._thread = cancelled, thread
        thread.start()
        log.debug("Ticker armed")

    def _disarm(self) -> None:
        if self._cancelled is not None and not self._cancelled.is_set():
            self._cancelled.set()
            log.debug("Ticker disarmed")

    def _run(self, cancelled: threading.Event) -> None:
        # Event.wait returns True once cancelled, ending the loop.
        while not cancelled.wait(self.interval):
            self.store.tick(cancelled)

    def shutdown(self, timeout: Optional[float] = None) -> None:
        """Detach from the store and stop the ticker for good."""
        with self.store.lock:
            if self._unsubscribe is not None:
                self._unsubscribe()
                self._unsubscribe = None
            self._disarm()
            thread = self._thread
        if thread is not None:
            thread.join(timeout)
