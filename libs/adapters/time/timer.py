from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Final

from ports.time import SchedulerPort

LOG: Final = logging.getLogger("zenit.scheduler")


class TimerScheduler(SchedulerPort):
    """One daemon threading.Timer per scheduled call."""

    def __init__(self, name: str = "zenit-timer") -> None:
        self.name = name
        self._lock = threading.Lock()
        self._timers: list[threading.Timer] = []

    def schedule_once(self, fn: Callable[[], None], delay_ms: int) -> None:
        def _run() -> None:
            try:
                fn()
            except Exception:
                LOG.exception("Scheduled call %r raised", fn)

        t = threading.Timer(max(0, delay_ms) / 1000.0, _run)
        t.name = self.name
        t.daemon = True
        with self._lock:
            self._timers = [x for x in self._timers if x.is_alive()]
            self._timers.append(t)
        t.start()

    def pending(self) -> int:
        with self._lock:
            return sum(1 for t in self._timers if t.is_alive())

    def join(self, timeout: float | None = None) -> None:
        with self._lock:
            timers = list(self._timers)
        for t in timers:
            t.join(timeout)

    def cancel_all(self) -> None:
        with self._lock:
            timers, self._timers = self._timers, []
        for t in timers:
            t.cancel()
