from __future__ import annotations

from collections.abc import Callable

from ports.time import SchedulerPort


class FakeScheduler(SchedulerPort):
    """Records calls; nothing runs until run_pending()."""

    def __init__(self) -> None:
        self.calls: list[tuple[Callable[[], None], int]] = []
        self._pending: list[Callable[[], None]] = []

    def schedule_once(self, fn: Callable[[], None], delay_ms: int) -> None:
        self.calls.append((fn, delay_ms))
        self._pending.append(fn)

    def run_pending(self) -> int:
        ran = 0
        while self._pending:
            self._pending.pop(0)()
            ran += 1
        return ran


class FailingScheduler(SchedulerPort):
    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or RuntimeError("call queue unavailable")
        self.attempts = 0

    def schedule_once(self, fn: Callable[[], None], delay_ms: int) -> None:
        self.attempts += 1
        raise self.exc
