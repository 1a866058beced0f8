# libs/domain/telemetry/reporter.py
from __future__ import annotations

import logging
import random
from typing import Final

from ports.telemetry import AdmissionPort
from ports.time import SchedulerPort

from .sender import TelemetrySender

LOG: Final = logging.getLogger("zenit.reporter")

BASE_DELAY_MS: Final = 600_000  # 10-20 min window


def compute_delay_ms(base_delay_ms: int = BASE_DELAY_MS, rng: random.Random | None = None) -> int:
    """Uniform integer in [base, 2 * base)."""
    if base_delay_ms <= 0:
        raise ValueError("base_delay_ms must be positive")
    r = rng or random
    return r.randrange(base_delay_ms, base_delay_ms * 2)


class TelemetryReporter:
    """Module load hook: admits one attempt and defers the sender."""

    def __init__(
        self,
        guard: AdmissionPort,
        scheduler: SchedulerPort,
        sender: TelemetrySender,
        enabled: bool = True,
        base_delay_ms: int = BASE_DELAY_MS,
        rng: random.Random | None = None,
    ) -> None:
        self.guard: Final = guard
        self.scheduler: Final = scheduler
        self.sender: Final = sender
        self.enabled = bool(enabled)
        self.base_delay_ms = base_delay_ms
        self._rng = rng

    def on_load(self) -> None:
        """Synchronous; never blocks on I/O and never raises."""
        if not self.enabled:
            return
        if not self.guard.try_admit():
            return
        delay = compute_delay_ms(self.base_delay_ms, self._rng)
        try:
            self.scheduler.schedule_once(self.sender.send, delay)
        except Exception as ex:
            # nothing was queued, so the attempt never started
            LOG.debug("Scheduling telemetry failed: %r", ex)
            self.guard.release()
            return
        LOG.debug("Telemetry scheduled in %d ms", delay)
