from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable


class SchedulerPort(ABC):
    """Deferred one-shot calls owned by the host runtime."""

    @abstractmethod
    def schedule_once(self, fn: Callable[[], None], delay_ms: int) -> None:
        """Call `fn` once, no sooner than `delay_ms` from now, without blocking."""
