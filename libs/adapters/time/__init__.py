from .fakes import FailingScheduler, FakeScheduler
from .timer import TimerScheduler

__all__ = ["FakeScheduler", "FailingScheduler", "TimerScheduler"]
