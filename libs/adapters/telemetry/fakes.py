from __future__ import annotations

from ports.telemetry import AdmissionPort


class RecordingGuard(AdmissionPort):
    """Wraps another guard and counts calls into it."""

    def __init__(self, inner: AdmissionPort) -> None:
        self.inner = inner
        self.admit_calls = 0
        self.release_calls = 0

    def try_admit(self) -> bool:
        self.admit_calls += 1
        return self.inner.try_admit()

    def release(self) -> None:
        self.release_calls += 1
        self.inner.release()

    @property
    def sent(self) -> bool:
        return self.inner.sent
