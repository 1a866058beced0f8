# libs/domain/telemetry/guard.py
from __future__ import annotations

import threading

from ports.telemetry import AdmissionPort


class SendGuard(AdmissionPort):
    """At-most-one telemetry attempt per process run.

    `sent` flips to True on admission and only goes back to False through
    `release()`, which the sender calls when it could not obtain a transport.
    """

    __slots__ = ("_lock", "_sent")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sent = False

    def try_admit(self) -> bool:
        with self._lock:
            if self._sent:
                return False
            self._sent = True
            return True

    def release(self) -> None:
        with self._lock:
            self._sent = False

    @property
    def sent(self) -> bool:
        return self._sent


_DEFAULT = SendGuard()


def default_guard() -> SendGuard:
    """Process-wide guard instance."""
    return _DEFAULT
