from __future__ import annotations

from abc import ABC, abstractmethod


class AdmissionPort(ABC):
    """Single-attempt gate shared by the load hook and the sender."""

    @abstractmethod
    def try_admit(self) -> bool: ...

    @abstractmethod
    def release(self) -> None: ...

    @property
    @abstractmethod
    def sent(self) -> bool: ...
