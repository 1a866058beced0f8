from __future__ import annotations

from abc import ABC, abstractmethod


class ServerConfigPort(ABC):
    """Read-only view of the game server configuration."""

    @abstractmethod
    def get_int(self, key: str, default: int = 0) -> int: ...
