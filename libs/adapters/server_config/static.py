from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ports.server_config import ServerConfigPort


class StaticServerConfig(ServerConfigPort):
    """Values supplied up front (settings, tests)."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = dict(values or {})

    def get_int(self, key: str, default: int = 0) -> int:
        raw = self._values.get(key)
        if raw is None:
            return default
        try:
            return int(raw)
        except (TypeError, ValueError):
            return default
