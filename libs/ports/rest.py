from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RestContextPort(ABC):
    """Request context bound to one base URL."""

    @abstractmethod
    def set_header(self, content_type: str) -> None: ...

    @abstractmethod
    def post(self, path: str, body: str) -> Any: ...


class RestApiPort(ABC):
    """Transport/session able to hand out request contexts."""

    @abstractmethod
    def get_context(self, base_url: str) -> RestContextPort | None: ...


class RestApiFactoryPort(ABC):
    """Process-wide transport accessor: get the existing one or create it."""

    @abstractmethod
    def get(self) -> RestApiPort | None: ...

    @abstractmethod
    def create(self) -> RestApiPort | None: ...
