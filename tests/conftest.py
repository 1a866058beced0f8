from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from domain.telemetry import default_guard


@pytest.fixture(autouse=True)
def _reset_default_guard() -> Iterator[None]:
    # the process-wide guard must not leak admission between tests
    default_guard().release()
    yield
    default_guard().release()


@pytest.fixture(autouse=True)
def _clean_zenit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # ReporterSettings(...) reads ZENIT_* from the real environment
    for key in list(os.environ):
        if key.startswith("ZENIT_"):
            monkeypatch.delenv(key, raising=False)
