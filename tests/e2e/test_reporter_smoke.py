# tests/e2e/test_reporter_smoke.py
from __future__ import annotations

import threading
from collections.abc import Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest
from adapters.time import TimerScheduler
from domain.telemetry import SendGuard

from apps.reporter.__main__ import main
from apps.reporter.compose import build_reporter
from apps.reporter.settings import ReporterSettings


class _Collector(BaseHTTPRequestHandler):
    received: list[dict] = []
    status = 200

    def do_POST(self) -> None:  # noqa: N802
        length = int(self.headers.get("Content-Length", "0"))
        type(self).received.append(
            {
                "path": self.path,
                "body": self.rfile.read(length).decode("utf-8"),
                "content_type": self.headers.get("Content-Type"),
                "user_agent": self.headers.get("User-Agent", ""),
            }
        )
        self.send_response(type(self).status)
        self.send_header("Content-Type", "text/plain")
        self.end_headers()
        self.wfile.write(b"successfully accounted")

    def log_message(self, format: str, *args) -> None:
        pass


@pytest.fixture
def collector(monkeypatch: pytest.MonkeyPatch) -> Iterator[tuple[str, type[_Collector]]]:
    for var in ("HTTP_PROXY", "http_proxy", "HTTPS_PROXY", "https_proxy", "ALL_PROXY", "all_proxy"):
        monkeypatch.delenv(var, raising=False)

    class Handler(_Collector):
        received: list[dict] = []
        status = 200

    srv = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    t = threading.Thread(target=srv.serve_forever, daemon=True)
    t.start()
    try:
        yield f"http://127.0.0.1:{srv.server_address[1]}", Handler
    finally:
        srv.shutdown()
        srv.server_close()


def test_reporter_posts_once_after_delay(collector):
    url, handler = collector
    sched = TimerScheduler()
    guard = SendGuard()
    reporter = build_reporter(
        ReporterSettings(telemetry_url=url, telemetry_delay_ms=20, steam_query_port=2302),
        scheduler=sched,
        guard=guard,
    )

    reporter.on_load()
    reporter.on_load()
    sched.join(5.0)

    assert len(handler.received) == 1
    rec = handler.received[0]
    assert rec["path"] == "/api/telemetry"
    assert rec["content_type"] == "application/json"
    assert rec["user_agent"] == ""
    assert rec["body"] == (
        '{"application":"MySupperMode","version":"1.2.5","type":"steam","port":2302}'
    )
    assert guard.sent is True


def test_server_error_leaves_guard_set(collector):
    url, handler = collector
    handler.status = 500
    sched = TimerScheduler()
    guard = SendGuard()
    reporter = build_reporter(
        ReporterSettings(telemetry_url=url, telemetry_delay_ms=1), scheduler=sched, guard=guard
    )
    reporter.on_load()
    sched.join(5.0)
    assert len(handler.received) == 1
    assert guard.sent is True


def test_unreachable_server_is_silent(tmp_path: Path):
    sched = TimerScheduler()
    guard = SendGuard()
    reporter = build_reporter(
        ReporterSettings(telemetry_url="http://127.0.0.1:9", telemetry_delay_ms=1, http_timeout_s=0.5),
        scheduler=sched,
        guard=guard,
    )
    reporter.on_load()
    sched.join(5.0)
    assert guard.sent is True


def test_cli_disabled_exits_cleanly(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ZENIT_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("ZENIT_DISABLE_TELEMETRY", "true")
    assert main(["--quiet", "--wait"]) == 0


def test_cli_sends_with_wait(collector, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    url, handler = collector
    (tmp_path / "dev.toml").write_text(
        f'[reporter]\ntelemetry_url = "{url}"\nsteam_query_port = 2310\n', encoding="utf-8"
    )
    monkeypatch.setenv("ZENIT_CONFIG_DIR", str(tmp_path))
    monkeypatch.delenv("ZENIT_DISABLE_TELEMETRY", raising=False)
    assert main(["--quiet", "--wait", "--delay-ms", "5"]) == 0
    assert len(handler.received) == 1
    assert handler.received[0]["body"].endswith('"port":2310}')
