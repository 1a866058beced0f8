from __future__ import annotations

import random

import pytest
from adapters.rest_requests import FakeRestApi, FakeRestApiFactory
from adapters.server_config import StaticServerConfig
from adapters.telemetry import RecordingGuard
from adapters.time import FailingScheduler, FakeScheduler
from domain.telemetry import (
    BASE_DELAY_MS,
    SendGuard,
    TelemetryReporter,
    TelemetrySender,
    compute_delay_ms,
)
from shared.contracts.v1.telemetry import Endpoint


def _make(enabled=True, rest=None, scheduler=None, base=BASE_DELAY_MS):
    guard = RecordingGuard(SendGuard())
    sender = TelemetrySender(
        guard=guard,
        rest=rest or FakeRestApiFactory(existing=FakeRestApi()),
        server_config=StaticServerConfig({"steamQueryPort": 2302}),
        endpoint=Endpoint(base_url="https://zenit.example.org"),
        mod_name="MySupperMode",
        mod_version="1.2.5",
    )
    sched = scheduler or FakeScheduler()
    reporter = TelemetryReporter(guard, sched, sender, enabled=enabled, base_delay_ms=base)
    return reporter, guard, sched


def test_delay_within_bounds():
    rng = random.Random(1234)
    for base in (1, 2, 1000, BASE_DELAY_MS):
        for _ in range(500):
            d = compute_delay_ms(base, rng)
            assert base <= d < 2 * base


def test_delay_rejects_non_positive_base():
    with pytest.raises(ValueError):
        compute_delay_ms(0)


def test_on_load_schedules_once_with_bounded_delay():
    reporter, guard, sched = _make()
    reporter.on_load()
    reporter.on_load()

    assert len(sched.calls) == 1
    fn, delay = sched.calls[0]
    assert fn == reporter.sender.send
    assert BASE_DELAY_MS <= delay < 2 * BASE_DELAY_MS
    assert guard.sent is True
    assert guard.admit_calls == 2


def test_on_load_does_not_send_synchronously():
    api = FakeRestApi()
    reporter, _, sched = _make(rest=FakeRestApiFactory(existing=api))
    reporter.on_load()
    assert api.requested == []
    assert sched.run_pending() == 1
    assert api.context is not None and len(api.context.posts) == 1


def test_disabled_makes_no_admission_and_no_schedule():
    reporter, guard, sched = _make(enabled=False)
    reporter.on_load()
    assert guard.admit_calls == 0
    assert sched.calls == []
    assert guard.sent is False


def test_refired_hook_readmits_after_abandoned_attempt():
    reporter, guard, sched = _make(rest=FakeRestApiFactory())
    reporter.on_load()
    sched.run_pending()
    assert guard.sent is False
    assert guard.release_calls == 1

    reporter.on_load()
    assert len(sched.calls) == 2
    assert guard.sent is True


def test_successful_send_is_never_repeated():
    reporter, guard, sched = _make()
    reporter.on_load()
    sched.run_pending()
    reporter.on_load()
    assert len(sched.calls) == 1
    assert guard.sent is True


def test_scheduler_failure_releases_and_does_not_raise():
    failing = FailingScheduler()
    reporter, guard, _ = _make(scheduler=failing)
    reporter.on_load()
    assert failing.attempts == 1
    assert guard.sent is False
