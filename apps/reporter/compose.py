from __future__ import annotations

import logging
from typing import Final

from adapters.rest_requests import RequestsRestApiFactory
from adapters.server_config import ServerCfgFile, StaticServerConfig
from adapters.time import TimerScheduler
from domain.telemetry import SendGuard, TelemetryReporter, TelemetrySender, default_guard
from ports.rest import RestApiFactoryPort
from ports.server_config import ServerConfigPort
from ports.time import SchedulerPort
from shared.contracts.v1.telemetry import Endpoint

from apps.reporter.settings import ReporterSettings

LOG: Final = logging.getLogger("zenit.compose")


def build_server_config(settings: ReporterSettings) -> ServerConfigPort:
    if settings.steam_query_port is not None:
        return StaticServerConfig({"steamQueryPort": settings.steam_query_port})
    if settings.server_config:
        return ServerCfgFile(settings.server_config)
    return StaticServerConfig()


def build_reporter(
    settings: ReporterSettings,
    scheduler: SchedulerPort | None = None,
    rest: RestApiFactoryPort | None = None,
    server_config: ServerConfigPort | None = None,
    guard: SendGuard | None = None,
) -> TelemetryReporter:
    guard = guard or default_guard()
    if rest is None:
        rest = RequestsRestApiFactory(
            timeout_s=settings.http_timeout_s, user_agent=settings.user_agent
        )
    sender = TelemetrySender(
        guard=guard,
        rest=rest,
        server_config=server_config or build_server_config(settings),
        endpoint=Endpoint(base_url=settings.telemetry_url),
        mod_name=settings.mod_name,
        mod_version=settings.mod_version,
    )
    if not settings.telemetry_enabled:
        LOG.info(
            "Telemetry disabled (disable_telemetry=%s, diagnostics=%s).",
            settings.disable_telemetry,
            settings.diagnostics,
        )
    return TelemetryReporter(
        guard=guard,
        scheduler=scheduler or TimerScheduler(),
        sender=sender,
        enabled=settings.telemetry_enabled,
        base_delay_ms=settings.telemetry_delay_ms,
    )
