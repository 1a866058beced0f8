# libs/domain/telemetry/sender.py
from __future__ import annotations

import logging
from typing import Final

from ports.rest import RestApiFactoryPort
from ports.server_config import ServerConfigPort
from ports.telemetry import AdmissionPort
from shared.contracts.v1.telemetry import Endpoint, TelemetryPayload

LOG: Final = logging.getLogger("zenit.sender")

PORT_CONFIG_KEY: Final = "steamQueryPort"


class TelemetrySender:
    """Performs one fire-and-forget telemetry POST per call to `send()`."""

    def __init__(
        self,
        guard: AdmissionPort,
        rest: RestApiFactoryPort,
        server_config: ServerConfigPort,
        endpoint: Endpoint,
        mod_name: str,
        mod_version: str,
    ) -> None:
        self.guard: Final = guard
        self.rest: Final = rest
        self.server_config: Final = server_config
        self.endpoint: Final = endpoint
        self.mod_name = mod_name
        self.mod_version = mod_version

    def build_payload(self) -> TelemetryPayload:
        return TelemetryPayload(
            application=self.mod_name,
            version=self.mod_version,
            port=self.server_config.get_int(PORT_CONFIG_KEY, 0),
        )

    def _acquire_api(self):
        try:
            api = self.rest.get()
            if api is None:
                api = self.rest.create()
        except Exception as ex:
            LOG.debug("Transport factory failed: %r", ex)
            return None
        return api

    def send(self) -> None:
        api = self._acquire_api()
        if api is None:
            LOG.debug("No transport available; telemetry attempt abandoned.")
            self.guard.release()
            return

        try:
            ctx = api.get_context(self.endpoint.base_url)
        except Exception as ex:
            LOG.debug("Context for %s failed: %r", self.endpoint.base_url, ex)
            ctx = None
        if ctx is None:
            LOG.debug("No request context for %s; attempt abandoned.", self.endpoint.base_url)
            self.guard.release()
            return

        # From here on the attempt counts as started: never release, never raise.
        try:
            body = self.build_payload().to_body()
            ctx.set_header(self.endpoint.content_type)
            ctx.post(self.endpoint.path, body)
        except Exception as ex:
            LOG.debug("Telemetry send failed: %r", ex)
            return
        LOG.debug("Telemetry posted to %s%s", self.endpoint.base_url, self.endpoint.path)
