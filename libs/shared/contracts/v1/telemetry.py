from __future__ import annotations

from typing import Final, Literal

from pydantic import BaseModel, ConfigDict

TELEMETRY_PATH: Final = "/api/telemetry"
CONTENT_TYPE_JSON: Final = "application/json"


class TelemetryPayload(BaseModel):
    """Identity announcement POSTed once per process.

    Field order is the wire order: application, version, type, port.
    """

    model_config = ConfigDict(frozen=True)

    application: str
    version: str
    type: Literal["steam"] = "steam"
    port: int  # range is checked by the receiving server

    def to_body(self) -> str:
        # compact separators, declaration order preserved
        return self.model_dump_json()


class Endpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str
    path: str = TELEMETRY_PATH
    method: Literal["POST"] = "POST"
    content_type: str = CONTENT_TYPE_JSON
