from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReporterSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ZENIT_", extra="ignore")

    # identity announced to the telemetry server
    mod_name: str = "MySupperMode"
    mod_version: str = "1.2.5"

    telemetry_url: str = "https://zenit.woozymasta.ru"
    telemetry_delay_ms: int = Field(default=600_000, gt=0)  # 10-20 min

    # both must allow telemetry for the load hook to admit anything
    disable_telemetry: bool = False
    diagnostics: bool = False

    # port source: explicit value wins over the server config file
    steam_query_port: int | None = None
    server_config: str | None = None  # path to serverDZ.cfg

    http_timeout_s: float = 10.0
    user_agent: str = ""

    @property
    def telemetry_enabled(self) -> bool:
        return not (self.disable_telemetry or self.diagnostics)
