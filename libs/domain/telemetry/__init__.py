from .guard import SendGuard, default_guard
from .reporter import BASE_DELAY_MS, TelemetryReporter, compute_delay_ms
from .sender import PORT_CONFIG_KEY, TelemetrySender

__all__ = [
    "BASE_DELAY_MS",
    "PORT_CONFIG_KEY",
    "SendGuard",
    "TelemetryReporter",
    "TelemetrySender",
    "compute_delay_ms",
    "default_guard",
]
