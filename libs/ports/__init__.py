from .rest import RestApiFactoryPort, RestApiPort, RestContextPort
from .server_config import ServerConfigPort
from .telemetry import AdmissionPort
from .time import SchedulerPort

__all__ = [
    "AdmissionPort",
    "RestApiFactoryPort",
    "RestApiPort",
    "RestContextPort",
    "SchedulerPort",
    "ServerConfigPort",
]
