from .cfg_file import ServerCfgFile, parse_server_cfg
from .static import StaticServerConfig

__all__ = ["ServerCfgFile", "StaticServerConfig", "parse_server_cfg"]
