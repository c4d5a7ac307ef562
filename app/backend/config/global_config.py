from pydantic_settings import BaseSettings, SettingsConfigDict
from .logger_config import LoggerConfig
from .openapi_config import OpenAPIConfig
from .runtime_config import RuntimeConfig
from .server_config import ServerConfig
from .storage_config import StorageConfig


class GlobalConfig(BaseSettings):
    """Global configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False)

    logger: LoggerConfig = LoggerConfig()
    """Logger configuration settings"""
    openapi: OpenAPIConfig = OpenAPIConfig()
    """OpenAPI configuration settings"""
    server: ServerConfig = ServerConfig()
    """Server configuration settings"""
    storage: StorageConfig = StorageConfig()
    """Record file and uploaded scripts location"""
    runtime: RuntimeConfig = RuntimeConfig()
    """Interpreters used to launch bots"""


# --------------------------------------------------------------------------- #

config = GlobalConfig()
"""Global configuration instance

This instance is used to access the global configuration settings.

Example:
>>> from backend.config import config
>>> print(config.server.port)
10000
"""
