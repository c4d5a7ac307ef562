from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.backend_config import backend_config

from .logger_config import LoggerConfig

_LOG_FORMAT = "%(asctime)s - [%(levelname)s] [%(threadName)s] %(name)s::%(funcName)s %(message)s (%(filename)s:%(lineno)d)"


def log_handlers(type: str, logger_config: LoggerConfig | None = None) -> list[str]:
    """Determine uvicorn log handlers based on the logger configuration"""
    logger_config = logger_config or LoggerConfig()
    handlers = []
    if logger_config.log_to_console:
        handlers.append("access" if type == "access" else "default")
    if logger_config.log_to_file:
        handlers.append("log_file")
    return handlers


def build_log_config(logger_config: LoggerConfig | None = None) -> dict:
    """Build the `logging.config.dictConfig` mapping handed to uvicorn"""
    logger_config = logger_config or LoggerConfig()
    handlers = {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
        "access": {
            "formatter": "access",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "filters": ["healthcheck_filter", "favicon_filter"],
        },
    }
    if logger_config.log_to_file:
        handlers["log_file"] = {
            "formatter": "default_blank",
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": logger_config.log_file,
            "when": "midnight",  # Rotate at midnight
            "interval": 1,  # Every 1 day
            "backupCount": 7,  # Keep 7 days of logs
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "format": _LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "use_colors": True,
            },
            "default_blank": {
                "()": "uvicorn.logging.DefaultFormatter",
                "format": _LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "use_colors": False,
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "format": _LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "use_colors": True,
            },
        },
        "filters": {
            "healthcheck_filter": {"()": "backend.libs.logger.HealthCheckFilter"},
            "favicon_filter": {"()": "backend.libs.logger.FaviconFilter"},
        },
        "handlers": handlers,
        "loggers": {
            "uvicorn": {
                "handlers": log_handlers("default", logger_config),
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": log_handlers("default", logger_config),
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": log_handlers("access", logger_config),
                "level": "INFO",
                "propagate": False,
            },
        },
        "root": {
            "handlers": log_handlers("default", logger_config),
            "level": "DEBUG",
        },
    }


class ServerConfig(BaseSettings):
    """Server configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="SERVER_")

    dev_mode: bool = backend_config.server_dev_mode
    """Whether the server is running in development mode"""
    reload: bool = backend_config.server_reload
    """Enable auto-reload of the server on code changes (only in development mode)"""
    host: str = "0.0.0.0"
    """The host IP address the server binds to"""
    port: int = Field(
        default=10000, validation_alias=AliasChoices("PORT", "SERVER_PORT")
    )
    """The port number used to access the server (`PORT` environment variable)"""
    log_config: dict = build_log_config()
    """Logging configuration dictionary for the server"""
