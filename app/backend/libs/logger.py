from __future__ import annotations

import logging
import os
from enum import Enum
from logging import handlers

from ..config import config

# --------------------------------------------------------------------------- #


class LogLevel(int, Enum):
    NOTSET = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


_FORMAT_PATTERN = "%(asctime)s - [%(levelname)s] [%(threadName)s] %(name)s::%(funcName)s %(message)s (%(filename)s:%(lineno)d)"

# --------------------------------------------------------------------------- #


class ConsoleFormatter(logging.Formatter):
    green = "\x1b[32m"
    bold_green = "\x1b[32;1m"
    yellow = "\x1b[33m"
    red = "\x1b[31m"
    bold_red = "\x1b[31;1m"
    bg_red = "\x1b[41m"
    reset = "\x1b[0m"
    format_pattern = _FORMAT_PATTERN

    FORMATS = {
        logging.DEBUG: reset + format_pattern + reset,
        logging.INFO: bold_green + format_pattern + reset,
        logging.WARNING: yellow + format_pattern + reset,
        logging.ERROR: bold_red + format_pattern + reset,
        logging.CRITICAL: bg_red + format_pattern + reset,
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, self.format_pattern)
        formatter = logging.Formatter(fmt=log_fmt, datefmt=Logger._datefmt)
        return formatter.format(record)


# --------------------------------------------------------------------------- #


class FileFormatter(logging.Formatter):
    format_pattern = _FORMAT_PATTERN

    def format(self, record):
        formatter = logging.Formatter(fmt=self.format_pattern, datefmt=Logger._datefmt)
        return formatter.format(record)


# --------------------------------------------------------------------------- #


class BotOutputFormatter(logging.Formatter):
    """Formatter for lines captured from a bot's stdout/stderr

    Caller location is meaningless for forwarded output, so only the
    timestamp, level and the bot-prefixed line are kept.
    """

    format_pattern = "%(asctime)s - [%(levelname)s] %(name)s %(message)s"

    def format(self, record):
        formatter = logging.Formatter(fmt=self.format_pattern, datefmt=Logger._datefmt)
        return formatter.format(record)


# --------------------------------------------------------------------------- #


class Logger:
    """Logger instance generator"""

    # * List of loggers
    __loggers = {}

    # * Class parameters
    _default_name = "unknown_logger"
    _default_level = getattr(LogLevel, config.logger.log_level.upper(), LogLevel.INFO)
    _datefmt = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def _file_handler(cls, level: int, formatter: logging.Formatter) -> logging.Handler:
        """Create the rotating file handler pointed at `config.logger.log_file`"""
        log_file_path = config.logger.log_file
        log_dir = os.path.dirname(log_file_path)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)
        file_handler = handlers.TimedRotatingFileHandler(
            filename=log_file_path,
            when="midnight",  # Rotate at midnight
            interval=1,  # Every 1 day
            backupCount=14,  # Keep 14 days of logs
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        return file_handler

    @classmethod
    def get_logger(
        cls,
        name: str | None = None,
        level: int | None = None,
    ) -> logging.Logger:
        """Get a logger instance or create it if it doesn't exist

        Parameters:
            name (str): Logger name
            level (int): Logger level

        Returns:
            Logger: Logger instance
        """
        # * Set default values
        if name is None:
            name = cls._default_name
        if level is None:
            level = cls._default_level

        # * Check if logger already exists
        if name in cls.__loggers:
            return cls.__loggers[name]

        # * Bot output keeps its own compact format
        is_bot_output = name == config.logger.bot_output_logger

        # * Create logger
        logger = logging.getLogger(name)
        logger.setLevel(level)

        if config.logger.log_to_console:
            handler = logging.StreamHandler()
            handler.setLevel(level)
            handler.setFormatter(
                BotOutputFormatter() if is_bot_output else ConsoleFormatter()
            )
            logger.addHandler(handler)

        if config.logger.log_to_file:
            logger.addHandler(
                cls._file_handler(
                    level, BotOutputFormatter() if is_bot_output else FileFormatter()
                )
            )

        # * Add logger to list
        cls.__loggers[name] = logger
        logger.propagate = False

        return logger

    @classmethod
    def get_bot_output_logger(cls) -> logging.Logger:
        """Get the logger that receives the output of running bots"""
        return cls.get_logger(config.logger.bot_output_logger)

    @classmethod
    def setup_loggers(cls):
        """Setup third-party loggers (uvicorn, asyncio) based on the configuration"""

        for logger_to_setup in config.logger.loggers_to_setup:
            # ? Set logger level and disable propagation
            log_level = getattr(logging, logger_to_setup["level"], logging.INFO)
            logger = logging.getLogger(logger_to_setup["name"])
            logger.setLevel(log_level)
            logger.propagate = False
            logger.handlers.clear()

            filters: list[logging.Filter] = []
            for filter_name in logger_to_setup.get("filters", []):
                if filter_name == "healthcheck_filter":
                    filters.append(HealthCheckFilter())
                elif filter_name == "favicon_filter":
                    filters.append(FaviconFilter())

            # ? Add handlers to logger, each carrying the filters
            logger_handlers: list[logging.Handler] = []
            if config.logger.log_to_console:
                handler = logging.StreamHandler()
                handler.setLevel(log_level)
                handler.setFormatter(ConsoleFormatter())
                logger_handlers.append(handler)
            if config.logger.log_to_file:
                logger_handlers.append(cls._file_handler(log_level, FileFormatter()))

            for handler in logger_handlers:
                for log_filter in filters:
                    handler.addFilter(log_filter)
                logger.addHandler(handler)


# --------------------------------------------------------------------------- #
# The following classes are used by uvicorn to filter logs
# --------------------------------------------------------------------------- #


class HealthCheckFilter(logging.Filter):
    def filter(self, record):
        return "/healthcheck" not in record.getMessage()


# --------------------------------------------------------------------------- #


class FaviconFilter(logging.Filter):
    def filter(self, record):
        return "/favicon.ico" not in record.getMessage()
