"""Structured logging for Weather Gateway.

Records go to the console in a human-readable format and, unless disabled,
to a rotating JSON file under ``Settings.log_dir``. Every handler carries a
RedactingFilter, so the OpenWeatherMap appid never reaches a log line, even
when it shows up inside an exception message or a logged URL.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

from pythonjsonlogger import jsonlogger

from weather_gateway.config import Settings
from weather_gateway.middleware.logging_middleware import RedactingFilter

LOG_FILE_NAME = "weather_gateway.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_FILE_BACKUPS = 5

# Third-party loggers that would otherwise repeat every upstream call
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _json_file_handler(settings: Settings) -> logging.Handler:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        settings.log_dir / LOG_FILE_NAME,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
    )
    handler.setLevel(logging.DEBUG)
    return handler


def _console_handler(settings: Settings) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler.setLevel(settings.log_level)
    return handler


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the root logger from settings.

    Args:
        settings: Application settings (log_level, log_dir, log_to_file)

    Returns:
        Configured root logger instance
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    root_logger.handlers.clear()

    handlers = [_console_handler(settings)]
    if settings.log_to_file:
        handlers.append(_json_file_handler(settings))

    redacting_filter = RedactingFilter()
    for handler in handlers:
        handler.addFilter(redacting_filter)
        root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with additional structured context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Additional fields to include in JSON log (e.g. url, event_type)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra_fields)
