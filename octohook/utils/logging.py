"""Centralized logging configuration for the octohook application."""

import logging
import sys

from octohook.config import Settings
from octohook.constants import LOG_DATE_FORMAT, LOG_FORMAT, LOGGER_NAME


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure logging for the application.

    Every record goes to stdout and is appended to ``settings.log_file``.

    Args:
        settings: Loaded application settings

    Returns:
        The application logger
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    file_handler = logging.FileHandler(settings.log_file, mode="a", encoding="utf-8")
    file_handler.setFormatter(formatter)

    # force=True so a second create_app() in the same process replaces handlers
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        handlers=[console_handler, file_handler],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return get_logger()


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the application namespace.

    Args:
        name: Optional child logger name, e.g. ``"webhook"``

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
