"""Utility modules for the octohook application."""

from octohook.utils.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
