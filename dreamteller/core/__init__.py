"""Core infrastructure utilities."""

from .config import DreamSettings, get_settings
from .logging_config import configure_logging, get_logger

__all__ = [
    "DreamSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
]
