"""
Hand Cricket Configuration.

Environment variables, settings, and logging configuration.
"""

from src.config.logging_config import configure_logging
from src.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
