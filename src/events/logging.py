"""
Map Events Logging

Provides centralized logging configuration for the map event system.
"""

import logging
from typing import Optional

# Package logger; modules log through map_events.<name> children from get_logger()
logger = logging.getLogger("map_events")

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Get a child logger of the map_events logger."""
    return logger.getChild(name)


def configure_logging(
    level: int = logging.WARNING,
    format_str: Optional[str] = None,
    date_format: Optional[str] = None,
):
    """
    Configure the map event system logging.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO)
        format_str: Log message format string
        date_format: Date format string
    """
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            format_str or DEFAULT_FORMAT,
            datefmt=date_format or DEFAULT_DATE_FORMAT,
        )
    )

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def set_debug_enabled(enabled: bool):
    """
    Enable or disable debug logging.

    Args:
        enabled: True to enable debug logging, False for warning-only
    """
    level = logging.DEBUG if enabled else logging.WARNING
    logger.setLevel(level)


def is_debug_enabled() -> bool:
    """Check if debug logging is enabled."""
    return logger.level <= logging.DEBUG


# Warnings only until configured; records still propagate to the root logger
logger.setLevel(logging.WARNING)
