"""
Logging infrastructure.

Provides logging utilities for the application layers.
"""
import logging

from northwind.settings import get_app_settings


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        settings = get_app_settings().logging
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.format))
        logger.addHandler(handler)
        logger.setLevel(settings.level.upper())
    return logger
