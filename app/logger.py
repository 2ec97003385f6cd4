"""Centralized loguru configuration.

The default loguru handler is replaced once, here. Other modules must not
add sinks themselves and import the configured instance instead::

    from app.logger import logger
"""

import sys

from loguru import logger

from .core import get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

logger.remove()
logger.add(
    sys.stderr,
    format=LOG_FORMAT,
    level=get_settings().LOG_LEVEL.upper(),
    colorize=True,
)

__all__ = ["logger"]
