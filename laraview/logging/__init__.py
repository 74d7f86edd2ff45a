"""
Logging Package
Structured logging for the view layer

Provides drop-in replacement for standard logging.getLogger that keeps
all framework loggers under the 'laraview' namespace.
"""
from laraview.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

ROOT_LOGGER_NAME = 'laraview'


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Module-based names (containing '.') are used as-is. Bare names are
    only honoured when listed in the 'logging.CHANNELS' config; anything
    else falls back to the framework logger.

    Example:
        from laraview.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Resolved view", extra={'view': 'home.index'})
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if '.' not in name and name != ROOT_LOGGER_NAME:
        from laraview.support import Config
        if name not in Config.get('logging.CHANNELS', []):
            name = ROOT_LOGGER_NAME

    return logging.getLogger(name)
