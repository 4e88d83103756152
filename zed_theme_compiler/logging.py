"""
Centralized logging configuration for zed_theme_compiler.

Usage:
    from zed_theme_compiler.logging import setup_logging, get_logger

    # In cli.py (once at startup)
    setup_logging(level='DEBUG', console=True)

    # In any module
    logger = get_logger(__name__)
    logger.debug("Some debug message")
"""

import logging
import os
import sys

ROOT_LOGGER = 'zed_theme_compiler'

# Environment variable consulted when no level is given explicitly
LOG_LEVEL_ENV = 'ZED_THEME_LOG'
DEFAULT_LEVEL = 'INFO'


def resolve_level(level=None):
    """Pick the log level: explicit argument, then $ZED_THEME_LOG, then INFO."""
    if level:
        return level.upper()
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL).upper()


def setup_logging(level=None, console=True):
    """
    Configure logging for the theme compiler.

    Args:
        level: Log level name ('DEBUG', 'INFO', 'WARNING', ...). Falls back to
            $ZED_THEME_LOG and then INFO.
        console: If True, log to stderr
    """
    level = resolve_level(level)
    numeric_level = getattr(logging, level, logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    if console:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter('%(levelname)-7s %(name)s: %(message)s'))
        logger.addHandler(handler)

    # Prevents "no handler" warnings
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug(f"Logging configured: level={level}, console={console}")


def get_logger(name):
    """
    Get a logger under the package namespace.

    Args:
        name: Module name, typically __name__

    Returns:
        Logger instance
    """
    if not name.startswith(ROOT_LOGGER):
        name = f'{ROOT_LOGGER}.{name}'
    return logging.getLogger(name)
