"""
Logger factory.

Usage:
    from gemimiw.logger import get_logger
    logger = get_logger(__name__)
    logger.info("Session created")
"""

import logging
import sys

from gemimiw.config import LOG_LEVEL

_DEFAULT_LEVEL = logging.getLevelName(LOG_LEVEL.upper())
if not isinstance(_DEFAULT_LEVEL, int):
    _DEFAULT_LEVEL = logging.INFO


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Return a named logger with the standard console formatter.

    Args:
        name: Usually ``__name__`` of the calling module.
        level: Explicit level override. Defaults to ``LOG_LEVEL``.
    """
    resolved_level = level if level is not None else _DEFAULT_LEVEL
    logger = logging.getLogger(name)

    # Avoid duplicate handlers when a module is imported twice
    if not logger.handlers:
        logger.setLevel(resolved_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(resolved_level)
        console_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(console_handler)
        logger.propagate = False

    return logger
