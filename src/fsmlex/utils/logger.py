"""Minimal logging utilities for fsmlex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from fsmlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Building pattern table")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "fsmlex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'fsmlex.mymodule'
    """
    if not (name == "fsmlex" or name.startswith("fsmlex.")):
        name = f"fsmlex.{name}"
    return logging.getLogger(name)
