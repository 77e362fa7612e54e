"""Minimal logging utilities for memberdoc.

Provides a get_logger function that wraps the standard library logging.

Example:
    >>> from memberdoc.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering property summary")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "memberdoc." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("writers")
        >>> logger.name
        'memberdoc.writers'
    """
    if not (name == "memberdoc" or name.startswith("memberdoc.")):
        name = f"memberdoc.{name}"
    return logging.getLogger(name)
