"""Minimal logging utilities for anyorder.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from anyorder.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiling pattern")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "anyorder." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'anyorder.mymodule'
    """
    if not (name == "anyorder" or name.startswith("anyorder.")):
        name = f"anyorder.{name}"
    return logging.getLogger(name)
