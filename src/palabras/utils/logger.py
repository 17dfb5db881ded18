"""Minimal logging utilities for palabras.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from palabras.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Reader exhausted")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "palabras." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'palabras.mymodule'
    """
    if not (name == "palabras" or name.startswith("palabras.")):
        name = f"palabras.{name}"
    return logging.getLogger(name)
