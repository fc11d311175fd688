"""Minimal logging utilities for Pliegue.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from pliegue.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pliegue." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'pliegue.mymodule'
    """
    if not (name == "pliegue" or name.startswith("pliegue.")):
        name = f"pliegue.{name}"
    return logging.getLogger(name)
