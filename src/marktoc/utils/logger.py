"""Minimal logging utilities for marktoc.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from marktoc.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Extracted %d headings", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "marktoc." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'marktoc.mymodule'
    """
    if not (name == "marktoc" or name.startswith("marktoc.")):
        name = f"marktoc.{name}"
    return logging.getLogger(name)
