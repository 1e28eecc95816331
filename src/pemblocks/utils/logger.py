"""Minimal logging utilities for pemblocks.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications decide where records go.

Example:
    >>> from pemblocks.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Read PEM file")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pemblocks." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("certs")
        >>> logger.name
        'pemblocks.certs'
    """
    if not (name == "pemblocks" or name.startswith("pemblocks.")):
        name = f"pemblocks.{name}"
    return logging.getLogger(name)
