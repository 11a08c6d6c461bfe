"""Minimal logging utilities for letlang.

Provides a get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from letlang.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "letlang." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'letlang.mymodule'
    """
    if not (name == "letlang" or name.startswith("letlang.")):
        name = f"letlang.{name}"
    return logging.getLogger(name)
