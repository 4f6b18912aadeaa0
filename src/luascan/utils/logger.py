"""Logging helpers for luascan.

Library modules only create loggers; handlers are left to the application.
The command line installs one through configure_logging.

Example:
    >>> from luascan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning chunk")
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the luascan namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger named ``luascan.<name>``, or ``name`` itself when
        it already lives under luascan

    Example:
        >>> get_logger("repl").name
        'luascan.repl'
    """
    if not (name == "luascan" or name.startswith("luascan.")):
        name = f"luascan.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr at the given level (one of LOG_LEVELS)."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
