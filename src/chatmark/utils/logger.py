"""Logging helper for chatmark.

chatmark only emits records (debug level); it never installs handlers.
Configure the ``chatmark`` logger in the host application to see them.

Example:
    >>> from chatmark.utils.logger import get_logger
    >>> get_logger("parser").name
    'chatmark.parser'
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger under the ``chatmark.`` namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == "chatmark" or name.startswith("chatmark.")):
        name = f"chatmark.{name}"
    return logging.getLogger(name)
