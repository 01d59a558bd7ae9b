"""Logging configuration for the GitHub manager library.

The library logs under the ``github_manager`` logger and stays silent
unless the host application configures it.

Example:
    >>> import logging
    >>> logging.getLogger("github_manager").setLevel(logging.DEBUG)

"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger("github_manager")

logger.setLevel(logging.WARNING)

logger.addHandler(logging.NullHandler())


def configure_logging(
    level: int = logging.INFO,
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach a stream handler to the library logger.

    Handy for scripts and debugging sessions; applications should prefer
    their own logging setup.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
        format_string: Custom format string for log messages.
        stream: Output stream (defaults to sys.stderr).

    Returns:
        The handler that was added, so callers can remove it again.

    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if stream is None:
        stream = sys.stderr

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(format_string))

    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
