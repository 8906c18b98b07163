"""Logging setup for the command-line entry point.

The library modules only create loggers; handlers are installed here so
that importing the package never changes the host application's logging.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL_ENV = "LAYOUT_ANALYTICS_LOG_LEVEL"


class StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever ``sys.stderr`` is at emit time."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the package logger.

    ``verbose`` forces DEBUG; otherwise the level comes from
    ``LAYOUT_ANALYTICS_LOG_LEVEL`` (default WARNING).  Calling this more
    than once only updates the level.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = (os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)

    logger = logging.getLogger("layout_analytics")
    logger.setLevel(level)
    if not any(isinstance(h, StderrHandler) for h in logger.handlers):
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
