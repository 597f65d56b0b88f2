"""Logging setup shared by the package.

Modules obtain their logger through :func:`get_logger`. Importing the
package never touches logging configuration; only the CLI calls
:func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys

from . import config

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_ROOT_NAME = "studio_analytics"
_handler: logging.Handler | None = None


def configure_logging(level: str | int | None = None) -> None:
    """Attach a stderr handler to the package logger (once) and set its level."""

    global _handler
    logger = logging.getLogger(_ROOT_NAME)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        logger.addHandler(_handler)
    resolved = level if level is not None else config.LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logger.setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A logging.Logger under the package hierarchy.
    """
    return logging.getLogger(name)
