"""Centralized logging helpers.

A single stream handler lives on the ``neldermead`` logger; component loggers
(``neldermead.<component>``) carry no handlers of their own and propagate to it.
"""

from __future__ import annotations

import logging
from typing import Final

_LOGGER_NAME: Final = "neldermead"
_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATE_FORMAT: Final = "%Y-%m-%d %H:%M:%S"


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def get_logger(component: str | None = None, level: int | str | None = None) -> logging.Logger:
    """Return the package logger, or a child named after ``component``.

    ``level`` overrides the threshold of the returned logger only.
    """
    package = _package_logger()
    logger = logging.getLogger(f"{_LOGGER_NAME}.{component}") if component else package
    if level is not None:
        logger.setLevel(level)
    return logger
