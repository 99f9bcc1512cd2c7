"""Logging setup for the hetu package logger."""

from __future__ import annotations

import logging

from hetu.core.config import HetuSettings

PACKAGE_LOGGER = "hetu"


def configure_logging(settings: HetuSettings | None = None) -> logging.Logger:
    """Apply ``settings.log_level`` to the package logger and return it.

    Handlers are left to the host application.
    """
    if settings is None:
        settings = HetuSettings()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.log_level.upper())
    return logger
