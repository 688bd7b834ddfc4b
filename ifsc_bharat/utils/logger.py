"""Logging utilities for the ifsc_bharat package."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL_ENV = "IFSC_BHARAT_LOG_LEVEL"

_configured = False


def get_logger(name: str = "ifsc_bharat") -> logging.Logger:
    """Return a named logger, configuring the root handler on first use.

    The level comes from ``IFSC_BHARAT_LOG_LEVEL`` (``INFO`` when unset or
    unrecognised).
    """
    global _configured
    if not _configured:
        level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
        level = logging.getLevelName(level_name)
        logging.basicConfig(
            level=level if isinstance(level, int) else logging.INFO,
            format=LOG_FORMAT,
        )
        _configured = True
    return logging.getLogger(name)
