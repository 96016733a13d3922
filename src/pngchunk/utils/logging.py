"""Logging utilities for pngchunk."""

from __future__ import annotations

import logging
import os
from typing import IO, Optional

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "PNGCHUNK_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER = "pngchunk"


def configure_logging(
    level: Optional[str] = None, stream: Optional[IO[str]] = None
) -> logging.Logger:
    """Configure the ``pngchunk`` logger and return it.

    The level comes from *level*, then ``PNGCHUNK_LOG_LEVEL``, then ``INFO``;
    unknown names fall back to ``INFO``.  A single stream handler is attached
    on the first call, so the root logger and other libraries are left alone.
    """
    log_level = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, log_level, logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
