"""Shared logging setup for the matcher.

Usage example:
    from dog_breed_matcher.observability.logging import get_logger

    logger = get_logger("dog_breed_matcher.catalog")
    logger.info("Fetched %s breeds", breed_count)
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a logger writing UTC-stamped lines to stderr.

    The handler is attached once per name, so repeated calls (one per module
    import or per use-case invocation) never duplicate output.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
    return logger
