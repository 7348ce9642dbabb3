"""Shared logger for the API, the listing store and the Streamlit app."""

from __future__ import annotations

import logging
import os
from typing import Optional

ROOT_LOGGER = "listings"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach one stream handler to the ``listings`` logger.

    Repeated calls leave the existing handler alone. Children obtained through
    ``get_logger`` inherit it, so ``api``, ``db.repo`` and ``app.client`` all
    write one line per record to the same stream.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())
    logger.propagate = False
    return logger


def get_logger(child: Optional[str] = None) -> logging.Logger:
    base = configure_logging()
    return base.getChild(child) if child else base
