"""Structured logging for broker events (subscribe, publish, deliver)."""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def get_logger(name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Return a logger with a stdout handler attached on first use."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger
