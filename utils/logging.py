"""Shared logger factory for the openware scripts.

Loggers write to stderr so that scripts can keep stdout for their JSON output.
"""

import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def _level(value: str) -> int:
    return getattr(logging, value.upper(), logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Return a stderr logger for the given module name, configured once."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_level(os.getenv("LOG_LEVEL", "INFO")))
        logger.propagate = False
    return logger


def set_log_level(level: str, *names: str) -> None:
    """Override the level of already named loggers, e.g. from a --log-level flag."""
    for name in names:
        get_logger(name).setLevel(_level(level))
