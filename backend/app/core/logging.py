"""Logging configuration for the customs office backend.

Call ``setup_logging()`` once at startup; modules obtain their logger with
``get_logger(__name__)`` and inherit the handlers configured here.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "customs_office"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_format: Optional[str] = None) -> logging.Logger:
    """Configure the application root logger with a stdout handler."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates on reload
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(log_format or DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the application root logger."""
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
