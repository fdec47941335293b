"""Logging helpers for the command line."""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _default_level() -> int:
    env_level = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, env_level, logging.INFO)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name if name else "preexplorer")


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Send records to stderr at ``level`` (or ``LOG_LEVEL``, default INFO)."""
    log_level = getattr(logging, level.upper(), _default_level()) if level else _default_level()
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if not any(isinstance(h, logging.StreamHandler) for h in root_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
    return root_logger
