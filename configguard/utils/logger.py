"""Logging configuration for ConfigGuard."""

import logging
import sys
from typing import Optional

from configguard.core.exceptions import ConfigurationError

ROOT_LOGGER = "configguard"
DEFAULT_LEVEL = "WARNING"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Handlers live on the ``configguard`` package logger so every module
    logger shares one stderr handler; stdout is left to scan output.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    root = logging.getLogger(ROOT_LOGGER)

    # Only configure if no handlers exist
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(getattr(logging, DEFAULT_LEVEL))

    if level:
        set_level(level)

    return logging.getLogger(name)


def set_level(level: str) -> None:
    """Change the level of all ConfigGuard loggers."""
    log_level = getattr(logging, str(level).upper(), None)
    if not isinstance(log_level, int):
        raise ConfigurationError(f"Invalid log level: {level}")
    logging.getLogger(ROOT_LOGGER).setLevel(log_level)
