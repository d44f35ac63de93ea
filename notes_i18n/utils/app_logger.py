"""
Logging utilities for lecture-notes-i18n
Centralized logging configuration shared by every module of the package
"""

import logging
import sys
from typing import Optional, Union


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Optional[Union[str, int]]) -> int:
    if level is None:
        from notes_i18n.config.settings import get_settings

        level = get_settings().log_level
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override; defaults to the configured log_level

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Don't add handlers if already configured
    if logger.handlers:
        return logger

    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    # Prevent duplicate logs
    logger.propagate = False

    return logger


def configure_logging(level: str = "INFO") -> None:
    """
    Configure global logging settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Set root logger level (works even when handlers exist)
    logging.root.setLevel(log_level)

    # Only add handler if no handlers exist (avoid duplicate handlers)
    if not logging.root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.root.addHandler(handler)


def get_i18n_logger(name: str = "core") -> logging.Logger:
    """Get a logger under the notes_i18n namespace."""
    return get_logger(f"notes_i18n.{name}")
