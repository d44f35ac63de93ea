"""
Utility functions for lecture-notes-i18n
"""

from .app_logger import configure_logging, get_logger
from .language import detect_source_language, normalize_language

__all__ = ["configure_logging", "get_logger", "detect_source_language", "normalize_language"]
