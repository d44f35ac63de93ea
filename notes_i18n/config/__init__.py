"""
Unified configuration access point for lecture-notes-i18n

    from notes_i18n.config import get_settings

    key = get_settings().envelope_key
"""

from .settings import Environment, I18nSettings, get_settings, reload_settings

__all__ = ["Environment", "I18nSettings", "get_settings", "reload_settings"]
