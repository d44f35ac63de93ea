"""
User-facing messages (RU/DE/EN).

- Deterministic catalog, no translation APIs
- The display language is always an explicit argument
"""

from .messages import TranslationPromptText, m, no_text_available_message, translation_prompt_text

__all__ = [
    "m",
    "no_text_available_message",
    "translation_prompt_text",
    "TranslationPromptText",
]
