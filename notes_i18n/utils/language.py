"""
Language utilities for lecture-notes-i18n
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from notes_i18n.config.settings import I18nSettings, get_settings


LANGUAGE_SYNONYMS = {
    "english": "en",
    "eng": "en",
    "german": "de",
    "deutsch": "de",
    "deu": "de",
    "ger": "de",
    "russian": "ru",
    "rus": "ru",
}

CYRILLIC_PATTERN = re.compile(r"[а-яА-ЯёЁ]")
GERMAN_DIACRITICS_PATTERN = re.compile(r"[äöüßÄÖÜ]")


def get_supported_languages() -> List[str]:
    """
    Get list of supported languages.

    Returns:
        List of supported language codes
    """
    return list(get_settings().supported_languages)


def get_default_language() -> str:
    """
    Get default language.

    Returns:
        Default language code
    """
    return get_settings().default_language


def is_supported_language(lang: Optional[str]) -> bool:
    """
    Check if language is supported.

    Args:
        lang: Language code

    Returns:
        True if supported, False otherwise
    """
    return _primary_subtag(lang) in get_supported_languages()


def _primary_subtag(lang: Optional[str]) -> Optional[str]:
    if not lang:
        return None
    raw = str(lang).strip().lower()
    if not raw:
        return None

    # Strip quality values: "de;q=0.9"
    if ";" in raw:
        raw = raw.split(";", 1)[0].strip()

    # Take primary subtag: "de-at" -> "de"
    if "-" in raw:
        raw = raw.split("-", 1)[0].strip()
    if "_" in raw:
        raw = raw.split("_", 1)[0].strip()

    return LANGUAGE_SYNONYMS.get(raw, raw)


def normalize_language(lang: Optional[str]) -> str:
    """
    Normalize language code.

    Supports:
    - region codes (de-AT -> de, ru_RU -> ru)
    - common synonyms (eng/english, deu/german, rus/russian)

    Unknown or empty codes fall back to the default language.
    """
    code = _primary_subtag(lang)
    if code and code in get_supported_languages():
        return code
    return get_default_language()


@dataclass(frozen=True)
class DetectionRule:
    """One language's distinguishing character class and the share that triggers it."""

    language: str
    pattern: re.Pattern
    threshold: float

    def matches(self, text: str) -> bool:
        # strictly above: a text at exactly the threshold stays undecided
        return len(self.pattern.findall(text)) > len(text) * self.threshold


def default_detection_rules(config: Optional[I18nSettings] = None) -> Tuple[DetectionRule, ...]:
    """
    Detection rules in evaluation order.

    Script-based rules come first; diacritic rules use a much lower threshold
    since those characters are sparse even in genuine text.
    """
    config = config or get_settings()
    rules = (
        DetectionRule("ru", CYRILLIC_PATTERN, config.script_share_threshold),
        DetectionRule("de", GERMAN_DIACRITICS_PATTERN, config.diacritic_share_threshold),
    )
    return tuple(rule for rule in rules if rule.language in config.supported_languages)


def detect_source_language(
    text: Optional[str],
    rules: Optional[Tuple[DetectionRule, ...]] = None,
) -> str:
    """
    Heuristic source-language detection for newly captured text.

    Args:
        text: Text to analyze
        rules: Detection rules to apply, defaults to default_detection_rules()

    Returns:
        Detected language code (the default language when no rule matches)
    """
    if not text:
        return get_default_language()

    for rule in rules if rules is not None else default_detection_rules():
        if rule.matches(text):
            return rule.language

    return get_default_language()


LANGUAGE_NAMES = {
    "ru": "Русский",
    "de": "Deutsch",
    "en": "English",
}


def get_language_name(lang: str) -> str:
    """
    Get the native display name for a language code.

    Args:
        lang: Language code

    Returns:
        Human-readable language name, or the code itself when unknown
    """
    return LANGUAGE_NAMES.get(lang.lower(), lang)


def get_language_label(lang: str) -> str:
    """Short uppercase label for compact display ("de" -> "DE")."""
    return lang.upper()
