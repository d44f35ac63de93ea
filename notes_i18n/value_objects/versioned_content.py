"""
Versioned multilingual content

Reads fall back to the source language. Writes never let an automated
(is_manual=False) value replace a manual one; such writes are silent no-ops
so periodic re-translation passes need no special handling.

The module-level functions are pure over Optional[I18nData]; None stands for
"no structured data". VersionedContentStore holds one document's value for
an editing session and applies every write as a single synchronous
read-modify-write.
"""

from __future__ import annotations

import json
from typing import List, Optional

from notes_i18n.config.settings import get_settings
from notes_i18n.models.i18n import I18nData, LanguageCode, LanguageVersion
from notes_i18n.services.format_migrator import parse_notes
from notes_i18n.utils.app_logger import get_logger
from notes_i18n.utils.language import detect_source_language

logger = get_logger(__name__)


# =============================================================================
# Reads
# =============================================================================


def text_in(data: Optional[I18nData], lang: LanguageCode) -> str:
    """Text in `lang`, else the source-language text, else ''."""
    if data is None:
        return ""
    version = data.version(lang)
    if version and version.text:
        return version.text
    source = data.source_version()
    return source.text if source and source.text else ""


def title_in(data: Optional[I18nData], lang: LanguageCode) -> str:
    """Title in `lang`, else the source-language title, else ''."""
    if data is None:
        return ""
    version = data.version(lang)
    if version and version.title:
        return version.title
    source = data.source_version()
    return source.title if source and source.title else ""


def has_version(data: Optional[I18nData], lang: LanguageCode) -> bool:
    """True only when `lang` has its own non-empty text (fallback does not count)."""
    if data is None:
        return False
    version = data.version(lang)
    return bool(version and version.text)


def has_title_version(data: Optional[I18nData], lang: LanguageCode) -> bool:
    if data is None:
        return False
    version = data.version(lang)
    return bool(version and version.title)


def is_manual(data: Optional[I18nData], lang: LanguageCode) -> bool:
    if data is None:
        return False
    version = data.version(lang)
    return bool(version and version.is_manual)


def available_languages(data: Optional[I18nData]) -> List[LanguageCode]:
    """Supported languages that carry their own non-empty text."""
    if data is None:
        return []
    supported = get_settings().supported_languages
    return [lang for lang, version in data.versions.items() if lang in supported and version.text]


# =============================================================================
# Writes
# =============================================================================


def _blocked(existing: Optional[LanguageVersion], incoming_manual: bool) -> bool:
    return bool(existing and existing.is_manual and not incoming_manual)


def _with_version(data: I18nData, lang: LanguageCode, version: LanguageVersion) -> I18nData:
    return data.model_copy(update={"versions": {**data.versions, lang: version}})


def set_version(data: I18nData, lang: LanguageCode, text: str, manual: bool) -> I18nData:
    """
    Set the text of `lang`, keeping any existing title.

    Returns `data` unchanged when the existing entry is manual and the write is not.
    """
    existing = data.version(lang)
    if _blocked(existing, manual):
        logger.debug(f"Ignoring automated text write over manual '{lang}' version")
        return data
    title = existing.title if existing else None
    return _with_version(data, lang, LanguageVersion(title=title, text=text, is_manual=manual))


def set_full_version(
    data: I18nData,
    lang: LanguageCode,
    title: Optional[str],
    text: str,
    manual: bool,
) -> I18nData:
    """Replace the whole entry of `lang` (title, text and flag), same precedence as set_version."""
    if _blocked(data.version(lang), manual):
        logger.debug(f"Ignoring automated full write over manual '{lang}' version")
        return data
    return _with_version(data, lang, LanguageVersion(title=title, text=text, is_manual=manual))


def set_title(data: I18nData, lang: LanguageCode, title: str, manual: bool) -> I18nData:
    """
    Set the title of `lang`.

    A missing entry is created with empty text. On an existing entry the
    manual flag can only be raised, never lowered.
    """
    existing = data.version(lang)
    if existing is None:
        return _with_version(data, lang, LanguageVersion(title=title, text="", is_manual=manual))
    return _with_version(
        data,
        lang,
        existing.model_copy(update={"title": title, "is_manual": manual or existing.is_manual}),
    )


def create_i18n_data(
    source_text: str,
    source_language: LanguageCode,
    source_title: Optional[str] = None,
) -> I18nData:
    """Fresh content holding only the manual source version."""
    return I18nData(
        source_language=source_language,
        versions={
            source_language: LanguageVersion(title=source_title or None, text=source_text, is_manual=True)
        },
    )


def serialize_notes(data: I18nData) -> str:
    """Canonical notes blob, wrapped under the configured envelope key."""
    return json.dumps({get_settings().envelope_key: data.to_payload()}, ensure_ascii=False)


# =============================================================================
# Store
# =============================================================================


class VersionedContentStore:
    """
    Multilingual content of one document for the duration of an editing session.

    Each write computes the new value and assigns it inside one call, so the
    manual-precedence check and the assignment are never split.
    """

    def __init__(self, data: Optional[I18nData] = None):
        self._data = data

    @classmethod
    def from_notes(cls, raw: Optional[str]) -> "VersionedContentStore":
        return cls(parse_notes(raw))

    @classmethod
    def create(
        cls,
        source_text: str,
        source_language: LanguageCode,
        source_title: Optional[str] = None,
    ) -> "VersionedContentStore":
        return cls(create_i18n_data(source_text, source_language, source_title))

    @classmethod
    def from_material(
        cls,
        notes: Optional[str],
        plain_text: Optional[str] = None,
        title: Optional[str] = None,
        source_language: Optional[LanguageCode] = None,
    ) -> "VersionedContentStore":
        """
        Store for a material record.

        Structured notes win; otherwise the plain OCR text seeds a fresh
        document whose source language is `source_language` or detected.
        Without either the store stays empty.
        """
        data = parse_notes(notes)
        if data is None and plain_text and plain_text.strip():
            lang = source_language or detect_source_language(plain_text)
            data = create_i18n_data(plain_text, lang, title)
        return cls(data)

    @property
    def data(self) -> Optional[I18nData]:
        return self._data

    @property
    def has_data(self) -> bool:
        return self._data is not None

    @property
    def source_language(self) -> Optional[LanguageCode]:
        return self._data.source_language if self._data is not None else None

    def text_in(self, lang: LanguageCode) -> str:
        return text_in(self._data, lang)

    def title_in(self, lang: LanguageCode) -> str:
        return title_in(self._data, lang)

    def has_version(self, lang: LanguageCode) -> bool:
        return has_version(self._data, lang)

    def has_title_version(self, lang: LanguageCode) -> bool:
        return has_title_version(self._data, lang)

    def is_manual(self, lang: LanguageCode) -> bool:
        return is_manual(self._data, lang)

    def available_languages(self) -> List[LanguageCode]:
        return available_languages(self._data)

    def set_version(self, lang: LanguageCode, text: str, manual: bool) -> Optional[I18nData]:
        if self._data is None:
            logger.debug(f"Ignoring write for '{lang}': store has no structured data")
            return None
        self._data = set_version(self._data, lang, text, manual)
        return self._data

    def set_full_version(
        self,
        lang: LanguageCode,
        title: Optional[str],
        text: str,
        manual: bool,
    ) -> Optional[I18nData]:
        if self._data is None:
            logger.debug(f"Ignoring write for '{lang}': store has no structured data")
            return None
        self._data = set_full_version(self._data, lang, title, text, manual)
        return self._data

    def set_title(self, lang: LanguageCode, title: str, manual: bool) -> Optional[I18nData]:
        if self._data is None:
            logger.debug(f"Ignoring title write for '{lang}': store has no structured data")
            return None
        self._data = set_title(self._data, lang, title, manual)
        return self._data

    def serialize(self) -> Optional[str]:
        """Notes blob to persist, or None when there is nothing structured to save."""
        if self._data is None:
            return None
        return serialize_notes(self._data)

    def __repr__(self) -> str:
        if self._data is None:
            return "VersionedContentStore(empty)"
        return (
            f"VersionedContentStore(source={self._data.source_language!r}, "
            f"languages={sorted(self._data.versions)!r})"
        )
