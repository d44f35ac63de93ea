"""
Notes format migration

The notes field of a material has held three JSON shapes over time:

- canonical:      {"i18n": {"sourceLanguage", "versions": {lang: {title, text, isManual}}}}
- legacy titled:  {"originalLanguage", "originalText": {title, text}, "translations": {lang: {title, text}}}
- legacy flat:    {"originalText": str, "sourceLanguage", "translations": {lang: str}}

Detectors are tried most-specific first and each produces the canonical
I18nData. Anything that is not JSON, or matches no detector, is plain text
and yields None; parsing never raises.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from pydantic import ValidationError

from notes_i18n.config.settings import get_settings
from notes_i18n.models.i18n import I18nData, LanguageVersion, NotesFormat
from notes_i18n.utils.app_logger import get_logger

logger = get_logger(__name__)


class NotesFormatDetector(ABC):
    """Recognises one persisted shape and converts it to I18nData."""

    format: NotesFormat

    @abstractmethod
    def matches(self, payload: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    @abstractmethod
    def migrate(self, payload: Mapping[str, Any]) -> I18nData:
        raise NotImplementedError


class CanonicalFormat(NotesFormatDetector):
    format = NotesFormat.CANONICAL

    def __init__(self, envelope_key: Optional[str] = None):
        self._envelope_key = envelope_key

    @property
    def envelope_key(self) -> str:
        return self._envelope_key or get_settings().envelope_key

    def _envelope(self, payload: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
        envelope = payload.get(self.envelope_key)
        return envelope if isinstance(envelope, Mapping) else None

    def matches(self, payload: Mapping[str, Any]) -> bool:
        envelope = self._envelope(payload)
        if envelope is None:
            return False
        return bool(envelope.get("sourceLanguage")) and isinstance(envelope.get("versions"), Mapping)

    def migrate(self, payload: Mapping[str, Any]) -> I18nData:
        envelope = self._envelope(payload)
        versions: Dict[str, LanguageVersion] = {}
        for lang, content in envelope["versions"].items():
            version = _validated_version(lang, content)
            if version is not None:
                versions[lang] = version
        return I18nData(source_language=envelope["sourceLanguage"], versions=versions)


def _validated_version(lang: str, content: Any) -> Optional[LanguageVersion]:
    """Validate one version entry; a malformed entry is dropped, not the document."""
    if not isinstance(content, Mapping):
        logger.debug(f"Skipping malformed version for '{lang}'")
        return None
    try:
        return LanguageVersion.model_validate(content)
    except ValidationError as e:
        logger.debug(f"Skipping invalid version for '{lang}': {e}")
        return None


def _translation_entries(payload: Mapping[str, Any], source_language: str) -> Iterable[Tuple[str, Any]]:
    translations = payload.get("translations")
    if not isinstance(translations, Mapping):
        return ()
    return (
        (lang, content)
        for lang, content in translations.items()
        if content and lang != source_language
    )


class LegacyTitledFormat(NotesFormatDetector):
    format = NotesFormat.LEGACY_TITLED

    def matches(self, payload: Mapping[str, Any]) -> bool:
        original = payload.get("originalText")
        return bool(payload.get("originalLanguage")) and isinstance(original, Mapping) and bool(original.get("text"))

    def migrate(self, payload: Mapping[str, Any]) -> I18nData:
        source_language = payload["originalLanguage"]
        original = payload["originalText"]

        versions: Dict[str, LanguageVersion] = {
            source_language: LanguageVersion(
                title=original.get("title"),
                text=original["text"],
                is_manual=True,
            )
        }
        for lang, content in _translation_entries(payload, source_language):
            if not isinstance(content, Mapping):
                logger.debug(f"Skipping malformed titled translation for '{lang}'")
                continue
            version = _validated_version(
                lang,
                {"title": content.get("title"), "text": content.get("text") or "", "isManual": False},
            )
            if version is not None:
                versions[lang] = version
        return I18nData(source_language=source_language, versions=versions)


class LegacyFlatFormat(NotesFormatDetector):
    format = NotesFormat.LEGACY_FLAT

    def matches(self, payload: Mapping[str, Any]) -> bool:
        original = payload.get("originalText")
        return isinstance(original, str) and bool(original) and bool(payload.get("sourceLanguage"))

    def migrate(self, payload: Mapping[str, Any]) -> I18nData:
        source_language = payload["sourceLanguage"]

        versions: Dict[str, LanguageVersion] = {
            source_language: LanguageVersion(text=payload["originalText"], is_manual=True)
        }
        for lang, text in _translation_entries(payload, source_language):
            if not isinstance(text, str):
                logger.debug(f"Skipping malformed flat translation for '{lang}'")
                continue
            versions[lang] = LanguageVersion(text=text, is_manual=False)
        return I18nData(source_language=source_language, versions=versions)


def default_detectors() -> Tuple[NotesFormatDetector, ...]:
    return (CanonicalFormat(), LegacyTitledFormat(), LegacyFlatFormat())


def _decode(raw: Optional[str]) -> Optional[Mapping[str, Any]]:
    if not raw or not raw.strip():
        return None
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        return None
    return parsed if isinstance(parsed, Mapping) else None


def _run_chain(
    payload: Mapping[str, Any],
    detectors: Sequence[NotesFormatDetector],
) -> Optional[Tuple[NotesFormat, I18nData]]:
    for detector in detectors:
        if not detector.matches(payload):
            continue
        try:
            data = detector.migrate(payload)
        except (ValidationError, TypeError, KeyError) as e:
            logger.debug(f"Notes matched {detector.format.value} shape but failed validation: {e}")
            continue
        if detector.format != NotesFormat.CANONICAL:
            logger.info(
                f"Migrated {detector.format.value} notes to canonical shape "
                f"(source={data.source_language}, versions={sorted(data.versions)})"
            )
        return detector.format, data
    return None


def parse_notes(
    raw: Optional[str],
    detectors: Optional[Sequence[NotesFormatDetector]] = None,
) -> Optional[I18nData]:
    """
    Parse a persisted notes blob into canonical I18nData.

    Args:
        raw: Contents of the notes field (None, plain text or JSON)
        detectors: Detector chain to try in order, defaults to default_detectors()

    Returns:
        I18nData, or None when the blob carries no structured translation data
    """
    payload = _decode(raw)
    if payload is None:
        return None
    result = _run_chain(payload, detectors if detectors is not None else default_detectors())
    return result[1] if result else None


def detect_notes_format(
    raw: Optional[str],
    detectors: Optional[Sequence[NotesFormatDetector]] = None,
) -> NotesFormat:
    """Report which shape a notes blob is stored in."""
    if not raw or not raw.strip():
        return NotesFormat.EMPTY
    payload = _decode(raw)
    if payload is None:
        return NotesFormat.PLAIN_TEXT
    result = _run_chain(payload, detectors if detectors is not None else default_detectors())
    return result[0] if result else NotesFormat.PLAIN_TEXT
