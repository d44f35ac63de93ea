"""
Language resolution for study actions and translation requests.

Every function takes the target language explicitly; the calling workflow
owns the current view and study languages.
"""

from __future__ import annotations

from typing import Optional

from notes_i18n.models.collaborators import (
    TranslationOutcome,
    TranslationPlan,
    TranslationRequest,
    TranslationResult,
)
from notes_i18n.models.i18n import I18nData, LanguageCode
from notes_i18n.utils.app_logger import get_logger
from notes_i18n.value_objects.versioned_content import VersionedContentStore

logger = get_logger(__name__)


def text_for_action(store: VersionedContentStore, target_language: LanguageCode) -> Optional[str]:
    """
    Text an AI action should consume for `target_language`.

    Returns:
        The target's own text, else the source-language text, else None
        (the caller must refuse the action)
    """
    if store.has_version(target_language):
        return store.text_in(target_language)
    source_language = store.source_language
    if source_language is not None:
        source_text = store.text_in(source_language)
        if source_text:
            return source_text
    return None


def needs_translation_prompt(store: VersionedContentStore, target_language: LanguageCode) -> bool:
    """
    True when structured data exists but `target_language` has no content of its own,
    so proceeding would silently use source-language text.
    """
    return store.has_data and not store.has_version(target_language)


def plan_translation(
    store: VersionedContentStore,
    target_language: LanguageCode,
    include_title: bool = False,
    fallback_title: Optional[str] = None,
) -> TranslationPlan:
    """
    Decide what, if anything, to send to the translation collaborator.

    Args:
        store: Document content
        target_language: Language to translate into
        include_title: Also translate the title
        fallback_title: Title to send when the source version has none (e.g. the material title)

    Returns:
        TranslationPlan; only outcome == translate carries a request
    """
    data = store.data
    existing = data.version(target_language) if data is not None else None

    if existing is not None and existing.is_manual:
        return TranslationPlan(
            outcome=TranslationOutcome.keep_manual,
            target_language=target_language,
            existing=existing,
        )

    source = data.source_version() if data is not None else None
    if source is None or not source.text:
        return TranslationPlan(outcome=TranslationOutcome.no_source_text, target_language=target_language)

    if data.source_language == target_language:
        return TranslationPlan(
            outcome=TranslationOutcome.same_language,
            target_language=target_language,
            existing=source,
        )

    title = (source.title or fallback_title) if include_title else None
    return TranslationPlan(
        outcome=TranslationOutcome.translate,
        target_language=target_language,
        request=TranslationRequest(
            text=source.text,
            source_language=data.source_language,
            target_language=target_language,
            title=title or None,
        ),
    )


def apply_translation(
    store: VersionedContentStore,
    target_language: LanguageCode,
    result: TranslationResult,
) -> Optional[I18nData]:
    """Record a translation response as an automated version of `target_language`."""
    if not result.text:
        logger.debug(f"Ignoring empty translation for '{target_language}'")
        return store.data
    if result.title:
        return store.set_full_version(target_language, result.title, result.text, False)
    return store.set_version(target_language, result.text, False)


def display_text(store: VersionedContentStore, lang: LanguageCode, fallback: Optional[str] = None) -> str:
    """Text to show for `lang`, falling back to the plain material text when nothing is structured."""
    return store.text_in(lang) or (fallback or "")


def display_title(store: VersionedContentStore, lang: LanguageCode, fallback: Optional[str] = None) -> str:
    """Title to show for `lang`, falling back to the plain material title."""
    return store.title_in(lang) or (fallback or "")
