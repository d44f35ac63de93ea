"""
Localized user-facing messages
Texts are picked by an explicitly passed language; English is the fallback
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel

from notes_i18n.utils.language import get_language_name, normalize_language


def m(*, lang: str, en: str, de: Optional[str] = None, ru: Optional[str] = None, **params: Any) -> str:
    """
    Inline multilingual message helper.

    The language is always passed by the caller; a missing template falls
    back to English.
    """
    selected = normalize_language(lang)
    template = {"de": de, "ru": ru}.get(selected) or en
    if not params:
        return template
    try:
        return template.format(**params)
    except (KeyError, IndexError, ValueError):
        return template


def no_text_available_message(lang: str) -> str:
    return m(
        lang=lang,
        en="No text available.",
        de="Kein Text verfügbar.",
        ru="Нет доступного текста.",
    )


class TranslationPromptText(BaseModel):
    """Texts of the "translate first?" prompt shown before an AI action."""

    title: str
    description: str
    use_source: str
    translate_and_continue: str
    translating: str


def translation_prompt_text(target_language: str, *, lang: str) -> TranslationPromptText:
    language = get_language_name(target_language)
    return TranslationPromptText(
        title=m(
            lang=lang,
            en="No Translation Available",
            de="Keine Übersetzung verfügbar",
            ru="Перевод недоступен",
        ),
        description=m(
            lang=lang,
            en="The text hasn't been translated to {language} yet. Would you like to translate it first?",
            de="Der Text wurde noch nicht ins {language} übersetzt. Möchtest du ihn zuerst übersetzen?",
            ru="Текст ещё не переведён на {language}. Перевести его сначала?",
            language=language,
        ),
        use_source=m(
            lang=lang,
            en="Use Source Text",
            de="Originaltext verwenden",
            ru="Использовать исходный текст",
        ),
        translate_and_continue=m(
            lang=lang,
            en="Translate & Continue",
            de="Übersetzen & fortfahren",
            ru="Перевести и продолжить",
        ),
        translating=m(
            lang=lang,
            en="Translating...",
            de="Übersetze...",
            ru="Перевод...",
        ),
    )
