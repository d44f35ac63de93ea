"""
Unit tests for localized user-facing messages
"""

import pytest

from notes_i18n.i18n.messages import m, no_text_available_message, translation_prompt_text


class TestMessageHelper:
    def test_selects_requested_language(self):
        assert m(lang="de", en="Hello", de="Hallo", ru="Привет") == "Hallo"
        assert m(lang="ru-RU", en="Hello", de="Hallo", ru="Привет") == "Привет"

    def test_falls_back_to_english(self):
        assert m(lang="de", en="Hello") == "Hello"
        assert m(lang="fr", en="Hello", de="Hallo") == "Hello"

    def test_formats_params(self):
        assert m(lang="en", en="{count} cards", count=3) == "3 cards"

    def test_bad_template_returns_unformatted(self):
        assert m(lang="en", en="{missing} cards", count=3) == "{missing} cards"


@pytest.mark.parametrize(
    "lang, expected",
    [
        ("en", "No text available."),
        ("de", "Kein Text verfügbar."),
        ("ru", "Нет доступного текста."),
        (None, "No text available."),
    ],
)
def test_no_text_available_message(lang, expected):
    assert no_text_available_message(lang) == expected


class TestTranslationPromptText:
    def test_english_prompt_names_target_language(self):
        text = translation_prompt_text("de", lang="en")

        assert text.title == "No Translation Available"
        assert text.description == (
            "The text hasn't been translated to Deutsch yet. Would you like to translate it first?"
        )
        assert text.use_source == "Use Source Text"
        assert text.translate_and_continue == "Translate & Continue"

    def test_german_prompt(self):
        text = translation_prompt_text("ru", lang="de")

        assert text.title == "Keine Übersetzung verfügbar"
        assert "Русский" in text.description
        assert text.translating == "Übersetze..."
