"""
Unit tests for action-text resolution and translation planning
"""

import pytest

from notes_i18n.models.collaborators import TranslationOutcome, TranslationResult
from notes_i18n.models.i18n import I18nData, LanguageVersion
from notes_i18n.services.language_resolution import (
    apply_translation,
    display_text,
    display_title,
    needs_translation_prompt,
    plan_translation,
    text_for_action,
)
from notes_i18n.value_objects.versioned_content import VersionedContentStore


@pytest.fixture
def store() -> VersionedContentStore:
    return VersionedContentStore.create("Das Herz pumpt Blut.", "de", "Das Herz")


@pytest.mark.unit
class TestTextForAction:
    def test_own_version_wins(self, store):
        store.set_version("en", "The heart pumps blood.", False)
        assert text_for_action(store, "en") == "The heart pumps blood."

    def test_falls_back_to_source(self, store):
        assert text_for_action(store, "ru") == "Das Herz pumpt Blut."

    def test_store_without_versions(self):
        store = VersionedContentStore(I18nData(source_language="de", versions={}))
        assert text_for_action(store, "en") is None

    def test_empty_store(self):
        assert text_for_action(VersionedContentStore(), "en") is None

    def test_title_only_entry_uses_source_text(self, store):
        store.set_title("en", "The heart", False)
        assert text_for_action(store, "en") == "Das Herz pumpt Blut."


@pytest.mark.unit
class TestNeedsTranslationPrompt:
    def test_fresh_store_prompts_until_translated(self, store):
        assert needs_translation_prompt(store, "en") is True

        store.set_version("en", "The heart pumps blood.", False)

        assert needs_translation_prompt(store, "en") is False

    def test_source_language_never_prompts(self, store):
        assert needs_translation_prompt(store, "de") is False

    def test_empty_store_never_prompts(self):
        assert needs_translation_prompt(VersionedContentStore(), "en") is False


@pytest.mark.unit
class TestPlanTranslation:
    def test_translate(self, store):
        plan = plan_translation(store, "en")

        assert plan.outcome == TranslationOutcome.translate
        assert plan.request.text == "Das Herz pumpt Blut."
        assert plan.request.source_language == "de"
        assert plan.request.target_language == "en"
        assert plan.request.title is None

    def test_translate_with_title(self, store):
        assert plan_translation(store, "en", include_title=True).request.title == "Das Herz"

    def test_fallback_title(self):
        store = VersionedContentStore.create("Herz", "de")
        plan = plan_translation(store, "en", include_title=True, fallback_title="Kardiologie")

        assert plan.request.title == "Kardiologie"

    def test_keep_manual(self, store):
        store.set_version("en", "My own words", True)
        plan = plan_translation(store, "en")

        assert plan.outcome == TranslationOutcome.keep_manual
        assert plan.existing.text == "My own words"
        assert plan.request is None

    def test_auto_version_is_retranslated(self, store):
        store.set_version("en", "Old machine text", False)
        assert plan_translation(store, "en").needs_request

    def test_same_language(self):
        store = VersionedContentStore(
            I18nData(source_language="de", versions={"de": LanguageVersion(text="Herz", is_manual=False)})
        )
        plan = plan_translation(store, "de")

        assert plan.outcome == TranslationOutcome.same_language
        assert plan.existing.text == "Herz"
        assert plan.request is None

    def test_manual_source_is_kept_before_same_language_check(self, store):
        plan = plan_translation(store, "de")

        assert plan.outcome == TranslationOutcome.keep_manual
        assert plan.existing.text == "Das Herz pumpt Blut."

    def test_no_source_text(self):
        store = VersionedContentStore(
            I18nData(source_language="de", versions={"en": LanguageVersion(text="Heart")})
        )
        assert plan_translation(store, "ru").outcome == TranslationOutcome.no_source_text
        assert plan_translation(VersionedContentStore(), "ru").outcome == TranslationOutcome.no_source_text


@pytest.mark.unit
class TestApplyTranslation:
    def test_records_auto_version(self, store):
        apply_translation(store, "en", TranslationResult(text="The heart pumps blood."))

        assert store.text_in("en") == "The heart pumps blood."
        assert store.is_manual("en") is False
        assert store.title_in("en") == "Das Herz"

    def test_records_title(self, store):
        apply_translation(store, "en", TranslationResult(text="The heart pumps blood.", title="The heart"))
        assert store.title_in("en") == "The heart"

    def test_never_overwrites_manual(self, store):
        store.set_version("en", "My own words", True)
        apply_translation(store, "en", TranslationResult(text="Machine words", title="Machine"))

        assert store.text_in("en") == "My own words"

    def test_empty_result_is_ignored(self, store):
        before = store.data
        assert apply_translation(store, "en", TranslationResult(text="")) is before
        assert not store.has_version("en")


@pytest.mark.unit
class TestDisplay:
    def test_structured_content(self, store):
        assert display_text(store, "ru", fallback="plain") == "Das Herz pumpt Blut."
        assert display_title(store, "ru", fallback="Plain title") == "Das Herz"

    def test_plain_fallback(self):
        store = VersionedContentStore()

        assert display_text(store, "en", fallback="plain notes") == "plain notes"
        assert display_title(store, "en") == ""
