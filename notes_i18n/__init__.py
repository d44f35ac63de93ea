"""
lecture-notes-i18n

Multilingual content versioning for captured lecture notes: parsing and
migrating stored notes blobs, manual-vs-automated version precedence, and
language resolution before translation and AI study actions.
"""

from notes_i18n.models.i18n import I18nData, LanguageVersion, NotesFormat
from notes_i18n.services.format_migrator import detect_notes_format, parse_notes
from notes_i18n.services.language_resolution import (
    apply_translation,
    needs_translation_prompt,
    plan_translation,
    text_for_action,
)
from notes_i18n.services.study_action_flow import (
    ActionState,
    StudyActionFlow,
    TranslationChoice,
    run_study_action,
)
from notes_i18n.utils.language import detect_source_language
from notes_i18n.value_objects.versioned_content import (
    VersionedContentStore,
    create_i18n_data,
    serialize_notes,
)

__version__ = "0.1.0"

__all__ = [
    "ActionState",
    "I18nData",
    "LanguageVersion",
    "NotesFormat",
    "StudyActionFlow",
    "TranslationChoice",
    "VersionedContentStore",
    "apply_translation",
    "create_i18n_data",
    "detect_notes_format",
    "detect_source_language",
    "needs_translation_prompt",
    "parse_notes",
    "plan_translation",
    "run_study_action",
    "serialize_notes",
    "text_for_action",
]
