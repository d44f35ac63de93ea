"""
Multilingual notes data shapes (model layer).

The canonical persisted shape of a material's notes field is

    {"i18n": {"sourceLanguage": "de",
              "versions": {"de": {"title": "...", "text": "...", "isManual": true}}}}

Field names stay camelCase on the wire; Python code uses snake_case.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

# Plain lowercase code ("ru", "de", "en"); the supported set is configuration.
LanguageCode = str


class LanguageVersion(BaseModel):
    """Content of one language. is_manual marks human-authored text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: Optional[str] = None
    text: str = ""
    is_manual: bool = Field(default=False, alias="isManual")


class I18nData(BaseModel):
    """
    Document-level multilingual content.

    source_language is fixed for the life of a document; versions holds at
    most one entry per language.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source_language: LanguageCode = Field(..., min_length=1, alias="sourceLanguage")
    versions: Dict[LanguageCode, LanguageVersion] = Field(default_factory=dict)

    def version(self, lang: LanguageCode) -> Optional[LanguageVersion]:
        return self.versions.get(lang)

    def source_version(self) -> Optional[LanguageVersion]:
        return self.versions.get(self.source_language)

    def to_payload(self) -> Dict[str, object]:
        """Wire dict in the canonical camelCase shape (title omitted when unset)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class NotesFormat(str, Enum):
    """Shape a persisted notes blob was recognised as."""

    CANONICAL = "canonical"
    LEGACY_TITLED = "legacy_titled"
    LEGACY_FLAT = "legacy_flat"
    PLAIN_TEXT = "plain_text"
    EMPTY = "empty"
