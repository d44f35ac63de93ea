"""
Payloads exchanged with the OCR, translation and study-aid collaborators.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field, model_validator

from notes_i18n.models.i18n import LanguageCode, LanguageVersion


class OcrConfidence(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"

    @classmethod
    def lowest(cls, levels: Iterable["OcrConfidence"]) -> "OcrConfidence":
        order = [cls.high, cls.medium, cls.low]
        return max(levels, key=order.index, default=cls.high)


class OcrResult(BaseModel):
    text: str = ""
    confidence: OcrConfidence = OcrConfidence.medium


class CaptureResult(BaseModel):
    """Merged recognition output of all pages of one material."""

    text: str = ""
    confidence: OcrConfidence = OcrConfidence.low
    detected_language: Optional[LanguageCode] = None
    warnings: List[str] = Field(default_factory=list)

    @property
    def has_text(self) -> bool:
        return bool(self.text.strip())


class TranslationRequest(BaseModel):
    """What the translation collaborator receives for one target language."""

    text: str = Field(..., min_length=1)
    source_language: LanguageCode
    target_language: LanguageCode
    title: Optional[str] = None

    @model_validator(mode="after")
    def _validate_languages(self) -> "TranslationRequest":
        if self.source_language == self.target_language:
            raise ValueError("source_language and target_language must differ")
        return self


class TranslationResult(BaseModel):
    text: str
    title: Optional[str] = None


class TranslationOutcome(str, Enum):
    translate = "translate"
    keep_manual = "keep_manual"
    same_language = "same_language"
    no_source_text = "no_source_text"


class TranslationPlan(BaseModel):
    """
    Decision taken before calling the translation collaborator.

    - translate: `request` is set and must be sent
    - keep_manual: the target already has a manual version (`existing`); nothing is sent
    - same_language: the target is the source language; `existing` is the source version
    - no_source_text: there is nothing to translate
    """

    outcome: TranslationOutcome
    target_language: LanguageCode
    request: Optional[TranslationRequest] = None
    existing: Optional[LanguageVersion] = None

    @property
    def needs_request(self) -> bool:
        return self.outcome == TranslationOutcome.translate
