"""
Data models for lecture-notes-i18n
"""

from .collaborators import (
    CaptureResult,
    OcrConfidence,
    OcrResult,
    TranslationOutcome,
    TranslationPlan,
    TranslationRequest,
    TranslationResult,
)
from .i18n import I18nData, LanguageCode, LanguageVersion, NotesFormat

__all__ = [
    "CaptureResult",
    "I18nData",
    "LanguageCode",
    "LanguageVersion",
    "NotesFormat",
    "OcrConfidence",
    "OcrResult",
    "TranslationOutcome",
    "TranslationPlan",
    "TranslationRequest",
    "TranslationResult",
]
