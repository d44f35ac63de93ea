"""
Collaborator interfaces
Abstract contracts for the OCR, translation and study-aid services this package drives
"""

from abc import ABC, abstractmethod
from typing import Any

from notes_i18n.models.collaborators import OcrResult, TranslationRequest, TranslationResult


class OcrEngine(ABC):
    """
    Text recognition for one captured image.

    Implementations may run a local recognition engine or call a remote
    vision model; only the recognized text seeds the source version.
    """

    @abstractmethod
    async def recognize(self, image: bytes) -> OcrResult:
        """
        Recognize text in an image.

        Args:
            image: Encoded image bytes

        Returns:
            OcrResult with the recognized text and a confidence level
        """
        raise NotImplementedError


class Translator(ABC):
    """Machine translation of one document version."""

    @abstractmethod
    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate source text (and optionally its title).

        Args:
            request: Source text, language pair and optional title

        Returns:
            TranslationResult; title is set only when a title was requested
        """
        raise NotImplementedError


class StudyAidGenerator(ABC):
    """Summary, flashcard or quiz generation from study text."""

    @abstractmethod
    async def generate(self, text: str, language: str) -> Any:
        """
        Produce a study aid.

        Args:
            text: Non-empty study text
            language: Language the study aid should be delivered in

        Returns:
            Generator-specific structured output, not inspected here
        """
        raise NotImplementedError
