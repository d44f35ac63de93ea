"""
Material capture: photographed pages -> source text -> fresh versioned content.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from notes_i18n.interfaces.collaborators import OcrEngine
from notes_i18n.models.collaborators import CaptureResult, OcrConfidence, OcrResult
from notes_i18n.models.i18n import LanguageCode
from notes_i18n.utils.app_logger import get_logger
from notes_i18n.utils.language import detect_source_language
from notes_i18n.value_objects.versioned_content import VersionedContentStore

logger = get_logger(__name__)


def merge_pages(
    results: Sequence[OcrResult],
    failures: Optional[Dict[int, str]] = None,
) -> CaptureResult:
    """
    Combine per-page recognition results in page order.

    Pages without text, or listed in `failures` by page number, are skipped
    with a warning. With more than one page every page is prefixed by a
    "--- Page N ---" header; the merged confidence is the lowest page
    confidence.
    """
    failures = failures or {}
    numbered = [(index, result) for index, result in enumerate(results, start=1)]
    warnings = [
        f"Page {index}: {failures[index]}" if index in failures else f"Page {index}: No text detected"
        for index, result in numbered
        if index in failures or not result.text.strip()
    ]
    pages = [(index, result) for index, result in numbered if result.text.strip()]

    if not pages:
        return CaptureResult(warnings=warnings)

    if len(results) > 1:
        text = "\n\n".join(f"--- Page {index} ---\n\n{result.text.strip()}" for index, result in pages)
    else:
        text = pages[0][1].text.strip()

    return CaptureResult(
        text=text,
        confidence=OcrConfidence.lowest(result.confidence for _, result in pages),
        detected_language=detect_source_language(text),
        warnings=warnings,
    )


async def capture_pages(ocr: OcrEngine, images: Sequence[bytes]) -> CaptureResult:
    """
    Recognize every image and merge the results.

    A page whose recognition fails becomes a warning so the remaining pages
    still produce text; the caller decides what to do with an empty capture.
    """
    results: List[OcrResult] = []
    failures: Dict[int, str] = {}
    for index, image in enumerate(images, start=1):
        try:
            results.append(await ocr.recognize(image))
        except Exception as e:
            logger.warning(f"OCR failed for page {index}/{len(images)}: {e}")
            failures[index] = str(e)
            results.append(OcrResult(text="", confidence=OcrConfidence.low))

    merged = merge_pages(results, failures)
    logger.info(
        f"Captured {len(images)} page(s): {len(merged.text)} chars, "
        f"confidence={merged.confidence.value}, language={merged.detected_language}"
    )
    return merged


def store_from_capture(
    capture: CaptureResult,
    title: Optional[str] = None,
    source_language: Optional[LanguageCode] = None,
) -> VersionedContentStore:
    """
    Seed a new document from captured text.

    An explicit source_language (e.g. chosen by the user) wins over detection.
    The store stays empty when nothing was recognized.
    """
    if not capture.has_text:
        return VersionedContentStore()
    lang = source_language or capture.detected_language or detect_source_language(capture.text)
    return VersionedContentStore.create(capture.text, lang, title)
