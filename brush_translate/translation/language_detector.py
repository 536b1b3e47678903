"""Language detection backed by the langdetect library."""
import re
from typing import Optional, Tuple

from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException
from loguru import logger

from .languages import UNKNOWN_LANGUAGE_LABEL, LanguageOption, display_name_for_code


# Seed for consistent results
DetectorFactory.seed = 0

# Han, kana and hangul carry enough signal even in very short selections
_CJK_PATTERN = re.compile(r"[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uac00-\ud7af\uf900-\ufaff]")
_URL_PATTERN = re.compile(r"https?://\S+")
_EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")


class LanguageDetector:
    """
    Detects the dominant language of a selection.

    Used for the source-language mismatch guard and for the "detected
    language" label when the source language is auto.
    """

    def __init__(self, min_text_length: int = 10, confidence_threshold: float = 0.7):
        self.min_text_length = min_text_length
        self.confidence_threshold = confidence_threshold

    def detect(self, text: str) -> Optional[str]:
        """
        Detect the language code of ``text``.

        Returns None when the text is too short to judge, detection fails,
        or the best guess is below the confidence threshold.
        """
        cleaned = self._clean_text_for_detection(text)
        if not cleaned:
            return None
        if len(cleaned) < self.min_text_length and not _CJK_PATTERN.search(cleaned):
            return None

        try:
            candidates = detect_langs(cleaned)
        except LangDetectException as e:
            logger.debug(f"Language detection failed: {e}")
            return None

        if not candidates:
            return None

        best = candidates[0]
        if best.prob < self.confidence_threshold:
            logger.debug(f"Low-confidence detection ignored: {best.lang} ({best.prob:.3f})")
            return None

        logger.debug(f"Detected language: {best.lang} (confidence: {best.prob:.3f})")
        return best.lang

    def label_for(self, text: str) -> str:
        """Human-readable label for the detected language"""
        code = self.detect(text)
        if code is None:
            return UNKNOWN_LANGUAGE_LABEL
        return display_name_for_code(code)

    def matches(self, expected: LanguageOption, text: str) -> Tuple[bool, Optional[str]]:
        """
        Check ``text`` against the expected source language.

        Returns ``(matched, detected_code)``. Chinese variants form a single
        family: any detected zh* code matches either Simplified or
        Traditional Chinese. Undetectable text never counts as a mismatch.
        """
        code = self.detect(text)
        if expected is LanguageOption.AUTO or code is None:
            return True, code

        detected = LanguageOption.from_code(code)
        if expected.is_chinese:
            return code.lower().startswith("zh"), code
        return detected is expected, code

    def _clean_text_for_detection(self, text: str) -> str:
        if not text:
            return ""
        cleaned = re.sub(r"\s+", " ", text.strip())
        cleaned = _URL_PATTERN.sub("", cleaned)
        cleaned = _EMAIL_PATTERN.sub("", cleaned)
        return cleaned.strip()
