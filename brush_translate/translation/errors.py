"""Exception hierarchy for the translation core."""
from enum import Enum
from typing import Any, Dict, Optional

from .languages import LanguageOption, Provider


NETWORK_USER_MESSAGE = "Network error, please try again"


class ErrorKind(Enum):
    """Error kinds surfaced to the presentation layer."""
    FAILED_TO_TRANSLATE = "failed_to_translate"
    MISSING_API_KEY = "missing_api_key"
    LANGUAGE_MISMATCH = "language_mismatch"
    NETWORK = "network"
    INVALID_RESPONSE = "invalid_response"
    SERVICE = "service"
    ANALYZE_FAILED = "analyze_failed"


class TranslationError(Exception):
    """Base exception for all orchestration errors."""

    kind: ErrorKind = ErrorKind.FAILED_TO_TRANSLATE
    recoverable: bool = False

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    @property
    def user_message(self) -> str:
        """Text shown to the user."""
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "user_message": self.user_message,
            "recoverable": self.recoverable,
            "cause": str(self.cause) if self.cause else None,
        }

    def __str__(self) -> str:
        if self.cause:
            return f"[{self.kind.value}] {self.message} | Caused by: {self.cause}"
        return f"[{self.kind.value}] {self.message}"


class FailedToTranslateError(TranslationError):
    """Nothing to translate after normalization."""

    kind = ErrorKind.FAILED_TO_TRANSLATE

    def __init__(self, message: str = "Nothing to translate"):
        super().__init__(message)


class MissingAPIKeyError(TranslationError):
    """Credential absent or blank for the selected provider."""

    kind = ErrorKind.MISSING_API_KEY

    def __init__(self, provider: Provider):
        self.provider = provider
        super().__init__(f"Please configure the {provider.display_name} API key in settings")


class LanguageMismatchError(TranslationError):
    """Selected source language disagrees with the detected one.

    The caller may retry with ``request.with_source(error.detected_language)``.
    """

    kind = ErrorKind.LANGUAGE_MISMATCH
    recoverable = True

    def __init__(self, detected_label: str, detected_language: Optional[LanguageOption] = None):
        self.detected_label = detected_label
        self.detected_language = detected_language
        super().__init__(f"The text looks like {detected_label}")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["detected_label"] = self.detected_label
        data["detected_language"] = self.detected_language.value if self.detected_language else None
        return data


class NetworkError(TranslationError):
    """Transport failure or non-2xx HTTP status."""

    kind = ErrorKind.NETWORK

    def __init__(self, detail: str, cause: Optional[Exception] = None):
        self.detail = detail
        super().__init__(detail, cause)


class InvalidResponseError(TranslationError):
    """Payload present but empty or not decodable against the schema."""

    kind = ErrorKind.INVALID_RESPONSE

    def __init__(self, detail: str = "Invalid response", cause: Optional[Exception] = None):
        self.detail = detail
        super().__init__(detail, cause)

    @property
    def user_message(self) -> str:
        return NETWORK_USER_MESSAGE


class ServiceError(TranslationError):
    """Well-formed failure reported by the backend; message shown as-is."""

    kind = ErrorKind.SERVICE


class AnalyzeFailedError(TranslationError):
    """Analysis reported success but its payload is structurally unusable."""

    kind = ErrorKind.ANALYZE_FAILED
