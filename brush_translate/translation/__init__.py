"""
Translation Package

Provides:
- Translation and grammatical analysis via multiple providers (DeepSeek, Doubao, Gemini, Youdao)
- Structured-output parsing of model replies
- Result caching and stale-request suppression
- UTF-16 aware sentence segmentation for interactive rendering
"""
from .cache import CacheKey, ResultCache
from .coordinator import OperationKind, OperationState, RequestCoordinator, RequestToken
from .errors import (
    AnalyzeFailedError,
    ErrorKind,
    FailedToTranslateError,
    InvalidResponseError,
    LanguageMismatchError,
    MissingAPIKeyError,
    NetworkError,
    ServiceError,
    TranslationError,
)
from .language_detector import LanguageDetector
from .languages import LanguageOption, Provider, WordClass
from .models import (
    AnalysisResult,
    Component,
    ComponentID,
    ComponentKind,
    Credentials,
    RenderSegment,
    SentenceAnalysis,
    TranslationRequest,
    TranslationResult,
    WordSense,
    WordSenseList,
)
from .orchestrator import TranslationOrchestrator
from .response_parser import ResponseParser
from .segmentation import SentenceSegmenter, segment_sentence, utf16_length

__all__ = [
    # Orchestration
    "TranslationOrchestrator",
    "RequestCoordinator",
    "RequestToken",
    "OperationKind",
    "OperationState",
    "ResultCache",
    "CacheKey",
    # Building blocks
    "LanguageDetector",
    "ResponseParser",
    "SentenceSegmenter",
    "segment_sentence",
    "utf16_length",
    # Catalogues
    "LanguageOption",
    "Provider",
    "WordClass",
    # Data model
    "Credentials",
    "TranslationRequest",
    "TranslationResult",
    "AnalysisResult",
    "SentenceAnalysis",
    "Component",
    "ComponentID",
    "ComponentKind",
    "WordSense",
    "WordSenseList",
    "RenderSegment",
    # Errors
    "ErrorKind",
    "TranslationError",
    "FailedToTranslateError",
    "MissingAPIKeyError",
    "LanguageMismatchError",
    "NetworkError",
    "InvalidResponseError",
    "ServiceError",
    "AnalyzeFailedError",
]
