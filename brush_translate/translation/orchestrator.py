"""
Translation orchestration

Turns captured text plus user configuration into a validated, cached
translation or grammatical analysis:

    normalize -> cache -> credentials -> language guard -> adapter -> cache

Every failure leaves this module as a TranslationError subclass.
"""
from typing import Awaitable, Callable, Dict, Mapping, Optional, TypeVar

import httpx
from loguru import logger

from ..config import Settings, settings
from .cache import CacheKey, ResultCache
from .coordinator import OperationKind, RequestCoordinator
from .errors import (
    AnalyzeFailedError,
    FailedToTranslateError,
    InvalidResponseError,
    LanguageMismatchError,
    MissingAPIKeyError,
    NetworkError,
    TranslationError,
)
from .language_detector import LanguageDetector
from .languages import LanguageOption, Provider, display_name_for_code
from .models import (
    AnalysisResult,
    Credentials,
    ProviderTranslation,
    TranslationRequest,
    TranslationResult,
)
from .providers import ProviderAdapter, create_adapters


T = TypeVar("T")


class TranslationOrchestrator:
    """Façade over detector, cache, coordinator and provider adapters"""

    VALIDATION_PROBE = "hello"

    def __init__(
        self,
        config: Optional[Settings] = None,
        detector: Optional[LanguageDetector] = None,
        cache: Optional[ResultCache] = None,
        coordinator: Optional[RequestCoordinator] = None,
        adapters: Optional[Mapping[Provider, ProviderAdapter]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            config: Settings; the process-wide settings when omitted
            detector: Language detector for the mismatch guard and labels
            cache: Result cache; a fresh one sized from config when omitted
            coordinator: Token coordinator for request_translation / request_analysis
            adapters: Adapter per provider; built from config when omitted
            client: Shared httpx client handed to the default adapters
        """
        self.config = config or settings
        self.detector = detector or LanguageDetector()
        self.cache = cache if cache is not None else ResultCache(self.config.CACHE_CAPACITY)
        self.coordinator = coordinator or RequestCoordinator()
        self.adapters: Dict[Provider, ProviderAdapter] = (
            dict(adapters) if adapters is not None else create_adapters(self.config, client)
        )
        logger.info(f"Initialized TranslationOrchestrator with providers: {[p.value for p in self.adapters]}")

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate the request's text.

        A cache hit returns immediately after the empty-text check. A
        LanguageMismatchError can be retried with
        ``request.with_source(error.detected_language)``.

        Raises:
            FailedToTranslateError, MissingAPIKeyError, LanguageMismatchError,
            NetworkError, InvalidResponseError, ServiceError
        """
        text = request.normalized_text
        if not text:
            raise FailedToTranslateError()

        key = CacheKey.for_request(request)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {request.provider.value}/{request.model}")
            return cached

        adapter = self._adapter_for(request.provider)
        self._require_credentials(request.provider, request.credentials)
        self._check_language(request.source_language, text)

        logger.info(
            f"Translating {len(text)} chars with {request.provider.value}/{request.model}: "
            f"{request.source_language.value} -> {request.target_language.value}"
        )
        translation = await self._guarded(
            request.provider,
            adapter.translate(
                text,
                request.source_language,
                request.target_language,
                request.model,
                request.credentials,
            ),
        )

        result = TranslationResult(
            original_text=text,
            translated_text=translation.translated_text,
            detected_source_label=self._source_label(request, text, translation),
            target_label=request.target_language.display_name,
        )
        self.cache.put(key, result)
        return result

    async def analyze(self, request: TranslationRequest) -> AnalysisResult:
        """
        Grammatical analysis of the request's text. Never cached: the result
        belongs to the translation currently on screen.

        Raises:
            FailedToTranslateError, MissingAPIKeyError, LanguageMismatchError,
            NetworkError, InvalidResponseError, ServiceError, AnalyzeFailedError
        """
        text = request.normalized_text
        if not text:
            raise FailedToTranslateError()

        adapter = self._adapter_for(request.provider)
        self._require_credentials(request.provider, request.credentials)
        if not adapter.supports_analysis:
            raise AnalyzeFailedError(f"{request.provider.display_name} does not support analysis")
        self._check_language(request.source_language, text)

        logger.info(f"Analyzing {len(text)} chars with {request.provider.value}/{request.model}")
        return await self._guarded(
            request.provider,
            adapter.analyze(
                text,
                request.source_language,
                request.target_language,
                request.model,
                request.credentials,
            ),
        )

    async def validate(
        self,
        provider: Provider,
        model: str,
        credentials: Credentials,
        target: LanguageOption = LanguageOption.SIMPLIFIED_CHINESE,
    ) -> bool:
        """
        Check credentials with one uncached probe translation.

        Returns True on success; failures raise the usual typed errors.
        """
        adapter = self._adapter_for(provider)
        self._require_credentials(provider, credentials)
        logger.info(f"Validating {provider.value} credentials with model {model}")
        await self._guarded(
            provider,
            adapter.translate(self.VALIDATION_PROBE, LanguageOption.ENGLISH, target, model, credentials),
        )
        return True

    async def request_translation(
        self,
        request: TranslationRequest,
        on_result: Callable[[TranslationResult], None],
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> bool:
        """
        Translate as the latest translation; superseded results are dropped.

        Also invalidates any in-flight analysis. Returns whether a callback fired.
        """
        token = self.coordinator.begin(OperationKind.TRANSLATION)
        return await self.coordinator.complete(token, self.translate(request), on_result, on_error)

    async def request_analysis(
        self,
        request: TranslationRequest,
        on_result: Callable[[AnalysisResult], None],
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> bool:
        """Analyze as the latest analysis; superseded results are dropped"""
        token = self.coordinator.begin(OperationKind.ANALYSIS)
        return await self.coordinator.complete(token, self.analyze(request), on_result, on_error)

    def _adapter_for(self, provider: Provider) -> ProviderAdapter:
        adapter = self.adapters.get(provider)
        if adapter is None:
            raise ValueError(f"No adapter configured for provider {provider.value}")
        return adapter

    def _require_credentials(self, provider: Provider, credentials: Credentials) -> None:
        if credentials is None or credentials.is_blank(provider):
            logger.warning(f"{provider.display_name} API key not configured")
            raise MissingAPIKeyError(provider)

    def _check_language(self, source: LanguageOption, text: str) -> None:
        if source is LanguageOption.AUTO:
            return
        matched, code = self.detector.matches(source, text)
        if not matched:
            label = display_name_for_code(code)
            logger.warning(f"Source language mismatch: expected {source.value}, detected {code}")
            raise LanguageMismatchError(label, LanguageOption.from_code(code))

    def _source_label(self, request: TranslationRequest, text: str, translation: ProviderTranslation) -> str:
        if request.source_language is not LanguageOption.AUTO:
            return request.source_language.display_name
        if translation.detected_source:
            return display_name_for_code(translation.detected_source)
        return self.detector.label_for(text)

    async def _guarded(self, provider: Provider, operation: Awaitable[T]) -> T:
        """Await an adapter call, mapping anything untyped onto the taxonomy"""
        try:
            return await operation
        except TranslationError as e:
            logger.error(f"{provider.display_name} failed: {e}")
            raise
        except httpx.HTTPError as e:
            logger.error(f"{provider.display_name} transport error: {e}")
            raise NetworkError(f"{provider.display_name} request failed: {e}", cause=e)
        except Exception as e:
            logger.error(f"{provider.display_name} returned an unusable response: {e}")
            raise InvalidResponseError(f"{provider.display_name} returned an unusable response", cause=e)
