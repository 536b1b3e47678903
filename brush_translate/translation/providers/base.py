"""
Base provider adapter
"""
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx
from loguru import logger

from ...config import Settings, get_httpx_client_kwargs, settings
from ..errors import AnalyzeFailedError, InvalidResponseError, NetworkError
from ..languages import LanguageOption, Provider
from ..models import AnalysisResult, Credentials, ProviderTranslation


class ProviderAdapter(ABC):
    """Abstract base class for translation backends"""

    provider: Provider
    supports_analysis: bool = False

    def __init__(self, config: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None):
        """
        Args:
            config: Settings to read endpoints and timeout from
            client: Shared httpx client; a short-lived one is opened per call when omitted
        """
        self.config = config or settings
        self._client = client

    @property
    def name(self) -> str:
        return self.provider.display_name

    @abstractmethod
    async def translate(
        self,
        text: str,
        source: LanguageOption,
        target: LanguageOption,
        model: str,
        credentials: Credentials,
    ) -> ProviderTranslation:
        """Translate text"""
        pass

    async def analyze(
        self,
        text: str,
        source: LanguageOption,
        target: LanguageOption,
        model: str,
        credentials: Credentials,
    ) -> AnalysisResult:
        """Grammatical analysis; only some backends offer it"""
        raise AnalyzeFailedError(f"{self.name} does not support analysis")

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """
        Perform one outbound HTTP call.

        Raises:
            NetworkError: transport failure, timeout or non-2xx status
        """
        try:
            if self._client is not None:
                response = await self._client.request(
                    method, url, timeout=self.config.REQUEST_TIMEOUT, **kwargs
                )
            else:
                async with httpx.AsyncClient(**get_httpx_client_kwargs(config=self.config)) as client:
                    response = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"{self.name} request timed out: {e}")
            raise NetworkError(f"{self.name} request timed out", cause=e)
        except httpx.HTTPError as e:
            logger.error(f"{self.name} request failed: {e}")
            raise NetworkError(f"{self.name} request failed: {e}", cause=e)

        if not response.is_success:
            body = response.text[:300]
            logger.error(f"{self.name} API error {response.status_code}: {body}")
            raise NetworkError(f"{self.name} API error {response.status_code}: {body}")
        return response

    async def _post_json(self, url: str, payload: dict, headers: Optional[dict] = None, **kwargs: Any) -> Any:
        response = await self._send(
            "POST",
            url,
            headers={"Content-Type": "application/json", **(headers or {})},
            json=payload,
            **kwargs,
        )
        return self._decode_body(response)

    def _decode_body(self, response: httpx.Response) -> Any:
        if not response.content:
            raise InvalidResponseError(f"{self.name} returned an empty body")
        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(f"{self.name} returned non-JSON body", cause=e)
