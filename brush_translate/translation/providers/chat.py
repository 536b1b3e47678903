"""
OpenAI-compatible chat completion adapter

Shared by DeepSeek and the Doubao chat models; they differ only in
endpoint and model names.
"""
from typing import Optional

import httpx
from loguru import logger

from ...config import Settings, settings
from ..errors import InvalidResponseError
from ..languages import LanguageOption, Provider
from ..models import AnalysisResult, Credentials, ProviderTranslation
from ..prompts import build_analysis_prompt, build_translation_prompt
from ..response_parser import ResponseParser
from .base import ProviderAdapter


class ChatCompletionAdapter(ProviderAdapter):
    """Schema-driven translation over /chat/completions"""

    supports_analysis = True

    def __init__(
        self,
        provider: Provider,
        base_url: str,
        config: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        json_mode: bool = True,
    ):
        super().__init__(config, client)
        self.provider = provider
        self.endpoint = f"{base_url.rstrip('/')}/chat/completions"
        self.json_mode = json_mode

    def build_payload(self, system_prompt: str, text: str, model: str) -> dict:
        payload = {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": text},
            ],
            "temperature": 0,
        }
        if self.json_mode:
            payload["response_format"] = {"type": "json_object"}
        return payload

    async def complete(self, system_prompt: str, text: str, model: str, credentials: Credentials) -> str:
        """Send one chat completion and return the assistant message content"""
        logger.debug(f"{self.name} chat completion: model={model}, chars={len(text)}")
        data = await self._post_json(
            self.endpoint,
            self.build_payload(system_prompt, text, model),
            headers={"Authorization": f"Bearer {credentials.api_key.strip()}"},
        )
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise InvalidResponseError(f"{self.name} response has no message content", cause=e)
        if not isinstance(content, str) or not content.strip():
            raise InvalidResponseError(f"{self.name} returned an empty message")
        return content

    async def translate(
        self,
        text: str,
        source: LanguageOption,
        target: LanguageOption,
        model: str,
        credentials: Credentials,
    ) -> ProviderTranslation:
        content = await self.complete(build_translation_prompt(source, target), text, model, credentials)
        return ProviderTranslation(translated_text=ResponseParser.parse_translation(content))

    async def analyze(
        self,
        text: str,
        source: LanguageOption,
        target: LanguageOption,
        model: str,
        credentials: Credentials,
    ) -> AnalysisResult:
        content = await self.complete(build_analysis_prompt(source, target), text, model, credentials)
        return ResponseParser.parse_analysis(content)


class DeepSeekAdapter(ChatCompletionAdapter):
    """DeepSeek (OpenAI-compatible API)"""

    def __init__(self, config: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None):
        config = config or settings
        # DeepSeek endpoint has no /v1/ prefix
        super().__init__(Provider.DEEPSEEK, config.DEEPSEEK_BASE_URL, config, client)
