"""
Doubao (Volcano Ark) adapters

The seed-translation models use the native /responses endpoint, which takes
language codes instead of free-text instructions. Every other Doubao model
goes through the OpenAI-compatible chat endpoint.
"""
from typing import Optional

import httpx
from loguru import logger

from ...config import Settings, settings
from ..errors import InvalidResponseError
from ..languages import LanguageOption, Provider
from ..models import AnalysisResult, Credentials, ProviderTranslation
from .base import ProviderAdapter
from .chat import ChatCompletionAdapter


SEED_TRANSLATION_MARKER = "seed-translation"

# Seed translation language codes
SEED_LANGUAGE_CODES = {
    LanguageOption.SIMPLIFIED_CHINESE: "zh",
    LanguageOption.TRADITIONAL_CHINESE: "zh-Hant",
}


def seed_language_code(option: LanguageOption) -> Optional[str]:
    """Seed translation code; None for auto (the service detects it)"""
    if option is LanguageOption.AUTO:
        return None
    return SEED_LANGUAGE_CODES.get(option, option.code)


def is_seed_translation_model(model: str) -> bool:
    return SEED_TRANSLATION_MARKER in (model or "")


class SeedTranslationAdapter(ProviderAdapter):
    """Doubao seed-translation endpoint"""

    provider = Provider.DOUBAO

    def __init__(self, config: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None):
        super().__init__(config, client)
        self.endpoint = f"{self.config.DOUBAO_BASE_URL.rstrip('/')}/responses"

    def build_payload(self, text: str, source: LanguageOption, target: LanguageOption, model: str) -> dict:
        options = {"target_language": seed_language_code(target)}
        source_code = seed_language_code(source)
        if source_code:
            options["source_language"] = source_code
        return {
            "model": model,
            "input": [
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "input_text",
                            "text": text,
                            "translation_options": options,
                        }
                    ],
                }
            ],
        }

    async def translate(
        self,
        text: str,
        source: LanguageOption,
        target: LanguageOption,
        model: str,
        credentials: Credentials,
    ) -> ProviderTranslation:
        logger.debug(f"Seed translation: model={model}, chars={len(text)}")
        data = await self._post_json(
            self.endpoint,
            self.build_payload(text, source, target, model),
            headers={"Authorization": f"Bearer {credentials.api_key.strip()}"},
        )
        return ProviderTranslation(translated_text=self.parse_output(data))

    def parse_output(self, data: dict) -> str:
        """First non-empty output[].content[].text"""
        output = data.get("output") if isinstance(data, dict) else None
        if not isinstance(output, list):
            raise InvalidResponseError("Seed translation response has no output")

        for item in output:
            if not isinstance(item, dict):
                continue
            for content in item.get("content") or []:
                if not isinstance(content, dict):
                    continue
                text = content.get("text")
                if isinstance(text, str) and text.strip():
                    return text.strip()

        raise InvalidResponseError("Seed translation returned no text")


class DoubaoAdapter(ProviderAdapter):
    """Routes Doubao models to the seed-translation or chat endpoint"""

    provider = Provider.DOUBAO
    supports_analysis = True

    def __init__(self, config: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None):
        config = config or settings
        super().__init__(config, client)
        self.seed = SeedTranslationAdapter(config, client)
        self.chat = ChatCompletionAdapter(Provider.DOUBAO, config.DOUBAO_BASE_URL, config, client)

    def adapter_for(self, model: str) -> ProviderAdapter:
        return self.seed if is_seed_translation_model(model) else self.chat

    async def translate(
        self,
        text: str,
        source: LanguageOption,
        target: LanguageOption,
        model: str,
        credentials: Credentials,
    ) -> ProviderTranslation:
        return await self.adapter_for(model).translate(text, source, target, model, credentials)

    async def analyze(
        self,
        text: str,
        source: LanguageOption,
        target: LanguageOption,
        model: str,
        credentials: Credentials,
    ) -> AnalysisResult:
        return await self.adapter_for(model).analyze(text, source, target, model, credentials)
