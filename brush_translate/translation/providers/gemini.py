"""
Google Gemini generateContent adapter
"""
from typing import Optional

import httpx
from loguru import logger

from ...config import Settings
from ..errors import InvalidResponseError, ServiceError
from ..languages import LanguageOption, Provider
from ..models import AnalysisResult, Credentials, ProviderTranslation
from ..prompts import build_analysis_prompt, build_translation_prompt
from ..response_parser import ResponseParser
from .base import ProviderAdapter


class GeminiAdapter(ProviderAdapter):
    """Schema-driven translation over the generative content endpoint"""

    provider = Provider.GEMINI
    supports_analysis = True

    def __init__(self, config: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None):
        super().__init__(config, client)
        self.base_url = self.config.GEMINI_BASE_URL.rstrip("/")

    def endpoint_for(self, model: str) -> str:
        return f"{self.base_url}/models/{model}:generateContent"

    def build_payload(self, system_prompt: str, text: str) -> dict:
        return {
            "systemInstruction": {"parts": [{"text": system_prompt}]},
            "contents": [{"role": "user", "parts": [{"text": text}]}],
            "generationConfig": {
                "temperature": 0,
                "responseMimeType": "application/json",
            },
        }

    async def generate(self, system_prompt: str, text: str, model: str, credentials: Credentials) -> str:
        """Return the concatenated text parts of the first candidate"""
        logger.debug(f"Gemini generateContent: model={model}, chars={len(text)}")
        data = await self._post_json(
            self.endpoint_for(model),
            self.build_payload(system_prompt, text),
            headers={"x-goog-api-key": credentials.api_key.strip()},
        )

        if not isinstance(data, dict):
            raise InvalidResponseError("Gemini response is not an object")

        candidates = data.get("candidates") or []
        if not candidates:
            # Prompt rejected before generation
            feedback = data.get("promptFeedback") or {}
            reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
            if reason:
                raise ServiceError(f"Gemini blocked the request: {reason}")
            raise InvalidResponseError("Gemini returned no candidates")

        try:
            parts = candidates[0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as e:
            raise InvalidResponseError("Gemini candidate has no content", cause=e)

        text_out = "".join(part.get("text", "") for part in parts if isinstance(part, dict))
        if not text_out.strip():
            raise InvalidResponseError("Gemini returned an empty message")
        return text_out

    async def translate(
        self,
        text: str,
        source: LanguageOption,
        target: LanguageOption,
        model: str,
        credentials: Credentials,
    ) -> ProviderTranslation:
        content = await self.generate(build_translation_prompt(source, target), text, model, credentials)
        return ProviderTranslation(translated_text=ResponseParser.parse_translation(content))

    async def analyze(
        self,
        text: str,
        source: LanguageOption,
        target: LanguageOption,
        model: str,
        credentials: Credentials,
    ) -> AnalysisResult:
        content = await self.generate(build_analysis_prompt(source, target), text, model, credentials)
        return ResponseParser.parse_analysis(content)
