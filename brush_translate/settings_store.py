"""
Translation settings store
User-selected provider / model / languages and per-provider API keys
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from loguru import logger

from .config import Settings, settings
from .translation.languages import LanguageOption, Provider
from .translation.models import Credentials, TranslationRequest


# ==================== Data Classes ====================

@dataclass
class TranslationApiKeys:
    """API keys for the translation providers"""
    deepseek: str = ""
    doubao: str = ""
    gemini: str = ""
    youdao_app_key: str = ""
    youdao_app_secret: str = ""

    def to_dict(self, mask: bool = True) -> Dict[str, Any]:
        if mask:
            return {
                "deepseek": "***" if self.deepseek else "",
                "doubao": "***" if self.doubao else "",
                "gemini": "***" if self.gemini else "",
                "youdao_app_key": "***" if self.youdao_app_key else "",
                "youdao_app_secret": "***" if self.youdao_app_secret else "",
            }
        return {
            "deepseek": self.deepseek,
            "doubao": self.doubao,
            "gemini": self.gemini,
            "youdao_app_key": self.youdao_app_key,
            "youdao_app_secret": self.youdao_app_secret,
        }

    def for_provider(self, provider: Provider) -> Credentials:
        """Get the credentials for a specific provider"""
        if provider is Provider.YOUDAO:
            return Credentials(api_key=self.youdao_app_key, secret=self.youdao_app_secret)
        key_map = {
            Provider.DEEPSEEK: self.deepseek,
            Provider.DOUBAO: self.doubao,
            Provider.GEMINI: self.gemini,
        }
        return Credentials(api_key=key_map.get(provider, ""))

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "TranslationApiKeys":
        config = config or settings
        return cls(
            deepseek=config.DEEPSEEK_API_KEY or "",
            doubao=config.DOUBAO_API_KEY or "",
            gemini=config.GEMINI_API_KEY or "",
            youdao_app_key=config.YOUDAO_APP_KEY or "",
            youdao_app_secret=config.YOUDAO_APP_SECRET or "",
        )


@dataclass
class TranslationSettings:
    """Provider and language selection"""
    provider: Provider = Provider.DEEPSEEK
    model: str = ""
    source_language: LanguageOption = LanguageOption.AUTO
    target_language: LanguageOption = LanguageOption.SIMPLIFIED_CHINESE
    api_keys: TranslationApiKeys = field(default_factory=TranslationApiKeys)

    def __post_init__(self):
        if not self.model:
            self.model = self.provider.default_model

    def select_provider(self, provider: Provider, model: Optional[str] = None) -> None:
        """Switch provider, falling back to its default model"""
        self.provider = provider
        if model and model in provider.models:
            self.model = model
        else:
            if model:
                logger.warning(f"Model {model} not offered by {provider.value}, using {provider.default_model}")
            self.model = provider.default_model

    def credentials(self) -> Credentials:
        return self.api_keys.for_provider(self.provider)

    def build_request(self, text: str) -> TranslationRequest:
        """Request for ``text`` under the current selection"""
        return TranslationRequest(
            text=text,
            source_language=self.source_language,
            target_language=self.target_language,
            provider=self.provider,
            model=self.model,
            credentials=self.credentials(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "provider": self.provider.value,
            "model": self.model,
            "source_language": self.source_language.value,
            "target_language": self.target_language.value,
            "api_keys": self.api_keys.to_dict(mask=True),
        }

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "TranslationSettings":
        """Defaults from configuration; unknown values fall back to built-ins"""
        config = config or settings
        try:
            provider = Provider(config.DEFAULT_PROVIDER.lower())
        except ValueError:
            logger.warning(f"Unknown provider {config.DEFAULT_PROVIDER}, falling back to deepseek")
            provider = Provider.DEEPSEEK

        source = LanguageOption.from_code(config.DEFAULT_SOURCE_LANG) or LanguageOption.AUTO
        target = LanguageOption.from_code(config.DEFAULT_TARGET_LANG)
        if target is None or target is LanguageOption.AUTO:
            target = LanguageOption.SIMPLIFIED_CHINESE

        return cls(
            provider=provider,
            source_language=source,
            target_language=target,
            api_keys=TranslationApiKeys.from_settings(config),
        )
