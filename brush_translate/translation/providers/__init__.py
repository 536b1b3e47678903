"""Provider adapters"""
from typing import Dict, Optional

import httpx

from ...config import Settings
from ..languages import Provider
from .base import ProviderAdapter
from .chat import ChatCompletionAdapter, DeepSeekAdapter
from .doubao import DoubaoAdapter, SeedTranslationAdapter
from .gemini import GeminiAdapter
from .youdao import YoudaoAdapter


def create_adapter(
    provider: Provider,
    config: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> ProviderAdapter:
    """Create the adapter for a provider"""
    if provider is Provider.DEEPSEEK:
        return DeepSeekAdapter(config, client)
    elif provider is Provider.DOUBAO:
        return DoubaoAdapter(config, client)
    elif provider is Provider.GEMINI:
        return GeminiAdapter(config, client)
    elif provider is Provider.YOUDAO:
        return YoudaoAdapter(config, client)
    raise ValueError(f"Unknown provider: {provider}")


def create_adapters(
    config: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Dict[Provider, ProviderAdapter]:
    return {provider: create_adapter(provider, config, client) for provider in Provider}


__all__ = [
    "ProviderAdapter",
    "ChatCompletionAdapter",
    "DeepSeekAdapter",
    "DoubaoAdapter",
    "SeedTranslationAdapter",
    "GeminiAdapter",
    "YoudaoAdapter",
    "create_adapter",
    "create_adapters",
]
