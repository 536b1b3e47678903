"""Shared fixtures."""
from typing import Optional

import pytest

from brush_translate.config import Settings
from brush_translate.translation.languages import LanguageOption, Provider
from brush_translate.translation.models import Credentials, TranslationRequest


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, PROXY_URL=None, REQUEST_TIMEOUT=15.0, CACHE_CAPACITY=200)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key="sk-test")


@pytest.fixture
def make_request(credentials):
    def _make(
        text: str = "hello world",
        source: LanguageOption = LanguageOption.AUTO,
        target: LanguageOption = LanguageOption.SIMPLIFIED_CHINESE,
        provider: Provider = Provider.DEEPSEEK,
        model: str = "deepseek-chat",
        creds: Optional[Credentials] = None,
    ) -> TranslationRequest:
        return TranslationRequest(
            text=text,
            source_language=source,
            target_language=target,
            provider=provider,
            model=model,
            credentials=creds if creds is not None else credentials,
        )
    return _make
