import pytest

from brush_translate.config import Settings, get_httpx_client_kwargs
from brush_translate.settings_store import TranslationApiKeys, TranslationSettings
from brush_translate.translation.languages import LanguageOption, Provider


@pytest.mark.unit
def test_defaults_pick_provider_default_model():
    selection = TranslationSettings(provider=Provider.GEMINI)
    assert selection.model == "gemini-2.5-pro"


@pytest.mark.unit
def test_select_provider_falls_back_on_unknown_model():
    selection = TranslationSettings()
    selection.select_provider(Provider.DOUBAO, "doubao-seed-1-6-251015")
    assert selection.model == "doubao-seed-1-6-251015"

    selection.select_provider(Provider.DEEPSEEK, "gpt-4o")
    assert selection.model == "deepseek-chat"


@pytest.mark.unit
def test_credentials_per_provider():
    keys = TranslationApiKeys(deepseek="sk-d", gemini="g-key", youdao_app_key="yk", youdao_app_secret="ys")

    assert keys.for_provider(Provider.DEEPSEEK).api_key == "sk-d"
    assert keys.for_provider(Provider.DOUBAO).is_blank(Provider.DOUBAO)
    youdao = keys.for_provider(Provider.YOUDAO)
    assert (youdao.api_key, youdao.secret) == ("yk", "ys")
    assert not youdao.is_blank(Provider.YOUDAO)


@pytest.mark.unit
def test_keys_are_masked():
    keys = TranslationApiKeys(deepseek="sk-d")
    assert keys.to_dict()["deepseek"] == "***"
    assert keys.to_dict()["gemini"] == ""
    assert keys.to_dict(mask=False)["deepseek"] == "sk-d"
    assert "sk-d" not in repr(keys.for_provider(Provider.DEEPSEEK))


@pytest.mark.unit
def test_build_request():
    selection = TranslationSettings(
        provider=Provider.YOUDAO,
        source_language=LanguageOption.ENGLISH,
        target_language=LanguageOption.JAPANESE,
        api_keys=TranslationApiKeys(youdao_app_key="yk", youdao_app_secret="ys"),
    )
    request = selection.build_request("hello")

    assert request.provider is Provider.YOUDAO
    assert request.model == "youdao-text"
    assert request.source_language is LanguageOption.ENGLISH
    assert request.target_language is LanguageOption.JAPANESE
    assert request.credentials.secret == "ys"


@pytest.mark.unit
def test_auto_target_is_rejected():
    selection = TranslationSettings(target_language=LanguageOption.AUTO)
    with pytest.raises(ValueError):
        selection.build_request("hello")


@pytest.mark.unit
def test_from_settings():
    config = Settings(
        _env_file=None,
        DEFAULT_PROVIDER="Gemini",
        DEFAULT_SOURCE_LANG="en-US",
        DEFAULT_TARGET_LANG="zh-TW",
        GEMINI_API_KEY="g-key",
    )
    selection = TranslationSettings.from_settings(config)

    assert selection.provider is Provider.GEMINI
    assert selection.source_language is LanguageOption.ENGLISH
    assert selection.target_language is LanguageOption.TRADITIONAL_CHINESE
    assert selection.credentials().api_key == "g-key"


@pytest.mark.unit
def test_from_settings_falls_back_on_bad_values():
    config = Settings(_env_file=None, DEFAULT_PROVIDER="bing", DEFAULT_SOURCE_LANG="xx", DEFAULT_TARGET_LANG="auto")
    selection = TranslationSettings.from_settings(config)

    assert selection.provider is Provider.DEEPSEEK
    assert selection.source_language is LanguageOption.AUTO
    assert selection.target_language is LanguageOption.SIMPLIFIED_CHINESE


@pytest.mark.unit
def test_httpx_kwargs_include_proxy():
    config = Settings(_env_file=None, PROXY_URL="http://127.0.0.1:7890", REQUEST_TIMEOUT=15.0)
    assert get_httpx_client_kwargs(config=config) == {"timeout": 15.0, "proxy": "http://127.0.0.1:7890"}
    assert get_httpx_client_kwargs(timeout=3, config=config)["timeout"] == 3
