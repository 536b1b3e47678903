import threading

import pytest

from brush_translate.translation.cache import CacheKey, ResultCache
from brush_translate.translation.languages import LanguageOption, Provider
from brush_translate.translation.models import TranslationResult


def _key(text: str = "hello", **overrides) -> CacheKey:
    values = {
        "provider": Provider.DEEPSEEK,
        "model": "deepseek-chat",
        "source_language": LanguageOption.AUTO,
        "target_language": LanguageOption.SIMPLIFIED_CHINESE,
        "text": text,
    }
    values.update(overrides)
    return CacheKey(**values)


def _result(text: str = "hello") -> TranslationResult:
    return TranslationResult(
        original_text=text,
        translated_text=f"zh:{text}",
        detected_source_label="English",
        target_label="Chinese (Simplified)",
    )


@pytest.mark.unit
def test_get_put_round_trip():
    cache = ResultCache()
    cache.put(_key(), _result())

    assert cache.get(_key()) == _result()
    assert cache.stats.hits == 1


@pytest.mark.unit
@pytest.mark.parametrize("overrides", [
    {"provider": Provider.GEMINI},
    {"model": "other"},
    {"source_language": LanguageOption.ENGLISH},
    {"target_language": LanguageOption.JAPANESE},
    {"text": "hello!"},
])
def test_any_key_difference_misses(overrides):
    cache = ResultCache()
    cache.put(_key(), _result())

    assert cache.get(_key(**overrides)) is None
    assert cache.stats.misses == 1


@pytest.mark.unit
def test_key_uses_normalized_request_text(make_request):
    assert CacheKey.for_request(make_request(text="  hi \n")) == CacheKey.for_request(make_request(text="hi"))


@pytest.mark.unit
def test_capacity_is_bounded_with_lru_eviction():
    cache = ResultCache(capacity=2)
    cache.put(_key("a"), _result("a"))
    cache.put(_key("b"), _result("b"))
    cache.get(_key("a"))
    cache.put(_key("c"), _result("c"))

    assert len(cache) == 2
    assert _key("a") in cache
    assert _key("b") not in cache
    assert cache.stats.evictions == 1


@pytest.mark.unit
def test_rejects_zero_capacity():
    with pytest.raises(ValueError):
        ResultCache(capacity=0)


@pytest.mark.unit
def test_concurrent_writers_keep_bound():
    cache = ResultCache(capacity=50)

    def writer(prefix: str):
        for i in range(200):
            cache.put(_key(f"{prefix}-{i}"), _result(f"{prefix}-{i}"))
            cache.get(_key(f"{prefix}-{i // 2}"))

    threads = [threading.Thread(target=writer, args=(str(n),)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 50


@pytest.mark.unit
def test_clear():
    cache = ResultCache()
    cache.put(_key(), _result())
    cache.clear()
    assert len(cache) == 0
