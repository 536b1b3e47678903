"""Bounded result cache for translations."""
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .languages import LanguageOption, Provider
from .models import TranslationRequest, TranslationResult


DEFAULT_CAPACITY = 200


@dataclass(frozen=True)
class CacheKey:
    """Full identity of a translate request"""
    provider: Provider
    model: str
    source_language: LanguageOption
    target_language: LanguageOption
    text: str

    @classmethod
    def for_request(cls, request: TranslationRequest) -> "CacheKey":
        return cls(
            provider=request.provider,
            model=request.model,
            source_language=request.source_language,
            target_language=request.target_language,
            text=request.normalized_text,
        )


@dataclass
class CacheStats:
    """Cache statistics."""
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_ratio(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class ResultCache:
    """
    Thread-safe LRU store of translation results.

    Results are frozen dataclasses, so the cached value and the one handed
    to the caller can never diverge.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("cache capacity must be at least 1")
        self.capacity = capacity
        self.stats = CacheStats()
        self._items: "OrderedDict[CacheKey, TranslationResult]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: CacheKey) -> Optional[TranslationResult]:
        with self._lock:
            result = self._items.get(key)
            if result is None:
                self.stats.misses += 1
                return None
            self._items.move_to_end(key)
            self.stats.hits += 1
            return result

    def put(self, key: CacheKey, result: TranslationResult) -> None:
        with self._lock:
            if key in self._items:
                self._items.move_to_end(key)
            self._items[key] = result
            while len(self._items) > self.capacity:
                evicted, _ = self._items.popitem(last=False)
                self.stats.evictions += 1
                logger.debug(f"Evicted cached translation ({evicted.provider.value}/{evicted.model})")

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, key: CacheKey) -> bool:
        with self._lock:
            return key in self._items
