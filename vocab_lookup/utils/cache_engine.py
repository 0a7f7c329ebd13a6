"""In-memory lookup cache with optional LRU bound and hit statistics.

Keys are the raw query words exactly as passed by callers, so ``"Run"``
and ``"run"`` are separate entries. Nothing is written to disk; the cache
lives for the process lifetime.
"""

import threading
from collections import OrderedDict

from ..core.interfaces import LookupCacheInterface
from ..logging_config import get_logger
from ..models.cache_models import CacheStats
from ..models.word_entry import WordEntry

logger = get_logger(__name__)


class LookupCache(LookupCacheInterface):
    def __init__(self, max_entries: int | None = None):
        self._cache: OrderedDict[str, WordEntry] = OrderedDict()
        self._max_entries = max_entries
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, word: str) -> WordEntry | None:
        with self._lock:
            entry = self._cache.get(word)
            if entry is None:
                self._misses += 1
                return None
            self._hits += 1
            if self._max_entries is not None:
                self._cache.move_to_end(word)
            return entry

    def set(self, word: str, entry: WordEntry) -> bool:
        if not self.is_cacheable(entry):
            return False
        with self._lock:
            self._cache[word] = entry
            self._cache.move_to_end(word)
            if self._max_entries is not None:
                while len(self._cache) > self._max_entries:
                    evicted, _ = self._cache.popitem(last=False)
                    self._evictions += 1
                    logger.debug(f"Evicted '{evicted}' from lookup cache")
            return True

    def delete(self, word: str) -> bool:
        with self._lock:
            return self._cache.pop(word, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._cache.keys())

    def __contains__(self, word: object) -> bool:
        with self._lock:
            return word in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    @staticmethod
    def is_cacheable(entry: WordEntry) -> bool:
        """Only successful lookups with at least one definition are cached"""
        return entry.error is None and len(entry.definitions) > 0

    def get_stats(self) -> CacheStats:
        with self._lock:
            total_requests = self._hits + self._misses
            hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0
            return CacheStats(
                total_entries=len(self._cache),
                max_entries=self._max_entries,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                hit_rate=hit_rate,
            )


class NullLookupCache(LookupCacheInterface):
    """Cache that stores nothing, used when caching is disabled"""

    def get(self, word: str) -> WordEntry | None:
        return None

    def set(self, word: str, entry: WordEntry) -> bool:
        return False

    def delete(self, word: str) -> bool:
        return False

    def clear(self) -> None:
        return None

    def get_stats(self) -> CacheStats:
        return CacheStats(total_entries=0, hit_rate=0.0)
