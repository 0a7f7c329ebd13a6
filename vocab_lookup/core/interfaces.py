"""Interface definitions for core components"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Any

from bs4 import BeautifulSoup

from ..models.cache_models import CacheStats
from ..models.word_entry import TranslationResult, WordEntry


class BrowserSessionInterface(ABC):
    """Interface for the shared headless browser"""

    @property
    @abstractmethod
    def is_started(self) -> bool:
        """Whether a browser is currently running"""
        pass

    @abstractmethod
    async def start(self) -> None:
        """Start the browser once; repeated calls are no-ops"""
        pass

    @abstractmethod
    def page(
        self,
        user_agent: str,
        block_resources: bool = False,
        cookies: list[dict[str, Any]] | None = None,
    ) -> AbstractAsyncContextManager[Any]:
        """Open an isolated page released when the scope exits"""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close the browser, swallowing close-time errors"""
        pass


class LookupCacheInterface(ABC):
    """Interface for the lookup cache"""

    @abstractmethod
    def get(self, word: str) -> WordEntry | None:
        """Get a cached entry by exact word"""
        pass

    @abstractmethod
    def set(self, word: str, entry: WordEntry) -> bool:
        """Cache an entry; returns False when the entry is not cacheable"""
        pass

    @abstractmethod
    def delete(self, word: str) -> bool:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def get_stats(self) -> CacheStats:
        pass


class EntryParserInterface(ABC):
    """Interface for dictionary page parsing"""

    @abstractmethod
    def load(self, content: str) -> BeautifulSoup:
        """Parse raw HTML into a document tree"""
        pass

    @abstractmethod
    def has_entry(self, soup: BeautifulSoup) -> bool:
        """Check for an entry region and absence of a no-results marker"""
        pass

    @abstractmethod
    def parse_entry(self, soup: BeautifulSoup, word: str) -> WordEntry:
        """Extract a populated WordEntry"""
        pass

    @abstractmethod
    def extract_translation(self, soup: BeautifulSoup) -> str:
        """Extract translated text from a translation page"""
        pass


class DictionaryServiceInterface(ABC):
    """Interface exposed to collaborators"""

    @abstractmethod
    async def lookup_word(self, word: str) -> WordEntry:
        """Look up a word; never raises for fetch or parse failures"""
        pass

    @abstractmethod
    async def translate_text(
        self, text: str, from_lang: str = "en", to_lang: str = "vi"
    ) -> TranslationResult:
        """Translate text via the translation page"""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the shared browser"""
        pass
