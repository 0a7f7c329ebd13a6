"""Data models for the vocabulary lookup service"""

from .cache_models import CacheStats
from .word_entry import Idiom, Pronunciation, TranslationResult, WordEntry

__all__ = [
    "WordEntry",
    "Idiom",
    "Pronunciation",
    "TranslationResult",
    "CacheStats",
]
