"""Configuration module for the vocabulary lookup service"""

from .settings import (
    AppSettings,
    BrowserSettings,
    CacheSettings,
    DictionarySettings,
    LoggingSettings,
    TranslationSettings,
    settings,
)

__all__ = [
    "AppSettings",
    "BrowserSettings",
    "CacheSettings",
    "DictionarySettings",
    "TranslationSettings",
    "LoggingSettings",
    "settings",
]
