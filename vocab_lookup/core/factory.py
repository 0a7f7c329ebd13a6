"""Factory functions for creating configured instances"""

from ..config.settings import AppSettings, settings
from ..utils.cache_engine import LookupCache, NullLookupCache
from .browser_session import BrowserSession
from .dictionary_service import DictionaryService
from .entry_parser import EntryParser
from .interfaces import (
    BrowserSessionInterface,
    EntryParserInterface,
    LookupCacheInterface,
)


def create_lookup_cache(app_settings: AppSettings | None = None) -> LookupCacheInterface:
    """Create the lookup cache described by the cache settings"""
    cfg = (app_settings or settings).cache
    if not cfg.enable_cache:
        return NullLookupCache()
    return LookupCache(max_entries=cfg.max_entries)


def create_dictionary_service(
    app_settings: AppSettings | None = None,
    session: BrowserSessionInterface | None = None,
    parser: EntryParserInterface | None = None,
    cache: LookupCacheInterface | None = None,
) -> DictionaryService:
    """Create a DictionaryService with default implementations.

    Any collaborator can be overridden, which is how tests inject fakes.
    """
    app_settings = app_settings or settings
    return DictionaryService(
        session=session or BrowserSession(app_settings.browser),
        parser=parser or EntryParser(),
        cache=cache if cache is not None else create_lookup_cache(app_settings),
        app_settings=app_settings,
    )
