"""Dictionary lookup and translation service backed by a headless browser"""

from types import TracebackType
from typing import Any
from urllib.parse import urlparse

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..config.settings import AppSettings, settings
from ..exceptions import FetchError, WordNotFoundError
from ..logging_config import get_logger
from ..models.word_entry import TranslationResult, WordEntry
from .constants import DictionaryConstants, TranslationConstants
from .interfaces import (
    BrowserSessionInterface,
    DictionaryServiceInterface,
    EntryParserInterface,
    LookupCacheInterface,
)
from .text_processor import TextProcessor

logger = get_logger(__name__)


class DictionaryService(DictionaryServiceInterface):
    """Looks up words on Oxford Learner's Dictionaries and caches the results"""

    def __init__(
        self,
        session: BrowserSessionInterface,
        parser: EntryParserInterface,
        cache: LookupCacheInterface,
        app_settings: AppSettings | None = None,
    ):
        self.session = session
        self.parser = parser
        self.cache = cache
        app_settings = app_settings or settings
        self.dict_settings = app_settings.dictionary
        self.translate_settings = app_settings.translation

    async def __aenter__(self) -> "DictionaryService":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def initialize(self) -> None:
        """Start the shared browser; raises BrowserInitializationError"""
        await self.session.start()

    async def lookup_word(self, word: str) -> WordEntry:
        cached = self.cache.get(word)
        if cached is not None:
            logger.debug(f"Using cached definition for '{word}'")
            return cached

        await self.initialize()

        try:
            content = await self._fetch_entry_page(word)
            soup = self.parser.load(content)
            if not self.parser.has_entry(soup):
                raise WordNotFoundError(word, self.definition_url(word))

            entry = self.parser.parse_entry(soup, word)
            if self.cache.set(word, entry):
                logger.debug(f"Cached definition for '{word}'")
            else:
                logger.info(f"No definitions found for '{word}', not caching")
            return entry

        except WordNotFoundError:
            logger.info(f"Word '{word}' not found in dictionary")
            return WordEntry.not_found(word)
        except Exception as e:
            logger.error(f"Error looking up word '{word}': {e}")
            return WordEntry.failure(
                word, f"{DictionaryConstants.LOOKUP_FAILED_PREFIX}: {e}"
            )

    async def translate_text(
        self, text: str, from_lang: str = "en", to_lang: str = "vi"
    ) -> TranslationResult:
        await self.initialize()

        try:
            url = self.translation_url(text, from_lang, to_lang)
            async with self.session.page(
                user_agent=self.translate_settings.user_agent
            ) as page:
                try:
                    await page.goto(
                        url,
                        wait_until="networkidle",
                        timeout=self.translate_settings.navigation_timeout_ms,
                    )
                except PlaywrightError as e:
                    raise FetchError(url, "load translation page", e) from e

                try:
                    await page.wait_for_selector(
                        TranslationConstants.OUTPUT_SELECTOR,
                        timeout=self.translate_settings.marker_timeout_ms,
                    )
                except PlaywrightTimeoutError:
                    logger.debug("Translation marker did not appear in time")

                # Output keeps updating briefly after the marker appears
                await page.wait_for_timeout(self.translate_settings.settle_ms)
                content = await page.content()

            translation = self.parser.extract_translation(self.parser.load(content))
            return TranslationResult(
                original=text,
                translation=translation or TranslationConstants.NOT_FOUND_MESSAGE,
            )
        except Exception as e:
            logger.error(f"Error translating text: {e}")
            return TranslationResult(
                original=text,
                translation=TranslationConstants.ERROR_MESSAGE,
                error=str(e),
            )

    async def close(self) -> None:
        await self.session.close()

    def definition_url(self, word: str) -> str:
        path = DictionaryConstants.DEFINITION_PATH.format(
            slug=TextProcessor.url_slug(word)
        )
        return f"{self.dict_settings.base_url}{path}"

    def search_url(self, word: str) -> str:
        path = DictionaryConstants.SEARCH_PATH.format(
            query=TextProcessor.url_query(word, lowercase=True)
        )
        return f"{self.dict_settings.base_url}{path}"

    def translation_url(self, text: str, from_lang: str, to_lang: str) -> str:
        path = TranslationConstants.TRANSLATE_PATH.format(
            from_lang=from_lang,
            to_lang=to_lang,
            text=TextProcessor.url_query(text),
        )
        return f"{self.translate_settings.base_url}{path}"

    def _consent_cookies(self) -> list[dict[str, Any]]:
        return [
            {
                "name": DictionaryConstants.CONSENT_COOKIE_NAME,
                "value": DictionaryConstants.CONSENT_COOKIE_VALUE,
                "domain": urlparse(self.dict_settings.base_url).hostname,
                "path": "/",
            }
        ]

    async def _fetch_entry_page(self, word: str) -> str:
        """Load the definition page, falling back to site search; return HTML"""
        async with self.session.page(
            user_agent=self.dict_settings.user_agent,
            block_resources=self.dict_settings.block_resources,
            cookies=self._consent_cookies(),
        ) as page:
            url = self.definition_url(word)
            logger.info(f"Looking up word '{word}' at {url}")
            try:
                await page.goto(
                    url,
                    wait_until="domcontentloaded",
                    timeout=self.dict_settings.navigation_timeout_ms,
                )
            except PlaywrightError as e:
                # Whatever did load is inspected below
                logger.warning(f"Navigation error for '{word}': {e}")

            try:
                if await page.query_selector(DictionaryConstants.ENTRY_SELECTOR) is None:
                    logger.info(f"No direct entry found for '{word}', trying search...")
                    await self._follow_first_search_result(page, word)
            except PlaywrightError as e:
                logger.warning(f"Error evaluating page for '{word}': {e}")

            return await page.content()

    async def _follow_first_search_result(self, page: Page, word: str) -> None:
        await page.goto(
            self.search_url(word),
            wait_until="domcontentloaded",
            timeout=self.dict_settings.navigation_timeout_ms,
        )
        await page.wait_for_timeout(self.dict_settings.search_settle_ms)

        first_result = await page.query_selector(
            DictionaryConstants.SEARCH_RESULT_LINK_SELECTOR
        )
        if first_result is None:
            logger.debug(f"No search results for '{word}'")
            return

        try:
            async with page.expect_navigation(
                wait_until="domcontentloaded",
                timeout=self.dict_settings.result_navigation_timeout_ms,
            ):
                await first_result.click()
        except PlaywrightTimeoutError:
            logger.info("Navigation timeout after clicking result")
