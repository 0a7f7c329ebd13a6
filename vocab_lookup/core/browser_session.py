"""Shared headless browser with per-call isolated pages"""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

from playwright.async_api import (
    Browser,
    BrowserContext,
    ConsoleMessage,
    Page,
    Playwright,
    Route,
    async_playwright,
)

from ..config.settings import BrowserSettings, settings
from ..exceptions import BrowserInitializationError
from ..logging_config import get_logger
from ..utils.error_handler import handle_errors_async
from .constants import DictionaryConstants
from .interfaces import BrowserSessionInterface

logger = get_logger(__name__)


class BrowserSession(BrowserSessionInterface):
    """Owns one Playwright browser shared by all lookups.

    The browser starts lazily and lives until ``close()``. Every call works
    in its own browser context (its own cookies, user agent and routes),
    which is closed when the ``page()`` scope exits, whatever the outcome.
    """

    def __init__(
        self,
        browser_settings: BrowserSettings | None = None,
        playwright_factory: Callable[[], Any] = async_playwright,
    ):
        self.settings = browser_settings or settings.browser
        self._playwright_factory = playwright_factory
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._lock = asyncio.Lock()

    @property
    def is_started(self) -> bool:
        return self._browser is not None

    async def start(self) -> None:
        """Launch the browser unless one is already running"""
        if self._browser is not None:
            return
        async with self._lock:
            # Another caller may have finished starting while we waited
            if self._browser is not None:
                return

            browser_type = self.settings.browser_type
            logger.info(f"Starting headless {browser_type} browser")
            playwright: Playwright | None = None
            try:
                playwright = await self._playwright_factory().start()
                launcher = getattr(playwright, browser_type)
                browser = await launcher.launch(
                    headless=self.settings.headless,
                    args=list(self.settings.launch_args),
                )
            except Exception as e:
                if playwright is not None:
                    await self._stop_driver(playwright)
                raise BrowserInitializationError(browser_type, e) from e

            self._playwright = playwright
            self._browser = browser

    @asynccontextmanager
    async def page(
        self,
        user_agent: str,
        block_resources: bool = False,
        cookies: list[dict[str, Any]] | None = None,
    ) -> AsyncIterator[Page]:
        await self.start()
        browser = self._browser
        if browser is None:
            # close() ran between start() and here
            raise BrowserInitializationError(self.settings.browser_type)

        context = await browser.new_context(user_agent=user_agent)
        try:
            if cookies:
                await context.add_cookies(cookies)
            if block_resources:
                await context.route("**/*", self._route_request)
            page = await context.new_page()
            page.set_default_timeout(self.settings.default_timeout_ms)
            page.on("console", self._log_console_error)
            yield page
        finally:
            await self._close_context(context)

    async def close(self) -> None:
        browser, playwright = self._browser, self._playwright
        self._browser = None
        self._playwright = None
        if browser is not None:
            logger.info("Closing headless browser")
            await self._close_browser(browser)
        if playwright is not None:
            await self._stop_driver(playwright)

    @staticmethod
    async def _route_request(route: Route) -> None:
        if route.request.resource_type in DictionaryConstants.BLOCKED_RESOURCE_TYPES:
            await route.abort()
        else:
            await route.continue_()

    @staticmethod
    def _log_console_error(msg: ConsoleMessage) -> None:
        if msg.type == "error":
            logger.debug(f"Page error: {msg.text}")

    @handle_errors_async(log_level=logging.WARNING, operation_name="page_close")
    async def _close_context(self, context: BrowserContext) -> None:
        await context.close()

    @handle_errors_async(operation_name="browser_close")
    async def _close_browser(self, browser: Browser) -> None:
        await browser.close()

    @handle_errors_async(operation_name="playwright_stop")
    async def _stop_driver(self, playwright: Playwright) -> None:
        await playwright.stop()
