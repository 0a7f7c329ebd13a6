"""Tests for BrowserSession lifecycle using mocked Playwright objects"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from vocab_lookup.config.settings import BrowserSettings
from vocab_lookup.core.browser_session import BrowserSession
from vocab_lookup.exceptions import BrowserInitializationError


def make_playwright(launch_error: Exception | None = None):
    """Build a playwright factory plus the mocks it hands out"""
    page = MagicMock()
    context = MagicMock()
    context.new_page = AsyncMock(return_value=page)
    context.add_cookies = AsyncMock()
    context.route = AsyncMock()
    context.close = AsyncMock()

    browser = MagicMock()
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()

    playwright = MagicMock()
    playwright.stop = AsyncMock()
    if launch_error is not None:
        playwright.chromium.launch = AsyncMock(side_effect=launch_error)
    else:
        playwright.chromium.launch = AsyncMock(return_value=browser)

    manager = MagicMock()
    manager.start = AsyncMock(return_value=playwright)
    factory = MagicMock(return_value=manager)
    return factory, playwright, browser, context, page


@pytest.fixture
def browser_settings():
    return BrowserSettings()


class TestStart:
    """Test shared browser startup"""

    def test_launches_headless_without_sandbox(self, browser_settings):
        """Test browser launches headless with sandbox disabled"""
        factory, playwright, _, _, _ = make_playwright()
        session = BrowserSession(browser_settings, playwright_factory=factory)

        asyncio.run(session.start())

        assert session.is_started
        playwright.chromium.launch.assert_awaited_once_with(
            headless=True, args=["--no-sandbox", "--disable-setuid-sandbox"]
        )

    def test_start_is_idempotent(self, browser_settings):
        """Test repeated start reuses the running browser"""
        factory, playwright, _, _, _ = make_playwright()
        session = BrowserSession(browser_settings, playwright_factory=factory)

        async def scenario():
            await session.start()
            await session.start()

        asyncio.run(scenario())

        assert factory.call_count == 1
        assert playwright.chromium.launch.await_count == 1

    def test_concurrent_start_launches_one_browser(self, browser_settings):
        """Test concurrent first callers share one browser"""
        factory, playwright, _, _, _ = make_playwright()
        session = BrowserSession(browser_settings, playwright_factory=factory)

        async def scenario():
            await asyncio.gather(*(session.start() for _ in range(5)))

        asyncio.run(scenario())

        assert playwright.chromium.launch.await_count == 1

    def test_launch_failure_leaves_no_state(self, browser_settings):
        """Test failed launch stops the driver and reports the cause"""
        factory, playwright, _, _, _ = make_playwright(
            launch_error=RuntimeError("missing executable")
        )
        session = BrowserSession(browser_settings, playwright_factory=factory)

        with pytest.raises(BrowserInitializationError) as exc_info:
            asyncio.run(session.start())

        assert "missing executable" in str(exc_info.value)
        assert not session.is_started
        playwright.stop.assert_awaited_once()

    def test_driver_failure_is_initialization_error(self, browser_settings):
        """Test driver start failure raises BrowserInitializationError"""
        manager = MagicMock()
        manager.start = AsyncMock(side_effect=OSError("driver not found"))
        session = BrowserSession(
            browser_settings, playwright_factory=MagicMock(return_value=manager)
        )

        with pytest.raises(BrowserInitializationError):
            asyncio.run(session.start())
        assert not session.is_started


class TestPage:
    """Test per-call page scopes"""

    def test_page_scope_configures_and_releases_context(self, browser_settings):
        """Test page scope applies user agent, cookies and routing, then closes"""
        factory, _, browser, context, page = make_playwright()
        session = BrowserSession(browser_settings, playwright_factory=factory)
        cookies = [{"name": "c", "value": "v", "domain": "example.com", "path": "/"}]

        async def scenario():
            async with session.page(
                user_agent="UA", block_resources=True, cookies=cookies
            ) as p:
                assert p is page

        asyncio.run(scenario())

        browser.new_context.assert_awaited_once_with(user_agent="UA")
        context.add_cookies.assert_awaited_once_with(cookies)
        context.route.assert_awaited_once()
        page.set_default_timeout.assert_called_once_with(10000)
        context.close.assert_awaited_once()

    def test_page_scope_starts_browser_lazily(self, browser_settings):
        """Test opening a page starts the browser on demand"""
        factory, playwright, _, _, _ = make_playwright()
        session = BrowserSession(browser_settings, playwright_factory=factory)

        async def scenario():
            async with session.page(user_agent="UA"):
                pass

        asyncio.run(scenario())

        assert session.is_started
        playwright.chromium.launch.assert_awaited_once()

    def test_context_closed_when_body_raises(self, browser_settings):
        """Test context is closed when the scope body raises"""
        factory, _, _, context, _ = make_playwright()
        session = BrowserSession(browser_settings, playwright_factory=factory)

        async def scenario():
            async with session.page(user_agent="UA"):
                raise ValueError("parse failed")

        with pytest.raises(ValueError):
            asyncio.run(scenario())
        context.close.assert_awaited_once()

    def test_context_close_error_does_not_mask_result(self, browser_settings):
        """Test close failure does not replace the scope result"""
        factory, _, _, context, _ = make_playwright()
        context.close = AsyncMock(side_effect=RuntimeError("already closed"))
        session = BrowserSession(browser_settings, playwright_factory=factory)

        async def scenario():
            async with session.page(user_agent="UA"):
                return "done"

        assert asyncio.run(scenario()) == "done"

    def test_no_resource_blocking_unless_requested(self, browser_settings):
        """Test no routes or cookies are installed by default"""
        factory, _, _, context, _ = make_playwright()
        session = BrowserSession(browser_settings, playwright_factory=factory)

        async def scenario():
            async with session.page(user_agent="UA"):
                pass

        asyncio.run(scenario())
        context.route.assert_not_awaited()
        context.add_cookies.assert_not_awaited()


class TestRouting:
    """Test request routing for blocked resource types"""

    @pytest.mark.parametrize("resource_type", ["image", "media", "font", "stylesheet"])
    def test_heavy_resources_are_aborted(self, resource_type):
        """Test images, media, fonts and stylesheets are aborted"""
        route = MagicMock()
        route.request.resource_type = resource_type
        route.abort = AsyncMock()
        route.continue_ = AsyncMock()

        asyncio.run(BrowserSession._route_request(route))

        route.abort.assert_awaited_once()
        route.continue_.assert_not_awaited()

    @pytest.mark.parametrize("resource_type", ["document", "script", "xhr"])
    def test_documents_and_scripts_continue(self, resource_type):
        """Test other resource types continue"""
        route = MagicMock()
        route.request.resource_type = resource_type
        route.abort = AsyncMock()
        route.continue_ = AsyncMock()

        asyncio.run(BrowserSession._route_request(route))

        route.continue_.assert_awaited_once()
        route.abort.assert_not_awaited()


class TestClose:
    """Test browser shutdown"""

    def test_close_twice_is_safe(self, browser_settings):
        """Test closing twice releases resources once"""
        factory, playwright, browser, _, _ = make_playwright()
        session = BrowserSession(browser_settings, playwright_factory=factory)

        async def scenario():
            await session.start()
            await session.close()
            await session.close()

        asyncio.run(scenario())

        browser.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()
        assert not session.is_started

    def test_close_without_start_is_noop(self, browser_settings):
        """Test close before start does nothing"""
        factory, _, _, _, _ = make_playwright()
        session = BrowserSession(browser_settings, playwright_factory=factory)

        asyncio.run(session.close())

        factory.assert_not_called()

    def test_close_error_is_swallowed(self, browser_settings):
        """Test browser close errors are logged, not raised"""
        factory, playwright, browser, _, _ = make_playwright()
        browser.close = AsyncMock(side_effect=RuntimeError("connection lost"))
        session = BrowserSession(browser_settings, playwright_factory=factory)

        async def scenario():
            await session.start()
            await session.close()

        asyncio.run(scenario())

        assert not session.is_started
        playwright.stop.assert_awaited_once()

    def test_restart_after_close(self, browser_settings):
        """Test session can start again after close"""
        factory, playwright, _, _, _ = make_playwright()
        session = BrowserSession(browser_settings, playwright_factory=factory)

        async def scenario():
            await session.start()
            await session.close()
            await session.start()

        asyncio.run(scenario())

        assert session.is_started
        assert playwright.chromium.launch.await_count == 2
