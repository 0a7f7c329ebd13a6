"""Shared fixtures: dictionary page HTML and an in-memory fake browser"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any
from urllib.parse import urljoin

import pytest
from bs4 import BeautifulSoup
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from vocab_lookup.config.settings import AppSettings
from vocab_lookup.core.entry_parser import EntryParser
from vocab_lookup.core.factory import create_dictionary_service
from vocab_lookup.core.interfaces import BrowserSessionInterface
from vocab_lookup.utils.cache_engine import LookupCache

BASE_URL = "https://www.oxfordlearnersdictionaries.com"

RUN_HTML = """
<html><body>
<div class="entry">
  <div class="top-container">
    <h1 class="headword">run</h1>
    <span class="pos">verb</span>
    <div class="symbols"><span class="symbols-cefr">A1</span></div>
    <span class="phonetics">
      <div class="phons_br" geo="br">
        <div class="sound audio_play_button" data-src-mp3="https://audio.example/run__gb_1.mp3"></div>
        <span class="phon">/rʌn/</span>
      </div>
      <div class="phons_n_am" geo="n_am">
        <div class="sound audio_play_button" data-src-mp3="https://audio.example/run__us_1.mp3"></div>
        <span class="phon">/rʌn/</span>
      </div>
    </span>
  </div>
  <ol class="senses_multiple">
    <li class="sense">
      <span class="def">to move using your legs, going faster than when you walk</span>
      <ul class="examples">
        <li><span class="x">Can you run as fast as Mike?</span></li>
        <li><span class="x">They ran for the bus.</span></li>
      </ul>
    </li>
    <li class="sense">
      <span class="def">to be in charge of a business</span>
      <span class="x-g"><span class="x">She runs a restaurant.</span></span>
    </li>
  </ol>
  <div class="res-g">
    <span title="Extra examples">
      <span class="x-gs">
        <span class="x">They ran for the bus.</span>
        <span class="x">He ran the marathon in four hours.</span>
      </span>
    </span>
  </div>
  <div class="idioms">
    <span class="idm-g">
      <span class="idm">run for it</span>
      <ol>
        <li class="sense">
          <span class="def">to run in order to escape</span>
          <ul class="examples"><li><span class="x">Quick, run for it!</span></li></ul>
        </li>
      </ol>
    </span>
    <span class="idm-g">
      <span class="idm-l">run short</span>
      <span class="sense"><span class="def">to not have enough of something</span></span>
    </span>
    <span class="idm-g"><span class="sense"><span class="def">orphan sense</span></span></span>
  </div>
</div>
</body></html>
"""

NO_RESULTS_HTML = """
<html><body>
<div class="water-no-results">No exact match found for "zzznotaword123"</div>
</body></html>
"""

EMPTY_ENTRY_HTML = """
<html><body><div class="entry"><span class="pos">noun</span></div></body></html>
"""

SEARCH_RESULTS_HTML = """
<html><body>
<ul class="search-results">
  <li><a href="/definition/english/colour_1">colour</a></li>
  <li><a href="/definition/english/colour_2">colour verb</a></li>
</ul>
</body></html>
"""

COLOUR_HTML = """
<html><body><div class="entry">
<span class="pos">noun</span>
<span class="phonetics"><div geo="br"><span class="phon">/ˈkʌlə(r)/</span></div></span>
<span class="sense_single"><span class="def">the appearance that things have</span>
<span class="x-g"><span class="x">What colour is it?</span></span></span>
</div></body></html>
"""

TRANSLATION_HTML = """
<html><body><span class="ryNqvb">xin </span><span class="ryNqvb">chào</span></body></html>
"""


def soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


class FakeElement:
    def __init__(self, page: "FakePage", href: str | None):
        self.page = page
        self.href = href

    async def click(self) -> None:
        if self.href:
            self.page.pending_navigation = urljoin(self.page.url, self.href)


class FakePage:
    """Serves HTML from a url -> html mapping, mimicking the Playwright Page API"""

    def __init__(self, site: dict[str, str], failing_urls: set[str] | None = None):
        self.site = site
        self.failing_urls = failing_urls or set()
        self.url = "about:blank"
        self.html = "<html><body></body></html>"
        self.visited: list[str] = []
        self.pending_navigation: str | None = None

    def set_default_timeout(self, timeout: float) -> None:
        pass

    def on(self, event: str, handler: Any) -> None:
        pass

    async def goto(self, url: str, **kwargs: Any) -> None:
        self.visited.append(url)
        if url in self.failing_urls:
            raise PlaywrightTimeoutError(f"Timeout exceeded navigating to {url}")
        self._load(url)

    def _load(self, url: str) -> None:
        self.url = url
        self.html = self.site.get(url, "<html><body><h1>404</h1></body></html>")

    async def query_selector(self, selector: str) -> FakeElement | None:
        el = soup(self.html).select_one(selector)
        if el is None:
            return None
        href = el.get("href")
        return FakeElement(self, href if isinstance(href, str) else None)

    async def wait_for_selector(self, selector: str, **kwargs: Any) -> None:
        if soup(self.html).select_one(selector) is None:
            raise PlaywrightTimeoutError(f"Timeout waiting for {selector}")

    async def wait_for_timeout(self, timeout: float) -> None:
        pass

    @asynccontextmanager
    async def expect_navigation(self, **kwargs: Any) -> AsyncIterator[None]:
        self.pending_navigation = None
        yield
        if self.pending_navigation is None:
            raise PlaywrightTimeoutError("Timeout waiting for navigation")
        self.visited.append(self.pending_navigation)
        self._load(self.pending_navigation)

    async def content(self) -> str:
        return self.html


class FakeBrowserSession(BrowserSessionInterface):
    """Browser session double tracking starts and page lifecycles"""

    def __init__(self, site: dict[str, str] | None = None):
        self.site = site if site is not None else {}
        self.failing_urls: set[str] = set()
        self.start_calls = 0
        self.close_calls = 0
        self.started = False
        self.start_error: Exception | None = None
        self.pages: list[FakePage] = []
        self.open_pages = 0
        self.page_kwargs: list[dict[str, Any]] = []

    @property
    def is_started(self) -> bool:
        return self.started

    async def start(self) -> None:
        self.start_calls += 1
        if self.start_error is not None:
            raise self.start_error
        self.started = True

    @asynccontextmanager
    async def page(
        self,
        user_agent: str,
        block_resources: bool = False,
        cookies: list[dict[str, Any]] | None = None,
    ) -> AsyncIterator[FakePage]:
        self.page_kwargs.append(
            {
                "user_agent": user_agent,
                "block_resources": block_resources,
                "cookies": cookies,
            }
        )
        page = FakePage(self.site, self.failing_urls)
        self.pages.append(page)
        self.open_pages += 1
        try:
            yield page
        finally:
            self.open_pages -= 1

    async def close(self) -> None:
        self.close_calls += 1
        self.started = False


def definition_url(slug: str) -> str:
    return f"{BASE_URL}/definition/english/{slug}"


def search_url(query: str) -> str:
    return f"{BASE_URL}/search/english/?q={query}"


@pytest.fixture
def app_settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def parser() -> EntryParser:
    return EntryParser()


@pytest.fixture
def fake_session() -> FakeBrowserSession:
    return FakeBrowserSession(
        {
            definition_url("run"): RUN_HTML,
            definition_url("zzznotaword123"): NO_RESULTS_HTML,
            search_url("zzznotaword123"): NO_RESULTS_HTML,
            definition_url("color"): "<html><body><p>Redirect notice</p></body></html>",
            search_url("color"): SEARCH_RESULTS_HTML,
            f"{BASE_URL}/definition/english/colour_1": COLOUR_HTML,
            definition_url("kerfuffle"): EMPTY_ENTRY_HTML,
        }
    )


@pytest.fixture
def service(fake_session, app_settings):
    return create_dictionary_service(
        app_settings=app_settings, session=fake_session, cache=LookupCache()
    )
