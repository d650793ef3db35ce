"""Playwright implementation of the browser automation contract."""

from __future__ import annotations

import contextlib
import logging

from playwright.async_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    async_playwright,
)
from playwright.async_api import ElementHandle as PlaywrightElementHandle
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from job_corpus.browser.driver import ElementWaitTimeout, ViewOpenError

logger = logging.getLogger(__name__)


class PlaywrightElement:
    def __init__(self, handle: PlaywrightElementHandle) -> None:
        self._handle = handle

    async def click(self) -> None:
        await self._handle.click()

    async def inner_html(self) -> str:
        return await self._handle.inner_html()

    async def text(self) -> str:
        return (await self._handle.text_content()) or ""


class PlaywrightView:
    """A Playwright page exposed as a BrowserView."""

    def __init__(self, page: Page, navigation_timeout_ms: int) -> None:
        self._page = page
        self._navigation_timeout_ms = navigation_timeout_ms

    @property
    def url(self) -> str:
        return self._page.url

    async def title(self) -> str:
        return await self._page.title()

    async def goto(self, url: str) -> None:
        await self._page.goto(url, timeout=self._navigation_timeout_ms)

    async def add_init_script(self, script: str) -> None:
        await self._page.add_init_script(script)

    async def fill(self, selector: str, text: str) -> None:
        await self._page.fill(selector, text)

    async def submit_form(self, selector: str) -> None:
        async with self._page.expect_navigation(timeout=self._navigation_timeout_ms):
            await self._page.eval_on_selector(selector, "form => form.submit()")

    async def query_all(self, selector: str) -> list[PlaywrightElement]:
        handles = await self._page.query_selector_all(selector)
        return [PlaywrightElement(handle) for handle in handles]

    async def count(self, selector: str) -> int:
        return await self._page.locator(selector).count()

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> None:
        try:
            await self._page.wait_for_selector(selector, timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise ElementWaitTimeout(selector, timeout_ms) from exc

    async def inner_html(self, selector: str) -> str:
        return await self._page.inner_html(selector)

    async def follow(self, element: PlaywrightElement) -> None:
        async with self._page.expect_navigation(timeout=self._navigation_timeout_ms):
            await element.click()

    async def close(self) -> None:
        await self._page.close()


class PlaywrightDriver:
    """Chromium session driven through Playwright.

    Use as an async context manager::

        async with PlaywrightDriver(headless=True) as driver:
            await driver.main_view.goto("https://example.com")
    """

    def __init__(
        self,
        *,
        headless: bool = False,
        window_width: int = 1280,
        window_height: int = 720,
        navigation_timeout_ms: int = 30000,
    ) -> None:
        self.headless = headless
        self.window_width = window_width
        self.window_height = window_height
        self.navigation_timeout_ms = navigation_timeout_ms
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._main_view: PlaywrightView | None = None

    @property
    def main_view(self) -> PlaywrightView:
        if self._main_view is None:
            raise RuntimeError("Browser has not been started.")
        return self._main_view

    async def start(self) -> PlaywrightView:
        if self._browser is not None:
            raise RuntimeError("Browser is already running.")

        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(headless=self.headless)
        self._context = await self._browser.new_context(
            viewport={"width": self.window_width, "height": self.window_height}
        )
        page = await self._context.new_page()
        self._main_view = PlaywrightView(page, self.navigation_timeout_ms)
        logger.debug("Started Chromium (headless=%s)", self.headless)
        return self._main_view

    async def open_view(self, element: PlaywrightElement) -> PlaywrightView:
        if self._context is None:
            raise RuntimeError("Browser has not been started.")
        try:
            async with self._context.expect_page(
                timeout=self.navigation_timeout_ms
            ) as page_info:
                await element.click()
            page = await page_info.value
        except PlaywrightTimeoutError as exc:
            raise ElementWaitTimeout("new view", self.navigation_timeout_ms) from exc
        except PlaywrightError as exc:
            raise ViewOpenError(f"Could not open result: {exc.message}") from exc
        return PlaywrightView(page, self.navigation_timeout_ms)

    async def close(self) -> None:
        if self._browser is not None:
            with contextlib.suppress(Exception):
                await self._browser.close()
            self._browser = None
            self._context = None
            self._main_view = None

        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None

    async def __aenter__(self) -> PlaywrightDriver:
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
