"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from job_corpus.boards.indeed import IndeedBoard
from job_corpus.browser.driver import ElementWaitTimeout


class FakeElement:
    """In-memory element. Clicking it may open ``opens`` in a new view.

    A ``click_error`` is raised by every click, like a detached element.
    """

    def __init__(
        self,
        html: str = "",
        opens: FakeView | None = None,
        click_error: Exception | None = None,
    ) -> None:
        self.html = html
        self.opens = opens
        self.click_error = click_error
        self.clicks = 0

    async def click(self) -> None:
        self.clicks += 1
        if self.click_error is not None:
            raise self.click_error

    async def inner_html(self) -> str:
        return self.html

    async def text(self) -> str:
        return self.html


class FakeView:
    """In-memory browser view.

    ``html`` maps selectors to inner markup; selectors missing from it never
    appear, so waiting for them times out immediately.
    """

    def __init__(
        self,
        url: str = "https://de.indeed.com/viewjob?jk=1",
        title: str = "",
        html: dict[str, str] | None = None,
        title_error: Exception | None = None,
    ) -> None:
        self._url = url
        self._title = title
        self.html = dict(html or {})
        self.title_error = title_error
        self.visited: list[str] = []
        self.init_scripts: list[str] = []
        self.filled: dict[str, str] = {}
        self.submitted: list[str] = []
        self.closed = False

    @property
    def url(self) -> str:
        return self._url

    async def title(self) -> str:
        if self.title_error is not None:
            raise self.title_error
        return self._title

    async def goto(self, url: str) -> None:
        self.visited.append(url)
        self._url = url

    async def add_init_script(self, script: str) -> None:
        self.init_scripts.append(script)

    async def fill(self, selector: str, text: str) -> None:
        self.filled[selector] = text

    async def submit_form(self, selector: str) -> None:
        self.submitted.append(selector)

    async def query_all(self, selector: str) -> list[FakeElement]:
        if selector in self.html:
            return [FakeElement(self.html[selector])]
        return []

    async def count(self, selector: str) -> int:
        return len(await self.query_all(selector))

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> None:
        if selector not in self.html:
            raise ElementWaitTimeout(selector, timeout_ms)

    async def inner_html(self, selector: str) -> str:
        return self.html[selector]

    async def follow(self, element: FakeElement) -> None:
        await element.click()

    async def close(self) -> None:
        self.closed = True


class FakeListingView(FakeView):
    """Listing view that pages through ``pages`` of result elements."""

    def __init__(
        self,
        pages: list[list[FakeElement]],
        total_text: str | None = "Seite 1 von 5 Jobs",
        follow_error: Exception | None = None,
    ) -> None:
        html = {}
        if total_text is not None:
            html[IndeedBoard.result_count_selector] = total_text
        super().__init__(url="https://de.indeed.com/", html=html)
        self.pages = pages
        self.page_index = 0
        self.follow_error = follow_error

    async def query_all(self, selector: str) -> list[FakeElement]:
        if selector == IndeedBoard.result_selector:
            if self.page_index >= len(self.pages):
                return []
            return list(self.pages[self.page_index])
        if selector == IndeedBoard.next_control_selector:
            if self.page_index < len(self.pages) - 1:
                label = "<span>Weiter</span>"
            else:
                label = f"<span>{self.page_index + 1}</span>"
            return [FakeElement(label)]
        return await super().query_all(selector)

    async def follow(self, element: FakeElement) -> None:
        if self.follow_error is not None:
            raise self.follow_error
        await element.click()
        self.page_index += 1


class FakeDriver:
    """In-memory driver around one listing view."""

    def __init__(self, main_view: FakeView) -> None:
        self._main_view = main_view
        self.opened: list[FakeView] = []
        self.closed = False

    @property
    def main_view(self) -> FakeView:
        return self._main_view

    async def open_view(self, element: FakeElement) -> FakeView:
        await element.click()
        if element.opens is None:
            raise ElementWaitTimeout("new view", 5000)
        self.opened.append(element.opens)
        return element.opens

    async def close(self) -> None:
        self.closed = True

    async def __aenter__(self) -> FakeDriver:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


@pytest.fixture
def make_result_view() -> Callable[..., FakeView]:
    """Factory for a fully loaded Indeed result view."""

    def _make(
        title: str = "Backend Developer",
        employer: str = "ACME GmbH",
        description: str = "<div><p>Python</p></div>",
        url: str = "https://de.indeed.com/viewjob?jk=1",
    ) -> FakeView:
        return FakeView(
            url=url,
            title=title,
            html={
                IndeedBoard.description_selector: description,
                IndeedBoard.employer_selector: employer,
            },
        )

    return _make


@pytest.fixture
def make_element() -> Callable[..., FakeElement]:
    return FakeElement


@pytest.fixture
def make_listing_view() -> Callable[..., FakeListingView]:
    return FakeListingView


@pytest.fixture
def make_view() -> Callable[..., FakeView]:
    return FakeView


@pytest.fixture
def make_driver() -> Callable[[FakeView], FakeDriver]:
    return FakeDriver


@pytest.fixture
def sample_document_text() -> str:
    """A tagged document as written by the crawler."""
    return (
        "<jobboard>indeed.com</jobboard>\n"
        "<employer>ACME GmbH</employer>\n"
        "<title>Backend Developer - Berlin</title>\n"
        "<what>python</what>\n"
        "<where>Berlin</where>\n"
        "<timestamp>2024-01-02T03:04:05+00:00</timestamp>\n"
        "\n"
        '<div id="jobDescriptionText">'
        '<div><div class="jobSectionHeader"><b>Deine Aufgaben</b></div></div>'
        "<ul>\n<li>Go</li>\n<li>Rust</li>\n</ul>"
        '<div><div class="jobSectionHeader"><b>Benefits</b></div></div>'
        "<ul><li>Obst</li></ul>"
        "</div>"
    )
