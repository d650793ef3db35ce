"""Protocols describing what the crawl needs from a browser."""

from __future__ import annotations

from typing import Protocol


class ElementWaitTimeout(Exception):
    """An element (or a new view) did not appear within its timeout."""

    def __init__(self, selector: str, timeout_ms: int):
        self.selector = selector
        self.timeout_ms = timeout_ms
        super().__init__(f"Timed out after {timeout_ms} ms waiting for {selector!r}")


class ViewOpenError(Exception):
    """Clicking a result failed before any view opened."""


class ElementHandle(Protocol):
    async def click(self) -> None: ...

    async def inner_html(self) -> str: ...

    async def text(self) -> str: ...


class BrowserView(Protocol):
    """One browser tab."""

    @property
    def url(self) -> str: ...

    async def title(self) -> str: ...

    async def goto(self, url: str) -> None: ...

    async def add_init_script(self, script: str) -> None:
        """Run ``script`` in every document loaded into this view from now on."""
        ...

    async def fill(self, selector: str, text: str) -> None: ...

    async def submit_form(self, selector: str) -> None:
        """Submit the form matching ``selector`` and wait for the navigation."""
        ...

    async def query_all(self, selector: str) -> list[ElementHandle]: ...

    async def count(self, selector: str) -> int: ...

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> None:
        """Return once ``selector`` matches; raise ElementWaitTimeout otherwise."""
        ...

    async def inner_html(self, selector: str) -> str: ...

    async def follow(self, element: ElementHandle) -> None:
        """Click ``element`` and wait for this view to navigate."""
        ...

    async def close(self) -> None: ...


class BrowserDriver(Protocol):
    """A running browser session."""

    @property
    def main_view(self) -> BrowserView: ...

    async def open_view(self, element: ElementHandle) -> BrowserView:
        """Click ``element`` and return the single view the click opens.

        Raises ElementWaitTimeout if no view opens in time and ViewOpenError
        if the click itself fails, e.g. on an element that was detached.
        """
        ...

    async def close(self) -> None: ...
