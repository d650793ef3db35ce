"""Browser automation contract used by the crawler and extractor.

Public API:
    - BrowserDriver: A running browser with a main view that can open result views
    - BrowserView: One tab (listing page or opened result)
    - ElementHandle: One element on a view
    - ElementWaitTimeout: Raised when an element/view wait runs out of time
    - ViewOpenError: Raised when clicking a result fails outright

The Playwright implementation lives in ``job_corpus.browser.playwright_driver``.
"""

from job_corpus.browser.driver import (
    BrowserDriver,
    BrowserView,
    ElementHandle,
    ElementWaitTimeout,
    ViewOpenError,
)

__all__ = [
    "BrowserDriver",
    "BrowserView",
    "ElementHandle",
    "ElementWaitTimeout",
    "ViewOpenError",
]
