from __future__ import annotations

from abc import ABC, abstractmethod

from job_corpus.browser.driver import BrowserView
from job_corpus.reprocess.narrowing import (
    DEFAULT_MAX_ASCENTS,
    AncestorSiblingLocator,
    ContentLocator,
)


class PageTransitionError(Exception):
    """Moving to the next listing page failed unexpectedly."""


class JobBoard(ABC):
    """Site-specific knowledge for one job board.

    A board submits searches on its listing pages and knows where a
    result's fields and section headings live. The crawler owns control
    flow; a board only answers questions about the current view or performs
    one step on it.

    Attributes:
        name: Value written to the ``jobboard`` tag of extracted documents.
        label: Display name.
        start_url: Page the search form is submitted from.
        result_selector: Clickable search results on a listing page.
        description_selector: Description region of a result view.
        employer_selector: Employer region of a result view.
        heading_selector: Section headings inside a stored description.
    """

    name: str = ""
    label: str = ""
    start_url: str = ""

    result_selector: str = ""
    description_selector: str = ""
    employer_selector: str = ""
    heading_selector: str = ""

    async def prepare(self, view: BrowserView) -> None:
        """Hook run once on the listing view before the first navigation."""
        return None

    @abstractmethod
    async def start_search(self, view: BrowserView, query: str, location: str) -> None:
        """Submit a search so that ``view`` shows the first listing page."""
        raise NotImplementedError

    async def read_total_results(self, view: BrowserView) -> int:
        """Return the result count the board reports, or 0 if unknown."""
        return 0

    @abstractmethod
    async def next_page(self, view: BrowserView) -> bool:
        """Activate the next-page control.

        Returns:
            True if ``view`` moved to the next listing page, False if the
            current page is the last one.

        Raises:
            PageTransitionError: If activating the control failed.
        """
        raise NotImplementedError

    def is_hiring_event(self, url: str) -> bool:
        """True if ``url`` is a landing page without a structured description."""
        return False

    def content_locator(self, max_ascents: int = DEFAULT_MAX_ASCENTS) -> ContentLocator:
        """Strategy that finds the text block belonging to a section heading."""
        return AncestorSiblingLocator(max_ascents=max_ascents)
