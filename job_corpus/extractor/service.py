"""Result extraction service."""

from __future__ import annotations

import logging

from job_corpus.boards.base import JobBoard
from job_corpus.browser.driver import BrowserView, ElementWaitTimeout
from job_corpus.extractor.config import ExtractorConfig, get_extractor_config
from job_corpus.extractor.models import (
    ExtractionOutcome,
    ExtractionSuccess,
    SkippedHiringEvent,
    SkippedLoadTimeout,
)

logger = logging.getLogger(__name__)


class ResultExtractor:
    """Classify an opened result view and read its fields.

    Every outcome is returned as data; nothing here aborts a crawl. The
    caller owns the view and closes it.

    Attributes:
        board: The job board the view belongs to.
        config: Extractor configuration settings.
    """

    def __init__(self, board: JobBoard, config: ExtractorConfig | None = None) -> None:
        """Initialize the ResultExtractor.

        Args:
            board: Board whose selectors locate the result's fields.
            config: Extractor configuration. If not provided, uses default.
        """
        self.board = board
        self.config = config or get_extractor_config()

    async def extract(
        self, view: BrowserView, url: str | None = None
    ) -> ExtractionOutcome:
        """Extract one result.

        Args:
            view: The just-opened result view.
            url: Source URL of the view. Defaults to the view's current URL.

        Returns:
            ExtractionSuccess, SkippedHiringEvent or SkippedLoadTimeout.
        """
        url = url if url is not None else view.url

        if self.board.is_hiring_event(url):
            return SkippedHiringEvent(url=url)

        try:
            await view.wait_for_selector(
                self.board.description_selector,
                timeout_ms=self.config.description_timeout_ms,
            )
            await view.wait_for_selector(
                self.board.employer_selector,
                timeout_ms=self.config.employer_timeout_ms,
            )
        except ElementWaitTimeout as e:
            return SkippedLoadTimeout(url=url, reason=str(e))

        try:
            title = await view.title()
            employer = await view.inner_html(self.board.employer_selector)
            description = await view.inner_html(self.board.description_selector)
        except Exception as e:
            logger.warning(f"Reading result fields failed for {url}: {e}")
            return SkippedLoadTimeout(url=url, reason=str(e))

        return ExtractionSuccess(
            jobboard=self.board.name,
            employer=employer,
            title=title,
            description_html=description,
        )
