"""Listing crawl: page through search results and extract every result."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from job_corpus.boards.base import JobBoard, PageTransitionError
from job_corpus.boards.registry import UnsupportedJobBoardError, get_board
from job_corpus.browser.driver import BrowserDriver, BrowserView, ElementHandle
from job_corpus.config.settings import Settings, get_settings
from job_corpus.crawler.config import CrawlerConfig, get_crawler_config
from job_corpus.crawler.models import (
    CrawlProgressEvent,
    CrawlState,
    CrawlSummary,
    SearchSession,
)
from job_corpus.document.codec import encode
from job_corpus.extractor.config import ExtractorConfig
from job_corpus.extractor.models import (
    ExtractionOutcome,
    OutcomeKind,
    SkippedLoadTimeout,
)
from job_corpus.extractor.service import ResultExtractor
from job_corpus.utils.paths import add_unique_path

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[CrawlProgressEvent], None]
DriverFactory = Callable[[], AbstractAsyncContextManager[BrowserDriver]]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ListingCrawler:
    """Walk a board's listing pages and write one document per result.

    Results are handled strictly one at a time: a result view is opened,
    extracted and closed before the next result is clicked.
    """

    def __init__(
        self,
        board: JobBoard,
        driver: BrowserDriver,
        *,
        extractor: ResultExtractor | None = None,
        config: CrawlerConfig | None = None,
        progress_callback: ProgressCallback | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.board = board
        self.driver = driver
        self.extractor = extractor or ResultExtractor(board)
        self.config = config or get_crawler_config()
        self.progress_callback = progress_callback
        self.clock = clock

    async def crawl(self, session: SearchSession) -> CrawlSummary:
        """Run the search and process every listing page.

        Returns:
            Summary with the session counters after the last page.
        """
        view = self.driver.main_view
        await self.board.prepare(view)
        await view.goto(self.board.start_url)
        await self.board.start_search(view, session.query, session.location)
        logger.info(
            f'Searching for "{session.query}" jobs in {session.location} '
            f"on {self.board.label}"
        )

        session.total_results_reported = await self.board.read_total_results(view)
        logger.info(
            f"{self.board.label} reports {session.total_results_reported} results"
        )

        files_written: list[Path] = []
        pages_visited = 0
        state = CrawlState.PAGING
        while state is CrawlState.PAGING:
            pages_visited += 1
            await self._wait_for_results(view)
            handles = await view.query_all(self.board.result_selector)
            logger.debug(f"Page {pages_visited}: {len(handles)} results")

            for handle in handles:
                path = await self._process_result(handle, session)
                if path is not None:
                    files_written.append(path)

            state = await self._advance(view, pages_visited)

        logger.info(
            f"Crawl of {self.board.label} finished after {session.result_count} "
            f"results; {session.fail_count} results were discarded"
        )
        return CrawlSummary(
            jobboard=self.board.name,
            result_count=session.result_count,
            fail_count=session.fail_count,
            total_results_reported=session.total_results_reported,
            pages_visited=pages_visited,
            files_written=files_written,
        )

    async def _wait_for_results(self, view: BrowserView) -> int:
        """Wait until two consecutive samples report the same result count."""
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.config.settle_timeout_ms / 1000
        interval = self.config.settle_poll_interval_ms / 1000

        previous = await view.count(self.board.result_selector)
        while loop.time() < deadline:
            await asyncio.sleep(interval)
            current = await view.count(self.board.result_selector)
            if current == previous and current > 0:
                return current
            previous = current

        logger.debug(f"Result list did not settle; continuing with {previous} results")
        return previous

    async def _process_result(
        self, handle: ElementHandle, session: SearchSession
    ) -> Path | None:
        try:
            result_view = await self.driver.open_view(handle)
        except Exception as e:
            # ElementWaitTimeout, ViewOpenError or a fault of this handle alone
            self._record_skip(session, SkippedLoadTimeout(url="", reason=str(e)))
            return None

        try:
            outcome = await self.extractor.extract(result_view)
            if outcome.skipped:
                self._record_skip(session, outcome)
                return None

            index = session.record_success()
            path = session.output_path(index)
            document = outcome.to_document(
                what=session.query,
                where=session.location,
                timestamp=self.clock().isoformat(timespec="seconds"),
            )
            path.write_text(encode(document), encoding="utf-8")
            self._emit_progress(session, outcome.kind, outcome.title, path)
            return path
        finally:
            with contextlib.suppress(Exception):
                await result_view.close()

    def _record_skip(self, session: SearchSession, outcome: ExtractionOutcome) -> None:
        index = session.record_skip()
        if outcome.kind is OutcomeKind.HIRING_EVENT:
            logger.warning(f"Hiring event page detected: skipping result {index}")
        else:
            logger.warning(
                f"Contents of result {index} could not be loaded; skipping "
                f"({outcome.reason})"
            )
        self._emit_progress(session, outcome.kind, None, None)

    async def _advance(self, view: BrowserView, page_number: int) -> CrawlState:
        try:
            advanced = await self.board.next_page(view)
        except PageTransitionError as e:
            logger.warning(f"{e}; treating page {page_number} as the last page")
            return CrawlState.DONE
        return CrawlState.PAGING if advanced else CrawlState.DONE

    def _emit_progress(
        self,
        session: SearchSession,
        kind: OutcomeKind,
        title: str | None,
        path: Path | None,
    ) -> None:
        if self.progress_callback is None:
            return
        event = CrawlProgressEvent(
            index=session.result_count,
            kind=kind,
            title=title,
            result_count=session.result_count,
            fail_count=session.fail_count,
            path=path,
        )
        with contextlib.suppress(Exception):
            self.progress_callback(event)


@dataclass
class ScrapeRun:
    """Result of scraping one or more boards into a session directory."""

    session_dir: Path
    summaries: list[CrawlSummary] = field(default_factory=list)
    unsupported: list[str] = field(default_factory=list)


def _playwright_factory(
    settings: Settings, config: CrawlerConfig, headless: bool | None
) -> DriverFactory:
    def _factory() -> AbstractAsyncContextManager[BrowserDriver]:
        from job_corpus.browser.playwright_driver import PlaywrightDriver

        return PlaywrightDriver(
            headless=settings.headless if headless is None else headless,
            window_width=settings.window_width,
            window_height=settings.window_height,
            navigation_timeout_ms=config.navigation_timeout_ms,
        )

    return _factory


async def run_scrape(
    query: str,
    location: str,
    boards: list[str],
    *,
    output_dir: Path | None = None,
    settings: Settings | None = None,
    crawler_config: CrawlerConfig | None = None,
    extractor_config: ExtractorConfig | None = None,
    headless: bool | None = None,
    progress_callback: ProgressCallback | None = None,
    driver_factory: DriverFactory | None = None,
) -> ScrapeRun:
    """Scrape the selected boards one after another.

    All boards write into one new ``scrapeOutput<N>`` directory and share a
    single SearchSession, so file numbers never repeat within a run.

    Raises:
        PathExhaustionError: If no unique session directory name is left.
    """
    settings = settings or get_settings()
    crawler_config = crawler_config or get_crawler_config()
    base_dir = output_dir if output_dir is not None else settings.output_dir
    base_dir.mkdir(parents=True, exist_ok=True)

    session_dir = add_unique_path(base_dir / "scrapeOutput")
    session_dir.mkdir(parents=True)
    run = ScrapeRun(session_dir=session_dir)

    session = SearchSession(query=query, location=location, output_dir=session_dir)
    factory = driver_factory or _playwright_factory(settings, crawler_config, headless)

    for name in boards:
        try:
            board = get_board(name)
        except UnsupportedJobBoardError:
            logger.warning(f"The job board '{name}' is not supported yet")
            run.unsupported.append(name)
            continue

        async with factory() as driver:
            crawler = ListingCrawler(
                board,
                driver,
                extractor=ResultExtractor(board, extractor_config),
                config=crawler_config,
                progress_callback=progress_callback,
            )
            run.summaries.append(await crawler.crawl(session))

    return run
