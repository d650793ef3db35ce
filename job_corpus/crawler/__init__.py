"""Paginated listing crawl.

Public API:
    - ListingCrawler: Walks listing pages and writes one document per result
    - run_scrape: Scrape several boards into a fresh session directory
    - SearchSession: Query, location, output directory and running counters
    - CrawlSummary: Final counters of a crawl
    - CrawlerConfig: Readiness polling and navigation timeouts
"""

from job_corpus.crawler.config import CrawlerConfig, get_crawler_config
from job_corpus.crawler.models import (
    CrawlProgressEvent,
    CrawlState,
    CrawlSummary,
    SearchSession,
)
from job_corpus.crawler.service import ListingCrawler, ScrapeRun, run_scrape

__all__ = [
    "CrawlProgressEvent",
    "CrawlState",
    "CrawlSummary",
    "CrawlerConfig",
    "ListingCrawler",
    "ScrapeRun",
    "SearchSession",
    "get_crawler_config",
    "run_scrape",
]
