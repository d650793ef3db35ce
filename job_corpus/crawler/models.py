"""Crawl session data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from job_corpus.extractor.models import OutcomeKind


class CrawlState(str, Enum):
    """State of the outer paging loop."""

    PAGING = "paging"
    DONE = "done"


@dataclass
class SearchSession:
    """One search run and its running counters.

    ``result_count`` counts every result encountered, skipped ones included,
    and is the 1-based file number of the result being written.
    """

    query: str
    location: str
    output_dir: Path
    total_results_reported: int = 0
    result_count: int = 0
    fail_count: int = 0

    def __post_init__(self) -> None:
        if self.result_count < 0 or self.fail_count < 0:
            raise ValueError("counters must be >= 0")
        if self.fail_count > self.result_count:
            raise ValueError("fail_count must be <= result_count")

    def record_success(self) -> int:
        self.result_count += 1
        return self.result_count

    def record_skip(self) -> int:
        self.result_count += 1
        self.fail_count += 1
        return self.result_count

    def output_path(self, index: int) -> Path:
        return self.output_dir / f"scrapeOutput{index}.txt"


@dataclass(frozen=True)
class CrawlProgressEvent:
    index: int
    kind: OutcomeKind
    title: str | None
    result_count: int
    fail_count: int
    path: Path | None = None


@dataclass
class CrawlSummary:
    """Reported when the last listing page has been processed."""

    jobboard: str
    result_count: int
    fail_count: int
    total_results_reported: int
    pages_visited: int
    files_written: list[Path] = field(default_factory=list)
