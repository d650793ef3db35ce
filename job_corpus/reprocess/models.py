"""Data models for batch reprocessing."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class NarrowedSection:
    """A relevant heading and the text block that belongs to it."""

    heading_text: str
    content_text: str


@dataclass(frozen=True)
class WordCountEntry:
    """Occurrence count of one case-sensitive token."""

    word: str
    count: int

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError("count must be >= 1")

    def to_line(self) -> str:
        return f"{self.count} {self.word}"


@dataclass
class BatchReport:
    """Outcome of one batch operation over a directory of documents."""

    output_dir: Path
    processed: int = 0
    new_files: int = 0
    skipped: list[str] = field(default_factory=list)
