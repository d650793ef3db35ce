"""Data models for the Result Extractor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from job_corpus.document.models import TaggedDocument


class OutcomeKind(str, Enum):
    """Classification of one processed result."""

    SUCCESS = "success"
    HIRING_EVENT = "hiring_event"
    LOAD_TIMEOUT = "load_timeout"


@dataclass(frozen=True)
class ExtractionSuccess:
    """Fields read from a fully loaded result view."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.SUCCESS
    skipped: ClassVar[bool] = False

    jobboard: str
    employer: str
    title: str
    description_html: str

    def to_document(
        self,
        *,
        what: str | None = None,
        where: str | None = None,
        timestamp: str | None = None,
    ) -> TaggedDocument:
        return TaggedDocument(
            jobboard=self.jobboard,
            employer=self.employer,
            title=self.title,
            body_html=self.description_html,
            what=what,
            where=where,
            timestamp=timestamp,
        )


@dataclass(frozen=True)
class SkippedHiringEvent:
    """The result opened a hiring event page."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.HIRING_EVENT
    skipped: ClassVar[bool] = True

    url: str


@dataclass(frozen=True)
class SkippedLoadTimeout:
    """The result's content did not render in time."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.LOAD_TIMEOUT
    skipped: ClassVar[bool] = True

    url: str
    reason: str | None = None


ExtractionOutcome = ExtractionSuccess | SkippedHiringEvent | SkippedLoadTimeout
