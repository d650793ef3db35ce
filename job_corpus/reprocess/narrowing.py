"""Narrowing of tagged documents to their relevant sections.

A heading is relevant when its lowercased text contains one of the
vocabulary substrings. The text block that belongs to a relevant heading is
found by a content locator; the default one climbs from the heading towards
the root until the current node has a next sibling with text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from bs4 import Tag

from job_corpus.document.codec import DecodedDocument
from job_corpus.reprocess.models import NarrowedSection

logger = logging.getLogger(__name__)

DEFAULT_MAX_ASCENTS = 5


class NarrowingBoundExceeded(Exception):
    """The content search for a heading climbed past its bound."""

    def __init__(self, heading_text: str, max_ascents: int):
        self.heading_text = heading_text
        self.max_ascents = max_ascents
        super().__init__(
            f"No content found for heading {heading_text!r} "
            f"within {max_ascents} parent steps"
        )


class ContentLocator(Protocol):
    def locate(self, heading: Tag) -> str:
        """Return the trimmed text that belongs to ``heading``.

        Raises NarrowingBoundExceeded when nothing usable is found.
        """
        ...


class NarrowingStrategy(Protocol):
    """What a job board provides to the narrowing engine."""

    heading_selector: str

    def content_locator(self, max_ascents: int) -> ContentLocator: ...


def _next_sibling_text(node: Tag | None) -> str:
    if node is None:
        return ""
    sibling = node.find_next_sibling()
    if sibling is None:
        return ""
    return sibling.get_text().strip()


@dataclass(frozen=True)
class AncestorSiblingLocator:
    """Climb parents until a next sibling element carries text."""

    max_ascents: int = DEFAULT_MAX_ASCENTS

    def locate(self, heading: Tag) -> str:
        node: Tag | None = heading
        ascents = 0
        text = _next_sibling_text(node)
        while text == "":
            if ascents >= self.max_ascents:
                raise NarrowingBoundExceeded(
                    heading.get_text().strip(), self.max_ascents
                )
            node = node.parent if node is not None else None
            ascents += 1
            text = _next_sibling_text(node)
        return text


class SectionNarrower:
    """Extract the sections of a document whose headings are relevant."""

    def __init__(
        self, vocabulary: Iterable[str], max_ascents: int = DEFAULT_MAX_ASCENTS
    ) -> None:
        self.vocabulary = [term.lower() for term in vocabulary if term]
        self.max_ascents = max_ascents

    def is_relevant(self, heading_text: str) -> bool:
        lowered = heading_text.strip().lower()
        return any(term in lowered for term in self.vocabulary)

    def find_sections(
        self, document: DecodedDocument, strategy: NarrowingStrategy
    ) -> list[NarrowedSection]:
        """Return relevant sections in document order.

        Raises:
            NarrowingBoundExceeded: If any relevant heading has no locatable
                content. Sections found before it are discarded with it.
        """
        locator = strategy.content_locator(self.max_ascents)
        sections: list[NarrowedSection] = []
        for heading in document.select(strategy.heading_selector):
            heading_text = heading.get_text().strip()
            if not self.is_relevant(heading_text):
                continue
            content = locator.locate(heading)
            sections.append(
                NarrowedSection(heading_text=heading_text, content_text=content)
            )
        return sections

    def narrow(self, document: DecodedDocument, strategy: NarrowingStrategy) -> str:
        """Render the relevant sections of ``document`` as plain text.

        Returns an empty string when no heading matches or when the content
        search gives up on any heading.
        """
        try:
            sections = self.find_sections(document, strategy)
        except NarrowingBoundExceeded as exc:
            logger.debug("Discarding narrowed output: %s", exc)
            return ""
        return render_sections(document, sections)


def render_sections(document: DecodedDocument, sections: list[NarrowedSection]) -> str:
    """Metadata block once, then each heading and its content."""
    if not sections:
        return ""
    output = document.metadata_block()
    for section in sections:
        output += "\n" + section.heading_text + "\n\n"
        output += section.content_text + "\n"
    return output
