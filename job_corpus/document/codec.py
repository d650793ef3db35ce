"""Encoding and decoding of tagged documents.

A tagged document is plain text: one ``<tag>value</tag>`` line per metadata
field in fixed order, a blank line, then the body markup appended verbatim::

    <jobboard>indeed.com</jobboard>
    <employer>ACME GmbH</employer>
    <title>Backend Developer</title>

    <div>...</div>

Decoding hands the whole document to BeautifulSoup so metadata can be read
by tag name and the body can be queried with CSS selectors.
"""

from __future__ import annotations

import re
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from job_corpus.document.models import METADATA_FIELDS, REQUIRED_FIELDS, TaggedDocument

_HEADER_LINE = re.compile(
    r"<(" + "|".join(METADATA_FIELDS) + r")>(.*?)</\1>\r?\n",
    re.DOTALL,
)

# Labels used when metadata is rendered as plain text for reprocessed output.
METADATA_LABELS: tuple[tuple[str, str], ...] = (
    ("jobboard", "Stellenbörse"),
    ("what", "Suchbegriff"),
    ("where", "Ort"),
    ("timestamp", "Zeitstempel"),
    ("employer", "Arbeitgeber"),
    ("title", "Titel"),
)


def encode(document: TaggedDocument) -> str:
    """Serialize a document to the tagged text format.

    Body markup is not escaped.
    """
    lines = []
    for name in METADATA_FIELDS:
        value = getattr(document, name)
        if value is None and name not in REQUIRED_FIELDS:
            continue
        lines.append(f"<{name}>{value or ''}</{name}>")
    return "\n".join(lines) + "\n\n" + document.body_html


def decode(raw: str | bytes) -> DecodedDocument:
    """Parse tagged text into a DecodedDocument."""
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    return DecodedDocument(raw)


def read_document(path: Path | str) -> DecodedDocument:
    """Read and decode a tagged document file.

    Undecodable bytes are replaced rather than failing the read.
    """
    return decode(Path(path).read_text(encoding="utf-8", errors="replace"))


def _split_header(raw: str) -> tuple[dict[str, str], str]:
    """Split ``raw`` into its verbatim header values and its body.

    The first occurrence of a tag wins. Without any header line the whole
    text is the body.
    """
    values: dict[str, str] = {}
    position = 0
    while True:
        match = _HEADER_LINE.match(raw, position)
        if match is None:
            break
        values.setdefault(match.group(1), match.group(2))
        position = match.end()
    if position == 0:
        return values, raw
    if raw.startswith("\r\n", position):
        return values, raw[position + 2 :]
    if raw.startswith("\n", position):
        return values, raw[position + 1 :]
    return values, raw[position:]


class DecodedDocument:
    """A parsed tagged document.

    Text reads (:meth:`text`, :meth:`metadata_block`) go through the parsed
    tree, so they see removals made with :meth:`remove`. :meth:`metadata`
    and :attr:`body_html` return the stored values verbatim, markup and
    entities included.
    """

    def __init__(self, raw: str) -> None:
        self.raw = raw
        self.soup = BeautifulSoup(raw, "html.parser")
        self._header, self._body_html = _split_header(raw)

    @property
    def body_html(self) -> str:
        return self._body_html

    def text(self, tag: str) -> str:
        """Return the trimmed text of the first ``tag`` element, or ''."""
        element = self.soup.find(tag)
        if element is None:
            return ""
        return element.get_text().strip()

    def remove(self, tag: str) -> None:
        """Remove every ``tag`` element from the parsed tree."""
        for element in self.soup.find_all(tag):
            element.decompose()

    def select(self, selector: str) -> list[Tag]:
        return self.soup.select(selector)

    def markup(self) -> str:
        """Return the current tree (after removals) as markup."""
        return str(self.soup)

    @property
    def jobboard(self) -> str:
        return self.text("jobboard")

    def metadata(self) -> dict[str, str]:
        """Return the stored header values; missing fields are ''."""
        return {name: self._header.get(name, "") for name in METADATA_FIELDS}

    def metadata_block(self) -> str:
        """Render metadata as labelled lines, one per field."""
        return "".join(
            f"{label}: {self.text(name)}\n" for name, label in METADATA_LABELS
        )

    def to_document(self) -> TaggedDocument:
        """Rebuild the TaggedDocument that was encoded."""
        values = self.metadata()
        return TaggedDocument(
            jobboard=values["jobboard"],
            employer=values["employer"],
            title=values["title"],
            what=values["what"] or None,
            where=values["where"] or None,
            timestamp=values["timestamp"] or None,
            body_html=self._body_html,
        )
