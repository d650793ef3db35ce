"""Word frequency analysis: tokenize, count and sort.

A wordlist is a newline-delimited token stream, one token per line. Counting
is case-sensitive; sorting is by descending count, then ascending word.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Mapping
from pathlib import Path

from job_corpus.reprocess.config import DEFAULT_WORDLIST_STOPWORDS
from job_corpus.reprocess.models import WordCountEntry

_LINE_BREAKS = re.compile(r"(\r\n|\r|\n)+")
_MARKUP_TAG = re.compile(r"<[^>]+>")
# Letters, digits, German umlauts/ß, and '+'/'#' so tokens like C++ and C# survive.
_NON_TOKEN_CHAR = re.compile(r"[^A-Za-z0-9ÄäÖöÜüß+#]")
_SPACE_RUN = re.compile(r" +")
_BLANK_LINES = re.compile(r"(\r\n|\r|\n){2,}")


def _stopword_pattern(stopwords: Iterable[str]) -> re.Pattern[str] | None:
    words = [re.escape(word) for word in stopwords if word]
    if not words:
        return None
    return re.compile(r"\b(" + "|".join(words) + r")\b", re.IGNORECASE)


def tokenize(text: str, stopwords: Iterable[str] = DEFAULT_WORDLIST_STOPWORDS) -> str:
    """Turn one document into a newline-delimited token stream."""
    result = " " + text
    pattern = _stopword_pattern(stopwords)
    if pattern is not None:
        result = pattern.sub(" ", result)
    result = _LINE_BREAKS.sub(" ", result)
    result = _MARKUP_TAG.sub(" ", result)
    result = _NON_TOKEN_CHAR.sub(" ", result)
    result = _SPACE_RUN.sub("\n", result)
    result = _BLANK_LINES.sub("\n", result)
    return result.strip()


def count_words(tokens: Iterable[str]) -> dict[str, int]:
    """Count tokens in one forward pass. Empty tokens are ignored."""
    counts: Counter[str] = Counter()
    for token in tokens:
        if token:
            counts[token] += 1
    return dict(counts)


def count_words_in_file(wordlist_file: Path | str) -> dict[str, int]:
    """Count the tokens of a wordlist file, one token per line."""
    with open(wordlist_file, encoding="utf-8") as handle:
        return count_words(line.rstrip("\r\n") for line in handle)


def sort_word_counts(counts: Mapping[str, int]) -> list[WordCountEntry]:
    """Order by descending count; equal counts alphabetically."""
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [WordCountEntry(word=word, count=count) for word, count in ordered]


def format_word_counts(entries: Iterable[WordCountEntry]) -> str:
    """Render entries as ``"<count> <word>"`` lines."""
    return "".join(entry.to_line() + "\n" for entry in entries)
