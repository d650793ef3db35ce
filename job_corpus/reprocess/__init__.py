"""Reprocessing of tagged-document batches.

Public API:
    - SectionNarrower: Heading-driven extraction of relevant sections
    - AncestorSiblingLocator: Default content locator for narrowing
    - tokenize, count_words, sort_word_counts: Word frequency analysis
    - ReprocessConfig: Vocabulary, stop words and narrowing bounds

Batch operations over directories live in ``job_corpus.reprocess.service``.
"""

from job_corpus.reprocess.config import ReprocessConfig, get_reprocess_config
from job_corpus.reprocess.models import NarrowedSection, WordCountEntry
from job_corpus.reprocess.narrowing import (
    AncestorSiblingLocator,
    NarrowingBoundExceeded,
    SectionNarrower,
)
from job_corpus.reprocess.wordcount import count_words, sort_word_counts, tokenize

__all__ = [
    "AncestorSiblingLocator",
    "NarrowedSection",
    "NarrowingBoundExceeded",
    "ReprocessConfig",
    "SectionNarrower",
    "WordCountEntry",
    "count_words",
    "get_reprocess_config",
    "sort_word_counts",
    "tokenize",
]
