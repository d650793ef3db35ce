"""Batch reprocessing of a directory of tagged documents.

Every batch reads its input files in ascending modification time, so output
order matches the order in which the documents were extracted.

Operations:
- strip_html_tags: plain-text copies of all documents
- narrow_down: only the relevant sections of each document
- create_wordlist: one token per line across the whole batch
- count_and_sort_words: "<count> <word>" lines from a wordlist
- build_word_count_list: wordlist + word-count list in one step
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from job_corpus.boards.registry import UnsupportedJobBoardError, get_board
from job_corpus.document.codec import read_document
from job_corpus.document.models import METADATA_FIELDS
from job_corpus.reprocess.config import ReprocessConfig, get_reprocess_config
from job_corpus.reprocess.models import BatchReport, WordCountEntry
from job_corpus.reprocess.narrowing import SectionNarrower
from job_corpus.reprocess.wordcount import (
    count_words_in_file,
    format_word_counts,
    sort_word_counts,
    tokenize,
)
from job_corpus.utils.paths import add_unique_path, files_by_mtime

logger = logging.getLogger(__name__)

_MARKUP_TAG = re.compile(r"<[^>]+>")


def strip_html_tags(input_dir: Path | str, output_dir: Path | str) -> BatchReport:
    """Write a markup-free copy of every document in ``input_dir``.

    Output goes to a new directory ``<output_dir>/<input name>_noHtmlTags<N>``
    and keeps the input file names.
    """
    input_dir = Path(input_dir)
    target = add_unique_path(Path(output_dir) / f"{input_dir.name}_noHtmlTags")
    files = files_by_mtime(input_dir)
    report = BatchReport(output_dir=target)
    if files:
        target.mkdir(parents=True, exist_ok=True)

    for path in files:
        document = read_document(path)
        result = " " + document.metadata_block()
        for tag in METADATA_FIELDS:
            document.remove(tag)
        result += document.markup()
        result = _MARKUP_TAG.sub(" ", result)
        result = result.replace("\n ", "\n", 1)
        (target / path.name).write_text(result, encoding="utf-8")
        logger.info(f"{path.name}: markup removed")
        report.processed += 1
        report.new_files += 1

    if report.new_files:
        logger.info(f"Created {report.new_files} new files in {target}")
    else:
        logger.warning(
            "No new files were created; the input directory may be wrong or empty"
        )
    return report


def narrow_down(
    input_dir: Path | str,
    output_dir: Path | str,
    *,
    config: ReprocessConfig | None = None,
) -> BatchReport:
    """Keep only the relevant sections of every document in ``input_dir``.

    Each document is dispatched on its ``jobboard`` tag. Documents from
    unknown boards, without relevant headings, or whose sections cannot be
    located are skipped. Output goes to
    ``<output_dir>/<input name>_narrowedDown<N>/<stem>_narrowedDown.txt``.
    """
    config = config or get_reprocess_config()
    input_dir = Path(input_dir)
    target = add_unique_path(Path(output_dir) / f"{input_dir.name}_narrowedDown")
    target.mkdir(parents=True, exist_ok=True)
    narrower = SectionNarrower(config.narrowing_vocabulary, config.max_ascents)
    report = BatchReport(output_dir=target)

    for path in files_by_mtime(input_dir):
        logger.info(f"Current file: {path.name}")
        report.processed += 1
        document = read_document(path)

        try:
            board = get_board(document.jobboard)
        except UnsupportedJobBoardError:
            logger.warning(
                f"{path.name}: job board {document.jobboard!r} is not supported "
                "or was not recognized"
            )
            report.skipped.append(path.name)
            continue

        output = narrower.narrow(document, board)

        if not output:
            logger.info(f"{path.name}: file cannot be used for narrowing")
            report.skipped.append(path.name)
            continue

        new_name = f"{path.stem}_narrowedDown.txt"
        (target / new_name).write_text(output, encoding="utf-8")
        report.new_files += 1
        logger.info(f"{path.name}: narrowed down to {new_name}")

    logger.info(f"Created {report.new_files} new files in {target}")
    return report


def create_wordlist(
    input_dir: Path | str,
    output_file: Path | str,
    *,
    config: ReprocessConfig | None = None,
) -> Path:
    """Append the tokens of every file in ``input_dir`` to ``output_file``."""
    config = config or get_reprocess_config()
    output_file = Path(output_file)
    with open(output_file, "a", encoding="utf-8") as handle:
        for path in files_by_mtime(input_dir):
            tokens = tokenize(
                path.read_text(encoding="utf-8", errors="replace"),
                config.wordlist_stopwords,
            )
            if tokens:
                handle.write(tokens + "\n")
    logger.info(f"Created wordlist: {output_file}")
    return output_file


def count_and_sort_words(
    wordlist_file: Path | str, output_file: Path | str
) -> list[WordCountEntry] | None:
    """Write the sorted word counts of a wordlist to ``output_file``.

    Returns:
        The sorted entries, or None if ``wordlist_file`` is not a file.
    """
    wordlist_file = Path(wordlist_file)
    if not wordlist_file.is_file():
        logger.error(f"Not a wordlist file: {wordlist_file}")
        return None

    entries = sort_word_counts(count_words_in_file(wordlist_file))
    with open(output_file, "a", encoding="utf-8") as handle:
        handle.write(format_word_counts(entries))
    logger.info(f"Created word-count list: {output_file}")
    return entries


def build_word_count_list(
    input_dir: Path | str,
    output_dir: Path | str,
    *,
    config: ReprocessConfig | None = None,
) -> Path:
    """Build ``sortedWordCountList<N>.txt`` for a batch.

    The intermediate wordlist is deleted afterwards.
    """
    output_dir = Path(output_dir)
    wordlist_file = add_unique_path(output_dir / "wordlist", ".txt")
    create_wordlist(input_dir, wordlist_file, config=config)
    try:
        sorted_file = add_unique_path(output_dir / "sortedWordCountList", ".txt")
        count_and_sort_words(wordlist_file, sorted_file)
    finally:
        wordlist_file.unlink(missing_ok=True)
    return sorted_file
