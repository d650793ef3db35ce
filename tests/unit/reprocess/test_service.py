"""Tests for batch reprocessing of document directories."""

import os

import pytest


@pytest.fixture
def config():
    from job_corpus.reprocess.config import ReprocessConfig

    return ReprocessConfig(_env_file=None)


def _write(directory, name, text, mtime):
    path = directory / name
    path.write_text(text, encoding="utf-8")
    os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def batch_dir(tmp_path, sample_document_text):
    directory = tmp_path / "scrapeOutput1"
    directory.mkdir()
    _write(directory, "scrapeOutput1.txt", sample_document_text, 100)
    _write(
        directory,
        "scrapeOutput2.txt",
        "<jobboard>stepstone.de</jobboard>\n<employer>X</employer>\n<title>Y</title>\n"
        '\n<h2 class="jobSectionHeader">Aufgaben</h2><p>Go</p>',
        200,
    )
    _write(
        directory,
        "scrapeOutput3.txt",
        "<jobboard>indeed.com</jobboard>\n<employer>X</employer>\n<title>Y</title>\n"
        '\n<h2 class="jobSectionHeader">Benefits</h2><p>Obst</p>',
        300,
    )
    return directory


@pytest.fixture
def mixed_dir(tmp_path, sample_document_text):
    """A valid document next to a binary file such as Finder metadata."""
    directory = tmp_path / "mixed"
    directory.mkdir()
    binary = directory / ".DS_Store"
    binary.write_bytes(b"\x00\x00\x00\x01Bud1\xff\xfe\x80\x00\x10")
    os.utime(binary, (50, 50))
    _write(directory, "scrapeOutput1.txt", sample_document_text, 100)
    return directory


class TestStripHtmlTags:
    def test_writes_plain_text_copies(self, tmp_path, batch_dir):
        from job_corpus.reprocess.service import strip_html_tags

        out = tmp_path / "out"
        report = strip_html_tags(batch_dir, out)

        assert report.output_dir == out / "scrapeOutput1_noHtmlTags1"
        assert report.new_files == 3
        text = (report.output_dir / "scrapeOutput1.txt").read_text(encoding="utf-8")
        assert "<" not in text
        assert "Stellenbörse: indeed.com" in text
        assert "Deine Aufgaben" in text
        assert text.count("ACME GmbH") == 1

    def test_second_run_gets_new_directory(self, tmp_path, batch_dir):
        from job_corpus.reprocess.service import strip_html_tags

        out = tmp_path / "out"
        strip_html_tags(batch_dir, out)
        report = strip_html_tags(batch_dir, out)

        assert report.output_dir == out / "scrapeOutput1_noHtmlTags2"

    def test_empty_input_creates_nothing(self, tmp_path):
        from job_corpus.reprocess.service import strip_html_tags

        empty = tmp_path / "empty"
        empty.mkdir()

        report = strip_html_tags(empty, tmp_path / "out")

        assert report.new_files == 0
        assert not report.output_dir.exists()

    def test_binary_file_does_not_abort_batch(self, tmp_path, mixed_dir):
        from job_corpus.reprocess.service import strip_html_tags

        report = strip_html_tags(mixed_dir, tmp_path / "out")

        assert report.new_files == 2
        text = (report.output_dir / "scrapeOutput1.txt").read_text(encoding="utf-8")
        assert "Arbeitgeber: ACME GmbH" in text


class TestNarrowDown:
    def test_only_relevant_documents_are_written(self, tmp_path, batch_dir, config):
        from job_corpus.reprocess.service import narrow_down

        report = narrow_down(batch_dir, tmp_path / "out", config=config)

        assert report.output_dir == tmp_path / "out" / "scrapeOutput1_narrowedDown1"
        assert report.processed == 3
        assert report.new_files == 1
        assert report.skipped == ["scrapeOutput2.txt", "scrapeOutput3.txt"]

        written = report.output_dir / "scrapeOutput1_narrowedDown.txt"
        text = written.read_text(encoding="utf-8")
        assert text.startswith("Stellenbörse: indeed.com\n")
        assert text.endswith("\nDeine Aufgaben\n\nGo\nRust\n")

    def test_custom_vocabulary(self, tmp_path, batch_dir):
        from job_corpus.reprocess.config import ReprocessConfig
        from job_corpus.reprocess.service import narrow_down

        config = ReprocessConfig(_env_file=None, narrowing_vocabulary="benefits")

        report = narrow_down(batch_dir, tmp_path / "out", config=config)

        assert report.new_files == 2
        assert sorted(p.name for p in report.output_dir.iterdir()) == [
            "scrapeOutput1_narrowedDown.txt",
            "scrapeOutput3_narrowedDown.txt",
        ]

    def test_binary_file_is_skipped(self, tmp_path, mixed_dir, config):
        from job_corpus.reprocess.service import narrow_down

        report = narrow_down(mixed_dir, tmp_path / "out", config=config)

        assert report.processed == 2
        assert report.skipped == [".DS_Store"]
        assert [p.name for p in report.output_dir.iterdir()] == [
            "scrapeOutput1_narrowedDown.txt"
        ]


class TestWordlist:
    def test_create_wordlist_appends_tokens_per_file(self, tmp_path, config):
        from job_corpus.reprocess.service import create_wordlist

        source = tmp_path / "texts"
        source.mkdir()
        _write(source, "b.txt", "Go", 200)
        _write(source, "a.txt", "Go Rust", 100)
        output = tmp_path / "wordlist1.txt"

        create_wordlist(source, output, config=config)

        assert output.read_text(encoding="utf-8") == "Go\nRust\nGo\n"

    def test_create_wordlist_tolerates_binary_file(self, tmp_path, mixed_dir, config):
        from job_corpus.reprocess.service import create_wordlist

        output = tmp_path / "wordlist1.txt"

        create_wordlist(mixed_dir, output, config=config)

        text = output.read_text(encoding="utf-8")
        assert text.endswith("\nObst\n")
        assert "\nACME\n" in text

    def test_count_and_sort_words(self, tmp_path):
        from job_corpus.reprocess.service import count_and_sort_words

        wordlist = tmp_path / "wordlist1.txt"
        wordlist.write_text("go\ngo\nrust\ngo\n", encoding="utf-8")
        output = tmp_path / "sorted.txt"

        entries = count_and_sort_words(wordlist, output)

        assert [(e.word, e.count) for e in entries] == [("go", 3), ("rust", 1)]
        assert output.read_text(encoding="utf-8") == "3 go\n1 rust\n"

    def test_count_and_sort_words_rejects_missing_wordlist(self, tmp_path):
        from job_corpus.reprocess.service import count_and_sort_words

        assert count_and_sort_words(tmp_path, tmp_path / "sorted.txt") is None
        assert not (tmp_path / "sorted.txt").exists()

    def test_build_word_count_list_removes_wordlist(self, tmp_path, config):
        from job_corpus.reprocess.service import build_word_count_list

        source = tmp_path / "texts"
        source.mkdir()
        _write(source, "a.txt", "<p>Rust</p> Go", 100)
        _write(source, "b.txt", "Go", 200)
        out = tmp_path / "out"
        out.mkdir()

        first = build_word_count_list(source, out, config=config)
        second = build_word_count_list(source, out, config=config)

        assert first == out / "sortedWordCountList1.txt"
        assert second == out / "sortedWordCountList2.txt"
        assert first.read_text(encoding="utf-8") == "2 Go\n1 Rust\n"
        assert sorted(p.name for p in out.iterdir()) == [
            "sortedWordCountList1.txt",
            "sortedWordCountList2.txt",
        ]
