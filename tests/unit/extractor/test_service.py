"""Tests for ResultExtractor."""

import pytest


@pytest.fixture
def extractor():
    from job_corpus.boards.indeed import IndeedBoard
    from job_corpus.extractor.config import ExtractorConfig
    from job_corpus.extractor.service import ResultExtractor

    return ResultExtractor(IndeedBoard(), ExtractorConfig(_env_file=None))


class TestExtractSuccess:
    async def test_reads_all_fields(self, extractor, make_result_view):
        from job_corpus.extractor.models import ExtractionSuccess, OutcomeKind

        view = make_result_view(
            title="Backend Developer - Berlin",
            employer="<a href='/cmp/acme'>ACME GmbH</a>",
            description="<div><p>Python</p></div>",
        )

        outcome = await extractor.extract(view)

        assert outcome == ExtractionSuccess(
            jobboard="indeed.com",
            employer="<a href='/cmp/acme'>ACME GmbH</a>",
            title="Backend Developer - Berlin",
            description_html="<div><p>Python</p></div>",
        )
        assert outcome.kind is OutcomeKind.SUCCESS
        assert outcome.skipped is False

    async def test_to_document_carries_search_fields(self, extractor, make_result_view):
        outcome = await extractor.extract(make_result_view())

        document = outcome.to_document(
            what="python", where="Berlin", timestamp="2024-01-02T03:04:05+00:00"
        )

        assert document.jobboard == "indeed.com"
        assert document.body_html == "<div><p>Python</p></div>"
        assert document.where == "Berlin"


class TestExtractSkips:
    async def test_hiring_event(self, extractor, make_view):
        from job_corpus.extractor.models import OutcomeKind, SkippedHiringEvent

        view = make_view(url="https://events.indeed.com/event/1")

        outcome = await extractor.extract(view)

        assert outcome == SkippedHiringEvent(url="https://events.indeed.com/event/1")
        assert outcome.kind is OutcomeKind.HIRING_EVENT
        assert outcome.skipped is True

    async def test_explicit_url_overrides_view_url(self, extractor, make_result_view):
        from job_corpus.extractor.models import SkippedHiringEvent

        outcome = await extractor.extract(
            make_result_view(), url="https://events.indeed.com/event/2"
        )

        assert isinstance(outcome, SkippedHiringEvent)

    async def test_missing_description(self, extractor, make_view):
        from job_corpus.boards.indeed import IndeedBoard
        from job_corpus.extractor.models import OutcomeKind, SkippedLoadTimeout

        view = make_view(html={IndeedBoard.employer_selector: "ACME"})

        outcome = await extractor.extract(view)

        assert isinstance(outcome, SkippedLoadTimeout)
        assert outcome.kind is OutcomeKind.LOAD_TIMEOUT
        assert "#jobDescriptionText" in outcome.reason
        assert "5000" in outcome.reason

    async def test_missing_employer(self, extractor, make_view):
        from job_corpus.boards.indeed import IndeedBoard
        from job_corpus.extractor.models import SkippedLoadTimeout

        view = make_view(html={IndeedBoard.description_selector: "<p>x</p>"})

        outcome = await extractor.extract(view)

        assert isinstance(outcome, SkippedLoadTimeout)
        assert "2000" in outcome.reason

    async def test_read_failure_after_waits(self, extractor, make_result_view):
        from job_corpus.extractor.models import SkippedLoadTimeout

        view = make_result_view()
        view.title_error = RuntimeError("Target page closed")

        outcome = await extractor.extract(view)

        assert isinstance(outcome, SkippedLoadTimeout)
        assert outcome.reason == "Target page closed"

    async def test_custom_timeouts_are_used(self, make_view):
        from job_corpus.boards.indeed import IndeedBoard
        from job_corpus.extractor.config import ExtractorConfig
        from job_corpus.extractor.service import ResultExtractor

        extractor = ResultExtractor(
            IndeedBoard(), ExtractorConfig(_env_file=None, description_timeout_ms=750)
        )

        outcome = await extractor.extract(make_view())

        assert "750 ms" in outcome.reason
