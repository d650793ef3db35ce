from io import StringIO


def test_update_status_line_overwrites_current_line():
    from job_corpus.utils.console import update_status_line

    stream = StringIO()
    update_status_line("Result 3 scraped", stream=stream)

    assert stream.getvalue() == "\r\x1b[2KResult 3 scraped"
