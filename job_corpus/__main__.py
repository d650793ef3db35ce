"""Main entry point for job-corpus."""

import argparse
import asyncio
import sys
from pathlib import Path

from job_corpus import __version__
from job_corpus.config.settings import Settings
from job_corpus.utils.console import update_status_line
from job_corpus.utils.logging import configure_logging
from job_corpus.utils.paths import PathExhaustionError, add_unique_path

DEFAULT_BOARDS = ["indeed.com"]


def _existing_dir(value: str) -> Path:
    path = Path(value)
    if not path.is_dir():
        raise argparse.ArgumentTypeError(f"not a directory: {value}")
    return path


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="job-corpus",
        description="job-corpus: extract job postings and build text corpora from them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m job_corpus scrape --what "Python Entwickler" --where Berlin
  python -m job_corpus narrow data/scrapeOutput1 data/reprocessed
  python -m job_corpus wordcount data/scrapeOutput1 data/analysis
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available operating modes",
    )

    scrape_parser = subparsers.add_parser(
        "scrape",
        help="Extract a new set of postings (search -> scrapeOutput<N>/)",
    )
    scrape_parser.add_argument("--what", required=True, help="Search query")
    scrape_parser.add_argument("--where", required=True, help="Location or postcode")
    scrape_parser.add_argument(
        "--board",
        dest="boards",
        action="append",
        default=None,
        help="Job board to search (repeatable, default: indeed.com)",
    )
    scrape_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the new session directory (defaults to settings)",
    )
    scrape_parser.add_argument(
        "--headless",
        action="store_true",
        default=None,
        help="Run the browser without a window",
    )

    strip_parser = subparsers.add_parser(
        "strip-html",
        help="Remove markup from an existing set of documents",
    )
    strip_parser.add_argument("input_dir", type=_existing_dir)
    strip_parser.add_argument("output_dir", type=Path)

    narrow_parser = subparsers.add_parser(
        "narrow",
        help="Keep only the relevant sections of each document",
    )
    narrow_parser.add_argument("input_dir", type=_existing_dir)
    narrow_parser.add_argument("output_dir", type=Path)

    wordlist_parser = subparsers.add_parser(
        "wordlist",
        help="Build an unprocessed wordlist (one token per line)",
    )
    wordlist_parser.add_argument("input_dir", type=_existing_dir)
    wordlist_parser.add_argument("output_dir", type=Path)

    wordcount_parser = subparsers.add_parser(
        "wordcount",
        help='Build a sorted word-count list ("<count> <word>" per line)',
    )
    wordcount_parser.add_argument("input_dir", type=_existing_dir)
    wordcount_parser.add_argument("output_dir", type=Path)

    return parser


def _print_progress(event) -> None:
    if event.path is not None:
        title = (event.title or "")[:50]
        update_status_line(f'Result {event.index} scraped: "{title}(...)"')
    else:
        update_status_line(
            f"Result {event.index} skipped ({event.kind.value}); "
            f"{event.fail_count} of {event.result_count} discarded\n"
        )


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    # Load settings
    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"job-corpus v{__version__} starting in {parsed.mode} mode")

    try:
        if parsed.mode == "scrape":
            from job_corpus.crawler import service as crawler_service

            print("Starting extraction...")
            run = asyncio.run(
                crawler_service.run_scrape(
                    parsed.what,
                    parsed.where,
                    parsed.boards or DEFAULT_BOARDS,
                    output_dir=parsed.output_dir,
                    settings=settings,
                    headless=parsed.headless,
                    progress_callback=_print_progress,
                )
            )
            for summary in run.summaries:
                update_status_line(
                    f"Scrape on {summary.jobboard} finished after "
                    f"{summary.result_count} results.\n"
                    f"{summary.fail_count} results were discarded.\n"
                )
            for name in run.unsupported:
                print(f"The job board '{name}' is not supported yet.")
            print(f'The extracted documents are in "{run.session_dir}"')
            return 0 if run.summaries else 1

        from job_corpus.reprocess import service as reprocess_service

        parsed.output_dir.mkdir(parents=True, exist_ok=True)

        if parsed.mode == "strip-html":
            report = reprocess_service.strip_html_tags(
                parsed.input_dir, parsed.output_dir
            )
            print(f"Created {report.new_files} new files in \"{report.output_dir}\"")
            return 0

        if parsed.mode == "narrow":
            report = reprocess_service.narrow_down(parsed.input_dir, parsed.output_dir)
            print(f"Created {report.new_files} new files in \"{report.output_dir}\"")
            return 0

        if parsed.mode == "wordlist":
            output_file = add_unique_path(parsed.output_dir / "wordlist", ".txt")
            reprocess_service.create_wordlist(parsed.input_dir, output_file)
            print(f'Created a new wordlist: "{output_file}"')
            return 0

        if parsed.mode == "wordcount":
            output_file = reprocess_service.build_word_count_list(
                parsed.input_dir, parsed.output_dir
            )
            print(f'Created a new word-count list: "{output_file}"')
            return 0

    except PathExhaustionError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
