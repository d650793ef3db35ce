"""Logging setup for the job-corpus CLI.

All modules log through ``logging.getLogger(__name__)``; their records reach
the single stderr handler installed on the ``job_corpus`` logger, so stdout
stays free for the crawl status line.
"""

import logging
import sys

LOGGER_NAME = "job_corpus"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def configure_logging(level: str | None = None) -> logging.Logger:
    """Install the stderr handler and set the package log level.

    Calling this again only changes the level.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Unknown names and
            None mean INFO.

    Returns:
        The ``job_corpus`` logger.
    """
    global _handler

    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    if _handler is None:
        logger.handlers.clear()
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(_handler)
        logger.propagate = False

    _handler.setLevel(log_level)
    return logger


def reset_logging() -> None:
    """Remove the handler again (for tests)."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _handler = None
