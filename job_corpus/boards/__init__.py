"""Job board definitions and the registry used to dispatch on them.

Importing this package registers every built-in board.
"""

from job_corpus.boards.base import JobBoard, PageTransitionError
from job_corpus.boards.indeed import IndeedBoard
from job_corpus.boards.registry import (
    UnsupportedJobBoardError,
    get_board,
    register,
)

__all__ = [
    "IndeedBoard",
    "JobBoard",
    "PageTransitionError",
    "UnsupportedJobBoardError",
    "get_board",
    "register",
]
