"""Name-based lookup of job boards.

Boards register under their ``name`` (the value of the ``jobboard`` tag);
lookups ignore case and surrounding whitespace.
"""

from __future__ import annotations

from job_corpus.boards.base import JobBoard

_BOARDS: dict[str, type[JobBoard]] = {}


class UnsupportedJobBoardError(KeyError):
    """No board is registered under the requested name."""


def _normalize(name: str) -> str:
    return (name or "").strip().lower()


def register(board_cls: type[JobBoard]) -> type[JobBoard]:
    """Register a job board class; usable as a class decorator.

    Args:
        board_cls: JobBoard subclass with a non-empty ``name``.

    Returns:
        The class itself, unchanged.

    Raises:
        ValueError: If ``name`` is empty or already taken by another class.
    """
    name = getattr(board_cls, "name", "")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"Job board {board_cls.__name__} has an empty name")
    key = _normalize(name)
    existing = _BOARDS.get(key)
    if existing is not None and existing is not board_cls:
        raise ValueError(
            f"Job board name {key!r} is already registered by {existing.__name__}"
        )
    _BOARDS[key] = board_cls
    return board_cls


def get_board(name: str) -> JobBoard:
    """Create the board registered under ``name``.

    Args:
        name: Board name as found in a ``jobboard`` tag, e.g. "Indeed.com".

    Returns:
        A new instance of the registered board.

    Raises:
        UnsupportedJobBoardError: If no board is registered under ``name``.
    """
    board_cls = _BOARDS.get(_normalize(name))
    if board_cls is None:
        raise UnsupportedJobBoardError(f"Job board {name!r} is not supported")
    return board_cls()
