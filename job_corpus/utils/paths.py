"""Filesystem helpers shared by the crawler and the reprocessing pipeline.

This module provides:
- Unique path allocation (``<base><i>[ext]`` for i = 1..1000)
- Deterministic batch ordering by modification time
"""

from __future__ import annotations

from pathlib import Path

MAX_UNIQUE_PATH_ATTEMPTS = 1000


class PathExhaustionError(Exception):
    """Raised when every unique path candidate is already taken."""

    def __init__(self, base: Path | str, attempts: int = MAX_UNIQUE_PATH_ATTEMPTS):
        self.base = str(base)
        self.attempts = attempts
        super().__init__(
            f"Too many files or directories named like {self.base!r} "
            f"(tried 1..{attempts}); choose another directory"
        )


def add_unique_path(
    base: Path | str,
    ext: str | None = None,
    *,
    max_attempts: int = MAX_UNIQUE_PATH_ATTEMPTS,
) -> Path:
    """Return the first ``base + i (+ ext)`` that does not exist yet.

    When ``ext`` is given, a candidate is also rejected if the bare
    ``base + i`` exists, so a directory and a file never share a number.

    Args:
        base: Directory or file path without the numeric suffix.
        ext: Optional file extension including the dot, e.g. ".txt".
        max_attempts: Highest suffix to try.

    Returns:
        The allocated path. Nothing is created on disk.

    Raises:
        PathExhaustionError: If all candidates 1..max_attempts exist.
    """
    base_str = str(base)
    for i in range(1, max_attempts + 1):
        bare = Path(f"{base_str}{i}")
        if ext is None:
            if not bare.exists():
                return bare
            continue
        candidate = Path(f"{base_str}{i}{ext}")
        if not bare.exists() and not candidate.exists():
            return candidate
    raise PathExhaustionError(base_str, max_attempts)


def files_by_mtime(directory: Path | str) -> list[Path]:
    """List regular files in ``directory`` in ascending modification time.

    Files with the same mtime are ordered by name.
    """
    root = Path(directory)
    files = [path for path in root.iterdir() if path.is_file()]
    files.sort(key=lambda path: (path.stat().st_mtime_ns, path.name))
    return files
