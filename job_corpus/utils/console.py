"""Single-line console status updates."""

import sys
from typing import TextIO


def update_status_line(text: str, stream: TextIO | None = None) -> None:
    """Overwrite the current terminal line with ``text``.

    End ``text`` with a newline to keep it from being overwritten by the
    next update.
    """
    out = stream if stream is not None else sys.stdout
    out.write("\r\x1b[2K" + text)
    out.flush()
