"""Terminal output helpers, kept apart from rendering."""

from __future__ import annotations

import sys
from typing import TextIO

from bwdraw.core.constants import CLEAR_SCREEN, CURSOR_HOME


class Terminal:
    """Writes raw text to a terminal stream (stdout by default)."""

    @staticmethod
    def write(text: str, stream: TextIO | None = None) -> None:
        """Write text to terminal."""
        out = stream if stream is not None else sys.stdout
        out.write(text)
        out.flush()

    @staticmethod
    def clear(stream: TextIO | None = None) -> None:
        """Clear screen and move cursor to home."""
        Terminal.write(CLEAR_SCREEN + CURSOR_HOME, stream)


def clear(stream: TextIO | None = None) -> None:
    """Clear the console screen using ANSI escape codes."""
    Terminal.clear(stream)
