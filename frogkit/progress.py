"""ASCII progress bars for the terminal: one with a spinner, one append-only."""

from __future__ import annotations

import sys
from typing import IO, Optional

__all__ = [
    "Spinner",
    "ProgressBar",
    "SimpleProgress",
    "progress",
    "progress_simple",
    "SPINNER_THROB",
    "SPINNER_PULSAR",
    "SPINNER_ARROW",
    "SPINNER_STAR",
    "SPINNER_DEFAULT",
]

SPINNER_THROB = ".oOo"
SPINNER_PULSAR = ".oO°Oo."
SPINNER_ARROW = "v<^>"
SPINNER_STAR = ".oO@*"
SPINNER_DEFAULT = "|/-\\"

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

_SIMPLE_HEADER = (
    "0%       25%       50%       75%       100%\n"
    "|---------+---------+---------+---------|\n"
    "|"
)
_SIMPLE_WIDTH = 40


class Spinner:
    """An endless iterator over the characters of a spinner style."""

    def __init__(self, style: Optional[str] = None) -> None:
        self.style = style or SPINNER_DEFAULT
        self._count = 0

    def __iter__(self) -> "Spinner":
        return self

    def __next__(self) -> str:
        char = self.style[self._count % len(self.style)]
        self._count += 1
        return char


class ProgressBar:
    """A progress bar redrawn in place, with a spinner.

    The cursor is hidden when updated with 0 percent and shown again,
    followed by a newline, at 100 percent.  Repeated updates with the
    same percentage turn the spinner.
    """

    def __init__(self, max_width: int = 80, stream: Optional[IO[str]] = None) -> None:
        self.max_width = max_width
        self.stream = stream
        self.spinner = Spinner()

    def _write(self, text: str) -> None:
        out = self.stream if self.stream is not None else sys.stderr
        out.write(text)
        out.flush()

    def update(self, percent: int) -> None:
        """Draw the bar at ``percent``."""
        width = self.max_width - 10
        parts = []
        if percent == 0:
            parts.append(HIDE_CURSOR)

        parts.append(f"\r{percent:3d}% {next(self.spinner)} [")
        bar = int(percent * width / 100)
        parts.append(
            "".join("=" if i < bar else ">" if i == bar else " " for i in range(width))
        )
        parts.append("]")

        if percent == 100:
            parts.append(SHOW_CURSOR)
            parts.append("\n")

        self._write("".join(parts))


class SimpleProgress:
    """A progress bar that only appends, for terminals without control characters."""

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        self.stream = stream
        self._last = 1

    def _write(self, text: str) -> None:
        out = self.stream if self.stream is not None else sys.stderr
        out.write(text)
        out.flush()

    def update(self, percent: int) -> None:
        """Advance the bar to ``percent``; start with 0 and end with 100."""
        if not percent and self._last:
            self._last = 0
            self._write(_SIMPLE_HEADER)
            return

        ratio = _SIMPLE_WIDTH * percent // 100
        if ratio <= self._last:
            return

        count = ratio - self._last
        self._last = ratio
        tail = "|" if ratio == _SIMPLE_WIDTH else "="
        self._write("=" * (count - 1) + tail)


_bar = ProgressBar()
_simple = SimpleProgress()


def progress(percent: int, max_width: int) -> None:
    """Draw the shared progress bar on stderr at ``percent``."""
    _bar.max_width = max_width
    _bar.update(percent)


def progress_simple(percent: int) -> None:
    """Advance the shared append-only progress bar on stderr."""
    _simple.update(percent)