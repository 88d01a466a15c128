"""Ask a yes-or-no question on the terminal and read a single key."""

from __future__ import annotations

import os
import sys

__all__ = ["yorn"]


def _rawgetch() -> str:
    """Read one character, without waiting for Enter when stdin is a terminal."""
    stdin = sys.stdin
    if not stdin.isatty():
        return stdin.read(1)

    import termios

    fd = stdin.fileno()
    saved = termios.tcgetattr(fd)
    modified = termios.tcgetattr(fd)
    modified[3] &= ~(termios.ICANON | termios.ECHO)
    modified[6][termios.VMIN] = 1
    modified[6][termios.VTIME] = 0
    termios.tcflush(fd, termios.TCIFLUSH)
    try:
        termios.tcsetattr(fd, termios.TCSANOW, modified)
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)
    return data.decode(errors="replace")


def yorn(fmt: str, *args: object) -> bool:
    """Print the question ``fmt % args`` on stderr and return True for y or Y."""
    sys.stderr.write(fmt % args if args else fmt)
    sys.stderr.flush()

    answer = _rawgetch()
    sys.stdout.write(f"{answer}\n")
    sys.stdout.flush()
    return answer in ("y", "Y")