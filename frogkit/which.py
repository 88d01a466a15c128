"""Locate executables in $PATH, like which(1)."""

from __future__ import annotations

import os
import re
from typing import Optional

__all__ = ["which", "whichp"]

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]")


def _strip_args(path: str) -> str:
    """Drop any arguments, as in "/path/to/bin --some args"."""
    return _WHITESPACE.split(path, maxsplit=1)[0]


def which(cmd: Optional[str]) -> Optional[str]:
    """Return the path to ``cmd``, searching $PATH unless it is absolute, or None.

    Anything after the first whitespace in ``cmd`` is ignored.  Raises
    ValueError when ``cmd`` is None.
    """
    if cmd is None:
        raise ValueError("cmd must be given")

    if cmd.startswith("/"):
        path = _strip_args(cmd)
        return path if os.access(path, os.X_OK) else None

    env = os.environ.get("PATH")
    if env is None:
        return None

    for directory in filter(None, env.split(":")):
        path = _strip_args(f"{directory}/{cmd}")
        if os.access(path, os.X_OK):
            return path

    return None


def whichp(cmd: Optional[str]) -> bool:
    """True if which() finds ``cmd``."""
    return which(cmd) is not None