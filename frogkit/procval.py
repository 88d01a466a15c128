"""Read and write single values or lines in /proc and /sys style files."""

from __future__ import annotations

import re

__all__ = ["readsnf", "writesf", "readllf", "readdf", "writellf", "writedf"]

LLONG_MAX = 0x7FFFFFFFFFFFFFFF
LLONG_MIN = -0x7FFFFFFFFFFFFFFF - 1
INT_MAX = 0x7FFFFFFF
INT_MIN = -0x7FFFFFFF - 1

_INTEGER = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)"
)


def _path(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


def _parse_integer(text: str) -> int:
    """Parse a leading integer with automatic base, as strtoll(..., 0) does."""
    match = _INTEGER.match(text)
    if not match:
        return 0
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    if sign == "-":
        value = -value
    if not LLONG_MIN <= value <= LLONG_MAX:
        raise OverflowError(f"{text!r} is out of 64-bit range")
    return value


def readsnf(fmt: str, *args: object) -> str:
    """Return the first line of the file at ``fmt % args`` without its newline.

    Raises EOFError if the file is empty.
    """
    with open(_path(fmt, args)) as fp:
        line = fp.readline()
    if not line:
        raise EOFError("file is empty")
    return line[:-1] if line.endswith("\n") else line


def writesf(text: str, mode: str, fmt: str, *args: object) -> None:
    """Write ``text`` and a newline to the file at ``fmt % args``."""
    with open(_path(fmt, args), mode) as fp:
        fp.write(f"{text}\n")


def readllf(fmt: str, *args: object) -> int:
    """Read a 64-bit integer (decimal, 0x hex or 0 octal) from the file."""
    return _parse_integer(readsnf(fmt, *args))


def readdf(fmt: str, *args: object) -> int:
    """Read an integer that must fit in a 32-bit int; raises OverflowError if not."""
    value = readllf(fmt, *args)
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"{value} does not fit in an int")
    return value


def writellf(value: int, mode: str, fmt: str, *args: object) -> None:
    """Write a 64-bit integer and a newline to the file at ``fmt % args``."""
    with open(_path(fmt, args), mode) as fp:
        fp.write(f"{int(value)}\n")


def writedf(value: int, mode: str, fmt: str, *args: object) -> None:
    """Write an integer and a newline to the file at ``fmt % args``."""
    with open(_path(fmt, args), mode) as fp:
        fp.write(f"{int(value)}\n")