"""String helpers: partial matching, bounded copies, trimming and safe integer parsing."""

from __future__ import annotations

import re
from itertools import takewhile
from typing import Iterable, Optional, Sequence

__all__ = [
    "NumberError",
    "strnmatch",
    "strmatch",
    "strtonum",
    "atonum",
    "string_valid",
    "string_match",
    "string_compare",
    "string_case_compare",
    "strtrim",
    "strlcpy",
    "strlcat",
    "strnlen",
]

LLONG_MAX = 0x7FFFFFFFFFFFFFFF
LLONG_MIN = -0x7FFFFFFFFFFFFFFF - 1
INT32_MAX = 0x7FFFFFFF

_C_SPACE = " \t\n\v\f\r"
_DECIMAL = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)\Z")


class NumberError(ValueError):
    """Raised by strtonum() when a string is invalid or out of bounds.

    The message is one of ``"invalid"``, ``"too small"`` or ``"too large"``.
    """


def _ascii_lower(text: str) -> str:
    return text.translate(_LOWER_TABLE)


_LOWER_TABLE = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def strnmatch(string: Optional[str], candidates: Optional[Sequence[str]], num: int) -> int:
    """Return the index of the first of ``num`` candidates that ``string`` prefixes.

    The comparison is case insensitive.  Raises ValueError when either
    argument is None and LookupError when nothing matches.
    """
    if string is None or candidates is None:
        raise ValueError("string and candidates must be given")

    needle = _ascii_lower(string)
    for index, candidate in enumerate(candidates[:num]):
        if _ascii_lower(candidate).startswith(needle):
            return index

    raise LookupError(f"no match for {string!r}")


def strmatch(string: Optional[str], candidates: Optional[Iterable[Optional[str]]]) -> int:
    """Like strnmatch(), searching candidates up to the first None or the end."""
    if candidates is None:
        raise ValueError("candidates must be given")

    items = list(takewhile(lambda item: item is not None, candidates))
    return strnmatch(string, items, len(items))


def strtonum(numstr: str, minval: int, maxval: int) -> int:
    """Convert a base-10 string to an integer within ``[minval, maxval]``.

    Leading whitespace and a single sign are allowed; anything trailing
    is not.  Raises NumberError("invalid"), NumberError("too small") or
    NumberError("too large").
    """
    if minval > maxval:
        raise NumberError("invalid")

    match = _DECIMAL.match(numstr)
    if not match:
        raise NumberError("invalid")

    value = int(match.group(1))
    if value < LLONG_MIN or value < minval:
        raise NumberError("too small")
    if value > LLONG_MAX or value > maxval:
        raise NumberError("too large")

    return value


def atonum(string: Optional[str]) -> Optional[int]:
    """Convert a string to a natural number (0 to 2147483647), or None on error."""
    if string is None:
        return None
    try:
        return strtonum(string, 0, INT32_MAX)
    except NumberError:
        return None


def string_valid(string: Optional[str]) -> bool:
    """True if ``string`` is not None and not empty."""
    return bool(string)


def string_match(a: str, b: str) -> bool:
    """Relaxed, case-insensitive comparison over the shorter string's length."""
    shortest = min(len(a), len(b))
    return _ascii_lower(a[:shortest]) == _ascii_lower(b[:shortest])


def string_compare(a: str, b: str) -> bool:
    """Strict comparison."""
    return a == b


def string_case_compare(a: str, b: str) -> bool:
    """Strict comparison, ignoring case."""
    return len(a) == len(b) and _ascii_lower(a) == _ascii_lower(b)


def strtrim(string: Optional[str]) -> str:
    """Strip leading and trailing whitespace; raises ValueError for None."""
    if string is None:
        raise ValueError("string must be given")
    return string.strip(_C_SPACE)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied string and ``len(src)``; truncation occurred when
    the second value is ``>= size``.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters in total.

    Returns the resulting string and ``min(size, len(dst)) + len(src)``;
    truncation occurred when the second value is ``>= size``.
    """
    dlen = min(len(dst), max(size, 0))
    room = size - dlen
    if room <= 0:
        return dst, dlen + len(src)
    return dst + src[: room - 1], dlen + len(src)


def strnlen(string: str, limit: int) -> int:
    """Length of ``string`` up to a NUL character, but at most ``limit``."""
    limit = max(limit, 0)
    nul = string.find("\0", 0, limit)
    if nul >= 0:
        return nul
    return min(len(string), limit)