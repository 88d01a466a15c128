"""File system helpers: touch, create, erase, truncate and anonymous temporary files."""

from __future__ import annotations

import errno
import os
import stat
import tempfile as _tempfile
from typing import IO, Optional

__all__ = [
    "touch",
    "touchf",
    "makedir",
    "makefifo",
    "erase",
    "chardev",
    "blkdev",
    "fisslashdir",
    "is_exec",
    "is_set",
    "is_clear",
    "is_other",
    "set_bit",
    "clear_bit",
    "truncatef",
    "tempfile",
]

_CREATE_MODE = stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP | stat.S_IROTH
_PATH_TMP = "/tmp/"


def touch(path: str) -> None:
    """Update the timestamps of ``path``, creating it if it does not exist."""
    try:
        os.utime(path, None)
    except FileNotFoundError:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _CREATE_MODE)
        os.close(fd)


def touchf(fmt: str, *args: object) -> None:
    """Like touch(), with the path composed from ``fmt % args``."""
    touch(fmt % args if args else fmt)


def makedir(path: str, mode: int) -> None:
    """Create a directory, ignoring an already existing one."""
    try:
        os.mkdir(path, mode)
    except FileExistsError:
        pass


def makefifo(path: str, mode: int) -> None:
    """Create a FIFO, ignoring an already existing one."""
    try:
        os.mkfifo(path, mode)
    except FileExistsError:
        pass


def erase(path: str) -> None:
    """Remove a file or empty directory, ignoring a missing one."""
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)
    except FileNotFoundError:
        pass


def chardev(path: str, mode: int, major: int, minor: int) -> None:
    """Create a character device node."""
    os.mknod(path, stat.S_IFCHR | mode, os.makedev(major, minor))


def blkdev(path: str, mode: int, major: int, minor: int) -> None:
    """Create a block device node."""
    os.mknod(path, stat.S_IFBLK | mode, os.makedev(major, minor))


def fisslashdir(path: Optional[str]) -> bool:
    """True if ``path`` ends with a slash."""
    return bool(path) and path.endswith("/")


def is_exec(mode: int) -> bool:
    """True if the owner execute bit is set in ``mode``."""
    return (mode & stat.S_IXUSR) == stat.S_IXUSR


def is_set(word: int, bit: int) -> bool:
    """True if ``bit`` is set in ``word``."""
    return bool(word & (1 << bit))


def is_clear(word: int, bit: int) -> bool:
    """True if ``bit`` is cleared in ``word``."""
    return not word & (1 << bit)


def is_other(word: int, bit: int) -> bool:
    """True if any bit other than ``bit`` is set in ``word``."""
    return bool(word & ~(1 << bit))


def set_bit(word: int, bit: int) -> int:
    """Return ``word`` with ``bit`` set."""
    return word | (1 << bit)


def clear_bit(word: int, bit: int) -> int:
    """Return ``word`` with ``bit`` cleared."""
    return word & ~(1 << bit)


def truncatef(length: int, fmt: str, *args: object) -> None:
    """Truncate the file at ``fmt % args`` to ``length`` bytes."""
    os.truncate(fmt % args if args else fmt, length)


def tempfile() -> IO[str]:
    """Open an anonymous read/write temporary file that vanishes when closed."""
    directory = _PATH_TMP if os.path.isdir(_PATH_TMP) else None
    try:
        return _tempfile.TemporaryFile(mode="w+", dir=directory)
    except OSError as exc:
        if exc.errno != errno.EOPNOTSUPP:
            raise
        return _tempfile.TemporaryFile(mode="w+")