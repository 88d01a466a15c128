"""A small local rsync: copy a file or a directory tree, optionally pruning the destination."""

from __future__ import annotations

import enum
import os
import shutil
from typing import Callable, List, Optional

from frogkit.fileops import erase, fisslashdir, makedir

__all__ = ["SyncOption", "rsync"]

Filter = Callable[[str], object]


class SyncOption(enum.IntFlag):
    """Options for rsync()."""

    NONE = 0
    DELETE = 0x01
    KEEP_MTIME = 0x02


def _join(directory: str, name: str) -> str:
    return f"{directory}{'' if fisslashdir(directory) else '/'}{name}"


def _list(directory: str, keep: Optional[Filter] = None) -> List[str]:
    """Sorted entries of ``directory``, those rejected by ``keep`` left out."""
    try:
        names = sorted(os.listdir(directory))
    except OSError:
        return []
    if keep is None:
        return names
    return [name for name in names if keep(name)]


def _set_mtime(path: str, st: os.stat_result) -> None:
    times = (st.st_atime_ns, st.st_mtime_ns)
    try:
        if os.utime in os.supports_follow_symlinks:
            os.utime(path, ns=times, follow_symlinks=False)
        else:
            os.utime(path, ns=times)
    except OSError:
        pass


def _copy(src: str, dst: str, keep_mtime: bool) -> None:
    """Copy ``src`` to ``dst``, into it if it is a directory; symlinks are recreated."""
    target = _join(dst, os.path.basename(src)) if os.path.isdir(dst) else dst
    st = os.lstat(src)

    if os.path.islink(src):
        try:
            os.symlink(os.readlink(src), target)
        except FileExistsError:
            return
    else:
        shutil.copy(src, target)

    if keep_mtime:
        _set_mtime(target, st)


def _mdir(directory: str, name: str, mode: int) -> str:
    """Create ``directory/name`` with ``mode``, tolerating an existing one."""
    path = _join(directory, name)
    try:
        os.mkdir(path, mode & 0o7777)
    except FileExistsError:
        pass
    return path


def _prune(dst: str, keep: List[str]) -> None:
    """Remove entries of ``dst`` that are not in ``keep``; failures are ignored."""
    wanted = set(keep)
    for name in _list(dst):
        if name in wanted:
            continue
        try:
            erase(_join(dst, name))
        except OSError:
            pass


def rsync(
    src: str,
    dst: str,
    options: SyncOption = SyncOption.NONE,
    filter: Optional[Filter] = None,
) -> int:
    """Copy ``src`` to ``dst``, recursing into directories.

    A source directory without a trailing slash is itself recreated inside
    ``dst``; with a trailing slash only its contents are copied.  With
    SyncOption.DELETE, entries of the destination missing from the source
    are removed; with SyncOption.KEEP_MTIME, modification times are kept.
    ``filter``, when given, is called with each source entry name and the
    entry is skipped when it returns false.

    Returns the number of entries that could not be copied.  Raises
    OSError when ``src`` is missing or a single file cannot be copied.
    """
    options = SyncOption(options)
    delete = SyncOption.DELETE in options
    keep_mtime = SyncOption.KEEP_MTIME in options
    top_stat: Optional[os.stat_result] = None

    if not os.path.exists(dst) and fisslashdir(dst):
        makedir(dst, 0o755)

    if not os.path.isdir(src):
        if not os.path.exists(src):
            raise FileNotFoundError(2, "No such file or directory", src)
        _copy(src, dst, keep_mtime)
        return 0

    if not fisslashdir(src):
        top_stat = os.stat(src)
        dst = _mdir(dst, os.path.basename(src), top_stat.st_mode)

    files = _list(src, filter)
    failures = 0
    for name in files:
        source = _join(src, name)
        if os.path.isdir(source):
            source += "/"
            try:
                sub_stat = os.stat(source)
                subdir = _mdir(dst, name, sub_stat.st_mode)
            except OSError:
                failures += 1
                continue

            try:
                rsync(source, subdir, options, filter)
            except OSError:
                pass
            if keep_mtime:
                _set_mtime(subdir, sub_stat)
            continue

        try:
            _copy(source, dst, keep_mtime)
        except OSError:
            failures += 1

    if keep_mtime and top_stat is not None:
        _set_mtime(dst, top_stat)

    if delete:
        _prune(dst, files)

    return failures