"""Run commands: formatted system() and popen(), and detached background runs."""

from __future__ import annotations

import errno
import os
import subprocess
import time
from typing import IO, Sequence

__all__ = ["systemf", "popenf", "runbg"]


def _command(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


def systemf(fmt: str, *args: object) -> int:
    """Run ``fmt % args`` through the shell and return its exit status.

    Raises InterruptedError if the command is killed by a signal.
    """
    cmd = _command(fmt, args)
    rc = subprocess.run(cmd, shell=True).returncode
    if rc < 0:
        raise InterruptedError(errno.EINTR, f"command killed by signal {-rc}", cmd)
    return rc


def popenf(mode: str, fmt: str, *args: object) -> IO[str]:
    """Open a pipe to or from the shell command ``fmt % args``.

    ``mode`` is "r" or "w", optionally with "e" (descriptors are never
    inherited anyway).  Closing the stream returns the command's status
    as os.popen() does.
    """
    kind = mode.replace("e", "")
    if kind not in ("r", "w"):
        raise ValueError(f"invalid mode {mode!r}")
    return os.popen(_command(fmt, args), kind)


def runbg(cmd: Sequence[str], delay: int) -> None:
    """Run ``cmd`` detached in the background after ``delay`` microseconds.

    The command runs in a new session, reparented to init, with all
    descriptors closed, so its result cannot be collected.  Raises
    OSError if detaching fails and InterruptedError if the helper
    process is killed.
    """
    argv = list(cmd)
    if not argv:
        raise ValueError("cmd must not be empty")

    pid = os.fork()
    if pid == 0:
        code = 1
        try:
            try:
                os.setsid()
                grandchild = os.fork()
            except OSError as exc:
                code = exc.errno or 1
            else:
                if grandchild > 0:
                    code = 0
                else:
                    try:
                        maxfd = os.sysconf("SC_OPEN_MAX")
                    except (OSError, ValueError):
                        maxfd = -1
                    if maxfd < 0:
                        maxfd = 8192
                    os.closerange(0, maxfd)
                    time.sleep(max(delay, 0) / 1_000_000)
                    try:
                        os.execvp(argv[0], argv)
                    except OSError as exc:
                        code = exc.errno or 127
        finally:
            os._exit(code)

    _, status = os.waitpid(pid, 0)
    if os.WIFEXITED(status):
        code = os.WEXITSTATUS(status)
        if code:
            raise OSError(code, os.strerror(code))
        return
    if os.WIFSIGNALED(status):
        raise InterruptedError(errno.EINTR, "background helper was killed")
    raise OSError(errno.ECHILD, "background helper did not exit")