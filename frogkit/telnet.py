"""A small expect-style client for driving daemons over telnet."""

from __future__ import annotations

import codecs
import errno
import ipaddress
import select
import socket
import time
from typing import IO, Optional, Sequence, Union

__all__ = ["Telnet", "telnet_session"]

BUFSIZ = 8192
POLL_TIMEOUT = 3.0
CONNECT_RETRIES = 10

Address = Union[str, int]


class Telnet:
    """A connected telnet session that runs expect/response scripts.

    ``addr`` is a host name or dotted IPv4 address, or an IPv4 address as
    an integer in host byte order; ``port`` is a port number.  Connecting
    is retried up to ten times, a second apart, while it times out.
    """

    def __init__(self, addr: Address, port: int) -> None:
        host = str(ipaddress.IPv4Address(addr)) if isinstance(addr, int) else addr
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        retries = CONNECT_RETRIES
        while True:
            try:
                self._sock.connect((host, port))
                return
            except OSError as exc:
                if exc.errno == errno.ETIMEDOUT and retries > 0:
                    retries -= 1
                    time.sleep(1)
                    continue
                self._sock.close()
                raise

    def close(self) -> None:
        """Close the connection."""
        self._sock.close()

    def __enter__(self) -> "Telnet":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _readable(self, timeout: float) -> bool:
        ready, _, _ = select.select([self._sock], [], [], timeout)
        return bool(ready)

    def _wait_for(self, needle: bytes) -> None:
        received = b""
        while True:
            if not self._readable(POLL_TIMEOUT):
                raise TimeoutError(errno.ETIMEDOUT, f"timed out waiting for {needle!r}")
            chunk = self._sock.recv(BUFSIZ)
            if not chunk:
                raise ConnectionError(
                    errno.ENOMSG, f"connection closed while waiting for {needle!r}"
                )
            received += chunk
            if needle in received:
                return

    def _drain(self) -> None:
        while self._readable(0):
            if not self._sock.recv(BUFSIZ):
                return

    def expect(self, script: Sequence[str], output: Optional[IO[str]] = None) -> None:
        """Run ``script`` and write the output of its last command to ``output``.

        ``script`` holds pairs of an expected string and a response to send,
        for example ``["ogin: ", "admin\\n", "> ", "show\\n"]``.  An empty
        expected string discards any pending input instead of waiting.  After
        the last response everything up to the last expected string (the
        returning prompt) is collected, less the first line, which is only
        the echo of the command.

        Raises ValueError for a malformed script, TimeoutError when the
        server goes quiet, ConnectionError when it hangs up, and OSError
        (ENOSPC) when ``output`` cannot be written.
        """
        items = list(script)
        if not items or len(items) % 2:
            raise ValueError("script must hold expect/response pairs")

        for expected, response in zip(items[::2], items[1::2]):
            if expected:
                self._wait_for(expected.encode())
            else:
                self._drain()
            if response:
                self._sock.sendall(response.encode())

        prompt = items[-2]
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        first = True
        failure: Optional[OSError] = None

        while True:
            if not self._readable(POLL_TIMEOUT):
                raise TimeoutError(errno.ETIMEDOUT, "timed out waiting for command output")

            # Long outputs stall unless the server gets something back.
            self._sock.sendall(b"\n")
            chunk = self._sock.recv(BUFSIZ)
            if not chunk:
                raise ConnectionError(errno.ENOMSG, "connection closed before the prompt")
            text = decoder.decode(chunk)

            if first:
                first = False
                newline = text.find("\n")
                if newline >= 0:
                    text = text[newline + 1:]

            end = text.find(prompt)
            done = end >= 0
            if done:
                text = text[:end]
                newline = text.rfind("\n")
                if newline >= 0:
                    text = text[: newline + 1]

            if output is not None and failure is None and text:
                try:
                    output.write(text)
                except OSError as exc:
                    failure = exc

            if done:
                break

        if failure is not None:
            raise OSError(errno.ENOSPC, "could not write session output") from failure


def telnet_session(
    addr: Address, port: int, script: Sequence[str], output: Optional[IO[str]] = None
) -> None:
    """Connect, run ``script`` as Telnet.expect() does, and disconnect."""
    with Telnet(addr, port) as session:
        session.expect(script, output)