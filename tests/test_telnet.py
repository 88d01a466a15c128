import contextlib
import errno
import io
import socket
import threading

import pytest

from frogkit.telnet import Telnet, telnet_session


@contextlib.contextmanager
def serve(handler):
    srv = socket.create_server(("127.0.0.1", 0))
    port = srv.getsockname()[1]

    def run():
        conn, _ = srv.accept()
        with conn:
            handler(conn)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    try:
        yield port
    finally:
        thread.join(timeout=10)
        srv.close()


def _drain(conn):
    try:
        while conn.recv(1024):
            pass
    except OSError:
        pass


def shell(conn):
    conn.sendall(b"> ")
    data = b""
    while b"show\n" not in data:
        chunk = conn.recv(1024)
        if not chunk:
            return
        data += chunk
    conn.sendall(b"show\nline1\nline2\n> ")
    _drain(conn)


def hang_up(conn):
    return None


def silent(conn):
    _drain(conn)


def test_session_collects_command_output():
    output = io.StringIO()
    with serve(shell) as port:
        telnet_session("127.0.0.1", port, ["> ", "show\n"], output)
    assert output.getvalue() == "line1\nline2\n"


def test_context_manager_and_integer_address():
    output = io.StringIO()
    with serve(shell) as port:
        with Telnet(0x7F000001, port) as session:
            session.expect(["> ", "show\n"], output)
    assert output.getvalue().splitlines() == ["line1", "line2"]


def test_odd_script_is_rejected():
    with serve(silent) as port:
        with Telnet("127.0.0.1", port) as session:
            with pytest.raises(ValueError):
                session.expect(["> "], None)


def test_empty_script_is_rejected():
    with serve(silent) as port:
        with Telnet("127.0.0.1", port) as session:
            with pytest.raises(ValueError):
                session.expect([], None)


def test_hang_up_while_waiting():
    with serve(hang_up) as port:
        with pytest.raises(ConnectionError):
            telnet_session("127.0.0.1", port, ["> ", "show\n"], None)


def test_silent_server_times_out():
    with serve(silent) as port:
        with pytest.raises(TimeoutError):
            telnet_session("127.0.0.1", port, ["> ", "show\n"], None)


def test_refused_connection():
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(ConnectionRefusedError):
        Telnet("127.0.0.1", port)


class BrokenOutput:
    def write(self, text):
        raise OSError(errno.EIO, "broken")


def test_unwritable_output_reports_enospc():
    with serve(shell) as port:
        with pytest.raises(OSError) as info:
            telnet_session("127.0.0.1", port, ["> ", "show\n"], BrokenOutput())
    assert info.value.errno == errno.ENOSPC