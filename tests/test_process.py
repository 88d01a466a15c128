import time

import pytest

from frogkit.process import popenf, runbg, systemf


@pytest.mark.parametrize(
    "cmd, rc",
    [
        ("/app/enoent", 127),
        ("false", 1),
        ("true", 0),
    ],
)
def test_systemf_exit_codes(cmd, rc):
    assert systemf("%s", cmd) == rc


@pytest.mark.parametrize("cmd", ["kill -9 $$", "kill -QUIT $$", "kill -INT $$"])
def test_systemf_signalled(cmd, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(InterruptedError):
        systemf("%s", cmd)


def test_systemf_formats_command(tmp_path):
    target = tmp_path / "out.txt"
    assert systemf("echo %s > %s", "hello", target) == 0
    assert target.read_text() == "hello\n"


def test_systemf_exit_value():
    assert systemf("exit %d", 42) == 42


def test_popenf_read():
    with popenf("r", "echo %s", "hi") as fp:
        assert fp.read() == "hi\n"


def test_popenf_write(tmp_path):
    target = tmp_path / "written.txt"
    fp = popenf("we", "cat > %s", target)
    fp.write("data\n")
    assert fp.close() is None
    assert target.read_text() == "data\n"


def test_popenf_exit_status():
    fp = popenf("r", "exit %d", 3)
    fp.read()
    assert fp.close() == 3 << 8


def test_popenf_bad_mode():
    with pytest.raises(ValueError):
        popenf("x", "true")


def test_runbg_creates_file_later(tmp_path):
    target = tmp_path / "runbg.txt"
    cmd = ["sh", "-c", f"echo 'hello world' > {target}"]

    assert runbg(cmd, 500000) is None
    assert not target.exists()

    deadline = time.monotonic() + 10
    while time.monotonic() < deadline:
        if target.exists() and target.read_text() == "hello world\n":
            break
        time.sleep(0.05)

    assert target.read_text() == "hello world\n"


def test_runbg_empty_command():
    with pytest.raises(ValueError):
        runbg([], 0)