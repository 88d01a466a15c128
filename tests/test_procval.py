import pytest

from frogkit.procval import readdf, readllf, readsnf, writedf, writellf, writesf


def test_writesf_readsnf_round_trip(tmp_path):
    writesf("hello", "w", "%s/%s", str(tmp_path), "value")
    assert (tmp_path / "value").read_text() == "hello\n"
    assert readsnf("%s/%s", str(tmp_path), "value") == "hello"


def test_readsnf_first_line_only(tmp_path):
    writesf("first\nsecond", "w", "%s", str(tmp_path / "multi"))
    assert readsnf("%s", str(tmp_path / "multi")) == "first"


def test_readsnf_without_trailing_newline(tmp_path):
    (tmp_path / "raw").write_text("abc")
    assert readsnf(str(tmp_path / "raw")) == "abc"


def test_readsnf_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        readsnf("%s/missing", str(tmp_path))


def test_readsnf_empty_file(tmp_path):
    (tmp_path / "empty").write_text("")
    with pytest.raises(EOFError):
        readsnf(str(tmp_path / "empty"))


def test_writesf_append(tmp_path):
    target = str(tmp_path / "log")
    writesf("a", "w", target)
    writesf("b", "a", target)
    assert readsnf(target) == "a"
    assert (tmp_path / "log").read_text() == "a\nb\n"


@pytest.mark.parametrize("value", [0, 42, -7, 0x7FFFFFFFFFFFFFFF, -0x7FFFFFFFFFFFFFFF - 1])
def test_writellf_readllf_round_trip(tmp_path, value):
    target = str(tmp_path / "ll")
    writellf(value, "w", target)
    assert readllf(target) == value


@pytest.mark.parametrize("value", [0, 1, -1, 0x7FFFFFFF, -0x7FFFFFFF - 1])
def test_writedf_readdf_round_trip(tmp_path, value):
    target = str(tmp_path / "d")
    writedf(value, "w", target)
    assert readdf(target) == value


def test_readllf_hex(tmp_path):
    (tmp_path / "hex").write_text("0x10\n")
    assert readllf(str(tmp_path / "hex")) == 16


def test_readllf_ignores_trailing_text(tmp_path):
    (tmp_path / "mixed").write_text("  12abc\n")
    assert readllf(str(tmp_path / "mixed")) == 12


def test_readllf_no_digits_is_zero(tmp_path):
    (tmp_path / "text").write_text("abc\n")
    assert readllf(str(tmp_path / "text")) == 0


def test_readllf_overflow(tmp_path):
    (tmp_path / "big").write_text("99999999999999999999\n")
    with pytest.raises(OverflowError):
        readllf(str(tmp_path / "big"))


def test_readdf_out_of_int_range(tmp_path):
    target = str(tmp_path / "wide")
    writellf(0x7FFFFFFF + 1, "w", target)
    assert readllf(target) == 0x7FFFFFFF + 1
    with pytest.raises(OverflowError):
        readdf(target)


def test_writedf_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        writedf(1, "w", "%s/nodir/file", str(tmp_path))