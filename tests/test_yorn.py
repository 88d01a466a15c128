import io
import sys

import pytest

from frogkit.yorn import yorn


@pytest.fixture
def stdin(monkeypatch):
    def feed(text):
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return feed


def test_affirmative(stdin, capsys):
    stdin("Y")
    assert yorn("Do you really wanna do this (y/N)? ") is True
    captured = capsys.readouterr()
    assert captured.err == "Do you really wanna do this (y/N)? "
    assert captured.out == "Y\n"


def test_lower_case_yes(stdin):
    stdin("y")
    assert yorn("Continue? ") is True


@pytest.mark.parametrize("answer", ["n", "N", "x", "\n"])
def test_other_answers_are_no(stdin, answer):
    stdin(answer)
    assert yorn("Continue? ") is False


def test_end_of_input_is_no(stdin, capsys):
    stdin("")
    assert yorn("Continue? ") is False
    assert capsys.readouterr().out == "\n"


def test_only_first_key_counts(stdin):
    stdin("no, yes")
    assert yorn("Continue? ") is False


def test_formatted_prompt(stdin, capsys):
    stdin("Y")
    assert yorn("Remove %s (%d files)? ", "cache", 3) is True
    assert capsys.readouterr().err == "Remove cache (3 files)? "