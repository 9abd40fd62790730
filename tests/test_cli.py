import io

import pytest

from matchstick.cli import main, parse_args
from matchstick.game import Outcome


def test_parse_args_valid():
    assert parse_args(["3", "5"]) == (3, 5)
    assert parse_args(["99", "2147483647"]) == (99, 2147483647)


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["3"],
        ["3", "5", "7"],
        ["1", "5"],
        ["100", "5"],
        ["a", "5"],
        ["3", "-5"],
        ["3", "0"],
        ["3", ""],
        ["", "3"],
        ["3", "2147483648"],
        ["3", "00000000001"],
    ],
)
def test_parse_args_rejects(argv):
    with pytest.raises(ValueError):
        parse_args(argv)


def test_main_bad_arguments_returns_error_status(capsys):
    assert main(["1", "2"]) == 84
    assert capsys.readouterr().out == ""


def test_main_plays_game(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n"))
    assert main(["2", "5"]) == Outcome.PLAYER_WINS
    assert "I lost... snif..." in capsys.readouterr().out


def test_main_quits_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["4", "3"]) == Outcome.QUIT
    assert capsys.readouterr().out.endswith("Line: ")