import io

import pytest

from matchstick.board import Board
from matchstick.game import InvalidMove, Outcome, play, validate_line, validate_matches


def run(lines, max_matches, text):
    out = io.StringIO()
    result = play(lines, max_matches, io.StringIO(text), out)
    return result, out.getvalue()


def test_validate_line_accepts_valid_line():
    board = Board(4)
    assert validate_line("3\n", board) == 3
    assert validate_line("4", board) == 4


def test_validate_line_rejects_empty_line():
    board = Board(2)
    board.remove(1, 1)
    with pytest.raises(InvalidMove, match="not enough numbers on this line"):
        validate_line("1\n", board)


def test_validate_matches_accepts_valid_count():
    board = Board(3)
    assert validate_matches("2\n", board, 3, 4) == 2


@pytest.mark.parametrize(
    "text, message",
    [
        ("x\n", "invalid input"),
        ("0\n", "you have to remove at least one match"),
        ("\n", "you have to remove at least one match"),
        ("3\n", "you cannot remove more than 2 matches per turn"),
        ("2\n", "not enough numbers on this line"),
    ],
)
def test_validate_matches_errors(text, message):
    board = Board(3)
    line = 1
    with pytest.raises(InvalidMove, match=message):
        validate_matches(text, board, line, 2)


def test_immediate_end_of_input_quits():
    result, output = run(3, 2, "")
    assert result is Outcome.QUIT
    assert output.endswith("Line: ")
    assert Board(3).render() in output


def test_player_takes_last_match_and_loses():
    result, output = run(2, 5, "1\n1\n2\n2\n")
    assert result is Outcome.AI_WINS
    assert output.endswith("You lost, too bad\n")
    assert "Player removed 1 match(es) from line 1\n" in output
    assert "AI removed 1 match(es) from line 2\n" in output
    assert "Player removed 2 match(es) from line 2\n" in output


def test_ai_takes_last_match_and_player_wins():
    result, output = run(2, 5, "2\n3\n")
    assert result is Outcome.PLAYER_WINS
    assert output.endswith("I lost... snif... but I'll get you next time!!\n")
    assert "\nAI's turn...\n" in output


def test_bad_line_input_reprompts():
    result, output = run(3, 2, "z\n9\n")
    assert result is Outcome.QUIT
    assert "Error: invalid input (positive number expected)\n" in output
    assert "Error: this line is out of range\n" in output
    assert output.count("Line: ") == 3


def test_bad_matches_reprompts_for_line_then_matches():
    result, output = run(3, 2, "3\n5\n2\n1\n")
    assert result is Outcome.QUIT
    assert "Error: you cannot remove more than 2 matches per turn\n" in output
    assert "Player removed 1 match(es) from line 2\n" in output
    assert output.count("Your turn:") == 2


@pytest.mark.parametrize(
    "lines, max_matches, text, status",
    [
        (3, 2, "", 0),
        (2, 5, "2\n3\n", 1),
        (2, 5, "1\n1\n2\n2\n", 2),
    ],
)
def test_play_results_are_exit_statuses(lines, max_matches, text, status):
    result, _ = run(lines, max_matches, text)
    assert int(result) == status