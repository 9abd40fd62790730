"""The interactive matchstick game between a player and a simple AI."""

from __future__ import annotations

import enum
import sys
from typing import Callable, TextIO

from matchstick.board import Board
from matchstick.numbers import getnbr
from matchstick.textutil import str_is_num

__all__ = ["InvalidMove", "Outcome", "validate_line", "validate_matches", "play"]


class InvalidMove(ValueError):
    """Raised when the player's input does not describe a legal move."""


class Outcome(enum.IntEnum):
    """How a game ended; the value is the program's exit status."""

    QUIT = 0
    PLAYER_WINS = 1
    AI_WINS = 2


def _field(text: str) -> str:
    """The part of an input line before its newline or NUL."""
    return text.split("\n", 1)[0].split("\0", 1)[0]


def _number(text: str) -> int:
    field = _field(text)
    if not str_is_num(field):
        raise InvalidMove("invalid input (positive number expected)")
    return getnbr(field)


def validate_line(text: str, board: Board) -> int:
    """Parse the player's line choice and check it against *board*."""
    line = _number(text)
    if not 1 <= line <= board.lines:
        raise InvalidMove("this line is out of range")
    if board.counts[line - 1] == 0:
        raise InvalidMove("not enough numbers on this line")
    return line


def validate_matches(text: str, board: Board, line: int, max_matches: int) -> int:
    """Parse the number of matches to take from *line* and check it."""
    matches = _number(text)
    if matches <= 0:
        raise InvalidMove("you have to remove at least one match")
    if matches > max_matches:
        raise InvalidMove(f"you cannot remove more than {max_matches} matches per turn")
    if not 1 <= line <= board.lines:
        raise InvalidMove("this line is out of range")
    if matches > board.counts[line - 1]:
        raise InvalidMove("not enough numbers on this line")
    return matches


def _ask_line(board: Board, stdin: TextIO, write: Callable[[str], object]) -> int | None:
    while True:
        write("Line: ")
        text = stdin.readline()
        if not text:
            return None
        try:
            return validate_line(text, board)
        except InvalidMove as exc:
            write(f"Error: {exc}\n")


def _read_move(
    board: Board, max_matches: int, stdin: TextIO, write: Callable[[str], object]
) -> tuple[int, int] | None:
    line = _ask_line(board, stdin, write)
    if line is None:
        return None
    while True:
        write("Matches: ")
        text = stdin.readline()
        if not text:
            return None
        try:
            return line, validate_matches(text, board, line, max_matches)
        except InvalidMove as exc:
            write(f"Error: {exc}\n")
        new_line = _ask_line(board, stdin, write)
        if new_line is not None:
            line = new_line


def play(
    lines: int,
    max_matches: int,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> Outcome:
    """Run a game on a board of *lines* lines until someone wins or input ends."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    write = stdout.write
    board = Board(lines)

    while True:
        write(board.render())
        if board.is_empty():
            write("I lost... snif... but I'll get you next time!!\n")
            return Outcome.PLAYER_WINS
        write("\nYour turn:\n")
        move = _read_move(board, max_matches, stdin, write)
        if move is None:
            return Outcome.QUIT
        line, matches = move
        write(f"Player removed {matches} match(es) from line {line}\n")
        board.remove(line, matches)
        write(board.render())
        if board.is_empty():
            write("You lost, too bad\n")
            return Outcome.AI_WINS
        write("\nAI's turn...\n")
        ai_line, ai_matches = board.ai_move()
        write(f"AI removed {ai_matches} match(es) from line {ai_line}\n")