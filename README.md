# matchstick

A small terminal game. Matches are laid out in a pyramid: line *n*
starts with `2n - 1` matches. You and the computer take turns removing
matches from a single line. Whoever takes the last match loses.

## Installing

    pip install .

## Playing

    matchstick LINES MAX_MATCHES

- `LINES` is the number of lines in the pyramid, from 2 to 99.
- `MAX_MATCHES` is the most matches that can be removed in one turn:
  at least 1, at most 2147483647, and no more than 10 digits.

Both arguments must consist of digits only.

Example:

    matchstick 4 3

The board looks like this:

    *********
    *   |   *
    *  |||  *
    * ||||| *
    *|||||||*
    *********

On your turn you are asked for a line (`Line: `) and then a number of
matches (`Matches: `). Bad input is reported with an `Error: ...` message:
non-numeric input, a line out of range, a line that is already empty,
zero matches, more than `MAX_MATCHES`, or more matches than the line holds.
A rejected line is asked for again; after a rejected number of matches
you are asked for the line again and then for the matches.

The AI always removes one match from the first line that still has any.

### Exit status

- `0` – input ended before the game finished
- `1` – the AI took the last match, so you won
- `2` – you took the last match, so you lost
- `84` – invalid command-line arguments

## Using it as a library

```python
from matchstick.board import Board

board = Board(4)
board.remove(4, 3)
print(board.render(), end="")
print(board.ai_move())   # (1, 1)
print(board.is_empty())  # False
```

- `matchstick.board.Board(lines)` holds the match counts (`counts`),
  renders the framed pyramid (`render()`), removes matches
  (`remove(line, matches)`, raising `ValueError` on an illegal move) and
  plays the AI's move (`ai_move()`).
- `matchstick.game.validate_line(text, board)` and
  `matchstick.game.validate_matches(text, board, line, max_matches)` parse
  player input and raise `InvalidMove` with the error message.
- `matchstick.game.play(lines, max_matches, stdin, stdout)` runs a full
  game on any pair of text streams (standard input and output by default)
  and returns an `Outcome` (`QUIT`, `PLAYER_WINS`, `AI_WINS`).
- `matchstick.cli.parse_args(argv)` checks the two command-line arguments
  and `matchstick.cli.main(argv=None)` runs the command, returning the exit
  status.

The package also ships small helpers in `matchstick.numbers` (lenient
integer parsing with `getnbr`, primes, integer roots and powers) and
`matchstick.textutil` (ASCII classification, comparison, search and
case conversion).

## Running the tests

    pip install .[test]
    pytest