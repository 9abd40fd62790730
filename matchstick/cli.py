"""Command-line entry point: ``matchstick LINES MAX_MATCHES``."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from matchstick.game import play
from matchstick.numbers import getnbr
from matchstick.textutil import str_is_num

__all__ = ["parse_args", "main"]

_ERROR_STATUS = 84
_MAX_INT = 2147483647


def parse_args(argv: Sequence[str]) -> tuple[int, int]:
    """Return ``(lines, max_matches)`` from the two arguments, or raise ValueError."""
    if len(argv) != 2:
        raise ValueError("expected exactly two arguments: LINES MAX_MATCHES")
    lines_text, max_text = argv
    if not (str_is_num(lines_text) and str_is_num(max_text)):
        raise ValueError("arguments must be positive numbers")
    lines = getnbr(lines_text)
    if not 2 <= lines <= 99:
        raise ValueError("the number of lines must be between 2 and 99")
    max_matches = getnbr(max_text)
    if max_matches < 1 or max_matches > _MAX_INT or len(max_text) > 10:
        raise ValueError("the maximum number of matches is out of range")
    return lines, max_matches


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game and return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        lines, max_matches = parse_args(args)
    except ValueError:
        return _ERROR_STATUS
    return int(play(lines, max_matches))


if __name__ == "__main__":
    sys.exit(main())