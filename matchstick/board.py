"""The matchstick pyramid: match counts per line, text rendering and the AI's move."""

from __future__ import annotations

__all__ = ["Board"]


class Board:
    """A pyramid of matches whose line *n* (1-based) starts with ``2n - 1`` matches."""

    def __init__(self, lines: int) -> None:
        if lines < 1:
            raise ValueError("a board needs at least one line")
        self.counts: list[int] = [2 * index + 1 for index in range(lines)]
        self.width: int = self.counts[-1]

    @property
    def lines(self) -> int:
        """Number of lines on the board."""
        return len(self.counts)

    def render(self) -> str:
        """Return the board framed by stars, one text line per board line."""
        border = "*" * (self.width + 2)
        rows = [border]
        for index, count in enumerate(self.counts):
            indent = self.lines - index - 1
            row = (" " * indent + "|" * count).ljust(self.width)
            rows.append(f"*{row}*")
        rows.append(border)
        return "\n".join(rows) + "\n"

    def remove(self, line: int, matches: int) -> None:
        """Take *matches* matches from the 1-based *line*."""
        if not 1 <= line <= self.lines:
            raise ValueError(f"line {line} is out of range")
        if matches < 1:
            raise ValueError("at least one match must be removed")
        if matches > self.counts[line - 1]:
            raise ValueError(f"line {line} holds fewer than {matches} matches")
        self.counts[line - 1] -= matches

    def ai_move(self) -> tuple[int, int]:
        """Take one match from the first non-empty line.

        Returns the 1-based line and the number of matches taken, or
        ``(0, 0)`` when the board is already empty.
        """
        for index, count in enumerate(self.counts):
            if count > 0:
                self.counts[index] -= 1
                return index + 1, 1
        return 0, 0

    def is_empty(self) -> bool:
        """True once every line has been emptied."""
        return not any(self.counts)