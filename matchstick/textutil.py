"""ASCII string helpers: classification, comparison, searching and splitting."""

from __future__ import annotations

import string

__all__ = [
    "str_is_alpha",
    "str_is_num",
    "str_is_lower",
    "str_is_upper",
    "str_is_printable",
    "count_words",
    "str_to_word_array",
    "strcmp",
    "strncmp",
    "strstr",
    "revstr",
    "strupcase",
    "strlowcase",
]

_ALPHA = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def str_is_alpha(text: str) -> bool:
    """True if every character is an ASCII letter; the empty string qualifies."""
    return all(char in _ALPHA for char in text)


def str_is_num(text: str) -> bool:
    """True if every character is an ASCII digit; the empty string qualifies."""
    return all(char in _DIGITS for char in text)


def str_is_lower(text: str) -> bool:
    """True if every character is an ASCII lowercase letter; the empty string qualifies."""
    return all(char in _LOWER for char in text)


def str_is_upper(text: str) -> bool:
    """True if every character is an ASCII uppercase letter; the empty string qualifies."""
    return all(char in _UPPER for char in text)


def str_is_printable(text: str) -> bool:
    """True if no character is an ASCII control code below space or outside ASCII."""
    return all(32 <= ord(char) < 128 for char in text)


def str_to_word_array(text: str) -> list[str]:
    """Split *text* into the non-empty runs of characters between newlines."""
    return [word for word in text.split("\n") if word]


def count_words(text: str) -> int:
    """Count the newline-separated words of *text*."""
    return sum(1 for word in text.split("\n") if word)


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings, returning the code-point difference at the first mismatch.

    The end of the shorter string counts as a character of code 0.
    """
    for a, b in zip(s1 + "\0", s2 + "\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters, returning 0, 32 or -32."""
    p = 0
    while p < n and p < len(s1) and p < len(s2) and s1[p] == s2[p]:
        p += 1
    c1 = s1[p] if p < len(s1) else ""
    c2 = s2[p] if p < len(s2) else ""
    if (not c1 and not c2) or p == n:
        return 0
    return 32 if c1 > c2 else -32


def strstr(haystack: str, needle: str) -> str | None:
    """Return the tail of *haystack* starting at the first *needle*, or None."""
    index = haystack.find(needle)
    if index < 0:
        return None
    return haystack[index:]


def revstr(text: str) -> str:
    """Return *text* reversed."""
    return text[::-1]


def strupcase(text: str) -> str:
    """Uppercase the ASCII letters of *text*, leaving everything else alone."""
    return text.translate(_TO_UPPER)


def strlowcase(text: str) -> str:
    """Lowercase the ASCII letters of *text*, leaving everything else alone."""
    return text.translate(_TO_LOWER)