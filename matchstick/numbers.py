"""Integer helpers: lenient string-to-number parsing and small arithmetic routines."""

from __future__ import annotations

import math

__all__ = [
    "getnbr",
    "is_prime",
    "find_prime_sup",
    "compute_square_root",
    "compute_power",
]

_DIGITS = frozenset("0123456789")


def getnbr(text: str) -> int:
    """Parse a leading integer from *text*.

    Any run of leading ``+`` and ``-`` signs is consumed, each ``-`` flipping
    the sign. Digits are then read until the first non-digit character.
    Text without leading digits yields 0.
    """
    sign = 1
    rest = text
    while rest and rest[0] in "+-":
        if rest[0] == "-":
            sign = -sign
        rest = rest[1:]

    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + (ord(char) - ord("0"))
    return value * sign


def is_prime(nb: int) -> bool:
    """Tell whether *nb* is prime.

    Numbers below 3 are never reported as prime; 2 is rejected because it
    divides itself before any candidate divisor is exhausted.
    """
    if nb < 3:
        return False
    return all(nb % divisor for divisor in range(2, math.isqrt(nb) + 1))


def find_prime_sup(nb: int) -> int:
    """Return the smallest number at or above *nb* that :func:`is_prime` accepts."""
    while not is_prime(nb):
        nb += 1
    return nb


def compute_square_root(nb: int) -> int:
    """Return the integer square root of *nb* if it is a perfect square, else 0."""
    if nb <= 0:
        return 0
    root = math.isqrt(nb)
    return root if root * root == nb else 0


def compute_power(nb: int, p: int) -> int:
    """Raise *nb* to the power *p*; negative exponents give 0."""
    if p < 0:
        return 0
    result = 1
    for _ in range(p):
        result *= nb
    return result