"""Decimal digit sequences used as arbitrary precision numbers.

A number is a tuple of ints from 0 to 9, most significant digit first.
"""

from __future__ import annotations

from collections.abc import Iterable

Digits = tuple[int, ...]


def to_digits(text: str) -> Digits:
    """Turn a string of decimal digits into a digit tuple.

    Raises ValueError if the text holds anything other than ASCII digits.
    """
    if not all("0" <= ch <= "9" for ch in text):
        raise ValueError(f"not a string of decimal digits: {text!r}")
    return tuple(ord(ch) - ord("0") for ch in text)


def strip_leading_zeros(digits: Iterable[int]) -> Digits:
    """Drop leading zeros, leaving a single zero if nothing else remains."""
    values = tuple(digits)
    for position, digit in enumerate(values):
        if digit != 0:
            return values[position:]
    return (0,)


def compare(first: Iterable[int], second: Iterable[int]) -> int:
    """Compare two digit sequences by value: -1, 0 or 1."""
    left = strip_leading_zeros(first)
    right = strip_leading_zeros(second)
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    if left == right:
        return 0
    return -1 if left < right else 1


def digits_to_int(digits: Iterable[int]) -> int:
    """Return the value of a digit sequence; an empty one is zero."""
    number = 0
    for digit in digits:
        number = number * 10 + digit
    return number


def format_digits(digits: Iterable[int]) -> str:
    """Render a digit sequence as text, digit by digit."""
    return "".join(str(digit) for digit in digits)