"""Schoolbook arithmetic on decimal digit tuples."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import zip_longest

from .digits import Digits, compare, digits_to_int, format_digits, strip_leading_zeros


@dataclass(frozen=True)
class Difference:
    """Result of a subtraction: a magnitude and whether it is negative."""

    negative: bool
    digits: Digits

    def __str__(self) -> str:
        sign = "-" if self.negative else ""
        return sign + format_digits(self.digits)


def add(first: Iterable[int], second: Iterable[int]) -> Digits:
    """Add two digit sequences.

    Leading zeros of the longer operand are kept in the result.
    """
    result: list[int] = []
    carry = 0
    for a, b in zip_longest(reversed(tuple(first)), reversed(tuple(second)), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return tuple(reversed(result))


def subtract(first: Iterable[int], second: Iterable[int]) -> Difference:
    """Subtract ``second`` from ``first``, giving a signed magnitude."""
    minuend = strip_leading_zeros(first)
    subtrahend = strip_leading_zeros(second)
    negative = compare(minuend, subtrahend) < 0
    if negative:
        minuend, subtrahend = subtrahend, minuend

    result: list[int] = []
    borrow = 0
    for a, b in zip_longest(reversed(minuend), reversed(subtrahend), fillvalue=0):
        diff = a - b - borrow
        borrow = 1 if diff < 0 else 0
        result.append(diff + 10 * borrow)
    return Difference(negative, strip_leading_zeros(reversed(result)))


def multiply(first: Iterable[int], second: Iterable[int]) -> Digits:
    """Multiply two digit sequences; an empty operand counts as zero."""
    left = tuple(first)
    right = tuple(second)
    if not left or not right:
        return (0,)

    result = [0] * (len(left) + len(right))
    for i, a in enumerate(reversed(left)):
        for j, b in enumerate(reversed(right)):
            carry, result[i + j] = divmod(a * b + result[i + j], 10)
            result[i + j + 1] += carry
    return strip_leading_zeros(reversed(result))


def divide(dividend: Iterable[int], divisor: Iterable[int]) -> Digits:
    """Integer quotient of two digit sequences by long division.

    Raises ZeroDivisionError if the divisor is empty or zero.
    """
    divisor_digits = tuple(divisor)
    divisor_value = digits_to_int(divisor_digits)
    if not divisor_digits or divisor_value == 0:
        raise ZeroDivisionError("division by zero is not allowed")

    dividend_digits = tuple(dividend)
    if not dividend_digits:
        return ()

    quotient: list[int] = []
    remainder = 0
    for digit in dividend_digits:
        remainder = remainder * 10 + digit
        step, remainder = divmod(remainder, divisor_value)
        quotient.append(step)
    return strip_leading_zeros(quotient)