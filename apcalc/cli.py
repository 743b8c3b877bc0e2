"""Command line front end: ``apcalc OPERAND OPERATOR OPERAND``."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .digits import Digits, format_digits, to_digits
from .operations import add, divide, multiply, subtract

_OPERATORS = frozenset("+-xX/")


class UsageError(Exception):
    """Raised when the command line arguments cannot be used."""


def is_valid_operand(operand: str) -> bool:
    """Check that an operand looks like a number.

    Digits are allowed anywhere, a single decimal point anywhere and a
    sign only as the first character; at least one digit is required.
    """
    has_digit = False
    has_decimal = False
    for position, ch in enumerate(operand):
        if ch.isascii() and ch.isdigit():
            has_digit = True
        elif ch == "." and not has_decimal:
            has_decimal = True
        elif ch in "+-" and position == 0:
            continue
        else:
            return False
    return has_digit


def validate_arguments(args: Sequence[str]) -> tuple[str, str, str]:
    """Check the three user arguments and return them as a tuple.

    Raises UsageError with a message describing the first problem found.
    """
    if not args:
        raise UsageError("FAILURE: No arguments provided.")
    if len(args) != 3:
        raise UsageError(
            "FAILURE: Incorrect number of arguments.\nExpected 3 arguments."
        )
    left, operator, right = args
    if not is_valid_operand(left):
        raise UsageError("Argument 1 is not a valid operand.")
    if operator[:1] not in _OPERATORS or not operator:
        raise UsageError("Argument 2 is not a valid operator.")
    if not is_valid_operand(right):
        raise UsageError("Argument 3 is not a valid operand.")
    return left, operator, right


def _operand_digits(operand: str) -> Digits:
    try:
        return to_digits(operand)
    except ValueError:
        raise UsageError(
            f"Operand {operand!r} must be an unsigned integer."
        ) from None


def evaluate(left: str, operator: str, right: str) -> str:
    """Apply the operator to two operands and return the result line.

    Only the first character of ``operator`` is significant. Raises
    UsageError for an unsupported operator or operand and
    ZeroDivisionError when dividing by zero.
    """
    symbol = operator[:1]
    if symbol not in ("+", "-", "x", "/"):
        raise UsageError("Invalid Input :- Try again...")

    first = _operand_digits(left)
    second = _operand_digits(right)

    if symbol == "+":
        return "Result of Addition : " + format_digits(add(first, second))
    if symbol == "-":
        difference = subtract(first, second)
        if difference.negative:
            return "Result of Subtraction : " + str(difference)
        return "Result of subtraction : " + str(difference)
    if symbol == "x":
        return "Result of Multiplication : " + format_digits(multiply(first, second))
    return "Result of Division : " + format_digits(divide(first, second))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on command line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        left, operator, right = validate_arguments(args)
    except UsageError as exc:
        print(exc)
        return 1

    try:
        print(evaluate(left, operator, right))
    except UsageError as exc:
        print(exc)
    except ZeroDivisionError:
        print("Error: Division by zero is not allowed!")
        print("Division failed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())