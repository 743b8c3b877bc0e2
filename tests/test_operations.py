import pytest

from apcalc.digits import digits_to_int, format_digits, to_digits
from apcalc.operations import Difference, add, divide, multiply, subtract

PAIRS = [
    ("0", "0"),
    ("1", "9"),
    ("999", "1"),
    ("123", "456789"),
    ("5", "5"),
    ("100", "99"),
    ("98765432109876543210", "12345678901234567890"),
    ("12345678901234567890123", "987654321"),
]


@pytest.mark.parametrize("left, right", PAIRS)
def test_add_matches_int(left, right):
    result = add(to_digits(left), to_digits(right))
    assert digits_to_int(result) == int(left) + int(right)
    assert result == add(to_digits(right), to_digits(left))


def test_add_carry_extends_result():
    assert format_digits(add(to_digits("999"), to_digits("1"))) == "1000"


def test_add_keeps_leading_zeros_of_operand():
    assert format_digits(add(to_digits("007"), to_digits("1"))) == "008"


@pytest.mark.parametrize("left, right", PAIRS)
def test_subtract_matches_int(left, right):
    result = subtract(to_digits(left), to_digits(right))
    expected = int(left) - int(right)
    assert result.negative == (expected < 0)
    assert digits_to_int(result.digits) == abs(expected)
    assert str(result) == str(expected)


@pytest.mark.parametrize("left, right", PAIRS)
def test_subtract_then_add_round_trip(left, right):
    a, b = to_digits(left), to_digits(right)
    diff = subtract(a, b)
    if diff.negative:
        restored = digits_to_int(add(a, diff.digits))
        assert restored == int(right)
    else:
        restored = digits_to_int(add(b, diff.digits))
        assert restored == int(left)


def test_subtract_equal_is_non_negative_zero():
    assert subtract(to_digits("42"), to_digits("0042")) == Difference(False, (0,))


def test_subtract_ignores_leading_zeros_when_ordering():
    result = subtract(to_digits("0005"), to_digits("12"))
    assert result.negative
    assert str(result) == str(5 - 12)


@pytest.mark.parametrize("left, right", PAIRS)
def test_multiply_matches_int(left, right):
    result = multiply(to_digits(left), to_digits(right))
    assert format_digits(result) == str(int(left) * int(right))
    assert result == multiply(to_digits(right), to_digits(left))


@pytest.mark.parametrize("left, right", [("", "123"), ("456", ""), ("000", "789")])
def test_multiply_by_empty_or_zero_is_zero(left, right):
    assert multiply(to_digits(left), to_digits(right)) == (0,)


@pytest.mark.parametrize(
    "dividend, divisor",
    [
        ("0", "7"),
        ("7", "7"),
        ("6", "7"),
        ("100", "3"),
        ("123456789", "123"),
        ("98765432109876543210", "12345678901234567890"),
        ("12345678901234567890123", "987654321"),
        ("000500", "25"),
    ],
)
def test_divide_matches_floor_division(dividend, divisor):
    result = divide(to_digits(dividend), to_digits(divisor))
    assert format_digits(result) == str(int(dividend) // int(divisor))


@pytest.mark.parametrize("left, right", PAIRS[1:])
def test_divide_undoes_multiply(left, right):
    a, b = to_digits(left), to_digits(right)
    product = multiply(a, b)
    assert digits_to_int(divide(product, b)) == int(left)


@pytest.mark.parametrize("divisor", ["", "0", "000"])
def test_divide_by_zero_raises(divisor):
    with pytest.raises(ZeroDivisionError):
        divide(to_digits("123"), to_digits(divisor))


def test_divide_empty_dividend_gives_empty_quotient():
    assert divide((), to_digits("5")) == ()