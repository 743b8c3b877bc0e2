# apcalc

A small calculator for non-negative integers of any length. Numbers are kept
as tuples of decimal digits, most significant digit first. Addition,
subtraction, multiplication and division are done digit by digit, the way you
would work them out on paper.

## Installation

```
pip install .
```

## Command line

The calculator takes exactly three arguments: a left operand, an operator and
a right operand.

```
apcalc 123456789012345678901234567890 + 987654321098765432109876543210
apcalc 100 - 250
apcalc 99999999999 x 99999999999
apcalc 1000000 / 7
```

It can also be started with `python -m apcalc.cli`.

Each command prints one result line, for example
`Result of Addition : 1111111110111111111011111111100`. A subtraction whose
result is negative prints it with a leading `-`. Division gives the integer
quotient.

The operators are `+`, `-`, `x` and `/`; only the first character of the
operator argument counts. Use `x` for multiplication so the shell does not
expand `*`.

The arguments are checked before anything is worked out. An operand passes
this check if it has at most one leading `+` or `-`, at most one decimal
point, and at least one digit; a capital `X` passes as an operator. If the
number of arguments is wrong or an argument fails the check, a message is
printed and the exit status is 1.

Some inputs pass the check but still cannot be evaluated. Then a message is
printed and the exit status is 0:

- An operand with a sign or a decimal point is refused with
  `Operand '...' must be an unsigned integer.`, because the arithmetic works
  only on plain non-negative integers.
- The operator `X` prints `Invalid Input :- Try again...`.
- Dividing by zero prints `Error: Division by zero is not allowed!` followed
  by `Division failed.`

## Library use

```python
from apcalc.digits import to_digits, format_digits
from apcalc.operations import add, subtract, multiply, divide

a = to_digits("12345678901234567890")
b = to_digits("98765432109876543210")

print(format_digits(add(a, b)))
print(format_digits(multiply(a, b)))

difference = subtract(a, b)      # Difference(negative=True, digits=(...))
print(difference)                # printed with a leading "-"
print(format_digits(divide(b, to_digits("3"))))
```

`apcalc.digits`:

- `to_digits(text)` turns a string of ASCII digits into a digit tuple and
  raises `ValueError` for anything else.
- `strip_leading_zeros(digits)` drops leading zeros and leaves `(0,)` if
  nothing else remains.
- `compare(first, second)` returns -1, 0 or 1 by value.
- `digits_to_int(digits)` gives the value as an `int`; an empty sequence is 0.
- `format_digits(digits)` renders digits as a string.

`apcalc.operations`:

- `add(first, second)` keeps any leading zeros of the longer operand.
- `subtract(first, second)` returns a `Difference` with `negative` and
  `digits` fields; `str()` of it adds the sign.
- `multiply(first, second)` treats an empty operand as zero.
- `divide(dividend, divisor)` raises `ZeroDivisionError` for an empty or zero
  divisor and returns an empty tuple for an empty dividend.

`apcalc.cli`:

- `evaluate(left, operator, right)` returns the result line for one
  expression given as strings.
- `validate_arguments(args)` checks a list of three arguments, returns them
  as a tuple and raises `UsageError` when they are wrong.
- `is_valid_operand(operand)` is the operand check described above.
- `main(argv=None)` runs the command and returns its exit status.

## What it does not do

There are no negative operands, no fractions and no remainders: the
calculator works on non-negative integers only, and division drops the
remainder.