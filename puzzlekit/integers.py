"""Puzzles on 32-bit signed integers: digit reversal, string parsing, palindromes."""

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ATOI_PATTERN = re.compile(r" *([+-]?)([0-9]*)")


def _check_int32(x: int) -> None:
    if not INT_MIN <= x <= INT_MAX:
        raise OverflowError(f"{x} does not fit in a 32-bit signed integer")


def reverse(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the reversed value does not fit in a 32-bit signed integer.
    Raises OverflowError when ``x`` has no 32-bit absolute value.
    """
    _check_int32(x)
    if x == INT_MIN:
        raise OverflowError("the absolute value of the smallest 32-bit integer overflows")
    magnitude = int(str(abs(x))[::-1])
    if magnitude > INT_MAX:
        return 0
    return -magnitude if x < 0 else magnitude


def my_atoi(s: str) -> int:
    """Parse a leading integer from ``s``, clamping it to the 32-bit signed range.

    Leading spaces are skipped, one optional sign is accepted, and parsing stops
    at the first character that is not an ASCII digit.
    """
    match = _ATOI_PATTERN.match(s)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    return max(INT_MIN, min(INT_MAX, value))


def is_palindrome(x: int) -> bool:
    """Tell whether the decimal form of ``x`` reads the same both ways."""
    text = str(x)
    return text == text[::-1]