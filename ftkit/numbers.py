"""Integer parsing, formatting and exponentiation with 32-bit int semantics."""

from __future__ import annotations

from itertools import takewhile

INT_MAX = 2147483647
INT_MIN = -2147483648

_LEADING_SPACE = "\t\n\v\f\r "


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` modulo 2**32 into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is honoured, and
    digits are read until the first non-digit. Text without digits gives
    0. Values outside the 32-bit range wrap around.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    magnitude = int(digits) if digits else 0
    return _wrap_int32(sign * magnitude)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal.

    Raises OverflowError when ``n`` does not fit in 32 bits.
    """
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def power(base: int, exp: int) -> int:
    """Raise ``base`` to a non-negative integer ``exp``; negative exponents give 0."""
    if exp < 0:
        return 0
    result = 1
    for _ in range(exp):
        result *= base
    return result