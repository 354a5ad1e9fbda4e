"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. The classifiers return ``bool``; the converters return a
value of the same kind they were given.
"""

from __future__ import annotations

_SPACE_CODES = frozenset(map(ord, "\t\n\v\f\r "))
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: str | int) -> int:
    """Return the integer code of a character given as ``str`` or ``int``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def is_upper(c: str | int) -> bool:
    """True for the ASCII capitals A-Z."""
    return ord("A") <= _code(c) <= ord("Z")


def is_lower(c: str | int) -> bool:
    """True for the ASCII small letters a-z."""
    return ord("a") <= _code(c) <= ord("z")


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    return is_lower(c) or is_upper(c)


def is_digit(c: str | int) -> bool:
    """True for the decimal digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def is_space(c: str | int) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    return _code(c) in _SPACE_CODES


def to_upper(c: str | int) -> str | int:
    """Map an ASCII small letter to its capital; anything else is returned unchanged."""
    if not is_lower(c):
        return c
    upper = _code(c) - _CASE_OFFSET
    return chr(upper) if isinstance(c, str) else upper


def to_lower(c: str | int) -> str | int:
    """Map an ASCII capital to its small letter; anything else is returned unchanged."""
    if not is_upper(c):
        return c
    lower = _code(c) + _CASE_OFFSET
    return chr(lower) if isinstance(c, str) else lower