"""Measuring, searching and comparing text.

Strings are Python ``str`` values read the way a NUL-terminated string
is read: a ``"\\0"`` character, if present, ends the text, and the
terminator itself can be searched for. Positions are returned as
indices into the string, or ``None`` when nothing matches.
"""

from __future__ import annotations

from itertools import zip_longest

_NUL = "\0"


def _text(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    return s[: strlen(s)]


def _single_char(c: str | int) -> str:
    """Validate a character given as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def strlen(s: str) -> int:
    """Number of characters before the first NUL, or the whole length."""
    end = s.find(_NUL)
    return len(s) if end < 0 else end


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first occurrence of ``c`` in ``s``.

    An integer ``c`` is reduced to its low eight bits. Searching for NUL
    finds the terminator at ``strlen(s)``.
    """
    ch = chr(c & 0xFF) if isinstance(c, int) else _single_char(c)
    text = _text(s)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last occurrence of ``c`` in ``s``.

    Searching for NUL finds the terminator at ``strlen(s)``.
    """
    if isinstance(c, int):
        if not 0 <= c <= 0x10FFFF:
            return None
        ch = chr(c)
    else:
        ch = _single_char(c)
    text = _text(s)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of ``needle``; an empty needle matches at 0."""
    hay, ndl = _text(haystack), _text(needle)
    if not ndl:
        return 0
    index = hay.find(ndl)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Like :func:`strstr`, but the match must lie within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    hay, ndl = _text(haystack), _text(needle)
    if not ndl:
        return 0
    index = hay[:length].find(ndl)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first pair of differing character codes, or 0 when equal."""
    for a, b in zip_longest(_text(s1), _text(s2), fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return strcmp(_text(s1)[:n], _text(s2)[:n])


def strequ(s1: str | None, s2: str | None) -> bool:
    """True when both strings are given and compare equal."""
    if s1 is None or s2 is None:
        return False
    return strcmp(s1, s2) == 0


def strnequ(s1: str | None, s2: str | None, n: int) -> bool:
    """True when both strings are given and their first ``n`` characters are equal."""
    if s1 is None or s2 is None:
        return False
    return strncmp(s1, s2, n) == 0


def count_words(s: str, c: str) -> int:
    """Number of non-empty runs of characters other than the delimiter ``c``."""
    delimiter = _single_char(c)
    return sum(1 for word in _text(s).split(delimiter) if word)