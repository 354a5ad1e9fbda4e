"""Building new strings from old ones and walking mutable string buffers.

Functions that build text take and return ``str``. The input's text
ends at its first NUL character, if it has one. The buffer functions
(:func:`strclr`, :func:`striter`, :func:`striteri`) work in place on a
``bytearray`` or writable ``memoryview``. A buffer's text runs up to its
first zero byte.
"""

from __future__ import annotations

from collections.abc import Callable

from ftkit.search import strlen

_TRIM = "\t \n"


def _text(s: str) -> str:
    return s[: strlen(s)]


def _buffer_text_length(buf: bytearray | memoryview) -> int:
    end = bytes(buf).find(b"\0")
    return len(buf) if end < 0 else end


def strsub(s: str, start: int, length: int) -> str:
    """The ``length`` characters of ``s`` that begin at index ``start``.

    Raises ValueError when the requested range does not lie within the
    text of ``s``.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _text(s)
    if len(text) < start + length:
        raise ValueError(
            f"substring [{start}:{start + length}] exceeds a string of {len(text)} characters"
        )
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """A new string holding the text of ``s1`` followed by that of ``s2``."""
    return _text(s1) + _text(s2)


def strtrim(s: str) -> str:
    """``s`` without leading and trailing spaces, tabs and newlines."""
    return _text(s).strip(_TRIM)


def strsplit(s: str, c: str) -> list[str]:
    """The non-empty words of ``s`` separated by the delimiter ``c``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("the delimiter must be a single character")
    return [word for word in _text(s).split(c) if word]


def strmap(s: str, f: Callable[[str], str]) -> str:
    """A new string made by applying ``f`` to each character of ``s``."""
    return "".join(f(ch) for ch in _text(s))


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Like :func:`strmap`, but ``f`` also receives each character's index."""
    return "".join(f(index, ch) for index, ch in enumerate(_text(s)))


def strclr(buf: bytearray | memoryview) -> None:
    """Set every byte of the buffer's text to zero."""
    length = _buffer_text_length(buf)
    buf[:length] = bytes(length)


def striter(buf: bytearray | memoryview, f: Callable[[int], int | None]) -> None:
    """Call ``f`` on each byte of the buffer's text.

    When ``f`` returns an integer, that value replaces the byte.
    """
    for index in range(_buffer_text_length(buf)):
        result = f(buf[index])
        if result is not None:
            buf[index] = result


def striteri(buf: bytearray | memoryview, f: Callable[[int, int], int | None]) -> None:
    """Like :func:`striter`, but ``f`` also receives each byte's index."""
    for index in range(_buffer_text_length(buf)):
        result = f(index, buf[index])
        if result is not None:
            buf[index] = result