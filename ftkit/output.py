"""Write characters, strings and integers to a text stream.

Only ASCII characters are written; any other character is dropped
silently. Every function writes to ``sys.stdout`` unless a stream is
given.
"""

from __future__ import annotations

import sys
from typing import TextIO

from ftkit.chars import is_ascii
from ftkit.numbers import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character if it is ASCII; other characters are ignored."""
    if not is_ascii(c):
        return
    _target(stream).write(c if isinstance(c, str) else chr(c))


def putstr(s: str, stream: TextIO | None = None) -> None:
    """Write the ASCII characters of ``s`` in order."""
    _target(stream).write("".join(ch for ch in s if is_ascii(ch)))


def putendl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; ``None`` writes nothing."""
    if s is None:
        return
    out = _target(stream)
    putstr(s, out)
    putchar("\n", out)


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal.

    Raises OverflowError when ``n`` does not fit in 32 bits.
    """
    putstr(itoa(n), stream)