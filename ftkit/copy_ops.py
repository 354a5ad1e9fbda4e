"""Creating, copying and appending NUL-terminated byte strings.

A string buffer is a ``bytearray`` (or writable ``memoryview``) whose
text runs up to its first zero byte. Sources may be bytes-like objects
or ``str`` (encoded as Latin-1); their text likewise ends at the first
zero byte, or at their end if they hold none. Writes that would run past
the end of a destination raise ``ValueError``.
"""

from __future__ import annotations

_NUL = b"\0"

_Source = "bytes | bytearray | memoryview | str"


def _content(data: bytes | bytearray | memoryview | str) -> bytes:
    """Return the text of ``data`` up to, not including, its first zero byte."""
    raw = data.encode("latin-1") if isinstance(data, str) else bytes(data)
    end = raw.find(_NUL)
    return raw if end < 0 else raw[:end]


def _write(dst: bytearray | memoryview, pos: int, chunk: bytes) -> None:
    end = pos + len(chunk)
    if end > len(dst):
        raise ValueError(
            f"writing {len(chunk)} bytes at offset {pos} overruns a buffer of {len(dst)} bytes"
        )
    dst[pos:end] = chunk


def strnew(size: int) -> bytearray:
    """A zero-filled buffer with room for ``size`` characters and a terminator."""
    if size < 0:
        raise ValueError("size must not be negative")
    return bytearray(size + 1)


def strdup(s: bytes | bytearray | memoryview | str) -> bytearray:
    """A fresh terminated buffer holding a copy of the text of ``s``."""
    return bytearray(_content(s) + _NUL)


def strcpy(
    dst: bytearray | memoryview, src: bytes | bytearray | memoryview | str
) -> bytearray | memoryview:
    """Copy the text of ``src`` and its terminator into ``dst``; return ``dst``."""
    _write(dst, 0, _content(src) + _NUL)
    return dst


def strncpy(
    dst: bytearray | memoryview, src: bytes | bytearray | memoryview | str, length: int
) -> bytearray | memoryview:
    """Copy at most ``length`` characters of ``src`` into ``dst``; return ``dst``.

    When ``src`` is shorter than ``length``, the bytes of ``dst`` that
    follow the copy are cleared up to ``length`` or up to the first byte
    that is already zero, whichever comes first.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if length > len(dst):
        raise ValueError(f"length {length} exceeds a buffer of {len(dst)} bytes")
    chunk = _content(src)[:length]
    _write(dst, 0, chunk)
    pos = len(chunk)
    while pos < length and dst[pos]:
        dst[pos] = 0
        pos += 1
    return dst


def strcat(
    s1: bytearray | memoryview, s2: bytes | bytearray | memoryview | str
) -> bytearray | memoryview:
    """Append the text of ``s2`` to the text in ``s1``; return ``s1``."""
    _write(s1, len(_content(s1)), _content(s2) + _NUL)
    return s1


def strncat(
    s1: bytearray | memoryview, s2: bytes | bytearray | memoryview | str, n: int
) -> bytearray | memoryview:
    """Append at most ``n`` characters of ``s2`` to ``s1`` and terminate; return ``s1``."""
    if n < 0:
        raise ValueError("n must not be negative")
    _write(s1, len(_content(s1)), _content(s2)[:n] + _NUL)
    return s1


def strlcat(
    dst: bytearray | memoryview, src: bytes | bytearray | memoryview | str, dstsize: int
) -> int:
    """Append ``src`` to ``dst`` without the result exceeding ``dstsize`` bytes.

    Returns the length of the string it tried to create: the initial
    length of ``dst`` plus the length of ``src``. When ``dstsize`` is no
    larger than the current length of ``dst``, nothing is written and
    ``dstsize`` plus the length of ``src`` is returned.
    """
    if dstsize < 0:
        raise ValueError("dstsize must not be negative")
    if dstsize > len(dst):
        raise ValueError(f"dstsize {dstsize} exceeds a buffer of {len(dst)} bytes")
    dst_len = len(_content(dst))
    text = _content(src)
    if dstsize == 0 or dstsize <= dst_len:
        return dstsize + len(text)
    room = dstsize - 1 - dst_len
    _write(dst, dst_len, text[:room] + _NUL)
    return dst_len + len(text)