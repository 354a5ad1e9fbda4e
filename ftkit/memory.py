"""Byte-buffer primitives: fill, copy, search and compare.

Destinations are writable buffers such as ``bytearray`` or a writable
``memoryview``; sources may be any bytes-like object. Byte values given
as integers are reduced to their low eight bits, as an ``unsigned char``
conversion would. Counts that reach past the end of a buffer raise
``ValueError`` instead of touching memory that is not there.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "memset",
    "bzero",
    "memcpy",
    "memccpy",
    "memmove",
    "memchr",
    "memcmp",
    "memalloc",
]


def _bytes_view(buf: Any) -> memoryview:
    """Return a flat byte view of ``buf``."""
    view = memoryview(buf)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def _writable_view(buf: Any) -> memoryview:
    view = _bytes_view(buf)
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    return view


def _check_count(n: int, *views: memoryview) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for view in views:
        if n > len(view):
            raise ValueError(
                f"byte count {n} exceeds buffer of {len(view)} bytes"
            )


def memset(buf: Any, value: int, length: int) -> Any:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` and return ``buf``."""
    view = _writable_view(buf)
    _check_count(length, view)
    view[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: Any, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    memset(buf, 0, length)


def memcpy(dst: Any, src: Any, n: int) -> Any:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    dst_view = _writable_view(dst)
    src_view = _bytes_view(src)
    _check_count(n, dst_view, src_view)
    dst_view[:n] = src_view[:n]
    return dst


def memccpy(dst: Any, src: Any, c: int, n: int) -> int | None:
    """Copy up to ``n`` bytes, stopping after the first byte equal to ``c``.

    Returns the offset in ``dst`` just past the copied stop byte, or
    ``None`` when the stop byte did not occur within ``n`` bytes.
    """
    dst_view = _writable_view(dst)
    src_view = _bytes_view(src)
    _check_count(n, dst_view, src_view)
    found = src_view[:n].tobytes().find(bytes([c & 0xFF]))
    count = n if found < 0 else found + 1
    dst_view[:count] = src_view[:count]
    return None if found < 0 else count


def memmove(dst: Any, src: Any, length: int) -> Any:
    """Copy ``length`` bytes from ``src`` to ``dst``; the areas may overlap."""
    dst_view = _writable_view(dst)
    src_view = _bytes_view(src)
    _check_count(length, dst_view, src_view)
    dst_view[:length] = src_view[:length].tobytes()
    return dst


def memchr(data: Any, c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to ``c`` within ``n`` bytes, or ``None``."""
    view = _bytes_view(data)
    _check_count(n, view)
    found = view[:n].tobytes().find(bytes([c & 0xFF]))
    return None if found < 0 else found


def memcmp(a: Any, b: Any, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b`` as unsigned values.

    Returns the difference of the first unequal pair, or 0 if none differ.
    """
    view_a = _bytes_view(a)
    view_b = _bytes_view(b)
    _check_count(n, view_a, view_b)
    for x, y in zip(view_a[:n].tobytes(), view_b[:n].tobytes()):
        if x != y:
            return x - y
    return 0


def memalloc(size: int) -> bytearray:
    """Return a fresh zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return bytearray(size)