"""Reading text from file descriptors one line at a time.

A :class:`LineReader` keeps what it has read past the end of a line for
each descriptor separately, so lines can be taken from several
descriptors in turn.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 1
MAX_FD = 1024

_NEWLINE = b"\n"


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="surrogateescape")


class LineReader:
    """Read lines from file descriptors with reads of ``buffer_size`` bytes."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def read_line(self, fd: int) -> str | None:
        """The next line from ``fd`` without its newline, or ``None`` at end of input.

        The last line is returned even when no newline ends it. Raises
        ValueError for a descriptor outside 0..1023 and OSError when the
        descriptor cannot be read.
        """
        if not 0 <= fd < MAX_FD:
            raise ValueError(f"file descriptor {fd} is out of range 0..{MAX_FD - 1}")
        os.read(fd, 0)
        pending = self._pending.get(fd, b"")
        while _NEWLINE not in pending:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            pending += chunk
        if not pending:
            self._pending.pop(fd, None)
            return None
        line, newline, rest = pending.partition(_NEWLINE)
        self._pending[fd] = rest if newline else b""
        return _decode(line)

    def lines(self, fd: int) -> Iterator[str]:
        """Yield the remaining lines of ``fd`` until end of input."""
        while (line := self.read_line(fd)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> str | None:
    """The next line from ``fd``, using a reader shared by all callers."""
    return _default_reader.read_line(fd)