import os

import pytest

from ftkit.reader import LineReader, get_next_line


def _pipe_with(data: bytes) -> int:
    read_fd, write_fd = os.pipe()
    os.write(write_fd, data)
    os.close(write_fd)
    return read_fd


@pytest.fixture
def fds():
    opened = []

    def make(data: bytes) -> int:
        fd = _pipe_with(data)
        opened.append(fd)
        return fd

    yield make
    for fd in opened:
        os.close(fd)


@pytest.mark.parametrize("size", [1, 2, 3, 8, 1000])
def test_lines_independent_of_buffer_size(fds, size):
    fd = fds(b"first\nsecond\nthird\n")
    assert list(LineReader(size).lines(fd)) == ["first", "second", "third"]


def test_last_line_without_newline(fds):
    fd = fds(b"one\ntwo")
    reader = LineReader(4)
    assert reader.read_line(fd) == "one"
    assert reader.read_line(fd) == "two"
    assert reader.read_line(fd) is None


def test_empty_lines_are_kept(fds):
    fd = fds(b"\n\nx\n")
    assert list(LineReader(3).lines(fd)) == ["", "", "x"]


def test_empty_input(fds):
    fd = fds(b"")
    reader = LineReader()
    assert reader.read_line(fd) is None
    assert reader.read_line(fd) is None


def test_separate_state_per_descriptor(fds):
    a = fds(b"a1\na2\n")
    b = fds(b"b1\nb2\n")
    reader = LineReader(16)
    assert reader.read_line(a) == "a1"
    assert reader.read_line(b) == "b1"
    assert reader.read_line(a) == "a2"
    assert reader.read_line(b) == "b2"
    assert reader.read_line(a) is None
    assert reader.read_line(b) is None


def test_utf8_split_across_reads(fds):
    text = "héllo\nwörld\n"
    fd = fds(text.encode("utf-8"))
    assert list(LineReader(1).lines(fd)) == text.splitlines()


def test_reads_from_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(b"alpha\nbeta\n")
    fd = os.open(path, os.O_RDONLY)
    try:
        assert get_next_line(fd) == "alpha"
        assert get_next_line(fd) == "beta"
        assert get_next_line(fd) is None
    finally:
        os.close(fd)


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader().read_line(-1)


def test_descriptor_too_large_rejected():
    with pytest.raises(ValueError):
        LineReader().read_line(1024)


def test_closed_descriptor_raises():
    fd = _pipe_with(b"data\n")
    os.close(fd)
    with pytest.raises(OSError):
        LineReader().read_line(fd)


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(size)