import pytest

from ftkit.build import (
    strclr,
    striter,
    striteri,
    strjoin,
    strmap,
    strmapi,
    strsplit,
    strsub,
    strtrim,
)


def test_strsub_takes_the_requested_slice():
    assert strsub("hello world", 6, 5) == "world"


def test_strsub_zero_length_is_empty():
    assert strsub("abc", 3, 0) == ""


def test_strsub_out_of_range_raises():
    with pytest.raises(ValueError):
        strsub("abc", 2, 2)


def test_strsub_negative_start_raises():
    with pytest.raises(ValueError):
        strsub("abc", -1, 1)


def test_strsub_stops_at_nul():
    with pytest.raises(ValueError):
        strsub("ab\0cd", 0, 4)


def test_strjoin_concatenates():
    joined = strjoin("foo", "bar")
    assert joined == "foo" + "bar"
    assert joined.startswith("foo") and joined.endswith("bar")


def test_strjoin_with_empty():
    assert strjoin("", "x") == "x"
    assert strjoin("x", "") == "x"


def test_strtrim_removes_space_tab_newline():
    assert strtrim("  \t hi there \n") == "hi there"


def test_strtrim_keeps_other_whitespace():
    assert strtrim("\v word \r") == "\v word \r"


def test_strtrim_all_blank_gives_empty():
    assert strtrim(" \t\n ") == ""


def test_strtrim_is_idempotent():
    once = strtrim("\n\t padded text \t\n")
    assert strtrim(once) == once


def test_strsplit_skips_empty_words():
    assert strsplit("*hello*fellow***students*", "*") == ["hello", "fellow", "students"]


def test_strsplit_only_delimiters():
    assert strsplit("****", "*") == []


def test_strsplit_joined_back_has_no_delimiter_runs():
    words = strsplit("a,,b,c,,,", ",")
    assert ",".join(words) == "a,b,c"


def test_strsplit_rejects_long_delimiter():
    with pytest.raises(ValueError):
        strsplit("a b", "ab")


def test_strmap_applies_function():
    assert strmap("abc", str.upper) == "ABC"


def test_strmap_preserves_length_for_char_functions():
    source = "Mixed Case 123"
    assert len(strmap(source, str.swapcase)) == len(source)


def test_strmapi_passes_indices():
    assert strmapi("xyz", lambda i, ch: str(i)) == "012"


def test_strclr_zeroes_text_only():
    buf = bytearray(b"abc\0def")
    strclr(buf)
    assert buf == bytearray(b"\0\0\0\0def")


def test_striter_replaces_bytes():
    buf = bytearray(b"abc\0")
    striter(buf, lambda b: b - 32)
    assert buf == bytearray(b"ABC\0")


def test_striter_none_leaves_bytes():
    buf = bytearray(b"keep")
    seen = []
    striter(buf, seen.append)
    assert buf == bytearray(b"keep")
    assert bytes(seen) == b"keep"


def test_striteri_receives_indices():
    buf = bytearray(b"aaaa\0zz")
    striteri(buf, lambda i, b: b + i)
    assert buf == bytearray(b"abcd\0zz")