# ftkit

A small library of helpers. It covers ASCII characters, 32-bit integers,
NUL-terminated strings and byte buffers. It also provides a singly linked
list and reads a file descriptor one line at a time. The only dependency is
the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.chars` handles ASCII classification and case conversion. The
  functions are `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_upper`, `is_lower`, `is_space`, `to_upper` and
  `to_lower`.
  - Each function accepts a one-character `str` or an integer code.
  - The converters return the same kind of value they were given.
- `ftkit.numbers` provides three functions:
  - `atoi` parses a leading decimal integer the way C `atoi` does. It
    skips whitespace, accepts one sign and wraps to 32 bits.
  - `itoa` formats a 32-bit integer. It raises `OverflowError` when the
    value is out of range.
  - `power` gives 0 for a negative exponent.
- `ftkit.memory` works on a `bytearray` or a writable `memoryview`. The
  functions are `memset`, `bzero`, `memcpy`, `memccpy`, `memmove`,
  `memchr`, `memcmp` and `memalloc`.
  - `memccpy` and `memchr` return an offset, or `None`.
  - A count that runs past the end of a buffer raises `ValueError`.
- `ftkit.output` writes to a text stream. The functions are `putchar`,
  `putstr`, `putendl` and `putnbr`.
  - Output goes to `sys.stdout` unless a stream is given.
  - Characters that are not ASCII are dropped.
- `ftkit.search` measures, searches and compares `str` text. The
  functions are `strlen`, `strchr`, `strrchr`, `strstr`, `strnstr`,
  `strcmp`, `strncmp`, `strequ`, `strnequ` and `count_words`.
  - A `"\0"` character ends the text.
  - Positions come back as indices, or `None` when nothing matches.
- `ftkit.copy_ops` handles NUL-terminated strings held in `bytearray`
  buffers. The functions are `strnew`, `strdup`, `strcpy`, `strncpy`,
  `strcat`, `strncat` and `strlcat`.
  - A write that would overrun the destination raises `ValueError`.
- `ftkit.build` builds new strings. The functions are `strsub`,
  `strjoin`, `strtrim`, `strsplit`, `strmap` and `strmapi`.
  - `strsub` raises `ValueError` when the requested range is out of range.
  - The module also has three in-place buffer walkers: `strclr`,
    `striter` and `striteri`.
- `ftkit.linked` provides `Node` and `LinkedList`.
  - `LinkedList` supports `push` (to the front), `clear` (with an
    optional delete callback), `for_each`, `map`, `len()` and iteration
    over the contents.
- `ftkit.reader` provides `LineReader` and `get_next_line`.
  - They read lines from file descriptors in the range 0..1023.
  - Unread data is kept separately for each descriptor.
  - By default a reader reads one byte at a time; pass `buffer_size` to
    read more at once.

## Examples

```python
from ftkit.numbers import atoi, itoa
from ftkit.build import strsplit, strtrim

atoi("   -42abc")           # -42
itoa(-2147483648)           # "-2147483648"
strsplit("**a*bc**d*", "*") # ["a", "bc", "d"]
strtrim("\t  hello \n")     # "hello"
```

Working with a string buffer:

```python
from ftkit.copy_ops import strnew, strcpy, strcat

buf = strnew(10)
strcpy(buf, "abc")
strcat(buf, "def")
bytes(buf)                  # b"abcdef\x00\x00\x00\x00\x00"
```

Reading a file line by line:

```python
import os
from ftkit.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader().lines(fd):
        print(line)
finally:
    os.close(fd)
```

`read_line` returns each line without its newline. It returns `None` at
the end of the input. The last line is returned even when no newline ends
it.

A linked list:

```python
from ftkit.linked import LinkedList

items = LinkedList(["a", "b"])
items.push("c")             # pushed to the front
list(items)                 # ["c", "a", "b"]
len(items)                  # 3
```

## What it does not do

ftkit is a library only. It installs no command-line tool.