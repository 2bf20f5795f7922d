"""Writing characters, strings and numbers to a stream or a descriptor.

The *file* argument may be a text stream, a raw file descriptor, or None
for standard output. Every function returns the number of characters
written.
"""

from __future__ import annotations

import os
import sys
from typing import IO, Union

from pypipex.numbers import itoa

Target = Union[IO[str], int, None]


def _write(text: str, file: Target) -> int:
    if file is None:
        file = sys.stdout
    if isinstance(file, int):
        view = memoryview(text.encode())
        while view:
            written = os.write(file, view)
            view = view[written:]
    else:
        file.write(text)
    return len(text)


def putchar(c: int | str, file: Target = None) -> int:
    """Write one character, given as a string or a character code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return _write(c, file)
    return _write(chr(c), file)


def putstr(s: str, file: Target = None) -> int:
    """Write a string."""
    if s is None:
        raise TypeError("cannot write None")
    return _write(s, file)


def putendl(s: str, file: Target = None) -> int:
    """Write a string followed by a newline."""
    if s is None:
        raise TypeError("cannot write None")
    return _write(s + "\n", file)


def putnbr(n: int, file: Target = None) -> int:
    """Write the decimal form of a 32-bit signed integer."""
    return _write(itoa(n), file)