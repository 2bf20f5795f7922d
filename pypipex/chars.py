"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. Classifiers return booleans; converters return a value
of the same kind they were given.
"""

from __future__ import annotations

from typing import TypeVar

Char = TypeVar("Char", int, str)


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isdigit(c) or isalpha(c)


def isascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def isupper(c: int | str) -> bool:
    """True for ASCII upper-case letters."""
    return 65 <= _code(c) <= 90


def islower(c: int | str) -> bool:
    """True for ASCII lower-case letters."""
    return 97 <= _code(c) <= 122


def tolower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; leave anything else alone."""
    code = _code(c)
    if isupper(code):
        code += 32
    return _same_kind(c, code)


def toupper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; leave anything else alone."""
    code = _code(c)
    if islower(code):
        code -= 32
    return _same_kind(c, code)