"""String and byte-buffer helpers with C-string semantics.

Text is handled as if it ended at its first NUL character, which is how
the command-line tools in this package treat their arguments. Searches
return indices (or None when nothing is found) rather than pointers.
"""

from __future__ import annotations

from typing import Callable

_NUL = "\0"


def _terminated(s: str) -> str:
    """The part of *s* before its first NUL character."""
    if s is None:
        raise TypeError("expected a string, got None")
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def split(text: str, sep: str) -> list[str]:
    """Split *text* on every *sep*, dropping empty pieces."""
    text = _terminated(text)
    sep = _char(sep)
    return [piece for piece in text.split(sep) if piece]


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first *c* in *s*.

    Searching for NUL yields the length of *s*; None means not found.
    """
    s = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    pos = s.find(ch)
    return None if pos < 0 else pos


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last *c* in *s*, with the same conventions as strchr."""
    s = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    pos = s.rfind(ch)
    return None if pos < 0 else pos


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of *little* in *big*, looking at no more than *length* characters.

    An empty *little* is found at index 0.
    """
    big = _terminated(big)
    little = _terminated(little)
    if not little:
        return 0
    limit = min(length, len(big))
    for start in range(limit):
        if length - start < len(little):
            break
        if big.startswith(little, start):
            return start
    return None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; the sign tells the order.

    The result is the difference between the first pair of characters that
    differ, 0 when the compared parts are equal.
    """
    a = _terminated(s1)
    b = _terminated(s2)
    for pos in range(n):
        x = ord(a[pos]) if pos < len(a) else 0
        y = ord(b[pos]) if pos < len(b) else 0
        if x != y:
            return x - y
        if x == 0:
            return 0
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters.

    Returns the copied text (at most size - 1 characters, empty when size is
    0) and the full length of *src*, so truncation shows as a length larger
    than what was copied.
    """
    src = _terminated(src)
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* in a buffer of *size* characters.

    Returns the resulting text and the length it would have had without
    truncation. When *dst* already fills the buffer it is left as it is and
    the length reported is size plus the length of *src*.
    """
    dst = _terminated(dst)
    src = _terminated(src)
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _terminated(s1) + _terminated(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    return _terminated(s).strip(_terminated(charset))


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* from *start*; empty past the end."""
    s = _terminated(s)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from f(index, character) for every character of *s*."""
    return "".join(f(index, ch) for index, ch in enumerate(_terminated(s)))


def memchr(data: bytes, c: int, n: int) -> int | None:
    """Index of the first byte equal to *c* among the first *n* bytes."""
    if n < 0:
        raise ValueError("n must not be negative")
    pos = bytes(data[:n]).find(c & 0xFF)
    return None if pos < 0 else pos


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first *n* bytes as unsigned values.

    Returns the difference of the first differing pair, 0 if none differ.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(a) or n > len(b):
        raise ValueError("n is larger than one of the buffers")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0