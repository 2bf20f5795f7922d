"""Formatted output with the package's own conversion rules.

Supported conversions are %c, %s, %p, %d, %i, %u, %x, %X and %%, each
optionally preceded by the flags '-', '+', ' ', '#', '0', a width and a
'.precision'. Unknown conversion characters produce no output.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from pypipex.chars import isdigit
from pypipex.numbers import atoi
from pypipex.output import putstr
from pypipex.printf_numbers import Flags, format_hex, format_integer, format_unsigned

_SPEC_CHARS = "-0.# +"
_FLAG_CHARS = "-+ #0"
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"
_POINTER_MASK = (1 << 64) - 1


def _prec(flags: Flags) -> int:
    """Precision as precision + 1, with 0 meaning that none was given."""
    return 0 if flags.precision is None else flags.precision + 1


def _parse_group(fmt: str, pos: int, flags: Flags) -> int:
    while pos < len(fmt) and fmt[pos] in _FLAG_CHARS:
        ch = fmt[pos]
        if ch == "-":
            flags.left_align = True
        elif ch == "+":
            flags.sign_plus = True
        elif ch == " ":
            flags.space = True
        elif ch == "#":
            flags.hashtag = True
        else:
            flags.zero = True
        pos += 1
    if pos < len(fmt) and (isdigit(fmt[pos]) or fmt[pos] == "."):
        if fmt[pos] == ".":
            pos += 1
            flags.precision = atoi(fmt[pos:])
        else:
            flags.width = atoi(fmt[pos:])
        while pos < len(fmt) and isdigit(fmt[pos]):
            pos += 1
    return pos


def parse_flags(fmt: str, pos: int) -> tuple[Flags, int]:
    """Parse the specification starting at *pos* (just after a '%').

    Returns the flags and the index of the conversion character.
    """
    flags = Flags()
    while pos < len(fmt) and (fmt[pos] in _SPEC_CHARS or isdigit(fmt[pos])):
        pos = _parse_group(fmt, pos, flags)
    return flags, pos


def format_char(c: int | str, flags: Flags) -> str:
    """Render a %c conversion; integers are taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(c & 0xFF)
    pad = " " * max(flags.width - 1, 0)
    return ch + pad if flags.left_align else pad + ch


def _print_p(s: Optional[str], precision: int) -> str:
    if s is None:
        return _NULL_STRING if precision >= 6 else ""
    return s[: max(precision, 0)]


def _print_w(s: Optional[str], width: int, left: bool) -> str:
    if s is None:
        s = _NULL_STRING
    return s.ljust(width) if left else s.rjust(width)


def _print_w_p(s: Optional[str], width: int, precision: int, left: bool) -> str:
    if s is None:
        s = _NULL_STRING
        if precision < 6:
            precision = 0
    size = min(len(s), precision)
    if size >= width:
        return _print_p(s, size)
    if left:
        return _print_p(s, precision).ljust(width)
    return " " * (width - size) + _print_p(s, size)


def format_str(s: Optional[str], flags: Flags) -> str:
    """Render a %s conversion.

    None prints as "(null)" when a width is given or the precision allows
    six characters, and as nothing otherwise.
    """
    if s is not None:
        s = s.split("\0", 1)[0]
    prec = _prec(flags)
    if flags.width > 0 and prec:
        return _print_w_p(s, flags.width, prec - 1, flags.left_align)
    if flags.width > 0:
        return _print_w(s, flags.width, flags.left_align)
    if prec > 0:
        return _print_p(s, prec - 1)
    return "" if s is None else s


def format_pointer(address: Optional[int], flags: Flags) -> str:
    """Render a %p conversion; a null address prints as "(nil)"."""
    address = 0 if address is None else address & _POINTER_MASK
    text = _NULL_POINTER if address == 0 else "0x" + format(address, "x")
    return text.ljust(flags.width) if flags.left_align else text.rjust(flags.width)


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(conversion: str, flags: Flags, values: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion == "c":
        return format_char(_next_arg(values), flags)
    if conversion == "s":
        return format_str(_next_arg(values), flags)
    if conversion == "p":
        return format_pointer(_next_arg(values), flags)
    if conversion in ("d", "i"):
        return format_integer(_next_arg(values), flags)
    if conversion == "u":
        return format_unsigned(_next_arg(values), flags)
    if conversion in ("x", "X"):
        return format_hex(_next_arg(values), flags, conversion)
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the rendered *args*."""
    if fmt is None or fmt == "%":
        raise ValueError("invalid format string")
    values = iter(args)
    pieces: list[str] = []
    pos = 0
    while pos < len(fmt):
        mark = fmt.find("%", pos)
        if mark < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:mark])
        flags, pos = parse_flags(fmt, mark + 1)
        if pos >= len(fmt):
            break
        pieces.append(_convert(fmt[pos], flags, values))
        pos += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    return putstr(sprintf(fmt, *args))