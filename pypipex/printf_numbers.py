"""Rendering of %d/%i, %u and %x/%X conversions.

Each function takes a value and the Flags parsed from a conversion
specification and returns the text that the conversion produces. Integers
behave as 32-bit C ints: %d wraps to a signed value, %u and %x to an
unsigned one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

HEXBASE = "0123456789abcdef"
HEXBASEUP = "0123456789ABCDEF"


@dataclass
class Flags:
    """Flags, width and precision of one conversion specification.

    ``precision`` is None when the specification has no '.' part.
    """

    left_align: bool = False
    sign_plus: bool = False
    space: bool = False
    hashtag: bool = False
    zero: bool = False
    width: int = 0
    precision: Optional[int] = None


@dataclass(frozen=True)
class _Spec:
    """Flags with precision stored as precision + 1, 0 meaning none."""

    left: bool
    plus: bool
    space: bool
    hashtag: bool
    zero: bool
    width: int
    prec: int

    @classmethod
    def of(cls, flags: Flags) -> _Spec:
        prec = 0 if flags.precision is None else flags.precision + 1
        return cls(
            left=flags.left_align,
            plus=flags.sign_plus,
            space=flags.space,
            hashtag=flags.hashtag,
            zero=flags.zero,
            width=flags.width,
            prec=prec,
        )


def _signed32(n: int) -> int:
    return ((n + (1 << 31)) & 0xFFFFFFFF) - (1 << 31)


def _unsigned32(n: int) -> int:
    return n & 0xFFFFFFFF


def _numsize(n: int) -> int:
    return len(str(n))


def _hexsize(n: int) -> int:
    return len(format(n, "x"))


def _ljust(text: str, width: int, fill: str) -> str:
    return text + fill * max(width - len(text), 0)


def _fill(fill: str, count: int) -> str:
    return fill * max(count, 0)


# --- signed integers -------------------------------------------------------


def _int_wid(s: _Spec) -> str:
    if s.plus or s.space:
        token = "+" if s.plus else " "
        return _fill(" ", s.width - 1) + token
    return _fill(" ", s.width)


def _print_int_p(number: int, precision: int, space: bool, plus: bool) -> str:
    size = _numsize(number) - (1 if number < 0 else 0)
    out = ""
    if plus and number >= 0 and not space:
        out = "+"
    elif space and not plus and number >= 0:
        out = " "
    if precision > size:
        if number < 0:
            out += "-"
            number = -number
        out += "0" * (precision - size)
    return out + str(number)


def _aux_prec_zero(s: _Spec) -> str:
    if s.prec - 1 == 0 and s.plus:
        return "+"
    if s.prec - 1 == 0 and s.space:
        return " "
    return ""


def _aux_left(s: _Spec) -> str:
    if s.prec == 1 and not s.width:
        return ""
    if s.prec == 0 and s.left:
        return _ljust("0", s.width, " ")
    if s.prec == 0 and s.width > 0 and s.zero:
        return _ljust("0", s.width, "0")
    if s.prec == 1:
        return _fill(" ", s.width)
    return ""


def _aux_zero(number: int, s: _Spec) -> str:
    size = _numsize(number)
    if size >= s.width:
        sign = "+" if s.plus else " " if s.space else ""
        return sign + str(number)
    out = ""
    if number < 0:
        out = "-"
        size -= 1
        number = -number
    return out + _fill("0", s.width - size) + str(number)


def _aux_z(number: int, width: int, sign: str, enabled: bool) -> str:
    size = _numsize(number)
    out = ""
    if number < 0:
        out = "-"
        number = -number
        enabled = False
    if enabled:
        out += sign
    return out + _fill("0", width - size) + str(number)


def _print_zero(number: int, size: int, s: _Spec) -> str:
    if s.prec <= 1 and number == 0:
        return _aux_left(s)
    if size >= s.width:
        return _aux_zero(number, s)
    if s.zero and s.space and number >= 0 and not s.plus:
        return _aux_z(number, s.width - 1, " ", True)
    if s.zero and s.space and (number < 0 or s.plus):
        return _aux_z(number, s.width, " ", False)
    if s.zero and (not s.plus or number < 0):
        return _aux_z(number, s.width, "+", False)
    if s.zero and s.plus and number >= 0:
        return _aux_z(number, s.width - 1, "+", True)
    return _aux_zero(number, s)


def _print_aux_w(number: int, s: _Spec, precision: int, size: int) -> str:
    if s.left and precision and s.width > 0:
        body = _print_int_p(number, precision, s.space, s.plus)
        return _ljust(body, s.width, " ")
    if s.width and precision and not s.left:
        size = max(size, precision)
        width = s.width
        if s.plus or s.space or (number < 0 and precision > size - 1):
            width -= 1
        body = _print_int_p(number, precision, s.space, s.plus)
        return _fill(" ", width - size) + body
    return ""


def _p_w_i(number: int, size: int, s: _Spec, precision: int) -> str:
    if s.left or precision > 0:
        return _print_aux_w(number, s, precision, size)
    if s.width > 0 and s.zero:
        return _print_zero(number, _numsize(number), s)
    if number == 0 and s.prec == 1:
        return _int_wid(s)
    width = s.width
    if (s.plus or s.space) and number > 0:
        width -= 1
    if s.plus and number > 0:
        sign = "+"
    elif s.space and number > 0:
        sign = " "
    else:
        sign = ""
    return _fill(" ", width - size) + sign + str(number)


def _print_int_left_pp(number: int, s: _Spec, precision: int) -> str:
    if precision <= 0 and number == 0:
        return _aux_left(s)
    if precision > s.width or (precision and not s.width):
        return _print_int_p(number, precision, s.space, s.plus)
    if precision > 0 and s.width:
        return _p_w_i(number, _numsize(number), s, precision)
    if s.width and precision <= 0:
        out = "+" if s.plus and number > 0 else ""
        if s.space:
            out += " "
        return _ljust(out + str(number), s.width, " ")
    return str(number)


def format_integer(number: int, flags: Flags) -> str:
    """Render *number* as a %d conversion with *flags*."""
    number = _signed32(number)
    s = _Spec.of(flags)
    precision = s.prec - 1
    if s.left:
        return _print_int_left_pp(number, s, precision)
    if (s.prec > 0 and s.width > 0) or s.width:
        return _p_w_i(number, _numsize(number), s, precision)
    if s.prec:
        if precision == 0 and number == 0:
            return _aux_prec_zero(s)
        return _print_int_p(number, precision, s.space, s.plus)
    if s.plus and number >= 0:
        sign = "+"
    elif s.space and number >= 0:
        sign = " "
    else:
        sign = ""
    return sign + str(number)


# --- unsigned integers -----------------------------------------------------


def _aux_unsigned(s: _Spec) -> str:
    fill = "0" if s.zero else " "
    if s.left and s.prec == 0:
        return _ljust("0", s.width, fill)
    if s.width and s.prec == 0:
        return _fill(fill, s.width - 1) + "0"
    return _fill(" ", s.width)


def _unsigned_prec(number: int, precision: int) -> str:
    size = _numsize(number)
    if precision > size:
        return "0" * (precision - size) + str(number)
    return str(number)


def _unsigned_w(number: int, size: int, s: _Spec, precision: int) -> str:
    if precision > 0 and precision > size:
        size = precision
    if s.zero and precision <= 0:
        return _fill("0", s.width - size) + str(number)
    if s.prec:
        return _fill(" ", s.width - size) + _unsigned_prec(number, precision)
    return _fill(" ", s.width - size) + str(number)


def _unsigned_w_l(number: int, s: _Spec, precision: int) -> str:
    if s.zero and precision <= 0:
        return _ljust(str(number), s.width, "0")
    if precision > 0:
        return _ljust(_unsigned_prec(number, precision), s.width, " ")
    return _ljust(str(number), s.width, " ")


def _unsigned_leftalig(number: int, size: int, s: _Spec, precision: int) -> str:
    if number == 0 and precision <= 0 and not s.width:
        return _fill(" ", s.width)
    if s.width > 0:
        return _unsigned_w_l(number, s, precision)
    if precision > size:
        return _unsigned_prec(number, precision)
    return str(number)


def format_unsigned(number: int, flags: Flags) -> str:
    """Render *number* as a %u conversion with *flags*."""
    number = _unsigned32(number)
    s = _Spec.of(flags)
    size = _numsize(number)
    precision = s.prec - 1
    if (s.left or s.width > 0) and (number == 0 and s.prec <= 1):
        return _aux_unsigned(s)
    if s.left:
        return _unsigned_leftalig(number, size, s, precision)
    if s.width > 0:
        return _unsigned_w(number, size, s, precision)
    if s.prec > 0:
        if number == 0 and precision == 0:
            return ""
        return _unsigned_prec(number, precision)
    return str(number)


# --- hexadecimal -----------------------------------------------------------


def _digits(number: int, token: str) -> str:
    return format(number, "X" if token.isupper() else "x")


def _print_hashtag(number: int, hashtag: bool, token: str) -> str:
    return "0" + token if number != 0 and hashtag else ""


def _print_h_p(number: int, s: _Spec, precision: int, token: str) -> str:
    if number == 0 and precision == 0:
        return ""
    out = ""
    if s.hashtag and not s.left and number != 0:
        out = "0" + token
    return out + _fill("0", precision - _hexsize(number)) + _digits(number, token)


def _print_hex_leftalig(s: _Spec, precision: int, number: int, token: str) -> str:
    out = _print_hashtag(number, s.hashtag, token)
    out += _print_h_p(number, s, precision, token)
    return _ljust(out, s.width, " ")


def _print_hex_width(s: _Spec, number: int, fill: str, token: str) -> str:
    size = _hexsize(number)
    if number == 0 and s.prec <= 1:
        return _aux_unsigned(s)
    parameter = max(size, s.prec - 1)
    if s.hashtag:
        parameter += 2
    out = _fill(fill, s.width - parameter)
    out += _print_hashtag(number, s.hashtag, token)
    if s.prec - 1 > size:
        return out + _print_h_p(number, s, s.prec - 1, token)
    return out + _digits(number, token)


def format_hex(number: int, flags: Flags, token: str = "x") -> str:
    """Render *number* as a %x (token 'x') or %X (token 'X') conversion."""
    if token not in ("x", "X"):
        raise ValueError(f"hexadecimal token must be 'x' or 'X', got {token!r}")
    number = _unsigned32(number)
    s = _Spec.of(flags)
    fill = "0" if s.zero else " "
    if s.width and s.prec:
        fill = " "
    if s.left:
        return _print_hex_leftalig(s, s.prec - 1, number, token)
    if s.width:
        return _print_hex_width(s, number, fill, token)
    if s.prec:
        return _print_h_p(number, s, s.prec - 1, token)
    return _print_hashtag(number, s.hashtag, token) + _digits(number, token)