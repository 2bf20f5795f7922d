"""Integer parsing and formatting with 32-bit integer semantics."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_SIGNS = "+-"


def _wrap(value: int, bits: int) -> int:
    """Reduce *value* to a signed integer of the given width."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def count_bits(number: int) -> int:
    """Number of significant bits; zero counts as one bit, negatives as none."""
    if number == 0:
        return 1
    return number.bit_length() if number > 0 else 0


def _finish(magnitude: int, sign: int) -> int:
    if count_bits(magnitude) > 32:
        magnitude &= 0xFFFFFFFF
    return _wrap(magnitude * sign, 32)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit. Values that do not fit in 32 bits
    wrap around as a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    magnitude = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        magnitude = _wrap(magnitude * 10 + ord(ch) - ord("0"), 64)
    return _finish(magnitude, sign)


def _base_length(base: str) -> int:
    if any(ch in _WHITESPACE or ch in _SIGNS for ch in base):
        return 0
    if len(set(base)) != len(base) or len(base) < 2:
        return 0
    return len(base)


def _well_formed(text: str, base: str) -> bool:
    if not text:
        return False
    return all(ch in base or ch in _SIGNS for ch in text.lstrip(_WHITESPACE))


def atoi_base(text: str | None, base: str | None) -> int:
    """Parse *text* written with the digits of *base*.

    Leading whitespace and any run of signs are skipped; every '-' flips the
    sign. Returns 0 when the base is invalid (fewer than two symbols,
    repeats, whitespace or signs) or when *text* holds a character that is
    neither a base digit nor a sign.
    """
    if text is None or base is None:
        return 0
    radix = _base_length(base)
    if not radix or not _well_formed(text, base):
        return 0
    pos = 0
    sign = 1
    while pos < len(text) and (text[pos] in _WHITESPACE or text[pos] in _SIGNS):
        if text[pos] == "-":
            sign = -sign
        pos += 1
    magnitude = 0
    for ch in text[pos:]:
        digit = base.find(ch)
        if digit < 0:
            digit = radix
        magnitude = _wrap(magnitude * radix + digit, 64)
    return _finish(magnitude, sign)


def itoa(n: int) -> str:
    """Decimal text of *n* taken as a 32-bit signed integer."""
    return str(_wrap(n, 32))