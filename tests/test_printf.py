import pytest

from pypipex.printf import (
    format_char,
    format_pointer,
    format_str,
    parse_flags,
    printf,
    sprintf,
)
from pypipex.printf_numbers import Flags, format_hex, format_integer, format_unsigned


def test_plain_text_passes_through():
    assert sprintf("plain text") == "plain text"


def test_percent_literal():
    assert sprintf("100%%") == "100%"


def test_string_conversion():
    assert sprintf("<%s>", "abc") == "<abc>"


def test_string_width_right_aligned():
    out = sprintf("%8s", "abc")
    assert len(out) == 8
    assert out.endswith("abc")
    assert out.strip() == "abc"


def test_string_width_left_aligned():
    out = sprintf("%-8s", "abc")
    assert len(out) == 8
    assert out.startswith("abc")
    assert out.strip() == "abc"


def test_string_precision_truncates():
    out = sprintf("%.2s", "abcdef")
    assert len(out) == 2
    assert "abcdef".startswith(out)


def test_null_string_with_width():
    out = sprintf("%10s", None)
    assert len(out) == 10
    assert out.endswith("(null)")


def test_null_string_precision_rules():
    assert sprintf("%.3s", None) == ""
    assert sprintf("%.6s", None) == "(null)"


def test_format_str_matches_sprintf():
    flags = Flags(width=6, precision=2, left_align=True)
    assert format_str("hello", flags) == sprintf("%-6.2s", "hello")


def test_null_pointer():
    assert sprintf("%p", 0) == "(nil)"
    assert format_pointer(None, Flags()) == "(nil)"


def test_pointer_hex_round_trip():
    out = sprintf("%p", 48879)
    assert out.startswith("0x")
    assert int(out, 16) == 48879


def test_pointer_padding():
    right = format_pointer(255, Flags(width=12))
    left = format_pointer(255, Flags(width=12, left_align=True))
    assert len(right) == len(left) == 12
    assert right.strip() == left.strip()
    assert left.startswith("0x")


def test_char_conversion():
    assert sprintf("%c", "A") == "A"
    assert sprintf("%c", 66) == chr(66)


def test_char_width():
    out = format_char("z", Flags(width=3))
    assert len(out) == 3
    assert out.endswith("z")
    assert format_char("z", Flags(width=3, left_align=True)).startswith("z")


def test_integer_delegates_to_number_rendering():
    assert sprintf("%5d", -7) == format_integer(-7, Flags(width=5))
    assert sprintf("%+i", 9) == format_integer(9, Flags(sign_plus=True))


def test_hex_delegates_to_number_rendering():
    assert sprintf("%#x", 255) == format_hex(255, Flags(hashtag=True), "x")
    assert int(sprintf("%X", 3054), 16) == 3054


def test_unsigned_wraps_to_32_bits():
    assert int(sprintf("%u", -1)) == 0xFFFFFFFF
    assert sprintf("%08u", 12) == format_unsigned(12, Flags(zero=True, width=8))


def test_parse_flags_full_spec():
    fmt = "%-08.3d"
    flags, pos = parse_flags(fmt, 1)
    assert fmt[pos] == "d"
    assert flags.left_align and flags.zero
    assert flags.width == 8
    assert flags.precision == 3


def test_parse_flags_without_precision():
    fmt = "%#12x"
    flags, pos = parse_flags(fmt, 1)
    assert fmt[pos] == "x"
    assert flags.hashtag
    assert flags.width == 12
    assert flags.precision is None


def test_unknown_conversion_is_dropped():
    assert sprintf("a%qb") == "ab"


def test_lone_percent_is_rejected():
    with pytest.raises(ValueError):
        sprintf("%")


def test_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_printf_writes_stdout(capsys):
    count = printf("x%sy", "mid")
    captured = capsys.readouterr().out
    assert captured == "x" + "mid" + "y"
    assert count == len(captured)