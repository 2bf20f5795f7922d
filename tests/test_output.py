import io
import os

import pytest

from pypipex import output


def _read_fd(write):
    read_end, write_end = os.pipe()
    try:
        count = write(write_end)
    finally:
        os.close(write_end)
    with os.fdopen(read_end, "rb") as reader:
        return count, reader.read().decode()


def test_putstr_to_stream():
    buf = io.StringIO()
    count = output.putstr("hello", buf)
    assert buf.getvalue() == "hello"
    assert count == len("hello")


def test_putendl_appends_newline():
    buf = io.StringIO()
    count = output.putendl("line", buf)
    assert buf.getvalue() == "line\n"
    assert count == len(buf.getvalue())


def test_putchar_accepts_str_and_code():
    buf = io.StringIO()
    output.putchar("x", buf)
    output.putchar(ord("A"), buf)
    assert buf.getvalue() == "xA"


@pytest.mark.parametrize("value", [0, 7, -1, 2147483647, -2147483648, 90210])
def test_putnbr_writes_decimal(value):
    buf = io.StringIO()
    count = output.putnbr(value, buf)
    assert buf.getvalue() == str(value)
    assert count == len(str(value))


def test_putnbr_wraps_to_32_bits():
    wide = io.StringIO()
    narrow = io.StringIO()
    output.putnbr(2**32 + 3, wide)
    output.putnbr(3, narrow)
    assert wide.getvalue() == narrow.getvalue()


def test_default_target_is_stdout(capsys):
    output.putstr("abc")
    output.putchar("!")
    output.putendl("")
    output.putnbr(-12)
    assert capsys.readouterr().out == "abc!\n-12"


def test_write_to_file_descriptor():
    count, data = _read_fd(lambda fd: output.putstr("through a pipe", fd))
    assert data == "through a pipe"
    assert count == len(data)


def test_putendl_to_file_descriptor():
    _, data = _read_fd(lambda fd: output.putendl("end", fd))
    assert data == "end\n"


def test_putnbr_to_file_descriptor():
    _, data = _read_fd(lambda fd: output.putnbr(-4096, fd))
    assert data == "-4096"


def test_none_string_rejected():
    with pytest.raises(TypeError):
        output.putstr(None, io.StringIO())
    with pytest.raises(TypeError):
        output.putendl(None, io.StringIO())


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        output.putchar("ab", io.StringIO())