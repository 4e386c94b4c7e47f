import io

import pytest

from wirefdf.libft.output import putchar, putendl, putnbr, putstr


def test_putchar_string():
    out = io.StringIO()
    putchar("a", out)
    assert out.getvalue() == "a"


def test_putchar_code_point():
    out = io.StringIO()
    putchar(ord("Z"), out)
    assert out.getvalue() == "Z"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar("ab", io.StringIO())


def test_putstr_writes_text():
    out = io.StringIO()
    putstr("hello", out)
    putstr(" world", out)
    assert out.getvalue() == "hello world"


def test_putstr_none_writes_nothing():
    out = io.StringIO()
    putstr(None, out)
    assert out.getvalue() == ""


def test_putstr_stops_at_nul():
    out = io.StringIO()
    putstr("abc\0def", out)
    assert out.getvalue() == "abc"


def test_putendl_appends_newline():
    out = io.StringIO()
    putendl("Error : Can't open file", out)
    assert out.getvalue() == "Error : Can't open file\n"


def test_putendl_none_writes_nothing():
    out = io.StringIO()
    putendl(None, out)
    assert out.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, -42, 2147483647, -2147483648])
def test_putnbr_round_trip(n):
    out = io.StringIO()
    putnbr(n, out)
    assert int(out.getvalue()) == n


def test_putnbr_negative_sign():
    out = io.StringIO()
    putnbr(-42, out)
    assert out.getvalue() == "-42"


def test_default_stream_is_stdout(capsys):
    putendl("shown")
    assert capsys.readouterr().out == "shown\n"