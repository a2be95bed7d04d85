import io

import pytest

from solong.output import put_char, put_endl, put_nbr, put_str


def test_put_char_with_string():
    buf = io.StringIO()
    put_char("x", buf)
    assert buf.getvalue() == "x"


def test_put_char_with_code():
    buf = io.StringIO()
    put_char(ord("A"), buf)
    assert buf.getvalue() == "A"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello", buf)
    put_str(" world", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_empty():
    buf = io.StringIO()
    put_str("", buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("clear!!", buf)
    assert buf.getvalue() == "clear!!\n"


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_negative_sign_first():
    buf = io.StringIO()
    put_nbr(-5, buf)
    assert buf.getvalue().startswith("-")
    assert buf.getvalue()[1:] == "5"


def test_put_nbr_zero():
    buf = io.StringIO()
    put_nbr(0, buf)
    assert buf.getvalue() == "0"


def test_default_stream_is_stdout(capsys):
    put_endl("move", None)
    put_nbr(3)
    assert capsys.readouterr().out == "move\n3"