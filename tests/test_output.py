import io

import pytest

from rtone.output import put_char, put_endl, put_nbr, put_str


def test_put_char_to_stream():
    buf = io.StringIO()
    put_char("x", buf)
    put_char("y", buf)
    assert buf.getvalue() == "xy"


def test_put_char_rejects_strings():
    with pytest.raises(TypeError):
        put_char("xy", io.StringIO())


def test_put_str_and_none():
    buf = io.StringIO()
    put_str("hello", buf)
    put_str(None, buf)
    assert buf.getvalue() == "hello"


def test_put_endl():
    buf = io.StringIO()
    put_endl("line", buf)
    put_endl(None, buf)
    assert buf.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 9, 10, -1, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_int_min():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_rejects_float():
    with pytest.raises(TypeError):
        put_nbr(2.5, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("Please enter the configuration file !\n")
    put_char("a")
    put_nbr(-3)
    put_endl("")
    assert capsys.readouterr().out == "Please enter the configuration file !\na-3\n"