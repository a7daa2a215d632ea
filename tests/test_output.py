import io

import pytest

from pipex.libft.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("a", out)
    put_char("b", out)
    assert out.getvalue() == "ab"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hello world", out)
    assert out.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line\n"


@pytest.mark.parametrize("number", [0, 7, 42, -5, 2147483647, -2147483648])
def test_put_nbr_matches_decimal_text(number):
    out = io.StringIO()
    put_nbr(number, out)
    assert int(out.getvalue()) == number


def test_put_nbr_smallest_int():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_put_nbr_rejects_non_integer():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("to stdout")
    assert capsys.readouterr().out == "to stdout"