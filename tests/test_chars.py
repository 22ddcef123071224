import pytest

from rtone.chars import (
    atoi,
    atoi_consume,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_white,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", [" ", "\n", "\t"])
def test_is_white_true(c):
    assert is_white(c) is True


@pytest.mark.parametrize("c", ["\r", "\v", "a", "0"])
def test_is_white_false(c):
    assert is_white(c) is False


def test_alpha_digit_alnum_partition():
    for code in range(128):
        c = chr(code)
        assert is_alnum(c) == (is_alpha(c) or is_digit(c))
        assert not (is_alpha(c) and is_digit(c))


def test_alpha_counts():
    assert sum(is_alpha(chr(i)) for i in range(256)) == 52
    assert sum(is_digit(chr(i)) for i in range(256)) == 10


def test_is_ascii_bounds():
    assert is_ascii("\x00")
    assert is_ascii("\x7f")
    assert not is_ascii("\x80")
    assert not is_ascii("é")


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print("\x1f")
    assert not is_print("\x7f")


def test_case_round_trip():
    for code in range(ord("a"), ord("z") + 1):
        c = chr(code)
        assert to_lower(to_upper(c)) == c
        assert to_upper(c) == c.upper()


@pytest.mark.parametrize("c", ["1", "{", "@", "[", "`", " "])
def test_case_non_letters_unchanged(c):
    assert to_lower(c) == c
    assert to_upper(c) == c


def test_non_character_rejected():
    with pytest.raises(TypeError):
        is_digit("ab")
    with pytest.raises(TypeError):
        to_lower(65)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("\t\n+7", 7),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("- 5", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_consume_returns_rest():
    assert atoi_consume("12, 34") == (12, ", 34")
    assert atoi_consume("  -3;") == (-3, ";")


def test_atoi_consume_chain():
    value, rest = atoi_consume("10,20,30")
    values = [value]
    while rest:
        value, rest = atoi_consume(rest[1:])
        values.append(value)
    assert values == [10, 20, 30]


@pytest.mark.parametrize("n", [0, 5, -5, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_rejects_float():
    with pytest.raises(TypeError):
        itoa(1.5)