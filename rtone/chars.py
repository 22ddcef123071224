"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

_ATOI_SPACE = " \t\n\v\f\r"
_WHITE = " \n\t"


def _code(c: str) -> int:
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"expected a single character, got {c!r}")
    return ord(c)


def is_white(c: str) -> bool:
    """True for a space, newline or tab."""
    _code(c)
    return c in _WHITE


def is_alpha(c: str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str) -> bool:
    """True for an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str) -> bool:
    """True for a character in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_lower(c: str) -> str:
    """Lower-case an ASCII upper-case letter; other characters pass through."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return chr(code + 32)
    return c


def to_upper(c: str) -> str:
    """Upper-case an ASCII lower-case letter; other characters pass through."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return chr(code - 32)
    return c


def atoi_consume(text: str) -> tuple[int, str]:
    """Parse a leading integer and return it with the unparsed remainder.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text with no digits yields 0.
    """
    i = 0
    length = len(text)
    while i < length and text[i] in _ATOI_SPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    start = i
    while i < length and "0" <= text[i] <= "9":
        i += 1
    value = int(text[start:i]) if i > start else 0
    return sign * value, text[i:]


def atoi(text: str) -> int:
    """Parse a leading integer the way ``atoi`` does, ignoring trailing text."""
    value, _ = atoi_consume(text)
    return value


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {n!r}")
    return f"{n:d}"