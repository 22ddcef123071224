"""String search, comparison and construction helpers."""

from __future__ import annotations

from typing import Callable, Optional

_TRIM_CHARS = " \n\t"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"expected a single character, got {c!r}")
    return c


def find_char(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or ``None``.

    Searching for ``"\\0"`` finds the terminator, at ``len(s)``.
    """
    _single_char(c)
    if c == "\0":
        index = s.find(c)
        return len(s) if index < 0 else index
    index = s.find(c)
    return None if index < 0 else index


def rfind_char(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or ``None``.

    Searching for ``"\\0"`` finds the terminator, at ``len(s)``.
    """
    _single_char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def _difference(s1: str, s2: str, limit: Optional[int]) -> int:
    length = max(len(s1), len(s2))
    if limit is not None:
        length = min(length, limit)
    for i in range(length):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def compare(s1: str, s2: str) -> int:
    """Difference of the first differing characters; 0 when equal."""
    return _difference(s1, s2, None)


def compare_n(s1: str, s2: str, n: int) -> int:
    """Like :func:`compare`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _difference(s1, s2, n)


def equal(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are given and identical."""
    if s1 is None or s2 is None:
        return False
    return s1 == s2


def equal_n(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when both strings are given and agree on their first ``n`` characters."""
    if s1 is None or s2 is None:
        return False
    if n < 0:
        raise ValueError("n must not be negative")
    return s1[:n] == s2[:n]


def find(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``, or ``None``.

    An empty needle is found at index 0.
    """
    index = haystack.find(needle)
    return None if index < 0 else index


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`find`, but the first match must end within ``length`` characters."""
    if not needle:
        return 0
    index = haystack.find(needle)
    if index < 0 or index + len(needle) > length:
        return None
    return index


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    _single_char(sep)
    if sep == "\0":
        raise ValueError("separator must not be the NUL character")
    return [piece for piece in s.split(sep) if piece]


def substring(s: str, start: int, length: int) -> str:
    """The ``length`` characters of ``s`` beginning at ``start``."""
    if start < 0 or length < 0 or start + length > len(s):
        raise IndexError(
            f"substring [{start}:{start + length}] out of range for length {len(s)}"
        )
    return s[start:start + length]


def trim(s: str) -> str:
    """Strip spaces, newlines and tabs from both ends."""
    return s.strip(_TRIM_CHARS)


def map_chars(s: str, func: Callable[[str], str]) -> str:
    """Apply ``func`` to every character and join the results."""
    return "".join(func(c) for c in s)


def map_chars_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Apply ``func(index, char)`` to every character and join the results."""
    return "".join(func(i, c) for i, c in enumerate(s))


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` (terminator included).

    Returns the resulting string and the length the full result would
    have had, so truncation shows as a returned length above the
    string's own length.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dst) > size:
        return dst, len(src) + size
    room = max(size - 1 - len(dst), 0)
    return dst + src[:room], len(dst) + len(src)


def concat_n(s1: str, s2: str, maxlen: int) -> str:
    """Append at most ``maxlen`` characters of ``s2`` to ``s1``."""
    if maxlen < 0:
        raise ValueError("maxlen must not be negative")
    return s1 + s2[:maxlen]


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("join expects two strings")
    return s1 + s2