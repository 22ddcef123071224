"""Byte-buffer helpers: search, compare, copy, move and fill."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _require_span(buf: BytesLike, n: int, offset: int = 0) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if offset < 0:
        raise IndexError("offset must not be negative")
    if offset + n > len(buf):
        raise IndexError(
            f"span [{offset}:{offset + n}] out of range for buffer of {len(buf)} bytes"
        )


def mem_find(buf: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (as an unsigned byte) in the first ``n`` bytes."""
    _require_span(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def mem_compare(a: BytesLike, b: BytesLike, n: int) -> int:
    """Difference of the first differing bytes within ``n`` bytes; 0 when equal."""
    _require_span(a, n)
    _require_span(b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def mem_copy_until(dst: bytearray, src: BytesLike, c: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` into ``dst`` up to and including the first ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just past
    the copied ``c``, or ``None`` when ``c`` was not among the ``n`` bytes.
    """
    _require_span(src, n)
    found = bytes(src[:n]).find(c & 0xFF)
    count = n if found < 0 else found + 1
    _require_span(dst, count)
    dst[:count] = bytes(src[:count])
    return None if found < 0 else count


def mem_move(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buf``; overlapping regions are handled."""
    _require_span(buf, n, src_offset)
    _require_span(buf, n, dst_offset)
    buf[dst_offset:dst_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def mem_set(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (as an unsigned byte)."""
    _require_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def zero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return mem_set(buf, 0, n)


def mem_copy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _require_span(src, n)
    _require_span(dst, n)
    dst[:n] = bytes(src[:n])
    return dst