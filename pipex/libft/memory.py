"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

_SIZE_MAX = (1 << 64) - 1


def _check_span(buf, n: int, offset: int = 0) -> None:
    if n < 0 or offset < 0:
        raise ValueError("length and offset must not be negative")
    if offset + n > len(buf):
        raise IndexError(f"span {offset}..{offset + n} exceeds buffer of {len(buf)} bytes")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c; return buf."""
    _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes.

    Raises OverflowError when the product does not fit in 64 bits.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must not be negative")
    if size > 0 and nmemb > _SIZE_MAX // size:
        raise OverflowError("nmemb * size overflows")
    return bytearray(nmemb * size)


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to the low byte of c within n bytes, or None."""
    _check_span(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare n bytes; return the difference of the first differing pair, or 0."""
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest; return dest."""
    _check_span(dest, n)
    _check_span(src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buf from offset src to offset dest, overlap allowed; return buf."""
    _check_span(buf, n, dest)
    _check_span(buf, n, src)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf