"""Byte-buffer operations on NUL-terminated data.

Buffers are ``bytes``, ``bytearray`` or ``memoryview`` objects; the
operations that write need a mutable one. Asking for more bytes than a
buffer holds raises ``ValueError``.
"""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def _check(n: int, available: int, what: str) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > available:
        raise ValueError(f"{what} holds fewer than {n} bytes")


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check(n, len(buf), "buffer")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def _copy(dest: Buffer | None, src: Buffer | None, n: int) -> Buffer | None:
    if dest is None and src is None:
        return dest
    if dest is None or src is None:
        raise ValueError("both buffers are required")
    _check(n, len(dest), "destination")
    _check(n, len(src), "source")
    # Snapshot the source first so overlapping views copy correctly.
    dest[:n] = bytes(src[:n])
    return dest


def memcpy(dest: Buffer | None, src: Buffer | None, n: int) -> Buffer | None:
    """Copy ``n`` bytes from ``src`` into ``dest`` and return ``dest``."""
    return _copy(dest, src, n)


def memmove(dest: Buffer | None, src: Buffer | None, n: int) -> Buffer | None:
    """Copy ``n`` bytes from ``src`` into ``dest``; the two may overlap."""
    return _copy(dest, src, n)


def memchr(buf: Buffer, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (modulo 256) among the first ``n``."""
    _check(n, len(buf), "buffer")
    index = bytes(buf[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def memcmp(first: Buffer, second: Buffer, n: int) -> int:
    """Difference of the first differing bytes within ``n``, or 0."""
    _check(n, len(first), "first buffer")
    _check(n, len(second), "second buffer")
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def strlen(data: Buffer) -> int:
    """Number of bytes before the first NUL, or the whole length if there is none."""
    index = bytes(data).find(0)
    return index if index >= 0 else len(data)


def strdup(data: Buffer) -> bytes:
    """Copy of the NUL-terminated string held in ``data``, without the terminator."""
    return bytes(data[:strlen(data)])


def strlcpy(dst: Buffer, src: Buffer, size: int) -> int:
    """Copy at most ``size - 1`` bytes of the string in ``src`` into ``dst``.

    The copy is NUL-terminated whenever ``size`` is positive. Returns the
    length of the string in ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src_len = strlen(src)
    if size == 0:
        return src_len
    count = min(src_len, size - 1)
    _check(count + 1, len(dst), "destination")
    dst[:count] = bytes(src[:count])
    dst[count] = 0
    return src_len


def strlcat(dst: Buffer, src: Buffer, size: int) -> int:
    """Append the string in ``src`` to the one in ``dst`` within ``size`` bytes in total.

    Returns the length the full result would have had.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = min(strlen(dst), size)
    src_len = strlen(src)
    if dst_len < size:
        count = min(src_len, size - dst_len - 1)
        end = dst_len + count
        _check(end + 1, len(dst), "destination")
        dst[dst_len:end] = bytes(src[:count])
        dst[end] = 0
    return dst_len + src_len