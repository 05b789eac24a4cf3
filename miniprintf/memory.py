"""Byte-buffer primitives: fill, copy, move, search and compare.

Buffers are bytes-like objects; functions that write need a mutable
one such as a bytearray. Counts that reach past the end of a buffer
raise ValueError instead of touching memory they do not own.
"""

from __future__ import annotations

from typing import Optional


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with c (taken modulo 256) and return it."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    memset(buffer, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of nmemb elements of size bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dest and return dest."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(memoryview(src)[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from offset src to offset dest; regions may overlap."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    if dest == src or n == 0:
        return buffer
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to c within the first n bytes, or None."""
    _check_count(n, len(data))
    index = bytes(memoryview(data)[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair, else 0."""
    _check_count(n, len(a), len(b))
    for x, y in zip(memoryview(a)[:n], memoryview(b)[:n]):
        if x != y:
            return x - y
    return 0