"""Byte-buffer operations on bytearrays and other byte sequences."""

from __future__ import annotations

from collections.abc import Sequence


def _check(length: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > length:
        raise IndexError(f"{what} holds {length} bytes, {n} requested")


def memalloc(size: int) -> bytearray:
    """Return a zero-filled buffer of the given size."""
    if size < 0:
        raise ValueError(f"negative size {size}")
    return bytearray(size)


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of c."""
    _check(len(buffer), n, "buffer")
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buffer."""
    return memset(buffer, 0, n)


def memcpy(dest: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy n bytes from src to the start of dest."""
    _check(len(dest), n, "destination")
    _check(len(src), n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memccpy(dest: bytearray, src: Sequence[int], c: int, n: int) -> int | None:
    """Copy bytes from src to dest, stopping after the first byte equal to c.

    Returns the index in dest just past the copied stop byte, or None when
    the byte was not met within n bytes (all n bytes are then copied).
    """
    target = c & 0xFF
    limit = min(n, len(src))
    try:
        stop = bytes(src[:limit]).index(target)
    except ValueError:
        memcpy(dest, src, n)
        return None
    memcpy(dest, src, stop + 1)
    return stop + 1


def memchr(data: Sequence[int], c: int, n: int) -> int | None:
    """Return the index of the first byte equal to c within n bytes, or None."""
    _check(len(data), n, "data")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: Sequence[int], second: Sequence[int], n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    if first is second or n == 0:
        return 0
    _check(len(first), n, "first")
    _check(len(second), n, "second")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buffer from offset src to offset dst; overlap is safe."""
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check(len(buffer) - dst, n, "destination range")
    _check(len(buffer) - src, n, "source range")
    buffer[dst:dst + n] = buffer[src:src + n]
    return buffer