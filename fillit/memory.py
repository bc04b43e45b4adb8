"""Byte-buffer helpers: allocation, filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

MutableBuffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_span(buf: ReadableBuffer, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, {n} requested")


def memalloc(size: int) -> bytearray:
    """Return a new zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return bytearray(size)


def memset(buf: MutableBuffer, value: int, n: int) -> MutableBuffer:
    """Set the first ``n`` bytes of ``buf`` to ``value`` truncated to a byte."""
    _check_span(buf, n, "buffer")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: MutableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dst: MutableBuffer, src: ReadableBuffer, n: int) -> MutableBuffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_span(dst, n, "destination")
    _check_span(src, n, "source")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: MutableBuffer, src: ReadableBuffer, n: int) -> MutableBuffer:
    """Copy ``n`` bytes from ``src`` to ``dst``; the two may overlap."""
    _check_span(dst, n, "destination")
    _check_span(src, n, "source")
    snapshot = bytes(src[:n])
    dst[:n] = snapshot
    return dst


def memccpy(
    dst: MutableBuffer, src: ReadableBuffer, c: int, n: int
) -> Optional[int]:
    """Copy up to ``n`` bytes, stopping after the first byte equal to ``c``.

    Returns the offset in ``dst`` just past the copied ``c``, or ``None``
    when ``c`` was not among the first ``n`` bytes of ``src``.
    """
    _check_span(src, n, "source")
    target = c & 0xFF
    stop = bytes(src[:n]).find(bytes([target]))
    count = n if stop < 0 else stop + 1
    _check_span(dst, count, "destination")
    dst[:count] = bytes(src[:count])
    return None if stop < 0 else count


def memchr(buf: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes."""
    _check_span(buf, n, "buffer")
    index = bytes(buf[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_span(a, n, "first buffer")
    _check_span(b, n, "second buffer")
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0