"""Byte-buffer helpers: filling, copying, moving, searching and comparing.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``); buffers that are only read may be any bytes-like object.
Byte values are reduced to their low eight bits, as a C ``unsigned char``
would be. A length that is negative or that runs past the end of a buffer
raises ``ValueError``.
"""

from __future__ import annotations

from typing import Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_span(name: str, length: int, *buffers: ReadableBuffer) -> None:
    if length < 0:
        raise ValueError(f"{name} must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(
                f"{name} {length} exceeds buffer of {len(buf)} bytes"
            )


def memset(buf: WritableBuffer, value: int, length: int) -> WritableBuffer:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` and return it."""
    _check_span("length", length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: WritableBuffer, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError(f"count and size must not be negative, got {count}, {size}")
    return bytearray(count * size)


def memcpy(dst: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    _check_span("n", n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: WritableBuffer, src: ReadableBuffer, c: int, n: int) -> int | None:
    """Copy bytes from ``src`` to ``dst`` up to and including the first ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just past the
    copied ``c``, or ``None`` when ``c`` was not among the first ``n`` bytes.
    """
    _check_span("n", n, dst, src)
    chunk = bytes(src[:n])
    index = chunk.find(c & 0xFF)
    if index < 0:
        dst[:n] = chunk
        return None
    dst[:index + 1] = chunk[:index + 1]
    return index + 1


def memmove(
    dst: WritableBuffer, dst_offset: int, src_offset: int, length: int
) -> WritableBuffer:
    """Move ``length`` bytes within ``dst`` from ``src_offset`` to ``dst_offset``.

    The regions may overlap; the result is as if the source were copied to a
    temporary buffer first. Returns ``dst``.
    """
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_span("length", length)
    if max(dst_offset, src_offset) + length > len(dst):
        raise ValueError("move runs past the end of the buffer")
    dst[dst_offset:dst_offset + length] = bytes(dst[src_offset:src_offset + length])
    return dst


def memchr(data: ReadableBuffer, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` within the first ``n`` bytes."""
    _check_span("n", n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing pair of bytes, or 0.
    """
    _check_span("n", n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0