"""Byte-buffer operations on bytearrays and other mutable buffers.

Functions that write take a mutable buffer and modify it in place,
returning it for convenience. Reaching past the end of a buffer raises
IndexError instead of touching memory that is not there.
"""

from __future__ import annotations

from typing import Optional, Union

ReadBuffer = Union[bytes, bytearray, memoryview]
WriteBuffer = Union[bytearray, memoryview]


def _check_span(buffer: ReadBuffer, start: int, n: int) -> None:
    if n < 0 or start < 0:
        raise ValueError("offsets and counts must not be negative")
    if start + n > len(buffer):
        raise IndexError(
            f"span of {n} bytes at {start} exceeds buffer of {len(buffer)} bytes"
        )


def bzero(buffer: WriteBuffer, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    _check_span(buffer, 0, n)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buffer: ReadBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c among the first n, or None."""
    _check_span(buffer, 0, n)
    index = bytes(buffer[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadBuffer, second: ReadBuffer, n: int) -> int:
    """Compare n bytes; zero if equal, else the difference at the first mismatch."""
    if n < 0:
        raise ValueError("count must not be negative")
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    if n > min(len(first), len(second)):
        raise IndexError("comparison reaches past the end of a buffer")
    return 0


def memcpy(dest: WriteBuffer, src: ReadBuffer, n: int) -> WriteBuffer:
    """Copy n bytes from src to the start of dest."""
    _check_span(src, 0, n)
    _check_span(dest, 0, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(
    dest: WriteBuffer, dest_offset: int, src_offset: int, n: int
) -> WriteBuffer:
    """Move n bytes within one buffer; overlapping regions are handled."""
    _check_span(dest, dest_offset, n)
    _check_span(dest, src_offset, n)
    dest[dest_offset:dest_offset + n] = bytes(dest[src_offset:src_offset + n])
    return dest


def memset(buffer: WriteBuffer, c: int, n: int) -> WriteBuffer:
    """Fill the first n bytes of buffer with the byte value c."""
    _check_span(buffer, 0, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer