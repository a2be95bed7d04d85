"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(length: int, *buffers: bytes | bytearray | memoryview) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(
                f"length {length} exceeds buffer of size {len(buffer)}"
            )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value``."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def memcpy(dest: bytearray, src: bytes | bytearray, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dest``."""
    if dest is src:
        _check_length(length, dest)
        return dest
    _check_length(length, dest, src)
    dest[:length] = src[:length]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, buffer[dest:], buffer[src:])
    if dest != src:
        buffer[dest:dest + length] = bytes(buffer[src:src + length])
    return buffer


def memchr(buffer: bytes | bytearray, value: int, length: int) -> int | None:
    """Return the index of the first ``value`` byte within ``length``, or None."""
    _check_length(length, buffer)
    index = bytes(buffer[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first mismatch."""
    _check_length(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise MemoryError("requested allocation overflows the address space")
    return bytearray(count * size)