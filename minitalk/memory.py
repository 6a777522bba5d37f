"""Byte-buffer primitives: filling, copying, searching and comparing.

Each function works on the first ``n`` bytes of its buffers and raises
``ValueError`` when ``n`` is negative or reaches past the end of a buffer.
Destinations must be mutable (``bytearray`` or a writable ``memoryview``).
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
MutableBytes = Union[bytearray, memoryview]

_SIZE_MAX = (1 << 64) - 1


def _check_span(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(
                f"byte count {n} exceeds buffer length {len(buffer)}"
            )


def fill(buffer: MutableBytes, value: int, n: int) -> MutableBytes:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_span(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def zero(buffer: MutableBytes, n: int) -> MutableBytes:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    return fill(buffer, 0, n)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the total would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > _SIZE_MAX // size:
        raise OverflowError(f"{count} elements of {size} bytes overflow")
    return bytearray(count * size)


def copy_until(
    dest: MutableBytes, src: BytesLike, stop: int, n: int
) -> Optional[int]:
    """Copy bytes from ``src`` to ``dest`` up to and including ``stop``.

    At most ``n`` bytes are copied. Returns the index in ``dest`` just after
    the copied ``stop`` byte, or ``None`` if it was not among the first ``n``.
    """
    _check_span(n, dest, src)
    stop &= 0xFF
    found = bytes(src[:n]).find(stop)
    end = n if found == -1 else found + 1
    dest[:end] = src[:end]
    return None if found == -1 else end


def find_byte(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first ``value`` byte within ``data[:n]``, or ``None``."""
    _check_span(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index == -1 else index


def compare_bytes(left: BytesLike, right: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch.

    Returns 0 when the spans are equal or ``n`` is zero.
    """
    _check_span(n, left, right)
    for a, b in zip(bytes(left[:n]), bytes(right[:n])):
        if a != b:
            return a - b
    return 0


def copy_bytes(dest: MutableBytes, src: BytesLike, n: int) -> MutableBytes:
    """Copy the first ``n`` bytes of ``src`` into ``dest``."""
    _check_span(n, dest, src)
    dest[:n] = src[:n]
    return dest


def move_bytes(buffer: MutableBytes, dest: int, src: int, n: int) -> MutableBytes:
    """Move ``n`` bytes within ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest, src) + n > len(buffer):
        raise ValueError("move reaches past the end of the buffer")
    if n:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer