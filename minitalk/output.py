"""Writing characters, text and numbers to file descriptors."""

from __future__ import annotations

import os

from .strutil import duplicate


def _as_bytes(text: str | bytes) -> bytes:
    body = duplicate(text)
    return body.encode("utf-8") if isinstance(body, str) else bytes(body)


def put_char(char: str | bytes | int, fd: int) -> int:
    """Write a single character to ``fd``; return the number of bytes written."""
    if isinstance(char, int):
        if not 0 <= char <= 0xFF:
            raise ValueError(f"byte out of range: {char!r}")
        data = bytes([char])
    elif isinstance(char, (bytes, bytearray)):
        if len(char) != 1:
            raise ValueError(f"expected a single byte, got {char!r}")
        data = bytes(char)
    elif isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        data = char.encode("utf-8")
    else:
        raise TypeError(f"expected str, bytes or int, got {type(char).__name__}")
    return os.write(fd, data)


def put_text(text: str | bytes, fd: int) -> int:
    """Write ``text`` up to its terminator, retrying short writes.

    Returns the number of bytes written; raises ``OSError`` on failure.
    """
    view = memoryview(_as_bytes(text))
    total = 0
    while total < len(view):
        total += os.write(fd, view[total:])
    return total


def put_line(text: str | bytes, fd: int) -> int:
    """Write ``text`` followed by a newline; return the bytes written."""
    return put_text(_as_bytes(text) + b"\n", fd)


def put_number(number: int, fd: int) -> int:
    """Write the decimal form of ``number``; return the bytes written."""
    return put_text(str(int(number)), fd)