"""Bounded comparison, searching, trimming and slicing of NUL-terminated text.

Like the helpers in :mod:`minitalk.strutil`, these treat a text as ending at
its first NUL character and accept ``str`` or ``bytes``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, MutableSequence
from typing import Any, AnyStr

from .strutil import duplicate


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value!r}")


def _codes(text: str | bytes) -> list[int]:
    body = duplicate(text)
    if isinstance(body, str):
        return [ord(c) for c in body]
    return list(body)


def _single(text: AnyStr, char: Any) -> AnyStr:
    """Normalise ``char`` to a one-character value of the same type as ``text``."""
    if isinstance(text, str):
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    if isinstance(char, int):
        if not 0 <= char <= 0xFF:
            raise ValueError(f"byte out of range: {char!r}")
        return bytes([char])
    if isinstance(char, (bytes, bytearray)) and len(char) == 1:
        return bytes(char)
    raise ValueError(f"expected a single byte, got {char!r}")


def compare_n(left: str | bytes, right: str | bytes, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch.

    Returns 0 when the first ``n`` characters agree or ``n`` is 0. A shorter
    text compares as if followed by a zero code.
    """
    _check_non_negative("n", n)
    if n == 0:
        return 0
    left_codes = [*_codes(left), 0]
    right_codes = [*_codes(right), 0]
    pairs = list(zip(left_codes, right_codes))[:n]
    for a, b in pairs:
        if a != b or a == 0:
            return a - b
    return 0


def copy_padded(text: AnyStr, size: int) -> AnyStr:
    """Copy up to ``size`` characters, padding with NUL to exactly ``size``.

    When ``text`` is at least ``size`` long the result carries no terminator.
    """
    _check_non_negative("size", size)
    body = duplicate(text)[:size]
    pad = "\0" if isinstance(body, str) else b"\0"
    return body + pad * (size - len(body))


def duplicate_n(text: AnyStr, size: int) -> AnyStr:
    """Copy at most ``size`` characters of ``text``."""
    _check_non_negative("size", size)
    return duplicate(text)[:size]


def find_substring(haystack: AnyStr, needle: AnyStr, limit: int) -> int | None:
    """Index of the first ``needle`` lying wholly within the first ``limit`` characters.

    An empty ``needle`` is found at 0. Returns ``None`` when there is no match.
    """
    _check_non_negative("limit", limit)
    little = duplicate(needle)
    if not little:
        return 0
    position = duplicate(haystack)[:limit].find(little)
    return None if position < 0 else position


def last_index_of(text: AnyStr, char: Any) -> int | None:
    """Index of the last ``char`` in ``text``; the terminator is found at the end.

    Returns ``None`` when ``char`` does not occur.
    """
    body = duplicate(text)
    wanted = _single(text, char)
    if wanted in ("\0", b"\0"):
        return len(body)
    position = body.rfind(wanted)
    return None if position < 0 else position


def trim(text: AnyStr, charset: AnyStr) -> AnyStr:
    """Remove leading and trailing characters that belong to ``charset``."""
    body = duplicate(text)
    chars = duplicate(charset)
    if not chars:
        return body
    return body.strip(chars)


def substring(text: AnyStr, start: int, length: int) -> AnyStr:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    body = duplicate(text)
    if start >= len(body):
        return body[:0]
    return body[start : start + length]


def wide_length(text: Iterable[Any]) -> int:
    """Count wide characters (or code points) before the first zero."""
    count = 0
    for item in text:
        if item == 0 or item == "\0":
            break
        count += 1
    return count


def reverse_in_place(values: MutableSequence[Any]) -> None:
    """Reverse a mutable sequence in place."""
    values.reverse()


def is_nan(value: float) -> bool:
    """True when ``value`` is not a number."""
    if isinstance(value, (int, float)):
        return math.isnan(value)
    return value != value