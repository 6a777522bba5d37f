"""Helpers for NUL-terminated text: splitting, searching, joining, bounded copies.

Every function treats its input as ending at the first NUL character, if
one is present, in the way a C string would. ``str`` and ``bytes`` are
both accepted wherever the operation makes sense for both.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from itertools import groupby
from typing import Any, AnyStr

_NUL_STR = "\0"
_NUL_BYTES = b"\0"


def _terminated(text: AnyStr) -> AnyStr:
    """Return ``text`` up to, not including, its first NUL."""
    if isinstance(text, str):
        return text.split(_NUL_STR, 1)[0]
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).split(_NUL_BYTES, 1)[0]
    raise TypeError(f"expected str or bytes, got {type(text).__name__}")


def _codes(text: str | bytes) -> Iterator[int]:
    """Yield the character codes of ``text`` up to its terminator."""
    body = _terminated(text)
    if isinstance(body, str):
        yield from map(ord, body)
    else:
        yield from body


def _is_terminator(item: Any) -> bool:
    return item == 0 or item == _NUL_STR or item == _NUL_BYTES


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size!r}")


def length(text: str | bytes) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(text))


def split_words(text: AnyStr, separators: AnyStr) -> list[AnyStr]:
    """Split ``text`` on any of the ``separators`` characters, dropping empty words."""
    body = _terminated(text)
    seps = _terminated(separators)
    if isinstance(body, bytes):
        sep_set = set(seps)
        return [
            bytes(group)
            for is_sep, group in groupby(body, key=lambda b: b in sep_set)
            if not is_sep
        ]
    sep_set = set(seps)
    return [
        "".join(group)
        for is_sep, group in groupby(body, key=lambda c: c in sep_set)
        if not is_sep
    ]


def index_of(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; the terminator is found at the end.

    Returns ``None`` when ``char`` does not occur.
    """
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    body = _terminated(text)
    if char == _NUL_STR:
        return len(body)
    position = body.find(char)
    return None if position < 0 else position


def compare(left: str | bytes, right: str | bytes) -> int:
    """Difference of the first pair of differing character codes, or 0 if equal.

    A shorter text compares as if followed by a zero code.
    """
    left_codes = [*_codes(left), 0]
    right_codes = [*_codes(right), 0]
    for a, b in zip(left_codes, right_codes):
        if a != b or a == 0:
            return a - b
    return 0


def duplicate(text: AnyStr) -> AnyStr:
    """Return a copy of ``text`` up to its terminator."""
    return _terminated(text)


def for_each_indexed(text: Sequence[Any], func: Callable[[int, Any], object]) -> None:
    """Call ``func(index, item)`` for every element before the terminator."""
    for index, item in enumerate(text):
        if _is_terminator(item):
            break
        func(index, item)


def join(left: AnyStr, right: AnyStr) -> AnyStr:
    """Concatenate two texts, each cut at its terminator."""
    return _terminated(left) + _terminated(right)


def bounded_concat(dest: AnyStr, src: AnyStr, size: int) -> tuple[AnyStr, int]:
    """Append ``src`` to ``dest`` so the result fits a buffer of ``size`` slots.

    One slot is kept for the terminator. Returns the resulting text and the
    length the full concatenation would have had. When ``size`` is no larger
    than ``dest``, ``dest`` is left as is and the reported length is
    ``len(src) + size``.
    """
    _check_size(size)
    head = _terminated(dest)
    tail = _terminated(src)
    current = len(head)
    if size <= current:
        return head, len(tail) + size
    room = size - 1 - current
    return head + tail[:room], current + len(tail)


def bounded_copy(src: AnyStr, size: int) -> tuple[AnyStr, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copy and the full length of ``src``. A ``size`` of 0 copies
    nothing.
    """
    _check_size(size)
    body = _terminated(src)
    if size == 0:
        return body[:0], len(body)
    return body[: size - 1], len(body)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new text from ``func(index, char)`` applied to each character."""
    pieces = []
    for index, char in enumerate(_terminated(text)):
        result = func(index, char)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"mapping must return one character, got {result!r}")
        pieces.append(result)
    return "".join(pieces)