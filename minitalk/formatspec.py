"""Parsing of printf-style format strings into literal text and conversion specs.

A conversion is written ``%[flags][width][.precision][length]conversion``,
where:

* the flags are any of ``-+ #0``, each at most once;
* the width and the precision are decimal numbers no larger than
  ``INT_MAX``, or ``*`` to take the value from the argument iterator;
* the length modifier is one of ``hh h ll l j z t L``;
* the conversion is one of :data:`SPECIFIERS`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .strutil import duplicate

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

FLAGS = "-+ #0"
SPECIFIERS = "cspdiuxX%fFeEnok"

_FLAG_FIELDS = {
    "-": "minus",
    "+": "plus",
    " ": "space",
    "#": "hash",
    "0": "zero",
}


class FormatError(ValueError):
    """Raised when a format string holds an invalid conversion."""


class Length(IntEnum):
    """Length modifier of a conversion."""

    NONE = 0
    HH = 1
    H = 2
    LL = 3
    L = 4
    J = 5
    Z = 6
    T = 7
    LONG_DOUBLE = 8

    @property
    def token(self) -> str:
        """The text that selects this modifier in a format string."""
        return _LENGTH_TOKENS[self]


_LENGTH_TOKENS = ("", "hh", "h", "ll", "l", "j", "z", "t", "L")


@dataclass
class FormatSpec:
    """One parsed conversion of a format string."""

    conversion: str = ""
    minus: bool = False
    plus: bool = False
    space: bool = False
    hash: bool = False
    zero: bool = False
    width: int = 0
    dot: bool = False
    precision: int = 0
    length: Length = Length.NONE


def _next_int(args: Iterator[Any]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise FormatError("'*' needs an argument, but none is left") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"'*' needs an int argument, got {value!r}")
    if not INT_MIN <= value <= INT_MAX:
        raise FormatError(f"'*' argument out of int range: {value!r}")
    return value


def _read_number(text: str, pos: int, args: Iterator[Any]) -> tuple[int, int]:
    """Read a width or precision at ``pos``; return it and the new position."""
    if pos < len(text) and text[pos] == "*":
        return _next_int(args), pos + 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        if value > INT_MAX:
            raise FormatError("width or precision larger than INT_MAX")
        pos += 1
    return value, pos


def parse_spec(text: str, args: Iterable[Any] = ()) -> tuple[FormatSpec, int]:
    """Parse the conversion at the start of ``text`` (the part after ``%``).

    ``*`` widths and precisions take values from ``args``; pass an iterator to
    share it with the caller. Returns the spec and the number of characters
    it spans. Raises :class:`FormatError` when the conversion is invalid.
    """
    arg_iter = iter(args)
    body = duplicate(text)
    spec = FormatSpec()
    pos = 0

    while pos < len(body) and body[pos] in _FLAG_FIELDS:
        field = _FLAG_FIELDS[body[pos]]
        if getattr(spec, field):
            raise FormatError(f"flag {body[pos]!r} given twice")
        setattr(spec, field, True)
        pos += 1

    spec.width, pos = _read_number(body, pos, arg_iter)

    if pos < len(body) and body[pos] == ".":
        spec.dot = True
        pos += 1
    spec.precision, pos = _read_number(body, pos, arg_iter)

    for length in Length:
        if length is not Length.NONE and body.startswith(length.token, pos):
            spec.length = length
            pos += len(length.token)
            break

    if pos >= len(body) or body[pos] not in SPECIFIERS:
        found = body[pos] if pos < len(body) else "end of string"
        raise FormatError(f"unknown conversion: {found!r}")
    spec.conversion = body[pos]
    return spec, pos + 1


def tokenize_format(fmt: str, args: Iterable[Any] = ()) -> Iterator[str | FormatSpec]:
    """Yield the literal runs and conversion specs of ``fmt`` in order.

    The generator is lazy, so a caller sharing the ``args`` iterator can take
    each conversion's value between tokens.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be str, got {type(fmt).__name__}")
    arg_iter = iter(args)
    body = duplicate(fmt)
    pos = 0
    while pos < len(body):
        percent = body.find("%", pos)
        if percent < 0:
            yield body[pos:]
            return
        if percent > pos:
            yield body[pos:percent]
        spec, consumed = parse_spec(body[percent + 1 :], arg_iter)
        yield spec
        pos = percent + 1 + consumed