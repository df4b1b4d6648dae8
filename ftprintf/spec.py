"""Conversion specifications: parsing of the text that follows a ``%``.

A specification is read as: an optional ``0`` or ``-`` flag, any further
dashes, a field width (digits, or ``*`` to take it from the arguments), an
optional ``.`` followed by a precision (digits or ``*``), and finally one of
the conversion characters ``cspdiuxX%``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from ftprintf.chars import atoi, isdigit

CONVERSIONS = "cspdiuxX%"

_INT_BITS = 32


def _to_int32(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >> (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


class Flag(Enum):
    """Padding flag of a specification."""

    NONE = -1
    ZERO = 0
    LEFT = 1


@dataclass
class Spec:
    """A parsed conversion specification.

    ``escaped_percents`` is the number of literal ``%`` characters produced by
    doubled percent signs before the specification itself. ``conversion`` is
    ``None`` when no conversion follows.
    """

    flag: Flag = Flag.NONE
    width: int = 0
    period: bool = False
    precision: int = 0
    conversion: str | None = None
    width_from_arg: bool = False
    width_was_negative: bool = False
    precision_from_arg: bool = False
    precision_was_negative: bool = False
    escaped_percents: int = 0


def count_digits(n: int) -> int:
    """Number of characters in the decimal form of a 32-bit signed integer."""
    return len(str(_to_int32(n)))


def count_digits_unsigned(n: int) -> int:
    """Number of digits in the decimal form of a 32-bit unsigned integer."""
    return len(str(n & 0xFFFFFFFF))


def _char_at(fmt: str, pos: int) -> str:
    return fmt[pos] if pos < len(fmt) else ""


def _next_int(args: Iterator[int]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise ValueError("not enough arguments for format") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {value!r}")
    return _to_int32(value)


def _parse_flag(fmt: str, pos: int, spec: Spec) -> int:
    ch = _char_at(fmt, pos)
    if ch == "0":
        spec.flag = Flag.ZERO
        pos += 1
    elif ch == "-":
        spec.flag = Flag.LEFT
        pos += 1
    while _char_at(fmt, pos) == "-":
        pos += 1
    return pos


def _parse_width(fmt: str, pos: int, spec: Spec, args: Iterator[int]) -> int:
    ch = _char_at(fmt, pos)
    if ch and (isdigit(ch) or ch == "-"):
        spec.width = atoi(fmt[pos:])
        while (ch := _char_at(fmt, pos)) and (isdigit(ch) or ch == "-"):
            pos += 1
    elif ch in ("*", "+") and ch:
        spec.width_from_arg = True
        spec.width = _next_int(args)
        if spec.width < 0:
            spec.width_was_negative = True
            spec.width = -spec.width
            spec.flag = Flag.LEFT
        pos += 1
    return pos


def _parse_precision(fmt: str, pos: int, spec: Spec, args: Iterator[int]) -> int:
    if _char_at(fmt, pos) != ".":
        return pos
    spec.period = True
    pos += 1
    ch = _char_at(fmt, pos)
    if ch and (isdigit(ch) or ch == "-"):
        spec.precision = atoi(fmt[pos:])
        while (ch := _char_at(fmt, pos)) and isdigit(ch):
            pos += 1
    elif ch in ("*", "+") and ch:
        spec.precision_from_arg = True
        spec.precision = _next_int(args)
        spec.precision_was_negative = spec.precision < 0
        pos += 1
    return pos


def parse_spec(fmt: str, pos: int, args: Iterator[int]) -> tuple[Spec, int]:
    """Parse the specification starting at the ``%`` found at ``fmt[pos]``.

    Width and precision given as ``*`` are taken from ``args``, an iterator
    shared with the caller. Returns the specification and the position just
    past the text it consumed. An unknown conversion character is left
    unconsumed and the specification's ``conversion`` is ``None``.
    """
    if _char_at(fmt, pos) != "%":
        raise ValueError(f"no '%' at position {pos}")
    end = pos
    while _char_at(fmt, end) == "%":
        end += 1
    run = end - pos
    spec = Spec(escaped_percents=run // 2)
    if run % 2 == 0:
        return spec, end
    end = _parse_flag(fmt, end, spec)
    end = _parse_width(fmt, end, spec, args)
    end = _parse_precision(fmt, end, spec, args)
    ch = _char_at(fmt, end)
    if ch and ch in CONVERSIONS:
        spec.conversion = ch
        end += 1
    return spec, end