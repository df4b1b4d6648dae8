"""Rendering of parsed conversion specifications into text.

Each ``render_*`` function takes a :class:`~ftprintf.spec.Spec` and the
argument it converts, and returns the text that the specification produces.
Integer arguments are reduced to the width of the C type they stand for:
32-bit signed for ``d``/``i``, 32-bit unsigned for ``u``/``x``/``X``, 64-bit
unsigned for ``p`` and 8-bit for ``c``. Padding follows the exact rules of
the formatter, including its particular handling of unusual flag and width
combinations.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

from ftprintf.spec import CONVERSIONS, Flag, Spec, count_digits, count_digits_unsigned

NULL_STRING = "(null)"
POINTER_PREFIX = "0x"

_INT_BITS = 32


def _to_int32(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >> (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _vabs(value: int) -> int:
    """Absolute value with 32-bit wrap-around, as an ``int`` would have it."""
    return _to_int32(abs(value))


def _fill(ch: str, count: int) -> str:
    return ch * count if count > 0 else ""


def _check_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {value!r}")
    return value


def _fields(spec: Spec) -> tuple[Flag, int, int]:
    return spec.flag, _to_int32(spec.width), _to_int32(spec.precision)


def render_char(spec: Spec, value: str | int) -> str:
    """Render a ``c`` conversion of a one-character string or integer code."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        ch = value
    else:
        ch = chr(_check_int(value) & 0xFF)
    flag, width, _ = _fields(spec)
    out = ""
    if flag is Flag.NONE and width == 0:
        out += ch
    if width != 1 and flag is Flag.LEFT:
        out += ch + _fill(" ", _vabs(width) - 1)
    elif flag is Flag.NONE and width > 0:
        out += _fill(" ", width - 1) + ch
    return out


def _zero_padded(nbr: int, digits: int, precision: int, neg: int) -> str:
    sign = "-" if neg else ""
    return sign + _fill("0", precision - digits + neg) + str(abs(nbr))


def _int_no_period(nbr: int, digits: int, flag: Flag, width: int) -> str:
    if width == 0:
        return str(nbr)
    if flag is Flag.LEFT:
        return str(nbr) + _fill(" ", _vabs(width) - digits)
    if flag is Flag.ZERO and width > 0:
        sign = "-" if nbr < 0 else ""
        return sign + _fill("0", width - digits) + str(abs(nbr))
    if flag is Flag.NONE and width > 0:
        return _fill(" ", width - digits) + str(nbr)
    return ""


def _int_wide(spec: Spec, nbr: int, digits: int, neg: int) -> str:
    flag, width, precision = _fields(spec)
    if flag is not Flag.LEFT:
        if precision > digits and neg and flag is Flag.NONE:
            return (
                _fill(" ", width - 1 - max(digits, precision))
                + "-"
                + _fill("0", precision - digits + neg)
                + str(_to_int32(-nbr))
            )
        return _fill(" ", width - max(precision, digits)) + _zero_padded(
            nbr, digits, precision, neg
        )
    if spec.width_was_negative and neg and digits > precision:
        return str(nbr) + _fill(" ", width - digits)
    return _zero_padded(nbr, digits, precision, neg) + _fill(
        " ", width - max(precision, digits) - neg
    )


def render_int(spec: Spec, value: int) -> str:
    """Render a ``d`` or ``i`` conversion of a 32-bit signed integer."""
    nbr = _to_int32(_check_int(value))
    flag, width, precision = _fields(spec)
    digits = count_digits(nbr)
    if nbr == 0 and spec.period and precision == 0:
        return _fill(" ", _vabs(width)) if width else ""
    if not spec.period:
        return _int_no_period(nbr, digits, flag, width)
    neg = 1 if nbr < 0 else 0
    if width <= precision:
        return _zero_padded(nbr, digits, precision, neg)
    return _int_wide(spec, nbr, digits, neg)


def render_unsigned(spec: Spec, value: int) -> str:
    """Render a ``u`` conversion of a 32-bit unsigned integer."""
    nbr = _check_int(value) & 0xFFFFFFFF
    flag, width, precision = _fields(spec)
    digits = count_digits_unsigned(nbr)
    text = str(nbr)
    if nbr == 0 and spec.period and precision == 0:
        return _fill(" ", _vabs(width)) if width else ""
    if not spec.period:
        if width == 0:
            return text
        if flag is Flag.LEFT:
            return text + _fill(" ", _vabs(width) - digits)
        if flag is Flag.ZERO and width > 0:
            return _fill("0", width - digits) + text
        if flag is Flag.NONE and width > 0:
            return _fill(" ", width - digits) + text
        return ""
    zeros = _fill("0", precision - digits)
    if width <= precision:
        return zeros + text
    spaces = _fill(" ", width - max(precision, digits))
    if flag is Flag.LEFT:
        return zeros + text + spaces
    return spaces + zeros + text


def render_hex(spec: Spec, value: int) -> str:
    """Render an ``x`` or ``X`` conversion of a 32-bit unsigned integer."""
    nbr = _check_int(value) & 0xFFFFFFFF
    flag, width, precision = _fields(spec)
    special = nbr == 0 and spec.period and precision == 0
    digits = format(nbr, "X" if spec.conversion == "X" else "x")
    shown = "" if special else digits
    count = len(digits)
    extra = 1 if special else 0
    if not spec.period:
        if flag is Flag.LEFT:
            return shown + _fill(" ", width - count + extra)
        if flag is Flag.ZERO:
            return _fill("0", width - count) + shown
        return _fill(" ", width - count + extra) + shown
    zeros = _fill("0", precision - count)
    if width <= precision:
        return zeros + shown
    spaces = _fill(" ", width - max(precision, count) + extra)
    if flag is Flag.LEFT:
        return zeros + shown + spaces
    return spaces + zeros + shown


def render_pointer(spec: Spec, value: int | None) -> str:
    """Render a ``p`` conversion of an address; ``None`` stands for a null pointer."""
    address = 0 if value is None else _check_int(value) & 0xFFFFFFFFFFFFFFFF
    flag, width, precision = _fields(spec)
    special = address == 0 and spec.period and precision == 0
    digits = format(address, "x")
    shown = "" if special else digits
    count = len(digits)
    extra = 1 if special else 0
    if not spec.period:
        if flag is Flag.LEFT:
            return POINTER_PREFIX + shown + _fill(" ", width - count - 2)
        if flag is Flag.ZERO:
            return POINTER_PREFIX + _fill("0", width - count - 2) + shown
        return _fill(" ", width - count - 2) + POINTER_PREFIX + shown
    if width <= precision:
        return POINTER_PREFIX + _fill("0", precision - count - 2) + shown
    zeros = _fill("0", precision - count)
    spaces = _fill(" ", width - max(precision, count) - 2 + extra)
    if flag is Flag.LEFT:
        return POINTER_PREFIX + zeros + shown + spaces
    return spaces + POINTER_PREFIX + zeros + shown


def render_percent(spec: Spec) -> str:
    """Render a ``%`` conversion."""
    flag, width, _ = _fields(spec)
    if not spec.period:
        if flag is Flag.ZERO:
            return _fill("0", width - 1) + "%"
        if flag is Flag.LEFT:
            return "%" + _fill(" ", width - 1)
        return _fill(" ", width - 1) + "%"
    if flag is Flag.LEFT:
        return "%" + _fill(" ", width - 1)
    if flag is Flag.NONE:
        return _fill(" ", width - 1) + "%"
    return ""


def _string_no_period(text: str, flag: Flag, width: int) -> str:
    length = len(text)
    if length > width:
        return text
    if flag is Flag.LEFT and width > 0:
        return text + _fill(" ", width - length)
    if width == 0:
        return text
    if flag is Flag.NONE and width > 0:
        return _fill(" ", width - length) + text
    return ""


def _string_period(
    text: str, flag: Flag, width: int, precision: int, special: bool
) -> str:
    length = len(text)
    if flag is Flag.LEFT:
        if width == precision and width < length and not special:
            return text
        shown = "" if special else text[: max(precision, 0)]
        return shown + _fill(" ", width - len(shown))
    shown_count = min(length, precision)
    if width == 0:
        return "" if special else text[: max(shown_count, 0)]
    shown = "" if special else text[: max(shown_count, 0)]
    return _fill(" ", width - shown_count) + shown


def render_string(spec: Spec, value: str | None) -> str:
    """Render an ``s`` conversion.

    ``None`` is printed as ``(null)``; text after an embedded NUL character
    is ignored.
    """
    if value is None:
        text = NULL_STRING
    elif isinstance(value, str):
        text = value.split("\0", 1)[0]
    else:
        raise TypeError(f"expected a string argument, got {value!r}")
    flag, width, precision = _fields(spec)
    precision = _vabs(precision)
    period = spec.period
    special = period and precision == 0
    if spec.precision_was_negative and width < precision:
        period = False
    if not period:
        return _string_no_period(text, flag, width)
    return _string_period(text, flag, width, precision, special)


_RENDERERS: dict[str, Callable[[Spec, Any], str]] = {
    "c": render_char,
    "s": render_string,
    "p": render_pointer,
    "d": render_int,
    "i": render_int,
    "u": render_unsigned,
    "x": render_hex,
    "X": render_hex,
}


def render(spec: Spec, args: Iterator[Any]) -> str:
    """Render a whole parsed specification, taking its value from ``args``.

    The result starts with the literal ``%`` characters from doubled percent
    signs, followed by the conversion's output. A ``%`` conversion and a
    specification without a conversion consume no argument.
    """
    prefix = "%" * spec.escaped_percents
    conversion = spec.conversion
    if conversion is None:
        return prefix
    if conversion == "%":
        return prefix + render_percent(spec)
    if conversion not in CONVERSIONS:
        raise ValueError(f"unknown conversion {conversion!r}")
    try:
        value = next(args)
    except StopIteration:
        raise ValueError("not enough arguments for format") from None
    return prefix + _RENDERERS[conversion](spec, value)