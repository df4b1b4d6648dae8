"""Character classification, number conversion and stream output helpers.

Character arguments may be given either as a one-character string or as an
integer code. Classification functions return booleans; case conversion
returns a value of the same kind it was given.
"""

from __future__ import annotations

from typing import TextIO, Union

CharLike = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: CharLike) -> int:
    """Return the integer code of a character argument."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return c


def _wrap(value: int, bits: int) -> int:
    """Reduce an integer to a signed two's-complement value of ``bits`` width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the classic ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text with no digits yields 0. The
    accumulator is a 64-bit signed value; once it overflows, the result is 0
    for negative input and -1 for positive input. The final value is
    narrowed to a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        if result < 0:
            return 0 if sign < 0 else -1
        result = _wrap(result * 10 + ord(text[pos]) - 48, 64)
        pos += 1
    return _wrap(result * sign, 32)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(n)


def putchar_fd(c: CharLike, stream: TextIO) -> None:
    """Write a single character to ``stream``."""
    stream.write(chr(_code(c)))


def putstr_fd(text: str | None, stream: TextIO) -> None:
    """Write ``text`` to ``stream``; ``None`` writes nothing."""
    if text is not None:
        stream.write(text)


def putendl_fd(text: str | None, stream: TextIO) -> None:
    """Write ``text`` followed by a newline; ``None`` writes nothing."""
    if text is not None:
        stream.write(text)
        stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal representation of ``n`` to ``stream``."""
    stream.write(str(n))