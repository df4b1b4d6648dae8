"""String searching, splitting, trimming and comparison helpers.

Functions that locate something return an index into the text, or ``None``
when nothing is found. Character arguments may be a one-character string or
an integer code.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(ch: CharLike) -> str:
    """Return a character argument as a one-character string."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected a character or an integer code, got {ch!r}")
    return chr(ch)


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on the separator character, dropping empty pieces."""
    separator = _char(sep)
    if separator == _NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strchr(text: str, ch: CharLike) -> int | None:
    """Index of the first occurrence of ``ch`` in ``text``.

    Searching for the NUL character finds the end of the text.
    """
    target = _char(ch)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, ch: CharLike) -> int | None:
    """Index of the last occurrence of ``ch`` in ``text``.

    Searching for the NUL character finds the end of the text.
    """
    target = _char(ch)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of differing character codes,
    the end of a string counting as code 0, or 0 when they match.
    """
    _non_negative("n", n)
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` found wholly within the first ``length`` characters."""
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start beyond the end of the text gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]