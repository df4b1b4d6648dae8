"""Formatted output: expand a format string against its arguments."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Sequence

from ftprintf.conversions import render
from ftprintf.spec import parse_spec

_DEMO_FORMAT = ">>%*.*i<<\n\n"
_DEMO_ARGS = (10, 3, -1)


def _expand(fmt: str, args: Iterator[Any]) -> str:
    # The format ends at the first NUL character, as a C string would.
    fmt = fmt.split("\0", 1)[0]
    parts: list[str] = []
    pos = 0
    length = len(fmt)
    while pos < length:
        percent = fmt.find("%", pos)
        if percent < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:percent])
        spec, pos = parse_spec(fmt, percent, args)
        parts.append(render(spec, args))
    return "".join(parts)


def ft_sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversion specifications expanded from ``args``.

    Raises ``ValueError`` when the format needs more arguments than given and
    ``TypeError`` when an argument does not suit its conversion.
    """
    return _expand(fmt, iter(args))


def ft_printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output; return the characters written."""
    text = ft_sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def _parse_arg(text: str) -> Any:
    try:
        return int(text, 0)
    except ValueError:
        return text


def main(argv: Sequence[str] | None = None) -> int:
    """Print a format with this formatter and with Python's, then both counts.

    ``argv`` may hold a format followed by its arguments; integers are
    recognised, anything else is passed as a string. Without it a built-in
    example is used.
    """
    if argv:
        fmt = argv[0].encode().decode("unicode_escape")
        args: tuple[Any, ...] = tuple(_parse_arg(a) for a in argv[1:])
    else:
        fmt, args = _DEMO_FORMAT, _DEMO_ARGS

    print(f"\n{fmt}-------------------\n")
    mine = ft_printf(fmt, *args)
    try:
        reference = fmt % args
    except (TypeError, ValueError) as exc:
        print(f"reference formatting failed: {exc}")
        reference_count = -1
    else:
        sys.stdout.write(reference)
        reference_count = len(reference)
    print(f"my printf return : {mine}")
    print(f"\n   printf return : {reference_count}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))