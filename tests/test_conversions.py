import pytest

from ftprintf.conversions import (
    NULL_STRING,
    render,
    render_char,
    render_hex,
    render_int,
    render_percent,
    render_pointer,
    render_string,
    render_unsigned,
)
from ftprintf.spec import Flag, Spec, parse_spec

_FLAG_TEXT = {Flag.NONE: "", Flag.ZERO: "0", Flag.LEFT: "-"}


def _spec(conversion, flag=Flag.NONE, width=0, precision=None):
    if precision is None:
        return Spec(flag=flag, width=width, conversion=conversion)
    return Spec(
        flag=flag, width=width, period=True, precision=precision, conversion=conversion
    )


def _fmt(conversion, flag, width, precision):
    text = "%" + _FLAG_TEXT[flag]
    if width:
        text += str(width)
    if precision is not None:
        text += "." + str(precision)
    return text + conversion


@pytest.mark.parametrize(
    "flag, width, precision, value",
    [
        (Flag.NONE, 0, None, 42),
        (Flag.NONE, 5, None, 42),
        (Flag.LEFT, 5, None, 42),
        (Flag.ZERO, 5, None, -42),
        (Flag.NONE, 0, None, -7),
        (Flag.LEFT, 6, None, -123),
        (Flag.NONE, 0, 5, 42),
        (Flag.NONE, 8, 5, -42),
        (Flag.LEFT, 8, 5, 42),
        (Flag.LEFT, 8, 5, -42),
        (Flag.NONE, 8, 2, 123),
        (Flag.NONE, 0, None, -2147483648),
        (Flag.ZERO, 15, None, -2147483648),
    ],
)
def test_render_int_matches_printf(flag, width, precision, value):
    spec = _spec("d", flag, width, precision)
    assert render_int(spec, value) == _fmt("d", flag, width, precision) % value


def test_render_int_zero_with_zero_precision():
    assert render_int(_spec("d", precision=0), 0) == ""
    assert render_int(_spec("d", width=3, precision=0), 0) == " " * 3


def test_render_int_wraps_to_32_bits():
    assert render_int(_spec("d"), 2**32 + 5) == render_int(_spec("d"), 5)


def test_render_int_rejects_non_integer():
    with pytest.raises(TypeError):
        render_int(_spec("d"), "x")


def test_render_int_negative_star_width():
    args = iter([-8, 2, -123])
    spec, _ = parse_spec("%*.*d", 0, args)
    assert render(spec, args) == "%-8.2d" % -123


def test_render_int_star_width_and_precision_example():
    fmt = ">>%*.*i<<"
    args = iter([10, 3, -1])
    spec, end = parse_spec(fmt, 2, args)
    assert fmt[end:] == "<<"
    assert render(spec, args) == "%10.3d" % -1


@pytest.mark.parametrize(
    "flag, width, value",
    [(Flag.NONE, 0, "a"), (Flag.NONE, 4, "a"), (Flag.LEFT, 4, "a"), (Flag.NONE, 0, 65)],
)
def test_render_char_matches_printf(flag, width, value):
    assert render_char(_spec("c", flag, width), value) == _fmt("c", flag, width, None) % value


def test_render_char_masks_code_to_byte():
    spec = _spec("c")
    assert render_char(spec, 65 + 256) == render_char(spec, 65)


def test_render_char_zero_flag_prints_nothing():
    assert render_char(_spec("c", Flag.ZERO), "a") == ""


def test_render_char_rejects_long_string():
    with pytest.raises(ValueError):
        render_char(_spec("c"), "ab")


@pytest.mark.parametrize(
    "flag, width, precision, value",
    [
        (Flag.NONE, 0, None, 42),
        (Flag.ZERO, 8, None, 42),
        (Flag.LEFT, 8, None, 42),
        (Flag.NONE, 0, 5, 42),
        (Flag.LEFT, 8, 5, 42),
        (Flag.NONE, 8, 5, 42),
    ],
)
def test_render_unsigned_matches_printf(flag, width, precision, value):
    spec = _spec("u", flag, width, precision)
    assert render_unsigned(spec, value) == _fmt("d", flag, width, precision) % value


def test_render_unsigned_negative_wraps():
    assert render_unsigned(_spec("u"), -1) == str(0xFFFFFFFF)


def test_render_unsigned_zero_with_zero_precision():
    assert render_unsigned(_spec("u", width=4, precision=0), 0) == " " * 4


@pytest.mark.parametrize(
    "conversion, flag, width, precision, value",
    [
        ("x", Flag.NONE, 0, None, 255),
        ("X", Flag.NONE, 0, None, 48879),
        ("x", Flag.ZERO, 6, None, 255),
        ("x", Flag.LEFT, 6, None, 255),
        ("x", Flag.NONE, 0, 4, 255),
        ("x", Flag.LEFT, 8, 4, 255),
        ("x", Flag.NONE, 8, 4, 255),
        ("x", Flag.NONE, 0, None, 0),
    ],
)
def test_render_hex_matches_printf(conversion, flag, width, precision, value):
    spec = _spec(conversion, flag, width, precision)
    assert render_hex(spec, value) == _fmt(conversion, flag, width, precision) % value


def test_render_hex_negative_wraps():
    assert render_hex(_spec("x"), -1) == format(0xFFFFFFFF, "x")


def test_render_hex_zero_with_zero_precision():
    assert render_hex(_spec("x", width=3, precision=0), 0) == " " * 3


def test_render_pointer_plain():
    assert render_pointer(_spec("p"), 0xDEADBEEF) == hex(0xDEADBEEF)


def test_render_pointer_width():
    value = 0xDEADBEEF
    assert render_pointer(_spec("p", width=14), value) == hex(value).rjust(14)
    assert render_pointer(_spec("p", Flag.LEFT, 14), value) == hex(value).ljust(14)


def test_render_pointer_null_and_wrap():
    assert render_pointer(_spec("p"), None) == hex(0)
    assert render_pointer(_spec("p"), -1) == hex(2**64 - 1)


def test_render_percent_padding():
    assert render_percent(_spec("%", width=3)) == "%".rjust(3)
    assert render_percent(_spec("%", Flag.LEFT, 3)) == "%".ljust(3)
    assert render_percent(_spec("%", Flag.ZERO, 3)) == "%".rjust(3, "0")


@pytest.mark.parametrize(
    "flag, width, precision",
    [
        (Flag.NONE, 0, None),
        (Flag.NONE, 8, None),
        (Flag.LEFT, 8, None),
        (Flag.NONE, 3, None),
        (Flag.NONE, 0, 3),
        (Flag.NONE, 6, 3),
        (Flag.LEFT, 6, 3),
    ],
)
def test_render_string_matches_printf(flag, width, precision):
    spec = _spec("s", flag, width, precision)
    assert render_string(spec, "hello") == _fmt("s", flag, width, precision) % "hello"


def test_render_string_null():
    assert render_string(_spec("s"), None) == NULL_STRING
    assert render_string(_spec("s", width=10), None) == NULL_STRING.rjust(10)


def test_render_string_zero_precision():
    assert render_string(_spec("s", precision=0), "hello") == ""
    assert render_string(_spec("s", width=4, precision=0), "hello") == " " * 4


def test_render_string_stops_at_nul():
    assert render_string(_spec("s"), "ab\0cd") == "ab"


def test_render_string_negative_star_precision_is_ignored():
    spec = Spec(
        period=True,
        precision=-2,
        precision_from_arg=True,
        precision_was_negative=True,
        conversion="s",
    )
    assert render_string(spec, "hello") == "hello"


def test_render_string_rejects_non_string():
    with pytest.raises(TypeError):
        render_string(_spec("s"), 5)


def test_render_consumes_one_argument():
    args = iter([7, 8])
    assert render(_spec("d"), args) == "7"
    assert next(args) == 8


def test_render_includes_escaped_percents():
    args = iter([7])
    spec, _ = parse_spec("%%%d", 0, args)
    assert render(spec, args) == "%%%d" % 7


def test_render_percent_consumes_nothing():
    args = iter([1])
    spec, _ = parse_spec("%5%", 0, args)
    assert render(spec, args) == "%".rjust(5)
    assert list(args) == [1]


def test_render_without_conversion_gives_only_percents():
    assert render(Spec(escaped_percents=2), iter([])) == "%" * 2


def test_render_missing_argument():
    with pytest.raises(ValueError):
        render(_spec("d"), iter([]))


def test_render_star_width_from_arguments():
    args = iter([-6, 42])
    spec, _ = parse_spec("%*d", 0, args)
    assert render(spec, args) == "%-6d" % 42