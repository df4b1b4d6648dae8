# ftprintf

A compact `printf`-style formatter with a fixed set of conversions and its
own padding rules, together with a set of C-style character, string and
memory helpers. It has no dependencies beyond the standard library.

## Formatting

```python
from ftprintf.printf import ft_sprintf, ft_printf

ft_sprintf(">>%5d<<", 42)               # '>>   42<<'
ft_sprintf("%-6s|", "abc")              # 'abc   |'
ft_sprintf("%.3x", 255)                 # '0ff'
count = ft_printf("%c%c\n", "o", "k")   # writes "ok\n" to stdout, returns 3
```

`ft_sprintf(fmt, *args)` returns the expanded text. `ft_printf(fmt, *args)`
writes it to standard output and returns the number of characters written.

The conversions are `c`, `s`, `p`, `d`, `i`, `u`, `x`, `X` and `%`. A
conversion may carry a `0` or `-` flag, a field width and a `.` precision;
the width and the precision may be given as `*`, in which case they are taken
from the argument list. A negative `*` width turns on left alignment. A
doubled `%%` gives a literal percent sign. An unknown conversion character is
left in the output as ordinary text.

Arguments are reduced to the size of the C type they stand for: 32-bit
signed for `d` and `i`, 32-bit unsigned for `u`, `x` and `X`, 64-bit
unsigned for `p`, and 8-bit for `c` when given as an integer code. For `s`,
`None` prints as `(null)`; for `p`, `None` is a null pointer.

Errors are raised rather than reported through return values:

- `ValueError` when the format needs more arguments than were given;
- `TypeError` when an argument does not suit its conversion.

The format ends at the first NUL character, and so does a string argument.

### The lower-level pieces

- `ftprintf.spec.parse_spec(fmt, pos, args)` reads the specification that
  starts at the `%` at `fmt[pos]` and returns a `Spec` together with the
  position just past it. `Spec` is a dataclass holding the `Flag`
  (`NONE`, `ZERO`, `LEFT`), width, precision, conversion character and the
  count of escaped percent signs. `count_digits` and `count_digits_unsigned`
  give the width of a 32-bit number in decimal.
- `ftprintf.conversions.render(spec, args)` turns a `Spec` into text, taking
  its value from the iterator `args`. The individual renderers
  `render_char`, `render_string`, `render_pointer`, `render_int`,
  `render_unsigned`, `render_hex` and `render_percent` can be called
  directly.

## Helpers

- `ftprintf.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower` (accepting a one-character string or an integer code),
  `atoi`, `itoa`, and `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`,
  which write to a text stream such as `sys.stdout` or an `io.StringIO`.
- `ftprintf.strings`: `split`, `strchr`, `strrchr`, `strmapi`, `strncmp`,
  `strnstr`, `strtrim`, `substr`. Searches return an index, or `None` when
  nothing is found.
- `ftprintf.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memccpy`,
  `memmove`, `memchr`, `memcmp`, working on `bytearray` and `bytes`.
  `memmove(dst, dst_offset, src_offset, length)` moves bytes within one
  buffer. A length that is negative or runs past a buffer raises
  `ValueError`.

## Command line

```
ftprintf
```

This prints the sample format `>>%*.*i<<` with the arguments `10, 3, -1`,
once with this formatter and once with Python's `%` operator, followed by
the character count of each, so the two can be compared.

## Limits

Output goes only to standard output (`ft_printf`) or to a returned string
(`ft_sprintf`); there is no way to write formatted text to another file or
descriptor. Floating-point conversions, length modifiers and the `+`, space
and `#` flags are not supported.

## Tests

```
pip install -e ".[test]"
pytest
```