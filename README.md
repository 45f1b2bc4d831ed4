# pfmt

A small printf-style formatter. It handles the conversions `%c`, `%s`, `%p`,
`%d`, `%i`, `%u`, `%x`, `%X` and `%%`. The flags `-`, `0`, `#`, `+` and space
can be used, along with a field width and a `.precision`. The package also
has a few ASCII and string helpers.

It needs nothing beyond the standard library.

## Installation

```
pip install .
```

## Formatting

```python
from pfmt.printf import sprintf, printf

sprintf("|%5c|", "C")           # '|    C|'
sprintf("|%-7.3s|", "hello")    # '|hel    |'
sprintf("|%-05d|", -42)         # '|-42  |'
sprintf("|%#x|", 255)           # '|0x0ff|'

count = printf("%d apples\n", 3)  # writes "3 apples\n", returns 1
```

- `sprintf(fmt, *args)` returns the formatted text.
- `printf(fmt, *args)` writes the text to standard output. The value it returns
  counts only the characters that conversions produced. Literal text and `%%`
  are written but not counted.

The formatter behaves in ways worth knowing before you use it:

- Every conversion in one call shares a single set of flags. A flag, a width
  or a written `.` stays in force for the conversions after it. The precision
  is read again for each conversion.
- `%x` and `%X` put one leading `0` before the digits of a non-zero value.
  With `#`, the `0x` or `0X` prefix is added to every value, zero included.
- When a precision is written, the `0` flag is switched off for `%d`, `%i`,
  `%u`, `%x` and `%X`.
- `%d` and `%i` treat their argument as a 32-bit signed integer. `%u`, `%x`
  and `%X` treat it as a 32-bit unsigned integer. Out-of-range values wrap.
- `%s` prints `None` as `(null)`. `%p` takes an integer address, prints it as
  `0x` plus lower-case hex, and treats `None` as 0. With `0` and `-` together,
  `%p` leaves out the `0x`.
- A conversion character it does not know is dropped, and so is a `%` at the
  end of the format string. Too few arguments raise `TypeError`.

You can also call each conversion on its own, from `pfmt.conversions`:
`format_char`, `format_string`, `format_pointer`, `format_decimal`,
`format_unsigned` and `format_hex(n, flags, uppercase=False)`. Each one takes a
`pfmt.flags.Flags` dataclass, which has the fields `minus`, `zero`, `dot`,
`width`, `precision`, `hash`, `space` and `plus`.

`Flags.parse(fmt, pos)` reads flags, width and precision from `fmt`, starting
at `pos`. It stores them on the object and returns the position of the
conversion character.

## Helpers

- `pfmt.ascii`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_lower`, `to_upper`. Each takes a one-character string or an integer code
  point.
- `pfmt.numbers`: `atoi`, `itoa`, `utoa`. These convert between decimal text
  and 32-bit integers.
- `pfmt.textops`: `split`, `strtrim`, `substr`, `strjoin`, `strnstr`,
  `strncmp`, `strchr`, `strrchr`, `strmapi`. The search functions return an
  index, or `None` when nothing is found.

## Command line

```
pfmt
```

This prints a short demonstration. For each sample conversion it shows the
result of Python's `%` operator next to this formatter's output. The `%p`
sample shows only this formatter's output. Any command-line arguments are
ignored.

## What it does not do

- It has no floating-point conversions.
- It has no length modifiers such as `l` or `h`.
- It has no `*` width or precision.
- It has no positional arguments.
- It cannot write to anything but standard output or a returned string.