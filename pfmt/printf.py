"""The formatter: walks a format string and renders each conversion.

Supported conversions are ``%c %s %p %d %i %u %x %X`` and ``%%``. A
single set of flags is shared by all conversions of one call, so a flag,
width or written ``.`` carries over to the conversions that follow it.
The precision is read afresh for every conversion.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, Sequence

from pfmt.conversions import (
    format_char,
    format_decimal,
    format_hex,
    format_pointer,
    format_string,
    format_unsigned,
)
from pfmt.flags import Flags

_Converter = Callable[[Any, Flags], str]


def _pointer(address: Optional[int], flags: Flags) -> str:
    return format_pointer(0 if address is None else address, flags)


def _hex_lower(n: int, flags: Flags) -> str:
    return format_hex(n, flags, False)


def _hex_upper(n: int, flags: Flags) -> str:
    return format_hex(n, flags, True)


_CONVERTERS: dict[str, _Converter] = {
    "c": format_char,
    "s": format_string,
    "p": _pointer,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(
            f"not enough arguments for format string (conversion %{conversion})"
        ) from None


def _render(fmt: str, args: Sequence[Any]) -> tuple[str, int]:
    """Return the formatted text and the number of characters conversions made.

    Literal text and ``%%`` are part of the text but not of the count.
    An unknown conversion character is dropped, as is a ``%`` that ends
    the format string.
    """
    flags = Flags()
    remaining = iter(args)
    pieces: list[str] = []
    counted = 0
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        if ch != "%":
            pieces.append(ch)
            pos += 1
            continue
        pos = flags.parse(fmt, pos + 1)
        if pos >= len(fmt):
            break
        conversion = fmt[pos]
        pos += 1
        if conversion == "%":
            pieces.append("%")
            continue
        converter = _CONVERTERS.get(conversion)
        if converter is None:
            continue
        text = converter(_next_arg(remaining, conversion), flags)
        counted += len(text)
        pieces.append(text)
    return "".join(pieces), counted


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions filled in from *args*."""
    text, _ = _render(fmt, args)
    return text


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output.

    Returns the number of characters produced by conversions; literal
    characters and ``%%`` are written but not counted.
    """
    text, counted = _render(fmt, args)
    sys.stdout.write(text)
    return counted


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a side-by-side demonstration against Python's ``%`` operator.

    Command-line arguments are accepted and ignored.
    """
    text = "hello world"
    demos: list[tuple[str, str, tuple[Any, ...], bool]] = [
        ("test character", "|%5c| \n", ("C",), True),
        ("test string", "|%-7.3s| \n", (text,), True),
        ("test pointer", "|%020p| \n", (id(text),), False),
        ("test integer and decimal ", "|%-05d| \n", (-42,), True),
        ("test unsigned int", "|%015.11u| \n", (4294967295,), True),
        ("test hex-small", "|%#015.11x| \n", (4294967295,), True),
        ("test hex-big", "|%#015.11X| \n", (4294967295,), True),
    ]
    for title, fmt, args, has_reference in demos:
        sys.stdout.write(f"---------------{title}-------------------\n")
        if has_reference:
            sys.stdout.write("The original : " + fmt % args)
        printf("My function : " + fmt, *args)
    sys.stdout.flush()
    return 0