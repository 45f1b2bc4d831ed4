"""Conversion-specification flags and their parser."""

from __future__ import annotations

from dataclasses import dataclass

from pfmt.ascii import is_digit
from pfmt.numbers import atoi

_FLAG_FIELDS = {
    "-": "minus",
    "+": "plus",
    "#": "hash",
    "0": "zero",
    " ": "space",
}


def _char_at(fmt: str, pos: int) -> str:
    return fmt[pos] if pos < len(fmt) else ""


def _is_digit_at(fmt: str, pos: int) -> bool:
    ch = _char_at(fmt, pos)
    return bool(ch) and is_digit(ch)


def _skip_digits(fmt: str, pos: int) -> int:
    while _is_digit_at(fmt, pos):
        pos += 1
    return pos


@dataclass
class Flags:
    """Flags, width and precision of a conversion specification.

    ``dot`` records whether a precision was written at all.
    """

    minus: bool = False
    zero: bool = False
    dot: bool = False
    width: int = 0
    precision: int = 0
    hash: bool = False
    space: bool = False
    plus: bool = False

    def parse(self, fmt: str, pos: int) -> int:
        """Read flags, width and precision from *fmt* starting at *pos*.

        Fields found are stored on this object; a flag or width that is not
        written keeps its earlier value, while the precision is reset to 0
        unless digits for it are present. Returns the position just past
        what was read, i.e. of the conversion character.
        """
        while (ch := _char_at(fmt, pos)) and ch in _FLAG_FIELDS:
            setattr(self, _FLAG_FIELDS[ch], True)
            pos += 1
        if _is_digit_at(fmt, pos):
            self.width = atoi(fmt[pos:])
            pos = _skip_digits(fmt, pos)
        if _char_at(fmt, pos) == ".":
            self.dot = True
            pos += 1
        if _is_digit_at(fmt, pos):
            self.precision = atoi(fmt[pos:])
            pos = _skip_digits(fmt, pos)
        else:
            self.precision = 0
        return pos