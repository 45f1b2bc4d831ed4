"""Conversions between decimal text and machine-sized integers.

``atoi`` and ``itoa`` work with 32-bit signed integers and ``utoa`` with
32-bit unsigned integers; values outside those ranges wrap around the way
a C ``int`` / ``unsigned int`` conversion does.
"""

from __future__ import annotations

import operator
import re

_INT_BITS = 32
_UINT_MOD = 1 << _INT_BITS
_INT_HALF = 1 << (_INT_BITS - 1)

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*(?:([+-])(?=[0-9]))?([0-9]*)")


def _wrap_signed(value: int) -> int:
    return (value + _INT_HALF) % _UINT_MOD - _INT_HALF


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped and a single sign is accepted only when a
    digit follows it directly. Parsing stops at the first non-digit; text
    with no leading number gives 0.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    return _wrap_signed(value)


def itoa(n: int) -> str:
    """Return the decimal text of *n* taken as a 32-bit signed integer."""
    return str(_wrap_signed(operator.index(n)))


def utoa(n: int) -> str:
    """Return the decimal text of *n* taken as a 32-bit unsigned integer."""
    return str(operator.index(n) % _UINT_MOD)