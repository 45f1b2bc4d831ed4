"""Rendering of single conversions: %c, %s, %p, %d/%i, %u, %x and %X.

Each function returns the text a conversion produces for one argument
under the given :class:`~pfmt.flags.Flags`. As in the formatter that
drives them, a written precision switches the ``zero`` flag off on the
flags object passed in for the numeric conversions %d, %u, %x and %X.
"""

from __future__ import annotations

import operator
from typing import Optional, Union

from pfmt.flags import Flags
from pfmt.numbers import itoa, utoa

_UINT_MOD = 1 << 32
_INT_HALF = 1 << 31
_ADDRESS_MOD = 1 << 64

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def _as_int32(n: int) -> int:
    return (operator.index(n) + _INT_HALF) % _UINT_MOD - _INT_HALF


def _to_base16(value: int, alphabet: str) -> str:
    digits = []
    while value:
        value, rem = divmod(value, 16)
        digits.append(alphabet[rem])
    return "".join(reversed(digits))


def _layout(flags: Flags, prefix: str, zeros: int, digits: str, width: int) -> str:
    """Assemble padding, prefix, precision zeros and digits."""
    body = f"{'0' * zeros}{digits}"
    if flags.minus:
        return f"{prefix}{body}{' ' * width}"
    if flags.zero:
        return f"{prefix}{'0' * width}{body}"
    return f"{' ' * width}{prefix}{body}"


def _precision_zeros(flags: Flags, length: int) -> int:
    if flags.dot:
        flags.zero = False
        if flags.precision > length:
            return flags.precision - length
    return 0


def format_char(c: Union[str, int], flags: Flags) -> str:
    """Render one character padded with spaces to the field width."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(operator.index(c) % 256)
    pad = " " * (flags.width - 1 if flags.width > 1 else 0)
    return f"{ch}{pad}" if flags.minus else f"{pad}{ch}"


def format_string(s: Optional[str], flags: Flags) -> str:
    """Render a string, cut to the precision and padded to the width.

    ``None`` is rendered as ``(null)``.
    """
    text = "(null)" if s is None else s
    if flags.dot and flags.precision < len(text):
        text = text[:flags.precision]
    pad = " " * max(flags.width - len(text), 0)
    return f"{text}{pad}" if flags.minus else f"{pad}{text}"


def format_pointer(address: int, flags: Flags) -> str:
    """Render an address as ``0x`` followed by lower-case hex digits.

    The address 0 gives a bare ``0x``. With the ``zero`` flag the padding
    zeros go between ``0x`` and the digits; combined with ``minus`` the
    ``0x`` is left out.
    """
    value = operator.index(address) % _ADDRESS_MOD
    digits = _to_base16(value, _HEX_LOWER)
    full = f"0x{digits}"
    width = max(flags.width - len(full), 0)
    if flags.minus:
        shown = digits if flags.zero else full
        return f"{shown}{' ' * width}"
    if flags.zero:
        return f"0x{'0' * width}{digits}"
    return f"{' ' * width}{full}"


def format_decimal(n: int, flags: Flags) -> str:
    """Render a 32-bit signed integer for %d and %i."""
    value = _as_int32(n)
    digits = itoa(abs(value))
    if value < 0:
        sign = "-"
    elif flags.plus:
        sign = "+"
    elif flags.space:
        sign = " "
    else:
        sign = ""
    if flags.dot and value == 0 and flags.precision == 0:
        digits = ""
    zeros = _precision_zeros(flags, len(digits))
    width = max(flags.width - len(digits) - zeros - len(sign), 0)
    return _layout(flags, sign, zeros, digits, width)


def format_unsigned(n: int, flags: Flags) -> str:
    """Render a 32-bit unsigned integer for %u."""
    digits = utoa(n)
    zeros = _precision_zeros(flags, len(digits))
    width = max(flags.width - len(digits) - zeros, 0)
    return _layout(flags, "", zeros, digits, width)


def format_hex(n: int, flags: Flags, uppercase: bool = False) -> str:
    """Render a 32-bit unsigned integer in hexadecimal for %x and %X.

    A non-zero value is written with one leading ``0`` digit. The ``hash``
    flag adds a ``0x`` (or ``0X``) prefix for every value, zero included.
    """
    value = operator.index(n) % _UINT_MOD
    alphabet = _HEX_UPPER if uppercase else _HEX_LOWER
    digits = f"0{_to_base16(value, alphabet)}"
    prefix = ("0X" if uppercase else "0x") if flags.hash else ""
    zeros = _precision_zeros(flags, len(digits))
    width = max(flags.width - len(digits) - zeros - len(prefix), 0)
    return _layout(flags, prefix, zeros, digits, width)