"""ASCII character classification and case mapping.

Every function accepts either a one-character string or an integer code
point. Only the 7-bit ASCII ranges are recognised; anything else is
classified as "not in the class" and left unchanged by the case mappers.
"""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _is_upper_code(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower_code(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: CharLike) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _is_upper_code(code) or _is_lower_code(code)


def is_digit(c: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """Return True for a code point in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Return True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; return the same type."""
    code = _code(c)
    if _is_upper_code(code):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; return the same type."""
    code = _code(c)
    if _is_lower_code(code):
        code -= 32
    return chr(code) if isinstance(c, str) else code