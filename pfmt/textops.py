"""String utilities: splitting, trimming, slicing, searching and mapping.

Search functions return an index into the string, or ``None`` when nothing
is found. Lengths, counts and start positions must not be negative.
"""

from __future__ import annotations

import operator
from itertools import zip_longest
from typing import Callable, Optional, Union

CharLike = Union[str, int]

_NUL = "\0"


def _non_negative(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _single_char(name: str, c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")
    return c


def _search_char(c: CharLike) -> str:
    """Normalise a search character; integers are reduced to one byte."""
    if isinstance(c, str):
        return _single_char("c", c)
    return chr(operator.index(c) % 256)


def split(s: str, sep: str) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    _single_char("sep", sep)
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* starting at *start*.

    A start beyond the end of *s* gives an empty string.
    """
    start = _non_negative("start", start)
    length = _non_negative("length", length)
    if length == 0 or start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    return f"{s1}{s2}"


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* lying wholly within the first *length* characters.

    An empty needle is found at index 0.
    """
    length = _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns 0 when they agree, otherwise the difference of the code points
    at the first mismatch; the end of a string counts as code point 0.
    """
    n = _non_negative("n", n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first *c* in *s*.

    Searching for NUL finds the end of the string, ``len(s)``.
    """
    ch = _search_char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last *c* in *s*.

    Searching for NUL finds the end of the string, ``len(s)``.
    """
    ch = _search_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))