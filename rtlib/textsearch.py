"""Character and substring search over NUL-terminated text.

Strings are treated as C strings: a NUL character ends the text, and the
terminator itself can be searched for.
"""

from __future__ import annotations

import math

NUL = "\0"


def _cstr(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    return s.split(NUL, 1)[0]


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    _check_char(c)
    text = _cstr(s)
    if c == NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    _check_char(c)
    text = _cstr(s)
    if c == NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(s1: str, s2: str, n: int | float) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0, or 0 when the compared parts match.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = _cstr(s1), _cstr(s2)
    limit = min(len(a), len(b))
    if n < limit:
        limit = int(n)
    for ca, cb in zip(a[:limit], b[:limit]):
        if ca != cb:
            return ord(ca) - ord(cb)
    if limit < n:
        return _code_at(a, limit) - _code_at(b, limit)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings completely; see :func:`strncmp`."""
    return strncmp(s1, s2, math.inf)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    text = _cstr(haystack)
    pattern = _cstr(needle)
    if not pattern:
        return 0
    if not text:
        return None
    index = text.find(pattern, 0, min(length, len(text)))
    return None if index < 0 else index