"""Building and reshaping NUL-terminated text.

Strings are treated as C strings: a NUL character ends the text, and
anything after it is ignored.
"""

from __future__ import annotations

from typing import Callable, Optional

NUL = "\0"


def _cstr(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    return s.split(NUL, 1)[0]


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value!r}")


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` into the non-empty words separated by runs of ``sep``."""
    _check_char(sep)
    text = _cstr(s)
    if sep == NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    return _cstr(s).strip(_cstr(charset))


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end of the text gives an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits and the full length of ``src``; a result
    length at or above ``size`` means the copy was cut short.
    """
    _check_size("size", size)
    text = _cstr(src)
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it would have had with room
    enough; when ``dest`` already fills the buffer it is left unchanged
    and the length is ``size + len(src)``.
    """
    _check_size("size", size)
    head = _cstr(dest)
    tail = _cstr(src)
    used = min(len(head), size)
    if used == size:
        return head, size + len(tail)
    room = size - used - 1
    return head + tail[:room], used + len(tail)


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of two strings."""
    return _cstr(s1) + _cstr(s2)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(_cstr(s)))


def striteri(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` on each character in order.

    ``func`` may return a replacement character; returning None keeps the
    character as it was. The edited string is returned.
    """
    chars = []
    for index, char in enumerate(_cstr(s)):
        replacement = func(index, char)
        if replacement is None:
            chars.append(char)
        else:
            _check_char(replacement)
            chars.append(replacement)
    return "".join(chars)