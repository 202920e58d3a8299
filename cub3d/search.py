"""Searching and comparing NUL-terminated text.

Strings are read the way a C string is: anything after an embedded
``"\\0"`` is ignored. Positions are returned as indices, or ``None``
when nothing is found.
"""

from __future__ import annotations


def _c_string(text: str) -> str:
    return text.split("\0", 1)[0]


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def _char_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strchr(text: str | None, c: str | int) -> int | None:
    """Index of the first ``c`` in ``text``.

    Searching for the NUL character gives the index of the terminator,
    that is, the length of the string.
    """
    if text is None:
        return None
    code = _code(c)
    body = _c_string(text)
    if code == 0:
        return len(body)
    index = body.find(chr(code))
    return index if index >= 0 else None


def strrchr(text: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``text``; NUL gives the length of the string."""
    code = _code(c)
    body = _c_string(text)
    if code == 0:
        return len(body)
    index = body.rfind(chr(code))
    return index if index >= 0 else None


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first pair of differing character codes,
    with the end of a string counting as code 0, or 0 when they agree.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    a_text = _c_string(first)
    b_text = _c_string(second)
    for index in range(n):
        a = _char_at(a_text, index)
        b = _char_at(b_text, index)
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` in ``big`` where the match lies wholly within ``length`` characters.

    An empty ``little`` matches at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    needle = _c_string(little)
    if not needle:
        return 0
    index = _c_string(big).find(needle, 0, length)
    return index if index >= 0 else None