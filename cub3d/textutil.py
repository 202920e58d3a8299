"""String helpers used by the scene-file parser."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_SPACE = " \f\n\r\t\v"


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; no digits gives 0.
    """
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + ord(ch) - ord("0")
    return sign * value


def itoa(n: int) -> str:
    """Decimal text of an integer."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if charset is None:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str | None, second: str | None) -> str:
    """Concatenate two strings, treating a missing one as empty."""
    return (first or "") + (second or "")


def strmapi(text: str | None, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    if text is None:
        return ""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str] | None,
    func: Callable[[int, str], str | None],
) -> None:
    """Call ``func(index, char)`` on each element, storing any replacement it returns."""
    if chars is None:
        return
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement