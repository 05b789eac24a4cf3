"""String building: number conversion, splitting, slicing, joining and mapping.

These helpers return new ``str`` values rather than filling buffers.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[int, str]

# The characters the parser skips before a number: space and \t through \r.
_LEADING_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _char(c: CharLike) -> str:
    """Normalise a character given as an int code or a one-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from text.

    Leading spaces and the control characters \\t through \\r are skipped,
    one optional sign is accepted, and digits are read until the first
    non-digit. Text without digits parses as 0.
    """
    _require_str(text, "text")
    pos = 0
    while pos < len(text) and text[pos] in _LEADING_SPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    digits = text[pos:end]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal form of n, with a leading minus sign when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: CharLike) -> List[str]:
    """Split text on the separator character, dropping empty pieces."""
    _require_str(text, "text")
    return [piece for piece in text.split(_char(sep)) if piece]


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at index start.

    A start at or past the end of text gives an empty string.
    """
    _require_str(text, "text")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Return a followed by b."""
    return _require_str(a, "a") + _require_str(b, "b")


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in charset."""
    _require_str(text, "text")
    _require_str(charset, "charset")
    if not charset:
        return text
    return text.strip(charset)


def strmapi(text: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) applied to each character."""
    _require_str(text, "text")
    if f is None:
        raise TypeError("a mapping function is required")
    return "".join(_char(f(index, ch)) for index, ch in enumerate(text))


def striteri(
    chars: Optional[MutableSequence[str]],
    f: Callable[[int, str], Optional[str]],
) -> None:
    """Call f(index, char) for each element of chars, in place.

    When f returns a character, it replaces the element at that index;
    returning None leaves the element unchanged. A chars of None is
    ignored.
    """
    if chars is None:
        return
    for index, ch in enumerate(list(chars)):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = _char(replacement)