"""String length, searching, comparison and bounded copying.

Strings are ordinary Python ``str`` values. Positions come back as
indices, and ``None`` means "not found". The end of a string counts as
a terminating NUL at index ``len(text)``, so searching for ``"\\0"``
finds that position.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Normalise a character given as an int code or a one-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(text: str) -> int:
    """Return the number of characters in text."""
    return len(text)


def strdup(text: str) -> str:
    """Return a copy of text."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    return "".join(text)


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in text, or None.

    Searching for NUL finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        index = text.find(ch)
        return len(text) if index < 0 else index
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in text, or None.

    Searching for NUL finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little in big, looking only at the first length characters.

    An empty needle is found at index 0. A match must lie wholly within
    the searched prefix.
    """
    _check_size(length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters of a and b.

    Returns the code difference of the first pair that differs, with the
    end of a string counting as NUL, or 0 if the prefixes are equal.
    """
    _check_size(n)
    for x, y in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters including its terminator.

    Returns the copied text, truncated to at most size - 1 characters
    (empty when size is 0), and the full length of src, so truncation
    happened when that length is >= size.
    """
    _check_size(size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the resulting text and the length the result would have had
    without truncation. When dst already fills the buffer, dst is
    returned unchanged and the length is size + len(src).
    """
    _check_size(size)
    dst_len = min(len(dst), size)
    if size <= dst_len:
        return dst, size + len(src)
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)