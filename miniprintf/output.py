"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

CharLike = Union[int, str]


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar_fd(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a one-char str or an int code."""
    if isinstance(c, int):
        ch = chr(c & 0xFF)
    elif isinstance(c, str) and len(c) == 1:
        ch = c
    else:
        raise ValueError(f"expected a single character, got {c!r}")
    _stream(stream).write(ch)


def putstr_fd(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s; None writes nothing."""
    if s is None:
        return
    _stream(stream).write(s)


def putendl_fd(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s followed by a newline; None writes nothing."""
    if s is None:
        return
    out = _stream(stream)
    out.write(s)
    out.write("\n")


def putnbr_fd(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of n, with a leading minus sign when negative."""
    _stream(stream).write(str(int(n)))