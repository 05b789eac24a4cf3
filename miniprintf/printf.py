"""A small printf: %c %s %d %i %u %x %X %p and %%.

``sprintf`` builds the formatted text and ``printf`` writes it to a
stream, returning the number of characters written. A ``%`` at the very
end of the format is kept as-is; an unknown conversion produces nothing
and uses no argument. Integer arguments wrap the way the native widths
do: ``%d``/``%i`` as signed 32-bit, ``%u``/``%x``/``%X`` as unsigned
32-bit, and ``%p`` as an unsigned 64-bit address.
"""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, Optional, TextIO, Union

from .strings import itoa

_INT_BITS = 32
_LONG_BITS = 64
_UINT_MASK = (1 << _INT_BITS) - 1
_ULONG_MASK = (1 << _LONG_BITS) - 1

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"

_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} needs an int argument, got {type(value).__name__}")
    return int(value)


def _to_int32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << _INT_BITS) if n >> (_INT_BITS - 1) else n


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def format_hex(num: int, spec: str = "x") -> str:
    """Hexadecimal form of num as an unsigned 64-bit value.

    Lower-case digits for spec ``"x"``, upper-case for anything else.
    """
    digits = _HEX_LOWER if spec == "x" else _HEX_UPPER
    value = _require_int(num, spec) & _ULONG_MASK
    out = []
    while True:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def format_pointer(address: Optional[int]) -> str:
    """``0x``-prefixed lower-case hex address, or ``(nil)`` for zero or None."""
    value = 0 if address is None else _require_int(address, "p") & _ULONG_MASK
    if value == 0:
        return _NULL_POINTER
    return "0x" + format_hex(value, "x")


def format_unsigned(n: int) -> str:
    """Decimal form of n taken as an unsigned 32-bit value."""
    return str(_require_int(n, "u") & _UINT_MASK)


def format_signed(n: int) -> str:
    """Decimal form of n taken as a signed 32-bit value."""
    return itoa(_to_int32(_require_int(n, "d")))


def format_str(s: Optional[str]) -> str:
    """The text of s up to any NUL, or ``(null)`` for None."""
    if s is None:
        return _NULL_STRING
    if not isinstance(s, str):
        raise TypeError(f"%s needs a str argument, got {type(s).__name__}")
    return _until_nul(s)


def _format_char(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"%c needs a single character, got {c!r}")
        return c
    return chr(_require_int(c, "c") & 0xFF)


def convert(spec: str, args: Iterable[Any]) -> str:
    """Render one conversion, taking its argument (if any) from args.

    args should be an iterator shared across conversions; exactly one
    value is consumed for every conversion except ``%%`` and unknown
    ones, which consume none. Unknown conversions render as "".
    """
    if spec == "%":
        return "%"
    handlers = {
        "c": _format_char,
        "s": format_str,
        "d": format_signed,
        "i": format_signed,
        "u": format_unsigned,
        "x": lambda v: format_hex(_require_int(v, "x") & _UINT_MASK, "x"),
        "X": lambda v: format_hex(_require_int(v, "X") & _UINT_MASK, "X"),
        "p": format_pointer,
    }
    handler = handlers.get(spec)
    if handler is None:
        return ""
    source: Iterator[Any] = iter(args)
    try:
        value = next(source)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    return handler(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted args."""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    arg_iter = iter(args)
    chars = iter(_until_nul(fmt))
    out = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        out.append("%" if spec is None else convert(spec, arg_iter))
    return "".join(out)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to file (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)