"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %.

Numbers follow C's fixed-width types: %d and %i take a signed 32-bit
int, %u, %x and %X an unsigned 32-bit int, and %p an unsigned 64-bit
address. Values outside those ranges wrap as they would in C.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, Union

_INT_BITS = 32
_PTR_BITS = 64
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _wrap_unsigned(value: int, bits: int) -> int:
    return int(value) % (1 << bits)


def _wrap_signed(value: int, bits: int) -> int:
    value = _wrap_unsigned(value, bits)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _to_base16(value: int, digits: str) -> str:
    out = []
    while True:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def format_number(nb: int) -> str:
    """Decimal form of a signed 32-bit integer."""
    return str(_wrap_signed(nb, _INT_BITS))


def format_unsigned(nb: int) -> str:
    """Decimal form of an unsigned 32-bit integer."""
    return str(_wrap_unsigned(nb, _INT_BITS))


def format_hex(nb: int, upper: bool = False) -> str:
    """Hexadecimal form of an unsigned 32-bit integer, without prefix."""
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    return _to_base16(_wrap_unsigned(nb, _INT_BITS), digits)


def format_pointer(ptr: Optional[int]) -> str:
    """An address as 0x followed by lower-case hex; a null address is (nil)."""
    if ptr is None:
        return "(nil)"
    value = _wrap_unsigned(ptr, _PTR_BITS)
    if value == 0:
        return "(nil)"
    return "0x" + _to_base16(value, _LOWER_DIGITS)


def format_string(text: Optional[str]) -> str:
    """The text itself, or (null) for None."""
    return "(null)" if text is None else str(text)


def _format_char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


_CONVERSIONS = {
    "d": format_number,
    "i": format_number,
    "c": _format_char,
    "s": format_string,
    "x": lambda v: format_hex(v, False),
    "X": lambda v: format_hex(v, True),
    "u": format_unsigned,
    "p": format_pointer,
}


def render(fmt: str, *args: Any) -> str:
    """Expand the conversions in fmt with args and return the result.

    An unknown conversion character is consumed and produces nothing.
    A lone '%' at the end of the format produces nothing.
    """
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of fmt to standard output; return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)