"""ASCII character classification and case conversion.

Each function accepts either a one-character string or an integer code.
The predicates return booleans; the converters return a value of the
same kind as their argument.
"""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters a-z and A-Z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) to tilde (126)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, low: int, high: int, shift: int) -> CharLike:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map a lower-case ASCII letter to upper case; anything else is unchanged."""
    return _convert(c, ord("a"), ord("z"), -32)


def to_lower(c: CharLike) -> CharLike:
    """Map an upper-case ASCII letter to lower case; anything else is unchanged."""
    return _convert(c, ord("A"), ord("Z"), 32)