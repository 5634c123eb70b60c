"""String helpers: integer conversion, splitting, trimming and mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence, TypeVar

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32

T = TypeVar("T")


def _wrap_int(value: int) -> int:
    """Reduce a value to the signed 32-bit range, wrapping on overflow."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and
    digits are read until the first non-digit. Anything unparsable gives
    0. The result wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters in charset from both ends of text.

    An empty charset leaves the text unchanged.
    """
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text beginning at start.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strdup(text: str) -> str:
    """A copy of text."""
    return str(text)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[T], func: Callable[[int, T], T]) -> None:
    """Replace each element in place with func(index, element)."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)