"""Searching, comparing and bounded copying of strings.

Strings follow C conventions where it matters: a NUL character ends the
string, and asking for the NUL character finds the terminator at the end.
Positions are returned as indices, or None when nothing is found.
"""

from __future__ import annotations

from typing import Optional, Union

Text = Union[str, bytes, bytearray]

_NUL = "\0"


def _code(item: Union[str, int]) -> int:
    return ord(item) if isinstance(item, str) else item


def _terminated(data: Text) -> Text:
    """The part of data before its first NUL, if any."""
    nul = _NUL if isinstance(data, str) else b"\0"
    end = data.find(nul)
    return data if end < 0 else data[:end]


def strlen(data: Text) -> int:
    """Number of characters before the first NUL, or the whole length."""
    return len(_terminated(data))


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first occurrence of c in text.

    Searching for the NUL character gives the index of the terminator,
    which is the length of the string.
    """
    text = _terminated(text)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last occurrence of c in text, or None."""
    text = _terminated(text)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little in the first length characters of big.

    An empty needle is found at index 0. A match must lie entirely within
    the first length characters.
    """
    if not little:
        return 0
    window = _terminated(big)[:max(length, 0)]
    index = window.find(little)
    return None if index < 0 else index


def strncmp(first: Text, second: Text, n: int) -> int:
    """Compare at most n characters.

    Returns zero when they agree, otherwise the difference between the
    codes of the first pair that differ; the end of a string counts as 0.
    """
    if n <= 0:
        return 0
    a = _terminated(first)
    b = _terminated(second)
    for i in range(n):
        ca = _code(a[i]) if i < len(a) else 0
        cb = _code(b[i]) if i < len(b) else 0
        if ca != cb or ca == 0 or i == n - 1:
            return ca - cb
    return 0


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters.

    Returns the resulting string and the length that was attempted to be
    created. When size is no larger than dst, dst is returned unchanged
    together with size plus the length of src.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst = _terminated(dst)
    src = _terminated(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters.

    Returns the resulting string and the length of src. With a size of
    zero the destination is left as it was.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src = _terminated(src)
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)