"""Write characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

Text = Union[str, bytes]


def _as_bytes(text: Text) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Union[str, int], fd: int) -> None:
    """Write a single character to fd.

    A string must hold exactly one character; an integer is written as
    one byte.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([c & 0xFF])
    _write_all(fd, data)


def putstr_fd(text: Optional[Text], fd: int) -> None:
    """Write text to fd; None writes nothing."""
    if text is None:
        return
    _write_all(fd, _as_bytes(text))


def putendl_fd(text: Optional[Text], fd: int) -> None:
    """Write text followed by a newline.

    Nothing is written when text is None or fd is negative.
    """
    if text is None or fd < 0:
        return
    _write_all(fd, _as_bytes(text) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of an integer to fd."""
    _write_all(fd, str(int(n)).encode("ascii"))