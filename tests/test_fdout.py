import os

import pytest

from raycube.fdout import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def _capture(action):
    read_fd, write_fd = os.pipe()
    try:
        action(write_fd)
    finally:
        os.close(write_fd)
    with os.fdopen(read_fd, "rb") as reader:
        return reader.read()


def test_putchar_writes_one_character():
    assert _capture(lambda fd: putchar_fd("x", fd)) == b"x"


def test_putchar_accepts_integer_code():
    assert _capture(lambda fd: putchar_fd(ord("A"), fd)) == b"A"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", 1)


def test_putstr_writes_text():
    assert _capture(lambda fd: putstr_fd("salut toi", fd)) == b"salut toi"


def test_putstr_none_writes_nothing():
    assert _capture(lambda fd: putstr_fd(None, fd)) == b""


def test_putstr_accepts_bytes():
    assert _capture(lambda fd: putstr_fd(b"raw", fd)) == b"raw"


def test_putendl_appends_newline():
    assert _capture(lambda fd: putendl_fd("line", fd)) == b"line\n"


def test_putendl_none_writes_nothing():
    assert _capture(lambda fd: putendl_fd(None, fd)) == b""


def test_putendl_negative_fd_is_ignored():
    # Must not raise, and the captured pipe stays empty.
    assert _capture(lambda fd: putendl_fd("text", -1)) == b""


@pytest.mark.parametrize(
    "n",
    [0, 7, 654654, -42, 2147483647, -2147483648],
)
def test_putnbr_writes_decimal(n):
    assert _capture(lambda fd: putnbr_fd(n, fd)) == str(n).encode()


def test_putnbr_min_int_literal():
    assert _capture(lambda fd: putnbr_fd(-2147483648, fd)) == b"-2147483648"


def test_sequence_of_writes_concatenates():
    read_fd, write_fd = os.pipe()
    try:
        putstr_fd("n=", write_fd)
        putnbr_fd(12, write_fd)
        putchar_fd(";", write_fd)
    finally:
        os.close(write_fd)
    with os.fdopen(read_fd, "rb") as reader:
        written = reader.read()
    assert written == b"n=12;"