import io
import os

import pytest

from raycube.linereader import LineReader, read_lines


def test_lines_with_and_without_final_newline():
    reader = LineReader(io.BytesIO(b"ab\ncd"))
    assert reader.read_line() == b"ab\n"
    assert reader.read_line() == b"cd"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    assert LineReader(io.BytesIO(b"")).read_line() is None
    assert read_lines(io.BytesIO(b"")) == []


def test_blank_lines_are_kept():
    assert read_lines(io.BytesIO(b"\n\nx\n")) == [b"\n", b"\n", b"x\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 64, 10000])
def test_round_trip_any_buffer_size(size):
    data = b"11111\n10N01\n\n10001\n11111"
    lines = list(LineReader(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert all(line.count(b"\n") <= 1 for line in lines)
    assert lines == data.splitlines(keepends=True)


def test_text_stream():
    assert read_lines(io.StringIO("one\ntwo\n")) == ["one\n", "two\n"]


def test_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"first\nsecond\n")
        os.close(write_fd)
        write_fd = -1
        lines = list(LineReader(read_fd, 4))
        assert lines == [b"first\n", b"second\n"]
    finally:
        os.close(read_fd)
        if write_fd >= 0:
            os.close(write_fd)


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"x"), 0)


def test_negative_descriptor():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_iteration_stops_at_end():
    reader = LineReader(io.BytesIO(b"a\nb\n"))
    assert list(reader) == [b"a\n", b"b\n"]
    assert list(reader) == []