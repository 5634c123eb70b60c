"""Read a stream one line at a time, in fixed-size chunks."""

from __future__ import annotations

import os
from typing import IO, Iterator, List, Optional, Union

BUFFER_SIZE = 1

Source = Union[int, IO[bytes], IO[str]]


class LineReader:
    """Line reader over a file descriptor or a readable stream.

    Data is pulled buffer_size units at a time until a newline is seen.
    Each line is returned with its newline, except a final line that has
    none. Text streams yield str, binary streams and descriptors bytes.
    """

    def __init__(self, source: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(source, int) and source < 0:
            raise ValueError("file descriptor must not be negative")
        self._source = source
        self._buffer_size = buffer_size
        self._pending: Optional[Union[str, bytes]] = None

    def _read_chunk(self):
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size)

    def _newline_at(self) -> int:
        if self._pending is None:
            return -1
        separator = "\n" if isinstance(self._pending, str) else b"\n"
        return self._pending.find(separator)

    def read_line(self):
        """The next line, or None once the stream is exhausted."""
        while self._newline_at() < 0:
            chunk = self._read_chunk()
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if not self._pending:
            return None
        end = self._newline_at()
        if end < 0:
            line = self._pending
            self._pending = self._pending[:0]
        else:
            line = self._pending[:end + 1]
            self._pending = self._pending[end + 1:]
        return line

    def __iter__(self) -> Iterator:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: Source) -> List:
    """All lines of stream, each with its newline where there is one."""
    return list(LineReader(stream))