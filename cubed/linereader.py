"""Buffered line-by-line reading from a file-like object."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 512
_MAX_BUFFER_SIZE = 2147483647


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a text or binary stream.

    Data is pulled from the stream in chunks of ``buffer_size``; what is
    left after a line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0 or buffer_size >= _MAX_BUFFER_SIZE:
            raise ValueError(f"buffer size out of range: {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _newline_index(self) -> int:
        if not self._pending:
            return -1
        newline = b"\n" if isinstance(self._pending, bytes) else "\n"
        return self._pending.find(newline)

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while self._newline_index() < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if not self._pending:
            return None
        index = self._newline_index()
        if index < 0:
            line, self._pending = self._pending, None
            return line
        line = self._pending[:index + 1]
        self._pending = self._pending[index + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line