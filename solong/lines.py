"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Hand out the lines of a text or binary stream one by one.

    The stream is read in chunks of ``buffer_size``. Every line keeps its
    trailing newline; the last line may lack one. Each reader keeps its own
    pending data, so several streams can be read side by side.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer size must be an integer")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._eof = False

    def _take_line(self) -> AnyStr | None:
        if self._pending is None:
            return None
        newline = "\n" if isinstance(self._pending, str) else b"\n"
        index = self._pending.find(newline)
        if index < 0:
            return None
        line = self._pending[: index + 1]
        self._pending = self._pending[index + 1:]
        return line

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            line = self._take_line()
            if line is not None:
                return line
            if self._eof:
                break
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
                continue
            self._pending = chunk if self._pending is None else self._pending + chunk
        rest, self._pending = self._pending, None
        return rest or None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each with its trailing newline."""
    yield from LineReader(stream, buffer_size)