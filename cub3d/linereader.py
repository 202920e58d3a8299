"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

DEFAULT_BUFFER_SIZE = 1024


def _line_end(buffer: str | bytes) -> int:
    """Index just past the first newline in ``buffer``, or 0 if it has none."""
    newline = "\n" if isinstance(buffer, str) else b"\n"
    return buffer.find(newline) + 1


def get_line(buffer: AnyStr) -> Optional[AnyStr]:
    """The first line of ``buffer``, newline included, or ``None`` if it is empty."""
    if not buffer:
        return None
    end = _line_end(buffer)
    return buffer[:end] if end else buffer


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, keeping their newlines."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _fill(self) -> Optional[AnyStr]:
        pending = self._pending
        while pending is None or not _line_end(pending):
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        return pending

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or ``None`` once the stream is exhausted."""
        pending = self._fill()
        if pending is None:
            self._pending = None
            return None
        line = get_line(pending)
        if line is None:
            self._pending = None
            return None
        rest = pending[len(line):]
        # Text left without a newline only remains if more data may follow it.
        self._pending = rest if _line_end(line) else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line