"""Reading a stream one line at a time."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

BUFFER_SIZE = 100

Line = Union[str, bytes]


class LineReader:
    """Split the data of a readable stream into lines.

    The stream only needs a ``read(size)`` method returning ``str`` or
    ``bytes``. Lines are returned without their trailing newline. A final
    line that lacks a newline is still returned. An empty read marks the
    end of the data for the current call only: a later call reads from the
    stream again, so data appended afterwards is picked up.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Line] = None

    def read_line(self) -> Optional[Line]:
        """The next line, or ``None`` when the stream has no more data."""
        while True:
            if self._pending:
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                head, found, tail = self._pending.partition(newline)
                if found:
                    self._pending = tail
                    return head
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        line, self._pending = self._pending, None
        return line or None

    def __iter__(self) -> Iterator[Line]:
        while (line := self.read_line()) is not None:
            yield line