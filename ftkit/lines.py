"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, IO, Iterator, List, Optional

DEFAULT_BUFFER_SIZE = 5


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    The stream is read in chunks of buffer_size; text read past a newline is
    kept for the next call. Lines keep their trailing newline, except the
    last line of a stream that does not end with one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer_size must be an integer, got {type(buffer_size).__name__}")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._chunks: List[AnyStr] = []
        self._nl: Optional[AnyStr] = None

    def _has_newline(self) -> bool:
        return bool(self._chunks) and self._nl is not None and self._nl in self._chunks[-1]

    def _fill(self) -> None:
        while not self._has_newline():
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._chunks.clear()
                raise
            if not chunk:
                return
            if self._nl is None:
                self._nl = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            self._chunks.append(chunk)

    def next_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted."""
        self._fill()
        if not self._chunks or self._nl is None:
            return None
        pending = self._chunks[0][:0].join(self._chunks)
        self._chunks.clear()
        index = pending.find(self._nl)
        if index < 0:
            return pending
        line, rest = pending[: index + 1], pending[index + 1:]
        if rest:
            self._chunks.append(rest)
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line