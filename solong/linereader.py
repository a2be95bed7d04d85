"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

DEFAULT_BUFFER_SIZE = 4


def _find_newline(data: AnyStr) -> int:
    """Return the index of the first newline in ``data``, or -1 if absent."""
    separator = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
    return data.find(separator)


class LineReader(Generic[AnyStr]):
    """Yield lines from ``stream``, each keeping its trailing newline.

    The stream is read ``buffer_size`` characters (or bytes) at a time;
    whatever follows a returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._remain: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted.

        A read error discards anything buffered and propagates.
        """
        buffered = self._remain
        while buffered is None or _find_newline(buffered) < 0:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._remain = None
                raise
            if not chunk:
                break
            buffered = chunk if buffered is None else buffered + chunk
        if not buffered:
            self._remain = None
            return None
        index = _find_newline(buffered)
        if index < 0:
            self._remain = None
            return buffered
        self._remain = buffered[index + 1:]
        return buffered[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> list[AnyStr]:
    """Read every remaining line of ``stream``."""
    return list(LineReader(stream, buffer_size))