"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

import codecs
from collections.abc import Iterator
from typing import IO

BUFF_SIZE = 32


class LineReader:
    """Read lines, without their newline, from a text or binary stream.

    The stream is read in chunks of ``buffer_size``. A final line without a
    trailing newline is still returned; a trailing newline does not produce
    an extra empty line.
    """

    def __init__(
        self,
        stream: IO,
        buffer_size: int = BUFF_SIZE,
        encoding: str = "utf-8",
    ) -> None:
        if buffer_size < 0:
            raise ValueError(f"negative buffer size {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._decoder = codecs.getincrementaldecoder(encoding)()
        self._stock = ""
        self._eof = False

    def _decode(self, chunk: str | bytes, final: bool = False) -> str:
        if isinstance(chunk, bytes):
            return self._decoder.decode(chunk, final)
        return chunk

    def _fill(self) -> None:
        while "\n" not in self._stock and not self._eof:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
                self._stock += self._decoder.decode(b"", True)
            else:
                self._stock += self._decode(chunk)

    def next_line(self) -> str | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        if not self._stock:
            return None
        line, _, rest = self._stock.partition("\n")
        self._stock = rest
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line