"""Reader over a frame body with the helpers frame parsers need."""

from __future__ import annotations

from typing import BinaryIO, Union

from .framer import BOM, Encoding

Source = Union[bytes, bytearray, memoryview, BinaryIO]


class FrameReader:
    """Reads a frame body held in memory.

    Reading past the end raises ``EOFError``.
    """

    def __init__(self, source: Source) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._data = bytes(source)
        else:
            self._data = source.read() or b""
        self._pos = 0

    def buffered(self) -> int:
        """Return the number of bytes not read yet."""
        return len(self._data) - self._pos

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or everything left if ``size`` is negative."""
        end = len(self._data) if size < 0 else min(len(self._data), self._pos + size)
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def discard(self, n: int) -> None:
        """Skip ``n`` bytes."""
        available = self.buffered()
        self._pos += min(n, available)
        if n > available:
            raise EOFError(f"cannot discard {n} bytes, only {available} left")

    def read_byte(self) -> int:
        """Read one byte."""
        if self._pos >= len(self._data):
            raise EOFError("no bytes left")
        byte = self._data[self._pos]
        self._pos += 1
        return byte

    def next(self, n: int) -> bytes:
        """Read exactly ``n`` bytes; nothing is consumed if fewer are left."""
        if n == 0:
            return b""
        if self.buffered() < n:
            raise EOFError(f"cannot read {n} bytes, only {self.buffered()} left")
        chunk = self._data[self._pos:self._pos + n]
        self._pos += n
        return chunk

    def read_all(self) -> bytes:
        """Read everything that is left."""
        return self.read()

    def read_till_delim(self, delim: int) -> bytes:
        """Read up to, not including, the first ``delim`` byte, which stays unread."""
        index = self._data.find(bytes([delim]), self._pos)
        if index < 0:
            self._pos = len(self._data)
            raise EOFError(f"delimiter {delim} not found")
        chunk = self._data[self._pos:index]
        self._pos = index
        return chunk

    def read_till_delims(self, delims: bytes) -> bytes:
        """Read up to, not including, the first occurrence of ``delims``."""
        if not delims:
            return b""
        if len(delims) == 1:
            return self.read_till_delim(delims[0])

        result = bytearray()
        while True:
            result += self.read_till_delim(delims[0])
            if self.buffered() < len(delims):
                raise EOFError("delimiters not found")
            if self._data[self._pos:self._pos + len(delims)] == delims:
                return bytes(result)
            result.append(self.read_byte())

    def read_text(self, encoding: Encoding) -> bytes:
        """Read a terminated string in ``encoding`` and skip its termination bytes."""
        delims = encoding.termination_bytes
        text = self.read_till_delims(delims)
        # UTF-16 text may end in a zero byte that belongs to its last code unit.
        if encoding is Encoding.UTF16 and text != BOM:
            text += bytes([self.read_byte()])
        self.discard(len(delims))
        return text