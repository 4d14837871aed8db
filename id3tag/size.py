"""Encoding and decoding of the four-byte sizes of tags and frames."""

from __future__ import annotations

from .framer import ID3Error

SIZE_LENGTH = 4

SYNCH_SAFE_MAX_SIZE = 0x0FFFFFFF
SYNCH_UNSAFE_MAX_SIZE = 0xFFFFFFFF

_SYNCH_SAFE_BITS = 7
_SYNCH_UNSAFE_BITS = 8


class InvalidSizeFormatError(ID3Error, ValueError):
    """Raised when size bytes are not a valid ID3v2 size."""

    def __init__(self, message: str = "invalid format of tag's/frame's size") -> None:
        super().__init__(message)


class SizeOverflowError(ID3Error, ValueError):
    """Raised when a size does not fit into an ID3v2 size field."""

    def __init__(
        self, message: str = "size of tag/frame is greater than allowed in id3 tag"
    ) -> None:
        super().__init__(message)


def parse_size(data: bytes, synch_safe: bool) -> int:
    """Decode at most four size bytes; synch-safe bytes carry 7 bits each."""
    if len(data) > SIZE_LENGTH:
        raise InvalidSizeFormatError()
    bits = _SYNCH_SAFE_BITS if synch_safe else _SYNCH_UNSAFE_BITS
    size = 0
    for byte in data:
        if synch_safe and byte & 0x80:
            raise InvalidSizeFormatError()
        size = (size << bits) | byte
    return size


def encode_size(size: int, synch_safe: bool) -> bytes:
    """Encode ``size`` as four bytes, synch-safe or plain big-endian."""
    if synch_safe:
        if not 0 <= size <= SYNCH_SAFE_MAX_SIZE:
            raise SizeOverflowError()
        return bytes(
            (size >> (_SYNCH_SAFE_BITS * shift)) & 0x7F
            for shift in reversed(range(SIZE_LENGTH))
        )
    if not 0 <= size <= SYNCH_UNSAFE_MAX_SIZE:
        raise SizeOverflowError()
    return size.to_bytes(SIZE_LENGTH, "big")