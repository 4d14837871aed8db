"""Tag and frame headers of ID3v2."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from .framer import Framer, ID3Error
from .size import encode_size, parse_size

TAG_HEADER_SIZE = 10
FRAME_HEADER_SIZE = 10
ID3_IDENTIFIER = b"ID3"


class SmallHeaderSizeError(ID3Error):
    """Raised when the data is shorter than a tag header."""

    def __init__(self, message: str = "size of tag header is less than expected") -> None:
        super().__init__(message)


class NoTagError(ID3Error):
    """Raised when the data does not start with an ID3v2 tag."""

    def __init__(self, message: str = "there is no tag in file") -> None:
        super().__init__(message)


class BlankFrameError(ID3Error):
    """Raised when a frame header has a blank ID or a zero size."""

    def __init__(self, message: str = "id or size of frame are blank") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class TagHeader:
    """Version and size of the frames of a tag."""

    frames_size: int
    version: int


@dataclass(frozen=True)
class FrameHeader:
    """ID and body size of a frame."""

    frame_id: str
    body_size: int


def is_id3_tag(data: bytes) -> bool:
    """Return whether ``data`` is the ID3 identifier."""
    return bytes(data) == ID3_IDENTIFIER


def parse_header(stream: BinaryIO) -> TagHeader:
    """Read and parse a tag header from ``stream``.

    Raises ``EOFError`` on empty input, ``SmallHeaderSizeError`` on short input
    and ``NoTagError`` if the data is not an ID3v2 tag.
    """
    data = stream.read(TAG_HEADER_SIZE)
    if not data:
        raise EOFError("no data for a tag header")
    if len(data) < TAG_HEADER_SIZE:
        raise SmallHeaderSizeError()
    if not is_id3_tag(data[:3]):
        raise NoTagError()
    # The tag header size is always synch-safe.
    return TagHeader(frames_size=parse_size(data[6:], True), version=data[3])


def encode_tag_header(frames_size: int, version: int) -> bytes:
    """Return a tag header for frames of ``frames_size`` bytes."""
    return ID3_IDENTIFIER + bytes([version, 0, 0]) + encode_size(frames_size, True)


def parse_frame_header(stream: BinaryIO, synch_safe: bool) -> FrameHeader:
    """Read and parse a frame header from ``stream``.

    Raises ``EOFError`` when the data ends, ``BlankFrameError`` on padding and
    ``InvalidSizeFormatError`` on a malformed size.
    """
    data = stream.read(FRAME_HEADER_SIZE)
    if len(data) < FRAME_HEADER_SIZE:
        raise EOFError("no data for a frame header")
    frame_id = data[:4].decode("latin-1")
    body_size = parse_size(data[4:8], synch_safe)
    if not frame_id or body_size == 0:
        raise BlankFrameError()
    return FrameHeader(frame_id=frame_id, body_size=body_size)


def encode_frame_header(frame_id: str, frame_size: int, synch_safe: bool) -> bytes:
    """Return a frame header with empty flags."""
    return frame_id.encode("utf-8") + encode_size(frame_size, synch_safe) + b"\x00\x00"


def encode_frame(frame_id: str, frame: Framer, synch_safe: bool) -> bytes:
    """Return a whole frame: header followed by the body of ``frame``."""
    return encode_frame_header(frame_id, frame.size(), synch_safe) + frame.encode()