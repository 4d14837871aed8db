"""Chapter frames (CHAP) with optional title and description subframes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from .framer import Encoding, Framer, encode_text, encoded_size
from .frames import TextFrame, parse_text_frame
from .header import FRAME_HEADER_SIZE, BlankFrameError, encode_frame, parse_frame_header
from .reader import FrameReader
from .size import InvalidSizeFormatError

# An offset with this value is to be ignored in favour of the time.
IGNORED_OFFSET = 0xFFFFFFFF

_MILLISECOND = timedelta(milliseconds=1)
_UINT32_MASK = 0xFFFFFFFF


def _millis_bytes(duration: timedelta) -> bytes:
    millis = duration // _MILLISECOND
    return (millis & _UINT32_MASK).to_bytes(4, "big")


def _read_uint32(reader: FrameReader) -> int:
    return int.from_bytes(reader.next(4), "big")


@dataclass
class ChapterFrame(Framer):
    """A chapter frame.

    Only the TIT2 (title) and TIT3 (description) subframes are supported;
    other subframes are ignored.
    """

    element_id: str = ""
    start_time: timedelta = timedelta(0)
    end_time: timedelta = timedelta(0)
    start_offset: int = 0
    end_offset: int = 0
    title: Optional[TextFrame] = None
    description: Optional[TextFrame] = None

    def size(self) -> int:
        size = encoded_size(self.element_id, Encoding.ISO) + 1 + 4 * 4
        if self.title is not None:
            size += FRAME_HEADER_SIZE + self.title.size()
        if self.description is not None:
            size += FRAME_HEADER_SIZE + self.description.size()
        return size

    def unique_identifier(self) -> str:
        return self.element_id

    def encode(self) -> bytes:
        parts = [
            encode_text(self.element_id, Encoding.ISO),
            b"\x00",
            _millis_bytes(self.start_time),
            _millis_bytes(self.end_time),
            (self.start_offset & _UINT32_MASK).to_bytes(4, "big"),
            (self.end_offset & _UINT32_MASK).to_bytes(4, "big"),
        ]
        if self.title is not None:
            parts.append(encode_frame("TIT2", self.title, True))
        if self.description is not None:
            parts.append(encode_frame("TIT3", self.description, True))
        return b"".join(parts)


def parse_chapter_frame(reader: FrameReader, version: int) -> ChapterFrame:
    """Parse the body of a CHAP frame.

    The parsed frame always carries a title and a description; they are
    empty text frames when the body has no such subframes.
    """
    element_id = reader.read_text(Encoding.ISO)
    synch_safe = version == 4

    start_time = _read_uint32(reader)
    end_time = _read_uint32(reader)
    start_offset = _read_uint32(reader)
    end_offset = _read_uint32(reader)

    title = TextFrame()
    description = TextFrame()

    while True:
        try:
            header = parse_frame_header(reader, synch_safe)
        except (EOFError, BlankFrameError, InvalidSizeFormatError):
            break
        body = reader.read(header.body_size)
        if header.frame_id == "TIT2":
            title = parse_text_frame(FrameReader(body))
        elif header.frame_id == "TIT3":
            description = parse_text_frame(FrameReader(body))

    return ChapterFrame(
        element_id=element_id.decode("utf-8", errors="replace"),
        start_time=timedelta(milliseconds=start_time),
        end_time=timedelta(milliseconds=end_time),
        start_offset=start_offset,
        end_offset=end_offset,
        title=title,
        description=description,
    )