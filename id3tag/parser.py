"""Parsing of the frames that follow a tag header."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, Iterator, Optional

from .common_ids import PARSERS, must_frame_be_in_sequence
from .framer import Framer, ID3Error
from .frames import parse_text_frame, parse_unknown_frame
from .header import FRAME_HEADER_SIZE, BlankFrameError, parse_frame_header
from .reader import FrameReader
from .size import InvalidSizeFormatError


class UnsupportedVersionError(ID3Error):
    """Raised when the tag has a version older than ID3v2.3."""

    def __init__(self, message: str = "unsupported version of ID3 tag") -> None:
        super().__init__(message)


class BodyOverflowError(ID3Error):
    """Raised when a frame is larger than the rest of the tag."""

    def __init__(self, message: str = "frame went over tag area") -> None:
        super().__init__(message)


@dataclass
class Options:
    """How a tag is processed.

    ``parse`` tells whether frames are parsed at all. ``parse_frames`` names
    the frames to parse, by ID ("TPE1") or by description ("Artist"); when it
    is empty every frame is parsed.
    """

    parse: bool = False
    parse_frames: list[str] = field(default_factory=list)


def parse_frame_body(frame_id: str, reader: FrameReader, version: int) -> Framer:
    """Parse a frame body with the parser that belongs to ``frame_id``."""
    if frame_id.startswith("T") and frame_id != "TXXX":
        return parse_text_frame(reader)
    parser = PARSERS.get(frame_id)
    if parser is not None:
        return parser(reader, version)
    return parse_unknown_frame(reader)


def parse_frames(
    stream: BinaryIO,
    frames_size: int,
    version: int,
    parseable_ids: Optional[Iterable[str]] = None,
) -> Iterator[tuple[str, Framer]]:
    """Yield ``(frame_id, frame)`` pairs read from ``stream``.

    ``frames_size`` is the size of the frames area of the tag. Parsing ends at
    padding, at a malformed or missing frame header, or at a truncated frame
    body. If ``parseable_ids`` is given and not empty, only frames with these
    IDs are parsed; parsing ends early once every single-instance frame asked
    for has been found.

    Raises ``BodyOverflowError`` if a frame runs past the frames area.
    """
    wanted = set(parseable_ids) if parseable_ids else set()
    filtering = bool(wanted)
    synch_safe = version == 4
    remaining = frames_size

    while remaining > 0:
        try:
            header = parse_frame_header(stream, synch_safe)
        except (EOFError, BlankFrameError, InvalidSizeFormatError):
            break

        frame_id, body_size = header.frame_id, header.body_size
        remaining -= FRAME_HEADER_SIZE + body_size
        if remaining < 0:
            raise BodyOverflowError()

        body = stream.read(body_size) or b""

        if filtering and frame_id not in wanted:
            continue

        try:
            frame = parse_frame_body(frame_id, FrameReader(body), version)
        except EOFError:
            break

        yield frame_id, frame

        if filtering and not must_frame_be_in_sequence(frame_id):
            wanted.discard(frame_id)
            if not wanted:
                break