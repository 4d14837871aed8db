"""The ID3v2 tag: its frames, reading it from a stream and saving it to a file."""

from __future__ import annotations

import io
import os
import shutil
from typing import BinaryIO, Iterator, Optional

from .chapter import ChapterFrame
from .common_ids import common_id, must_frame_be_in_sequence
from .framer import Encoding, Framer, ID3Error
from .frames import (
    CommentFrame,
    PictureFrame,
    TextFrame,
    UFIDFrame,
    UnsynchronisedLyricsFrame,
    UserDefinedTextFrame,
)
from .header import (
    FRAME_HEADER_SIZE,
    TAG_HEADER_SIZE,
    NoTagError,
    encode_frame,
    encode_tag_header,
    parse_header,
)
from .parser import Options, UnsupportedVersionError, parse_frames
from .sequence import Sequence

_COPY_BUFFER_SIZE = 128 * 1024
_FILE_TYPES = (io.BufferedReader, io.BufferedRandom, io.FileIO)


class NoFileError(ID3Error):
    """Raised when a file operation is asked of a tag not opened from a file."""

    def __init__(self, message: str = "tag was not initialized with file") -> None:
        super().__init__(message)


class Tag:
    """An ID3v2 tag with its frames.

    Frames that may occur only once are kept by ID; the others are kept in
    sequences, told apart by their unique identifiers.
    """

    def __init__(self) -> None:
        self._frames: dict[str, Framer] = {}
        self._sequences: dict[str, Sequence] = {}
        self._reader: Optional[BinaryIO] = None
        self._original_size = 0
        self._version = 4
        self.default_encoding = Encoding.UTF8
        self._init(None, 0, 4)

    def __enter__(self) -> "Tag":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._has_file():
            self.close()

    # Setup and parsing.

    def _init(self, stream: Optional[BinaryIO], original_size: int, version: int) -> None:
        self.delete_all_frames()
        self._reader = stream
        self._original_size = original_size
        self._version = version
        self._set_default_encoding_for(version)

    def _set_default_encoding_for(self, version: int) -> None:
        self.default_encoding = Encoding.UTF8 if version == 4 else Encoding.ISO

    def _parse(self, stream: Optional[BinaryIO], options: Optional[Options]) -> None:
        if stream is None:
            raise ValueError("stream is None")
        options = options if options is not None else Options()

        try:
            header = parse_header(stream)
        except (NoTagError, EOFError):
            self._init(stream, 0, 4)
            return
        if header.version < 3:
            raise UnsupportedVersionError()

        self._init(stream, TAG_HEADER_SIZE + header.frames_size, header.version)
        if not options.parse:
            return

        wanted = {self.common_id(description) for description in options.parse_frames}
        for frame_id, frame in parse_frames(stream, header.frames_size, self._version, wanted):
            self.add_frame(frame_id, frame)

    def _has_file(self) -> bool:
        return isinstance(self._reader, _FILE_TYPES)

    # Frames.

    def add_frame(self, frame_id: str, frame: Optional[Framer]) -> None:
        """Add ``frame`` under ``frame_id``; a blank ID or a missing frame is ignored."""
        if not frame_id or frame is None:
            return
        if must_frame_be_in_sequence(frame_id):
            self._sequences.setdefault(frame_id, Sequence()).add_frame(frame)
        else:
            self._frames[frame_id] = frame

    def add_attached_picture(self, frame: PictureFrame) -> None:
        """Add an attached picture frame."""
        self.add_frame(self.common_id("Attached picture"), frame)

    def add_chapter_frame(self, frame: ChapterFrame) -> None:
        """Add a chapter frame."""
        self.add_frame(self.common_id("Chapters"), frame)

    def add_comment_frame(self, frame: CommentFrame) -> None:
        """Add a comment frame."""
        self.add_frame(self.common_id("Comments"), frame)

    def add_text_frame(self, frame_id: str, encoding: Encoding, text: str) -> None:
        """Add a text frame with ``text`` in ``encoding``."""
        self.add_frame(frame_id, TextFrame(encoding=encoding, text=text))

    def add_unsynchronised_lyrics_frame(self, frame: UnsynchronisedLyricsFrame) -> None:
        """Add an unsynchronised lyrics/text frame."""
        self.add_frame(self.common_id("Unsynchronised lyrics/text transcription"), frame)

    def add_user_defined_text_frame(self, frame: UserDefinedTextFrame) -> None:
        """Add a user defined text frame (TXXX)."""
        self.add_frame(self.common_id("User defined text information frame"), frame)

    def add_ufid_frame(self, frame: UFIDFrame) -> None:
        """Add a unique file identifier frame (UFID)."""
        self.add_frame(self.common_id("Unique file identifier"), frame)

    def common_id(self, description: str) -> str:
        """Return the frame ID for ``description`` in the version of this tag."""
        return common_id(description, self._version)

    def _iter_frames(self) -> Iterator[tuple[str, Framer]]:
        yield from self._frames.items()
        for frame_id, sequence in self._sequences.items():
            for frame in sequence:
                yield frame_id, frame

    def all_frames(self) -> dict[str, list[Framer]]:
        """Return all frames of the tag, as lists keyed by frame ID."""
        frames = {frame_id: [frame] for frame_id, frame in self._frames.items()}
        frames.update(
            (frame_id, sequence.frames()) for frame_id, sequence in self._sequences.items()
        )
        return frames

    def delete_all_frames(self) -> None:
        """Remove every frame from the tag."""
        self._frames = {}
        self._sequences = {}

    def delete_frames(self, frame_id: str) -> None:
        """Remove every frame with ``frame_id``."""
        self._frames.pop(frame_id, None)
        self._sequences.pop(frame_id, None)

    def reset(self, stream: BinaryIO, options: Optional[Options] = None) -> None:
        """Drop all frames and parse the tag in ``stream`` according to ``options``."""
        self.delete_all_frames()
        self._parse(stream, options)

    def get_frames(self, frame_id: str) -> list[Framer]:
        """Return the frames with ``frame_id``; empty if there are none."""
        if frame_id in self._frames:
            return [self._frames[frame_id]]
        sequence = self._sequences.get(frame_id)
        return sequence.frames() if sequence is not None else []

    def get_last_frame(self, frame_id: str) -> Optional[Framer]:
        """Return the last frame with ``frame_id``, or None."""
        frames = self.get_frames(frame_id)
        return frames[-1] if frames else None

    def get_text_frame(self, frame_id: str) -> TextFrame:
        """Return the text frame with ``frame_id``; an empty one if it is missing."""
        frame = self.get_last_frame(frame_id)
        if frame is None:
            return TextFrame()
        if not isinstance(frame, TextFrame):
            raise TypeError(f"frame {frame_id} is not a text frame")
        return frame

    def count(self) -> int:
        """Return the number of frames in the tag."""
        return len(self._frames) + sum(len(s) for s in self._sequences.values())

    def has_frames(self) -> bool:
        """Return whether the tag has at least one frame."""
        return bool(self._frames) or bool(self._sequences)

    def size(self) -> int:
        """Return the size of the whole tag in bytes; 0 if it has no frames."""
        if not self.has_frames():
            return 0
        return TAG_HEADER_SIZE + sum(
            FRAME_HEADER_SIZE + frame.size() for _, frame in self._iter_frames()
        )

    # Version and shorthand text frames.

    @property
    def version(self) -> int:
        """The ID3v2 major version; only 3 and 4 can be set."""
        return self._version

    @version.setter
    def version(self, version: int) -> None:
        if version < 3 or version > 4:
            return
        self._version = version
        self._set_default_encoding_for(version)

    def _get_text(self, description: str) -> str:
        return self.get_text_frame(self.common_id(description)).text

    def _set_text(self, description: str, text: str) -> None:
        self.add_text_frame(self.common_id(description), self.default_encoding, text)

    @property
    def title(self) -> str:
        return self._get_text("Title")

    @title.setter
    def title(self, text: str) -> None:
        self._set_text("Title", text)

    @property
    def artist(self) -> str:
        return self._get_text("Artist")

    @artist.setter
    def artist(self, text: str) -> None:
        self._set_text("Artist", text)

    @property
    def album(self) -> str:
        return self._get_text("Album/Movie/Show title")

    @album.setter
    def album(self, text: str) -> None:
        self._set_text("Album/Movie/Show title", text)

    @property
    def year(self) -> str:
        return self._get_text("Year")

    @year.setter
    def year(self, text: str) -> None:
        self._set_text("Year", text)

    @property
    def genre(self) -> str:
        return self._get_text("Content type")

    @genre.setter
    def genre(self, text: str) -> None:
        self._set_text("Content type", text)

    # Writing.

    def write_to(self, stream: BinaryIO) -> int:
        """Write the tag to ``stream`` if it has frames; return the bytes written."""
        if stream is None:
            raise ValueError("stream is None")
        frames_size = self.size() - TAG_HEADER_SIZE
        if frames_size <= 0:
            return 0
        synch_safe = self._version == 4
        data = encode_tag_header(frames_size, self._version) + b"".join(
            encode_frame(frame_id, frame, synch_safe) for frame_id, frame in self._iter_frames()
        )
        stream.write(data)
        return len(data)

    def save(self) -> None:
        """Rewrite the file the tag was opened from with the current tag.

        A tag without frames leaves only the audio part in the file.
        """
        if not self._has_file():
            raise NoFileError()
        original = self._reader
        name = original.name
        mode = os.stat(name).st_mode
        temp_name = f"{name}-id3v2"

        fd = os.open(temp_name, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode & 0o7777)
        try:
            with os.fdopen(fd, "wb") as new_file:
                tag_size = self.write_to(new_file)
                original.seek(self._original_size)
                shutil.copyfileobj(original, new_file, _COPY_BUFFER_SIZE)
            os.chmod(temp_name, mode & 0o7777)
            original.close()
            os.replace(temp_name, name)
        except BaseException:
            if os.path.exists(temp_name):
                os.remove(temp_name)
            raise

        self._reader = open(name, "rb")
        self._original_size = tag_size

    def close(self) -> None:
        """Close the file the tag was opened from."""
        if not self._has_file():
            raise NoFileError()
        self._reader.close()


def new_empty_tag() -> Tag:
    """Return an empty ID3v2.4 tag with no frames and no stream."""
    return Tag()


def parse_reader(stream: BinaryIO, options: Optional[Options] = None) -> Tag:
    """Parse the tag in ``stream``; an empty ID3v2.4 tag if there is none."""
    tag = new_empty_tag()
    tag._parse(stream, options)
    return tag


def open_tag(name: str, options: Optional[Options] = None) -> Tag:
    """Open the file ``name`` and parse its tag; the tag keeps the file open."""
    stream = open(name, "rb")
    try:
        return parse_reader(stream, options)
    except BaseException:
        stream.close()
        raise