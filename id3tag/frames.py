"""The frames of an ID3v2 tag and the parsers of their bodies."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field

from .framer import (
    Encoding,
    Framer,
    InvalidLanguageLengthError,
    decode_text,
    encode_text,
    encoded_size,
    get_encoding,
)
from .reader import FrameReader

_LANGUAGE_LENGTH = 3
_MIN_COUNTER_LENGTH = 4


class PictureType(enum.IntEnum):
    """Picture types of an attached picture frame."""

    OTHER = 0
    FILE_ICON = 1
    OTHER_FILE_ICON = 2
    FRONT_COVER = 3
    BACK_COVER = 4
    LEAFLET_PAGE = 5
    MEDIA = 6
    LEAD_ARTIST_SOLOIST = 7
    ARTIST_PERFORMER = 8
    CONDUCTOR = 9
    BAND_ORCHESTRA = 10
    COMPOSER = 11
    LYRICIST_TEXT_WRITER = 12
    RECORDING_LOCATION = 13
    DURING_RECORDING = 14
    DURING_PERFORMANCE = 15
    MOVIE_SCREEN_CAPTURE = 16
    BRIGHT_COLOURED_FISH = 17
    ILLUSTRATION = 18
    BAND_ARTIST_LOGOTYPE = 19
    PUBLISHER_STUDIO_LOGOTYPE = 20


def _raw(text: str) -> bytes:
    return text.encode("utf-8")


def _str(data: bytes) -> str:
    return bytes(data).decode("utf-8", errors="replace")


def _check_language(language: str) -> bytes:
    raw = _raw(language)
    if len(raw) != _LANGUAGE_LENGTH:
        raise InvalidLanguageLengthError()
    return raw


@dataclass
class TextFrame(Framer):
    """A text frame (all T*** frames except TXXX)."""

    encoding: Encoding = Encoding.UTF8
    text: str = ""

    def size(self) -> int:
        return 1 + encoded_size(self.text, self.encoding) + len(self.encoding.termination_bytes)

    def unique_identifier(self) -> str:
        return "ID"

    def encode(self) -> bytes:
        return (
            bytes([self.encoding.key])
            + encode_text(self.text, self.encoding)
            + self.encoding.termination_bytes
        )


@dataclass
class CommentFrame(Framer):
    """A comment frame (COMM); the language is an ISO 639-2 code."""

    encoding: Encoding = Encoding.UTF8
    language: str = ""
    description: str = ""
    text: str = ""

    def size(self) -> int:
        return (
            1
            + len(_raw(self.language))
            + encoded_size(self.description, self.encoding)
            + len(self.encoding.termination_bytes)
            + encoded_size(self.text, self.encoding)
        )

    def unique_identifier(self) -> str:
        return self.language + self.description

    def encode(self) -> bytes:
        language = _check_language(self.language)
        return (
            bytes([self.encoding.key])
            + language
            + encode_text(self.description, self.encoding)
            + self.encoding.termination_bytes
            + encode_text(self.text, self.encoding)
        )


@dataclass
class PictureFrame(Framer):
    """An attached picture frame (APIC)."""

    encoding: Encoding = Encoding.UTF8
    mime_type: str = ""
    picture_type: int = PictureType.OTHER
    description: str = ""
    picture: bytes = b""

    def size(self) -> int:
        return (
            1
            + len(_raw(self.mime_type))
            + 1
            + 1
            + encoded_size(self.description, self.encoding)
            + len(self.encoding.termination_bytes)
            + len(self.picture)
        )

    def unique_identifier(self) -> str:
        return f"{int(self.picture_type):02X}{self.description}"

    def encode(self) -> bytes:
        return (
            bytes([self.encoding.key])
            + _raw(self.mime_type)
            + b"\x00"
            + bytes([int(self.picture_type)])
            + encode_text(self.description, self.encoding)
            + self.encoding.termination_bytes
            + bytes(self.picture)
        )


@dataclass
class PopularimeterFrame(Framer):
    """A popularimeter frame (POPM).

    The rating runs from 1 (worst) to 255 (best), 0 meaning unknown; the
    counter is how often the file was played by the owner of the e-mail.
    """

    email: str = ""
    rating: int = 0
    counter: int = 0

    def counter_bytes(self) -> bytes:
        """Return the counter as big-endian bytes, at least four of them."""
        magnitude = abs(self.counter)
        length = max(_MIN_COUNTER_LENGTH, (magnitude.bit_length() + 7) // 8)
        return magnitude.to_bytes(length, "big")

    def size(self) -> int:
        return len(_raw(self.email)) + 1 + 1 + len(self.counter_bytes())

    def unique_identifier(self) -> str:
        return self.email

    def encode(self) -> bytes:
        return _raw(self.email) + b"\x00" + bytes([self.rating]) + self.counter_bytes()


@dataclass
class UFIDFrame(Framer):
    """A unique file identifier frame (UFID)."""

    owner_identifier: str = ""
    identifier: bytes = b""

    def size(self) -> int:
        return (
            encoded_size(self.owner_identifier, Encoding.ISO)
            + len(Encoding.ISO.termination_bytes)
            + len(self.identifier)
        )

    def unique_identifier(self) -> str:
        return self.owner_identifier

    def encode(self) -> bytes:
        return (
            encode_text(self.owner_identifier, Encoding.ISO)
            + Encoding.ISO.termination_bytes
            + bytes(self.identifier)
        )


@dataclass
class UnknownFrame(Framer):
    """A frame whose body is kept unparsed."""

    body: bytes = b""

    def size(self) -> int:
        return len(self.body)

    def unique_identifier(self) -> str:
        # The real identity of such a frame is unknown, so every one counts as unique.
        return uuid.uuid4().hex

    def encode(self) -> bytes:
        return bytes(self.body)


@dataclass
class UnsynchronisedLyricsFrame(Framer):
    """An unsynchronised lyrics/text frame (USLT); the language is an ISO 639-2 code."""

    encoding: Encoding = Encoding.UTF8
    language: str = ""
    content_descriptor: str = ""
    lyrics: str = ""

    def size(self) -> int:
        return (
            1
            + len(_raw(self.language))
            + encoded_size(self.content_descriptor, self.encoding)
            + len(self.encoding.termination_bytes)
            + encoded_size(self.lyrics, self.encoding)
        )

    def unique_identifier(self) -> str:
        return self.language + self.content_descriptor

    def encode(self) -> bytes:
        language = _check_language(self.language)
        return (
            bytes([self.encoding.key])
            + language
            + encode_text(self.content_descriptor, self.encoding)
            + self.encoding.termination_bytes
            + encode_text(self.lyrics, self.encoding)
        )


@dataclass
class UserDefinedTextFrame(Framer):
    """A user defined text frame (TXXX); descriptions must be unique in a tag."""

    encoding: Encoding = Encoding.UTF8
    description: str = ""
    value: str = ""

    def size(self) -> int:
        return (
            1
            + encoded_size(self.description, self.encoding)
            + len(self.encoding.termination_bytes)
            + encoded_size(self.value, self.encoding)
        )

    def unique_identifier(self) -> str:
        return self.description

    def encode(self) -> bytes:
        return (
            bytes([self.encoding.key])
            + encode_text(self.description, self.encoding)
            + self.encoding.termination_bytes
            + encode_text(self.value, self.encoding)
        )


def parse_text_frame(reader: FrameReader) -> TextFrame:
    """Parse the body of a text frame."""
    encoding = get_encoding(reader.read_byte())
    return TextFrame(encoding=encoding, text=decode_text(reader.read_all(), encoding))


def parse_comment_frame(reader: FrameReader, version: int) -> CommentFrame:
    """Parse the body of a COMM frame."""
    encoding = get_encoding(reader.read_byte())
    language = reader.next(_LANGUAGE_LENGTH)
    description = reader.read_text(encoding)
    return CommentFrame(
        encoding=encoding,
        language=_str(language),
        description=decode_text(description, encoding),
        text=decode_text(reader.read_all(), encoding),
    )


def parse_picture_frame(reader: FrameReader, version: int) -> PictureFrame:
    """Parse the body of an APIC frame."""
    encoding = get_encoding(reader.read_byte())
    mime_type = reader.read_text(Encoding.ISO)
    picture_type = reader.read_byte()
    description = reader.read_text(encoding)
    return PictureFrame(
        encoding=encoding,
        mime_type=_str(mime_type),
        picture_type=picture_type,
        description=decode_text(description, encoding),
        picture=reader.read_all(),
    )


def parse_popularimeter_frame(reader: FrameReader, version: int) -> PopularimeterFrame:
    """Parse the body of a POPM frame; missing fields are left empty."""
    frame = PopularimeterFrame()
    try:
        frame.email = _str(reader.read_text(Encoding.ISO))
        frame.rating = reader.read_byte()
    except EOFError:
        return frame
    frame.counter = int.from_bytes(reader.read_all(), "big")
    return frame


def parse_ufid_frame(reader: FrameReader, version: int) -> UFIDFrame:
    """Parse the body of a UFID frame."""
    owner = reader.read_text(Encoding.ISO)
    return UFIDFrame(
        owner_identifier=decode_text(owner, Encoding.ISO),
        identifier=reader.read_all(),
    )


def parse_unknown_frame(reader: FrameReader) -> UnknownFrame:
    """Keep the whole body of a frame that has no parser."""
    return UnknownFrame(body=reader.read_all())


def parse_unsynchronised_lyrics_frame(
    reader: FrameReader, version: int
) -> UnsynchronisedLyricsFrame:
    """Parse the body of a USLT frame."""
    encoding = get_encoding(reader.read_byte())
    language = reader.next(_LANGUAGE_LENGTH)
    content_descriptor = reader.read_text(encoding)
    return UnsynchronisedLyricsFrame(
        encoding=encoding,
        language=_str(language),
        content_descriptor=decode_text(content_descriptor, encoding),
        lyrics=decode_text(reader.read_all(), encoding),
    )


def parse_user_defined_text_frame(reader: FrameReader, version: int) -> UserDefinedTextFrame:
    """Parse the body of a TXXX frame."""
    encoding = get_encoding(reader.read_byte())
    description = reader.read_text(encoding)
    return UserDefinedTextFrame(
        encoding=encoding,
        description=decode_text(description, encoding),
        value=decode_text(reader.read_all(), encoding),
    )