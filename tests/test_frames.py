import io

import pytest

from id3tag.framer import Encoding, InvalidLanguageLengthError
from id3tag.frames import (
    CommentFrame,
    PictureFrame,
    PictureType,
    PopularimeterFrame,
    TextFrame,
    UFIDFrame,
    UnknownFrame,
    UnsynchronisedLyricsFrame,
    UserDefinedTextFrame,
    parse_comment_frame,
    parse_picture_frame,
    parse_popularimeter_frame,
    parse_text_frame,
    parse_ufid_frame,
    parse_unknown_frame,
    parse_unsynchronised_lyrics_frame,
    parse_user_defined_text_frame,
)
from id3tag.reader import FrameReader

ALL_ENCODINGS = [Encoding.ISO, Encoding.UTF16, Encoding.UTF16BE, Encoding.UTF8]
HELLO = "Héllö"


def test_uslt_with_utf16_round_trip():
    frame = UnsynchronisedLyricsFrame(
        encoding=Encoding.UTF16,
        language="eng",
        content_descriptor="Content descriptor",
        lyrics="Lyrics",
    )
    parsed = parse_unsynchronised_lyrics_frame(FrameReader(frame.encode()), 4)
    assert parsed.content_descriptor == "Content descriptor"
    assert parsed.lyrics == "Lyrics"


@pytest.mark.parametrize(
    "body, expected",
    [
        (bytes([0x00, 0x48, 0xE9, 0x6C, 0x6C, 0xF6]), HELLO),
        (
            bytes([0x01, 0xFF, 0xFE, 0x48, 0x00, 0xE9, 0x00, 0x6C, 0x00, 0x6C, 0x00, 0xF6, 0x00]),
            HELLO,
        ),
        (bytes([0x01, 0xFF, 0xFE]), ""),
        (bytes([0x02, 0x00, 0x48, 0x00, 0xE9, 0x00, 0x6C, 0x00, 0x6C, 0x00, 0xF6]), HELLO),
    ],
)
def test_parse_text_frame_decodes(body, expected):
    assert parse_text_frame(FrameReader(body)).text == expected


def test_text_frame_encode_pinned():
    assert TextFrame(Encoding.ISO, "Title").encode() == b"\x00Title\x00"
    assert TextFrame(Encoding.UTF16BE, HELLO).encode() == bytes(
        [0x02, 0x00, 0x48, 0x00, 0xE9, 0x00, 0x6C, 0x00, 0x6C, 0x00, 0xF6, 0x00, 0x00]
    )


def test_text_frame_unique_identifier():
    assert TextFrame(Encoding.UTF8, "a").unique_identifier() == "ID"


@pytest.mark.parametrize("encoding", ALL_ENCODINGS)
def test_text_frame_round_trip(encoding):
    frame = TextFrame(encoding=encoding, text=HELLO)
    body = frame.encode()
    assert frame.size() == len(body)
    parsed = parse_text_frame(FrameReader(body))
    assert parsed == frame


def test_parse_text_frame_empty_raises():
    with pytest.raises(EOFError):
        parse_text_frame(FrameReader(b""))


@pytest.mark.parametrize("encoding", ALL_ENCODINGS)
@pytest.mark.parametrize("description", ["", HELLO])
def test_comment_frame_round_trip(encoding, description):
    frame = CommentFrame(encoding=encoding, language="eng", description=description, text=HELLO)
    body = frame.encode()
    assert frame.size() == len(body)
    assert parse_comment_frame(FrameReader(body), 4) == frame


def test_comment_frame_invalid_language():
    frame = CommentFrame(encoding=Encoding.UTF8, language="en", text="The actual text")
    with pytest.raises(InvalidLanguageLengthError, match="must consist"):
        frame.encode()
    with pytest.raises(InvalidLanguageLengthError):
        frame.write_to(io.BytesIO())


def test_comment_frame_unique_identifier():
    assert CommentFrame(language="A", description="B").unique_identifier() == "AB"


@pytest.mark.parametrize("encoding", ALL_ENCODINGS)
def test_uslt_round_trip(encoding):
    frame = UnsynchronisedLyricsFrame(
        encoding=encoding, language="ger", content_descriptor=HELLO, lyrics=HELLO
    )
    body = frame.encode()
    assert frame.size() == len(body)
    assert parse_unsynchronised_lyrics_frame(FrameReader(body), 4) == frame


def test_uslt_invalid_language():
    frame = UnsynchronisedLyricsFrame(encoding=Encoding.UTF8, language="en", lyrics="Lyrics")
    with pytest.raises(InvalidLanguageLengthError):
        frame.encode()


@pytest.mark.parametrize("encoding", ALL_ENCODINGS)
def test_picture_frame_round_trip(encoding):
    frame = PictureFrame(
        encoding=encoding,
        mime_type="image/jpeg",
        picture_type=PictureType.FRONT_COVER,
        description=HELLO,
        picture=bytes(range(256)),
    )
    body = frame.encode()
    assert frame.size() == len(body)
    parsed = parse_picture_frame(FrameReader(body), 4)
    assert parsed == frame
    assert parsed.picture_type == PictureType.FRONT_COVER


def test_picture_frame_unique_identifier():
    assert PictureFrame(description="A", picture_type=0x00).unique_identifier() == "00A"
    assert PictureFrame(description="A", picture_type=0x01).unique_identifier() == "01A"


def test_popularimeter_small_counter():
    frame = PopularimeterFrame(email="user@example.com", rating=1, counter=1)
    expected_length = len(frame.email) + 1 + 1 + 4
    stream = io.BytesIO()
    written = frame.write_to(stream)
    assert written == expected_length
    assert stream.getvalue()[expected_length - 4:] == bytes([0, 0, 0, 1])


def test_popularimeter_round_trip_big_counter():
    frame = PopularimeterFrame(email="user@example.com", rating=128, counter=10000000000000000)
    body = frame.encode()
    assert frame.size() == len(body)
    parsed = parse_popularimeter_frame(FrameReader(body), 4)
    assert parsed == frame
    assert parsed.size() == frame.size()
    assert parsed.unique_identifier() == "user@example.com"


def test_popularimeter_parse_empty_gives_empty_frame():
    assert parse_popularimeter_frame(FrameReader(b""), 4) == PopularimeterFrame()


def test_ufid_round_trip():
    frame = UFIDFrame(owner_identifier="owner", identifier=b"fbd94fb6-2a74-42d0")
    body = frame.encode()
    assert body == b"owner\x00fbd94fb6-2a74-42d0"
    assert frame.size() == len(body)
    assert parse_ufid_frame(FrameReader(body), 4) == frame
    assert frame.unique_identifier() == "owner"


@pytest.mark.parametrize("encoding", ALL_ENCODINGS)
def test_user_defined_text_round_trip(encoding):
    frame = UserDefinedTextFrame(encoding=encoding, description="MusicBrainz Album Id", value=HELLO)
    body = frame.encode()
    assert frame.size() == len(body)
    assert parse_user_defined_text_frame(FrameReader(body), 4) == frame
    assert frame.unique_identifier() == "MusicBrainz Album Id"


def test_unknown_frames_unique_identifiers():
    first = parse_unknown_frame(FrameReader(b""))
    second = parse_unknown_frame(FrameReader(b""))
    assert first.unique_identifier() != second.unique_identifier()
    assert first.body == b""


def test_unknown_frame_round_trip():
    frame = UnknownFrame(body=b"unparsed body")
    stream = io.BytesIO()
    assert frame.write_to(stream) == frame.size() == 13
    assert parse_unknown_frame(FrameReader(stream.getvalue())) == frame