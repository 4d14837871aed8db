import io
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import pytest

from id3tag.framer import (
    BOM,
    Encoding,
    Framer,
    ID3Error,
    decode_text,
    encode_text,
    encoded_size,
    get_encoding,
)

DECODE_CASES = [
    (bytes([0x48, 0xE9, 0x6C, 0x6C, 0xF6]), Encoding.ISO, "Héllö"),
    (
        bytes([0xFF, 0xFE, 0x48, 0x00, 0xE9, 0x00, 0x6C, 0x00, 0x6C, 0x00, 0xF6, 0x00]),
        Encoding.UTF16,
        "Héllö",
    ),
    (bytes([0xFF, 0xFE]), Encoding.UTF16, ""),
    (
        bytes([0x00, 0x48, 0x00, 0xE9, 0x00, 0x6C, 0x00, 0x6C, 0x00, 0xF6]),
        Encoding.UTF16BE,
        "Héllö",
    ),
]

ENCODE_CASES = [
    ("Héllö", Encoding.ISO, bytes([0x48, 0xE9, 0x6C, 0x6C, 0xF6])),
    (
        "Héllö",
        Encoding.UTF16,
        bytes([0xFE, 0xFF, 0x00, 0x48, 0x00, 0xE9, 0x00, 0x6C, 0x00, 0x6C, 0x00, 0xF6, 0x00]),
    ),
    (
        "Héllö",
        Encoding.UTF16BE,
        bytes([0x00, 0x48, 0x00, 0xE9, 0x00, 0x6C, 0x00, 0x6C, 0x00, 0xF6]),
    ),
]


@dataclass
class _Blob(Framer):
    body: bytes

    def size(self):
        return len(self.body)

    def unique_identifier(self):
        return "blob"

    def encode(self):
        return self.body


@pytest.mark.parametrize("data, encoding, expected", DECODE_CASES)
def test_decode_text(data, encoding, expected):
    assert decode_text(data, encoding) == expected


def test_decode_text_in_parallel():
    cases = DECODE_CASES * 5
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda case: decode_text(case[0], case[1]), cases))
    assert results == [case[2] for case in cases]


@pytest.mark.parametrize("text, encoding, expected", ENCODE_CASES)
def test_encode_text(text, encoding, expected):
    assert encode_text(text, encoding) == expected


@pytest.mark.parametrize("text, encoding, expected", ENCODE_CASES)
def test_encoded_size_matches_encoded_bytes(text, encoding, expected):
    assert encoded_size(text, encoding) == len(expected)


def test_encoded_size_utf8_counts_bytes():
    assert encoded_size("Héllö", Encoding.UTF8) == 7


def test_decode_text_strips_termination_bytes():
    assert decode_text(b"\xff\xfeA\x00\x00\x00", Encoding.UTF16) == "A"
    assert decode_text(b"abc\x00", Encoding.ISO) == "abc"
    assert decode_text(b"abc\x00", Encoding.UTF8) == "abc"


@pytest.mark.parametrize("encoding", list(Encoding))
def test_text_round_trip(encoding):
    text = "Héllö wörld"
    assert decode_text(encode_text(text, encoding), encoding) == text


def test_utf16_padded_text_decodes_without_replacement():
    encoded = encode_text("C", Encoding.UTF16)
    assert encoded == b"\xfe\xff\x00C\x00"
    assert decode_text(encoded, Encoding.UTF16) == "C"


def test_bom_only_is_empty_text():
    assert decode_text(BOM, Encoding.UTF16) == ""


def test_iso_cannot_encode_non_latin_text():
    with pytest.raises(ID3Error):
        encode_text("日本", Encoding.ISO)


@pytest.mark.parametrize(
    "key, expected",
    [
        (0, Encoding.ISO),
        (1, Encoding.UTF16),
        (2, Encoding.UTF16BE),
        (3, Encoding.UTF8),
        (42, Encoding.UTF8),
    ],
)
def test_get_encoding(key, expected):
    assert get_encoding(key) is expected


@pytest.mark.parametrize(
    "encoding, termination",
    [
        (Encoding.ISO, b"\x00"),
        (Encoding.UTF16, b"\x00\x00"),
        (Encoding.UTF16BE, b"\x00\x00"),
        (Encoding.UTF8, b"\x00"),
    ],
)
def test_termination_bytes(encoding, termination):
    assert encoding.termination_bytes == termination


def test_framer_write_to_returns_written_count():
    buf = io.BytesIO()
    written = Framer.write_to(_Blob(b"abc"), buf)
    assert written == 3
    assert buf.getvalue() == b"abc"


def test_framer_is_abstract():
    with pytest.raises(TypeError):
        Framer()