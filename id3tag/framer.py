"""Frame interface and the text encodings that ID3v2 frames use."""

from __future__ import annotations

import abc
import enum
from typing import BinaryIO

# Byte order mark of little-endian UTF-16 text.
BOM = b"\xff\xfe"

_BOM_BIG_ENDIAN = b"\xfe\xff"
_REPLACEMENT_CHARACTER = "\ufffd"


class ID3Error(Exception):
    """Base class for the errors raised by this package."""


class InvalidLanguageLengthError(ID3Error, ValueError):
    """Raised when a language code is not three letters long."""

    def __init__(
        self,
        message: str = "language code must consist of three letters according to ISO 639-2",
    ) -> None:
        super().__init__(message)


class Encoding(enum.Enum):
    """Text encodings allowed in ID3v2 frames; the value is the encoding byte."""

    ISO = 0
    UTF16 = 1
    UTF16BE = 2
    UTF8 = 3

    @property
    def key(self) -> int:
        """The byte that marks this encoding inside a frame."""
        return self.value

    @property
    def termination_bytes(self) -> bytes:
        """The bytes that end a string written in this encoding."""
        if self in (Encoding.UTF16, Encoding.UTF16BE):
            return b"\x00\x00"
        return b"\x00"

    @property
    def description(self) -> str:
        """A human-readable name of the encoding."""
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.description


_DESCRIPTIONS = {
    Encoding.ISO: "ISO-8859-1",
    Encoding.UTF16: "UTF-16 encoded Unicode with BOM",
    Encoding.UTF16BE: "UTF-16BE encoded Unicode without BOM",
    Encoding.UTF8: "UTF-8 encoded Unicode",
}


def get_encoding(key: int) -> Encoding:
    """Return the encoding marked by ``key``; unknown keys mean UTF-8."""
    try:
        return Encoding(key)
    except ValueError:
        return Encoding.UTF8


def decode_text(data: bytes, encoding: Encoding) -> str:
    """Decode ``data`` written in ``encoding`` to a string."""
    data = bytes(data)
    termination = encoding.termination_bytes
    if data.endswith(termination):
        data = data[: -len(termination)]

    if encoding is Encoding.UTF8:
        return data.decode("utf-8", errors="replace")
    if encoding is Encoding.ISO:
        return data.decode("latin-1")
    if encoding is Encoding.UTF16BE:
        return data.decode("utf-16-be", errors="replace")

    if data == BOM:
        return ""
    if data.startswith(BOM):
        codec, data = "utf-16-le", data[len(BOM):]
    elif data.startswith(_BOM_BIG_ENDIAN):
        codec, data = "utf-16-be", data[len(_BOM_BIG_ENDIAN):]
    else:
        codec = "utf-16-be"
    # A padding byte after the text leaves a dangling half code unit.
    return data.decode(codec, errors="replace").replace(_REPLACEMENT_CHARACTER, "")


def encode_text(text: str, encoding: Encoding) -> bytes:
    """Encode ``text`` in ``encoding``, without termination bytes."""
    try:
        if encoding is Encoding.UTF8:
            return text.encode("utf-8")
        if encoding is Encoding.ISO:
            return text.encode("latin-1")
        if encoding is Encoding.UTF16BE:
            return text.encode("utf-16-be")
        encoded = _BOM_BIG_ENDIAN + text.encode("utf-16-be")
    except UnicodeEncodeError as exc:
        raise ID3Error(f"cannot encode {text!r} as {encoding}: {exc.reason}") from exc
    if not encoded.endswith(b"\x00"):
        encoded += b"\x00"
    return encoded


def encoded_size(text: str, encoding: Encoding) -> int:
    """Return the number of bytes ``text`` takes in ``encoding``."""
    if encoding is Encoding.UTF8:
        return len(text.encode("utf-8"))
    return len(encode_text(text, encoding))


class Framer(abc.ABC):
    """Interface shared by all frames of a tag."""

    @abc.abstractmethod
    def size(self) -> int:
        """Return the size of the frame body in bytes."""

    @abc.abstractmethod
    def unique_identifier(self) -> str:
        """Return the string that tells this frame apart from others with the same ID."""

    @abc.abstractmethod
    def encode(self) -> bytes:
        """Return the frame body as bytes."""

    def write_to(self, stream: BinaryIO) -> int:
        """Write the frame body to ``stream`` and return the number of bytes written."""
        body = self.encode()
        stream.write(body)
        return len(body)