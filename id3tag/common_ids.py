"""Frame IDs of ID3v2.3 and ID3v2.4 keyed by their descriptions."""

from __future__ import annotations

from typing import Callable

from .chapter import parse_chapter_frame
from .framer import Framer
from .frames import (
    parse_comment_frame,
    parse_picture_frame,
    parse_popularimeter_frame,
    parse_ufid_frame,
    parse_unsynchronised_lyrics_frame,
    parse_user_defined_text_frame,
)
from .reader import FrameReader

# Frames whose ID is the same in both versions, with every description
# that names them.
_SHARED_FRAMES: dict[str, tuple[str, ...]] = {
    "APIC": ("Attached picture",),
    "CHAP": ("Chapters",),
    "COMM": ("Comments",),
    "POPM": ("Popularimeter",),
    "TALB": ("Album/Movie/Show title",),
    "TBPM": ("BPM",),
    "TCOM": ("Composer",),
    "TCON": ("Content type", "Genre"),
    "TCOP": ("Copyright message",),
    "TDLY": ("Playlist delay",),
    "TENC": ("Encoded by",),
    "TEXT": ("Lyricist/Text writer",),
    "TFLT": ("File type",),
    "TIT1": ("Content group description",),
    "TIT2": ("Title/Songname/Content description", "Title"),
    "TIT3": ("Subtitle/Description refinement",),
    "TKEY": ("Initial key",),
    "TLAN": ("Language",),
    "TLEN": ("Length",),
    "TMED": ("Media type",),
    "TOAL": ("Original album/movie/show title",),
    "TOFN": ("Original filename",),
    "TOLY": ("Original lyricist/text writer",),
    "TOPE": ("Original artist/performer",),
    "TOWN": ("File owner/licensee",),
    "TPE1": ("Lead artist/Lead performer/Soloist/Performing group", "Artist"),
    "TPE2": ("Band/Orchestra/Accompaniment",),
    "TPE3": ("Conductor/performer refinement",),
    "TPE4": ("Interpreted, remixed, or otherwise modified by",),
    "TPOS": ("Part of a set",),
    "TPUB": ("Publisher",),
    "TRCK": ("Track number/Position in set",),
    "TRSN": ("Internet radio station name",),
    "TRSO": ("Internet radio station owner",),
    "TSRC": ("ISRC",),
    "TSSE": ("Software/Hardware and settings used for encoding",),
    "TXXX": ("User defined text information frame",),
    "UFID": ("Unique file identifier",),
    "USLT": ("Unsynchronised lyrics/text transcription",),
}

_V23_ONLY_FRAMES: dict[str, tuple[str, ...]] = {
    "TDAT": ("Date",),
    "TIME": ("Time",),
    "TORY": ("Original release year",),
    "TRDA": ("Recording dates",),
    "TSIZ": ("Size",),
    "TYER": ("Year",),
}

# ID3v2.4 frames, including where the deprecated ID3v2.3 ones went.
# "Size" has no successor and maps to an empty ID.
_V24_ONLY_FRAMES: dict[str, tuple[str, ...]] = {
    "": ("Size",),
    "TDEN": ("Encoding time",),
    "TDOR": ("Original release time", "Original release year"),
    "TDRC": ("Recording time", "Date", "Time", "Recording dates", "Year"),
    "TDRL": ("Release time",),
    "TDTG": ("Tagging time",),
    "TIPL": ("Involved people list",),
    "TMCL": ("Musician credits list",),
    "TMOO": ("Mood",),
    "TPRO": ("Produced notice",),
    "TSOA": ("Album sort order",),
    "TSOP": ("Performer sort order",),
    "TSOT": ("Title sort order",),
    "TSST": ("Set subtitle",),
}


def _by_description(*tables: dict[str, tuple[str, ...]]) -> dict[str, str]:
    return {
        description: frame_id
        for table in tables
        for frame_id, descriptions in table.items()
        for description in descriptions
    }


V23_COMMON_IDS: dict[str, str] = _by_description(_SHARED_FRAMES, _V23_ONLY_FRAMES)
V24_COMMON_IDS: dict[str, str] = _by_description(_SHARED_FRAMES, _V24_ONLY_FRAMES)

# Parsers of frame bodies by frame ID. Text frames other than TXXX have no
# entry here and are handled separately.
PARSERS: dict[str, Callable[[FrameReader, int], Framer]] = {
    "APIC": parse_picture_frame,
    "CHAP": parse_chapter_frame,
    "COMM": parse_comment_frame,
    "POPM": parse_popularimeter_frame,
    "TXXX": parse_user_defined_text_frame,
    "UFID": parse_ufid_frame,
    "USLT": parse_unsynchronised_lyrics_frame,
}

_SINGLE_INSTANCE_IDS = frozenset({"IPLS", "RVAD"})


def common_id(description: str, version: int) -> str:
    """Return the frame ID for ``description`` in ID3v2.``version``.

    Version 3 uses the ID3v2.3 table, every other version the ID3v2.4 one.
    A description with no known ID is returned unchanged.
    """
    ids = V23_COMMON_IDS if version == 3 else V24_COMMON_IDS
    return ids.get(description, description)


def must_frame_be_in_sequence(frame_id: str) -> bool:
    """Return whether frames with ``frame_id`` may occur several times in a tag."""
    if frame_id != "TXXX" and frame_id.startswith("T"):
        return False
    return frame_id not in _SINGLE_INSTANCE_IDS