# id3tag

A library for reading and writing ID3v2 tags (versions 2.3 and 2.4) at the
start of audio files such as MP3. It uses only the standard library.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Reading a tag

`open_tag` opens a file and reads its tag header. Frames are parsed only when
`Options(parse=True)` is given; the default `Options()` reads the header and
nothing more.

```python
from id3tag.parser import Options
from id3tag.tag import open_tag

with open_tag("song.mp3", Options(parse=True)) as tag:
    print(tag.artist)
    print(tag.title)
    print(tag.get_text_frame(tag.common_id("BPM")).text)

    for frame in tag.get_frames(tag.common_id("Comments")):
        print(frame.language, frame.description, frame.text)
```

The tag keeps the file open; leaving the `with` block (or calling
`tag.close()`) closes it.

To parse only some frames, list their descriptions or IDs. Parsing stops
early once every requested single-instance frame has been found:

```python
tag = open_tag("song.mp3", Options(parse=True, parse_frames=["Artist", "TIT2"]))
```

If a file has no tag, an empty ID3v2.4 tag is returned.

## Writing a tag

```python
from id3tag.framer import Encoding
from id3tag.frames import CommentFrame, PictureFrame, PictureType
from id3tag.parser import Options
from id3tag.tag import open_tag

with open_tag("song.mp3", Options(parse=True)) as tag:
    tag.artist = "Artist"
    tag.title = "Title"
    tag.add_comment_frame(
        CommentFrame(encoding=Encoding.UTF8, language="eng",
                     description="My opinion", text="Very good song")
    )
    with open("cover.jpg", "rb") as artwork:
        tag.add_attached_picture(
            PictureFrame(encoding=Encoding.UTF8, mime_type="image/jpeg",
                         picture_type=PictureType.FRONT_COVER,
                         description="Front cover", picture=artwork.read())
        )
    tag.save()
```

`save()` writes the new tag followed by the unchanged audio data to a
temporary file named `<file>-id3v2`, keeps the permissions of the original
and then replaces the original with it. A tag without frames leaves only the
audio data. `save()` and `close()` raise `NoFileError` for a tag that was not
opened from a file.

The shorthand properties `title`, `artist`, `album`, `year` and `genre` set
text frames in `tag.default_encoding`, which is UTF-8 for version 4 and
ISO-8859-1 for version 3. `tag.version` can be set to 3 or 4; other values
are ignored.

## Working in memory

```python
import io
from id3tag.parser import Options
from id3tag.tag import new_empty_tag, parse_reader

tag = new_empty_tag()
tag.add_text_frame("TIT2", tag.default_encoding, "Title")
buffer = io.BytesIO()
written = tag.write_to(buffer)
assert written == tag.size()

buffer.seek(0)
parsed = parse_reader(buffer, Options(parse=True))
assert parsed.title == "Title"
```

## Frames

The frame classes live in `id3tag.frames` and `id3tag.chapter`:

- `TextFrame` for text frames (`T***` other than `TXXX`)
- `UserDefinedTextFrame` (`TXXX`)
- `CommentFrame` (`COMM`) and `UnsynchronisedLyricsFrame` (`USLT`); their
  language must be a three-letter code, otherwise writing raises
  `InvalidLanguageLengthError`
- `PictureFrame` (`APIC`) with picture types in `PictureType`
- `PopularimeterFrame` (`POPM`) with an integer play counter
- `UFIDFrame` (`UFID`)
- `ChapterFrame` (`CHAP`) with `timedelta` start and end times and optional
  `TIT2`/`TIT3` subframes; other subframes are ignored
- `UnknownFrame` for any other frame; it holds the raw body and writes it
  back unchanged

Frames that may occur several times (comments, pictures, lyrics and so on)
are kept apart by `unique_identifier()`; adding a frame with an identifier
already present replaces the old one. Every `UnknownFrame` counts as unique.
`tag.common_id(description)` maps descriptions such as `"Artist"` or
`"Attached picture"` to the frame ID of the tag's version.

Text encodings are the members of `id3tag.framer.Encoding`: `ISO`, `UTF16`,
`UTF16BE` and `UTF8`.

## Errors

All errors of the package derive from `id3tag.framer.ID3Error`, among them
`UnsupportedVersionError` for tags older than ID3v2.3, `BodyOverflowError`
for a frame that runs past the tag, and the size errors in `id3tag.size`.
Passing `None` as a stream raises `ValueError`.

## Limitations

- There is no command-line tool; the package is a library only.
- Only ID3v2.3 and ID3v2.4 tags at the start of the data are read; ID3v1
  tags are not handled.
- Tag and frame flags are not interpreted: extended headers,
  unsynchronisation, compression and encryption are not supported, and
  frames are always written with empty flags.