"""Reading and writing of ID3v2.3 and ID3v2.4 tags: frames, parsing and saving."""

__version__ = "2.0.0"

__all__ = [
    "chapter",
    "common_ids",
    "framer",
    "frames",
    "header",
    "parser",
    "reader",
    "sequence",
    "size",
    "tag",
]