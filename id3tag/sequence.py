"""Ordered collection of frames that may occur several times in a tag."""

from __future__ import annotations

from typing import Iterator

from .framer import Framer


class Sequence:
    """Frames with the same ID, kept apart by their unique identifiers.

    Adding a frame whose unique identifier is already present replaces
    the old frame in place.
    """

    def __init__(self) -> None:
        self._frames: list[Framer] = []

    def add_frame(self, frame: Framer) -> None:
        """Add ``frame``, replacing a frame with the same unique identifier."""
        identifier = frame.unique_identifier()
        for index, existing in enumerate(self._frames):
            if existing.unique_identifier() == identifier:
                self._frames[index] = frame
                return
        self._frames.append(frame)

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Framer]:
        return iter(self._frames)

    def frames(self) -> list[Framer]:
        """Return the frames in the order they were first added."""
        return list(self._frames)