from __future__ import annotations

from typing import TypedDict


class TrackRecord(TypedDict):
    """Current or most recently played track.

    Empty strings stand for absent values; only ``is_playing`` is always meaningful.
    """

    image_url: str
    title: str
    artist: str
    album: str
    is_playing: bool
    source_url: str


def with_image_url(track: TrackRecord, image_url: str) -> TrackRecord:
    """Return a copy of ``track`` pointing at a different cover image."""
    out: TrackRecord = {**track, "image_url": image_url}
    return out


__all__ = ["TrackRecord", "with_image_url"]
