from __future__ import annotations

from platform_banner.json_utils import JSONValue
from platform_banner.models import TrackRecord

# Last.fm lists images small, medium, large, extralarge.
_COVER_INDEX = 3


class DecoderError(ValueError):
    """Raised when a service JSON payload fails validation."""


def _text_field(obj: JSONValue) -> str:
    """Read a Last.fm ``{"#text": ...}`` wrapper, tolerating absent values."""
    if isinstance(obj, str):
        return obj
    if not isinstance(obj, dict):
        return ""
    value = obj.get("#text")
    return value if isinstance(value, str) else ""


def _cover_url(images: JSONValue) -> str:
    if not isinstance(images, list) or len(images) <= _COVER_INDEX:
        return ""
    return _text_field(images[_COVER_INDEX])


def _is_now_playing(attr: JSONValue) -> bool:
    if not isinstance(attr, dict):
        return False
    return attr.get("nowplaying") == "true"


def decode_latest_song(raw: JSONValue) -> TrackRecord:
    """Decode the last-played proxy payload into a TrackRecord.

    Expected minimal shape (keys used):
    {
        "track": {
            "name": "Track Title",
            "artist": {"#text": "Artist Name"},
            "album": {"#text": "Album Name"},
            "image": [{"#text": "s"}, {"#text": "m"}, {"#text": "l"}, {"#text": "xl"}],
            "url": "https://www.last.fm/music/...",
            "@attr": {"nowplaying": "true"}
        }
    }

    Only the envelope is mandatory; missing track fields decode to "".
    """
    if not isinstance(raw, dict):
        raise DecoderError("payload must be a dict")
    track = raw.get("track")
    if not isinstance(track, dict):
        raise DecoderError("track must be a dict")

    name_val = track.get("name")
    url_val = track.get("url")
    record: TrackRecord = {
        "image_url": _cover_url(track.get("image")),
        "title": name_val if isinstance(name_val, str) else "",
        "artist": _text_field(track.get("artist")),
        "album": _text_field(track.get("album")),
        "is_playing": _is_now_playing(track.get("@attr")),
        "source_url": url_val if isinstance(url_val, str) else "",
    }
    return record


__all__ = ["DecoderError", "decode_latest_song"]
