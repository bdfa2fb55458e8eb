from __future__ import annotations

from collections.abc import Callable, Mapping

import httpx

from platform_banner import _test_hooks
from platform_banner.config import (
    DEFAULT_LASTFM_ENDPOINT,
    DEFAULT_PLACEHOLDER_SENTINEL,
    BannerSettings,
)
from platform_banner.error_codes import BannerErrorCode
from platform_banner.errors import AppError
from platform_banner.json_utils import JSONValue
from platform_banner.models import TrackRecord
from platform_banner.services.lastfm import LastFmProto

# =============================================================================
# Fake Service Implementations
# =============================================================================


class FakeLastFm(LastFmProto):
    """In-memory Last.fm fake returning a fixed track, or failing when given None."""

    def __init__(self, track: TrackRecord | None) -> None:
        self._track = track
        self.calls = 0

    async def latest_track(self) -> TrackRecord:
        self.calls += 1
        if self._track is None:
            raise AppError(code=BannerErrorCode.TRACK_UNAVAILABLE, message="fake lastfm outage")
        return self._track


# =============================================================================
# Factory Helpers for Tests
# =============================================================================


def make_track(
    *,
    image_url: str = "https://lastfm.freetls.fastly.net/i/u/300x300/cover.png",
    title: str = "Song",
    artist: str = "Artist",
    album: str = "Album",
    is_playing: bool = True,
    source_url: str = "https://www.last.fm/music/Artist/_/Song",
) -> TrackRecord:
    """Create a TrackRecord with sensible defaults."""
    return {
        "image_url": image_url,
        "title": title,
        "artist": artist,
        "album": album,
        "is_playing": is_playing,
        "source_url": source_url,
    }


def make_latest_song_payload(
    *,
    title: str = "Song",
    artist: str = "Artist",
    album: str = "Album",
    cover: str = "https://lastfm.freetls.fastly.net/i/u/300x300/cover.png",
    now_playing: bool = True,
) -> dict[str, JSONValue]:
    """Build a last-played proxy response body."""
    track: dict[str, JSONValue] = {
        "name": title,
        "artist": {"#text": artist},
        "album": {"#text": album},
        "image": [
            {"#text": "https://example.invalid/s.png", "size": "small"},
            {"#text": "https://example.invalid/m.png", "size": "medium"},
            {"#text": "https://example.invalid/l.png", "size": "large"},
            {"#text": cover, "size": "extralarge"},
        ],
        "url": f"https://www.last.fm/music/{artist}/_/{title}",
    }
    if now_playing:
        track["@attr"] = {"nowplaying": "true"}
    return {"track": track}


def make_route_transport(
    routes: Mapping[str, tuple[int, bytes]],
) -> httpx.MockTransport:
    """Transport answering ``(status, body)`` by exact URL; anything else gets a 404."""

    def _handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(str(request.url))
        if route is None:
            return httpx.Response(404, content=b"not found")
        status, body = route
        return httpx.Response(status, content=body)

    return httpx.MockTransport(_handler)


def make_raising_transport(exc: Exception) -> httpx.MockTransport:
    """Transport raising ``exc`` for every request."""

    def _handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return httpx.MockTransport(_handler)


def make_fake_read_bytes(files: Mapping[str, bytes]) -> Callable[[str], bytes]:
    """read_bytes hook serving an in-memory file table."""

    def _hook(path: str) -> bytes:
        if path not in files:
            raise FileNotFoundError(path)
        return files[path]

    return _hook


def make_fake_env(values: Mapping[str, str]) -> Callable[[str], str | None]:
    def _hook(key: str) -> str | None:
        return values.get(key)

    return _hook


def make_settings(**overrides: str) -> BannerSettings:
    """Settings pointing at local test paths; string fields can be overridden."""
    settings: BannerSettings = {
        "lastfm_user": "listener",
        "lastfm_endpoint": DEFAULT_LASTFM_ENDPOINT,
        "template_path": "template.html",
        "banner_path": "banner.svg",
        "output_path": "profile.svg",
        "width": 850,
        "height": 510,
        "placeholder_sentinel": DEFAULT_PLACEHOLDER_SENTINEL,
        "placeholder_path": "placeholder.webp",
        "play_icon_path": "now-playing.gif",
        "pause_icon_path": "last-played.svg",
        "http_timeout_seconds": 5.0,
        "log_level": "INFO",
        "log_format": "text",
    }
    for key in (
        "lastfm_user",
        "template_path",
        "banner_path",
        "output_path",
        "placeholder_path",
        "play_icon_path",
        "pause_icon_path",
    ):
        if key in overrides:
            settings[key] = overrides[key]
    return settings


def reset_hooks() -> None:
    """Reset all hooks to production defaults. Call in test teardown."""
    _test_hooks.reset()


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "FakeLastFm",
    "make_fake_env",
    "make_fake_read_bytes",
    "make_latest_song_payload",
    "make_raising_transport",
    "make_route_transport",
    "make_settings",
    "make_track",
    "reset_hooks",
]
