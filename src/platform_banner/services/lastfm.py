from __future__ import annotations

import time
import urllib.parse
from typing import Protocol, runtime_checkable

import httpx

from platform_banner.error_codes import BannerErrorCode
from platform_banner.errors import AppError
from platform_banner.json_utils import InvalidJsonError, load_json_str
from platform_banner.logging import get_logger
from platform_banner.models import TrackRecord
from platform_banner.services.decoders import DecoderError, decode_latest_song

_logger = get_logger(__name__)


@runtime_checkable
class LastFmProto(Protocol):
    """Source of the current or most recently played track."""

    async def latest_track(self) -> TrackRecord:
        """Fetch the latest track; raises AppError(TRACK_UNAVAILABLE) on failure."""
        ...


def latest_song_url(endpoint: str, user: str) -> str:
    return f"{endpoint.rstrip('/')}/{urllib.parse.quote(user, safe='')}/latest-song"


def _unavailable(message: str) -> AppError[BannerErrorCode]:
    return AppError(code=BannerErrorCode.TRACK_UNAVAILABLE, message=message)


class _LastFmClient(LastFmProto):
    def __init__(self, *, client: httpx.AsyncClient, endpoint: str, user: str) -> None:
        self._client = client
        self._url = latest_song_url(endpoint, user)

    async def latest_track(self) -> TrackRecord:
        started = time.perf_counter()
        try:
            resp = await self._client.get(self._url, headers={"Accept": "application/json"})
        except httpx.HTTPError as exc:
            raise _unavailable(f"last.fm request failed: {exc}") from exc

        if resp.status_code >= 400:
            raise _unavailable(f"last.fm returned status {resp.status_code}")

        try:
            track = decode_latest_song(load_json_str(resp.text))
        except (InvalidJsonError, DecoderError) as exc:
            raise _unavailable(f"invalid last.fm payload: {exc}") from exc

        _logger.info(
            "Fetched latest track",
            extra={
                "is_playing": track["is_playing"],
                "latency_ms": int((time.perf_counter() - started) * 1000),
            },
        )
        return track


def lastfm_client(*, client: httpx.AsyncClient, endpoint: str, user: str) -> LastFmProto:
    return _LastFmClient(client=client, endpoint=endpoint, user=user)


__all__ = ["LastFmProto", "lastfm_client", "latest_song_url"]
