from __future__ import annotations

import asyncio

import httpx
import pytest

from platform_banner.error_codes import BannerErrorCode
from platform_banner.errors import AppError
from platform_banner.http_client import build_async_client
from platform_banner.json_utils import dump_json_str
from platform_banner.models import TrackRecord
from platform_banner.services import LastFmProto, lastfm_client, latest_song_url
from platform_banner.testing import (
    FakeLastFm,
    make_latest_song_payload,
    make_raising_transport,
    make_route_transport,
    make_track,
)

_ENDPOINT = "https://lastfm-last-played.biancarosa.com.br"
_URL = f"{_ENDPOINT}/brandonmai/latest-song"


def _fetch(transport: httpx.AsyncBaseTransport) -> TrackRecord:
    async def _go() -> TrackRecord:
        async with build_async_client(5.0, transport=transport) as client:
            lastfm = lastfm_client(client=client, endpoint=_ENDPOINT, user="brandonmai")
            return await lastfm.latest_track()

    return asyncio.run(_go())


def test_latest_song_url() -> None:
    assert latest_song_url(_ENDPOINT, "brandonmai") == _URL
    assert latest_song_url(_ENDPOINT + "/", "a b") == f"{_ENDPOINT}/a%20b/latest-song"


def test_latest_track_success() -> None:
    body = dump_json_str(make_latest_song_payload(title="Hello", now_playing=False)).encode()
    track = _fetch(make_route_transport({_URL: (200, body)}))
    assert track["title"] == "Hello"
    assert track["is_playing"] is False


def test_latest_track_server_error() -> None:
    with pytest.raises(AppError) as excinfo:
        _fetch(make_route_transport({_URL: (500, b"boom")}))
    assert excinfo.value.code == BannerErrorCode.TRACK_UNAVAILABLE
    assert "500" in excinfo.value.message


def test_latest_track_invalid_json() -> None:
    with pytest.raises(AppError) as excinfo:
        _fetch(make_route_transport({_URL: (200, b"not json")}))
    assert excinfo.value.code == BannerErrorCode.TRACK_UNAVAILABLE


def test_latest_track_bad_shape() -> None:
    with pytest.raises(AppError) as excinfo:
        _fetch(make_route_transport({_URL: (200, b'{"error": 6}')}))
    assert "track must be a dict" in excinfo.value.message


def test_latest_track_network_error() -> None:
    with pytest.raises(AppError) as excinfo:
        _fetch(make_raising_transport(httpx.ConnectError("unreachable")))
    assert excinfo.value.code == BannerErrorCode.TRACK_UNAVAILABLE


def test_fake_lastfm_satisfies_protocol() -> None:
    ok = FakeLastFm(make_track(title="X"))
    assert isinstance(ok, LastFmProto)
    assert asyncio.run(ok.latest_track())["title"] == "X"
    assert ok.calls == 1

    failing = FakeLastFm(None)
    with pytest.raises(AppError):
        asyncio.run(failing.latest_track())
