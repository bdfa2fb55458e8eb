from __future__ import annotations

import asyncio
import base64
import logging

import httpx
import pytest

from platform_banner import _test_hooks
from platform_banner.assets import (
    PLACEHOLDER_DATA_URI,
    AssetKind,
    guess_mime,
    is_remote,
    load_asset,
    load_asset_or_none,
    load_cover,
    resolve_cover_source,
    to_data_uri,
)
from platform_banner.config import DEFAULT_PLACEHOLDER_SENTINEL
from platform_banner.error_codes import BannerErrorCode
from platform_banner.errors import AppError
from platform_banner.http_client import build_async_client
from platform_banner.testing import make_fake_read_bytes, make_route_transport

_COVER = "https://lastfm.freetls.fastly.net/i/u/300x300/cover.png"
_DEFAULT_COVER = f"https://lastfm.freetls.fastly.net/i/u/300x300/{DEFAULT_PLACEHOLDER_SENTINEL}.png"


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _load(source: str, kind: AssetKind, routes: dict[str, tuple[int, bytes]]) -> str:
    async def _go() -> str:
        async with build_async_client(5.0, transport=make_route_transport(routes)) as client:
            return await load_asset(source, kind, client)

    return asyncio.run(_go())


def _cover(image_url: str, routes: dict[str, tuple[int, bytes]]) -> str:
    async def _go() -> str:
        async with build_async_client(5.0, transport=make_route_transport(routes)) as client:
            return await load_cover(
                image_url,
                sentinel=DEFAULT_PLACEHOLDER_SENTINEL,
                placeholder_path="placeholder.webp",
                client=client,
            )

    return asyncio.run(_go())


def test_is_remote() -> None:
    assert is_remote("https://x/y.png")
    assert is_remote("http://x/y.png")
    assert not is_remote("public/now-playing.gif")


def test_guess_mime() -> None:
    assert guess_mime("svg") == "image/svg+xml"
    assert guess_mime("gif") == "image/gif"
    assert guess_mime("webp") == "image/webp"


def test_to_data_uri() -> None:
    assert to_data_uri(b"abc", "image/png") == "data:image/png;base64,YWJj"


def test_load_local_asset() -> None:
    _test_hooks.read_bytes = make_fake_read_bytes({"public/icon.svg": b"<svg/>"})
    uri = _load("public/icon.svg", "svg", {})
    assert uri == f"data:image/svg+xml;base64,{_b64(b'<svg/>')}"


def test_load_remote_asset() -> None:
    uri = _load(_COVER, "png", {_COVER: (200, b"PNG")})
    assert uri == f"data:image/png;base64,{_b64(b'PNG')}"


def test_load_missing_local_asset_raises() -> None:
    _test_hooks.read_bytes = make_fake_read_bytes({})
    with pytest.raises(AppError) as excinfo:
        _load("missing.gif", "gif", {})
    assert excinfo.value.code == BannerErrorCode.ASSET_UNAVAILABLE


def test_load_remote_error_status_raises() -> None:
    with pytest.raises(AppError) as excinfo:
        _load(_COVER, "png", {_COVER: (404, b"")})
    assert excinfo.value.code == BannerErrorCode.ASSET_UNAVAILABLE


def test_load_asset_or_none_logs_and_returns_none(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="platform_banner.assets")

    async def _go() -> str | None:
        async with build_async_client(5.0, transport=make_route_transport({})) as client:
            return await load_asset_or_none(_COVER, "png", client)

    assert asyncio.run(_go()) is None
    assert "Error converting asset to data URI" in caplog.text


def test_resolve_cover_source() -> None:
    kwargs = {"sentinel": DEFAULT_PLACEHOLDER_SENTINEL, "placeholder_path": "ph.webp"}
    assert resolve_cover_source(_COVER, **kwargs) == _COVER
    assert resolve_cover_source("", **kwargs) == "ph.webp"
    assert resolve_cover_source(_DEFAULT_COVER, **kwargs) == "ph.webp"
    assert resolve_cover_source(_DEFAULT_COVER, sentinel="", placeholder_path="ph.webp") == (
        _DEFAULT_COVER
    )


def test_load_cover_uses_remote_cover() -> None:
    assert _cover(_COVER, {_COVER: (200, b"PNG")}) == f"data:image/png;base64,{_b64(b'PNG')}"


def test_load_cover_sentinel_uses_placeholder_file() -> None:
    _test_hooks.read_bytes = make_fake_read_bytes({"placeholder.webp": b"WEBP"})
    assert _cover(_DEFAULT_COVER, {}) == f"data:image/webp;base64,{_b64(b'WEBP')}"


def test_load_cover_failed_fetch_falls_back_to_placeholder_file() -> None:
    _test_hooks.read_bytes = make_fake_read_bytes({"placeholder.webp": b"WEBP"})
    assert _cover(_COVER, {_COVER: (503, b"")}) == f"data:image/webp;base64,{_b64(b'WEBP')}"


def test_load_cover_never_fails() -> None:
    _test_hooks.read_bytes = make_fake_read_bytes({})
    assert _cover("", {}) == PLACEHOLDER_DATA_URI


def test_load_cover_network_error() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    _test_hooks.read_bytes = make_fake_read_bytes({})

    async def _go() -> str:
        transport = httpx.MockTransport(_handler)
        async with build_async_client(5.0, transport=transport) as client:
            return await load_cover(
                _COVER,
                sentinel=DEFAULT_PLACEHOLDER_SENTINEL,
                placeholder_path="placeholder.webp",
                client=client,
            )

    assert asyncio.run(_go()) == PLACEHOLDER_DATA_URI
