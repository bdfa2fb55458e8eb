from __future__ import annotations

import base64
from typing import Final, Literal

import httpx

from platform_banner import _test_hooks
from platform_banner.error_codes import BannerErrorCode
from platform_banner.errors import AppError
from platform_banner.logging import get_logger

AssetKind = Literal["svg", "gif", "webp", "png", "jpeg"]

_logger = get_logger(__name__)

# 1x1 grey WebP used when neither the cover nor the placeholder file loads.
PLACEHOLDER_DATA_URI: Final[str] = (
    "data:image/webp;base64,UklGRjwAAABXRUJQVlA4IDAAAADQAQCdASoBAAEAAUAmJaACdLoB+AADsAD+8ut//NgVzXPv9//S4P0uD9Lg/9KQAAA="
)


def is_remote(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def guess_mime(kind: AssetKind) -> str:
    if kind == "svg":
        return "image/svg+xml"
    return f"image/{kind}"


def to_data_uri(data: bytes, mime: str) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{encoded}"


async def _read_source(source: str, client: httpx.AsyncClient) -> bytes:
    if not is_remote(source):
        try:
            return _test_hooks.read_bytes(source)
        except OSError as exc:
            raise AppError(
                code=BannerErrorCode.ASSET_UNAVAILABLE,
                message=f"cannot read asset {source}: {exc}",
            ) from exc
    try:
        resp = await client.get(source)
    except httpx.HTTPError as exc:
        raise AppError(
            code=BannerErrorCode.ASSET_UNAVAILABLE,
            message=f"failed to fetch asset {source}: {exc}",
        ) from exc
    if resp.status_code >= 400:
        raise AppError(
            code=BannerErrorCode.ASSET_UNAVAILABLE,
            message=f"failed to fetch asset {source}: status {resp.status_code}",
        )
    return resp.content


async def load_asset(source: str, kind: AssetKind, client: httpx.AsyncClient) -> str:
    """Load a local file or remote URL and return it as a data URI."""
    data = await _read_source(source, client)
    _logger.debug("Loaded asset", extra={"source": source, "bytes": len(data)})
    return to_data_uri(data, guess_mime(kind))


async def load_asset_or_none(
    source: str, kind: AssetKind, client: httpx.AsyncClient
) -> str | None:
    """Like ``load_asset`` but logs and returns None when the asset is unavailable."""
    try:
        return await load_asset(source, kind, client)
    except AppError as exc:
        _logger.warning(
            "Error converting asset to data URI: %s",
            exc.message,
            extra={"source": source, "error_code": exc.code.value},
        )
        return None


def resolve_cover_source(image_url: str, *, sentinel: str, placeholder_path: str) -> str:
    """Pick the cover to embed, swapping missing or default artwork for the placeholder."""
    if image_url == "" or (sentinel != "" and sentinel in image_url):
        return placeholder_path
    return image_url


def _cover_kind(source: str) -> AssetKind:
    lowered = source.lower().split("?", 1)[0]
    if lowered.endswith(".png"):
        return "png"
    if lowered.endswith((".jpg", ".jpeg")):
        return "jpeg"
    if lowered.endswith(".gif"):
        return "gif"
    if lowered.endswith(".svg"):
        return "svg"
    return "webp"


async def load_cover(
    image_url: str,
    *,
    sentinel: str,
    placeholder_path: str,
    client: httpx.AsyncClient,
) -> str:
    """Return a data URI for the track cover, never failing.

    Falls back to the placeholder file, then to the inline placeholder image.
    """
    source = resolve_cover_source(image_url, sentinel=sentinel, placeholder_path=placeholder_path)
    cover = await load_asset_or_none(source, _cover_kind(source), client)
    if cover is None and source != placeholder_path:
        cover = await load_asset_or_none(placeholder_path, _cover_kind(placeholder_path), client)
    return cover if cover is not None else PLACEHOLDER_DATA_URI


__all__ = [
    "PLACEHOLDER_DATA_URI",
    "AssetKind",
    "guess_mime",
    "is_remote",
    "load_asset",
    "load_asset_or_none",
    "load_cover",
    "resolve_cover_source",
    "to_data_uri",
]
