"""In-place update of an existing SVG banner, addressing elements by id."""

from __future__ import annotations

import asyncio
from typing import TypedDict

import httpx
from lxml import etree

from platform_banner import _test_hooks
from platform_banner.assets import PLACEHOLDER_DATA_URI, load_asset_or_none, load_cover
from platform_banner.config import BannerSettings
from platform_banner.error_codes import BannerErrorCode
from platform_banner.errors import AppError
from platform_banner.logging import get_logger
from platform_banner.models import TrackRecord
from platform_banner.services.lastfm import LastFmProto
from platform_banner.substitute import (
    ALBUM_FALLBACK,
    ARTIST_FALLBACK,
    PAUSED_TEXT,
    PLAYING_TEXT,
    TITLE_FALLBACK,
)

_logger = get_logger(__name__)


class BannerAssets(TypedDict):
    cover_uri: str | None
    play_icon: str | None
    pause_icon: str | None


def _find_by_id(root: etree._Element, element_id: str) -> etree._Element | None:
    found = root.xpath("//*[@id=$element_id]", element_id=element_id)
    if isinstance(found, list) and len(found) > 0:
        first = found[0]
        if isinstance(first, etree._Element):
            return first
    _logger.debug("Banner element not found, skipping", extra={"marker": element_id})
    return None


def _set_text(el: etree._Element, value: str) -> None:
    for child in list(el):
        el.remove(child)
    el.text = value


def _set_source(el: etree._Element, uri: str) -> None:
    el.set("src", uri)
    if etree.QName(el).localname == "image":
        el.set("href", uri)


def update_banner(svg_text: str, data: TrackRecord, assets: BannerAssets) -> str:
    """Return ``svg_text`` with cover, status and track fields filled in."""
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=False)
    try:
        root = etree.fromstring(svg_text.encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError as exc:
        raise AppError(
            code=BannerErrorCode.INVALID_TEMPLATE, message=f"banner is not valid SVG: {exc}"
        ) from exc

    cover = _find_by_id(root, "image")
    if cover is not None:
        cover_uri = assets["cover_uri"]
        _set_source(cover, cover_uri if cover_uri is not None else PLACEHOLDER_DATA_URI)

    status_icon = _find_by_id(root, "status-icon")
    if status_icon is not None:
        icon = assets["play_icon"] if data["is_playing"] else assets["pause_icon"]
        if icon is not None:
            _set_source(status_icon, icon)

    status_text = _find_by_id(root, "status-text")
    if status_text is not None:
        _set_text(status_text, PLAYING_TEXT if data["is_playing"] else PAUSED_TEXT)

    name = _find_by_id(root, "name")
    if name is not None:
        _set_text(name, data["title"] or TITLE_FALLBACK)

    artist = _find_by_id(root, "artist")
    if artist is not None:
        _set_text(artist, f"by {data['artist'] or ARTIST_FALLBACK}")

    album = _find_by_id(root, "album")
    if album is not None:
        _set_text(album, f"on {data['album'] or ALBUM_FALLBACK}")

    out: str = etree.tostring(root, encoding="unicode")
    return out


async def update_banner_file(
    settings: BannerSettings, *, client: httpx.AsyncClient, lastfm: LastFmProto
) -> str:
    """Fetch the latest track and return the updated banner document.

    Track fetch failures propagate before the banner file is touched.
    """
    data = await lastfm.latest_track()
    try:
        svg_text = _test_hooks.read_bytes(settings["banner_path"]).decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise AppError(
            code=BannerErrorCode.INVALID_TEMPLATE,
            message=f"cannot read banner {settings['banner_path']}: {exc}",
        ) from exc

    cover_uri, play_icon, pause_icon = await asyncio.gather(
        load_cover(
            data["image_url"],
            sentinel=settings["placeholder_sentinel"],
            placeholder_path=settings["placeholder_path"],
            client=client,
        ),
        load_asset_or_none(settings["play_icon_path"], "gif", client),
        load_asset_or_none(settings["pause_icon_path"], "svg", client),
    )
    assets: BannerAssets = {
        "cover_uri": cover_uri,
        "play_icon": play_icon,
        "pause_icon": pause_icon,
    }
    updated = update_banner(svg_text, data, assets)
    _logger.info("Music banner updated", extra={"path": settings["banner_path"]})
    return updated


__all__ = ["BannerAssets", "update_banner", "update_banner_file"]
