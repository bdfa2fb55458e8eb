from __future__ import annotations

import asyncio
from typing import Final

import httpx

from platform_banner import _test_hooks
from platform_banner.assets import AssetKind, load_asset_or_none, load_cover
from platform_banner.config import BannerSettings
from platform_banner.error_codes import BannerErrorCode
from platform_banner.errors import AppError
from platform_banner.fragment import extract_body, parse_fragment
from platform_banner.image_gen.renderer import RendererProto, RenderOptions, build_renderer
from platform_banner.logging import get_logger
from platform_banner.models import TrackRecord, with_image_url
from platform_banner.services.lastfm import LastFmProto
from platform_banner.substitute import PAUSED_GLYPH, PLAYING_GLYPH, substitute

_logger = get_logger(__name__)

_TWEMOJI: Final[str] = "https://cdn.jsdelivr.net/gh/twitter/twemoji@14.0.2/assets/svg"

# Grapheme -> image used in place of the emoji glyph in rendered text.
GRAPHEME_ICONS: Final[dict[str, tuple[str, AssetKind]]] = {
    "🎵": (f"{_TWEMOJI}/1f3b5.svg", "svg"),
    "🩵": ("https://upload.wikimedia.org/wikipedia/commons/3/3b/Hololive_triangles_logo.svg", "svg"),
    "🍵": (f"{_TWEMOJI}/2615.svg", "svg"),
    "🌄": (f"{_TWEMOJI}/1f304.svg", "svg"),
    "😎": (f"{_TWEMOJI}/1f60e.svg", "svg"),
    "🤓": (f"{_TWEMOJI}/1f913.svg", "svg"),
    "🛠️": (f"{_TWEMOJI}/1f6e0.svg", "svg"),
    "💻": (f"{_TWEMOJI}/1f4bb.svg", "svg"),
}

DEFAULT_FONT_FAMILY: Final[str] = "'JetBrains Mono', 'Noto Sans JP', monospace"


async def load_render_options(
    settings: BannerSettings, *, client: httpx.AsyncClient
) -> RenderOptions:
    """Convert every grapheme icon to a data URI, concurrently.

    Icons that fail to load are left out of the table and render as plain glyphs.
    """
    sources: list[tuple[str, str, AssetKind]] = [
        (glyph, source, kind) for glyph, (source, kind) in GRAPHEME_ICONS.items()
    ]
    sources.append((PLAYING_GLYPH, settings["play_icon_path"], "gif"))
    sources.append((PAUSED_GLYPH, settings["pause_icon_path"], "svg"))

    loaded = await asyncio.gather(
        *(load_asset_or_none(source, kind, client) for _, source, kind in sources)
    )
    grapheme_images: dict[str, str] = {}
    for (glyph, _, _), uri in zip(sources, loaded, strict=True):
        if uri is not None:
            grapheme_images[glyph] = uri

    _logger.info("Loaded grapheme icons", extra={"icons": len(grapheme_images)})
    return {
        "width": settings["width"],
        "height": settings["height"],
        "grapheme_images": grapheme_images,
        "font_family": DEFAULT_FONT_FAMILY,
    }


def decorate_for_tree(track: TrackRecord) -> TrackRecord:
    """Prefix artist and album the way the tree template displays them."""
    out: TrackRecord = {
        **track,
        "artist": f"by {track['artist']}" if track["artist"] else "",
        "album": f"on {track['album']}" if track["album"] else "",
    }
    return out


def read_template(path: str) -> str:
    try:
        return _test_hooks.read_bytes(path).decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise AppError(
            code=BannerErrorCode.INVALID_TEMPLATE, message=f"cannot read template {path}: {exc}"
        ) from exc


async def render_profile(
    settings: BannerSettings,
    *,
    client: httpx.AsyncClient,
    lastfm: LastFmProto,
    options: RenderOptions | None = None,
    renderer: RendererProto | None = None,
) -> bytes:
    """Render the profile banner SVG from the template and the latest track.

    A failed track fetch raises before the template is parsed or substituted.
    ``renderer`` defaults to the SVG renderer from ``build_renderer``.
    """
    body = extract_body(read_template(settings["template_path"]))

    track = await lastfm.latest_track()
    if options is None:
        options = await load_render_options(settings, client=client)
    cover_uri = await load_cover(
        track["image_url"],
        sentinel=settings["placeholder_sentinel"],
        placeholder_path=settings["placeholder_path"],
        client=client,
    )
    data = with_image_url(decorate_for_tree(track), cover_uri)

    tree = parse_fragment(body)
    rendered = substitute(tree, data)
    if renderer is None:
        renderer = build_renderer()
    svg = renderer.render(rendered, options)
    _logger.info("Image generated", extra={"bytes": len(svg)})
    return svg


__all__ = [
    "DEFAULT_FONT_FAMILY",
    "GRAPHEME_ICONS",
    "decorate_for_tree",
    "load_render_options",
    "read_template",
    "render_profile",
]
