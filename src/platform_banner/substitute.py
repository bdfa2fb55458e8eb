"""Fill the template's slots with track data.

Slots are elements carrying one of the ``id`` markers below. The pass is pure:
elements are rebuilt on the way down and the input tree is never mutated.
"""

from __future__ import annotations

from typing import Final

from platform_banner.models import TrackRecord
from platform_banner.nodes import (
    Children,
    ElementNode,
    Node,
    fragment,
    get_attr,
    is_element,
    is_fragment,
)

MARKER_ATTRIBUTE: Final[str] = "id"

COVER_MARKER: Final[str] = "image"
STATUS_ICON_MARKER: Final[str] = "status-icon"
STATUS_TEXT_MARKER: Final[str] = "status-text"
TITLE_MARKER: Final[str] = "name"
ARTIST_MARKER: Final[str] = "artist"
ALBUM_MARKER: Final[str] = "album"

PLAYING_GLYPH: Final[str] = "▶️"
PAUSED_GLYPH: Final[str] = "⏸️"
PLAYING_TEXT: Final[str] = "Now playing..."
PAUSED_TEXT: Final[str] = "Last played..."
TITLE_FALLBACK: Final[str] = "Something went wrong"
ARTIST_FALLBACK: Final[str] = "Various artist"
ALBUM_FALLBACK: Final[str] = "Various album"


def _rewrite(node: ElementNode, data: TrackRecord) -> ElementNode:
    """Apply the first matching slot rule, returning ``node`` itself if none match."""
    marker = get_attr(node, MARKER_ATTRIBUTE)
    if marker is None:
        return node

    if marker == COVER_MARKER and node["tag"] == "img":
        image_url = data.get("image_url") or ""
        if image_url == "":
            return node
        return {**node, "props": {**node["props"], "src": image_url}}

    replacement: str
    if marker == STATUS_ICON_MARKER:
        replacement = PLAYING_GLYPH if data.get("is_playing") else PAUSED_GLYPH
    elif marker == STATUS_TEXT_MARKER:
        replacement = PLAYING_TEXT if data.get("is_playing") else PAUSED_TEXT
    elif marker == TITLE_MARKER:
        replacement = data.get("title") or TITLE_FALLBACK
    elif marker == ARTIST_MARKER:
        replacement = data.get("artist") or ARTIST_FALLBACK
    elif marker == ALBUM_MARKER:
        replacement = data.get("album") or ALBUM_FALLBACK
    else:
        return node
    return {**node, "children": replacement}


def _substitute_children(children: Children, data: TrackRecord) -> Children:
    if isinstance(children, str):
        return children
    if isinstance(children, list):
        return [substitute(child, data) for child in children]
    return substitute(children, data)


def substitute(tree: Node, data: TrackRecord) -> Node:
    """Return a copy of ``tree`` with every slot filled from ``data``.

    Never raises for missing or empty fields; those fall back to fixed text.
    """
    if is_fragment(tree):
        return fragment([substitute(child, data) for child in tree["children"]])
    if not is_element(tree):
        return tree

    rewritten = _rewrite(tree, data)
    if "children" not in rewritten:
        return rewritten
    return {**rewritten, "children": _substitute_children(rewritten["children"], data)}


__all__ = [
    "ALBUM_FALLBACK",
    "ALBUM_MARKER",
    "ARTIST_FALLBACK",
    "ARTIST_MARKER",
    "COVER_MARKER",
    "MARKER_ATTRIBUTE",
    "PAUSED_GLYPH",
    "PAUSED_TEXT",
    "PLAYING_GLYPH",
    "PLAYING_TEXT",
    "STATUS_ICON_MARKER",
    "STATUS_TEXT_MARKER",
    "TITLE_FALLBACK",
    "TITLE_MARKER",
    "substitute",
]
