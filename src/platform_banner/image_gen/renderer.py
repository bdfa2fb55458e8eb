from __future__ import annotations

import html
import re
from typing import Final, Protocol, TypedDict

from platform_banner.logging import get_logger
from platform_banner.nodes import (
    ElementNode,
    Node,
    StyleMap,
    is_element,
    is_text,
    iter_children,
)

_logger = get_logger(__name__)

_SVG_NS: Final[str] = "http://www.w3.org/2000/svg"
_XHTML_NS: Final[str] = "http://www.w3.org/1999/xhtml"

_VOID_TAGS: Final[frozenset[str]] = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)
_PROP_TO_ATTRIBUTE: Final[dict[str, str]] = {"htmlFor": "for", "className": "class"}
_ATTRIBUTE_NAME_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_:][-A-Za-z0-9_.:]*$")
_GRAPHEME_STYLE: Final[str] = "width:1em;height:1em;vertical-align:-0.1em"


class RenderOptions(TypedDict):
    width: int
    height: int
    grapheme_images: dict[str, str]
    font_family: str


class RendererProto(Protocol):
    def render(self, tree: Node, options: RenderOptions) -> bytes: ...


def style_to_css(style: StyleMap) -> str:
    return ";".join(f"{key}:{value}" for key, value in style.items())


class _Serializer:
    def __init__(self, grapheme_images: dict[str, str]) -> None:
        self._images = grapheme_images
        keys = sorted(grapheme_images, key=len, reverse=True)
        self._pattern = re.compile("|".join(re.escape(k) for k in keys)) if keys else None
        self._out: list[str] = []

    def result(self) -> str:
        return "".join(self._out)

    def text(self, value: str) -> None:
        if self._pattern is None:
            self._out.append(html.escape(value, quote=False))
            return
        pos = 0
        for match in self._pattern.finditer(value):
            self._out.append(html.escape(value[pos : match.start()], quote=False))
            glyph = match.group(0)
            self._out.append(
                f'<img src="{html.escape(self._images[glyph])}" '
                f'alt="{html.escape(glyph)}" style="{_GRAPHEME_STYLE}"/>'
            )
            pos = match.end()
        self._out.append(html.escape(value[pos:], quote=False))

    def node(self, node: Node) -> None:
        if is_text(node):
            self.text(node["value"])
        elif is_element(node):
            self.element(node)
        else:
            for child in iter_children(node):
                self.node(child)

    def _attributes(self, node: ElementNode) -> str:
        parts: list[str] = []
        for name, value in node["props"].items():
            attr_name = _PROP_TO_ATTRIBUTE.get(name, name)
            if not _ATTRIBUTE_NAME_RE.match(attr_name):
                _logger.debug("Dropping attribute with invalid name", extra={"source": name})
                continue
            attr_value = style_to_css(value) if isinstance(value, dict) else value
            parts.append(f' {attr_name}="{html.escape(attr_value)}"')
        return "".join(parts)

    def element(self, node: ElementNode) -> None:
        tag = node["tag"]
        attrs = self._attributes(node)
        if tag in _VOID_TAGS:
            self._out.append(f"<{tag}{attrs}/>")
            return
        self._out.append(f"<{tag}{attrs}>")
        for child in iter_children(node):
            self.node(child)
        self._out.append(f"</{tag}>")


def render_svg(tree: Node, options: RenderOptions) -> bytes:
    """Serialise a node tree into a standalone SVG document.

    The tree is embedded as XHTML inside a ``foreignObject`` sized to the
    banner; grapheme characters with a known image are swapped for inline
    ``<img>`` elements. Output is deterministic for identical inputs.
    """
    width, height = options["width"], options["height"]
    serializer = _Serializer(options["grapheme_images"])
    serializer.node(tree)
    root_style = style_to_css(
        {
            "display": "flex",
            "width": f"{width}px",
            "height": f"{height}px",
            "font-family": options["font_family"],
        }
    )
    document = (
        f'<svg xmlns="{_SVG_NS}" width="{width}" height="{height}" viewBox="0 0 {width} {height}">'
        f'<foreignObject x="0" y="0" width="{width}" height="{height}">'
        f'<div xmlns="{_XHTML_NS}" style="{html.escape(root_style)}">'
        f"{serializer.result()}"
        "</div></foreignObject></svg>"
    )
    return document.encode("utf-8")


class _SvgRenderer:
    def render(self, tree: Node, options: RenderOptions) -> bytes:
        return render_svg(tree, options)


def build_renderer() -> RendererProto:
    return _SvgRenderer()


__all__ = ["RenderOptions", "RendererProto", "build_renderer", "render_svg", "style_to_css"]
