from __future__ import annotations

import re
from typing import Final

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from platform_banner.error_codes import BannerErrorCode
from platform_banner.errors import AppError
from platform_banner.logging import get_logger
from platform_banner.nodes import ElementNode, Node, Props, element, fragment, text
from platform_banner.styles import ClassTranslator, resolve_style
from platform_banner.tailwind import translate

_logger = get_logger(__name__)

_BODY_RE: Final[re.Pattern[str]] = re.compile(r"<body[^>]*>([\s\S]*?)</body>", re.IGNORECASE)

# Attribute names that differ between markup and the renderer's property names.
_RENAMED_ATTRIBUTES: Final[dict[str, str]] = {"for": "htmlFor"}


def extract_body(document: str) -> str:
    """Return the inner markup of the first ``<body>`` element of a template."""
    match = _BODY_RE.search(document)
    if match is None:
        raise AppError(
            code=BannerErrorCode.INVALID_TEMPLATE,
            message="template has no <body> element",
        )
    return match.group(1)


def _attr_str(value: str | list[str]) -> str:
    if isinstance(value, list):
        return " ".join(value)
    return value


def _convert_props(tag: Tag, translator: ClassTranslator) -> Props:
    attrs: dict[str, str] = {name: _attr_str(value) for name, value in tag.attrs.items()}
    resolution = resolve_style(attrs.get("class"), attrs.get("style"), translator=translator)

    props: Props = {}
    for name, value in attrs.items():
        if name in ("class", "style"):
            style = resolution["style"]
            if style is not None and "style" not in props:
                props["style"] = style
            if name == "class" and resolution["fallback_class"] is not None:
                props["class"] = resolution["fallback_class"]
            continue
        props[_RENAMED_ATTRIBUTES.get(name, name)] = value
    return props


def _convert(node: PageElement, translator: ClassTranslator) -> Node | None:
    # Comments, doctypes, CDATA and processing instructions are all
    # PreformattedString subclasses and never reach the tree.
    if isinstance(node, PreformattedString):
        return None
    if isinstance(node, NavigableString):
        return text(str(node))
    if isinstance(node, Tag):
        return _convert_element(node, translator)
    return None


def _convert_element(tag: Tag, translator: ClassTranslator) -> ElementNode:
    children = _convert_children(tag, translator)
    return element(tag.name, _convert_props(tag, translator), children)


def _convert_children(parent: Tag, translator: ClassTranslator) -> list[Node]:
    out: list[Node] = []
    for child in parent.children:
        converted = _convert(child, translator)
        if converted is not None:
            out.append(converted)
    return out


def parse_fragment(markup: str, *, translator: ClassTranslator = translate) -> Node:
    """Parse an HTML fragment into a node tree.

    A single top-level node is returned as is; several are wrapped in a
    fragment node in source order, and no nodes at all yield an empty fragment.
    """
    soup = BeautifulSoup(f"<body>{markup}</body>", "html.parser", multi_valued_attributes=None)
    container = soup.body
    if container is None:
        return fragment()

    roots = _convert_children(container, translator)
    if len(roots) == 1:
        _logger.debug("Single root element found, returning directly", extra={"roots": 1})
        return roots[0]
    _logger.debug("Multiple root elements found, wrapping in a fragment", extra={"roots": len(roots)})
    return fragment(roots)


__all__ = ["extract_body", "parse_fragment"]
