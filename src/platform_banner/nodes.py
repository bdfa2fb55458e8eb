"""Generic markup tree handed from the template parser to the renderer.

Three variants, discriminated by ``kind``:

- ``TextNode``: a literal string.
- ``ElementNode``: lowercase tag, property mapping and optional children.
  ``children`` is absent when the element has none; after substitution it may
  also hold a bare string or a single node.
- ``FragmentNode``: an ordered list of roots without tag or properties.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Literal, NotRequired, TypedDict, TypeGuard

StyleMap = dict[str, str]
PropValue = str | StyleMap
Props = dict[str, PropValue]


class TextNode(TypedDict):
    kind: Literal["text"]
    value: str


class ElementNode(TypedDict):
    kind: Literal["element"]
    tag: str
    props: Props
    children: NotRequired[Children]


class FragmentNode(TypedDict):
    kind: Literal["fragment"]
    children: list[Node]


Node = TextNode | ElementNode | FragmentNode
Children = str | Node | list[Node]


def text(value: str) -> TextNode:
    return {"kind": "text", "value": value}


def element(
    tag: str, props: Mapping[str, PropValue] | None = None, children: Sequence[Node] = ()
) -> ElementNode:
    """Build an element; an empty ``children`` sequence leaves the key out."""
    node: ElementNode = {"kind": "element", "tag": tag.lower(), "props": dict(props or {})}
    if len(children) > 0:
        node["children"] = list(children)
    return node


def fragment(children: Sequence[Node] = ()) -> FragmentNode:
    return {"kind": "fragment", "children": list(children)}


def is_text(node: Node) -> TypeGuard[TextNode]:
    return node["kind"] == "text"


def is_element(node: Node) -> TypeGuard[ElementNode]:
    return node["kind"] == "element"


def is_fragment(node: Node) -> TypeGuard[FragmentNode]:
    return node["kind"] == "fragment"


def get_attr(node: ElementNode, name: str) -> str | None:
    value = node["props"].get(name)
    if isinstance(value, str):
        return value
    return None


def iter_children(node: Node) -> list[Node]:
    """Uniform list view of a node's children; string children become one text node."""
    if node["kind"] == "text":
        return []
    if node["kind"] == "fragment":
        return list(node["children"])
    if "children" not in node:
        return []
    children = node["children"]
    if isinstance(children, str):
        return [text(children)]
    if isinstance(children, list):
        return list(children)
    return [children]


__all__ = [
    "Children",
    "ElementNode",
    "FragmentNode",
    "Node",
    "PropValue",
    "Props",
    "StyleMap",
    "TextNode",
    "element",
    "fragment",
    "get_attr",
    "is_element",
    "is_fragment",
    "is_text",
    "iter_children",
    "text",
]
