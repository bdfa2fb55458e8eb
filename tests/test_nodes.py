from __future__ import annotations

from platform_banner.nodes import (
    ElementNode,
    element,
    fragment,
    get_attr,
    is_element,
    is_fragment,
    is_text,
    iter_children,
    text,
)


def test_element_lowercases_tag_and_omits_empty_children() -> None:
    node = element("DIV", {"id": "x"})
    assert node["tag"] == "div"
    assert "children" not in node
    assert node["props"] == {"id": "x"}


def test_element_copies_props() -> None:
    props = {"id": "x"}
    node = element("span", props)
    props["id"] = "y"
    assert node["props"]["id"] == "x"


def test_variant_guards() -> None:
    assert is_text(text("hi"))
    assert is_element(element("p"))
    assert is_fragment(fragment())
    assert not is_element(text("hi"))


def test_get_attr_returns_strings_only() -> None:
    node = element("img", {"src": "a.png", "style": {"width": "10px"}})
    assert get_attr(node, "src") == "a.png"
    assert get_attr(node, "style") is None
    assert get_attr(element("img"), "src") is None


def test_iter_children_normalises_shapes() -> None:
    with_list = element("div", children=[text("a"), element("b")])
    assert len(iter_children(with_list)) == 2

    with_string: ElementNode = {"kind": "element", "tag": "span", "props": {}, "children": "Song"}
    assert iter_children(with_string) == [text("Song")]

    single = element("b")
    with_node: ElementNode = {"kind": "element", "tag": "span", "props": {}, "children": single}
    assert iter_children(with_node) == [single]

    assert iter_children(element("br")) == []
    assert iter_children(text("x")) == []
    assert iter_children(fragment([text("x")])) == [text("x")]
