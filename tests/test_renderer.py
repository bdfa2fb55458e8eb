from __future__ import annotations

from lxml import etree

from platform_banner.image_gen import RenderOptions, build_renderer, render_svg
from platform_banner.image_gen.renderer import style_to_css
from platform_banner.nodes import ElementNode, element, fragment, text

_XHTML = "{http://www.w3.org/1999/xhtml}"


def _options(images: dict[str, str] | None = None) -> RenderOptions:
    return {
        "width": 850,
        "height": 510,
        "grapheme_images": images if images is not None else {},
        "font_family": "monospace",
    }


def test_render_produces_well_formed_svg() -> None:
    tree = element(
        "div",
        {"style": {"display": "flex", "color": "red"}},
        [element("img", {"src": "data:image/png;base64,AAA"}), element("p", {}, [text("Hi")])],
    )
    out = render_svg(tree, _options())
    root = etree.fromstring(out)
    assert root.tag == "{http://www.w3.org/2000/svg}svg"
    assert root.get("width") == "850"
    assert root.get("viewBox") == "0 0 850 510"
    container = root[0][0]
    assert container.tag == f"{_XHTML}div"
    assert "font-family:monospace" in (container.get("style") or "")
    inner = container[0]
    assert inner.get("style") == "display:flex;color:red"
    assert inner[0].tag == f"{_XHTML}img"
    assert inner[1].text == "Hi"


def test_text_and_attributes_are_escaped() -> None:
    tree = element("p", {"title": 'a "q" <b>'}, [text("1 < 2 & 3")])
    out = render_svg(tree, _options()).decode("utf-8")
    assert "1 &lt; 2 &amp; 3" in out
    assert 'title="a &quot;q&quot; &lt;b&gt;"' in out
    etree.fromstring(out.encode("utf-8"))


def test_graphemes_become_images() -> None:
    tree = element("span", {}, [text("Hi 🎵!")])
    out = render_svg(tree, _options({"🎵": "data:image/svg+xml;base64,AAA"})).decode("utf-8")
    assert '<img src="data:image/svg+xml;base64,AAA" alt="🎵"' in out
    assert "Hi " in out
    assert "🎵!" not in out


def test_longest_grapheme_wins() -> None:
    images = {"⏸": "data:short", "⏸️": "data:long"}
    out = render_svg(text("⏸️"), _options(images)).decode("utf-8")
    assert 'src="data:long"' in out
    assert "data:short" not in out


def test_void_tags_self_close_and_props_are_mapped() -> None:
    tree = fragment(
        [
            element("br"),
            element("label", {"htmlFor": "x", "className": "c"}, [text("L")]),
        ]
    )
    out = render_svg(tree, _options()).decode("utf-8")
    assert "<br/>" in out
    assert '<label for="x" class="c">L</label>' in out


def test_invalid_attribute_names_are_dropped() -> None:
    tree = element("div", {"@click": "x", "data-ok": "1"})
    out = render_svg(tree, _options()).decode("utf-8")
    assert "@click" not in out
    assert 'data-ok="1"' in out


def test_string_children_render_as_text() -> None:
    tree: ElementNode = {"kind": "element", "tag": "p", "props": {}, "children": "Song"}
    out = render_svg(tree, _options()).decode("utf-8")
    assert "<p>Song</p>" in out


def test_render_is_deterministic() -> None:
    tree = element("p", {"style": {"color": "red"}}, [text("x")])
    assert render_svg(tree, _options()) == render_svg(tree, _options())


def test_build_renderer_matches_render_svg() -> None:
    tree = element("p", {}, [text("x")])
    assert build_renderer().render(tree, _options()) == render_svg(tree, _options())


def test_style_to_css() -> None:
    assert style_to_css({"color": "red", "margin-top": "1px"}) == "color:red;margin-top:1px"
    assert style_to_css({}) == ""
