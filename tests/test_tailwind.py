from __future__ import annotations

import pytest

from platform_banner.tailwind import PALETTE, TranslationError, translate, translate_token


def test_translate_layout_and_spacing() -> None:
    assert translate("flex items-center p-4") == {
        "display": "flex",
        "align-items": "center",
        "padding": "1rem",
    }


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("px-2", {"padding-left": "0.5rem", "padding-right": "0.5rem"}),
        ("-mt-2", {"margin-top": "-0.5rem"}),
        ("mx-auto", {"margin-left": "auto", "margin-right": "auto"}),
        ("p-px", {"padding": "1px"}),
        ("w-1/2", {"width": "50%"}),
        ("h-full", {"height": "100%"}),
        ("min-h-screen", {"min-height": "100vh"}),
        ("max-w-md", {"max-width": "28rem"}),
        ("w-[120px]", {"width": "120px"}),
        ("size-4", {"width": "1rem", "height": "1rem"}),
        ("inset-0", {"top": "0px", "right": "0px", "bottom": "0px", "left": "0px"}),
        ("gap-x-4", {"column-gap": "1rem"}),
        ("gap-2", {"gap": "0.5rem"}),
        ("text-red-500", {"color": "#ef4444"}),
        ("text-xl", {"font-size": "1.25rem", "line-height": "1.75rem"}),
        ("text-[#1db954]", {"color": "#1db954"}),
        ("text-[13px]", {"font-size": "13px"}),
        ("font-bold", {"font-weight": "700"}),
        ("bg-black/50", {"background-color": "rgb(0 0 0 / 0.5)"}),
        ("bg-white", {"background-color": "#ffffff"}),
        ("rounded", {"border-radius": "0.25rem"}),
        ("rounded-lg", {"border-radius": "0.5rem"}),
        ("rounded-full", {"border-radius": "9999px"}),
        (
            "rounded-t-lg",
            {"border-top-left-radius": "0.5rem", "border-top-right-radius": "0.5rem"},
        ),
        ("border", {"border-width": "1px"}),
        ("border-2", {"border-width": "2px"}),
        ("border-t", {"border-top-width": "1px"}),
        ("border-gray-200", {"border-color": "#e5e7eb"}),
        ("border-dashed", {"border-style": "dashed"}),
        ("opacity-75", {"opacity": "0.75"}),
        ("z-10", {"z-index": "10"}),
        ("leading-tight", {"line-height": "1.25"}),
        ("tracking-wide", {"letter-spacing": "0.025em"}),
        ("truncate", {"overflow": "hidden", "text-overflow": "ellipsis", "white-space": "nowrap"}),
    ],
)
def test_translate_token(token: str, expected: dict[str, str]) -> None:
    assert translate_token(token) == expected


def test_variants_are_ignored() -> None:
    assert translate("hover:bg-red-500 md:p-8 p-2") == {"padding": "0.5rem"}


def test_later_tokens_override_earlier() -> None:
    assert translate("p-2 p-4") == {"padding": "1rem"}


def test_empty_class_string() -> None:
    assert translate("   ") == {}


@pytest.mark.parametrize("token", ["foo", "foo-bar", "text-nope-500", "p-x", "-p-2", "rounded-huge"])
def test_unknown_token_raises(token: str) -> None:
    with pytest.raises(TranslationError):
        translate_token(token)


@pytest.mark.parametrize("token", ["opacity-²", "text-white/²", "z-²", "border-²", "border-t-²", "w-¹/2"])
def test_non_ascii_digits_are_rejected(token: str) -> None:
    with pytest.raises(TranslationError):
        translate_token(token)
    with pytest.raises(TranslationError):
        translate(f"flex {token}")


def test_unknown_token_fails_whole_string() -> None:
    with pytest.raises(TranslationError) as excinfo:
        translate("flex not-a-class")
    assert "not-a-class" in str(excinfo.value)


def test_translate_returns_fresh_mapping() -> None:
    first = translate("flex")
    first["display"] = "block"
    assert translate("flex") == {"display": "flex"}


def test_palette_has_full_shade_range() -> None:
    assert PALETTE["slate-50"] == "#f8fafc"
    assert PALETTE["rose-950"] == "#4c0519"
    assert PALETTE["transparent"] == "transparent"
