"""Tailwind utility classes to CSS declarations.

Covers the subset of Tailwind v3 that matters for a static banner: layout,
flexbox, spacing, sizing, typography, colours, borders, radius, effects and
arbitrary ``prefix-[value]`` utilities. Output keys are CSS property names.

State and responsive variants (``hover:``, ``md:`` ...) have no meaning in a
static image and are ignored. Any other unknown token fails the whole class
string with ``TranslationError``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Final

from platform_banner.nodes import StyleMap


class TranslationError(ValueError):
    """Raised when a class string contains a token that cannot be translated."""


_PALETTE_SHADES: Final[tuple[str, ...]] = (
    "50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950",
)  # fmt: skip

_PALETTE_SOURCE: Final[dict[str, str]] = {
    "slate": "f8fafc f1f5f9 e2e8f0 cbd5e1 94a3b8 64748b 475569 334155 1e293b 0f172a 020617",
    "gray": "f9fafb f3f4f6 e5e7eb d1d5db 9ca3af 6b7280 4b5563 374151 1f2937 111827 030712",
    "zinc": "fafafa f4f4f5 e4e4e7 d4d4d8 a1a1aa 71717a 52525b 3f3f46 27272a 18181b 09090b",
    "neutral": "fafafa f5f5f5 e5e5e5 d4d4d4 a3a3a3 737373 525252 404040 262626 171717 0a0a0a",
    "stone": "fafaf9 f5f5f4 e7e5e4 d6d3d1 a8a29e 78716c 57534e 44403c 292524 1c1917 0c0a09",
    "red": "fef2f2 fee2e2 fecaca fca5a5 f87171 ef4444 dc2626 b91c1c 991b1b 7f1d1d 450a0a",
    "orange": "fff7ed ffedd5 fed7aa fdba74 fb923c f97316 ea580c c2410c 9a3412 7c2d12 431407",
    "amber": "fffbeb fef3c7 fde68a fcd34d fbbf24 f59e0b d97706 b45309 92400e 78350f 451a03",
    "yellow": "fefce8 fef9c3 fef08a fde047 facc15 eab308 ca8a04 a16207 854d0e 713f12 422006",
    "lime": "f7fee7 ecfccb d9f99d bef264 a3e635 84cc16 65a30d 4d7c0f 3f6212 365314 1a2e05",
    "green": "f0fdf4 dcfce7 bbf7d0 86efac 4ade80 22c55e 16a34a 15803d 166534 14532d 052e16",
    "emerald": "ecfdf5 d1fae5 a7f3d0 6ee7b7 34d399 10b981 059669 047857 065f46 064e3b 022c22",
    "teal": "f0fdfa ccfbf1 99f6e4 5eead4 2dd4bf 14b8a6 0d9488 0f766e 115e59 134e4a 042f2e",
    "cyan": "ecfeff cffafe a5f3fc 67e8f9 22d3ee 06b6d4 0891b2 0e7490 155e75 164e63 083344",
    "sky": "f0f9ff e0f2fe bae6fd 7dd3fc 38bdf8 0ea5e9 0284c7 0369a1 075985 0c4a6e 082f49",
    "blue": "eff6ff dbeafe bfdbfe 93c5fd 60a5fa 3b82f6 2563eb 1d4ed8 1e40af 1e3a8a 172554",
    "indigo": "eef2ff e0e7ff c7d2fe a5b4fc 818cf8 6366f1 4f46e5 4338ca 3730a3 312e81 1e1b4b",
    "violet": "f5f3ff ede9fe ddd6fe c4b5fd a78bfa 8b5cf6 7c3aed 6d28d9 5b21b6 4c1d95 2e1065",
    "purple": "faf5ff f3e8ff e9d5ff d8b4fe c084fc a855f7 9333ea 7e22ce 6b21a8 581c87 3b0764",
    "fuchsia": "fdf4ff fae8ff f5d0fe f0abfc e879f9 d946ef c026d3 a21caf 86198f 701a75 4a044e",
    "pink": "fdf2f8 fce7f3 fbcfe8 f9a8d4 f472b6 ec4899 db2777 be185d 9d174d 831843 500724",
    "rose": "fff1f2 ffe4e6 fecdd3 fda4af fb7185 f43f5e e11d48 be123c 9f1239 881337 4c0519",
}


def _build_palette() -> dict[str, str]:
    palette: dict[str, str] = {
        "white": "#ffffff",
        "black": "#000000",
        "transparent": "transparent",
        "current": "currentColor",
    }
    for name, hexes in _PALETTE_SOURCE.items():
        for shade, hex_value in zip(_PALETTE_SHADES, hexes.split(), strict=True):
            palette[f"{name}-{shade}"] = "#" + hex_value
    return palette


PALETTE: Final[dict[str, str]] = _build_palette()

_FONT_SIZES: Final[dict[str, tuple[str, str]]] = {
    "xs": ("0.75rem", "1rem"),
    "sm": ("0.875rem", "1.25rem"),
    "base": ("1rem", "1.5rem"),
    "lg": ("1.125rem", "1.75rem"),
    "xl": ("1.25rem", "1.75rem"),
    "2xl": ("1.5rem", "2rem"),
    "3xl": ("1.875rem", "2.25rem"),
    "4xl": ("2.25rem", "2.5rem"),
    "5xl": ("3rem", "1"),
    "6xl": ("3.75rem", "1"),
    "7xl": ("4.5rem", "1"),
    "8xl": ("6rem", "1"),
    "9xl": ("8rem", "1"),
}

_FONT_WEIGHTS: Final[dict[str, str]] = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

_RADII: Final[dict[str, str]] = {
    "none": "0px",
    "sm": "0.125rem",
    "": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

_RADIUS_SIDES: Final[dict[str, tuple[str, ...]]] = {
    "": ("border-radius",),
    "t": ("border-top-left-radius", "border-top-right-radius"),
    "r": ("border-top-right-radius", "border-bottom-right-radius"),
    "b": ("border-bottom-right-radius", "border-bottom-left-radius"),
    "l": ("border-top-left-radius", "border-bottom-left-radius"),
    "tl": ("border-top-left-radius",),
    "tr": ("border-top-right-radius",),
    "br": ("border-bottom-right-radius",),
    "bl": ("border-bottom-left-radius",),
}

_SHADOWS: Final[dict[str, str]] = {
    "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
    "none": "0 0 #0000",
}

_MAX_WIDTHS: Final[dict[str, str]] = {
    "none": "none",
    "xs": "20rem",
    "sm": "24rem",
    "md": "28rem",
    "lg": "32rem",
    "xl": "36rem",
    "2xl": "42rem",
    "3xl": "48rem",
    "4xl": "56rem",
    "5xl": "64rem",
    "6xl": "72rem",
    "7xl": "80rem",
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
    "prose": "65ch",
}

_LEADING: Final[dict[str, str]] = {
    "none": "1",
    "tight": "1.25",
    "snug": "1.375",
    "normal": "1.5",
    "relaxed": "1.625",
    "loose": "2",
}

_TRACKING: Final[dict[str, str]] = {
    "tighter": "-0.05em",
    "tight": "-0.025em",
    "normal": "0em",
    "wide": "0.025em",
    "wider": "0.05em",
    "widest": "0.1em",
}

_STATIC: Final[dict[str, StyleMap]] = {
    "block": {"display": "block"},
    "inline-block": {"display": "inline-block"},
    "inline": {"display": "inline"},
    "flex": {"display": "flex"},
    "inline-flex": {"display": "inline-flex"},
    "grid": {"display": "grid"},
    "contents": {"display": "contents"},
    "hidden": {"display": "none"},
    "flex-row": {"flex-direction": "row"},
    "flex-row-reverse": {"flex-direction": "row-reverse"},
    "flex-col": {"flex-direction": "column"},
    "flex-col-reverse": {"flex-direction": "column-reverse"},
    "flex-wrap": {"flex-wrap": "wrap"},
    "flex-wrap-reverse": {"flex-wrap": "wrap-reverse"},
    "flex-nowrap": {"flex-wrap": "nowrap"},
    "flex-1": {"flex": "1 1 0%"},
    "flex-auto": {"flex": "1 1 auto"},
    "flex-initial": {"flex": "0 1 auto"},
    "flex-none": {"flex": "none"},
    "grow": {"flex-grow": "1"},
    "grow-0": {"flex-grow": "0"},
    "shrink": {"flex-shrink": "1"},
    "shrink-0": {"flex-shrink": "0"},
    "items-start": {"align-items": "flex-start"},
    "items-end": {"align-items": "flex-end"},
    "items-center": {"align-items": "center"},
    "items-baseline": {"align-items": "baseline"},
    "items-stretch": {"align-items": "stretch"},
    "justify-start": {"justify-content": "flex-start"},
    "justify-end": {"justify-content": "flex-end"},
    "justify-center": {"justify-content": "center"},
    "justify-between": {"justify-content": "space-between"},
    "justify-around": {"justify-content": "space-around"},
    "justify-evenly": {"justify-content": "space-evenly"},
    "self-auto": {"align-self": "auto"},
    "self-start": {"align-self": "flex-start"},
    "self-end": {"align-self": "flex-end"},
    "self-center": {"align-self": "center"},
    "self-stretch": {"align-self": "stretch"},
    "content-start": {"align-content": "flex-start"},
    "content-end": {"align-content": "flex-end"},
    "content-center": {"align-content": "center"},
    "content-between": {"align-content": "space-between"},
    "static": {"position": "static"},
    "relative": {"position": "relative"},
    "absolute": {"position": "absolute"},
    "fixed": {"position": "fixed"},
    "sticky": {"position": "sticky"},
    "text-left": {"text-align": "left"},
    "text-center": {"text-align": "center"},
    "text-right": {"text-align": "right"},
    "text-justify": {"text-align": "justify"},
    "italic": {"font-style": "italic"},
    "not-italic": {"font-style": "normal"},
    "uppercase": {"text-transform": "uppercase"},
    "lowercase": {"text-transform": "lowercase"},
    "capitalize": {"text-transform": "capitalize"},
    "normal-case": {"text-transform": "none"},
    "underline": {"text-decoration-line": "underline"},
    "line-through": {"text-decoration-line": "line-through"},
    "no-underline": {"text-decoration-line": "none"},
    "truncate": {"overflow": "hidden", "text-overflow": "ellipsis", "white-space": "nowrap"},
    "text-ellipsis": {"text-overflow": "ellipsis"},
    "text-clip": {"text-overflow": "clip"},
    "whitespace-normal": {"white-space": "normal"},
    "whitespace-nowrap": {"white-space": "nowrap"},
    "whitespace-pre": {"white-space": "pre"},
    "whitespace-pre-line": {"white-space": "pre-line"},
    "whitespace-pre-wrap": {"white-space": "pre-wrap"},
    "break-words": {"overflow-wrap": "break-word"},
    "break-all": {"word-break": "break-all"},
    "font-sans": {
        "font-family": "ui-sans-serif, system-ui, sans-serif",
    },
    "font-serif": {"font-family": "ui-serif, Georgia, serif"},
    "font-mono": {"font-family": "ui-monospace, SFMono-Regular, Menlo, monospace"},
    "overflow-hidden": {"overflow": "hidden"},
    "overflow-visible": {"overflow": "visible"},
    "overflow-scroll": {"overflow": "scroll"},
    "overflow-auto": {"overflow": "auto"},
    "object-cover": {"object-fit": "cover"},
    "object-contain": {"object-fit": "contain"},
    "object-fill": {"object-fit": "fill"},
    "object-none": {"object-fit": "none"},
    "object-center": {"object-position": "center"},
    "bg-cover": {"background-size": "cover"},
    "bg-contain": {"background-size": "contain"},
    "bg-center": {"background-position": "center"},
    "bg-no-repeat": {"background-repeat": "no-repeat"},
    "border-solid": {"border-style": "solid"},
    "border-dashed": {"border-style": "dashed"},
    "border-dotted": {"border-style": "dotted"},
    "border-double": {"border-style": "double"},
    "border-none": {"border-style": "none"},
}

_NUMBER_RE: Final[re.Pattern[str]] = re.compile(r"^[0-9]+(\.[0-9]+)?$")
_FRACTION_RE: Final[re.Pattern[str]] = re.compile(r"^([0-9]+)/([0-9]+)$")
_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"^[0-9]+$")
_COLOR_LITERAL_RE: Final[re.Pattern[str]] = re.compile(r"^(#|rgb|hsl|oklch|color\()")

_Handler = Callable[[str, bool], StyleMap | None]


def _fmt(value: float) -> str:
    return f"{value:g}"


def _is_integer(value: str) -> bool:
    return _INTEGER_RE.match(value) is not None


def _arbitrary(value: str) -> str | None:
    if len(value) > 2 and value.startswith("[") and value.endswith("]"):
        return value[1:-1].replace("_", " ")
    return None


def _negate(value: str, negative: bool) -> str:
    if not negative:
        return value
    if value.startswith("-"):
        return value[1:]
    if value in ("0", "0px"):
        return value
    return "-" + value


def _spacing(value: str) -> str | None:
    arbitrary = _arbitrary(value)
    if arbitrary is not None:
        return arbitrary
    if value == "px":
        return "1px"
    if value == "0":
        return "0px"
    if _NUMBER_RE.match(value):
        return _fmt(float(value) * 0.25) + "rem"
    return None


def _size(value: str, axis: str) -> str | None:
    keywords = {
        "auto": "auto",
        "full": "100%",
        "min": "min-content",
        "max": "max-content",
        "fit": "fit-content",
        "screen": "100vw" if axis == "w" else "100vh",
    }
    if value in keywords:
        return keywords[value]
    fraction = _FRACTION_RE.match(value)
    if fraction is not None:
        numerator, denominator = int(fraction.group(1)), int(fraction.group(2))
        if denominator == 0:
            return None
        return _fmt(round(numerator / denominator * 100, 6)) + "%"
    return _spacing(value)


def _color(value: str) -> str | None:
    arbitrary = _arbitrary(value)
    if arbitrary is not None:
        return arbitrary
    base, sep, alpha = value.partition("/")
    color = PALETTE.get(base)
    if color is None:
        return None
    if sep == "":
        return color
    if not _is_integer(alpha) or not color.startswith("#"):
        return None
    red, green, blue = int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)
    return f"rgb({red} {green} {blue} / {_fmt(int(alpha) / 100)})"


def _sides(prefix: str, property_name: str) -> dict[str, tuple[str, ...]]:
    return {
        prefix: (property_name,),
        prefix + "x": (f"{property_name}-left", f"{property_name}-right"),
        prefix + "y": (f"{property_name}-top", f"{property_name}-bottom"),
        prefix + "t": (f"{property_name}-top",),
        prefix + "r": (f"{property_name}-right",),
        prefix + "b": (f"{property_name}-bottom",),
        prefix + "l": (f"{property_name}-left",),
    }


_PADDING_SIDES: Final[dict[str, tuple[str, ...]]] = _sides("p", "padding")
_MARGIN_SIDES: Final[dict[str, tuple[str, ...]]] = _sides("m", "margin")
_INSET_SIDES: Final[dict[str, tuple[str, ...]]] = {
    "inset": ("top", "right", "bottom", "left"),
    "inset-x": ("left", "right"),
    "inset-y": ("top", "bottom"),
    "top": ("top",),
    "right": ("right",),
    "bottom": ("bottom",),
    "left": ("left",),
}


def _fill(properties: tuple[str, ...], value: str) -> StyleMap:
    return {prop: value for prop in properties}


def _handle_padding(prefix: str, value: str, negative: bool) -> StyleMap | None:
    resolved = _spacing(value)
    if resolved is None or negative:
        return None
    return _fill(_PADDING_SIDES[prefix], resolved)


def _handle_margin(prefix: str, value: str, negative: bool) -> StyleMap | None:
    resolved = "auto" if value == "auto" else _spacing(value)
    if resolved is None:
        return None
    return _fill(_MARGIN_SIDES[prefix], _negate(resolved, negative))


def _handle_inset(prefix: str, value: str, negative: bool) -> StyleMap | None:
    resolved = _size(value, "w")
    if resolved is None:
        return None
    return _fill(_INSET_SIDES[prefix], _negate(resolved, negative))


def _handle_gap(prefix: str, value: str, negative: bool) -> StyleMap | None:
    resolved = _spacing(value)
    if resolved is None or negative:
        return None
    properties = {"gap": "gap", "gap-x": "column-gap", "gap-y": "row-gap"}
    return {properties[prefix]: resolved}


def _handle_size(prefix: str, value: str, negative: bool) -> StyleMap | None:
    if negative:
        return None
    if prefix == "max-w":
        named = _MAX_WIDTHS.get(value)
        if named is not None:
            return {"max-width": named}
    axis = "w" if prefix.endswith("w") else "h"
    resolved = _size(value, axis)
    if resolved is None:
        return None
    properties = {
        "w": "width",
        "h": "height",
        "min-w": "min-width",
        "min-h": "min-height",
        "max-w": "max-width",
        "max-h": "max-height",
    }
    if prefix == "size":
        return {"width": resolved, "height": resolved}
    return {properties[prefix]: resolved}


def _handle_text(value: str, negative: bool) -> StyleMap | None:
    if negative:
        return None
    size = _FONT_SIZES.get(value)
    if size is not None:
        return {"font-size": size[0], "line-height": size[1]}
    arbitrary = _arbitrary(value)
    if arbitrary is not None and not _COLOR_LITERAL_RE.match(arbitrary):
        return {"font-size": arbitrary}
    color = _color(value)
    if color is None:
        return None
    return {"color": color}


def _handle_font(value: str, negative: bool) -> StyleMap | None:
    weight = _FONT_WEIGHTS.get(value)
    if weight is None or negative:
        arbitrary = _arbitrary(value)
        if arbitrary is None or negative:
            return None
        if _is_integer(arbitrary):
            return {"font-weight": arbitrary}
        return {"font-family": arbitrary}
    return {"font-weight": weight}


def _handle_bg(value: str, negative: bool) -> StyleMap | None:
    if negative:
        return None
    arbitrary = _arbitrary(value)
    if arbitrary is not None and arbitrary.startswith("url("):
        return {"background-image": arbitrary}
    color = _color(value)
    if color is None:
        return None
    return {"background-color": color}


def _handle_border(value: str, negative: bool) -> StyleMap | None:
    if negative:
        return None
    side, _, rest = value.partition("-")
    edges = {
        "x": ("left", "right"),
        "y": ("top", "bottom"),
        "t": ("top",),
        "r": ("right",),
        "b": ("bottom",),
        "l": ("left",),
    }
    if side in edges:
        width = "1px" if rest == "" else (rest + "px" if _is_integer(rest) else _arbitrary(rest))
        if width is None:
            return None
        return {f"border-{edge}-width": width for edge in edges[side]}
    if _is_integer(value):
        return {"border-width": value + "px"}
    arbitrary = _arbitrary(value)
    if arbitrary is not None and not _COLOR_LITERAL_RE.match(arbitrary):
        return {"border-width": arbitrary}
    color = _color(value)
    if color is not None:
        return {"border-color": color}
    return None


def _handle_rounded(value: str, negative: bool) -> StyleMap | None:
    if negative:
        return None
    side, _, size = value.partition("-")
    if side not in _RADIUS_SIDES or side == "":
        side, size = "", value
    radius = _RADII.get(size)
    if radius is None:
        radius = _arbitrary(size)
    if radius is None:
        return None
    return _fill(_RADIUS_SIDES[side], radius)


def _handle_leading(value: str, negative: bool) -> StyleMap | None:
    if negative:
        return None
    named = _LEADING.get(value)
    if named is not None:
        return {"line-height": named}
    resolved = _spacing(value)
    if resolved is None:
        return None
    return {"line-height": resolved}


def _handle_tracking(value: str, negative: bool) -> StyleMap | None:
    resolved = _TRACKING.get(value)
    if resolved is None:
        resolved = _arbitrary(value)
    if resolved is None:
        return None
    return {"letter-spacing": _negate(resolved, negative)}


def _handle_opacity(value: str, negative: bool) -> StyleMap | None:
    if negative or not _is_integer(value):
        return None
    return {"opacity": _fmt(int(value) / 100)}


def _handle_z(value: str, negative: bool) -> StyleMap | None:
    if value == "auto":
        return {"z-index": "auto"}
    if not _is_integer(value):
        return None
    return {"z-index": _negate(value, negative)}


def _handle_shadow(value: str, negative: bool) -> StyleMap | None:
    shadow = _SHADOWS.get(value)
    if shadow is None or negative:
        return None
    return {"box-shadow": shadow}


def _bind(handler: Callable[[str, str, bool], StyleMap | None], prefix: str) -> _Handler:
    def _bound(value: str, negative: bool) -> StyleMap | None:
        return handler(prefix, value, negative)

    return _bound


def _build_prefix_handlers() -> list[tuple[str, _Handler]]:
    handlers: list[tuple[str, _Handler]] = []
    for prefix in _PADDING_SIDES:
        handlers.append((prefix, _bind(_handle_padding, prefix)))
    for prefix in _MARGIN_SIDES:
        handlers.append((prefix, _bind(_handle_margin, prefix)))
    for prefix in _INSET_SIDES:
        handlers.append((prefix, _bind(_handle_inset, prefix)))
    for prefix in ("gap", "gap-x", "gap-y"):
        handlers.append((prefix, _bind(_handle_gap, prefix)))
    for prefix in ("w", "h", "min-w", "min-h", "max-w", "max-h", "size"):
        handlers.append((prefix, _bind(_handle_size, prefix)))
    handlers.extend(
        [
            ("text", _handle_text),
            ("font", _handle_font),
            ("bg", _handle_bg),
            ("leading", _handle_leading),
            ("tracking", _handle_tracking),
            ("opacity", _handle_opacity),
            ("z", _handle_z),
        ]
    )
    # Longest prefixes first so "gap-x-2" is not read as "gap" with value "x-2".
    handlers.sort(key=lambda item: len(item[0]), reverse=True)
    return handlers


_PREFIX_HANDLERS: Final[list[tuple[str, _Handler]]] = _build_prefix_handlers()


def _translate_token(token: str) -> StyleMap:
    static = _STATIC.get(token)
    if static is not None:
        return dict(static)

    # Bare "border", "rounded" and "shadow" carry default values.
    if token in ("border", "rounded", "shadow"):
        bare = {
            "border": {"border-width": "1px"},
            "rounded": {"border-radius": _RADII[""]},
            "shadow": {"box-shadow": _SHADOWS[""]},
        }
        return dict(bare[token])

    negative = token.startswith("-")
    body = token[1:] if negative else token

    for prefix, handler_name in (
        ("border-", _handle_border),
        ("rounded-", _handle_rounded),
        ("shadow-", _handle_shadow),
    ):
        if body.startswith(prefix):
            result = handler_name(body[len(prefix) :], negative)
            if result is None:
                break
            return result
    else:
        for prefix, handler in _PREFIX_HANDLERS:
            if not body.startswith(prefix + "-"):
                continue
            result = handler(body[len(prefix) + 1 :], negative)
            if result is not None:
                return result

    raise TranslationError(f"Unsupported utility class: {token!r}")


def translate_token(token: str) -> StyleMap:
    """Translate a single utility class; raises ``TranslationError`` when unknown."""
    try:
        return _translate_token(token)
    except TranslationError:
        raise
    except ValueError as exc:
        raise TranslationError(f"Invalid utility class value: {token!r}") from exc


def translate(class_string: str) -> StyleMap:
    """Translate a whitespace-separated class string into one style mapping.

    Later tokens override earlier ones for the same property.
    """
    style: StyleMap = {}
    for token in class_string.split():
        if ":" in token and not token.startswith("["):
            continue
        style.update(translate_token(token))
    return style


__all__ = ["PALETTE", "TranslationError", "translate", "translate_token"]
