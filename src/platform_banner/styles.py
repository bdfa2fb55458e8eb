from __future__ import annotations

from collections.abc import Callable
from typing import TypedDict

from platform_banner.logging import get_logger
from platform_banner.nodes import StyleMap
from platform_banner.tailwind import TranslationError, translate

ClassTranslator = Callable[[str], StyleMap]

_logger = get_logger(__name__)


class StyleResolution(TypedDict):
    """Outcome of folding ``class`` and ``style`` attributes together.

    ``style`` is None when neither attribute was present. ``fallback_class``
    carries the raw class string when it could not be translated.
    """

    style: StyleMap | None
    fallback_class: str | None


def parse_inline_style(style_attr: str) -> StyleMap:
    """Parse ``key: value; key: value`` declarations, skipping incomplete ones."""
    declarations: StyleMap = {}
    for chunk in style_attr.split(";"):
        key, sep, value = chunk.partition(":")
        key = key.strip()
        value = value.strip()
        if sep == "" or key == "" or value == "":
            continue
        declarations[key] = value
    return declarations


def resolve_style(
    class_attr: str | None,
    style_attr: str | None,
    *,
    translator: ClassTranslator = translate,
) -> StyleResolution:
    """Merge class-derived and inline styles; inline declarations win."""
    style: StyleMap | None = None
    fallback_class: str | None = None

    if class_attr is not None:
        try:
            style = dict(translator(class_attr))
        except TranslationError as exc:
            _logger.warning(
                "Failed to convert utility classes, keeping raw class attribute: %s",
                exc,
                extra={"source": class_attr},
            )
            fallback_class = class_attr

    if style_attr is not None:
        inline = parse_inline_style(style_attr)
        style = {**style, **inline} if style is not None else inline

    return {"style": style, "fallback_class": fallback_class}


__all__ = [
    "ClassTranslator",
    "StyleResolution",
    "parse_inline_style",
    "resolve_style",
]
