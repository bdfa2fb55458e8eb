from platform_banner.error_codes import BannerErrorCode
from platform_banner.errors import AppError, ErrorCode
from platform_banner.fragment import extract_body, parse_fragment
from platform_banner.models import TrackRecord
from platform_banner.nodes import ElementNode, FragmentNode, Node, StyleMap, TextNode
from platform_banner.render import load_render_options, render_profile
from platform_banner.styles import resolve_style
from platform_banner.substitute import substitute

__all__ = [
    "AppError",
    "BannerErrorCode",
    "ElementNode",
    "ErrorCode",
    "FragmentNode",
    "Node",
    "StyleMap",
    "TextNode",
    "TrackRecord",
    "extract_body",
    "load_render_options",
    "parse_fragment",
    "render_profile",
    "resolve_style",
    "substitute",
]
