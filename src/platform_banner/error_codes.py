from __future__ import annotations

from platform_banner.errors import ErrorCodeBase


class BannerErrorCode(ErrorCodeBase):
    """Domain-specific error codes for banner rendering."""

    TRACK_UNAVAILABLE = "TRACK_UNAVAILABLE"
    INVALID_TEMPLATE = "INVALID_TEMPLATE"
    ASSET_UNAVAILABLE = "ASSET_UNAVAILABLE"


__all__ = ["BannerErrorCode"]
