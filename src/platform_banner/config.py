from __future__ import annotations

from typing import Final, TypedDict

from platform_banner import _test_hooks
from platform_banner.errors import AppError, ErrorCode
from platform_banner.logging import LogFormat, LogLevel

DEFAULT_LASTFM_ENDPOINT: Final[str] = "https://lastfm-last-played.biancarosa.com.br"
# Last.fm serves this image hash when an album has no artwork.
DEFAULT_PLACEHOLDER_SENTINEL: Final[str] = "2a96cbd8b46e442fc41c2b86b821562f"


class BannerSettings(TypedDict):
    lastfm_user: str
    lastfm_endpoint: str
    template_path: str
    banner_path: str
    output_path: str
    width: int
    height: int
    placeholder_sentinel: str
    placeholder_path: str
    play_icon_path: str
    pause_icon_path: str
    http_timeout_seconds: float
    log_level: LogLevel
    log_format: LogFormat


def _optional_env_str(key: str) -> str | None:
    value = _test_hooks.get_env(key)
    if value is None:
        return None
    trimmed = value.strip()
    if trimmed == "":
        return None
    return trimmed


def _require_env_str(key: str) -> str:
    value = _optional_env_str(key)
    if value is None:
        raise AppError(code=ErrorCode.CONFIG_ERROR, message=f"Missing required env var: {key}")
    return value


def _parse_str(key: str, default: str) -> str:
    val = _optional_env_str(key)
    return val if val is not None else default


def _parse_positive_int(key: str, default: int) -> int:
    val = _optional_env_str(key)
    if val is None:
        return default
    if not val.isdigit() or int(val) == 0:
        raise AppError(
            code=ErrorCode.CONFIG_ERROR,
            message=f"Env var {key} must be a positive integer, got {val!r}",
        )
    return int(val)


def _parse_float(key: str, default: float) -> float:
    val = _optional_env_str(key)
    if val is None:
        return default
    try:
        parsed = float(val)
    except ValueError as exc:
        raise AppError(
            code=ErrorCode.CONFIG_ERROR, message=f"Env var {key} must be a number, got {val!r}"
        ) from exc
    if parsed <= 0:
        raise AppError(code=ErrorCode.CONFIG_ERROR, message=f"Env var {key} must be positive")
    return parsed


def _parse_log_level(key: str, default: LogLevel) -> LogLevel:
    val = _optional_env_str(key)
    if val is None:
        return default
    upper_val = val.upper()
    if upper_val == "DEBUG":
        return "DEBUG"
    if upper_val == "INFO":
        return "INFO"
    if upper_val == "WARNING":
        return "WARNING"
    if upper_val == "ERROR":
        return "ERROR"
    if upper_val == "CRITICAL":
        return "CRITICAL"
    return default


def _parse_log_format(key: str, default: LogFormat) -> LogFormat:
    val = _optional_env_str(key)
    if val is None:
        return default
    lowered = val.lower()
    if lowered == "json":
        return "json"
    if lowered == "text":
        return "text"
    raise AppError(
        code=ErrorCode.CONFIG_ERROR,
        message=f"Env var {key} must be 'json' or 'text', got {val!r}",
    )


def load_banner_settings() -> BannerSettings:
    """Load banner settings from environment variables."""
    return {
        "lastfm_user": _require_env_str("BANNER_LASTFM_USER"),
        "lastfm_endpoint": _parse_str("BANNER_LASTFM_ENDPOINT", DEFAULT_LASTFM_ENDPOINT).rstrip(
            "/"
        ),
        "template_path": _parse_str("BANNER_TEMPLATE_PATH", "test.html"),
        "banner_path": _parse_str("BANNER_SVG_PATH", "banner.svg"),
        "output_path": _parse_str("BANNER_OUTPUT_PATH", "profile.svg"),
        "width": _parse_positive_int("BANNER_WIDTH", 850),
        "height": _parse_positive_int("BANNER_HEIGHT", 510),
        "placeholder_sentinel": _parse_str(
            "BANNER_PLACEHOLDER_SENTINEL", DEFAULT_PLACEHOLDER_SENTINEL
        ),
        "placeholder_path": _parse_str(
            "BANNER_PLACEHOLDER_PATH", "public/album-placeholder.webp"
        ),
        "play_icon_path": _parse_str("BANNER_PLAY_ICON", "public/now-playing.gif"),
        "pause_icon_path": _parse_str("BANNER_PAUSE_ICON", "public/last-played.svg"),
        "http_timeout_seconds": _parse_float("BANNER_HTTP_TIMEOUT", 15.0),
        "log_level": _parse_log_level("BANNER_LOG_LEVEL", "INFO"),
        "log_format": _parse_log_format("BANNER_LOG_FORMAT", "text"),
    }


__all__ = [
    "DEFAULT_LASTFM_ENDPOINT",
    "DEFAULT_PLACEHOLDER_SENTINEL",
    "BannerSettings",
    "load_banner_settings",
]
