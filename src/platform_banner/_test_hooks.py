"""Test hooks for platform_banner - allows injecting test dependencies.

Production code calls these module-level callables directly; tests assign
fakes before running the code under test and ``testing.reset_hooks`` restores
the defaults.

Usage in tests:
    from platform_banner import _test_hooks
    _test_hooks.get_env = lambda key: {"BANNER_LASTFM_USER": "someone"}.get(key)
    _test_hooks.http_transport = httpx.MockTransport(handler)
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import httpx


def _default_get_env(key: str) -> str | None:
    """Production implementation - reads from os.environ."""
    return os.getenv(key)


def _default_read_bytes(path: str) -> bytes:
    """Production implementation - reads a file from disk."""
    return Path(path).read_bytes()


# Hook for environment variable access.
get_env: Callable[[str], str | None] = _default_get_env

# Hook for local template and asset reads.
read_bytes: Callable[[str], bytes] = _default_read_bytes

# Transport for the CLI's HTTP client; None means the real network.
http_transport: httpx.AsyncBaseTransport | None = None


def reset() -> None:
    """Restore production implementations."""
    global get_env, read_bytes, http_transport
    get_env = _default_get_env
    read_bytes = _default_read_bytes
    http_transport = None


__all__ = ["get_env", "http_transport", "read_bytes", "reset"]
