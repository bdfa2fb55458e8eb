from __future__ import annotations

import httpx


def build_async_client(
    timeout_seconds: float, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    """Build the shared async client used for track and asset fetches."""
    timeout_obj = httpx.Timeout(float(timeout_seconds))
    if transport is None:
        return httpx.AsyncClient(timeout=timeout_obj, follow_redirects=True)
    return httpx.AsyncClient(timeout=timeout_obj, transport=transport, follow_redirects=True)


__all__ = ["build_async_client"]
