from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Literal

from platform_banner import _test_hooks
from platform_banner.banner_svg import update_banner_file
from platform_banner.config import BannerSettings, load_banner_settings
from platform_banner.errors import AppError
from platform_banner.http_client import build_async_client
from platform_banner.logging import get_logger, setup_logging
from platform_banner.render import render_profile
from platform_banner.services.lastfm import lastfm_client

Command = Literal["render", "banner"]

_USAGE = "usage: platform-banner [render|banner] [--template PATH] [--banner PATH] [--out PATH] [-v]\n"


class _UsageError(ValueError):
    pass


class _Args:
    def __init__(self) -> None:
        self.command: Command = "render"
        self.template: str | None = None
        self.banner: str | None = None
        self.out: str | None = None
        self.verbose = False


def _parse_args(argv: Sequence[str]) -> _Args:
    args = _Args()
    tokens = list(argv)
    idx = 0
    if tokens and not tokens[0].startswith("-"):
        command = tokens[0]
        if command == "render":
            args.command = "render"
        elif command == "banner":
            args.command = "banner"
        else:
            raise _UsageError(f"unknown command: {command}")
        idx = 1
    while idx < len(tokens):
        token = tokens[idx]
        if token in ("--template", "--banner", "--out"):
            if idx + 1 >= len(tokens):
                raise _UsageError(f"{token} requires a value")
            value = tokens[idx + 1]
            if token == "--template":
                args.template = value
            elif token == "--banner":
                args.banner = value
            else:
                args.out = value
            idx += 2
        elif token in ("-v", "--verbose"):
            args.verbose = True
            idx += 1
        else:
            raise _UsageError(f"unknown argument: {token}")
    return args


def _apply_overrides(settings: BannerSettings, args: _Args) -> BannerSettings:
    out: BannerSettings = {**settings}
    if args.template is not None:
        out["template_path"] = args.template
    if args.banner is not None:
        out["banner_path"] = args.banner
    if args.out is not None:
        out["output_path"] = args.out
    if args.verbose:
        out["log_level"] = "DEBUG"
    return out


async def _run(command: Command, settings: BannerSettings) -> tuple[str, bytes]:
    async with build_async_client(
        settings["http_timeout_seconds"], transport=_test_hooks.http_transport
    ) as client:
        lastfm = lastfm_client(
            client=client, endpoint=settings["lastfm_endpoint"], user=settings["lastfm_user"]
        )
        if command == "banner":
            updated = await update_banner_file(settings, client=client, lastfm=lastfm)
            return settings["banner_path"], updated.encode("utf-8")
        svg = await render_profile(settings, client=client, lastfm=lastfm)
        return settings["output_path"], svg


def main(argv: Sequence[str] | None = None) -> int:
    try:
        args = _parse_args(argv if argv is not None else sys.argv[1:])
    except _UsageError as exc:
        sys.stderr.write(f"{exc}\n{_USAGE}")
        return 2

    try:
        settings = _apply_overrides(load_banner_settings(), args)
    except AppError as exc:
        sys.stderr.write(f"configuration error: {exc.message}\n")
        return 1

    setup_logging(
        level=settings["log_level"],
        format_mode=settings["log_format"],
        service_name="platform-banner",
        instance_id=None,
        extra_fields=None,
    )
    logger = get_logger(__name__)

    try:
        path, payload = asyncio.run(_run(args.command, settings))
    except AppError as exc:
        logger.error(
            "Banner generation failed, exiting: %s",
            exc.message,
            extra={"error_code": exc.code.value},
        )
        return 1

    try:
        Path(path).write_bytes(payload)
    except OSError as exc:
        logger.error("Cannot write banner, exiting: %s", exc, extra={"path": path})
        return 1
    logger.info("Wrote banner", extra={"path": path, "bytes": len(payload)})
    return 0


def run() -> None:
    raise SystemExit(main(None))


__all__ = ["main", "run"]
