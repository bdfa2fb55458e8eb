"""Structured logging for the banner CLI.

Modules call ``get_logger(__name__)`` and attach context through ``extra=``
using the names in ``BANNER_FIELDS``. The entry point calls ``setup_logging``
once; CI runs use the JSON format, local runs the text format.
"""

from __future__ import annotations

import logging
import os
import socket
import sys
import time
from typing import Final, Literal

from platform_banner.json_utils import JSONValue, dump_json_str

LogFormat = Literal["json", "text"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Context attributes the banner modules attach to records.
BANNER_FIELDS: Final[tuple[str, ...]] = (
    "marker",
    "roots",
    "path",
    "source",
    "bytes",
    "icons",
    "is_playing",
    "error_code",
    "latency_ms",
)

_LEVELS: Final[dict[LogLevel, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _scalar_fields(record: logging.LogRecord, names: tuple[str, ...]) -> dict[str, JSONValue]:
    """Collect the named record attributes that hold JSON scalars."""
    found: dict[str, JSONValue] = {}
    for name in names:
        if name not in record.__dict__:
            continue
        value: object = record.__dict__[name]
        if isinstance(value, (str, int, float, bool)) or value is None:
            found[name] = value
    return found


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Carries a UTC timestamp, level, logger and message, the static fields given
    at construction, any banner fields present on the record, and the
    formatted traceback when there is one.
    """

    def __init__(self, *, static_fields: dict[str, str], extra_field_names: list[str]) -> None:
        super().__init__()
        self._static = dict(static_fields)
        self._field_names = (*BANNER_FIELDS, *extra_field_names)

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, JSONValue] = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(self._static)
        for name, value in _scalar_fields(record, self._field_names).items():
            payload.setdefault(name, value)
        if record.exc_info is not None:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dump_json_str(payload)


class TextFormatter(logging.Formatter):
    """``[time] [LEVEL] [logger] key=value ... message`` lines for terminals."""

    def __init__(self, *, extra_fields: list[str]) -> None:
        super().__init__()
        self._field_names = (*BANNER_FIELDS, *extra_fields)

    def format(self, record: logging.LogRecord) -> str:
        head = [
            f"[{self.formatTime(record, '%Y-%m-%d %H:%M:%S')}]",
            f"[{record.levelname}]",
            f"[{record.name}]",
        ]
        context = [f"{k}={v}" for k, v in _scalar_fields(record, self._field_names).items()]
        line = " ".join([*head, *context, record.getMessage()])
        if record.exc_info is not None:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _default_instance_id() -> str:
    return f"{socket.gethostname().split('.')[0]}-{os.getpid()}"


def setup_logging(
    *,
    level: LogLevel,
    format_mode: LogFormat,
    service_name: str,
    instance_id: str | None,
    extra_fields: list[str] | None,
) -> logging.Logger:
    """Point the root logger at stdout with the chosen format.

    Previous root handlers are removed, so calling this twice leaves one
    handler. ``instance_id`` defaults to ``<host>-<pid>``.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(_LEVELS[level])

    field_names = list(extra_fields) if extra_fields is not None else []
    formatter: logging.Formatter
    if format_mode == "json":
        static = {
            "service": service_name,
            "instance_id": instance_id if instance_id is not None else _default_instance_id(),
        }
        formatter = JsonFormatter(static_fields=static, extra_field_names=field_names)
    else:
        formatter = TextFormatter(extra_fields=field_names)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    # httpx logs every request at INFO
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = [
    "BANNER_FIELDS",
    "JsonFormatter",
    "LogFormat",
    "LogLevel",
    "TextFormatter",
    "get_logger",
    "setup_logging",
]
