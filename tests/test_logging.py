from __future__ import annotations

import logging
import sys

from platform_banner.json_utils import load_json_str
from platform_banner.logging import JsonFormatter, TextFormatter, get_logger, setup_logging


def _record(msg: str, **extra: str | int | bool) -> logging.LogRecord:
    record = logging.LogRecord(
        name="platform_banner.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_static_and_standard_fields() -> None:
    fmt = JsonFormatter(static_fields={"service": "platform-banner"}, extra_field_names=["custom"])
    out = load_json_str(fmt.format(_record("Wrote banner", path="profile.svg", bytes=10, custom="c")))
    assert isinstance(out, dict)
    assert out["message"] == "Wrote banner"
    assert out["level"] == "INFO"
    assert out["logger"] == "platform_banner.test"
    assert out["service"] == "platform-banner"
    assert out["path"] == "profile.svg"
    assert out["bytes"] == 10
    assert out["custom"] == "c"
    assert "marker" not in out


def test_json_formatter_includes_exception() -> None:
    fmt = JsonFormatter(static_fields={}, extra_field_names=[])
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record("failed")
        record.exc_info = sys.exc_info()
    out = load_json_str(fmt.format(record))
    assert isinstance(out, dict)
    exc_text = out["exc_info"]
    assert isinstance(exc_text, str) and "RuntimeError: boom" in exc_text


def test_text_formatter_layout() -> None:
    fmt = TextFormatter(extra_fields=[])
    line = fmt.format(_record("Banner element not found", marker="name"))
    assert "[INFO]" in line
    assert "[platform_banner.test]" in line
    assert line.endswith("marker=name Banner element not found")


def test_setup_logging_installs_single_handler() -> None:
    setup_logging(
        level="DEBUG",
        format_mode="json",
        service_name="platform-banner",
        instance_id="ci-1",
        extra_fields=None,
    )
    root = setup_logging(
        level="WARNING",
        format_mode="text",
        service_name="platform-banner",
        instance_id=None,
        extra_fields=["marker"],
    )
    assert root is logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, TextFormatter)
    assert logging.getLogger("httpx").level == logging.WARNING
    assert get_logger("platform_banner.x").name == "platform_banner.x"


def test_text_formatter_extra_fields_and_non_scalars() -> None:
    fmt = TextFormatter(extra_fields=["job"])
    record = _record("Rendered", job="nightly")
    record.path = ["not", "scalar"]
    line = fmt.format(record)
    assert "job=nightly" in line
    assert "path=" not in line
