from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from platform_banner.logging import JsonFormatter, TextFormatter
from platform_banner.testing import reset_hooks as _reset_hooks


@pytest.fixture(autouse=True)
def reset_hooks_fixture() -> Generator[None, None, None]:
    """Reset all test hooks to production defaults before and after each test."""
    _reset_hooks()
    yield
    _reset_hooks()


@pytest.fixture(autouse=True)
def drop_configured_handlers() -> Generator[None, None, None]:
    """Remove handlers installed by setup_logging and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, (JsonFormatter, TextFormatter)):
            root.removeHandler(handler)
    root.setLevel(level)
