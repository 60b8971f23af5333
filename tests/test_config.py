"""Tests for configuration constants and module side-effect behavior."""

from __future__ import annotations

import logging

from xmlquery import config, logger


def test_logger_is_package_logger() -> None:
    assert logger is logging.getLogger("xmlquery")


def test_import_has_no_side_effects() -> None:
    """Importing the package should not attach logging handlers."""
    import xmlquery.cli  # noqa: F401

    assert logger.handlers == []


def test_log_format_is_printf_style() -> None:
    record = logging.LogRecord("xmlquery", logging.WARNING, __file__, 1, "hello", None, None)
    assert logging.Formatter(config.LOG_FORMAT).format(record) == "WARNING: hello"
