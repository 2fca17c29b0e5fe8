import io
import logging

import pytest

from traderfmt import logging_setup
from traderfmt.logging_setup import configure_logging, get_logger
from traderfmt.parser import parse


def test_get_logger_is_silent_until_configured() -> None:
    logger = get_logger("traderfmt.parser.grammar")

    assert logger.name == "traderfmt.parser.grammar"
    assert any(isinstance(h, logging.NullHandler) for h in logging.getLogger("traderfmt").handlers)


def test_configured_debug_logging_reports_skipped_content() -> None:
    stream = io.StringIO()
    configure_logging("DEBUG", stream=stream)

    parse("<OpenFile> a\n@@\n<FileEnd> b\n")

    output = stream.getvalue()
    assert "Skipped unrecognised content at 2:1: '@@'" in output
    assert "Parsed 2 top-level token(s), skipped 2 character(s)" in output


def test_configure_logging_runs_once() -> None:
    first = io.StringIO()
    configure_logging("DEBUG", stream=first)
    configure_logging("ERROR", stream=io.StringIO())

    (handler,) = logging.getLogger("traderfmt").handlers
    assert handler.level == logging.DEBUG


def test_level_falls_back_to_environment(monkeypatch) -> None:
    monkeypatch.setenv("TRADERFMT_LOG_LEVEL", "info")
    assert logging_setup._parse_level(None) == logging.INFO

    monkeypatch.delenv("TRADERFMT_LOG_LEVEL")
    assert logging_setup._parse_level(None) == logging.WARNING


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("LOUD")
