"""Tests for logging configuration."""

import io
import logging

from tome.anchors import Anchor
from tome.logging_config import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_returns_configured_logger(self) -> None:
        stream = io.StringIO()
        logger = setup_logging(logging.INFO, stream=stream)

        assert logger.name == "tome"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_replaces_existing_handlers(self) -> None:
        setup_logging(logging.INFO, stream=io.StringIO())
        logger = setup_logging(logging.INFO, stream=io.StringIO())
        assert len(logger.handlers) == 1

    def test_format(self) -> None:
        stream = io.StringIO()
        setup_logging(logging.INFO, stream=stream)
        get_logger("test").info("hello")
        assert stream.getvalue() == "    INFO hello\n"

    def test_anchor_engine_logs_fallback(self) -> None:
        stream = io.StringIO()
        setup_logging(logging.DEBUG, stream=stream)

        Anchor(before="<", target="foo", after=">").resolve("a foo")

        assert "falling back to [2, 5)" in stream.getvalue()


class TestGetLogger:
    """Tests for get_logger function."""

    def test_child_logger(self) -> None:
        assert get_logger("anchors").name == "tome.anchors"
        assert get_logger("anchors").parent is get_logger()
