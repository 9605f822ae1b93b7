"""Tests for phaseconf.logging module."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest

from phaseconf.logging import (
    LevelWriter,
    _get_log_level,
    _init_logging,
    get_logger,
    get_writer_for_level,
    set_debug,
)


class TestGetLogLevel:
    """Tests for _get_log_level function."""

    def test_default_is_warning(self) -> None:
        """Default log level is WARNING when no env var set."""
        with patch.dict(os.environ, {}, clear=True):
            assert _get_log_level() == logging.WARNING

    def test_debug_enabled_with_1(self) -> None:
        """PHASECONF_DEBUG=1 enables debug logging."""
        with patch.dict(os.environ, {"PHASECONF_DEBUG": "1"}):
            assert _get_log_level() == logging.DEBUG

    def test_debug_enabled_case_insensitive(self) -> None:
        """PHASECONF_DEBUG values are case insensitive."""
        with patch.dict(os.environ, {"PHASECONF_DEBUG": "YES"}):
            assert _get_log_level() == logging.DEBUG

    def test_invalid_value_is_warning(self) -> None:
        """Invalid PHASECONF_DEBUG value defaults to WARNING."""
        with patch.dict(os.environ, {"PHASECONF_DEBUG": "invalid"}):
            assert _get_log_level() == logging.WARNING


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_with_phaseconf(self) -> None:
        """Logger names are prefixed with 'phaseconf' if not already."""
        logger = get_logger("my_module")
        assert logger.name == "phaseconf.my_module"

    def test_prefix_not_duplicated(self) -> None:
        """Logger names starting with 'phaseconf' are not double-prefixed."""
        logger = get_logger("phaseconf.phase")
        assert logger.name == "phaseconf.phase"

    def test_caches_loggers(self) -> None:
        """Same logger is returned for same name."""
        assert get_logger("cached_module") is get_logger("cached_module")


class TestSetDebug:
    """Tests for set_debug function."""

    def test_enable_debug(self) -> None:
        set_debug(True)
        assert logging.getLogger("phaseconf").level == logging.DEBUG

    def test_disable_debug(self) -> None:
        set_debug(False)
        assert logging.getLogger("phaseconf").level == logging.WARNING


class TestInitLogging:
    """Tests for _init_logging function."""

    def test_idempotent(self) -> None:
        """_init_logging can be called multiple times without adding handlers."""
        _init_logging()
        count = len(logging.getLogger("phaseconf").handlers)
        _init_logging()
        assert len(logging.getLogger("phaseconf").handlers) == count
        assert count >= 1


class TestLevelWriter:
    """Tests for level-scoped writers."""

    def test_returns_level_writer(self) -> None:
        writer = get_writer_for_level(logging.getLogger("phaseconf.writer"), logging.INFO)
        assert isinstance(writer, LevelWriter)
        assert writer.level == logging.INFO

    def test_each_line_is_one_record(self, caplog: pytest.LogCaptureFixture) -> None:
        """Every complete line becomes one record at the writer's level."""
        logger = logging.getLogger("phaseconf.writer.lines")
        writer = get_writer_for_level(logger, logging.ERROR)
        with caplog.at_level(logging.DEBUG, logger="phaseconf.writer.lines"):
            writer.write("first\nsecond\n")
        assert [r.getMessage() for r in caplog.records] == ["first", "second"]
        assert all(r.levelno == logging.ERROR for r in caplog.records)

    def test_partial_write_logged_immediately(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("phaseconf.writer.partial")
        writer = get_writer_for_level(logger, logging.INFO)
        with caplog.at_level(logging.INFO, logger="phaseconf.writer.partial"):
            writer.write("done without newline")
        assert [r.getMessage() for r in caplog.records] == ["done without newline"]

    def test_flush_adds_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("phaseconf.writer.flush")
        writer = get_writer_for_level(logger, logging.INFO)
        with caplog.at_level(logging.INFO, logger="phaseconf.writer.flush"):
            writer.write("no newline")
            writer.flush()
        assert [r.getMessage() for r in caplog.records] == ["no newline"]

    def test_empty_write(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("phaseconf.writer.empty")
        writer = get_writer_for_level(logger, logging.INFO)
        with caplog.at_level(logging.INFO, logger="phaseconf.writer.empty"):
            assert writer.write("") == 0
        assert caplog.records == []

    def test_write_returns_length(self) -> None:
        writer = get_writer_for_level(logging.getLogger("phaseconf.writer.len"), logging.INFO)
        assert writer.write("abc\n") == 4
