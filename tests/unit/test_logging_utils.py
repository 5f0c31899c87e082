#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for CLI logging configuration."""

import logging

import pytest
from rich.logging import RichHandler

from lex2html.logging_utils import configure_logging


@pytest.mark.unit
class TestConfigureLogging:
    """Test root logger setup."""

    def test_level_from_name(self, restore_root_logger) -> None:
        """Test that level names are resolved."""
        root = configure_logging("debug")

        assert root is restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_unknown_level_name_defaults_to_info(self, restore_root_logger) -> None:
        """Test the fallback for unknown level names."""
        assert configure_logging("chatty").level == logging.INFO

    def test_trace_format(self, restore_root_logger) -> None:
        """Test that trace mode includes timestamps and logger names."""
        root = configure_logging(logging.DEBUG, trace_mode=True)
        assert "%(asctime)s" in root.handlers[0].formatter._fmt

    def test_log_file(self, restore_root_logger, tmp_path) -> None:
        """Test that a file handler receives messages."""
        log_file = tmp_path / "run.log"
        configure_logging(logging.INFO, log_file=str(log_file))
        logging.getLogger("lex2html.test").warning("written to file")

        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, restore_root_logger, tmp_path) -> None:
        """Test that a bad log path does not raise."""
        root = configure_logging(logging.INFO, log_file=str(tmp_path / "missing" / "run.log"))
        assert len(root.handlers) == 1

    def test_rich_console(self, restore_root_logger) -> None:
        """Test that rich output installs a RichHandler."""
        root = configure_logging(logging.INFO, rich_console=True)
        assert isinstance(root.handlers[0], RichHandler)
