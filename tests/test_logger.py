"""Tests for logger module."""

import logging
from geocache_parser.logger import setup_logger, logger, set_debug_mode


class TestSetupLogger:
    """Tests for setup_logger function."""

    def test_default_logger(self):
        """Test creating logger with default settings."""
        test_logger = setup_logger("test_logger_default")
        assert test_logger.level == logging.INFO
        assert len(test_logger.handlers) > 0

    def test_logger_with_debug(self):
        """Test creating logger with debug enabled."""
        test_logger = setup_logger("test_logger_debug", debug=True)
        assert test_logger.level == logging.DEBUG
        assert test_logger.handlers[0].level == logging.DEBUG

    def test_logger_with_custom_level(self):
        """Test creating logger with custom level."""
        test_logger = setup_logger("test_logger_custom", level=logging.WARNING)
        assert test_logger.level == logging.WARNING

    def test_logger_avoids_duplicate_handlers(self):
        """Test that calling setup_logger twice doesn't add duplicate handlers."""
        test_logger = setup_logger("test_logger_duplicate")
        handler_count = len(test_logger.handlers)
        assert len(setup_logger("test_logger_duplicate").handlers) == handler_count

    def test_logger_handler_format(self):
        """Test that logger handler has correct formatter."""
        handler = setup_logger("test_logger_format").handlers[0]
        assert "levelname" in handler.formatter._fmt
        assert "message" in handler.formatter._fmt


class TestGlobalLogger:
    """Tests for global logger instance."""

    def test_global_logger_name(self):
        """Test global logger has correct name."""
        assert isinstance(logger, logging.Logger)
        assert logger.name == "geocache_parser"


class TestSetDebugMode:
    """Tests for set_debug_mode function."""

    def test_toggle_debug_mode(self):
        """Test toggling debug mode."""
        set_debug_mode(True)
        assert logger.level == logging.DEBUG
        for handler in logger.handlers:
            assert handler.level == logging.DEBUG

        set_debug_mode(False)
        assert logger.level == logging.INFO
        for handler in logger.handlers:
            assert handler.level == logging.INFO
