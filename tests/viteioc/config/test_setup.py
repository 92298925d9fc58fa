import logging

from viteioc.config.setup import setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self):
        """Test setup_logging with default parameters."""
        logger = setup_logging()

        assert logger.name == "viteioc"
        assert logger.level == logging.INFO

    def test_setup_logging_root(self):
        """Test setup_logging with no name configures the root logger."""
        logger = setup_logging(name=None, level=logging.WARNING)

        assert logger is logging.getLogger()

    def test_setup_logging_with_level(self):
        """Test setup_logging with specific level."""
        logger = setup_logging(name="viteioc_level_test", level=logging.DEBUG)

        assert logger.level == logging.DEBUG

    def test_setup_logging_handler_has_formatter(self):
        """Test setup_logging installs a formatted StreamHandler."""
        logger = setup_logging(name="viteioc_formatter_test", fmt="%(message)s")

        stream_handlers = [
            h for h in logger.handlers
            if isinstance(h, logging.StreamHandler)
        ]
        assert len(stream_handlers) == 1
        assert stream_handlers[0].formatter._fmt == "%(message)s"

    def test_setup_logging_does_not_duplicate_handlers(self):
        """Test setup_logging doesn't add duplicate handlers."""
        logger_name = "viteioc_no_dup_test"

        handler_count = len(setup_logging(name=logger_name).handlers)
        logger = setup_logging(name=logger_name)

        assert len(logger.handlers) == handler_count
