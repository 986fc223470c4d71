"""
Unit tests for logging setup
"""

import logging

from trello_tools.logging_config import ConsoleFormatter, resolve_level, setup_logging


class TestResolveLevel:
    def test_default_is_info(self):
        assert resolve_level() == "INFO"

    def test_verbose_wins(self):
        assert resolve_level(verbose=True, quiet=True, level="WARNING") == "DEBUG"

    def test_quiet(self):
        assert resolve_level(quiet=True) == "ERROR"

    def test_explicit_level(self):
        assert resolve_level(level="warning") == "WARNING"

    def test_unknown_level_falls_back_to_info(self):
        assert resolve_level(level="chatty") == "INFO"


class TestConsoleFormatter:
    def make_record(self, level):
        return logging.LogRecord("trello_tools", level, __file__, 1, "hello", None, None)

    def test_info_is_plain(self):
        assert ConsoleFormatter().format(self.make_record(logging.INFO)) == "hello"

    def test_errors_are_prefixed(self):
        assert ConsoleFormatter().format(self.make_record(logging.ERROR)) == "ERROR: hello"


class TestSetupLogging:
    def test_configures_package_logger(self):
        setup_logging("DEBUG")
        logger = logging.getLogger("trello_tools")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(logging.getLogger("trello_tools").handlers) == 1

    def test_log_file_adds_file_handler(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging("INFO", str(log_file))

        logger = logging.getLogger("trello_tools")
        logger.info("archived 3 lists")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "archived 3 lists" in log_file.read_text()
