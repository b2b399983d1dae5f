"""Tests for logging configuration."""

import logging
import logging.handlers
import sys
from unittest.mock import patch

import pytest

from git_prompt.utils.logging_config import ColoredFormatter, setup_logging
from git_prompt.utils.path_manager import PathManager


@pytest.fixture
def log_dir(tmp_path, restore_logging):
    directory = tmp_path / "logs"
    with patch.object(PathManager, "get_log_dir", return_value=directory):
        yield directory


def handler_types(logger):
    return [type(handler) for handler in logger.handlers]


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_file_logging_is_lazy(self, log_dir):
        setup_logging(level="WARNING", log_to_file=True)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.WARNING
        assert logging.NullHandler in handler_types(root_logger)
        assert logging.handlers.RotatingFileHandler in handler_types(root_logger)
        assert log_dir.is_dir()
        assert not (log_dir / "git_prompt.log").exists()

        logging.getLogger("git_prompt.test").warning("git timed out")
        for handler in root_logger.handlers:
            handler.flush()

        assert "git timed out" in (log_dir / "git_prompt.log").read_text()

    def test_undecodable_text_is_escaped_in_log_file(self, log_dir, capsys):
        setup_logging(level="WARNING", log_to_file=True)

        logging.getLogger("git_prompt.test").warning("bad name caf\udce9.txt")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "caf\\udce9.txt" in (log_dir / "git_prompt.log").read_text()
        assert capsys.readouterr().err == ""

    def test_git_queries_log(self, log_dir):
        setup_logging(level="DEBUG", log_to_file=True)

        logging.getLogger("git_prompt.services.git_service").debug("Executing git")
        for handler in logging.getLogger("git_prompt.services.git_service").handlers:
            handler.flush()

        assert "Executing git" in (log_dir / "git_queries.log").read_text()

    def test_never_writes_to_stdout(self, log_dir, capsys):
        setup_logging(level="DEBUG", log_to_file=False, log_to_console=True)

        logging.getLogger("git_prompt.test").error("visible on stderr only")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "visible on stderr only" in captured.err

    def test_without_handlers_nothing_reaches_last_resort(self, log_dir, capsys):
        setup_logging(level="WARNING", log_to_file=False)

        logging.getLogger("git_prompt.test").error("quiet")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "quiet" not in captured.err

    def test_unwritable_log_dir_disables_file_logging(self, tmp_path, restore_logging):
        blocker = tmp_path / "file"
        blocker.write_text("")
        with patch.object(PathManager, "get_log_dir", return_value=blocker / "logs"):
            setup_logging(level="WARNING", log_to_file=True)

        assert logging.handlers.RotatingFileHandler not in handler_types(
            logging.getLogger()
        )

    def test_invalid_level_defaults_to_warning(self, log_dir):
        setup_logging(level="chatty", log_to_file=False)
        assert logging.getLogger().level == logging.WARNING


class TestColoredFormatter:
    """Test cases for ColoredFormatter."""

    def test_colors_level_name_without_mutating_record(self):
        formatter = ColoredFormatter(fmt="%(levelname)s %(message)s")
        record = logging.LogRecord(
            "git_prompt", logging.ERROR, __file__, 1, "failed", None, None
        )

        output = formatter.format(record)

        assert output == "\033[31mERROR\033[0m failed"
        assert record.levelname == "ERROR"


def test_console_handler_uses_stderr(log_dir):
    setup_logging(log_to_file=False, log_to_console=True)

    streams = [
        handler.stream
        for handler in logging.getLogger().handlers
        if type(handler) is logging.StreamHandler
    ]
    assert streams == [sys.stderr]
