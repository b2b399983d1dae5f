"""Logging configuration for the application.

Standard output belongs to the shell prompt, so handlers only ever write to
log files or standard error.
"""

import logging
import logging.handlers
import sys

from .exceptions import PathError
from .path_manager import PathManager


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def format(self, record):
        # File handlers share the record, so restore the plain level name
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
            )
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(
    level: str = "WARNING",
    log_to_file: bool = True,
    log_to_console: bool = False,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Set up logging configuration for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to log to files
        log_to_console: Whether to log to standard error
        max_file_size: Maximum size of log files before rotation
        backup_count: Number of backup log files to keep
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    # Keeps records away from logging.lastResort, which prints to stderr
    root_logger.addHandler(logging.NullHandler())

    git_logger = logging.getLogger("git_prompt.services.git_service")
    git_logger.handlers.clear()

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(
            ColoredFormatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        root_logger.addHandler(console_handler)

    if log_to_file:
        try:
            PathManager.ensure_log_dir()

            file_formatter = logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

            # delay=True: no file is touched until something is logged
            app_handler = logging.handlers.RotatingFileHandler(
                PathManager.get_log_file("git_prompt.log"),
                maxBytes=max_file_size,
                backupCount=backup_count,
                encoding="utf-8",
                errors="backslashreplace",
                delay=True,
            )
            app_handler.setLevel(numeric_level)
            app_handler.setFormatter(file_formatter)
            root_logger.addHandler(app_handler)

            git_handler = logging.handlers.RotatingFileHandler(
                PathManager.get_log_file("git_queries.log"),
                maxBytes=max_file_size,
                backupCount=backup_count,
                encoding="utf-8",
                errors="backslashreplace",
                delay=True,
            )
            git_handler.setLevel(numeric_level)
            git_handler.setFormatter(file_formatter)
            git_logger.addHandler(git_handler)
            git_logger.propagate = True  # Also send to root logger

        except PathError as e:
            logging.getLogger(__name__).debug(f"File logging disabled: {e}")

    logging.getLogger(__name__).debug(
        f"Logging configured - Level: {level}, File: {log_to_file}, "
        f"Console: {log_to_console}"
    )

