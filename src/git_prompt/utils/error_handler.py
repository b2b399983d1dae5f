"""Centralized error handling system.

Nothing in the prompt pipeline may surface an error to the shell, so every
handled error is logged and then replaced by a caller-supplied default.
"""

import functools
import logging
import traceback
from collections.abc import Callable
from typing import Any

from .exceptions import (
    GitPromptError,
    ErrorSeverity,
    GitError,
    PathError,
)


class ErrorHandler:
    """Centralized error handler for the application."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def handle_error(self, error: Exception, log_error: bool = True) -> GitPromptError:
        """
        Handle an error by normalizing and logging it.

        Args:
            error: The exception to handle
            log_error: Whether to log the error

        Returns:
            The error converted to a GitPromptError
        """
        if not isinstance(error, GitPromptError):
            error = self._convert_to_app_error(error)

        if log_error:
            self._log_error(error)

        return error

    def _convert_to_app_error(self, error: Exception) -> GitPromptError:
        """Convert a generic exception to a GitPromptError."""
        error_message = str(error) or error.__class__.__name__

        if isinstance(error, (OSError, UnicodeError)):
            return PathError(error_message, severity=ErrorSeverity.WARNING)
        elif "git" in error_message.lower():
            return GitError(error_message)
        else:
            return GitPromptError(error_message, severity=ErrorSeverity.ERROR)

    def _log_error(self, error: GitPromptError):
        """Log the error with appropriate level and details."""
        error_dict = error.to_dict()

        # Choose log level based on severity
        if error.severity == ErrorSeverity.CRITICAL:
            log_func = self.logger.critical
        elif error.severity == ErrorSeverity.ERROR:
            log_func = self.logger.error
        elif error.severity == ErrorSeverity.WARNING:
            log_func = self.logger.warning
        else:
            log_func = self.logger.info

        log_func(
            f"Error in {error.category.value}: {error.message}",
            extra={"error_details": error_dict, "traceback": traceback.format_exc()},
        )


# Global error handler instance
_global_error_handler: ErrorHandler | None = None


def get_error_handler() -> ErrorHandler:
    """Get the global error handler instance."""
    global _global_error_handler
    if _global_error_handler is None:
        _global_error_handler = ErrorHandler()
    return _global_error_handler


def set_error_handler(handler: ErrorHandler | None):
    """Set the global error handler instance."""
    global _global_error_handler
    _global_error_handler = handler


def handle_error(error: Exception, log_error: bool = True) -> GitPromptError:
    """Convenience function to handle errors using the global handler."""
    return get_error_handler().handle_error(error, log_error=log_error)


def fallback_on_error(default: Any, log_error: bool = True) -> Callable:
    """
    Decorator that turns any exception raised by the wrapped function into
    ``default`` after handing it to the global error handler.

    Args:
        default: Value returned when the wrapped call fails
        log_error: Whether the failure is logged
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                handle_error(e, log_error=log_error)
                return default

        return wrapper

    return decorator
