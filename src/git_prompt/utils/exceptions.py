"""Custom exceptions for the application."""

from typing import Any
from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for better classification."""

    GIT_OPERATION = "git_operation"
    FILE_SYSTEM = "file_system"
    CONFIGURATION = "configuration"
    PROMPT = "prompt"


class GitPromptError(Exception):
    """Base exception for git-prompt."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.PROMPT,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "details": self.details,
            "type": self.__class__.__name__,
        }


class GitError(GitPromptError):
    """Exception for Git-related errors."""

    def __init__(
        self,
        message: str,
        command: str | None = None,
        exit_code: int | None = None,
        stderr: str | None = None,
        **kwargs,
    ):
        super().__init__(message, category=ErrorCategory.GIT_OPERATION, **kwargs)
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        if command:
            self.details.update(
                {"command": command, "exit_code": exit_code, "stderr": stderr}
            )


class ConfigurationError(GitPromptError):
    """Exception for invalid environment configuration."""

    def __init__(
        self,
        message: str,
        variable: str | None = None,
        value: str | None = None,
        **kwargs,
    ):
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.WARNING,
            **kwargs,
        )
        self.variable = variable
        self.value = value
        if variable:
            self.details.update({"variable": variable, "value": value})


class PathError(GitPromptError):
    """Exception for path-related errors."""

    def __init__(self, message: str, path: str | None = None, **kwargs):
        super().__init__(message, category=ErrorCategory.FILE_SYSTEM, **kwargs)
        self.path = path
        if path:
            self.details.update({"path": path})
