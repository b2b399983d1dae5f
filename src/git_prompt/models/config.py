"""Configuration data model for git-prompt.

Configuration comes only from environment variables; there is no config file.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..utils.exceptions import ConfigurationError


logger = logging.getLogger(__name__)

ENV_GIT_EXECUTABLE = "GIT_PROMPT_GIT"
ENV_TIMEOUT = "GIT_PROMPT_TIMEOUT"
ENV_LOG_LEVEL = "GIT_PROMPT_LOG_LEVEL"
ENV_LOG_FILE = "GIT_PROMPT_LOG_FILE"
ENV_LOG_STDERR = "GIT_PROMPT_LOG_STDERR"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
FALSE_VALUES = ("0", "false", "no", "off")
TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class PromptConfig:
    """
    Runtime settings for a prompt invocation.

    Attributes:
        git_executable: Name or path of the git binary
        timeout: Timeout in seconds for each git query
        log_level: Logging level name
        log_to_file: Whether log records are written to the log directory
        log_to_console: Whether log records are also written to standard error
        issues: Problems found while reading the environment; each one fell
            back to the default value
    """

    git_executable: str = "git"
    timeout: float = 5.0
    log_level: str = "WARNING"
    log_to_file: bool = True
    log_to_console: bool = False
    issues: list[ConfigurationError] = field(default_factory=list, compare=False)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize configuration to dictionary.

        Returns:
            Dict[str, Any]: Serialized configuration data
        """
        return {
            "git_executable": self.git_executable,
            "timeout": self.timeout,
            "log_level": self.log_level,
            "log_to_file": self.log_to_file,
            "log_to_console": self.log_to_console,
        }

    @classmethod
    def from_environment(
        cls, environ: Mapping[str, str] | None = None
    ) -> "PromptConfig":
        """
        Build configuration from environment variables.

        Invalid values never abort the prompt: they are recorded in
        ``issues`` and replaced by the default.

        Args:
            environ: Environment mapping (defaults to ``os.environ``)

        Returns:
            PromptConfig: Configuration instance
        """
        if environ is None:
            environ = os.environ

        config = cls()

        git_executable = environ.get(ENV_GIT_EXECUTABLE, "").strip()
        if git_executable:
            config.git_executable = git_executable

        for variable, parser, attribute in (
            (ENV_TIMEOUT, _parse_timeout, "timeout"),
            (ENV_LOG_LEVEL, _parse_log_level, "log_level"),
            (ENV_LOG_FILE, _parse_flag, "log_to_file"),
            (ENV_LOG_STDERR, _parse_flag, "log_to_console"),
        ):
            raw = environ.get(variable)
            if raw is None or not raw.strip():
                continue
            try:
                setattr(config, attribute, parser(variable, raw.strip()))
            except ConfigurationError as e:
                config.issues.append(e)

        return config

    def log_issues(self) -> None:
        """Log configuration problems collected while loading."""
        for issue in self.issues:
            logger.warning(f"Ignoring invalid configuration: {issue.message}")


def _parse_timeout(variable: str, raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0.0
    if not timeout > 0 or timeout == float("inf"):
        raise ConfigurationError(
            f"{variable} must be a positive number of seconds, got {raw!r}",
            variable=variable,
            value=raw,
        )
    return timeout


def _parse_log_level(variable: str, raw: str) -> str:
    level = raw.upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"{variable} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}",
            variable=variable,
            value=raw,
        )
    return level


def _parse_flag(variable: str, raw: str) -> bool:
    value = raw.lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"{variable} must be a boolean flag, got {raw!r}",
        variable=variable,
        value=raw,
    )
