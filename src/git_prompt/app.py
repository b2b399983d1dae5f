"""Main application class and entry point."""

import logging
import sys
from pathlib import Path

from .models.config import PromptConfig
from .models.repository import DirectoryContext
from .services.base import GitServiceInterface
from .services.git_service import GitService
from .services.prompt_formatter import PromptFormatter
from .services.repository_locator import RepositoryLocator
from .services.status_service import StatusService
from .utils.error_handler import handle_error
from .utils.exceptions import GitError
from .utils.logging_config import setup_logging


class PromptApp:
    """Builds the prompt line for the current directory."""

    def __init__(
        self,
        config: PromptConfig | None = None,
        git_service: GitServiceInterface | None = None,
    ):
        self.config = config
        self.git_service = git_service
        self.locator: RepositoryLocator | None = None
        self.status_service: StatusService | None = None
        self.formatter = PromptFormatter()
        self.logger = logging.getLogger(__name__)

    def initialize(self, configure_logging: bool = True) -> None:
        """Initialize configuration, logging and services."""
        if self.config is None:
            self.config = PromptConfig.from_environment()

        if configure_logging:
            setup_logging(
                level=self.config.log_level,
                log_to_file=self.config.log_to_file,
                log_to_console=self.config.log_to_console,
            )
        self.config.log_issues()
        self.logger.debug(f"Configuration: {self.config.to_dict()}")

        if self.git_service is None:
            self.git_service = GitService(
                timeout=self.config.timeout,
                git_executable=self.config.git_executable,
            )
        try:
            self.git_service.initialize()
        except GitError as e:
            handle_error(e)

        self.locator = RepositoryLocator(self.git_service)
        self.status_service = StatusService(self.git_service)

    def build_context(self, path: Path) -> DirectoryContext:
        """Create the directory context for ``path`` and attach its repository."""
        if not self.locator:
            raise RuntimeError("Application not initialized. Call initialize() first.")

        context = DirectoryContext(path=path)
        context.attach_repository(self.locator.locate(path))
        return context

    def render(self, path: Path) -> str:
        """
        Render the prompt line for a directory.

        Args:
            path: Absolute directory path

        Returns:
            str: Prompt line without the trailing newline
        """
        if not self.status_service:
            raise RuntimeError("Application not initialized. Call initialize() first.")

        context = self.build_context(path)
        if not context.in_repository:
            status = self.status_service.not_a_repository()
        else:
            status = self.status_service.summarize(context.repository)

        return self.formatter.format_line(context, status)

    def run(self) -> int:
        """Print the prompt line for the current working directory."""
        try:
            cwd = Path.cwd()
        except OSError as e:
            # Deleted or unreadable directory: print nothing
            self.logger.debug(f"Cannot determine current directory: {e}")
            return 0

        print(self.render(cwd))
        return 0


def main() -> int:
    """Main entry point for the application. Always returns 0."""
    app = PromptApp()

    try:
        app.initialize()
        return app.run()
    except Exception as e:
        handle_error(e)
        return 0


if __name__ == "__main__":
    sys.exit(main())
