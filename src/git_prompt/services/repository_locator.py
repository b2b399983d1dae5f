"""Repository discovery for the prompt."""

import logging
from pathlib import Path

from ..models.repository import RepositoryHandle
from ..utils.error_handler import handle_error
from ..utils.exceptions import ErrorSeverity, GitError
from .base import GitServiceInterface

logger = logging.getLogger(__name__)


class RepositoryLocator:
    """Finds the repository, if any, that encloses a directory."""

    def __init__(self, git_service: GitServiceInterface):
        self.git_service = git_service

    def locate(self, path: Path) -> RepositoryHandle | None:
        """
        Search ``path`` and its ancestors for a Git repository.

        Not finding one is an ordinary outcome, so no failure escapes.

        Args:
            path: Absolute directory to start from

        Returns:
            The discovered repository, or None
        """
        try:
            repository = self.git_service.discover_repository(path)
        except GitError as e:
            if e.severity == ErrorSeverity.INFO:
                logger.debug(f"Not a repository: {path}")
            else:
                handle_error(e)
            return None
        except Exception as e:
            handle_error(e)
            return None

        logger.debug(
            f"Found repository at {repository.workdir or repository.git_dir} for {path}"
        )
        return repository
